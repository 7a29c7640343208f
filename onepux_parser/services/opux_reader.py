"""1PUX export conversion component."""
from __future__ import annotations

from pathlib import Path

from verboselogs import VerboseLogger

from onepux_parser.config import Settings
from onepux_parser.errors import ConversionError
from onepux_parser.models import ArchiveWrapper, Store
from onepux_parser.parsing.document import parse_document
from onepux_parser.parsing.navigator import count_accounts, extract_vaults
from onepux_parser.parsing.vault_mapper import VaultMapper


class OnePuxReader:
    """Orchestrates the conversion of a 1PUX archive into a fresh ``Store``.

    ``convert`` reports terminal failures through ``has_error`` and
    ``error_string``; ``read_export`` raises them instead.
    """

    def __init__(
        self,
        vault_mapper: VaultMapper,
        logger: VerboseLogger,
        settings: Settings | None = None,
    ):
        self.vault_mapper = vault_mapper
        self.logger = logger
        self.settings = settings or Settings()
        self._error = ""

    def has_error(self) -> bool:
        return bool(self._error)

    def error_string(self) -> str:
        return self._error

    def convert(self, path: str | Path) -> Store | None:
        """Convert the export at ``path``, returning None on failure."""
        self._error = ""
        try:
            return self.read_export(path)
        except ConversionError as err:
            self._error = str(err)
            self.logger.error(f"Failed converting {path}: {err}")
            return None

    def read_export(self, path: str | Path) -> Store:
        """Convert the export at ``path``.

        Raises
        ------
        onepux_parser.errors.ConversionError
            If the file is missing, isn't an archive, lacks the export
            document or the document isn't valid JSON.

        """
        self.logger.info(f"Processing: {path} ...")

        with ArchiveWrapper.open(path) as archive:
            data = archive.read_member(
                self.settings.export_member, chunk_size=self.settings.read_chunk_size
            )
            self.logger.debug(f"Read {len(data)} bytes of {self.settings.export_member}.")
            document = parse_document(data)

        accounts = count_accounts(document)
        if accounts > 1:
            self.logger.verbose(f"Ignoring {accounts - 1} additional account(s).")

        store = Store()
        for index, vault in enumerate(extract_vaults(document)):
            group = self.vault_mapper.map_vault(vault)
            if group is None:
                self.logger.verbose(f"Skipping vault #{index}: missing attrs or items.")
                continue
            store.add_group(group)

        self.logger.info(
            f"Converted '{path}': {len(store.groups)} groups, "
            f"{store.count_entries()} entries."
        )
        return store
