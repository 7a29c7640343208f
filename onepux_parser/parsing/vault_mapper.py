"""Mapping of export vaults to groups."""
from __future__ import annotations

from verboselogs import VerboseLogger

from onepux_parser.models import Group

from .document import DocumentNode
from .item_mapper import ItemMapper


class VaultMapper:
    """Build one group per vault, attaching an entry per item."""

    def __init__(self, item_mapper: ItemMapper, logger: VerboseLogger):
        self.item_mapper = item_mapper
        self.logger = logger

    def map_vault(self, vault: DocumentNode) -> Group | None:
        """Return the vault's group, or None if ``attrs`` or ``items`` is missing."""
        attrs = vault.get("attrs")
        items = vault.get("items")
        if not attrs.is_map() or not items.is_list():
            return None

        group = Group(attrs.get("name").as_str())
        for item in items:
            group.add_entry(self.item_mapper.map_item(item))

        # TODO: map the vault avatar to a group icon.

        self.logger.debug(f"Vault '{group.name}': {len(group.entries)} entries.")
        return group
