"""Read-only access to the members of an export archive."""
from __future__ import annotations

import zlib
from pathlib import Path
from types import TracebackType
from zipfile import BadZipFile, ZipFile, is_zipfile

import rarfile
from rarfile import RarFile, is_rarfile

from onepux_parser.errors import (
    MissingArchiveMemberError,
    NotAnArchiveError,
    SourceNotFoundError,
)

DEFAULT_CHUNK_SIZE = 8192


class ArchiveWrapper:
    """Wrap a ZIP or RAR archive behind a single named-member interface.

    Parameters
    ----------
    archive : zipfile.ZipFile or rarfile.RarFile
        The opened archive.
    filename : str
        The archive's path, used in messages.
    """

    def __init__(self, archive: ZipFile | RarFile, filename: str) -> None:
        self._archive: ZipFile | RarFile | None = archive
        self._filename = filename

    @classmethod
    def open(cls, path: str | Path) -> ArchiveWrapper:
        """Open the archive at ``path``.

        Raises
        ------
        SourceNotFoundError
            If the path doesn't exist or isn't a regular file.
        NotAnArchiveError
            If the file isn't a ZIP or RAR archive.

        """
        filepath = Path(path)
        if not filepath.is_file():
            raise SourceNotFoundError(f"File does not exist: {filepath}")

        archive: ZipFile | RarFile
        try:
            if is_zipfile(filepath):
                archive = ZipFile(filepath)
            elif is_rarfile(filepath):
                archive = RarFile(filepath, errors="strict")
            else:
                raise NotAnArchiveError(
                    "Invalid 1PUX file format: Not a valid ZIP file."
                )
        except (BadZipFile, rarfile.Error) as err:
            raise NotAnArchiveError(
                f"Invalid 1PUX file format: Not a valid archive ({err})."
            ) from err
        except OSError as err:
            raise SourceNotFoundError(f"Failed to open {filepath}: {err}") from err

        return cls(archive, filename=str(filepath))

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def closed(self) -> bool:
        return self._archive is None

    def namelist(self) -> list[str]:
        return self._require_open().namelist()

    def locate(self, name: str) -> str:
        """Return the stored member name matching ``name``, ignoring case.

        Raises
        ------
        MissingArchiveMemberError
            If no member matches.

        """
        names = self.namelist()
        if name in names:
            return name
        lowered = name.lower()
        for candidate in names:
            if candidate.lower() == lowered:
                return candidate
        raise MissingArchiveMemberError(f"Invalid 1PUX file format: Missing {name}")

    def read_member(self, name: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
        """Read a whole member into memory, ``chunk_size`` bytes at a time.

        The declared member size is not trusted; the buffer grows until the
        member stream is exhausted.
        """
        archive = self._require_open()
        member = self.locate(name)
        data = bytearray()

        try:
            with archive.open(member) as stream:
                while chunk := stream.read(chunk_size):
                    data.extend(chunk)
        except (BadZipFile, rarfile.Error, zlib.error, EOFError) as err:
            raise NotAnArchiveError(
                f"Invalid 1PUX file format: Failed reading {member} ({err})."
            ) from err
        except RuntimeError as err:  # Encrypted member without a password.
            raise NotAnArchiveError(f"Cannot read {member}: {err}") from err

        return bytes(data)

    def close(self) -> None:
        if self._archive is not None:
            self._archive.close()
            self._archive = None

    def __enter__(self) -> ArchiveWrapper:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _require_open(self) -> ZipFile | RarFile:
        if self._archive is None:
            raise RuntimeError(f"Archive {self._filename} is closed.")
        return self._archive
