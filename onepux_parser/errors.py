"""Terminal conversion errors.

Any of these aborts the whole conversion: no partial store is handed back.
Structural irregularities inside the document are never reported this way,
they degrade to empty values in the mappers.
"""


class ConversionError(Exception):
    """Base exception for 1PUX conversion errors."""

    pass


class SourceNotFoundError(ConversionError):
    """Raised when the export file doesn't exist."""

    pass


class NotAnArchiveError(ConversionError):
    """Raised when the export file is not a readable archive."""

    pass


class MissingArchiveMemberError(ConversionError):
    """Raised when the archive lacks the export document."""

    pass


class MalformedDocumentError(ConversionError):
    """Raised when the export document is not valid UTF-8 JSON."""

    pass
