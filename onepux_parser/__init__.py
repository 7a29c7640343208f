"""Converter from 1Password Unencrypted Export (1PUX) archives to credential stores."""

__version__ = "0.1.0"

# ruff: noqa: E402
from .errors import (
    ConversionError,
    MalformedDocumentError,
    MissingArchiveMemberError,
    NotAnArchiveError,
    SourceNotFoundError,
)
from .models import Attribute, Entry, Group, Store, TotpSettings
from .services.opux_reader import OnePuxReader

__all__ = [
    "ConversionError",
    "MalformedDocumentError",
    "MissingArchiveMemberError",
    "NotAnArchiveError",
    "SourceNotFoundError",
    "Attribute",
    "Entry",
    "Group",
    "Store",
    "TotpSettings",
    "OnePuxReader",
]
