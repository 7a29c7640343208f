"""Module that contains data models."""
from .archive_wrapper import ArchiveWrapper
from .entry import Attribute, Entry, TimeInfo
from .store import Group, Store
from .totp import TotpSettings, build_totp_url
from .types import JSONType

__all__ = [
    "ArchiveWrapper",
    "Attribute",
    "Entry",
    "TimeInfo",
    "Group",
    "Store",
    "TotpSettings",
    "build_totp_url",
    "JSONType",
]
