"""Data models for credential entries and their attributes."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any
from uuid import UUID, uuid4

from .totp import TotpSettings

if TYPE_CHECKING:
    from .store import Group

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass
class Attribute:
    """A custom entry attribute; protected values are meant for concealed display."""

    value: str
    protected: bool = False


@dataclass
class TimeInfo:
    """Creation, modification and access instants of an entry, in UTC."""

    creation_time: datetime = EPOCH
    last_modification_time: datetime = EPOCH
    last_access_time: datetime = EPOCH


class Entry:
    """A credential entry owned by exactly one group once attached.

    Attributes
    ----------
    uuid : uuid.UUID
        Freshly generated identifier, never taken from the source document.
    title, url, username, password, notes : str
        Standard entry fields.
    tags : list of str
        Ordered tags, see ``tags_string`` for the comma-joined form.
    totp : TotpSettings, optional
        The primary one-time-password configuration.
    attributes : dict of str to Attribute
        Custom attributes keyed by unique name.
    time_info : TimeInfo
        Entry timestamps.
    history : list of Entry
        Previous versions of the entry.
    """

    def __init__(self) -> None:
        self.uuid: UUID = uuid4()
        self.title = ""
        self.url = ""
        self.username = ""
        self.password = ""
        self.notes = ""
        self.tags: list[str] = []
        self.totp: TotpSettings | None = None
        self.attributes: dict[str, Attribute] = {}
        self.time_info = TimeInfo()
        self.history: list[Entry] = []
        self._group: Group | None = None

    def __repr__(self) -> str:
        return f"Entry(uuid={self.uuid!s}, title={self.title!r})"

    @property
    def group(self) -> Group | None:
        return self._group

    @property
    def tags_string(self) -> str:
        return ",".join(self.tags)

    def set_tags(self, tags: str) -> None:
        """Replace the tags with a comma separated list."""
        self.tags = [t.strip() for t in tags.split(",") if t.strip()]

    def add_tag(self, tag: str) -> None:
        tag = tag.strip()
        if tag and tag not in self.tags:
            self.tags.append(tag)

    def has_totp(self) -> bool:
        return self.totp is not None

    def set_attribute(self, name: str, value: str, protected: bool = False) -> None:
        self.attributes[name] = Attribute(value=value, protected=protected)

    def attribute_value(self, name: str) -> str:
        attribute = self.attributes.get(name)
        return attribute.value if attribute else ""

    def remove_history_items(self, items: list[Entry] | None = None) -> None:
        """Drop the given history versions, or all of them."""
        if items is None:
            self.history.clear()
            return
        self.history = [h for h in self.history if h not in items]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "uuid": str(self.uuid),
            "title": self.title,
            "url": self.url,
            "username": self.username,
            "password": self.password,
            "notes": self.notes,
            "tags": self.tags_string,
            "totp": self.totp.url if self.totp else None,
            "attributes": {
                name: {"value": a.value, "protected": a.protected}
                for name, a in self.attributes.items()
            },
            "creation_time": self.time_info.creation_time.isoformat(),
            "last_modification_time": self.time_info.last_modification_time.isoformat(),
            "last_access_time": self.time_info.last_access_time.isoformat(),
        }
