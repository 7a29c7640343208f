"""Data models for the group hierarchy and the credential store."""
from __future__ import annotations

from typing import Any, Iterator
from uuid import UUID, uuid4

from .entry import Entry


class Group:
    """A named group owning entries and child groups.

    Ownership is exclusive: attaching an entry or group that already has a
    parent raises ``ValueError``.
    """

    def __init__(self, name: str = "") -> None:
        self.uuid: UUID = uuid4()
        self.name = name
        self.entries: list[Entry] = []
        self.children: list[Group] = []
        self._parent: Group | None = None

    def __repr__(self) -> str:
        return f"Group(uuid={self.uuid!s}, name={self.name!r}, entries={len(self.entries)})"

    @property
    def parent(self) -> Group | None:
        return self._parent

    def add_entry(self, entry: Entry) -> None:
        if entry.group is not None:
            raise ValueError(f"{entry!r} already belongs to {entry.group!r}")
        entry._group = self
        self.entries.append(entry)

    def add_child(self, group: Group) -> None:
        if group is self or group.parent is not None:
            raise ValueError(f"{group!r} cannot be attached to {self!r}")
        group._parent = self
        self.children.append(group)

    def walk_entries(self) -> Iterator[Entry]:
        """Yield the entries of this group and all its descendants."""
        yield from self.entries
        for child in self.children:
            yield from child.walk_entries()

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": str(self.uuid),
            "name": self.name,
            "entries": [e.to_dict() for e in self.entries],
            "groups": [g.to_dict() for g in self.children],
        }


class Store:
    """Root container of a converted export, always created fresh."""

    def __init__(self, root_name: str = "Root") -> None:
        self.root_group = Group(root_name)

    @property
    def groups(self) -> list[Group]:
        return self.root_group.children

    def add_group(self, group: Group) -> None:
        self.root_group.add_child(group)

    def count_entries(self) -> int:
        return sum(1 for _ in self.root_group.walk_entries())

    def to_dict(self) -> dict[str, Any]:
        return {"root": self.root_group.to_dict()}
