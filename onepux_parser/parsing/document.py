"""Generic value tree over the JSON export document.

Every accessor degrades to a default instead of failing: absence of a key or
a value of an unexpected type is never an error at this layer.
"""
from __future__ import annotations

import json
from typing import Iterator

from onepux_parser.errors import MalformedDocumentError
from onepux_parser.models.types import JSONType


class DocumentNode:
    """A node of the parsed document with defaulting accessors."""

    __slots__ = ("_value",)

    def __init__(self, value: JSONType = None) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"DocumentNode({self._value!r})"

    @property
    def raw(self) -> JSONType:
        return self._value

    def is_map(self) -> bool:
        return isinstance(self._value, dict)

    def is_list(self) -> bool:
        return isinstance(self._value, list)

    def contains(self, key: str) -> bool:
        return isinstance(self._value, dict) and key in self._value

    def get(self, key: str) -> DocumentNode:
        """Child node for ``key``; an empty node if absent or not a map."""
        if isinstance(self._value, dict):
            return DocumentNode(self._value.get(key))
        return DocumentNode()

    def keys(self) -> list[str]:
        return list(self._value) if isinstance(self._value, dict) else []

    def first_key(self) -> str:
        """Smallest key of a map, or an empty string."""
        keys = self.keys()
        return min(keys) if keys else ""

    def as_list(self) -> list[DocumentNode]:
        if isinstance(self._value, list):
            return [DocumentNode(v) for v in self._value]
        return []

    def __iter__(self) -> Iterator[DocumentNode]:
        return iter(self.as_list())

    def as_str(self, default: str = "") -> str:
        """Scalar as text: integral floats lose their fraction, booleans are lowercase."""
        value = self._value
        if value is None or isinstance(value, (dict, list)):
            return default
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    def as_int(self, default: int = 0) -> int:
        value = self._value
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if value.is_integer() else default
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return default
        return default

    def as_string_list(self) -> list[str]:
        """Items of a list rendered as text; non-scalar items are skipped.

        A lone scalar is treated as a one-item list.
        """
        if not (self.is_map() or self.is_list() or self._value is None):
            return [self.as_str()]
        return [
            item.as_str()
            for item in self.as_list()
            if not (item.is_map() or item.is_list() or item.raw is None)
        ]


def parse_document(data: bytes) -> DocumentNode:
    """Parse the raw export bytes into a document tree.

    Raises
    ------
    MalformedDocumentError
        If the bytes aren't UTF-8 encoded JSON.

    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as err:
        raise MalformedDocumentError(
            f"Invalid 1PUX file format: export data is not UTF-8 ({err})."
        ) from err

    try:
        return DocumentNode(json.loads(text))
    except json.JSONDecodeError as err:
        raise MalformedDocumentError(
            f"Invalid 1PUX file format: export data is not valid JSON ({err})."
        ) from err
