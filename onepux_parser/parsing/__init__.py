"""
This package turns the JSON document of a 1PUX export into groups and entries.
Each layer tolerates missing keys; only the document parser can fail.
"""
from .document import DocumentNode, parse_document
from .item_mapper import ItemMapper
from .navigator import extract_vaults
from .vault_mapper import VaultMapper

__all__ = [
    "DocumentNode",
    "parse_document",
    "ItemMapper",
    "extract_vaults",
    "VaultMapper",
]
