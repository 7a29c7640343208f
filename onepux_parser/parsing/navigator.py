"""Locate the vault nodes inside an export document."""
from __future__ import annotations

from .document import DocumentNode


def first_account(document: DocumentNode) -> DocumentNode:
    """The first entry of the top-level ``accounts`` list, or an empty node."""
    accounts = document.get("accounts").as_list()
    return accounts[0] if accounts else DocumentNode()


def count_accounts(document: DocumentNode) -> int:
    return len(document.get("accounts").as_list())


def extract_vaults(document: DocumentNode) -> list[DocumentNode]:
    """Vault nodes of the first account, in document order.

    Additional accounts are ignored. A document without the expected keys
    yields no vaults rather than an error.
    """
    return first_account(document).get("vaults").as_list()
