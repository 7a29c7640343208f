"""Shared pytest fixtures for all tests."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable
from zipfile import ZipFile

import pytest
from verboselogs import VerboseLogger

from onepux_parser.config import Settings
from onepux_parser.helpers import init_logger
from onepux_parser.parsing.item_mapper import ItemMapper
from onepux_parser.parsing.vault_mapper import VaultMapper
from onepux_parser.services.opux_reader import OnePuxReader


@pytest.fixture
def logger() -> VerboseLogger:
    return init_logger("test", "INFO")


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def item_mapper(logger: VerboseLogger, settings: Settings) -> ItemMapper:
    return ItemMapper(logger=logger, settings=settings)


@pytest.fixture
def vault_mapper(item_mapper: ItemMapper, logger: VerboseLogger) -> VaultMapper:
    return VaultMapper(item_mapper=item_mapper, logger=logger)


@pytest.fixture
def reader(vault_mapper: VaultMapper, logger: VerboseLogger, settings: Settings) -> OnePuxReader:
    return OnePuxReader(vault_mapper=vault_mapper, logger=logger, settings=settings)


@pytest.fixture
def dropbox_item() -> dict[str, Any]:
    """A login item modelled on the 1PUX documentation sample."""
    return {
        "uuid": "fkruyzrldvizuqlnavfj3gltfe",
        "favIndex": 1,
        "createdAt": 1614298956,
        "updatedAt": 1635346445,
        "trashed": False,
        "categoryUuid": "001",
        "details": {
            "loginFields": [
                {
                    "value": "wendy@appleseed.com",
                    "name": "username",
                    "fieldType": "T",
                    "designation": "username",
                },
                {
                    "value": "most-secure-password-ever!",
                    "name": "password",
                    "fieldType": "P",
                    "designation": "password",
                },
            ],
            "notesPlain": "This is a note. *bold*! _italic_!",
            "sections": [
                {
                    "title": "Security",
                    "name": "Section_oazxddhvftfknycbbmh5ntwfa4",
                    "fields": [
                        {
                            "title": "PIN",
                            "id": "CCEF647B399604E8F6Q6C8C3W31AFD407",
                            "value": {"concealed": "12345"},
                        }
                    ],
                }
            ],
            "passwordHistory": [{"value": "12345password", "time": 1458322355}],
        },
        "overview": {
            "subtitle": "",
            "urls": [{"label": "", "url": "https://www.dropbox.com/"}],
            "title": "Dropbox",
            "url": "https://www.dropbox.com/",
        },
    }


@pytest.fixture
def make_document() -> Callable[[list[dict[str, Any]]], dict[str, Any]]:
    """Wrap vault nodes into a single-account export document."""

    def _make(vaults: list[dict[str, Any]]) -> dict[str, Any]:
        return {
            "accounts": [
                {
                    "attrs": {"accountName": "Wendy Appleseed", "name": "Wendy Appleseed"},
                    "vaults": vaults,
                }
            ]
        }

    return _make


@pytest.fixture
def write_archive(tmp_path: Path) -> Callable[..., Path]:
    """Write a ZIP archive holding the given members, or ``export.data`` as JSON."""

    def _write(
        document: Any = None,
        members: dict[str, bytes] | None = None,
        name: str = "export.1pux",
    ) -> Path:
        path = tmp_path / name
        if members is None:
            members = {"export.data": json.dumps(document).encode("utf-8")}
        with ZipFile(path, "w") as archive:
            for member, data in members.items():
                archive.writestr(member, data)
        return path

    return _write
