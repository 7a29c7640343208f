"""Dependency injection containers for the onepux-parser application."""

from __future__ import annotations

from dependency_injector import containers, providers

from onepux_parser.config import Settings
from onepux_parser.helpers import init_logger
from onepux_parser.parsing.item_mapper import ItemMapper
from onepux_parser.parsing.vault_mapper import VaultMapper
from onepux_parser.services.opux_reader import OnePuxReader


class AppContainer(containers.DeclarativeContainer):
    """Main application container."""

    config = providers.Singleton(Settings)
    verbosity = providers.Object("INFO")
    logger = providers.Singleton(init_logger, "onepux_parser", verbosity)

    item_mapper = providers.Factory(ItemMapper, logger=logger, settings=config)
    vault_mapper = providers.Factory(VaultMapper, item_mapper=item_mapper, logger=logger)

    reader = providers.Factory(
        OnePuxReader,
        vault_mapper=vault_mapper,
        logger=logger,
        settings=config,
    )
