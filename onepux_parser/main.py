"""1Password export (1PUX) converter."""
from __future__ import annotations

import sys
from argparse import Namespace
from typing import Sequence

from dependency_injector.wiring import Provide, inject
from verboselogs import VerboseLogger

from onepux_parser.containers import AppContainer
from onepux_parser.helpers import dump_to_file, parse_options, verbosity_to_level
from onepux_parser.services.opux_reader import OnePuxReader


@inject
def run(
    args: Namespace,
    reader: OnePuxReader = Provide[AppContainer.reader],
    logger: VerboseLogger = Provide[AppContainer.logger],
) -> int:
    """Convert the archive named in ``args`` and return an exit status."""
    store = reader.convert(args.filename)
    if store is None:
        return 1

    for group in store.groups:
        logger.verbose(f"{group.name or '<unnamed>'}: {len(group.entries)} entries")

    if args.dump_json and not dump_to_file(logger, args.dump_json, store):
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Program's entrypoint."""
    args = parse_options("Convert a 1Password export (1PUX) archive.", argv)

    app_container = AppContainer()
    app_container.verbosity.override(verbosity_to_level(args.verbose))
    app_container.wire(modules=[__name__])
    try:
        return run(args)
    finally:
        app_container.unwire()


if __name__ == "__main__":
    sys.exit(main())
