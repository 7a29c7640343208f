"""Helper functions."""
import logging
from argparse import ArgumentParser, Namespace
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from json import JSONEncoder, dumps
from pathlib import Path
from typing import Any, Sequence
from uuid import UUID

import coloredlogs
import verboselogs
from verboselogs import VerboseLogger

LOG_LEVELS: dict[str, int] = {
    "INFO": logging.INFO,
    "VERBOSE": verboselogs.VERBOSE,
    "DEBUG": logging.DEBUG,
    "SPAM": verboselogs.SPAM,
}


class EnhancedJSONEncoder(JSONEncoder):
    """Enhanced JSON encoder for specific classes."""

    def default(self, o: Any) -> Any:  # type: ignore[override]
        """Handle custom types JSON serialization."""
        if hasattr(o, "to_dict"):
            return o.to_dict()
        if is_dataclass(o) and not isinstance(o, type):
            return asdict(o)
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, UUID):
            return str(o)
        if isinstance(o, set):
            return list(o)
        return super().default(o)


def dump_to_file(
    logger: VerboseLogger, filename: str, content: str | Any
) -> bool:
    """Save data to local file.

    Parameters
    ----------
    logger : verboselogs.VerboseLogger
        The program's logger.
    filename : str
        The file to write to.
    content : str or Any
        The data to write.

    Returns
    -------
    bool
        True if the file was written.

    """
    filepath = Path(filename)

    try:
        if not filepath.parent.exists():
            filepath.parent.mkdir(parents=True)

        if not isinstance(content, str):
            filepath.write_text(
                dumps(
                    content,
                    ensure_ascii=False,
                    cls=EnhancedJSONEncoder,
                    indent=4,
                ),
                encoding="utf-8",
            )
        else:
            filepath.write_text(content, encoding="utf-8")

    except (FileNotFoundError, OSError, PermissionError, ValueError) as err:
        logger.error(f"Failed to write file to '{str(filepath)}': {err}")
        return False

    logger.info(f"Successfully wrote '{str(filepath)}'.")
    return True


def parse_options(
    description: str, argv: Sequence[str] | None = None
) -> Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    description : str
        The program's description.
    argv : sequence of str, optional
        Arguments to parse instead of ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments as an object.

    """
    parser = ArgumentParser(description=description)

    parser.add_argument(
        "filename",
        type=str,
        help="the 1Password export to convert (.1pux)",
    )
    parser.add_argument(
        "--dump-json",
        metavar="FILENAME.json",
        type=str,
        default=None,
        help="write the converted store to a JSON file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase logs output verbosity (default: info, -v: verbose, "
        "-vv: debug, -vvv: spam)",
    )

    return parser.parse_args(argv)


def verbosity_to_level(verbosity: int) -> str:
    """Map a ``-v`` count to one of the supported log level names."""
    names = list(LOG_LEVELS)
    return names[max(0, min(verbosity, len(names) - 1))]


def init_logger(
    name: str,
    verbosity_level: str = "INFO",
    formatting: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> VerboseLogger:
    """Initialize the program's logger.

    Parameters
    ----------
    name : str
        The logger's name.
    verbosity_level : str
        Verbosity log level name (INFO, VERBOSE, DEBUG or SPAM).
    formatting : str, optional
        The log format.

    Returns
    -------
    verboselogs.VerboseLogger
        The logger.

    """
    level = LOG_LEVELS.get(verbosity_level.upper(), logging.INFO)

    logger = VerboseLogger(name)

    coloredlogs.install(
        logger=logger,
        level=level,
        fmt=formatting,
        isatty=True,
    )

    return logger
