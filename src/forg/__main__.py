"""A CLI script to organize the contents of the current directory."""

__author__ = "Charles Mesa Cayobit"

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .cli import build_parser, parse_arguments
from .file_organizer import PROGRAM_NAME, FileOrganizer
from .log_actions import LogActions
from .logs import configure_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the organizer on the current working directory.

    Returns:
        0 on success, 1 if any directory or file failed.
    """

    configure_logging()
    config = parse_arguments(argv)

    if config.show_help:
        build_parser().print_help()
        return 0

    if config.show_version:
        print(f"{PROGRAM_NAME} v{__version__}")
        return 0

    if config.verbose:
        configure_logging(verbose=True)

    organizer = FileOrganizer(config, program_names={Path(sys.argv[0]).name})
    try:
        root_dir = Path.cwd()
        stats = organizer.organize(root_dir)

    except OSError as e:
        logger.critical(f"{LogActions.FAILED}: Cannot organize directory: {e}")
        return 1

    return stats.exit_code


if __name__ == "__main__":
    sys.exit(main())
