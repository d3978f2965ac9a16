"""Organize the files in the current directory into categorized subfolders."""

import logging
import sys
from argparse import (
    ArgumentError,
    ArgumentParser,
    Namespace,
    RawDescriptionHelpFormatter,
)
from collections.abc import Sequence
from typing import Final, NoReturn

from .categories import CATEGORIES, OTHERS
from .file_organizer import PROGRAM_NAME
from .log_actions import LogActions
from .organizer_config import DEFAULT_DEPTH, OrganizerConfig

__all__ = ("build_parser", "format_categories", "parse_arguments")


_EXAMPLES: Final = f"""\
examples:
  {PROGRAM_NAME}                    organize top-level files only
  {PROGRAM_NAME} -r                 organize all files recursively
  {PROGRAM_NAME} -r --depth 2       organize files up to 2 levels deep
  {PROGRAM_NAME} -p backup_         organize with a 'backup_' prefix
  {PROGRAM_NAME} -p sorted_ -v      combine options
"""

_SHOWN_EXTENSIONS: Final = 5

logger = logging.getLogger(__name__)


class _LenientArgumentParser(ArgumentParser):
    """Raises `ArgumentError` instead of exiting on malformed arguments."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(None, message)


def format_categories() -> str:
    """List each category with a few of its extensions."""

    lines = ["categories:"]
    for category, extensions in CATEGORIES:
        shown = ", ".join(extensions[:_SHOWN_EXTENSIONS])
        if (hidden := len(extensions) - _SHOWN_EXTENSIONS) > 0:
            shown += f" + {hidden} more"
        lines.append(f"  {category}: {shown}")
    lines.append(f"  {OTHERS}: Files with unrecognized extensions")
    return "\n".join(lines)


def build_parser() -> ArgumentParser:
    parser = _LenientArgumentParser(
        prog=PROGRAM_NAME,
        description=__doc__,
        epilog=f"{_EXAMPLES}\n{format_categories()}",
        formatter_class=RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="show this help message"
    )
    parser.add_argument(
        "--version", action="store_true", help="show version information"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show detailed progress information",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="preview what would be done without making changes",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="enable recursive directory traversal",
    )
    # Optional values so a missing one is reported as a warning
    parser.add_argument(
        "-d",
        "--depth",
        nargs="?",
        const="",
        metavar="N",
        help=f"maximum depth for recursion (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        nargs="?",
        const=None,
        default="",
        metavar="TEXT",
        help="add a prefix to category folder names",
    )
    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> OrganizerConfig:
    """Turn command-line tokens into an `OrganizerConfig`.

    Invalid values and unknown options are logged as warnings and never stop
    the program. Only the offending token is ignored; every other flag is
    still applied.

    Args:
        argv: The arguments without the program name. Defaults to
            `sys.argv[1:]`.

    Returns:
        The parsed configuration.
    """

    tokens = list(sys.argv[1:] if argv is None else argv)
    args, unknown = _parse_known_args(build_parser(), tokens)

    for arg in unknown:
        _warn_unknown(arg)

    prefix = args.prefix
    if prefix is None:
        msg = f"{LogActions.CONFIG}: --prefix requires a value, using no "
        msg += "prefix."
        logger.warning(msg)
        prefix = ""

    return OrganizerConfig(
        prefix=prefix,
        verbose=args.verbose,
        dry_run=args.dry_run,
        recursive=args.recursive,
        max_depth=_parse_depth(args.depth),
        show_help=args.help,
        show_version=args.version,
    )


def _warn_unknown(token: str, reason: str = "") -> None:
    msg = f"{LogActions.CONFIG}: Unknown option: {token}"
    if reason:
        msg += f" ({reason})"
    msg += f". Use '{PROGRAM_NAME} --help' for usage information."
    logger.warning(msg)


def _is_short_flag_group(token: str) -> bool:
    return (
        len(token) > 2
        and token.startswith("-")
        and not token.startswith("--")
        and not token[1].isdigit()
        and "=" not in token
    )


def _parse_known_args(
    parser: ArgumentParser, tokens: list[str]
) -> tuple[Namespace, list[str]]:
    """Parse `tokens`, setting aside any token `parser` rejects outright.

    A group of short flags that is rejected or left unrecognized, such as
    `-nx`, is split into `-n` and `-x` so its valid letters still apply. Any
    other rejected token, such as `--verbose=yes`, is logged and dropped.

    Returns:
        The parsed namespace and the tokens `parser` did not recognize.
    """

    while True:
        try:
            args, unknown = parser.parse_known_args(tokens)

        except ArgumentError as e:
            index = _find_rejected_token(parser, tokens)
            token = tokens.pop(index)

            if _is_short_flag_group(token):
                tokens[index:index] = _split_short_flags(token)
            else:
                _warn_unknown(token, str(e))
            continue

        if not (groups := [t for t in unknown if _is_short_flag_group(t)]):
            return args, unknown

        for group in groups:
            index = tokens.index(group)
            tokens[index : index + 1] = _split_short_flags(group)


def _split_short_flags(token: str) -> list[str]:
    return [f"-{c}" for c in token[1:]]


def _find_rejected_token(parser: ArgumentParser, tokens: list[str]) -> int:
    """Return the index of the first token that makes `parser` fail."""

    for end in range(1, len(tokens) + 1):
        try:
            parser.parse_known_args(tokens[:end])

        except ArgumentError:
            return end - 1

    return len(tokens) - 1


def _parse_depth(raw: str | None) -> int:
    """Validate the `--depth` value, falling back to `DEFAULT_DEPTH`."""

    if raw is None:
        return DEFAULT_DEPTH

    if not raw:
        msg = f"{LogActions.CONFIG}: --depth requires a value, using default "
        msg += f"({DEFAULT_DEPTH})."
        logger.warning(msg)
        return DEFAULT_DEPTH

    try:
        depth = int(raw)

    except ValueError:
        msg = f"{LogActions.CONFIG}: Invalid depth value '{raw}', using "
        msg += f"default ({DEFAULT_DEPTH})."
        logger.warning(msg)
        return DEFAULT_DEPTH

    if depth < 1:
        msg = f"{LogActions.CONFIG}: Depth must be >= 1, got {depth}, using "
        msg += f"default ({DEFAULT_DEPTH})."
        logger.warning(msg)
        return DEFAULT_DEPTH

    return depth
