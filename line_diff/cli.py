"""Command-line interface for line-diff.

Compares two text files line by line and prints the rendered diff. The exit
status follows diff(1): 0 when the inputs are identical, 1 when they differ,
2 on trouble.

Every option can be defaulted from an environment variable named
``LINE_DIFF_<OPTION>``, e.g. ``LINE_DIFF_VIEW_MODE=side_by_side``. Command-line
arguments take precedence.
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from . import __version__
from .utils import (
    DEFAULT_CONTEXT_LINES,
    DEFAULT_VIEW_MODE,
    VIEW_MODES,
    LineDiffError,
    compare,
    format_diff_text,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "LINE_DIFF_"
STDIN_MARKER = "-"

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_TROUBLE = 2


def get_env_var_value(key: str) -> Optional[str]:
    """Return the LINE_DIFF_* environment value for an argument dest, if set."""
    return os.environ.get(f"{ENV_PREFIX}{key.upper().replace('-', '_')}")


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    Invalid values are logged and ignored so the built-in default stays.
    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "file_a", "file_b"):
            continue

        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        env_name = f"{ENV_PREFIX}{action.dest.upper()}"
        if action.type is int:
            try:
                action.default = int(env_value)
            except ValueError:
                logger.warning(f"Invalid integer value for {env_name}: {env_value}")
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logger.warning(
                    f"Invalid choice for {env_name}: {env_value}. Choices: {list(action.choices)}"
                )
        else:
            action.default = env_value


def _get_version() -> str:
    """Get the installed version of line-diff."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("line-diff")
    except PackageNotFoundError:
        return __version__


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="line-diff",
        description="Compare two text files line by line, pairing lines by position.",
    )
    parser.add_argument("file_a", metavar="FILE_A", help="Original file ('-' for stdin)")
    parser.add_argument("file_b", metavar="FILE_B", help="New file ('-' for stdin)")
    parser.add_argument(
        "--view-mode",
        choices=VIEW_MODES,
        default=DEFAULT_VIEW_MODE,
        help="Output layout (default: %(default)s)",
    )
    parser.add_argument(
        "--context-lines",
        type=int,
        default=DEFAULT_CONTEXT_LINES,
        help="Unchanged lines to show around changes, -1 shows all (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"line-diff {_get_version()}")

    apply_env_vars_to_parser(parser)
    return parser


def read_input(path: str) -> str:
    """Read one input as UTF-8, keeping carriage returns as line content."""
    if path == STDIN_MARKER:
        return sys.stdin.buffer.read().decode("utf-8")
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s: %(message)s")

    if args.file_a == STDIN_MARKER and args.file_b == STDIN_MARKER:
        print("line-diff: standard input can only be used for one file", file=sys.stderr)
        return EXIT_TROUBLE

    try:
        text_a = read_input(args.file_a)
        text_b = read_input(args.file_b)
    except (OSError, UnicodeDecodeError) as e:
        print(f"line-diff: {e}", file=sys.stderr)
        return EXIT_TROUBLE

    result = compare(text_a, text_b)
    try:
        output = format_diff_text(result, args.view_mode, args.context_lines)
    except LineDiffError as e:
        print(f"line-diff: {e}", file=sys.stderr)
        return EXIT_TROUBLE

    print(output)
    logger.info(f"{len(result)} record(s), stats={result.stats}")
    return EXIT_DIFFERENT if result.has_changes else EXIT_SAME


if __name__ == "__main__":
    sys.exit(main())
