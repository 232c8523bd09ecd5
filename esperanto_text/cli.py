"""Command line front end: eotext <from> <to> ["<input text>"]."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, TextIO

from .const import CLI_EXAMPLE, CLI_PROG, DIRECTION_NAMES, EXIT_USAGE
from .dispatch import get_converter
from .exceptions import InvalidDirection

_LOGGER = logging.getLogger(__name__)


def usage_text(prog: str = CLI_PROG) -> str:
    """Return the usage message printed on bad arguments."""
    lines = [
        f'Usage: {prog} <from> <to> "<input text>"',
        "where `from` and `to` are one of the following letters:",
    ]
    lines.extend(f"    {token}   {name}" for token, name in DIRECTION_NAMES.items())
    lines.append("If the input text is omitted it is read from standard input.")
    lines.append(f'Put -- before text that starts with "-": {prog} x u -- "-cxu"')
    lines.append(f"Example: {prog} {CLI_EXAMPLE}")
    return "\n".join(lines)


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that reports errors with the usage text on stdout."""

    def error(self, message: str) -> NoReturn:
        _LOGGER.debug("Invalid arguments: %s", message)
        print(usage_text(self.prog))
        self.exit(EXIT_USAGE)


def build_parser() -> argparse.ArgumentParser:
    """Build the eotext argument parser."""
    parser = _UsageParser(
        prog=CLI_PROG,
        description="Transliterate Esperanto text between UTF-8, x-system and h-system.",
        epilog=usage_text(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source", metavar="from", help="direction of the input")
    parser.add_argument("target", metavar="to", help="direction of the output")
    parser.add_argument(
        "text",
        nargs="?",
        help="text to convert (read from standard input if omitted)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def read_input(stream: TextIO) -> str:
    """Read all of stream, dropping one trailing newline."""
    text = stream.read()
    if text.endswith("\n"):
        text = text[:-1]
    return text


def main(argv: list[str] | None = None) -> int:
    """Run eotext and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Reject bad directions before blocking on stdin
    try:
        converter = get_converter(args.source, args.target)
    except InvalidDirection:
        print(usage_text(parser.prog))
        return EXIT_USAGE

    text = args.text if args.text is not None else read_input(sys.stdin)
    print(converter(text))
    return 0
