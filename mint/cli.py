"""CLI entrypoint for mint.

Usage:
    mint '[!r]error:[/] something went wrong'
    echo '[y:b]warning[/]' | python -m mint --when always
    python scripts/render-markup.py --escape 'literal [tags]'
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mint import __version__
from mint.colors import BASIC_COLORS, COLOR_NAMES
from mint.config import WHEN_VALUES, ConfigError, load_config
from mint.errors import MarkupError
from mint.escape import escape, escape_ansi
from mint.parser import mint
from mint.terminal import terminal_support

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mint",
        description="Convert terminal attribute markup to SGR codes",
        epilog="Examples:\n"
        "  %(prog)s '[!r]error:[/] disk full'\n"
        "  %(prog)s --when never '[_]plain[/] text'\n"
        "  %(prog)s --escape 'show [r] literally'\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Markup to render (joined with spaces; read from stdin if absent)",
    )

    # Rendering
    parser.add_argument(
        "--when",
        default=None,
        choices=WHEN_VALUES,
        help="When to emit SGR codes (default: auto)",
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        default=None,
        help="Escape the input so that it renders literally",
    )
    parser.add_argument(
        "--strip-ansi",
        action="store_true",
        default=None,
        help="Remove SGR codes from the rendered output",
    )
    parser.add_argument(
        "--no-newline",
        dest="newline",
        action="store_false",
        default=None,
        help="Don't append a newline to the output",
    )

    # Config
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: $MINT_CONFIG)",
    )

    # Info
    parser.add_argument(
        "--support",
        action="store_true",
        help="Print the detected terminal support level and exit",
    )
    parser.add_argument(
        "--list-colors",
        action="store_true",
        help="List color letters and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )

    return parser


def _read_input(args: argparse.Namespace) -> str:
    if args.text:
        return " ".join(args.text)
    # The output newline replaces the one of the piped input
    text = sys.stdin.read()
    if text.endswith("\n"):
        text = text[:-1]
    return text


def run(args: argparse.Namespace) -> int:
    """Execute one mint invocation."""

    if args.support:
        print(terminal_support().label)
        return 0

    if args.list_colors:
        print("Color letters:")
        for letter in BASIC_COLORS:
            print(f"  {letter}  {COLOR_NAMES[letter]}")
        return 0

    try:
        config = load_config(
            args.config,
            when=args.when,
            escape_input=args.escape,
            strip_ansi=args.strip_ansi,
            newline=args.newline,
        )
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    log.debug("Config: %s", config)
    text = _read_input(args)

    if config.escape_input:
        text = escape(text)

    try:
        output = mint(text, config.when)
    except MarkupError as e:
        log.debug("Markup error at offset %d: %s", e.offset, e.kind.name)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if config.strip_ansi:
        output = escape_ansi(output)

    sys.stdout.write(output)
    if config.newline:
        sys.stdout.write("\n")

    return 0


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    sys.exit(run(args))


if __name__ == "__main__":
    main()
