"""
Command-line interface for the Core Audio descriptor inspector.

Usage:
    ca-inspector stream [options] [file]
    ca-inspector component [options] [file]
    pbpaste | ca-inspector stream
"""

import argparse
import sys
from typing import Optional

from .parser import (
    parse_hex,
    iter_stream_descriptors,
    iter_component_descriptors,
    ParseError,
)
from .render import describe_stream, describe_component


def _add_input_options(parser: argparse.ArgumentParser) -> None:
    """Add the input options shared by every record type."""
    parser.add_argument(
        "file",
        nargs="?",
        help="Input file containing a hex dump of one or more records (default: stdin)",
    )

    parser.add_argument(
        "-x", "--hex",
        metavar="HEX",
        help="Hex dump given on the command line instead of a file",
    )

    parser.add_argument(
        "-b", "--binary",
        action="store_true",
        help="Input file or stdin holds raw record bytes rather than a hex dump",
    )

    parser.add_argument(
        "--big-endian",
        action="store_true",
        help="Records are big-endian (default: little-endian)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress warnings and non-essential output",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ca-inspector",
        description="Describe Core Audio stream and component descriptor records.",
        epilog="Example: echo '00 00 00 00 80 88 E5 40 ...' | ca-inspector stream",
    )

    parser.add_argument(
        "-v", "--version",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="kind", metavar="{stream,component}")

    stream = subparsers.add_parser(
        "stream",
        help="Describe AudioStreamBasicDescription records",
    )
    _add_input_options(stream)

    component = subparsers.add_parser(
        "component",
        help="Describe AudioComponentDescription records",
    )
    _add_input_options(component)
    component.add_argument(
        "--flags",
        action="store_true",
        help="Include component flags and flags mask",
    )

    return parser


def read_input(file_path: Optional[str], binary: bool) -> bytes:
    """Read record bytes from file or stdin."""
    if file_path:
        try:
            with open(file_path, "rb") as f:
                raw = f.read()
        except FileNotFoundError:
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            sys.exit(1)
        except IOError as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        if sys.stdin.isatty():
            print("Error: No input provided. Pipe a hex dump or specify a file.",
                  file=sys.stderr)
            print("Usage: ca-inspector stream input.txt", file=sys.stderr)
            print("       ca-inspector component --hex '...'", file=sys.stderr)
            sys.exit(1)
        raw = sys.stdin.buffer.read()

    if binary:
        return raw
    return parse_hex(raw.decode("ascii", errors="replace"))


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__
        print(f"ca-inspector {__version__}")
        return 0

    if args.kind is None:
        parser.print_usage(sys.stderr)
        print("Error: record type (stream or component) is required", file=sys.stderr)
        return 1

    byte_order = "big" if args.big_endian else "little"

    try:
        if args.hex is not None:
            data = parse_hex(args.hex)
        else:
            data = read_input(args.file, args.binary)

        if args.kind == "stream":
            records = list(iter_stream_descriptors(data, byte_order))
        else:
            records = list(iter_component_descriptors(data, byte_order))
    except ParseError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        return 1

    for record in records:
        if args.kind == "stream":
            if record.reserved and not args.quiet:
                print(f"Warning: reserved field is non-zero ({record.reserved})",
                      file=sys.stderr)
            print(describe_stream(record))
        else:
            print(describe_component(record, include_flags=args.flags))

    return 0


if __name__ == "__main__":
    sys.exit(main())
