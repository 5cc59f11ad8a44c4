# bytes_lit/cli.py
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, Sequence

from . import __version__
from .__about__ import about_text
from .encoder import (
    WidthPolicy,
    encode,
    fixed_width,
    format_array,
    magnitude,
    to_literal,
)
from .lexer import InvalidLiteralError, parse

logger = logging.getLogger(__name__)

FORMATS = ("array", "hex", "binary", "raw")
DEFAULT_FORMAT = "array"
LOG_LEVEL_ENV = "BYTES_LIT_LOG_LEVEL"


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def _as_hex_per_byte(data: bytes) -> list[str]:
    return [f"{b:02X}" for b in data]

def _as_bin_per_byte(data: bytes) -> list[str]:
    return [f"{b:08b}" for b in data]

def _read_literal(args: argparse.Namespace) -> str:
    return args.literal if args.literal is not None else sys.stdin.read()

def _emit(data: bytes, fmt: str) -> None:
    if fmt == "raw":
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
    elif fmt == "hex":
        print(" ".join(_as_hex_per_byte(data)))
    elif fmt == "binary":
        print(" ".join(_as_bin_per_byte(data)))
    else:
        print(format_array(data))

def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


# ---------- subcommands ----------
def cmd_bytes(args: argparse.Namespace) -> int:
    literal = parse(_read_literal(args))
    data = encode(literal, WidthPolicy.FIXED, strict=args.strict)
    logger.info("bytes %s -> %d bytes", literal.text.strip(), len(data))
    _emit(data, args.format)
    return 0


def cmd_bytesmin(args: argparse.Namespace) -> int:
    literal = parse(_read_literal(args))
    data = encode(literal, WidthPolicy.MINIMAL)
    logger.info("bytesmin %s -> %d bytes", literal.text.strip(), len(data))
    _emit(data, args.format)
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    literal = parse(_read_literal(args))
    fixed = encode(literal, WidthPolicy.FIXED)
    minimal = encode(literal, WidthPolicy.MINIMAL)
    width = fixed_width(literal)

    _print_kv("Literal", literal.text.strip())
    _print_kv("Base", f"{literal.base} ({literal.base_name})")
    _print_kv("Digits", literal.digits)
    _print_kv("Digit count", str(literal.digit_count))
    _print_kv("Leading zero digits", str(literal.leading_zero_digit_count))
    _print_kv("Value", to_literal(minimal, 10))
    _print_kv("Value hex", to_literal(minimal, 16))
    _print_kv("Bit length", str(magnitude(literal).bit_length()))
    _print_kv("Fixed width", "minimal" if width is None else str(width))
    _print_kv("Fixed bytes", _as_hex_per_byte(fixed))
    _print_kv("Fixed array", format_array(fixed))
    _print_kv("Minimal bytes", _as_hex_per_byte(minimal))
    _print_kv("Minimal array", format_array(minimal))
    _print_kv("Length", f"{len(fixed)} fixed, {len(minimal)} minimal")
    return 0


# ---------- parser ----------
def _add_literal_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "literal", nargs="?",
        help="integer literal like 0x00ed3f, 0b0000_0001 or 1_000 (default: read stdin)",
    )

def _add_format_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--format", choices=FORMATS, default=DEFAULT_FORMAT,
        help=f"output form (default: {DEFAULT_FORMAT})",
    )

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bytes-lit",
        description="Integer literal → big-endian bytes converter",
        epilog=about_text(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-v", "--verbose", action="count", default=0,
        help=f"log more (-v info, -vv debug; default level from ${LOG_LEVEL_ENV})",
    )

    sp = p.add_subparsers(dest="cmd")

    # bytes
    pb = sp.add_parser("bytes", help="fixed width: keep leading zero digits as bytes")
    _add_literal_args(pb)
    _add_format_arg(pb)
    pb.add_argument(
        "--strict", action="store_true",
        help="refuse decimal literals whose leading zeros cannot be preserved",
    )
    pb.set_defaults(func=cmd_bytes)

    # bytesmin
    pm = sp.add_parser("bytesmin", help="minimal width: strip leading zero bytes")
    _add_literal_args(pm)
    _add_format_arg(pm)
    pm.set_defaults(func=cmd_bytesmin)

    # inspect
    pi = sp.add_parser("inspect", help="show how a literal is lexed and encoded")
    _add_literal_args(pi)
    pi.set_defaults(func=cmd_inspect)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except InvalidLiteralError as e:
        logger.debug("rejected literal %r: %s", e.text, e.reason)
        parser.exit(2, f"{parser.prog}: error: {e}\n")


if __name__ == "__main__":
    raise SystemExit(main())
