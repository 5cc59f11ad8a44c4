# bytes_lit/encoder.py

from __future__ import annotations

import enum
import logging
from typing import Union

from .lexer import InvalidLiteralError, Literal, parse

logger = logging.getLogger(__name__)

# Decimal text is folded into the magnitude this many digits at a time, which
# keeps every int(str) call under the interpreter's str→int digit limit.
DECIMAL_CHUNK_DIGITS = 1000

LITERAL_PREFIXES = {16: "0x", 2: "0b", 10: ""}


class WidthPolicy(enum.Enum):
    FIXED = "fixed"
    MINIMAL = "minimal"


PolicyLike = Union[WidthPolicy, str]


def _coerce_policy(policy: PolicyLike) -> WidthPolicy:
    if isinstance(policy, WidthPolicy):
        return policy
    try:
        return WidthPolicy(str(policy).lower())
    except ValueError:
        raise ValueError(f"Unknown width policy: {policy!r}") from None


# ---------------- Magnitude ----------------
def magnitude(literal: Literal) -> int:
    """Evaluate the literal's digits as an arbitrary-precision integer."""
    digits = literal.digits
    if literal.base != 10:
        # Power-of-two bases are not subject to the str→int digit limit.
        return int(digits, literal.base)

    value = 0
    for i in range(0, len(digits), DECIMAL_CHUNK_DIGITS):
        chunk = digits[i : i + DECIMAL_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk, 10)
    return value


def minimal_bytes(value: int) -> bytes:
    """Big-endian bytes of ``value`` with no leading zero byte; zero is ``b"\\x00"``."""
    if value < 0:
        raise ValueError("negative values unsupported")
    length = max(1, (value.bit_length() + 7) // 8)
    return value.to_bytes(length, byteorder="big", signed=False)


def fixed_width(literal: Literal) -> int | None:
    """
    Byte count implied by the literal's written digits.

    ``ceil(digit_count * bits_per_digit / 8)`` for hex and binary; ``None``
    for decimal, where the written length says nothing about byte alignment.
    """
    bits = literal.bits_per_digit
    if bits is None:
        return None
    return (literal.digit_count * bits + 7) // 8


# ---------------- Encoding ----------------
def encode(literal: Literal, policy: PolicyLike = WidthPolicy.FIXED, *, strict: bool = False) -> bytes:
    """Convert a lexed literal into big-endian bytes.

    - MINIMAL: shortest form, a single zero byte for zero.
    - FIXED: minimal form left-padded with zero bytes up to the width
      implied by the written digit count. Decimal literals get the minimal
      form; with ``strict=True`` a decimal literal with leading zero digits
      is refused instead, since those zeros cannot be preserved.
    """
    policy = _coerce_policy(policy)
    data = minimal_bytes(magnitude(literal))

    if policy is WidthPolicy.MINIMAL:
        logger.debug("encoded %r (minimal): %d bytes", literal.text, len(data))
        return data

    width = fixed_width(literal)
    if width is None:
        if strict and literal.leading_zero_digit_count and not _is_single_zero(literal):
            raise InvalidLiteralError(
                literal.text,
                "leading zeros are not preserved or supported on integer literals "
                f"in {literal.base_name} form",
            )
        width = len(data)

    # Padding never truncates value-bearing bytes.
    width = max(width, len(data))
    out = bytes(width - len(data)) + data
    logger.debug(
        "encoded %r (fixed): %d bytes, %d padding", literal.text, len(out), len(out) - len(data)
    )
    return out


def _is_single_zero(literal: Literal) -> bool:
    return literal.digits == "0"


def bytes_lit(text: str, *, strict: bool = False) -> bytes:
    """Fixed-width conversion of an integer literal (the ``bytes`` entry point)."""
    return encode(parse(text), WidthPolicy.FIXED, strict=strict)


def bytesmin_lit(text: str) -> bytes:
    """Minimal-width conversion of an integer literal (the ``bytesmin`` entry point)."""
    return encode(parse(text), WidthPolicy.MINIMAL)


# ---------------- Re-serialization ----------------
def to_literal(data: bytes, base: int = 16) -> str:
    """Render big-endian ``data`` as the minimal literal of its value."""
    if base not in LITERAL_PREFIXES:
        raise ValueError("base must be one of {2, 10, 16}")
    value = int.from_bytes(data, byteorder="big", signed=False)
    if base == 16:
        body = f"{value:x}"
    elif base == 2:
        body = f"{value:b}"
    else:
        body = _to_decimal(value)
    return LITERAL_PREFIXES[base] + body


def _to_decimal(value: int) -> str:
    if value.bit_length() < 10_000:
        return str(value)
    # Split around a power of ten to stay under the int→str digit limit.
    chunk = 10 ** DECIMAL_CHUNK_DIGITS
    parts: list[str] = []
    while value >= chunk:
        value, rem = divmod(value, chunk)
        parts.append(f"{rem:0{DECIMAL_CHUNK_DIGITS}d}")
    parts.append(str(value))
    return "".join(reversed(parts))


def format_array(data: bytes) -> str:
    """Render bytes as an array expression, e.g. ``[0, 237, 63]``."""
    return "[" + ", ".join(str(b) for b in data) + "]"
