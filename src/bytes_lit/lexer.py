# bytes_lit/lexer.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

SEPARATOR = "_"

# Prefix (lower-cased) → base. Anything without a prefix is decimal.
PREFIXES = {
    "0x": 16,
    "0b": 2,
}

DIGITS_FOR_BASE = {
    2: frozenset("01"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}

# Decimal digit counts do not map onto a bit boundary.
BITS_PER_DIGIT = {
    2: 1,
    10: None,
    16: 4,
}

BASE_NAMES = {
    2: "binary",
    10: "decimal",
    16: "hex",
}


class InvalidLiteralError(ValueError):
    """The text is not a valid unsigned integer literal."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"invalid integer literal {text!r}: {reason}")


@dataclass(frozen=True)
class Literal:
    """A lexed integer literal.

    ``digits`` has the base prefix and every separator removed, most
    significant digit first. ``leading_zero_digit_count`` equals
    ``len(digits)`` when the literal is zero.
    """

    text: str
    base: int
    digits: str
    leading_zero_digit_count: int

    @property
    def digit_count(self) -> int:
        return len(self.digits)

    @property
    def bits_per_digit(self) -> Optional[int]:
        return BITS_PER_DIGIT[self.base]

    @property
    def base_name(self) -> str:
        return BASE_NAMES[self.base]

    @property
    def is_zero(self) -> bool:
        return self.leading_zero_digit_count == len(self.digits)


def split_prefix(text: str) -> tuple[int, str]:
    """Return ``(base, rest)`` for ``text``; ``0x``/``0X`` and ``0b``/``0B`` only."""
    base = PREFIXES.get(text[:2].lower())
    if base is None:
        return 10, text
    return base, text[2:]


def parse(text: str) -> Literal:
    """Lex ``text`` into a :class:`Literal`.

    Accepts:
      - "1234", "1_000_000" (decimal)
      - "0xFF", "0X00_ed" (hex)
      - "0b0000_0001", "0B1" (binary)

    Raises :class:`InvalidLiteralError` for an empty digit run, a separator
    at the start of the digit run, or a character that is not a digit of
    the detected base (this includes signs, octal ``0o`` and type suffixes).
    """
    s = (text or "").strip()
    if not s:
        raise InvalidLiteralError(text, "empty literal")

    base, run = split_prefix(s)
    offset = len(s) - len(run)

    if run.startswith(SEPARATOR):
        raise InvalidLiteralError(
            text, f"digit separator {SEPARATOR!r} at position {offset} before any digit"
        )

    allowed = DIGITS_FOR_BASE[base]
    digits: list[str] = []
    for i, ch in enumerate(run, start=offset):
        if ch == SEPARATOR:
            continue
        if ch not in allowed:
            raise InvalidLiteralError(
                text, f"invalid digit {ch!r} at position {i} for a {BASE_NAMES[base]} literal"
            )
        digits.append(ch)

    if not digits:
        raise InvalidLiteralError(text, f"no digits in {BASE_NAMES[base]} literal")

    normalized = "".join(digits)
    leading_zeros = len(normalized) - len(normalized.lstrip("0"))

    literal = Literal(
        text=text,
        base=base,
        digits=normalized,
        leading_zero_digit_count=leading_zeros,
    )
    logger.debug(
        "lexed %r: base=%d digits=%d leading_zeros=%d",
        text, base, literal.digit_count, leading_zeros,
    )
    return literal
