# bytes_lit/__init__.py

"""bytes-lit package.

Converts integer literals into big-endian byte sequences and re-exports the
lexer and encoder for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
    about_text,
)

from .lexer import (
    BITS_PER_DIGIT,
    PREFIXES,
    SEPARATOR,
    InvalidLiteralError,
    Literal,
    parse,
)

from .encoder import (
    DECIMAL_CHUNK_DIGITS,
    WidthPolicy,
    bytes_lit,
    bytesmin_lit,
    encode,
    fixed_width,
    format_array,
    magnitude,
    minimal_bytes,
    to_literal,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE", "about_text",
    # Lexer
    "BITS_PER_DIGIT", "PREFIXES", "SEPARATOR",
    "InvalidLiteralError", "Literal", "parse",
    # Encoder
    "DECIMAL_CHUNK_DIGITS", "WidthPolicy",
    "bytes_lit", "bytesmin_lit", "encode", "fixed_width",
    "format_array", "magnitude", "minimal_bytes", "to_literal",
]
