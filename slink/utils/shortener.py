"""Shortcode generation utility

This module provides a helper function for deriving short, deterministic
codes from arbitrary strings (usually URLs).

Functions:
    generate_shortcode(value):
        Generate a short base-36 code suitable for use as a URL slug.

Example:
    >>> from slink.utils import generate_shortcode
    >>> generate_shortcode('https://example.com')
    'ags5vy'
"""

from beartype import beartype

from slink.constants import Shortcode


INT32_MASK = 0xFFFFFFFF
INT32_SIGN_BIT = 0x80000000


def _to_int32(value: int) -> int:
    """Wrap an arbitrary integer to a signed 32-bit two's complement value."""
    value &= INT32_MASK
    return value - (1 << 32) if value & INT32_SIGN_BIT else value


def _utf16_code_units(value: str):
    """Yield the UTF-16 code units of a string (surrogate pairs for astral characters)."""
    # NOTE: 'surrogatepass' keeps lone surrogates encodable, so the function stays total
    encoded = value.encode('utf-16-le', 'surrogatepass')
    for i in range(0, len(encoded), 2):
        yield encoded[i] | (encoded[i + 1] << 8)


def _base36(value: int) -> str:
    """Encode a non-negative integer in base 36 ('0-9a-z'). Zero encodes to ''."""
    base = len(Shortcode.ALPHABET)
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(Shortcode.ALPHABET[remainder])
    return ''.join(reversed(digits))


def string_hash(value: str) -> int:
    """Compute the classic 31-multiplier rolling string hash as a signed 32-bit integer

    For every UTF-16 code unit c: hash = (hash << 5) - hash + c, wrapped to
    32 bits after each step.

    Example:
        >>> string_hash('ab')
        3105
        >>> string_hash('https://www.google.com/search?q=python')
        -1941892126
    """
    hash_ = 0
    for unit in _utf16_code_units(value):
        hash_ = _to_int32((hash_ << 5) - hash_ + unit)
    return hash_


@beartype
def generate_shortcode(value: str) -> str:
    """Generate a short, deterministic code from a string.

    The string is hashed with string_hash(), the absolute value of the hash
    is encoded in base 36 and truncated to its first 6 characters.

    The function is total: it never fails and always returns 1 to 6
    characters from [0-9a-z].

    Args:
        value (str):
            Input string, normally the validated original URL.

    Returns:
        str: Short alphanumeric code.

    Example:
        >>> generate_shortcode('https://example.com')
        'ags5vy'
        >>> generate_shortcode('')
        'abc123'

    NOTE:
        - Different inputs may produce the same code. No collision table is kept.
        - A hash of 0 (e.g. the empty string) yields the fixed fallback 'abc123'.
    """
    # NOTE: abs() of -2**31 is 2**31 here, exactly like the double-based original
    code = _base36(abs(string_hash(value)))[: Shortcode.LENGTH]
    return code or Shortcode.FALLBACK
