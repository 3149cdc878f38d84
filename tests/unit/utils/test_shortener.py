"""Unit tests for the generate_shortcode function in shortener.py.

This test suite verifies the correctness, consistency, and robustness
of the generate_shortcode() helper that derives short base-36 codes from
strings with a 32-bit rolling hash.

Test coverage includes:

1. Basic functionality
   - Ensures the function returns a non-empty string of at most 6 characters.

2. Determinism
   - Same input must always produce identical output.

3. 32-bit wraparound
   - Overflowing hashes wrap exactly like signed 32-bit integers.

4. Edge cases
   - Empty input yields the fixed fallback.
   - Non-ASCII and astral characters hash by UTF-16 code units.
   - Very long inputs stay within the output format.

5. Error handling
   - Non-string inputs raise a type error.

6. Output format
   - All characters belong to [0-9a-z].

7. Regression testing
   - Known inputs produce stable, expected output to detect accidental changes.
"""

import re

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from slink.utils import generate_shortcode
from slink.utils.shortener import string_hash, _to_int32, _base36


SHORTCODE_PATTERN = re.compile(r'[0-9a-z]{1,6}')


# -------------------------------
# 1. Basic functionality and type
# -------------------------------


def test_generate_shortcode_returns_string():
    """Ensure generate_shortcode() returns a short string."""
    result = generate_shortcode('https://example.com')
    assert isinstance(result, str)
    assert 1 <= len(result) <= 6
    assert result == 'ags5vy'


# -------------------------------
# 2. Determinism
# -------------------------------


def test_generate_shortcode_is_deterministic():
    """Same input should always produce the same code."""
    result1 = generate_shortcode('https://example.com/article/123')
    result2 = generate_shortcode('https://example.com/article/123')
    assert result1 == result2


def test_different_inputs_may_share_a_code():
    """Only determinism is guaranteed; distinct inputs are not required to differ."""
    # 'Aa' and 'BB' are the classic colliding pair of the 31-multiplier hash
    assert string_hash('Aa') == string_hash('BB')
    assert generate_shortcode('Aa') == generate_shortcode('BB')


# -------------------------------
# 3. 32-bit wraparound
# -------------------------------


@pytest.mark.parametrize(
    'value, expected',
    [
        (0, 0),
        (-1, -1),
        (2**31 - 1, 2**31 - 1),
        (2**31, -(2**31)),
        (2**32 + 5, 5),
        (-(2**31) - 1, 2**31 - 1),
    ],
)
def test_to_int32_wraps_like_twos_complement(value, expected):
    """Ensure integers are wrapped to signed 32-bit values."""
    assert _to_int32(value) == expected


@pytest.mark.parametrize(
    'value, expected',
    [
        ('', 0),
        ('a', 97),
        ('ab', 3105),
        ('https://example.com', 632849614),
        ('https://www.google.com/search?q=python', -1941892126),
        ('http://example.org/a/b/c', -147318521),
        ('x' * 1000, -1715418112),
    ],
)
def test_string_hash_matches_reference_values(value, expected):
    """Ensure overflowing hashes wrap exactly like signed 32-bit arithmetic."""
    assert string_hash(value) == expected


def test_negative_hash_uses_absolute_value():
    """Negative hashes are encoded by magnitude."""
    assert generate_shortcode('https://www.google.com/search?q=python') == 'w45hjy'


@pytest.mark.parametrize(
    'value, expected',
    [
        (0, ''),
        (35, 'z'),
        (36, '10'),
        (123456789, '21i3v9'),
        (2**31, 'zik0zk'),
    ],
)
def test_base36_encoding(value, expected):
    """Ensure base-36 encoding uses digits then lowercase letters."""
    assert _base36(value) == expected


# -------------------------------
# 4. Edge cases
# -------------------------------


def test_empty_input_yields_fallback():
    """A hash of 0 yields the fixed fallback code."""
    assert generate_shortcode('') == 'abc123'


def test_single_character_codes_are_short():
    """Small hashes produce codes shorter than 6 characters."""
    assert generate_shortcode('a') == '2p'
    assert generate_shortcode('ab') == '2e9'


@pytest.mark.parametrize(
    'value, expected',
    [
        ('héllo wörld', 'qxcvrt'),
        ('😀', '11zz7'),  # surrogate pair: two UTF-16 code units
        ('https://例え.jp/パス', 'u1tz2p'),
    ],
)
def test_non_ascii_input_hashes_utf16_code_units(value, expected):
    """Ensure non-ASCII input is hashed by UTF-16 code units."""
    assert generate_shortcode(value) == expected


def test_lone_surrogate_does_not_fail():
    """The function is total, even for strings that are not valid Unicode text."""
    result = generate_shortcode('\ud83d')
    assert SHORTCODE_PATTERN.fullmatch(result)


def test_long_input_is_truncated():
    """Very long inputs still produce at most 6 characters."""
    assert generate_shortcode('x' * 1000) == 'sdbd34'


# -------------------------------
# 5. Error handling
# -------------------------------


@pytest.mark.parametrize('value', [None, 123, b'https://example.com'])
def test_invalid_input_type_raises_error(value):
    """Non-string inputs raise a type error."""
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        generate_shortcode(value)


# -------------------------------
# 6. Output format validation
# -------------------------------


@pytest.mark.parametrize(
    'value',
    [
        '',
        ' ',
        'https://example.com',
        'http://localhost:8080/path?query=1#fragment',
        'https://example.com/' + 'a' * 2048,
        '\x00\x01\x02',
        '￿' * 10,
    ],
)
def test_generate_shortcode_format(value):
    """Ensure output is 1-6 characters of [0-9a-z]."""
    assert SHORTCODE_PATTERN.fullmatch(generate_shortcode(value))


# -------------------------------
# 7. Regression test
# -------------------------------


def test_known_output_regression():
    """Ensure stable output for known inputs (detect logic drift)."""
    assert generate_shortcode('https://example.com') == 'ags5vy'
    assert generate_shortcode('http://example.org/a/b/c') == '2fpjp5'
