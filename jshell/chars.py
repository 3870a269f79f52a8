"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACE_CODES = frozenset(range(9, 14)) | {32}


def _code(char: str | int) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    return int(char)


def is_alpha(char: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(char: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(char) <= 57


def is_alnum(char: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(char) <= 126


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(char)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(char, str) else code


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(char)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(char, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits gives 0.
    """
    position = 0
    length = len(text)
    while position < length and ord(text[position]) in _SPACE_CODES:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < length and "0" <= text[position] <= "9":
        result = result * 10 + (ord(text[position]) - 48)
        position += 1
    return sign * result


def itoa(number: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)