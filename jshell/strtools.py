"""String helpers: search, slicing, joining, trimming, splitting and comparison."""

from __future__ import annotations

from typing import Callable, MutableSequence

_NUL = "\0"


def _single(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single(char) == _NUL:
        index = text.find(_NUL)
        return len(text) if index < 0 else index
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single(char) == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """The two strings joined end to end."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """``text`` with characters of ``charset`` removed from both ends."""
    return text.strip(charset) if charset else text


def split(text: str, separator: str) -> list[str]:
    """Non-empty pieces of ``text`` between occurrences of ``separator``."""
    return [piece for piece in text.split(_single(separator)) if piece]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``; a size of 0
    copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length it tried to create. When
    ``size`` does not exceed the length of ``dst``, ``dst`` is left alone
    and the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = len(dst)
    if size <= dst_len:
        return dst, size + len(src)
    return dst + src[:size - 1 - dst_len], dst_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Apply ``func(index, char)`` to each character in place.

    A non-None result replaces the character at that index.
    """
    for index, char in enumerate(list(chars)):
        result = func(index, char)
        if result is not None:
            chars[index] = result
    return chars


def _compare(first: str, second: str, count: int | None) -> int:
    index = 0
    while count is None or index < count:
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right or left == 0:
            return left - right
        index += 1
    return 0


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; the sign tells the order."""
    if count < 0:
        raise ValueError("count must not be negative")
    return _compare(first, second, count)


def strcmp(first: str, second: str) -> int:
    """Compare two strings; the sign tells the order, 0 means equal."""
    return _compare(first, second, None)