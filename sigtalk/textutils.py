"""String and byte helpers used by the signal messaging tools.

The functions follow C string semantics where those matter, such as
returning the terminator position for a NUL search or reporting the
length a bounded copy would have needed. They work on Python strings
and bytes and return new values rather than writing into buffers.
"""

from __future__ import annotations

import re
from itertools import islice, zip_longest
from typing import Callable, Optional

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
    "memcmp",
    "strlcpy",
    "strlcat",
    "strmapi",
    "strchr",
    "strrchr",
]

_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _require_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if none."""
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    _require_char(separator)
    return [piece for piece in text.split(separator) if piece]


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``.

    With ``charset`` of ``None`` the text is returned unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the match, or ``None``. An empty needle matches
    at index 0.
    """
    _require_non_negative("length", length)
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string counts as 0.

    Returns the difference of the first differing code points, or 0.
    """
    _require_non_negative("n", n)
    pairs = zip_longest(map(ord, s1), map(ord, s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def memcmp(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; returns the first byte difference."""
    _require_non_negative("n", n)
    if len(b1) < n or len(b2) < n:
        raise ValueError("both buffers must hold at least n bytes")
    for a, b in zip(b1[:n], b2[:n]):
        if a != b:
            return a - b
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, terminator included.

    Returns the copied text and the length of ``src``; a result length
    below the returned total means the copy was truncated.
    """
    _require_non_negative("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the new text and the length the full result would need,
    or ``size + len(src)`` when ``dst`` already fills the buffer.
    """
    _require_non_negative("size", size)
    dst_len = len(dst)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; NUL finds the end."""
    _require_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; NUL finds the end."""
    _require_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index