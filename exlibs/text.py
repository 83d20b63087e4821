"""Text conversion and string helper functions."""

from __future__ import annotations

import locale
import re

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_TRUE_WORDS = frozenset({"y", "true", "1", "yes"})


def decode_ansi(data: bytes) -> str:
    """Decode bytes in the system's preferred (ANSI) encoding."""
    if not data:
        return ""
    return data.decode(locale.getpreferredencoding(False), errors="replace")


def decode_utf8(data: bytes) -> str:
    """Decode UTF-8 bytes; invalid sequences become U+FFFD."""
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def encode_utf8(text: str) -> bytes:
    """Encode text as UTF-8; unencodable code points are replaced."""
    if not text:
        return b""
    return text.encode("utf-8", errors="replace")


def to_bool(text: str) -> bool:
    """Return True only for 'y', 'yes', 'true' or '1', ignoring case."""
    return text.lower() in _TRUE_WORDS


def _parse_leading_integer(text: str) -> int:
    match = _LEADING_INTEGER.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"integer out of range: {match.group(1)}")
    return value


def to_int(text: str) -> int:
    """Parse a leading integer; text that holds none yields 0.

    Leading whitespace is skipped and trailing characters are ignored.
    A value outside the 32-bit range raises OverflowError.
    """
    try:
        return _parse_leading_integer(text)
    except ValueError:
        return 0


def to_long(text: str) -> int:
    """Parse a leading integer, raising ValueError if there is none."""
    return _parse_leading_integer(text)


def is_digit(text: str) -> bool:
    """Return True if the text starts with a number (or is exactly '0')."""
    if to_int(text) == 0:
        return text == "0"
    return True


def count_occurrences(text: str, find: str) -> int:
    """Count occurrences of *find* in *text*, overlapping ones included."""
    if not find:
        return 0
    count = 0
    index = text.find(find)
    while index != -1:
        count += 1
        index = text.find(find, index + 1)
    return count


def split_tokens(text: str, separator: str) -> list[str]:
    """Return the pieces of *text* that are followed by *separator*.

    The part after the last separator is not included, so text without
    the separator gives an empty list.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    return text.split(separator)[:-1]


def replace_all(text: str, old: str, new: str) -> str:
    """Replace *old* with *new* repeatedly until *old* no longer occurs.

    Each pass searches from the start of the updated text, so a
    replacement can create a new match that is replaced in turn.
    """
    if not old:
        raise ValueError("the text to replace must not be empty")
    if old in new:
        raise ValueError("the replacement contains the text it replaces")
    while (index := text.find(old)) != -1:
        text = text[:index] + new + text[index + len(old):]
    return text


def replace_first(text: str, old: str, new: str) -> str:
    """Replace the first occurrence of *old* with *new*."""
    return text.replace(old, new, 1)


def compare(a: str, b: str, case_insensitive: bool = False) -> int:
    """Three-way comparison: negative, zero or positive."""
    if case_insensitive:
        a, b = a.lower(), b.lower()
    return (a > b) - (a < b)


def contains(text: str, part: str, case_insensitive: bool = False) -> bool:
    """Return True if the lower-cased *part* occurs in *text*.

    The needle is always lower-cased; with *case_insensitive* the text
    is lower-cased as well.
    """
    haystack = text.lower() if case_insensitive else text
    return part.lower() in haystack


def starts_with(text: str, prefix: str, case_insensitive: bool = False) -> bool:
    """Return True if *text* starts with *prefix*."""
    if case_insensitive:
        return text.lower().startswith(prefix.lower())
    return text.startswith(prefix)


def ends_with(text: str, suffix: str, case_insensitive: bool = False) -> bool:
    """Return True if *text* ends with *suffix*."""
    if case_insensitive:
        return text.lower().endswith(suffix.lower())
    return text.endswith(suffix)