"""
Unsigned integer tokenizer for plain PPM streams.

One routine serves header fields and pixel channels alike. Tokens are
separated by whitespace and '#' comments (which run to end of line);
a comment is only recognised between tokens, never inside a digit run.
"""
from typing import Optional

from .source import ByteSource

WHITESPACE = frozenset(b" \t\n\r\f\v")
COMMENT = ord("#")
NEWLINE = ord("\n")
ZERO = ord("0")
NINE = ord("9")


def _is_digit(c: Optional[int]) -> bool:
    return c is not None and ZERO <= c <= NINE


def skip_blanks(source: ByteSource) -> Optional[int]:
    """
    Skip whitespace and comments.
    Returns the first significant byte (left unread in the source),
    or None at end of file.
    """
    while True:
        c = source.next_byte()
        if c is None:
            return None
        if c == COMMENT:
            # drop everything up to and including the newline
            while True:
                c = source.next_byte()
                if c is None or c == NEWLINE:
                    break
        elif c not in WHITESPACE:
            source.push_back(c)
            return c


def scan_uint(source: ByteSource, max_allowed: int) -> Optional[int]:
    """
    Read one digit run after any blanks.

    Returns None if there is no digit run. Otherwise returns the value,
    clamped to max_allowed + 1 once it is certain to exceed max_allowed,
    so callers can tell "out of range" from "not a number".
    """
    if skip_blanks(source) is None:
        return None
    c = source.next_byte()
    if not _is_digit(c):
        source.push_back(c)
        return None

    limit = max_allowed // 10 + 1
    val = 0
    while _is_digit(c):
        if val > limit:
            val = max_allowed + 1
        else:
            val = val * 10 + (c - ZERO)
        c = source.next_byte()

    # the delimiter may be the start of a comment; leave it for the next call
    if c is not None:
        source.push_back(c)
    return min(val, max_allowed + 1)


def read_uint(source: ByteSource, max_allowed: int) -> Optional[int]:
    """Next unsigned integer in [0, max_allowed], or None on EOF, junk or overflow."""
    val = scan_uint(source, max_allowed)
    if val is None or val > max_allowed:
        return None
    return val
