"""Percent-encoding of expanded values.

Values are encoded over their UTF-8 bytes with uppercase hex. Unreserved
characters are never escaped; reserved characters are kept only for operators
that allow them. A ``%`` already present in a value is escaped like any other
character.
"""

from __future__ import annotations

from string import ascii_letters, digits
from urllib.parse import quote

__all__ = [
    "UNRESERVED",
    "RESERVED",
    "percent_encode",
]

UNRESERVED = frozenset(ascii_letters + digits + "-._~")
RESERVED = frozenset(":/?#[]@!$&'()*+,;=")

_RESERVED_SAFE = "".join(sorted(RESERVED))


def percent_encode(value: str, allow_reserved: bool = False) -> str:
    """Escape every character of ``value`` outside the allowed set.

    Args:
        value: Raw value.
        allow_reserved: Also leave RFC 3986 reserved characters unescaped.

    Returns:
        Encoded value.

    Examples:
        >>> percent_encode("hello world")
        'hello%20world'
        >>> percent_encode("/foo/bar", allow_reserved=True)
        '/foo/bar'
        >>> percent_encode("caf\\u00e9")
        'caf%C3%A9'
    """
    # quote() always keeps letters, digits and "_.-~", which is UNRESERVED
    safe = _RESERVED_SAFE if allow_reserved else ""
    return quote(value, safe=safe, encoding="utf-8", errors="surrogatepass")
