"""src/requrl/http/encoding.py

Percent-encoding of path-like locators and decoding of userinfo.
"""

import urllib.parse

__all__ = ["should_urlencode", "urlencode", "urldecode"]

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")

# Unreserved characters plus the delimiters the URL parser splits on.
_SAFE_BYTES = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz"
    b"0123456789"
    b"$-_.!*'(),~"
    b";/?:@&=+"
)


def should_urlencode(byte: int) -> bool:
    """Return True if ``byte`` must be written as a ``%XX`` escape."""
    return byte not in _SAFE_BYTES


def _is_escape_triple(data: bytes, index: int) -> bool:
    return (
        index + 2 < len(data)
        and data[index + 1] in _HEX_DIGITS
        and data[index + 2] in _HEX_DIGITS
    )


def urlencode(src: str) -> str:
    """
    Percent-encode a path-like string.

    The string is encoded to UTF-8 and examined byte by byte. Lone surrogates
    (undecodable bytes from ``os.fsdecode``) are escaped as the original
    byte. ``/`` is never escaped. A ``%`` that already starts a valid
    ``%XX`` triple is kept as is, so encoding an encoded string returns it
    unchanged.

    Args:
        src: Locator or path to encode.

    Returns:
        Encoded string (uppercase hex digits).
    """
    if not src:
        return ""

    data = src.encode("utf-8", "surrogateescape")
    parts = []
    for index, byte in enumerate(data):
        if not should_urlencode(byte):
            parts.append(chr(byte))
        elif byte == 0x25 and _is_escape_triple(data, index):
            parts.append("%")
        else:
            parts.append(f"%{byte:02X}")
    return "".join(parts)


def urldecode(src: str) -> str:
    """
    Decode ``%XX`` escapes (username/password substrings).

    Triples that are not valid UTF-8 decode to lone surrogates, so
    ``.encode("utf-8", "surrogateescape")`` gives back the escaped bytes.
    """
    return urllib.parse.unquote(src, errors="surrogateescape")
