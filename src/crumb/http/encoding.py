"""Percent-encoding for cookie values.

Only ``A-Z a-z 0-9 - _ . ~`` pass through unescaped. Everything else,
including space and the UTF-8 bytes of non-ASCII text, becomes ``%XX``.
"""

from urllib.parse import quote_from_bytes, unquote_to_bytes


def url_encode(value: str) -> bytes:
    """Percent-encode *value* as UTF-8 with uppercase hex escapes.

    Lone surrogates cannot be encoded and become ``?``.
    """
    return quote_from_bytes(value.encode("utf-8", "replace"), safe="").encode("ascii")


def url_decode(raw: bytes) -> bytes:
    """Percent-decode *raw* in query-string mode.

    ``+`` becomes a space. A ``%`` that is not followed by two hex
    digits is kept as-is, so this never raises.
    """
    return unquote_to_bytes(raw.replace(b"+", b" "))
