"""MD5 digests of strings as lowercase hex."""

from __future__ import annotations

import hashlib


def hash_string(source: str | bytes) -> str:
    """Return the lowercase hex MD5 digest of ``source`` (UTF-8 for text).

    Raises UnicodeEncodeError if the text cannot be encoded.
    """
    data = source if isinstance(source, (bytes, bytearray)) else source.encode("utf-8")
    return hashlib.md5(data).hexdigest()


def hash_string_without_error(source: str | bytes) -> str:
    """Like :func:`hash_string`, but return an empty string on failure."""
    try:
        return hash_string(source)
    except ValueError:
        return ""