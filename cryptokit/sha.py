"""SHA-256 and SHA-1 digests of strings as lowercase hex."""

from __future__ import annotations

import hashlib


def _to_bytes(message: str | bytes) -> bytes:
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    return message.encode("utf-8")


def sha256_hash_string(message: str | bytes) -> str:
    """Return the lowercase hex SHA-256 digest of ``message`` (UTF-8 for text)."""
    return hashlib.sha256(_to_bytes(message)).hexdigest()


def sha256_hash_string_without_error(source: str | bytes) -> str:
    """Like :func:`sha256_hash_string`, but return an empty string on failure."""
    try:
        return sha256_hash_string(source)
    except ValueError:
        return ""


def sha1_hash_string(message: str | bytes) -> str:
    """Return the lowercase hex SHA-1 digest of ``message`` (UTF-8 for text)."""
    return hashlib.sha1(_to_bytes(message)).hexdigest()


def sha1_hash_string_without_error(source: str | bytes) -> str:
    """Like :func:`sha1_hash_string`, but return an empty string on failure."""
    try:
        return sha1_hash_string(source)
    except ValueError:
        return ""