"""AES-GCM encryption and decryption with raw, Base64 and hex encodings.

Ciphertexts produced here carry the nonce in front of the sealed data,
so the layout is ``nonce || ciphertext || tag``.
"""

from __future__ import annotations

import base64
import binascii
import os

from Crypto.Cipher import AES

GCM_NONCE_SIZE = 12
GCM_TAG_SIZE = 16
_VALID_KEY_SIZES = (16, 24, 32)


def _decode_base64(text: str) -> bytes:
    return base64.b64decode(text, validate=True)


def _decode_hex(text: str) -> bytes:
    return binascii.unhexlify(text)


def _encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _generate_nonce(length: int) -> bytes:
    if length < 0:
        raise ValueError(f"invalid nonce length {length}")
    return os.urandom(length)


def _new_gcm(key: bytes | None, nonce: bytes):
    key = bytes(key or b"")
    if len(key) not in _VALID_KEY_SIZES:
        raise ValueError(f"crypto/aes: invalid key size {len(key)}")
    if len(nonce) != GCM_NONCE_SIZE:
        raise ValueError("incorrect nonce length given to GCM")
    return AES.new(key, AES.MODE_GCM, nonce=bytes(nonce), mac_len=GCM_TAG_SIZE)


def encrypt_gcm(key: bytes, nonce: bytes, data: bytes) -> bytes:
    """Seal ``data`` with AES-GCM and return ``nonce || ciphertext || tag``."""
    cipher = _new_gcm(key, nonce)
    ciphertext, tag = cipher.encrypt_and_digest(bytes(data))
    return bytes(nonce) + ciphertext + tag


def encrypt_gcm_nonce_length(key: bytes, nonce_length: int, data: bytes) -> bytes:
    """Seal ``data`` with a freshly generated random nonce of ``nonce_length`` bytes."""
    return encrypt_gcm(key, _generate_nonce(nonce_length), data)


def encrypt_string_gcm_base64(key_base64: str, nonce_length: int, data: str) -> str:
    """Encrypt a UTF-8 string with a Base64 key; return Base64 ciphertext."""
    key = _decode_base64(key_base64)
    return _encode_base64(encrypt_gcm_nonce_length(key, nonce_length, data.encode("utf-8")))


def encrypt_string_gcm_hex(key_hex: str, nonce_length: int, data: str) -> str:
    """Encrypt a UTF-8 string with a hex key; return lowercase hex ciphertext."""
    key = _decode_hex(key_hex)
    return encrypt_gcm_nonce_length(key, nonce_length, data.encode("utf-8")).hex()


def encrypt_gcm_base64(key_base64: str, nonce_length: int, data_base64: str) -> str:
    """Encrypt Base64-encoded data with a Base64 key; return Base64 ciphertext."""
    key = _decode_base64(key_base64)
    data = _decode_base64(data_base64)
    return _encode_base64(encrypt_gcm_nonce_length(key, nonce_length, data))


def encrypt_gcm_hex(key_hex: str, nonce_length: int, data_hex: str) -> str:
    """Encrypt hex-encoded data with a hex key; return lowercase hex ciphertext."""
    key = _decode_hex(key_hex)
    data = _decode_hex(data_hex)
    return encrypt_gcm_nonce_length(key, nonce_length, data).hex()


def decrypt_gcm(key: bytes, nonce: bytes, data: bytes) -> bytes:
    """Open ``ciphertext || tag`` sealed under ``nonce``; raise ValueError on failure."""
    cipher = _new_gcm(key, nonce)
    data = bytes(data)
    if len(data) < GCM_TAG_SIZE:
        raise ValueError("cipher: message authentication failed")
    ciphertext, tag = data[:-GCM_TAG_SIZE], data[-GCM_TAG_SIZE:]
    try:
        return cipher.decrypt_and_verify(ciphertext, tag)
    except ValueError as exc:
        raise ValueError("cipher: message authentication failed") from exc


def decrypt_gcm_nonce_length(key: bytes, nonce_length: int, data: bytes) -> tuple[bytes, bytes]:
    """Split the leading nonce off ``data`` and decrypt the rest.

    Returns ``(nonce, plaintext)``.
    """
    data = bytes(data)
    if len(data) <= nonce_length:
        raise ValueError("数据长度不足，无法提取 nonce。")
    nonce, sealed = data[:nonce_length], data[nonce_length:]
    return nonce, decrypt_gcm(key, nonce, sealed)


def decrypt_string_gcm_base64(key_base64: str, nonce_length: int, data_base64: str) -> tuple[bytes, str]:
    """Decrypt Base64 ciphertext with a Base64 key.

    Returns ``(nonce, text)`` where the nonce is raw bytes and the text is decoded UTF-8.
    """
    key = _decode_base64(key_base64)
    data = _decode_base64(data_base64)
    nonce, plain = decrypt_gcm_nonce_length(key, nonce_length, data)
    return nonce, plain.decode("utf-8", errors="surrogateescape")


def decrypt_string_gcm_hex(key_hex: str, nonce_length: int, data_hex: str) -> tuple[bytes, str]:
    """Decrypt hex ciphertext with a hex key.

    Returns ``(nonce, text)`` where the nonce is raw bytes and the text is decoded UTF-8.
    """
    key = _decode_hex(key_hex)
    data = _decode_hex(data_hex)
    nonce, plain = decrypt_gcm_nonce_length(key, nonce_length, data)
    return nonce, plain.decode("utf-8", errors="surrogateescape")


def decrypt_gcm_base64(key_base64: str, nonce_length: int, data_base64: str) -> tuple[str, str]:
    """Decrypt Base64 ciphertext; return the nonce and plaintext, both Base64."""
    key = _decode_base64(key_base64)
    data = _decode_base64(data_base64)
    nonce, plain = decrypt_gcm_nonce_length(key, nonce_length, data)
    return _encode_base64(nonce), _encode_base64(plain)


def decrypt_gcm_hex(key_hex: str, nonce_length: int, data_hex: str) -> tuple[str, str]:
    """Decrypt hex ciphertext; return the nonce and plaintext as uppercase hex."""
    key = _decode_hex(key_hex)
    data = _decode_hex(data_hex)
    nonce, plain = decrypt_gcm_nonce_length(key, nonce_length, data)
    return nonce.hex().upper(), plain.hex().upper()