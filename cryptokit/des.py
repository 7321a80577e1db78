"""DES in CBC mode with PKCS#7 padding, over raw bytes and hex strings."""

from __future__ import annotations

import binascii

from Crypto.Cipher import DES

BLOCK_SIZE = DES.block_size
_DEFAULT_DES_KEY = "go-kit-k"


def get_default_des_key() -> str:
    """Return the default DES key."""
    return _DEFAULT_DES_KEY


def pkcs7_padding(data: bytes, block_size: int) -> bytes:
    """Pad ``data`` to a multiple of ``block_size`` following PKCS#7.

    A full block of padding is added when the data is already aligned.
    """
    if not 1 <= block_size <= 255:
        raise ValueError(f"invalid block size {block_size}")
    padding = block_size - len(data) % block_size
    return bytes(data) + bytes([padding]) * padding


def pkcs7_unpadding(data: bytes) -> bytes:
    """Strip PKCS#7 padding from ``data``; raise ValueError if it is malformed."""
    data = bytes(data)
    if not data:
        raise ValueError("empty data")
    padding = data[-1]
    if padding == 0 or padding > len(data):
        raise ValueError("invalid padding value")
    if any(byte != padding for byte in data[-padding:]):
        raise ValueError("invalid padding")
    return data[:-padding]


def _new_cbc(key: bytes, iv: bytes):
    key = bytes(key or b"")
    iv = bytes(iv or b"")
    if len(key) != BLOCK_SIZE:
        raise ValueError(f"crypto/des: invalid key size {len(key)}")
    if len(iv) != BLOCK_SIZE:
        raise ValueError("IV length must equal block size")
    return DES.new(key, DES.MODE_CBC, iv=iv)


def encrypt_cbc_pkcs7_padding_alone_iv(key: bytes, iv: bytes, data: bytes) -> bytes:
    """Encrypt ``data`` with DES-CBC under ``key`` and a separate ``iv``."""
    cipher = _new_cbc(key, iv)
    return cipher.encrypt(pkcs7_padding(data, BLOCK_SIZE))


def encrypt_cbc_pkcs7_padding(key: bytes, data: bytes) -> bytes:
    """Encrypt ``data`` with DES-CBC, using ``key`` as the IV as well."""
    return encrypt_cbc_pkcs7_padding_alone_iv(key, key, data)


def encrypt_string_cbc_pkcs7_padding_hex(key_hex: str, data: str) -> str:
    """Encrypt a UTF-8 string with a hex key; return uppercase hex ciphertext."""
    key = binascii.unhexlify(key_hex)
    return encrypt_cbc_pkcs7_padding(key, data.encode("utf-8")).hex().upper()


def encrypt_string_cbc_pkcs7_padding_string_hex(key: str, data: str) -> str:
    """Encrypt a UTF-8 string with a UTF-8 key; return uppercase hex ciphertext."""
    return encrypt_string_cbc_pkcs7_padding_hex(key.encode("utf-8").hex(), data)


def decrypt_cbc_pkcs7_padding_alone_iv(key: bytes, iv: bytes, data: bytes) -> bytes:
    """Decrypt DES-CBC ``data`` under ``key`` and ``iv`` and strip the padding."""
    cipher = _new_cbc(key, iv)
    data = bytes(data)
    if len(data) % BLOCK_SIZE:
        raise ValueError("crypto/cipher: input not full blocks")
    padded = cipher.decrypt(data) if data else b""
    return pkcs7_unpadding(padded)


def decrypt_cbc_pkcs7_padding(key: bytes, data: bytes) -> bytes:
    """Decrypt DES-CBC ``data``, using ``key`` as the IV as well."""
    return decrypt_cbc_pkcs7_padding_alone_iv(key, key, data)


def decrypt_string_cbc_pkcs7_padding_hex(key_hex: str, data_hex: str) -> str:
    """Decrypt hex ciphertext with a hex key; return the UTF-8 plaintext."""
    key = binascii.unhexlify(key_hex)
    data = binascii.unhexlify(data_hex)
    return decrypt_cbc_pkcs7_padding(key, data).decode("utf-8", errors="surrogateescape")


def decrypt_string_cbc_pkcs7_padding_string_hex(key: str, data_hex: str) -> str:
    """Decrypt hex ciphertext with a UTF-8 key; return the UTF-8 plaintext."""
    return decrypt_string_cbc_pkcs7_padding_hex(key.encode("utf-8").hex(), data_hex)