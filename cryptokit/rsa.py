"""RSA with PKCS#1 v1.5 padding: public-key encryption and private-key "encryption".

Besides the usual encrypt-with-public / decrypt-with-private direction, this
module can transform data with the private key (a raw, unhashed PKCS#1 v1.5
signature) and recover it again with the public key.
"""

from __future__ import annotations

import base64
import binascii
import re

from Crypto.Cipher import PKCS1_v1_5
from Crypto.PublicKey import RSA
from Crypto.Util.asn1 import DerObjectId, DerSequence

BLOCK_TYPE_PUBLIC_KEY = "PUBLIC KEY"

_RSA_ENCRYPTION_OID = "1.2.840.113549.1.1.1"
_PEM_LINE_LENGTH = 64
_PEM_BLOCK = re.compile(
    rb"-----BEGIN ([^\r\n-]*)-----\r?\n(.*?)-----END \1-----",
    re.DOTALL,
)

# ASN.1 DER prefixes identifying the hash inside a PKCS#1 v1.5 signature.
HASH_PREFIXES: dict[str, bytes] = {
    "md5": bytes([0x30, 0x20, 0x30, 0x0C, 0x06, 0x08, 0x2A, 0x86, 0x48, 0x86, 0xF7, 0x0D, 0x02, 0x05, 0x05, 0x00, 0x04, 0x10]),
    "sha1": bytes([0x30, 0x21, 0x30, 0x09, 0x06, 0x05, 0x2B, 0x0E, 0x03, 0x02, 0x1A, 0x05, 0x00, 0x04, 0x14]),
    "sha224": bytes([0x30, 0x2D, 0x30, 0x0D, 0x06, 0x09, 0x60, 0x86, 0x48, 0x01, 0x65, 0x03, 0x04, 0x02, 0x04, 0x05, 0x00, 0x04, 0x1C]),
    "sha256": bytes([0x30, 0x31, 0x30, 0x0D, 0x06, 0x09, 0x60, 0x86, 0x48, 0x01, 0x65, 0x03, 0x04, 0x02, 0x01, 0x05, 0x00, 0x04, 0x20]),
    "sha384": bytes([0x30, 0x41, 0x30, 0x0D, 0x06, 0x09, 0x60, 0x86, 0x48, 0x01, 0x65, 0x03, 0x04, 0x02, 0x02, 0x05, 0x00, 0x04, 0x30]),
    "sha512": bytes([0x30, 0x51, 0x30, 0x0D, 0x06, 0x09, 0x60, 0x86, 0x48, 0x01, 0x65, 0x03, 0x04, 0x02, 0x03, 0x05, 0x00, 0x04, 0x40]),
    "md5sha1": b"",
    "ripemd160": bytes([0x30, 0x20, 0x30, 0x08, 0x06, 0x06, 0x28, 0xCF, 0x06, 0x03, 0x00, 0x31, 0x04, 0x14]),
}

# Digest sizes of the known hash functions, including ones without a prefix.
_HASH_SIZES: dict[str, int] = {
    "md4": 16,
    "md5": 16,
    "sha1": 20,
    "sha224": 28,
    "sha256": 32,
    "sha384": 48,
    "sha512": 64,
    "md5sha1": 36,
    "ripemd160": 20,
    "sha3_224": 28,
    "sha3_256": 32,
    "sha3_384": 48,
    "sha3_512": 64,
    "sha512_224": 28,
    "sha512_256": 32,
    "blake2s_256": 32,
    "blake2b_256": 32,
    "blake2b_384": 48,
    "blake2b_512": 64,
}


class DecodePublicKeyError(ValueError):
    """The data is not a PEM-encoded RSA public key."""

    def __init__(self, message: str = "公钥不正确。") -> None:
        super().__init__(message)


def _as_bytes(data: bytes | None) -> bytes:
    return b"" if data is None else bytes(data)


def _key_size(key: RSA.RsaKey) -> int:
    return (key.n.bit_length() + 7) // 8


def _int_to_bytes(value: int) -> bytes:
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def _pem_decode(data: bytes) -> tuple[str, bytes] | None:
    match = _PEM_BLOCK.search(data)
    if match is None:
        return None
    block_type = match.group(1).decode("ascii", errors="replace")
    body = b"".join(
        line.strip() for line in match.group(2).splitlines() if b":" not in line
    )
    try:
        return block_type, base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError):
        return None


def _pem_encode(block_type: str, der: bytes) -> bytes:
    encoded = base64.b64encode(der).decode("ascii")
    lines = [
        encoded[start:start + _PEM_LINE_LENGTH]
        for start in range(0, len(encoded), _PEM_LINE_LENGTH)
    ]
    body = "".join(f"{line}\n" for line in lines)
    return f"-----BEGIN {block_type}-----\n{body}-----END {block_type}-----\n".encode("ascii")


def _parse_pkix_public_key(der: bytes) -> RSA.RsaKey:
    try:
        spki = DerSequence().decode(der, strict=True)
        if len(spki) != 2:
            raise ValueError("wrong number of elements")
        algorithm = DerSequence().decode(spki[0], strict=True)
        oid = DerObjectId().decode(algorithm[0], strict=True).value
    except (ValueError, IndexError, TypeError, EOFError) as exc:
        raise ValueError("x509: malformed public key") from exc
    if oid != _RSA_ENCRYPTION_OID:
        raise DecodePublicKeyError()
    try:
        key = RSA.import_key(der)
    except (ValueError, IndexError, TypeError) as exc:
        raise ValueError("x509: malformed RSA public key") from exc
    if key.has_private():
        raise DecodePublicKeyError()
    return key


def convert_public_key(public_key: bytes) -> RSA.RsaKey:
    """Parse a PEM ``PUBLIC KEY`` block holding an RSA key."""
    decoded = _pem_decode(_as_bytes(public_key))
    if decoded is None or decoded[0] != BLOCK_TYPE_PUBLIC_KEY:
        raise DecodePublicKeyError()
    return _parse_pkix_public_key(decoded[1])


def convert_pub_key(public_key: RSA.RsaKey) -> bytes:
    """Encode the public part of an RSA key as a PEM ``PUBLIC KEY`` block."""
    if not isinstance(public_key, RSA.RsaKey):
        raise TypeError("public key must be an RSA key")
    der = public_key.publickey().export_key(format="DER")
    return _pem_encode(BLOCK_TYPE_PUBLIC_KEY, der)


def encrypt_public_key(pub_key: RSA.RsaKey, data_clear: bytes | None) -> bytes:
    """Encrypt with the public key using PKCS#1 v1.5 padding."""
    return PKCS1_v1_5.new(pub_key).encrypt(_as_bytes(data_clear))


def encrypt_pub_key(public_key: bytes, data_clear: bytes | None) -> bytes:
    """Encrypt with a PEM-encoded public key using PKCS#1 v1.5 padding."""
    return encrypt_public_key(convert_public_key(public_key), data_clear)


def decrypt_private_key(private_key: RSA.RsaKey, data_cipher: bytes | None) -> bytes:
    """Decrypt PKCS#1 v1.5 ciphertext with the private key."""
    if not private_key.has_private():
        raise ValueError("crypto/rsa: private key required")
    sentinel = object()
    try:
        result = PKCS1_v1_5.new(private_key).decrypt(_as_bytes(data_cipher), sentinel)
    except ValueError as exc:
        raise ValueError("crypto/rsa: decryption error") from exc
    if result is sentinel:
        raise ValueError("crypto/rsa: decryption error")
    return result


def encrypt_private_key(private_key: RSA.RsaKey, data_clear: bytes | None) -> bytes:
    """Transform data with the private key as an unhashed PKCS#1 v1.5 signature."""
    if not private_key.has_private():
        raise ValueError("crypto/rsa: private key required")
    data = _as_bytes(data_clear)
    k = _key_size(private_key)
    if k < len(data) + 11:
        raise ValueError("crypto/rsa: message too long for RSA key size")
    em = b"\x00\x01" + b"\xff" * (k - len(data) - 3) + b"\x00" + data
    signature = pow(int.from_bytes(em, "big"), private_key.d, private_key.n)
    return signature.to_bytes(k, "big")


def decrypt_public_key(public_key: RSA.RsaKey, data_cipher: bytes | None) -> bytes:
    """Recover data transformed by :func:`encrypt_private_key`."""
    return public_decrypt(public_key, None, None, _as_bytes(data_cipher))


def decrypt_pub_key(public_key: bytes, data_cipher: bytes | None) -> bytes:
    """Recover data with a PEM-encoded public key."""
    return decrypt_public_key(convert_public_key(public_key), data_cipher)


def pkcs1v15_hash_info(hash_name: str | None, in_len: int) -> tuple[int, bytes | None]:
    """Return ``(hash_len, prefix)`` for a hash; ``None`` means no hash at all."""
    if hash_name is None:
        return in_len, None
    name = hash_name.lower().replace("-", "_")
    hash_len = _HASH_SIZES.get(name)
    if hash_len is None:
        raise ValueError("crypto/rsa: unsupported hash function")
    if in_len != hash_len:
        raise ValueError("crypto/rsa: input must be hashed message")
    prefix = HASH_PREFIXES.get(name)
    if prefix is None:
        raise ValueError("crypto/rsa: unsupported hash function")
    return hash_len, prefix


def public_decrypt(
    pub: RSA.RsaKey,
    hash_name: str | None,
    hashed: bytes | None,
    sig: bytes,
) -> bytes:
    """Apply the public exponent to ``sig`` and strip the PKCS#1 v1.5 padding."""
    hash_len, prefix = pkcs1v15_hash_info(hash_name, len(_as_bytes(hashed)))
    t_len = len(prefix or b"") + hash_len
    k = _key_size(pub)
    if k < t_len + 11:
        raise ValueError("length illegal")
    m = pow(int.from_bytes(_as_bytes(sig), "big"), pub.e, pub.n)
    return un_left_pad(left_pad(_int_to_bytes(m), k))


def left_pad(data: bytes, size: int) -> bytes:
    """Zero-fill ``data`` on the left to ``size`` bytes, keeping its leading bytes if longer."""
    data = _as_bytes(data)
    n = min(len(data), size)
    return bytes(size - n) + data[:n]


def un_left_pad(data: bytes) -> bytes:
    """Strip a ``00 01 FF.. 00`` style padding from the front of ``data``."""
    data = _as_bytes(data)
    if len(data) < 2:
        raise ValueError("crypto/rsa: data too short to unpad")
    skip = 2
    for byte in data[2:]:
        if byte == 0xFF:
            skip += 1
            continue
        if byte == data[0]:
            skip += data[1]
        break
    if skip > len(data):
        raise ValueError("crypto/rsa: invalid padding")
    return data[skip:]