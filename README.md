# cryptokit

Convenience functions around common symmetric ciphers, RSA and message
digests. Most functions come in several flavours that accept and return raw
bytes, hexadecimal strings or Base64 strings, so values can be passed straight
between configuration files, logs and network payloads.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### `cryptokit.aes` — AES in GCM mode

Ciphertexts are laid out as `nonce || sealed data`. A random nonce of the
requested length is generated on encryption and split off again on decryption.

```python
from cryptokit import aes

key_base64 = "MDEyMzQ1Njc4OTAxMjM0NTY3ODkwMTIzNDU2Nzg5MDE="  # 32 bytes, AES-256

ciphertext = aes.encrypt_string_gcm_base64(key_base64, 12, "Hello, World!")
nonce, plaintext = aes.decrypt_string_gcm_base64(key_base64, 12, ciphertext)
assert plaintext == "Hello, World!"
```

Hex variants (`encrypt_string_gcm_hex`, `decrypt_gcm_hex`, …) behave the same
way; `decrypt_gcm_hex` returns upper-case hex. The byte-level primitives are
`encrypt_gcm`, `decrypt_gcm`, `encrypt_gcm_nonce_length` and
`decrypt_gcm_nonce_length`.

### `cryptokit.des` — DES in CBC mode with PKCS#7 padding

By default the key doubles as the IV; the `*_alone_iv` functions take a
separate one. Hex output is upper case.

```python
from cryptokit import des

encrypted = des.encrypt_string_cbc_pkcs7_padding_string_hex("go-kit-k", "123456")
assert encrypted == "110A259757472E33"
assert des.decrypt_string_cbc_pkcs7_padding_string_hex("go-kit-k", encrypted) == "123456"
```

`pkcs7_padding` and `pkcs7_unpadding` are available on their own, and
`get_default_des_key()` returns the built-in 8-byte default key.

### `cryptokit.rsa` — RSA with PKCS#1 v1.5

Public keys are PEM `PUBLIC KEY` blocks. Besides the usual public-key
encryption / private-key decryption, the module supports "private-key
encryption" (raw PKCS#1 v1.5 signing without a digest prefix) together with
the matching public-key decryption that recovers the original data.

```python
from cryptokit import rsa

cipher = rsa.encrypt_pub_key(public_pem, b"hello")
signature = rsa.encrypt_private_key(private_key, b"hello")
assert rsa.decrypt_pub_key(public_pem, signature) == b"hello"
```

Malformed public keys raise `rsa.DecodePublicKeyError`.

### `cryptokit.md5` and `cryptokit.sha` — digests

```python
from cryptokit import md5, sha

md5.hash_string("hello world")          # '5eb63bbbe01eeed093cb22bb8f5acdc3'
sha.sha256_hash_string("hello world")   # 'b94d27b9…'
sha.sha1_hash_string("hello world")     # '2aae6c35…'
```

Each digest function also has a `*_without_error` variant that returns an
empty string instead of raising.

## Errors

Failures are raised as exceptions: invalid hex or Base64 input raises
`ValueError`, wrong key or nonce sizes raise `ValueError`, and failed
authentication or padding checks raise `ValueError` as well.