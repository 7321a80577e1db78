"""Helpers for AES-GCM, DES-CBC, RSA PKCS#1 v1.5 and MD5/SHA digests."""

__version__ = "0.1.0"
__all__ = ["aes", "des", "md5", "rsa", "sha"]