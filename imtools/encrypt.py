"""MD5 hashing and AES-CBC encryption with PKCS#7 padding."""

from __future__ import annotations

import hashlib

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

__all__ = ["EncryptionError", "md5", "aes_encrypt", "aes_decrypt"]

_BLOCK_SIZE = 16
_KEY_SIZES = (16, 24, 32)


class EncryptionError(ValueError):
    """Raised when encryption or decryption cannot be carried out."""


def md5(text: str, salt: str | None = None) -> str:
    """Hex MD5 digest of text, with an optional salt appended."""
    digest = hashlib.md5(text.encode("utf-8"))
    if salt is not None:
        digest.update(salt.encode("utf-8"))
    return digest.hexdigest()


def _cipher(key: bytes) -> Cipher:
    if len(key) not in _KEY_SIZES:
        raise EncryptionError(f"NewCipher failed: invalid key size {len(key)}")
    return Cipher(algorithms.AES(bytes(key)), modes.CBC(bytes(key[:_BLOCK_SIZE])))


def aes_encrypt(data: bytes, key: bytes) -> bytes:
    """Encrypt with AES-CBC, using the key's first block as the IV."""
    cipher = _cipher(key)
    padding = _BLOCK_SIZE - len(data) % _BLOCK_SIZE
    padded = bytes(data) + bytes([padding]) * padding
    encryptor = cipher.encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def aes_decrypt(data: bytes, key: bytes) -> bytes:
    """Decrypt AES-CBC data produced by aes_encrypt and strip the padding."""
    cipher = _cipher(key)
    if len(data) % _BLOCK_SIZE:
        raise EncryptionError("input not full blocks")
    decryptor = cipher.decryptor()
    plain = decryptor.update(bytes(data)) + decryptor.finalize()
    if not plain:
        raise EncryptionError("data is nil")
    padding = plain[-1]
    if padding > len(plain):
        raise EncryptionError("invalid padding")
    return plain[: len(plain) - padding]