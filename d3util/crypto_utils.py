"""Hashing, encoding, random data and AES-256-CBC helpers."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import secrets
import string
from typing import Union

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

Data = Union[str, bytes, bytearray, memoryview]

_ALPHANUMERIC = string.digits + string.ascii_uppercase + string.ascii_lowercase
_SPECIAL_CHARS = "!@#$%^&*()-_=+[]{};:,.<>?"
_BASE64_LINE_LENGTH = 64
_AES_KEY_SIZE = 32
_AES_IV_SIZE = 16
_AES_BLOCK_BITS = 128


class CryptoError(Exception):
    """Raised when data cannot be decoded or decrypted."""


def _to_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def sha1(data: Data) -> str:
    """SHA-1 digest of the data as lowercase hex."""
    return hashlib.sha1(_to_bytes(data)).hexdigest()


def sha256(data: Data) -> str:
    """SHA-256 digest of the data as lowercase hex."""
    return hashlib.sha256(_to_bytes(data)).hexdigest()


def md5(data: Data) -> str:
    """MD5 digest of the data as lowercase hex."""
    return hashlib.md5(_to_bytes(data)).hexdigest()


def generate_random_string(length: int, include_special_chars: bool = False) -> str:
    """Random string of letters and digits, optionally with punctuation."""
    if length < 0:
        raise ValueError("length must not be negative")
    charset = _ALPHANUMERIC + (_SPECIAL_CHARS if include_special_chars else "")
    return "".join(secrets.choice(charset) for _ in range(length))


def generate_random_bytes(length: int) -> bytes:
    """Cryptographically secure random bytes."""
    if length < 0:
        raise ValueError("length must not be negative")
    return secrets.token_bytes(length)


def base64_encode(data: Data) -> str:
    """Base64 text with a line break after every 64 characters, no trailing newline."""
    encoded = base64.b64encode(_to_bytes(data)).decode("ascii")
    return "\n".join(
        encoded[start:start + _BASE64_LINE_LENGTH]
        for start in range(0, len(encoded), _BASE64_LINE_LENGTH)
    )


def base64_decode(data: Data) -> bytes:
    """Decode base64 text; line breaks and other whitespace are ignored."""
    compact = b"".join(_to_bytes(data).split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise CryptoError(f"invalid base64 data: {exc}") from exc


def _aes_cipher(key: Data, iv: Data) -> Cipher:
    key_bytes = _to_bytes(key)
    iv_bytes = _to_bytes(iv)
    if len(key_bytes) != _AES_KEY_SIZE:
        raise ValueError("Invalid key size for AES-256")
    if len(iv_bytes) != _AES_IV_SIZE:
        raise ValueError("Invalid IV size for AES-256")
    return Cipher(algorithms.AES(key_bytes), modes.CBC(iv_bytes))


def aes_encrypt(data: Data, key: Data, iv: Data) -> str:
    """Encrypt with AES-256-CBC and PKCS#7 padding; returns base64 ciphertext."""
    cipher = _aes_cipher(key, iv)
    padder = padding.PKCS7(_AES_BLOCK_BITS).padder()
    padded = padder.update(_to_bytes(data)) + padder.finalize()
    encryptor = cipher.encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    return base64_encode(ciphertext)


def aes_decrypt(data: Data, key: Data, iv: Data) -> bytes:
    """Decrypt base64 AES-256-CBC ciphertext produced by aes_encrypt."""
    cipher = _aes_cipher(key, iv)
    ciphertext = base64_decode(data)
    try:
        decryptor = cipher.decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(_AES_BLOCK_BITS).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise CryptoError(f"decryption failed: {exc}") from exc


def hex_encode(data: Data) -> str:
    """Lowercase hex, two digits per byte."""
    return _to_bytes(data).hex()


def hex_decode(hex_string: str) -> bytes:
    """Decode hex digit pairs; a lone final digit becomes a byte of its own."""
    try:
        return bytes(
            int(hex_string[start:start + 2], 16)
            for start in range(0, len(hex_string), 2)
        )
    except ValueError as exc:
        raise ValueError(f"invalid hex string: {hex_string!r}") from exc


def hash_password(password: str, salt: str = "") -> str:
    """SHA-256 hex digest of the salt followed by the password."""
    return sha256(salt + password)


def verify_password(password: str, salt: str, password_hash: str) -> bool:
    """Check a password against a hash made by hash_password with the same salt."""
    return hmac.compare_digest(hash_password(password, salt), password_hash)