"""Server utilities: debug logging, string and file helpers, cryptography and audit logging."""

__version__ = "1.0.0"
__all__ = ["audit", "crypto_utils", "debug", "file_utils", "string_utils"]