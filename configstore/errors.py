"""
Exception types raised by the configstore package.

Every failure surfaces as a subclass of `ConfigStoreError`, so callers can
catch one type while still telling apart:
- `InvalidFrame`: the backing file is too short to hold a frame (e.g. nothing saved yet).
- `CorruptDataError`: the frame is present but does not decrypt to validly padded data.
- `StorageError`, `CryptoError`, `SerializationError`: system or payload faults.
"""
# configstore/errors.py


class ConfigStoreError(Exception):
    """Base class for all configstore errors."""


class InvalidKeyLength(ConfigStoreError, ValueError):
    """Raised when a key is not 16, 24 or 32 bytes long."""

    def __init__(self, length):
        super().__init__(f"key length must be 16, 24 or 32 bytes, got {length}")
        self.length = length


class InvalidKeyType(ConfigStoreError, TypeError):
    """Raised when a key is neither text nor a bytes-like object."""

    def __init__(self, key):
        super().__init__(f"key must be str or bytes-like, got {type(key).__name__}")


class StorageError(ConfigStoreError):
    """Raised when the backing file cannot be created, read or written."""


class CryptoError(ConfigStoreError):
    """Raised when the random source or the cipher cannot be set up."""


class SerializationError(ConfigStoreError):
    """Raised when a configuration value cannot be encoded or decoded."""


class InvalidFrame(ConfigStoreError):
    """Raised when the persisted bytes are shorter than one IV."""


class CorruptDataError(ConfigStoreError):
    """Raised when the ciphertext or its padding is malformed."""
