"""
configstore: persist one structured configuration value to a single encrypted file.

Typical use:

    store = EncryptedConfigStore("./cfg.dat", b"0123456789abcdef")
    store.save({"user": "a", "pass": "b"})
    config, err = store.load_or_default({})
"""
from configstore.errors import (
    ConfigStoreError,
    CorruptDataError,
    CryptoError,
    InvalidFrame,
    InvalidKeyLength,
    InvalidKeyType,
    SerializationError,
    StorageError,
)
from configstore.serializers import DataclassSerializer, JsonSerializer, Serializer
from configstore.storage import FileStorage
from configstore.store import EncryptedConfigStore, LoadResult

__all__ = [
    "ConfigStoreError",
    "CorruptDataError",
    "CryptoError",
    "DataclassSerializer",
    "EncryptedConfigStore",
    "FileStorage",
    "InvalidFrame",
    "InvalidKeyLength",
    "InvalidKeyType",
    "JsonSerializer",
    "LoadResult",
    "SerializationError",
    "Serializer",
    "StorageError",
]
