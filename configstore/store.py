"""
This module provides `EncryptedConfigStore`, the public entry point of the package.

The store persists one configuration value to one file, encrypted at rest. It is
responsible for:
- Validating the key and creating the backing file on construction.
- Saving: serialize, pad, encrypt with a fresh IV, frame and overwrite the file.
- Loading: read, de-frame, decrypt, unpad and deserialize, optionally falling
  back to a caller-supplied default.
- Serializing concurrent calls from threads that share one store instance.

Processes that open the same file independently are not coordinated.
"""
# configstore/store.py

import logging
import threading
from pathlib import Path
from typing import Generic, NamedTuple, Optional, TypeVar

from configstore import cipher, frame
from configstore.errors import ConfigStoreError
from configstore.serializers import JsonSerializer
from configstore.settings import BLOCK_SIZE
from configstore.storage import FileStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LoadResult(NamedTuple, Generic[T]):
    """The outcome of `load_or_default`: the value in use and the error, if any."""
    value: T
    error: Optional[ConfigStoreError]


class EncryptedConfigStore(Generic[T]):
    """Persists a configuration value of type T to an AES-CBC encrypted file."""

    def __init__(self, path, key, serializer=None, storage=None):
        """Binds the store to a file and a key, creating the file if it is missing.

        Args:
            path (str or Path): The backing file.
            key (bytes or str): A 16, 24 or 32 byte secret.
            serializer: An object with `encode`/`decode`. Defaults to `JsonSerializer`.
            storage: A `FileStorage`-like object. Defaults to `FileStorage(path)`.
                When given, its own `path` names the backing file and `path` is
                only used for storages that do not expose one.

        Raises:
            InvalidKeyType: If the key is not text or bytes. No file is created.
            InvalidKeyLength: If the key has the wrong length. No file is created.
            StorageError: If the missing file cannot be created.
        """
        self._key = cipher.normalize_key(key)
        self.storage = storage if storage is not None else FileStorage(path)
        self.path = Path(getattr(self.storage, "path", path))
        self.serializer = serializer if serializer is not None else JsonSerializer()
        self._lock = threading.Lock()

        if not self.storage.exists():
            self.storage.create()

    def __repr__(self):
        return f"{type(self).__name__}(path={str(self.path)!r})"

    def save(self, value: T):
        """Encrypts `value` and overwrites the backing file with the new frame.

        Raises:
            SerializationError: If the value cannot be encoded.
            CryptoError: If no IV can be generated.
            StorageError: If the write fails. The file content is then undefined
                and the caller should save again.
        """
        with self._lock:
            payload = self.serializer.encode(value)
            iv = cipher.new_iv()
            ciphertext = cipher.encrypt(payload, self._key, iv)
            self.storage.write_all(frame.pack(iv, ciphertext))
            logger.debug("Saved %d encrypted bytes to %s", len(ciphertext) + len(iv), self.path)

    def load(self) -> T:
        """Reads and decrypts the stored value.

        Raises:
            StorageError: If the file cannot be read.
            InvalidFrame: If the file is shorter than one IV, e.g. nothing was saved yet.
            CorruptDataError: If the ciphertext or its padding is malformed.
            SerializationError: If the plaintext cannot be decoded.
        """
        with self._lock:
            iv, ciphertext = frame.unpack(self.storage.read_all())
            payload = cipher.decrypt(ciphertext, self._key, iv)
            value = self.serializer.decode(payload)
        logger.debug("Loaded config from %s", self.path)
        return value

    def load_or_default(self, default: T) -> LoadResult[T]:
        """Loads the stored value, or returns `default` together with the reason.

        Unpacks as `config, err = store.load_or_default({})`. `err` is None on
        success; otherwise it is the `ConfigStoreError` that prevented the load,
        which lets callers tell a first run (`InvalidFrame`) from corrupt data.
        """
        try:
            return LoadResult(self.load(), None)
        except ConfigStoreError as e:
            logger.warning("Could not load config from %s (%s). Using defaults.", self.path, e)
            return LoadResult(default, e)

    def is_empty(self) -> bool:
        """Returns True if the backing file holds fewer bytes than one IV.

        This only checks the length. A fresh file and a corrupt file truncated
        below one IV both count as empty; use `load` to tell them apart.

        Raises:
            StorageError: If the file cannot be read, e.g. it was deleted.
        """
        with self._lock:
            return len(self.storage.read_all()) < BLOCK_SIZE
