"""
Whole-file storage for the encrypted frame.

`FileStorage` is the only place that touches the file system. Every `OSError`
is re-raised as `StorageError`; nothing is retried.
"""
# configstore/storage.py

import logging
import os
import stat
from pathlib import Path

from configstore.errors import StorageError
from configstore.settings import DEFAULT_FILE_MODE

logger = logging.getLogger(__name__)


class FileStorage:
    """Reads and overwrites a single file as one byte string.

    Args:
        path (str or Path): The backing file.
        atomic (bool): If True, `write_all` writes a sibling temp file and
            renames it over the target, so a crash never leaves a truncated
            frame. If False (the default), the file is truncated and rewritten
            in place.
        file_mode (int): Permission bits used when the file is created. Atomic
            writes carry the existing file's mode over to the replacement.
    """

    def __init__(self, path, atomic=False, file_mode=DEFAULT_FILE_MODE):
        self.path = Path(path)
        self.atomic = atomic
        self.file_mode = file_mode

    def exists(self) -> bool:
        return self.path.exists()

    def create(self):
        """Creates an empty file at `path`, leaving an existing one untouched."""
        try:
            self.path.touch(mode=self.file_mode, exist_ok=True)
        except OSError as e:
            raise StorageError(f"could not create {self.path}: {e}") from e
        logger.debug("Created empty config file %s", self.path)

    def read_all(self) -> bytes:
        try:
            return self.path.read_bytes()
        except OSError as e:
            raise StorageError(f"could not read {self.path}: {e}") from e

    def write_all(self, data: bytes):
        """Replaces the whole content of the file with `data`.

        Returns once the bytes are flushed and the file is closed. After a
        failed non-atomic write the file content is undefined.
        """
        try:
            if self.atomic:
                self._replace(data)
            else:
                with open(self.path, "wb") as f:
                    self._write(f, data)
        except OSError as e:
            raise StorageError(f"could not write {self.path}: {e}") from e

    @staticmethod
    def _write(f, data):
        f.write(data)
        f.flush()
        os.fsync(f.fileno())

    def _replace(self, data):
        # The temp file takes the target's current mode, or file_mode for a new file.
        try:
            mode = stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            mode = self.file_mode
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
            with os.fdopen(fd, "wb") as f:
                os.chmod(tmp, mode)
                self._write(f, data)
            os.replace(tmp, self.path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
