"""
Module-level settings shared by the configstore package.

These values fix the on-disk frame layout and the accepted key sizes. They are
plain constants rather than environment-driven settings: the key and the file
path are always supplied by the embedding application.
"""
# configstore/settings.py

# AES block size in bytes. The IV and every ciphertext block have this length.
BLOCK_SIZE = 16

# AES-128, AES-192 and AES-256.
VALID_KEY_SIZES = (16, 24, 32)

# Permission bits for a freshly created backing file.
DEFAULT_FILE_MODE = 0o644

JSON_ENCODING = "utf-8"
