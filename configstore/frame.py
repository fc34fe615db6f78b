"""
Framing of the persisted bytes: `IV || ciphertext`.

There is no magic number, version or integrity tag in the frame.
"""
# configstore/frame.py

from configstore.errors import InvalidFrame
from configstore.settings import BLOCK_SIZE


def pack(iv: bytes, ciphertext: bytes) -> bytes:
    if len(iv) != BLOCK_SIZE:
        raise ValueError(f"IV must be {BLOCK_SIZE} bytes, got {len(iv)}")
    return iv + ciphertext


def unpack(data: bytes):
    """Splits a frame into its IV and ciphertext.

    Args:
        data (bytes): The whole content of the backing file.

    Returns:
        tuple: `(iv, ciphertext)`.

    Raises:
        InvalidFrame: If the data is shorter than one IV.
    """
    if len(data) < BLOCK_SIZE:
        raise InvalidFrame(f"encrypted data is {len(data)} bytes, need at least {BLOCK_SIZE}")
    return data[:BLOCK_SIZE], data[BLOCK_SIZE:]
