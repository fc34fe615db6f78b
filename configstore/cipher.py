"""
This module implements the cipher codec used to encrypt configuration payloads.

It uses the `cryptography` library (AES in cipher-block-chaining mode with
PKCS#7 padding) and is responsible for:
- Validating and normalising the caller-supplied symmetric key.
- Generating a fresh random IV for every encryption.
- Padding, encrypting, decrypting and strictly unpadding payloads.

The codec provides confidentiality only. There is no authentication tag, so a
tampered ciphertext that still unpads cleanly decrypts to wrong bytes.
"""
# configstore/cipher.py

import os

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from configstore.errors import CorruptDataError, CryptoError, InvalidKeyLength, InvalidKeyType
from configstore.settings import BLOCK_SIZE, VALID_KEY_SIZES

_BLOCK_BITS = BLOCK_SIZE * 8


def normalize_key(key) -> bytes:
    """Returns the key as bytes after checking its length.

    Args:
        key (bytes or str): The raw secret. Text keys are UTF-8 encoded.

    Returns:
        bytes: The key material.

    Raises:
        InvalidKeyType: If the key is not text or a bytes-like object.
        InvalidKeyLength: If the key is not 16, 24 or 32 bytes long.
    """
    if isinstance(key, str):
        key = key.encode("utf-8")
    # bytes(int) would build a zero-filled key of that length
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise InvalidKeyType(key)
    key = bytes(key)
    if len(key) not in VALID_KEY_SIZES:
        raise InvalidKeyLength(len(key))
    return key


def new_iv() -> bytes:
    """Generates a cryptographically random IV of one block."""
    try:
        return os.urandom(BLOCK_SIZE)
    except (OSError, NotImplementedError) as e:
        raise CryptoError(f"could not read {BLOCK_SIZE} random bytes: {e}") from e


def pad(data: bytes) -> bytes:
    """Pads data to a multiple of the block size.

    An already aligned input still gets a full block of padding, so the result
    is always longer than the input.
    """
    padder = padding.PKCS7(_BLOCK_BITS).padder()
    return padder.update(data) + padder.finalize()


def unpad(data: bytes) -> bytes:
    """Strips and validates PKCS#7 padding.

    Raises:
        CorruptDataError: If the buffer is empty, not block aligned, or its
            trailing bytes are not a valid padding run.
    """
    if not data or len(data) % BLOCK_SIZE:
        raise CorruptDataError("padded data is empty or not block aligned")
    unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
    try:
        return unpadder.update(data) + unpadder.finalize()
    except ValueError as e:
        raise CorruptDataError("invalid padding bytes") from e


def _cipher(key, iv):
    try:
        return Cipher(algorithms.AES(key), modes.CBC(iv))
    except ValueError as e:
        raise CryptoError(f"could not set up AES-CBC: {e}") from e


def encrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Pads and encrypts data with AES-CBC.

    Args:
        data (bytes): The plaintext.
        key (bytes): A 16, 24 or 32 byte key.
        iv (bytes): A fresh block-sized IV. It must never be reused with the same key.

    Returns:
        bytes: The ciphertext, a non-empty multiple of the block size.
    """
    encryptor = _cipher(key, iv).encryptor()
    return encryptor.update(pad(data)) + encryptor.finalize()


def decrypt(ciphertext: bytes, key: bytes, iv: bytes) -> bytes:
    """Decrypts AES-CBC ciphertext and removes its padding.

    Raises:
        CorruptDataError: If the ciphertext is empty or not a multiple of the
            block size, or the decrypted padding is invalid.
    """
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise CorruptDataError(
            f"ciphertext length {len(ciphertext)} is not a positive multiple of {BLOCK_SIZE}"
        )
    decryptor = _cipher(key, iv).decryptor()
    return unpad(decryptor.update(ciphertext) + decryptor.finalize())
