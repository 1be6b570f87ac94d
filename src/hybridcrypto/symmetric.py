"""AES-256-CTR encryption of message payloads."""

from typing import Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .rng import RandomSource, random_bytes
from .types import NONCE_SIZE, SYMMETRIC_KEY_SIZE


def _check_key(key: bytes) -> None:
    if len(key) != SYMMETRIC_KEY_SIZE:
        raise ValueError(f"Symmetric key must be {SYMMETRIC_KEY_SIZE} bytes, got {len(key)}")


def generate_symmetric_key(random_source: Optional[RandomSource] = None) -> bytes:
    """Generate a fresh 32-byte symmetric key."""
    return random_bytes(SYMMETRIC_KEY_SIZE, random_source)


def sym_encrypt(
    plaintext: bytes,
    key: bytes,
    random_source: Optional[RandomSource] = None,
) -> bytes:
    """
    Encrypt plaintext with AES-256-CTR under a fresh nonce.

    Args:
        plaintext: Bytes to encrypt
        key: 32-byte symmetric key
        random_source: Source for the nonce (default: os.urandom)

    Returns:
        nonce (16 bytes) || ciphertext (same length as plaintext)
    """
    _check_key(key)
    nonce = random_bytes(NONCE_SIZE, random_source)

    encryptor = Cipher(algorithms.AES(key), modes.CTR(nonce)).encryptor()
    return nonce + encryptor.update(plaintext) + encryptor.finalize()


def sym_decrypt(blob: bytes, key: bytes) -> bytes:
    """
    Decrypt a blob produced by sym_encrypt().

    CTR mode has no integrity check: a wrong key yields garbage rather
    than an error. Authenticate the blob before calling this.

    Args:
        blob: nonce || ciphertext
        key: 32-byte symmetric key

    Returns:
        Plaintext bytes

    Raises:
        ValueError: If the key has the wrong size or blob is shorter than a nonce
    """
    _check_key(key)
    if len(blob) < NONCE_SIZE:
        raise ValueError(f"Blob too short: {len(blob)} bytes (minimum {NONCE_SIZE})")

    nonce = blob[:NONCE_SIZE]
    decryptor = Cipher(algorithms.AES(key), modes.CTR(nonce)).decryptor()
    return decryptor.update(blob[NONCE_SIZE:]) + decryptor.finalize()
