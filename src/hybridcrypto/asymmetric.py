"""RSA-OAEP key encapsulation."""

import logging
from typing import Optional

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from .config import KeyParameters
from .types import EncryptionError

logger = logging.getLogger(__name__)


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA1()),
        algorithm=hashes.SHA1(),
        label=None,
    )


def max_payload_size(public_key: RSAPublicKey) -> int:
    """Largest payload encapsulate() accepts for this key."""
    return KeyParameters.from_key(public_key).max_encapsulation_payload


def encapsulate(payload: bytes, public_key: RSAPublicKey) -> bytes:
    """
    Encrypt a small payload (typically a symmetric key) for a recipient.

    OAEP padding is randomized, so identical inputs produce different
    ciphertexts.

    Args:
        payload: Bytes to wrap, at most max_payload_size(public_key)
        public_key: Recipient's RSA public key

    Returns:
        Ciphertext, as long as the key's modulus

    Raises:
        EncryptionError: If the payload is too large for the key
    """
    limit = max_payload_size(public_key)
    if len(payload) > limit:
        raise EncryptionError(f"Payload too large: {len(payload)} bytes (max {limit})")

    try:
        return public_key.encrypt(payload, _oaep())
    except ValueError as e:
        raise EncryptionError(f"RSA encryption failed: {e}") from e


def decapsulate(ciphertext: bytes, private_key: RSAPrivateKey) -> Optional[bytes]:
    """
    Decrypt a payload wrapped by encapsulate().

    Args:
        ciphertext: Wrapped payload
        private_key: Recipient's RSA private key

    Returns:
        The payload, or None if padding validation failed (wrong key or
        corrupted ciphertext)
    """
    try:
        return private_key.decrypt(bytes(ciphertext), _oaep())
    except ValueError:
        # Raised on bad padding and on ciphertext of the wrong length
        logger.debug("OAEP decryption failed")
        return None
