"""
Certification of sub keys by a primary key.

A primary key pair vouches for a sub key by signing the sub key's public
key fingerprint with its signing key. Chains are exactly one link long:
a sub key cannot certify further keys.
"""

import logging
from typing import Optional

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from .config import KeyParameters
from .keys import (
    KeyPair,
    PrimaryKeyPair,
    PrimaryPublicKey,
    SubKeyPair,
    SubPublicKey,
    fingerprint,
)
from .signature import sign, verify

logger = logging.getLogger(__name__)


def certify_sub_key(
    sub_public_key: Optional[RSAPublicKey],
    primary_key_pair: Optional[PrimaryKeyPair],
) -> Optional[bytes]:
    """
    Sign a sub key's fingerprint with a primary signing key.

    Args:
        sub_public_key: Public key to certify
        primary_key_pair: Primary key pair to certify with

    Returns:
        The certification signature, or None if either input is None
    """
    if sub_public_key is None or primary_key_pair is None:
        return None
    return sign(fingerprint(sub_public_key), primary_key_pair.signing_private_key)


def validate_sub_key(
    sub_public_key: Optional[RSAPublicKey],
    signature: Optional[bytes],
    primary_public_key: Optional[PrimaryPublicKey],
) -> bool:
    """
    Check that a sub key was certified by a primary key.

    Args:
        sub_public_key: Public key that was certified
        signature: Certification signature from certify_sub_key()
        primary_public_key: Public half of the certifying primary key pair

    Returns:
        True if the certification is valid, False otherwise (including
        when any input is None)
    """
    if sub_public_key is None or signature is None or primary_public_key is None:
        return False
    return verify(fingerprint(sub_public_key), signature, primary_public_key.signing_public_key)


def validate_sub_public_key(
    sub_public: Optional[SubPublicKey],
    primary_public_key: Optional[PrimaryPublicKey],
) -> bool:
    """Validate a sub public key against the signature it carries."""
    if sub_public is None:
        return False
    return validate_sub_key(sub_public.public_key, sub_public.primary_signature, primary_public_key)


def create_sub_key_pair(
    primary_key_pair: PrimaryKeyPair,
    parameters: Optional[KeyParameters] = None,
) -> SubKeyPair:
    """
    Generate a new key pair and certify it with a primary key pair.

    Args:
        primary_key_pair: Primary key pair that vouches for the new key
        parameters: Key parameters for the sub key (default: 2048 bits)

    Returns:
        Certified SubKeyPair
    """
    key_pair = KeyPair.generate(parameters)
    signature = certify_sub_key(key_pair.public_key, primary_key_pair)
    logger.debug("Certified sub key %s", key_pair.fingerprint_hex[:23])
    return SubKeyPair(key_pair=key_pair, primary_signature=signature)
