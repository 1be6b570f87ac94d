"""
Signatures over SHA-512 digests.

A message is first reduced to its SHA-512 digest; the digest is then
signed with RSA PKCS#1 v1.5 using SHA-1 as the signature hash. For
envelopes this pairing matches existing counterpart implementations.

Sub key certifications also go through sign(), so the fingerprint is
hashed once more before signing. Counterparts that sign the fingerprint
directly produce certifications this module does not accept.
"""

import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from .digest import digest

logger = logging.getLogger(__name__)


def _signature_hash() -> hashes.HashAlgorithm:
    return hashes.SHA1()


def sign(message: bytes, private_key: RSAPrivateKey) -> bytes:
    """
    Sign a message.

    Args:
        message: Bytes to sign
        private_key: RSA signing key

    Returns:
        Signature, as long as the key's modulus (256 bytes at 2048 bits)
    """
    return private_key.sign(digest(message), padding.PKCS1v15(), _signature_hash())


def verify(message: bytes, signature: bytes, public_key: RSAPublicKey) -> bool:
    """
    Verify a signature made by sign().

    Args:
        message: Bytes that were signed
        signature: Signature to check
        public_key: RSA public key of the signer

    Returns:
        True if the signature is valid, False otherwise (never raises for
        malformed signatures, wrong keys or tampered messages)
    """
    if not isinstance(signature, (bytes, bytearray, memoryview)):
        logger.debug("Signature is not bytes-like: %s", type(signature).__name__)
        return False

    if len(signature) != (public_key.key_size + 7) // 8:
        logger.debug("Signature length %d does not match key size", len(signature))
        return False

    try:
        public_key.verify(bytes(signature), digest(message), padding.PKCS1v15(), _signature_hash())
        return True
    except InvalidSignature:
        return False
