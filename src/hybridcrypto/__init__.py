"""
hybridcrypto - Hybrid public-key encryption and signing

Python implementation of an RSA-OAEP + AES-256-CTR hybrid message protocol
with RSA signatures over SHA-512 digests, and primary/sub key certification.
"""

import logging

from .digest import digest, digest_hex
from .signature import sign, verify
from .asymmetric import encapsulate, decapsulate, max_payload_size
from .symmetric import generate_symmetric_key, sym_encrypt, sym_decrypt
from .crypto import encrypt_message, decrypt_message
from .envelope import (
    MessageEnvelope,
    encode_envelope,
    decode_envelope,
    minimum_envelope_size,
)
from .certification import (
    certify_sub_key,
    validate_sub_key,
    validate_sub_public_key,
    create_sub_key_pair,
)
from .keys import (
    KeyPair,
    PrimaryKeyPair,
    PrimaryPublicKey,
    SubKeyPair,
    SubPublicKey,
    generate_key_pair,
    public_key_to_bytes,
    public_key_from_bytes,
    fingerprint,
)
from .config import KeyParameters, DEFAULT_KEY_PARAMETERS
from .rng import RandomSource, random_bytes
from .types import (
    SYMMETRIC_KEY_SIZE,
    NONCE_SIZE,
    DIGEST_SIZE,
    SIGNATURE_SIZE,
    ENCAPSULATED_KEY_SIZE,
    FailureKind,
    DecryptionResult,
    HybridCryptoError,
    KeyGenerationError,
    EncryptionError,
    InvalidEnvelopeError,
    EnvelopeAssemblyError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Digest
    "digest",
    "digest_hex",
    # Signature
    "sign",
    "verify",
    # Asymmetric
    "encapsulate",
    "decapsulate",
    "max_payload_size",
    # Symmetric
    "generate_symmetric_key",
    "sym_encrypt",
    "sym_decrypt",
    # Crypto
    "encrypt_message",
    "decrypt_message",
    # Envelope
    "MessageEnvelope",
    "encode_envelope",
    "decode_envelope",
    "minimum_envelope_size",
    # Certification
    "certify_sub_key",
    "validate_sub_key",
    "validate_sub_public_key",
    "create_sub_key_pair",
    # Keys
    "KeyPair",
    "PrimaryKeyPair",
    "PrimaryPublicKey",
    "SubKeyPair",
    "SubPublicKey",
    "generate_key_pair",
    "public_key_to_bytes",
    "public_key_from_bytes",
    "fingerprint",
    # Config
    "KeyParameters",
    "DEFAULT_KEY_PARAMETERS",
    # Randomness
    "RandomSource",
    "random_bytes",
    # Constants
    "SYMMETRIC_KEY_SIZE",
    "NONCE_SIZE",
    "DIGEST_SIZE",
    "SIGNATURE_SIZE",
    "ENCAPSULATED_KEY_SIZE",
    # Types
    "FailureKind",
    "DecryptionResult",
    # Errors
    "HybridCryptoError",
    "KeyGenerationError",
    "EncryptionError",
    "InvalidEnvelopeError",
    "EnvelopeAssemblyError",
]
