"""Type definitions for hybridcrypto."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Symmetric layer constants
SYMMETRIC_KEY_SIZE = 32
NONCE_SIZE = 16

# Digest constants
DIGEST_SIZE = 64

# Default RSA parameters
DEFAULT_MODULUS_BITS = 2048
DEFAULT_PUBLIC_EXPONENT = 65537
SIGNATURE_SIZE = DEFAULT_MODULUS_BITS // 8
ENCAPSULATED_KEY_SIZE = DEFAULT_MODULUS_BITS // 8


class FailureKind(Enum):
    """Why a message could not be decrypted."""

    MALFORMED_ENVELOPE = "malformed_envelope"
    SIGNATURE_INVALID = "signature_invalid"
    DECRYPTION_FAILED = "decryption_failed"


@dataclass(frozen=True)
class DecryptionResult:
    """
    Outcome of decrypting an envelope.

    Exactly one of ``text`` and ``failure`` is set. The failure kind is
    meant for local branching and logging; it must not be relayed to the
    sender of the envelope.
    """

    text: Optional[str] = None
    failure: Optional[FailureKind] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, text: str) -> "DecryptionResult":
        return cls(text=text)

    @classmethod
    def failed(cls, kind: FailureKind) -> "DecryptionResult":
        return cls(failure=kind)


# Exception types
class HybridCryptoError(Exception):
    """Base exception for hybridcrypto errors."""
    pass


class KeyGenerationError(HybridCryptoError):
    """The platform could not produce key material with the requested parameters."""
    pass


class EncryptionError(HybridCryptoError):
    """Encryption failed."""
    pass


class InvalidEnvelopeError(HybridCryptoError):
    """Envelope is structurally malformed."""
    pass


class EnvelopeAssemblyError(HybridCryptoError):
    """An assembled envelope does not match its expected layout."""
    pass
