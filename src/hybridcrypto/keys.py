"""Key pair generation and management for hybridcrypto."""

import logging
from dataclasses import dataclass
from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    PublicFormat,
    load_der_public_key,
)

from .config import DEFAULT_KEY_PARAMETERS, KeyParameters
from .digest import digest, digest_hex
from .types import KeyGenerationError

logger = logging.getLogger(__name__)


def generate_key_pair(parameters: Optional[KeyParameters] = None) -> RSAPrivateKey:
    """
    Generate a new RSA private key.

    Args:
        parameters: Modulus size and public exponent (default: 2048 bits, 65537)

    Returns:
        RSA private key

    Raises:
        KeyGenerationError: If the platform cannot generate the key
    """
    params = parameters or DEFAULT_KEY_PARAMETERS
    try:
        return rsa.generate_private_key(
            public_exponent=params.public_exponent,
            key_size=params.modulus_bits,
        )
    except (UnsupportedAlgorithm, ValueError) as e:
        logger.error("RSA key generation failed for %d-bit modulus: %s", params.modulus_bits, e)
        raise KeyGenerationError(f"Cannot generate {params.modulus_bits}-bit RSA key: {e}") from e


def public_key_to_bytes(public_key: RSAPublicKey) -> bytes:
    """Convert an RSA public key to its canonical DER SubjectPublicKeyInfo encoding."""
    return public_key.public_bytes(Encoding.DER, PublicFormat.SubjectPublicKeyInfo)


def public_key_from_bytes(data: bytes) -> RSAPublicKey:
    """Load an RSA public key from DER SubjectPublicKeyInfo bytes."""
    key = load_der_public_key(data)
    if not isinstance(key, RSAPublicKey):
        raise ValueError(f"Expected an RSA public key, got {type(key).__name__}")
    return key


def fingerprint(public_key: RSAPublicKey) -> bytes:
    """
    Compute the fingerprint of a public key.

    The fingerprint is the SHA-512 digest of the DER encoding and is the
    value a primary key signs when certifying a sub key.

    Args:
        public_key: RSA public key

    Returns:
        64-byte fingerprint
    """
    return digest(public_key_to_bytes(public_key))


@dataclass(frozen=True)
class KeyPair:
    """
    An RSA key pair with the parameters it was generated with.

    Attributes:
        private_key: The RSA private key.
        parameters: Modulus size and exponent of the key.
    """

    private_key: RSAPrivateKey
    parameters: KeyParameters = DEFAULT_KEY_PARAMETERS

    @classmethod
    def generate(cls, parameters: Optional[KeyParameters] = None) -> "KeyPair":
        """Generate a fresh key pair."""
        params = parameters or DEFAULT_KEY_PARAMETERS
        return cls(private_key=generate_key_pair(params), parameters=params)

    @classmethod
    def from_private_key(cls, private_key: RSAPrivateKey) -> "KeyPair":
        """Wrap an existing RSA private key, recovering its parameters."""
        return cls(private_key=private_key, parameters=KeyParameters.from_key(private_key))

    @property
    def public_key(self) -> RSAPublicKey:
        return self.private_key.public_key()

    @property
    def public_key_bytes(self) -> bytes:
        return public_key_to_bytes(self.public_key)

    @property
    def fingerprint(self) -> bytes:
        return fingerprint(self.public_key)

    @property
    def fingerprint_hex(self) -> str:
        """Fingerprint as colon-separated hex, e.g. "00:1a:ff:..."."""
        return digest_hex(self.public_key_bytes)

    def __repr__(self) -> str:
        return f"KeyPair({self.parameters.modulus_bits} bits, fp={self.fingerprint_hex[:23]})"


@dataclass(frozen=True)
class PrimaryPublicKey:
    """Public half of a primary key pair."""

    signing_public_key: RSAPublicKey
    encryption_public_key: RSAPublicKey


@dataclass(frozen=True)
class PrimaryKeyPair:
    """
    Identity root: a signing key pair and an encryption key pair.

    The signing key authenticates envelopes and certifies sub keys; the
    encryption key receives encapsulated symmetric keys.
    """

    signing: KeyPair
    encryption: KeyPair

    @classmethod
    def generate(cls, parameters: Optional[KeyParameters] = None) -> "PrimaryKeyPair":
        return cls(signing=KeyPair.generate(parameters), encryption=KeyPair.generate(parameters))

    @property
    def signing_private_key(self) -> RSAPrivateKey:
        return self.signing.private_key

    @property
    def encryption_private_key(self) -> RSAPrivateKey:
        return self.encryption.private_key

    @property
    def public(self) -> PrimaryPublicKey:
        return PrimaryPublicKey(
            signing_public_key=self.signing.public_key,
            encryption_public_key=self.encryption.public_key,
        )


@dataclass(frozen=True)
class SubPublicKey:
    """Public key of a sub key pair together with its certification signature."""

    public_key: RSAPublicKey
    primary_signature: bytes

    @property
    def fingerprint(self) -> bytes:
        return fingerprint(self.public_key)


@dataclass(frozen=True)
class SubKeyPair:
    """A key pair whose fingerprint has been signed by a primary key pair."""

    key_pair: KeyPair
    primary_signature: bytes

    @property
    def private_key(self) -> RSAPrivateKey:
        return self.key_pair.private_key

    @property
    def public(self) -> SubPublicKey:
        return SubPublicKey(
            public_key=self.key_pair.public_key,
            primary_signature=self.primary_signature,
        )
