"""Key parameter configuration for hybridcrypto."""

from dataclasses import dataclass
from typing import Union

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from .types import DEFAULT_MODULUS_BITS, DEFAULT_PUBLIC_EXPONENT

# OAEP overhead with SHA-1: 2 * hash length + 2
OAEP_SHA1_OVERHEAD = 2 * 20 + 2

MIN_MODULUS_BITS = 1024


@dataclass(frozen=True)
class KeyParameters:
    """
    Parameters an RSA key pair is generated with.

    Every size used to parse an envelope is derived from these values, so
    keys of different moduli can coexist without a global constant.

    Attributes:
        modulus_bits: RSA modulus size in bits.
        public_exponent: RSA public exponent.
    """

    modulus_bits: int = DEFAULT_MODULUS_BITS
    public_exponent: int = DEFAULT_PUBLIC_EXPONENT

    def __post_init__(self) -> None:
        if self.modulus_bits < MIN_MODULUS_BITS:
            raise ValueError(
                f"Modulus must be at least {MIN_MODULUS_BITS} bits, got {self.modulus_bits}"
            )
        if self.public_exponent < 3 or self.public_exponent % 2 == 0:
            raise ValueError(f"Public exponent must be odd and at least 3, got {self.public_exponent}")

    @property
    def modulus_bytes(self) -> int:
        return (self.modulus_bits + 7) // 8

    @property
    def signature_size(self) -> int:
        """Size of a signature made with a key of this modulus."""
        return self.modulus_bytes

    @property
    def encapsulated_key_size(self) -> int:
        """Size of an OAEP ciphertext made with a key of this modulus."""
        return self.modulus_bytes

    @property
    def max_encapsulation_payload(self) -> int:
        """Largest payload OAEP (SHA-1) can wrap under this modulus."""
        return self.modulus_bytes - OAEP_SHA1_OVERHEAD

    @classmethod
    def from_key(cls, key: Union[RSAPrivateKey, RSAPublicKey]) -> "KeyParameters":
        """
        Recover the parameters of an existing RSA key.

        Args:
            key: RSA private or public key

        Returns:
            KeyParameters matching the key
        """
        if isinstance(key, RSAPrivateKey):
            numbers = key.public_key().public_numbers()
        else:
            numbers = key.public_numbers()
        return cls(modulus_bits=key.key_size, public_exponent=numbers.e)


DEFAULT_KEY_PARAMETERS = KeyParameters()
