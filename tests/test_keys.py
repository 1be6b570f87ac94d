"""Tests for key pairs and fingerprints."""

import pytest

from hybridcrypto.config import KeyParameters
from hybridcrypto.digest import digest, digest_hex
from hybridcrypto.keys import (
    KeyPair,
    fingerprint,
    generate_key_pair,
    public_key_from_bytes,
    public_key_to_bytes,
)
from hybridcrypto.types import DIGEST_SIZE, KeyGenerationError


class TestKeyGeneration:
    """Test RSA key generation."""

    def test_default_parameters(self, alice) -> None:
        """Keys default to a 2048-bit modulus and exponent 65537."""
        key = alice.signing.private_key
        assert key.key_size == 2048
        assert key.public_key().public_numbers().e == 65537
        assert alice.signing.parameters == KeyParameters()

    def test_primary_keys_are_distinct(self, alice) -> None:
        """Signing and encryption keys of a primary pair differ."""
        assert alice.signing.fingerprint != alice.encryption.fingerprint

    def test_unsupported_exponent(self) -> None:
        """Parameters the platform rejects raise KeyGenerationError."""
        with pytest.raises(KeyGenerationError):
            generate_key_pair(KeyParameters(public_exponent=5))

    def test_from_private_key(self, large_key) -> None:
        """Wrapping an existing key recovers its parameters."""
        wrapped = KeyPair.from_private_key(large_key.private_key)
        assert wrapped.parameters.modulus_bits == 3072
        assert wrapped.parameters.signature_size == 384


class TestFingerprint:
    """Test public key fingerprints."""

    def test_fingerprint_is_digest_of_der(self, bob) -> None:
        """Fingerprint is the SHA-512 digest of the DER public key."""
        public_key = bob.encryption.public_key
        fp = fingerprint(public_key)

        assert len(fp) == DIGEST_SIZE
        assert fp == digest(public_key_to_bytes(public_key))
        assert bob.encryption.fingerprint == fp

    def test_fingerprint_deterministic(self, bob) -> None:
        """Same key always gives the same fingerprint."""
        assert fingerprint(bob.encryption.public_key) == fingerprint(bob.encryption.public_key)

    def test_fingerprint_hex(self, bob) -> None:
        """Hex fingerprint uses the colon-separated digest format."""
        assert bob.encryption.fingerprint_hex == digest_hex(bob.encryption.public_key_bytes)

    def test_different_keys_different_fingerprints(self, alice, bob) -> None:
        assert fingerprint(alice.encryption.public_key) != fingerprint(bob.encryption.public_key)


class TestPublicKeyEncoding:
    """Test DER public key encoding."""

    def test_encode_decode(self, bob) -> None:
        """A public key survives DER encoding."""
        encoded = public_key_to_bytes(bob.encryption.public_key)
        decoded = public_key_from_bytes(encoded)

        assert decoded.public_numbers() == bob.encryption.public_key.public_numbers()

    def test_reject_garbage(self) -> None:
        """Invalid DER is rejected."""
        with pytest.raises(ValueError):
            public_key_from_bytes(b"not a key")
