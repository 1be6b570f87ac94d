"""Shared fixtures. RSA key generation is slow, so keys are generated once per session."""

import hashlib
import itertools

import pytest

from hybridcrypto.config import KeyParameters
from hybridcrypto.keys import KeyPair, PrimaryKeyPair


@pytest.fixture(scope="session")
def alice() -> PrimaryKeyPair:
    """Alice's primary key pair (sender in most tests)."""
    return PrimaryKeyPair.generate()


@pytest.fixture(scope="session")
def bob() -> PrimaryKeyPair:
    """Bob's primary key pair (recipient in most tests)."""
    return PrimaryKeyPair.generate()


@pytest.fixture(scope="session")
def eve() -> PrimaryKeyPair:
    """An unrelated key pair."""
    return PrimaryKeyPair.generate()


@pytest.fixture(scope="session")
def large_key() -> KeyPair:
    """A 3072-bit key pair for mixed key size tests."""
    return KeyPair.generate(KeyParameters(modulus_bits=3072))


@pytest.fixture
def deterministic_source():
    """Reproducible randomness: SHA-256 over a counter."""
    counter = itertools.count()

    def source(num_bytes: int) -> bytes:
        out = b""
        while len(out) < num_bytes:
            out += hashlib.sha256(b"test-seed" + next(counter).to_bytes(8, "big")).digest()
        return out[:num_bytes]

    return source
