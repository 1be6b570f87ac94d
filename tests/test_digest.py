"""Tests for the digest module."""

from hybridcrypto.digest import digest, digest_hex
from .test_vectors import SHA512_ABC_HEX, SHA512_EMPTY_HEX


def _colon_hex(hex_string: str) -> str:
    return ":".join(hex_string[i : i + 2] for i in range(0, len(hex_string), 2))


class TestDigest:
    """Tests for raw digests."""

    def test_digest_length(self) -> None:
        """SHA-512 digests are 64 bytes."""
        assert len(digest(b"")) == 64
        assert len(digest(b"x" * 10000)) == 64

    def test_known_vectors(self) -> None:
        """Digest matches FIPS 180-2 reference values."""
        assert digest(b"").hex() == SHA512_EMPTY_HEX
        assert digest(b"abc").hex() == SHA512_ABC_HEX

    def test_deterministic(self) -> None:
        """Same input always gives the same digest."""
        data = bytes(range(256))
        assert digest(data) == digest(data)

    def test_text_is_utf8_encoded(self) -> None:
        """Text input hashes its UTF-8 encoding."""
        assert digest("abc") == digest(b"abc")
        assert digest("Café") == digest("Café".encode("utf-8"))


class TestDigestHex:
    """Tests for the human-readable digest format."""

    def test_known_vector(self) -> None:
        """Colon-separated hex matches the reference digest."""
        assert digest_hex(b"abc") == _colon_hex(SHA512_ABC_HEX)

    def test_format(self) -> None:
        """64 lowercase octets, colon separated, no trailing colon."""
        result = digest_hex(b"abc")

        assert result.startswith("dd:af:35:a1:93:61:7a:ba")
        assert result.endswith("a5:4c:a4:9f")
        assert not result.endswith(":")
        assert len(result) == 64 * 3 - 1

        octets = result.split(":")
        assert len(octets) == 64
        for octet in octets:
            assert len(octet) == 2
            assert all(c in "0123456789abcdef" for c in octet)

    def test_leading_zero_octets(self) -> None:
        """Octets below 0x10 keep their leading zero."""
        octets = digest_hex(b"").split(":")
        assert octets[:4] == ["cf", "83", "e1", "35"]
        assert octets[15] == "07"
