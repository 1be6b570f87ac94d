"""Envelope encoding and decoding for hybrid-encrypted messages."""

from dataclasses import dataclass

from .types import (
    NONCE_SIZE,
    ENCAPSULATED_KEY_SIZE,
    SIGNATURE_SIZE,
    EnvelopeAssemblyError,
    InvalidEnvelopeError,
)


@dataclass
class MessageEnvelope:
    """Hybrid-encrypted message envelope."""
    encapsulated_key: bytes  # M bytes (RSA modulus of recipient)
    nonce: bytes  # 16 bytes
    ciphertext: bytes  # variable (same length as message)
    signature: bytes  # S bytes (RSA modulus of sender)

    @property
    def signed_data(self) -> bytes:
        """The bytes covered by the signature."""
        return self.encapsulated_key + self.nonce + self.ciphertext

    @property
    def encrypted_payload(self) -> bytes:
        """nonce || ciphertext, as produced by sym_encrypt()."""
        return self.nonce + self.ciphertext


def minimum_envelope_size(
    encapsulated_key_size: int = ENCAPSULATED_KEY_SIZE,
    signature_size: int = SIGNATURE_SIZE,
) -> int:
    """Smallest structurally valid envelope (empty message)."""
    return encapsulated_key_size + NONCE_SIZE + signature_size


def encode_envelope(envelope: MessageEnvelope) -> bytes:
    """
    Encode an envelope to bytes.

    Format (M = encapsulated key size, S = signature size):
        [0 .. M-1]          encapsulatedKey
        [M .. M+15]         nonce (16 bytes)
        [M+16 .. N-S-1]     ciphertext (variable)
        [N-S .. N-1]        signature

    Args:
        envelope: MessageEnvelope to encode

    Returns:
        Encoded bytes

    Raises:
        EnvelopeAssemblyError: If the nonce has the wrong size
    """
    if len(envelope.nonce) != NONCE_SIZE:
        raise EnvelopeAssemblyError(f"Nonce must be {NONCE_SIZE} bytes, got {len(envelope.nonce)}")

    return envelope.signed_data + envelope.signature


def decode_envelope(
    data: bytes,
    encapsulated_key_size: int = ENCAPSULATED_KEY_SIZE,
    signature_size: int = SIGNATURE_SIZE,
) -> MessageEnvelope:
    """
    Decode bytes into an envelope.

    Args:
        data: Encoded envelope bytes
        encapsulated_key_size: Modulus size of the recipient encryption key, in bytes
        signature_size: Modulus size of the sender signing key, in bytes

    Returns:
        Decoded MessageEnvelope

    Raises:
        InvalidEnvelopeError: If data is shorter than the minimum envelope
    """
    minimum = minimum_envelope_size(encapsulated_key_size, signature_size)
    if len(data) < minimum:
        raise InvalidEnvelopeError(f"Data too short: {len(data)} bytes (minimum {minimum})")

    signature_offset = len(data) - signature_size

    offset = 0
    encapsulated_key = data[offset : offset + encapsulated_key_size]
    offset += encapsulated_key_size

    nonce = data[offset : offset + NONCE_SIZE]
    offset += NONCE_SIZE

    ciphertext = data[offset:signature_offset]
    signature = data[signature_offset:]

    return MessageEnvelope(
        encapsulated_key=encapsulated_key,
        nonce=nonce,
        ciphertext=ciphertext,
        signature=signature,
    )
