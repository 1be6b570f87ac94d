"""Hybrid encryption and decryption of messages."""

import logging
from typing import Optional

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from .asymmetric import decapsulate, encapsulate
from .config import KeyParameters
from .envelope import MessageEnvelope, decode_envelope, encode_envelope, minimum_envelope_size
from .rng import RandomSource
from .signature import sign, verify
from .symmetric import generate_symmetric_key, sym_decrypt, sym_encrypt
from .types import (
    NONCE_SIZE,
    EnvelopeAssemblyError,
    DecryptionResult,
    FailureKind,
    InvalidEnvelopeError,
)

logger = logging.getLogger(__name__)


def encrypt_message(
    plaintext: str,
    recipient_public_key: RSAPublicKey,
    sender_signing_key: RSAPrivateKey,
    random_source: Optional[RandomSource] = None,
) -> bytes:
    """
    Encrypt and sign a message for a recipient.

    A fresh AES key encrypts the message; the AES key is wrapped with the
    recipient's RSA key; the sender signs the wrapped key and ciphertext.

    Args:
        plaintext: Message to encrypt
        recipient_public_key: Recipient's RSA encryption public key
        sender_signing_key: Sender's RSA signing private key
        random_source: Source for the symmetric key and nonce (default: os.urandom)

    Returns:
        Envelope bytes: encapsulated key || nonce || ciphertext || signature

    Raises:
        EncryptionError: If the recipient key is too small to wrap a symmetric key
    """
    message_bytes = plaintext.encode("utf-8")

    symmetric_key = generate_symmetric_key(random_source)
    encapsulated_key = encapsulate(symmetric_key, recipient_public_key)
    encrypted_payload = sym_encrypt(message_bytes, symmetric_key, random_source)

    signature = sign(encapsulated_key + encrypted_payload, sender_signing_key)

    data = encode_envelope(
        MessageEnvelope(
            encapsulated_key=encapsulated_key,
            nonce=encrypted_payload[:NONCE_SIZE],
            ciphertext=encrypted_payload[NONCE_SIZE:],
            signature=signature,
        )
    )

    # The receiver parses by key size, so the lengths must match the keys exactly
    expected = (
        minimum_envelope_size(
            KeyParameters.from_key(recipient_public_key).encapsulated_key_size,
            KeyParameters.from_key(sender_signing_key).signature_size,
        )
        + len(message_bytes)
    )
    if len(data) != expected:
        raise EnvelopeAssemblyError(f"Envelope is {len(data)} bytes, expected {expected}")

    return data


def decrypt_message(
    data: bytes,
    recipient_private_key: RSAPrivateKey,
    sender_signing_public_key: RSAPublicKey,
) -> DecryptionResult:
    """
    Authenticate and decrypt an envelope.

    The signature is checked before any decryption is attempted.

    Args:
        data: Envelope bytes from encrypt_message()
        recipient_private_key: Our RSA encryption private key
        sender_signing_public_key: Sender's RSA signing public key

    Returns:
        DecryptionResult with the message text, or with the failure kind
        and no text. Never raises for malformed or hostile input.
    """
    data = bytes(data)
    recipient_params = KeyParameters.from_key(recipient_private_key)
    sender_params = KeyParameters.from_key(sender_signing_public_key)

    try:
        envelope = decode_envelope(
            data,
            encapsulated_key_size=recipient_params.encapsulated_key_size,
            signature_size=sender_params.signature_size,
        )
    except InvalidEnvelopeError as e:
        logger.debug("Rejecting envelope: %s", e)
        return DecryptionResult.failed(FailureKind.MALFORMED_ENVELOPE)

    if not verify(envelope.signed_data, envelope.signature, sender_signing_public_key):
        logger.debug("Message signature invalid")
        return DecryptionResult.failed(FailureKind.SIGNATURE_INVALID)

    symmetric_key = decapsulate(envelope.encapsulated_key, recipient_private_key)
    if symmetric_key is None:
        logger.debug("Cannot unwrap symmetric key")
        return DecryptionResult.failed(FailureKind.DECRYPTION_FAILED)

    try:
        plaintext = sym_decrypt(envelope.encrypted_payload, symmetric_key)
        return DecryptionResult.success(plaintext.decode("utf-8"))
    except (ValueError, UnicodeDecodeError) as e:
        # A signed envelope wrapping a key of the wrong size or non-UTF-8 text
        logger.debug("Payload decryption failed: %s", e)
        return DecryptionResult.failed(FailureKind.DECRYPTION_FAILED)
