"""SHA-512 digests."""

import hashlib
from typing import Union


def digest(data: Union[bytes, str]) -> bytes:
    """
    Compute the SHA-512 digest of data.

    Text is UTF-8 encoded before hashing.

    Args:
        data: Bytes or text to hash

    Returns:
        64-byte digest
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha512(data).digest()


def digest_hex(data: Union[bytes, str]) -> str:
    """
    Compute the SHA-512 digest of data in human-readable form.

    Returns:
        Lowercase hex octets separated by colons, e.g. "cf:83:e1:..."
    """
    return ":".join(f"{b:02x}" for b in digest(data))
