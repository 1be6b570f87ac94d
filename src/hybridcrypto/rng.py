"""Randomness source used for symmetric keys and nonces."""

import os
from typing import Callable, Optional

RandomSource = Callable[[int], bytes]

DEFAULT_RANDOM_SOURCE: RandomSource = os.urandom


def random_bytes(num_bytes: int, random_source: Optional[RandomSource] = None) -> bytes:
    """
    Draw ``num_bytes`` bytes from a randomness source.

    Args:
        num_bytes: Number of bytes to draw
        random_source: Callable returning that many bytes (default: os.urandom)

    Returns:
        The random bytes

    Raises:
        ValueError: If the source returns the wrong number of bytes
    """
    source = random_source or DEFAULT_RANDOM_SOURCE
    data = source(num_bytes)
    if len(data) != num_bytes:
        raise ValueError(f"Random source returned {len(data)} bytes, expected {num_bytes}")
    return bytes(data)
