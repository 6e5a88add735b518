"""
Random sources for password generation.

Every source exposes ``randbelow(n)``, returning a uniformly distributed
integer in ``[0, n)``. Production code uses :class:`SecureRandom`, backed by
the operating system CSPRNG. :class:`HmacDrbg` is a seedable deterministic
generator built from HMAC-SHA256 for reproducible tests; it is still a
cryptographic construction, never a Mersenne Twister.
"""

import hashlib
import hmac
import secrets
from typing import Protocol, Union


class RandomSource(Protocol):
    """Anything that can draw a uniform integer below a bound."""

    def randbelow(self, n: int) -> int:
        ...


class SecureRandom:
    """Operating system CSPRNG via the ``secrets`` module."""

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return secrets.randbelow(n)


class HmacDrbg:
    """Deterministic HMAC-SHA256 counter-mode byte stream."""

    def __init__(self, seed: Union[bytes, str]):
        """
        Initialize the generator.

        Args:
            seed: Seed material; equal seeds produce equal streams
        """
        if isinstance(seed, str):
            seed = seed.encode("utf-8")
        self._key = hashlib.sha256(seed).digest()
        self._counter = 0
        self._pool = b""

    def _read(self, size: int) -> bytes:
        while len(self._pool) < size:
            block = hmac.new(self._key, self._counter.to_bytes(8, "big"), hashlib.sha256)
            self._pool += block.digest()
            self._counter += 1
        data, self._pool = self._pool[:size], self._pool[size:]
        return data

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        # Rejection sampling keeps the result unbiased.
        bits = n.bit_length()
        size = (bits + 7) // 8
        mask = (1 << bits) - 1
        while True:
            value = int.from_bytes(self._read(size), "big") & mask
            if value < n:
                return value


default_source = SecureRandom()
