"""
Randomness capability held by the engine.

SystemRandom is the only source for real traffic. FixedSequenceSource
exists so tests can pin the nonce and check record layout byte-for-byte.
"""

import os
from typing import Protocol

from .errors import RandomSourceError


class RandomSource(Protocol):
    def read(self, n: int) -> bytes:
        ...


class SystemRandom:
    """Operating-system CSPRNG (os.urandom)."""

    def read(self, n: int) -> bytes:
        return os.urandom(n)

    def __repr__(self):
        return "SystemRandom()"


class FixedSequenceSource:
    """
    Hands out consecutive slices of a fixed byte string.

    NEVER use outside tests: a replayed sequence means a repeated nonce.
    """

    def __init__(self, data: bytes):
        self._data   = bytes(data)
        self._offset = 0

    @classmethod
    def repeating(cls, chunk: bytes, count: int) -> "FixedSequenceSource":
        return cls(bytes(chunk) * count)

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("n must be non-negative.")
        if n > self.remaining:
            raise RandomSourceError(
                f"Fixed sequence exhausted: wanted {n} bytes, {self.remaining} left."
            )
        out = self._data[self._offset:self._offset + n]
        self._offset += n
        return out

    def __repr__(self):
        return f"FixedSequenceSource(remaining={self.remaining})"
