"""Cryptographically secure random byte source."""

import random


class RandomNumber:
    """Random byte generator seeded from the operating system's entropy."""

    def __init__(self) -> None:
        self.gen = random.SystemRandom()

    def fill_bytes(self, size: int) -> bytes:
        """Return ``size`` random bytes."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        return self.gen.randbytes(size)