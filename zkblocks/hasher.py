"""Common interface for hash functions."""

from abc import ABC, abstractmethod


class Hasher(ABC):
    """A hash function with a fixed block size and digest size."""

    @abstractmethod
    def get_digest(self, msg: bytes) -> bytes:
        """Return the digest of ``msg``."""

    @abstractmethod
    def get_block_size(self) -> int:
        """Return the size in bytes of the blocks the function consumes."""