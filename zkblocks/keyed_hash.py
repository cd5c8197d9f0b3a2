"""HMAC keyed hashing (RFC 2104) over any :class:`Hasher`."""

from .hasher import Hasher

_IPAD = 0x36
_OPAD = 0x5C


class Hmac:
    """Message authentication code built on a hash function."""

    def __init__(self, hasher: Hasher) -> None:
        self.hasher = hasher

    def __repr__(self) -> str:
        return f"Hmac({self.hasher!r})"

    def get_digest(self, key: bytes, text: bytes) -> bytes:
        """Return H(K xor opad || H(K xor ipad || text))."""
        block_size = self.hasher.get_block_size()
        key = bytes(key)
        if len(key) > block_size:
            key = self.hasher.get_digest(key)
        padded_key = key.ljust(block_size, b"\x00")

        inner_key = bytes(b ^ _IPAD for b in padded_key)
        outer_key = bytes(b ^ _OPAD for b in padded_key)

        inner_digest = self.hasher.get_digest(inner_key + bytes(text))
        return self.hasher.get_digest(outer_key + inner_digest)