"""Shared machinery of the SHA-2 family (FIPS 180-4)."""

from __future__ import annotations

from typing import ClassVar, Iterable

from .hasher import Hasher

_ROTATIONS = tuple[int, int, int]


def parse_padded_msg(msg: bytes, block_size: int) -> list[bytes]:
    """Split a padded message into whole blocks of ``block_size`` bytes.

    Trailing bytes that do not fill a whole block are dropped.
    """
    data = bytes(msg)
    count = len(data) // block_size
    return [data[i * block_size:(i + 1) * block_size] for i in range(count)]


class ShaCore(Hasher):
    """SHA-2 compression logic, configured by class attributes in subclasses."""

    word_bits: ClassVar[int]
    block_size: ClassVar[int]
    length_part_len: ClassVar[int]
    lower_sigma_0: ClassVar[_ROTATIONS]
    lower_sigma_1: ClassVar[_ROTATIONS]
    upper_sigma_0: ClassVar[_ROTATIONS]
    upper_sigma_1: ClassVar[_ROTATIONS]
    round_constants: ClassVar[tuple[int, ...]]
    initial_hash_value: ClassVar[tuple[int, ...]]

    _REQUIRED = (
        "word_bits",
        "block_size",
        "length_part_len",
        "lower_sigma_0",
        "lower_sigma_1",
        "upper_sigma_0",
        "upper_sigma_1",
        "round_constants",
        "initial_hash_value",
    )

    def __init__(self) -> None:
        missing = [name for name in self._REQUIRED if not hasattr(type(self), name)]
        if missing:
            raise TypeError(
                f"{type(self).__name__} lacks SHA parameters: {', '.join(missing)}"
            )

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @property
    def _mask(self) -> int:
        return (1 << self.word_bits) - 1

    @property
    def _word_bytes(self) -> int:
        return self.word_bits // 8

    @property
    def digest_size(self) -> int:
        """Size of the digest in bytes."""
        return self._word_bytes * len(self.initial_hash_value)

    def _rotr(self, x: int, n: int) -> int:
        return ((x >> n) | (x << (self.word_bits - n))) & self._mask

    def _lc_sigma(self, x: int, params: _ROTATIONS) -> int:
        r1, r2, shift = params
        return self._rotr(x, r1) ^ self._rotr(x, r2) ^ (x >> shift)

    def _uc_sigma(self, x: int, params: _ROTATIONS) -> int:
        r1, r2, r3 = params
        return self._rotr(x, r1) ^ self._rotr(x, r2) ^ self._rotr(x, r3)

    def _ch(self, x: int, y: int, z: int) -> int:
        return (x & y) ^ (~x & self._mask & z)

    @staticmethod
    def _maj(x: int, y: int, z: int) -> int:
        return (x & y) ^ (x & z) ^ (y & z)

    def pad_msg(self, msg: bytes) -> bytes:
        """Append the 1 bit, zero padding and the bit length of ``msg``.

        The result has a length that is a multiple of the block size.
        """
        last_block_max_len = self.block_size - self.length_part_len
        padded = bytearray(msg)
        padded.append(0b1000_0000)

        last_block_len = len(padded) % self.block_size
        if last_block_len <= last_block_max_len:
            padded.extend(bytes(last_block_max_len - last_block_len))
        else:
            rest = self.block_size - last_block_len
            padded.extend(bytes(rest + last_block_max_len))

        bit_len = len(msg) * 8
        padded.extend(bit_len.to_bytes(self.length_part_len, "big"))
        return bytes(padded)

    def prepare_message_schedules(self, block: bytes) -> list[int]:
        """Expand one block into the message schedule W."""
        if len(block) != self.block_size:
            raise ValueError(
                f"block must be {self.block_size} bytes, got {len(block)}"
            )
        size = self._word_bytes
        mask = self._mask
        schedule = [
            int.from_bytes(block[i:i + size], "big")
            for i in range(0, 16 * size, size)
        ]
        for t in range(16, len(self.round_constants)):
            schedule.append(
                (
                    self._lc_sigma(schedule[t - 2], self.lower_sigma_1)
                    + schedule[t - 7]
                    + self._lc_sigma(schedule[t - 15], self.lower_sigma_0)
                    + schedule[t - 16]
                )
                & mask
            )
        return schedule

    def compute_hash(self, blocks: Iterable[bytes]) -> tuple[int, ...]:
        """Run the compression function over ``blocks``; return the hash words."""
        mask = self._mask
        hash_value = tuple(self.initial_hash_value)
        for block in blocks:
            a, b, c, d, e, f, g, h = hash_value
            schedule = self.prepare_message_schedules(block)
            for k, w in zip(self.round_constants, schedule):
                t1 = (
                    h
                    + self._uc_sigma(e, self.upper_sigma_1)
                    + self._ch(e, f, g)
                    + k
                    + w
                ) & mask
                t2 = (self._uc_sigma(a, self.upper_sigma_0) + self._maj(a, b, c)) & mask
                h, g, f, e = g, f, e, (d + t1) & mask
                d, c, b, a = c, b, a, (t1 + t2) & mask
            hash_value = tuple(
                (x + y) & mask
                for x, y in zip((a, b, c, d, e, f, g, h), hash_value)
            )
        return hash_value

    def get_digest(self, msg: bytes) -> bytes:
        padded = self.pad_msg(msg)
        blocks = parse_padded_msg(padded, self.block_size)
        words = self.compute_hash(blocks)
        return b"".join(word.to_bytes(self._word_bytes, "big") for word in words)

    def get_block_size(self) -> int:
        return self.block_size