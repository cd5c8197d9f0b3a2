"""SHA-256 (FIPS 180-4)."""

import math
from itertools import count, islice

from .sha_common import ShaCore


def _primes():
    """Yield the prime numbers in increasing order."""
    found: list[int] = []
    for candidate in count(2):
        limit = math.isqrt(candidate)
        if all(candidate % p for p in found if p <= limit):
            found.append(candidate)
            yield candidate


def _icbrt(n: int) -> int:
    """Return the integer cube root of a non-negative integer (floor)."""
    if n == 0:
        return 0
    x = 1 << ((n.bit_length() + 2) // 3)
    while True:
        y = (2 * x + n // (x * x)) // 3
        if y >= x:
            return x
        x = y


def _sqrt_fraction_bits(count_: int, bits: int) -> tuple[int, ...]:
    """First ``bits`` fractional bits of the square roots of the first primes."""
    mask = (1 << bits) - 1
    return tuple(
        math.isqrt(p << (2 * bits)) & mask for p in islice(_primes(), count_)
    )


def _cbrt_fraction_bits(count_: int, bits: int) -> tuple[int, ...]:
    """First ``bits`` fractional bits of the cube roots of the first primes."""
    mask = (1 << bits) - 1
    return tuple(_icbrt(p << (3 * bits)) & mask for p in islice(_primes(), count_))


class Sha256(ShaCore):
    """SHA-256 hash function: 64-byte blocks, 32-byte digests."""

    word_bits = 32
    block_size = 64
    length_part_len = 8
    lower_sigma_0 = (7, 18, 3)
    lower_sigma_1 = (17, 19, 10)
    upper_sigma_0 = (2, 13, 22)
    upper_sigma_1 = (6, 11, 25)
    round_constants = _cbrt_fraction_bits(64, 32)
    initial_hash_value = _sqrt_fraction_bits(8, 32)