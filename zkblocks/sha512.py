"""SHA-512 (FIPS 180-4)."""

from .sha256 import _cbrt_fraction_bits, _sqrt_fraction_bits
from .sha_common import ShaCore


class Sha512(ShaCore):
    """SHA-512 hash function: 128-byte blocks, 64-byte digests."""

    word_bits = 64
    block_size = 128
    length_part_len = 16
    lower_sigma_0 = (1, 8, 7)
    lower_sigma_1 = (19, 61, 6)
    upper_sigma_0 = (28, 34, 39)
    upper_sigma_1 = (14, 18, 41)
    round_constants = _cbrt_fraction_bits(80, 64)
    initial_hash_value = _sqrt_fraction_bits(8, 64)