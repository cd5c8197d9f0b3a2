# zkblocks

Small, dependency-free cryptographic building blocks written in plain Python:

- `zkblocks.sha256.Sha256` and `zkblocks.sha512.Sha512`: SHA-2 hash functions
  following FIPS 180-4. The padding, block parsing, message schedule and
  compression steps are public methods, so each stage can be inspected.
- `zkblocks.keyed_hash.Hmac`: a keyed hash (RFC 2104) built on any `Hasher`.
- `zkblocks.bigint`: `to_bigint`, `to_biguint` and the abstract `Zero` class.
- `zkblocks.random_number.RandomNumber`: random bytes from the operating
  system's entropy source.

These are meant for learning and for experimenting with zero-knowledge
constructions. They are not tuned for speed; use `hashlib` and `hmac` from the
standard library when you need production hashing.

## Installation

```
pip install .
```

## Hashing

```python
from zkblocks.sha256 import Sha256
from zkblocks.sha512 import Sha512

digest = Sha256().get_digest(b"abc")
print(digest.hex())
# ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad

print(Sha512().get_digest(b"").hex()[:16])
# cf83e1357eefb8bd
```

Both classes derive from `zkblocks.sha_common.ShaCore`, which implements the
`zkblocks.hasher.Hasher` interface:

- `get_digest(msg)` returns the digest as `bytes` (32 bytes for SHA-256,
  64 for SHA-512; also available as the `digest_size` property).
- `get_block_size()` returns the block size in bytes (64 or 128).
- `pad_msg(msg)` appends the `0x80` byte, zero padding and the message length
  in bits, giving a multiple of the block size.
- `prepare_message_schedules(block)` expands one block into the message
  schedule; a block of the wrong length raises `ValueError`.
- `compute_hash(blocks)` runs the compression function and returns the eight
  hash words as a tuple of integers.

The module-level `parse_padded_msg(msg, block_size)` splits a padded message
into whole blocks:

```python
from zkblocks.sha256 import Sha256
from zkblocks.sha_common import parse_padded_msg

hasher = Sha256()
padded = hasher.pad_msg(b"a" * 56)
print(len(padded))                    # 128
blocks = parse_padded_msg(padded, hasher.get_block_size())
print(len(blocks))                    # 2
```

## HMAC

`Hmac` takes any `Hasher`. Keys longer than the block size are hashed first;
shorter keys are padded with zero bytes.

```python
from zkblocks.keyed_hash import Hmac
from zkblocks.sha256 import Sha256

mac = Hmac(Sha256())
tag = mac.get_digest(b"key foo", b"some text")
print(tag.hex())
# 570b8926badb58b7652a00954f8ff36c872003b47c442419c342c5ebf5117d33
```

## Integers and randomness

```python
from zkblocks.bigint import to_bigint, to_biguint
from zkblocks.random_number import RandomNumber

to_biguint(True)   # 1
to_biguint(7)      # 7
to_bigint(-5)      # -5

rng = RandomNumber()
nonce = rng.fill_bytes(32)   # 32 random bytes
```

- `to_bigint` accepts integers and raises `TypeError` for booleans and
  non-integers.
- `to_biguint` maps `True`/`False` to 1/0, raises `ValueError` for negative
  values and `TypeError` for non-integers.
- `Zero` is an abstract base class: subclasses implement the class method
  `zero()`, and `is_zero()` compares a value with it.
- `RandomNumber.fill_bytes(size)` raises `ValueError` for a negative size.

## What it does not do

This is a library only: there is no command-line tool, and it offers no
elliptic curves, finite fields or proof systems of its own.

## Running the tests

```
pip install ".[test]"
pytest
```