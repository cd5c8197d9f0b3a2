import hashlib
import hmac as std_hmac

import pytest

from zkblocks.keyed_hash import Hmac
from zkblocks.sha256 import Sha256
from zkblocks.sha512 import Sha512


def test_hmac_empty_key_empty_text():
    mac = Hmac(Sha256())
    assert mac.get_digest(b"", b"").hex() == (
        "b613679a0814d9ec772f95d778c35fc5ff1697c493715653c6c712144292c5ad"
    )


def test_hmac_non_empty_key_non_empty_text():
    mac = Hmac(Sha256())
    assert mac.get_digest(b"key foo", b"some text").hex() == (
        "570b8926badb58b7652a00954f8ff36c872003b47c442419c342c5ebf5117d33"
    )


def test_hmac_non_empty_key_long_text():
    mac = Hmac(Sha256())
    text = (
        b"The identity of the longest word in the English language depends upon "
        b"the definition of what constitutes a word in the English language, as "
        b"well as how length should be compared."
    )
    assert mac.get_digest(b"fx502p", text).hex() == (
        "7767617394b05a76be1959b0720891a152536ef407315e8eeb9209957d07c38e"
    )


@pytest.mark.parametrize("key_len", [0, 20, 64, 65, 200])
def test_sha256_matches_standard_library(key_len):
    key = bytes(range(key_len % 256)) if key_len < 256 else bytes(key_len)
    key = bytes((i * 7) % 256 for i in range(key_len))
    text = b"message to authenticate"
    expected = std_hmac.new(key, text, hashlib.sha256).digest()
    assert Hmac(Sha256()).get_digest(key, text) == expected


@pytest.mark.parametrize("key_len", [0, 16, 128, 129, 300])
def test_sha512_matches_standard_library(key_len):
    key = bytes((i * 13) % 256 for i in range(key_len))
    text = b"another message"
    expected = std_hmac.new(key, text, hashlib.sha512).digest()
    digest = Hmac(Sha512()).get_digest(key, text)
    assert digest == expected
    assert len(digest) == 64


def test_different_keys_give_different_digests():
    mac = Hmac(Sha256())
    first = mac.get_digest(b"key one", b"text")
    second = mac.get_digest(b"key two", b"text")
    assert len(first) == len(second) == 32
    assert first != second