import hashlib

import pytest

from mangen.sha256 import Sha256, sha256, to_hex


def test_empty_input_digest():
    assert Sha256().hexdigest() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_abc_digest():
    assert to_hex(sha256(b"abc")) == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize("length", [1, 3, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_reference_across_padding_boundaries(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert sha256(data) == hashlib.sha256(data).digest()


def test_incremental_updates_equal_single_update():
    data = bytes(range(256)) * 5
    hasher = Sha256()
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.digest() == sha256(data)


def test_constructor_data_equals_update():
    hasher = Sha256()
    hasher.update(b"hello world")
    assert Sha256(b"hello world").digest() == hasher.digest()


def test_digest_does_not_finalize():
    hasher = Sha256(b"part one")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b" part two")
    assert hasher.digest() == hashlib.sha256(b"part one part two").digest()


def test_digest_length():
    assert len(sha256(b"x")) == 32
    assert len(Sha256(b"x").hexdigest()) == 64


def test_hexdigest_is_hex_of_digest():
    hasher = Sha256(b"mangen")
    assert hasher.hexdigest() == to_hex(hasher.digest())


def test_to_hex_renders_lowercase_pairs():
    raw = bytes(range(32))
    text = to_hex(raw)
    assert bytes.fromhex(text) == raw
    assert text == text.lower()


def test_update_rejects_str():
    with pytest.raises(TypeError):
        Sha256().update("text")