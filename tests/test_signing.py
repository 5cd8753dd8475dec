"""
Tests for signing over BLAKE2b-256 digests.
"""
import hashlib

import pytest
from cryptography.exceptions import InvalidSignature

from suikey.keys import key_pair_from_seed
from suikey.signing import blake2b256, sign, verify


@pytest.fixture
def key_pair():
    return key_pair_from_seed(bytes(range(32)))


def test_blake2b256():
    assert blake2b256(b"abc") == hashlib.blake2b(b"abc", digest_size=32).digest()
    assert len(blake2b256(b"")) == 32


@pytest.mark.parametrize("message", [b"", b"hello sui", bytes(range(256)) * 4])
def test_sign_verify(key_pair, message):
    signature = sign(key_pair, message)
    assert len(signature) == 64
    assert verify(key_pair, message, signature)
    assert verify(key_pair.public_bytes, message, signature)
    assert verify(key_pair.public_key, message, signature)


def test_signature_is_over_digest(key_pair):
    message = b"transaction bytes"
    signature = sign(key_pair, message)

    key_pair.public_key.verify(signature, blake2b256(message))
    with pytest.raises(InvalidSignature):
        key_pair.public_key.verify(signature, message)


def test_sign_accepts_private_key(key_pair):
    assert sign(key_pair.private_key, b"data") == sign(key_pair, b"data")


def test_sign_is_deterministic(key_pair):
    assert sign(key_pair, b"data") == sign(key_pair, b"data")


def test_verify_rejects_tampering(key_pair):
    signature = sign(key_pair, b"data")
    assert not verify(key_pair, b"datA", signature)
    assert not verify(key_pair, b"data", bytes([signature[0] ^ 1]) + signature[1:])
    assert not verify(key_pair_from_seed(b"\x01" * 32), b"data", signature)
