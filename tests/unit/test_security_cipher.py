"""Unit tests for the AES-256-GCM seal/open helpers."""

import os
from unittest.mock import patch

import pytest

from vaultshield.core.exceptions import AuthenticationFailure, InternalFailure
from vaultshield.security.cipher import open_sealed, seal


KEY = bytes(range(32))
NONCE = bytes(range(12))


def test_seal_open_roundtrip():
    ct, tag = seal(b"attack at dawn", KEY, NONCE)
    assert open_sealed(ct, tag, KEY, NONCE) == b"attack at dawn"


def test_seal_lengths():
    """Ciphertext length equals plaintext length; tag is 16 bytes."""
    for size in (0, 1, 15, 16, 17, 1000):
        ct, tag = seal(os.urandom(size), KEY, NONCE)
        assert len(ct) == size
        assert len(tag) == 16


def test_open_with_wrong_key_fails():
    ct, tag = seal(b"secret", KEY, NONCE)
    with pytest.raises(AuthenticationFailure):
        open_sealed(ct, tag, bytes(32), NONCE)


def test_open_with_wrong_nonce_fails():
    ct, tag = seal(b"secret", KEY, NONCE)
    with pytest.raises(AuthenticationFailure):
        open_sealed(ct, tag, KEY, b"\xff" * 12)


def test_open_with_tampered_ciphertext_fails():
    ct, tag = seal(b"secret", KEY, NONCE)
    tampered = bytes([ct[0] ^ 0x01]) + ct[1:]
    with pytest.raises(AuthenticationFailure):
        open_sealed(tampered, tag, KEY, NONCE)


def test_open_with_tampered_tag_fails():
    ct, tag = seal(b"secret", KEY, NONCE)
    with pytest.raises(AuthenticationFailure):
        open_sealed(ct, tag[:-1] + bytes([tag[-1] ^ 0x80]), KEY, NONCE)


def test_authentication_failure_chains_invalid_tag():
    from cryptography.exceptions import InvalidTag

    ct, tag = seal(b"secret", KEY, NONCE)
    with pytest.raises(AuthenticationFailure) as exc:
        open_sealed(ct, tag, bytes(32), NONCE)
    assert isinstance(exc.value.__cause__, InvalidTag)


def test_seal_rejects_malformed_aead_output():
    """A short AEAD result surfaces as InternalFailure."""
    with patch("vaultshield.security.cipher.AESGCM") as aesgcm:
        aesgcm.return_value.encrypt.return_value = b"short"
        with pytest.raises(InternalFailure, match="combined sealed box"):
            seal(b"plaintext", KEY, NONCE)
