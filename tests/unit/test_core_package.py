"""Unit tests for the binary package layout."""

import base64

import pytest

from vaultshield.core.exceptions import InvalidPackage, UnsupportedVersion
from vaultshield.core.package import (
    MIN_PACKAGE_LEN,
    NONCE_LEN,
    SALT_LEN,
    TAG_LEN,
    VERSION,
    Package,
)


SALT = bytes(range(16))
NONCE = bytes(range(100, 112))
TAG = b"\xaa" * 16


def test_layout_constants():
    assert VERSION == 1
    assert (SALT_LEN, NONCE_LEN, TAG_LEN) == (16, 12, 16)
    assert MIN_PACKAGE_LEN == 45


def test_assemble_and_field_offsets():
    """Fields land at offsets 0, 1, 17, 29 and end-16."""
    pkg = Package.assemble(SALT, NONCE, b"cipher", TAG)
    raw = pkg.to_bytes()

    assert raw[0] == 1
    assert raw[1:17] == SALT
    assert raw[17:29] == NONCE
    assert raw[29:-16] == b"cipher"
    assert raw[-16:] == TAG
    assert len(raw) == 1 + 16 + 12 + 6 + 16


def test_accessors_split_sealed_body():
    pkg = Package(version=1, salt=SALT, sealed_body=NONCE + b"xyz" + TAG)
    assert pkg.nonce == NONCE
    assert pkg.ciphertext == b"xyz"
    assert pkg.tag == TAG


def test_from_bytes_parses_what_to_bytes_writes():
    pkg = Package.assemble(SALT, NONCE, b"\x00" * 40, TAG)
    assert Package.from_bytes(pkg.to_bytes()) == pkg


def test_encode_is_standard_base64():
    pkg = Package.assemble(SALT, NONCE, b"abc", TAG)
    assert base64.b64decode(pkg.encode()) == pkg.to_bytes()


def test_from_bytes_rejects_minimum_length_exactly():
    """A package must be strictly longer than version+salt+nonce+tag."""
    data = bytes([VERSION]) + b"\x00" * (MIN_PACKAGE_LEN - 1)
    with pytest.raises(InvalidPackage, match="Package too short"):
        Package.from_bytes(data)


def test_from_bytes_accepts_one_ciphertext_byte():
    data = bytes([VERSION]) + b"\x00" * MIN_PACKAGE_LEN
    pkg = Package.from_bytes(data)
    assert len(pkg.ciphertext) == 1


def test_length_is_checked_before_version():
    with pytest.raises(InvalidPackage):
        Package.from_bytes(b"\x02" * 10)


@pytest.mark.parametrize("version", [0, 2, 255])
def test_from_bytes_rejects_unknown_version(version):
    data = bytes([version]) + b"\x00" * 60
    with pytest.raises(UnsupportedVersion) as exc:
        Package.from_bytes(data)
    assert exc.value.version == version


@pytest.mark.parametrize("text", ["not base64!!", "abc", "QUJD\n", "ü"])
def test_decode_rejects_malformed_base64(text):
    with pytest.raises(InvalidPackage, match="Base64 decoding failed"):
        Package.decode(text)


def test_constructor_validates_fields():
    with pytest.raises(ValueError):
        Package(version=1, salt=b"short", sealed_body=NONCE + TAG)
    with pytest.raises(ValueError):
        Package(version=1, salt=SALT, sealed_body=b"\x00" * 27)
    with pytest.raises(ValueError):
        Package(version=256, salt=SALT, sealed_body=NONCE + TAG)
