"""Versioned binary package produced by encryption and consumed by decryption.

Layout (all fields are raw bytes except the leading version byte):
- 1 byte: version (1)
- 16 bytes: HKDF salt
- 12 bytes: GCM nonce
- N bytes: ciphertext (same length as the plaintext)
- 16 bytes: GCM tag

The whole package travels as standard Base64 text.
"""

from __future__ import annotations

import base64
import binascii
import struct
from dataclasses import dataclass

from vaultshield.core.exceptions import InvalidPackage, UnsupportedVersion


VERSION = 1
SALT_LEN = 16
NONCE_LEN = 12
TAG_LEN = 16

HEADER_LEN = 1 + SALT_LEN
# version + salt + nonce + tag; a valid package must be strictly longer
MIN_PACKAGE_LEN = HEADER_LEN + NONCE_LEN + TAG_LEN


@dataclass(frozen=True)
class Package:
    """A parsed package: version byte, salt and sealed body (nonce || ciphertext || tag)."""

    version: int
    salt: bytes
    sealed_body: bytes

    def __post_init__(self) -> None:
        if not 0 <= self.version <= 0xFF:
            raise ValueError("version must fit in one byte")
        if len(self.salt) != SALT_LEN:
            raise ValueError(f"salt must be {SALT_LEN} bytes")
        if len(self.sealed_body) < NONCE_LEN + TAG_LEN:
            raise ValueError("sealed body too short to hold nonce and tag")

    @classmethod
    def assemble(cls, salt: bytes, nonce: bytes, ciphertext: bytes, tag: bytes, version: int = VERSION) -> "Package":
        return cls(version=version, salt=salt, sealed_body=nonce + ciphertext + tag)

    @property
    def nonce(self) -> bytes:
        return self.sealed_body[:NONCE_LEN]

    @property
    def ciphertext(self) -> bytes:
        return self.sealed_body[NONCE_LEN:-TAG_LEN]

    @property
    def tag(self) -> bytes:
        return self.sealed_body[-TAG_LEN:]

    def to_bytes(self) -> bytes:
        out = bytearray()
        out += struct.pack("B", self.version)
        out += self.salt
        out += self.sealed_body
        return bytes(out)

    def encode(self) -> str:
        """Return the package as Base64 ASCII text."""
        return base64.b64encode(self.to_bytes()).decode("ascii")

    @classmethod
    def from_bytes(cls, data: bytes) -> "Package":
        """
        Parse raw package bytes.

        Raises InvalidPackage when ``data`` is not longer than the fixed
        fields and UnsupportedVersion when the version byte is unknown.
        """
        if len(data) <= MIN_PACKAGE_LEN:
            raise InvalidPackage("Package too short.")

        version = data[0]
        if version != VERSION:
            raise UnsupportedVersion(version)

        salt = bytes(data[1:HEADER_LEN])
        sealed_body = bytes(data[HEADER_LEN:])
        return cls(version=version, salt=salt, sealed_body=sealed_body)

    @classmethod
    def decode(cls, text: str) -> "Package":
        """Parse a Base64 package string; malformed Base64 raises InvalidPackage."""
        try:
            data = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidPackage("Base64 decoding failed.") from e
        return cls.from_bytes(data)
