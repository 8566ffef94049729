"""Password-based encryption of text into self-describing Base64 packages.

:class:`PackageCodec` ties the pieces together:

- a fresh random salt and HKDF-SHA256 key per package (:mod:`vaultshield.security.kdf`)
- a fresh random 96-bit nonce and AES-256-GCM (:mod:`vaultshield.security.cipher`)
- the versioned binary layout (:mod:`vaultshield.core.package`)

The codec holds no state besides its random source, so one instance can be
shared between threads.
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from vaultshield.core.exceptions import (
    EmptyInput,
    EmptyMasterPassword,
    InvalidInputEncoding,
    InvalidPlaintextEncoding,
)
from vaultshield.core.package import NONCE_LEN, SALT_LEN, VERSION, Package

from .cipher import open_sealed, seal
from .kdf import derive_key, generate_salt


logger = logging.getLogger(__name__)


def _utf8(value: str, field: str) -> bytes:
    # Lone surrogates (e.g. undecodable argv bytes on POSIX) cannot be encoded.
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidInputEncoding(field) from e


class PackageCodec:
    """
    Encrypt and decrypt text with a master password.

    ``random_bytes`` is the entropy source used for salts and nonces; it
    defaults to :func:`os.urandom` and can be replaced with a deterministic
    callable in tests.
    """

    def __init__(self, random_bytes: Callable[[int], bytes] = os.urandom):
        self.random_bytes = random_bytes

    def encrypt(self, text: str, password: str) -> str:
        """Encrypt ``text`` and return the Base64 package."""
        if not text:
            raise EmptyInput("Input")
        if not password:
            raise EmptyMasterPassword()

        plaintext = _utf8(text, "Input")
        secret = _utf8(password, "Master password")

        salt = generate_salt(SALT_LEN, random_bytes=self.random_bytes)
        key = derive_key(secret, salt)
        nonce = self.random_bytes(NONCE_LEN)
        ciphertext, tag = seal(plaintext, key, nonce)

        package = Package.assemble(salt, nonce, ciphertext, tag, version=VERSION)
        encoded = package.encode()
        logger.debug("Encrypted package v%d (%d ciphertext bytes)", package.version, len(ciphertext))
        return encoded

    def decrypt(self, base64_package: str, password: str) -> str:
        """Decrypt a package produced by :meth:`encrypt` and return the text."""
        if not base64_package:
            raise EmptyInput("Input")
        if not password:
            raise EmptyMasterPassword()

        secret = _utf8(password, "Master password")
        package = Package.decode(base64_package)
        key = derive_key(secret, package.salt)
        plaintext = open_sealed(package.ciphertext, package.tag, key, package.nonce)

        try:
            text = plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidPlaintextEncoding() from e
        logger.debug("Decrypted package v%d (%d plaintext bytes)", package.version, len(plaintext))
        return text


# module-level default codec
_default_codec = PackageCodec()


def get_codec() -> PackageCodec:
    return _default_codec


def encrypt(text: str, password: str) -> str:
    return get_codec().encrypt(text, password)


def decrypt(base64_package: str, password: str) -> str:
    return get_codec().decrypt(base64_package, password)
