from __future__ import annotations

import os
from typing import Callable, Dict

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF


KEY_LEN = 32  # AES-256
HKDF_INFO = b"VaultShield.AESGCM"


def generate_salt(length: int = 16, random_bytes: Callable[[int], bytes] = os.urandom) -> bytes:
    """Return a cryptographically secure random salt."""
    return random_bytes(length)


def derive_key(password: bytes | str, salt: bytes, key_len: int = KEY_LEN, info: bytes = HKDF_INFO) -> bytes:
    """
    Derive a per-package key from a password and salt using HKDF-SHA256.
    Returns raw derived key bytes.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    hkdf = HKDF(algorithm=hashes.SHA256(), length=key_len, salt=salt, info=info)
    return hkdf.derive(password)


def kdf_params_to_dict(salt: bytes, key_len: int = KEY_LEN, info: bytes = HKDF_INFO) -> Dict:
    return {
        "algo": "hkdf-sha256",
        "salt": salt.hex(),
        "info": info.decode("ascii"),
        "length": key_len,
    }
