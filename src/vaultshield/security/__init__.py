"""Security helpers: KDF, AEAD and the package codec for VaultShield.

This package provides:
- HKDF-SHA256 per-package key derivation from a master password
- AES-256-GCM seal/open of a single message
- A codec producing versioned, Base64-encoded packages
"""

from .kdf import generate_salt, derive_key
from .cipher import seal, open_sealed
from .codec import PackageCodec, get_codec, encrypt, decrypt

__all__ = [
    "generate_salt",
    "derive_key",
    "seal",
    "open_sealed",
    "PackageCodec",
    "get_codec",
    "encrypt",
    "decrypt",
]
