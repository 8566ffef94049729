"""VaultShield: password-based encryption of text into portable packages."""

from vaultshield.core.exceptions import (
    AuthenticationFailure,
    EmptyInput,
    EmptyMasterPassword,
    InternalFailure,
    InvalidInputEncoding,
    InvalidPackage,
    InvalidPlaintextEncoding,
    UnsupportedVersion,
    VaultShieldError,
)
from vaultshield.core.package import Package, VERSION
from vaultshield.security.codec import PackageCodec, decrypt, encrypt

__version__ = "1.0.0"

__all__ = [
    "encrypt",
    "decrypt",
    "PackageCodec",
    "Package",
    "VERSION",
    "VaultShieldError",
    "EmptyInput",
    "EmptyMasterPassword",
    "InvalidPackage",
    "UnsupportedVersion",
    "AuthenticationFailure",
    "InvalidInputEncoding",
    "InvalidPlaintextEncoding",
    "InternalFailure",
]
