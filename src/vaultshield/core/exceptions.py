"""
Exceptions for VaultShield
Every failure of the encrypt/decrypt pipeline derives from VaultShieldError so
front-ends have a single error catcher; str(error) is the user-facing message.
"""

from __future__ import annotations


class VaultShieldError(Exception):
    # general container for errors
    pass


class EmptyInput(VaultShieldError):
    # raised when the plaintext or package argument is empty
    def __init__(self, field: str = "Input"):
        self.field = field
        super().__init__(f"{field} cannot be empty.")


class EmptyMasterPassword(VaultShieldError):
    # raised when the master password is empty
    def __init__(self):
        super().__init__("Master password cannot be empty.")


class InvalidPackage(VaultShieldError):
    # raised on bad Base64 or a package below the minimum size
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid encrypted package: {reason}")


class UnsupportedVersion(VaultShieldError):
    # raised when the version byte is not a known format version
    def __init__(self, version: int):
        self.version = version
        super().__init__(f"Unsupported package version: {version}")


class AuthenticationFailure(VaultShieldError):
    # raised when the GCM tag does not verify (wrong password or tampering)
    def __init__(self):
        super().__init__("Decryption failed: wrong password or corrupted package.")


class InvalidPlaintextEncoding(VaultShieldError):
    # raised when decrypted bytes are not UTF-8
    def __init__(self):
        super().__init__("Decrypted data is not valid UTF-8 text.")


class InternalFailure(VaultShieldError):
    # raised if the sealed output cannot be assembled
    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Internal error: {details}")


class InvalidInputEncoding(VaultShieldError):
    # raised when a text or password argument cannot be encoded as UTF-8
    def __init__(self, field: str = "Input"):
        self.field = field
        super().__init__(f"{field} is not valid UTF-8 text.")
