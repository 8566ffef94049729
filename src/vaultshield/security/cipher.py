"""AES-256-GCM seal/open over a single in-memory message.

The AEAD output of :class:`AESGCM` is ``ciphertext || tag``; this module splits
it so the package layer can place the nonce, ciphertext and tag explicitly.
No associated data is bound.
"""

from __future__ import annotations

import logging
from typing import Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from vaultshield.core.exceptions import AuthenticationFailure, InternalFailure
from vaultshield.core.package import TAG_LEN


logger = logging.getLogger(__name__)


def seal(plaintext: bytes, key: bytes, nonce: bytes) -> Tuple[bytes, bytes]:
    """Encrypt ``plaintext`` and return ``(ciphertext, tag)``."""
    aead = AESGCM(key)
    sealed = aead.encrypt(nonce, plaintext, None)
    if len(sealed) != len(plaintext) + TAG_LEN:
        raise InternalFailure("Unable to create combined sealed box.")
    return sealed[:-TAG_LEN], sealed[-TAG_LEN:]


def open_sealed(ciphertext: bytes, tag: bytes, key: bytes, nonce: bytes) -> bytes:
    """
    Verify ``tag`` and return the plaintext.

    Raises AuthenticationFailure on a tag mismatch. A wrong key and a
    tampered ciphertext, nonce or tag are reported the same way.
    """
    aead = AESGCM(key)
    try:
        return aead.decrypt(nonce, ciphertext + tag, None)
    except InvalidTag as e:
        logger.debug("GCM tag verification failed (%d ciphertext bytes)", len(ciphertext))
        raise AuthenticationFailure() from e
