"""Small helper to build a VaultShield app context for the TUI and command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging
import os

from vaultshield.security.codec import PackageCodec
from vaultshield.frontend.cli.logging_config import parse_level


ACTIONS = ("Encrypt", "Decrypt")
DEFAULT_ACTION = "Decrypt"


@dataclass
class AppContext:
    """Container for runtime objects the UI needs."""

    codec: PackageCodec
    default_action: str = DEFAULT_ACTION
    master_password: Optional[str] = None
    log_level: int = logging.WARNING


def _action_from_env(value: Optional[str]) -> str:
    # Case-insensitive match against the known actions.
    if value:
        for action in ACTIONS:
            if action.lower() == value.strip().lower():
                return action
    return DEFAULT_ACTION


def build_context(codec: Optional[PackageCodec] = None) -> AppContext:
    """
    Build the runtime context from the environment.

    - ``VAULTSHIELD_DEFAULT_ACTION`` preselects ``Encrypt`` or ``Decrypt``
      (anything else falls back to ``Decrypt``).
    - ``VAULTSHIELD_MASTER_PASSWORD``, when set and non-empty, is used by the
      command line instead of prompting.
    - ``VAULTSHIELD_LOG_LEVEL`` sets the logging level name (default WARNING).
    """
    master_password = os.getenv("VAULTSHIELD_MASTER_PASSWORD") or None

    return AppContext(
        codec=codec or PackageCodec(),
        default_action=_action_from_env(os.getenv("VAULTSHIELD_DEFAULT_ACTION")),
        master_password=master_password,
        log_level=parse_level(os.getenv("VAULTSHIELD_LOG_LEVEL")),
    )
