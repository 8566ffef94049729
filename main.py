"""Convenience entry point to run the VaultShield TUI app.

Allows starting the application with `python main.py` from the project root.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the src/ directory is on sys.path so `import vaultshield` works
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from vaultshield.frontend.cli.app import run_app


def main() -> None:
    """Run the VaultShield Textual application."""
    run_app()


if __name__ == "__main__":
    main()
