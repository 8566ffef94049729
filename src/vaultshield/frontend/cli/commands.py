"""
Scriptable command line for VaultShield.

    vaultshield encrypt "some text"            # prompts for the master password
    echo "$PKG" | vaultshield decrypt --copy   # reads the package from stdin
    vaultshield decrypt --paste                # reads the package from the clipboard
    vaultshield inspect "$PKG"                 # show the package header
    vaultshield tui                            # launch the Textual app

Set ``VAULTSHIELD_MASTER_PASSWORD`` to skip the password prompt.
"""

from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys
from typing import List, Optional, TextIO

import pyperclip

from vaultshield.core.exceptions import VaultShieldError
from vaultshield.core.package import Package
from vaultshield.frontend.cli.clipboard import copy_to_clipboard, read_clipboard
from vaultshield.frontend.cli.context import AppContext, build_context
from vaultshield.frontend.cli.logging_config import configure_logging, parse_level
from vaultshield.security.kdf import kdf_params_to_dict


logger = logging.getLogger(__name__)


def _read_argument(value: Optional[str], stdin: TextIO, paste: bool = False) -> str:
    # Positional argument first, then the clipboard when asked, then stdin.
    if value is not None:
        return value
    if paste:
        return read_clipboard()
    return stdin.read()


def _master_password(ctx: AppContext) -> str:
    if ctx.master_password:
        return ctx.master_password
    return getpass.getpass("Master password: ")


def describe_package(package: Package) -> dict:
    """Return the non-secret header fields of ``package`` as a dict."""
    return {
        "version": package.version,
        "kdf": kdf_params_to_dict(package.salt),
        "nonce": package.nonce.hex(),
        "ciphertext_len": len(package.ciphertext),
        "tag": package.tag.hex(),
    }


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vaultshield",
        description="Encrypt and decrypt text with a master password.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level name (overrides VAULTSHIELD_LOG_LEVEL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encrypt", help="Encrypt text into a Base64 package")
    enc.add_argument("text", nargs="?", help="Text to encrypt (default: read stdin)")
    enc.add_argument("--copy", action="store_true", help="Also copy the package to the clipboard")

    dec = sub.add_parser("decrypt", help="Decrypt a Base64 package")
    dec.add_argument("package", nargs="?", help="Package to decrypt (default: read stdin)")
    dec.add_argument("--copy", action="store_true", help="Also copy the plaintext to the clipboard")
    dec.add_argument("--paste", action="store_true", help="Read the package from the clipboard")

    insp = sub.add_parser("inspect", help="Show the header of a package without decrypting it")
    insp.add_argument("package", nargs="?", help="Package to inspect (default: read stdin)")
    insp.add_argument("--paste", action="store_true", help="Read the package from the clipboard")

    sub.add_parser("tui", help="Launch the interactive Textual app")
    return parser


def main(
    argv: Optional[List[str]] = None,
    ctx: Optional[AppContext] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    ctx = ctx or build_context()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    configure_logging(parse_level(args.log_level, default=ctx.log_level))

    if args.command == "tui":  # pragma: no cover - UI only
        from vaultshield.frontend.cli.app import run_app

        run_app(ctx)
        return 0

    try:
        if args.command == "encrypt":
            # Keep text exactly as given; only drop the trailing newline of piped input.
            text = _read_argument(args.text, stdin)
            if args.text is None:
                text = text[:-2] if text.endswith("\r\n") else text.removesuffix("\n")
            result = ctx.codec.encrypt(text, _master_password(ctx))
        elif args.command == "decrypt":
            package = _read_argument(args.package, stdin, args.paste).strip()
            result = ctx.codec.decrypt(package, _master_password(ctx))
        else:
            package = Package.decode(_read_argument(args.package, stdin, args.paste).strip())
            result = json.dumps(describe_package(package), indent=2)
    except VaultShieldError as e:
        logger.debug("%s failed with %s", args.command, type(e).__name__)
        print(str(e), file=stderr)
        return 1

    print(result, file=stdout)

    if getattr(args, "copy", False):
        try:
            copy_to_clipboard(result)
        except pyperclip.PyperclipException as e:
            print(f"Clipboard unavailable: {e}", file=stderr)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
