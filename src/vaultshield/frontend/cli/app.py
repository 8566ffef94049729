"""Textual front-end for VaultShield.

Start here with `python -m vaultshield.frontend.cli.app`
"""

from __future__ import annotations

import logging
from typing import Optional

import pyperclip
from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Input, Label, Select, Static

from vaultshield.core.exceptions import VaultShieldError
from vaultshield.frontend.cli.clipboard import copy_to_clipboard
from vaultshield.frontend.cli.context import ACTIONS, AppContext, build_context
from vaultshield.security.codec import PackageCodec


logger = logging.getLogger(__name__)


def perform_action(codec: PackageCodec, action: str, text: str, password: str) -> str:
    """Run ``action`` ("Encrypt" or "Decrypt") and return the resulting string.

    Raises VaultShieldError subclasses unchanged so callers can show the message.
    """
    if action == "Encrypt":
        return codec.encrypt(text, password)
    if action == "Decrypt":
        return codec.decrypt(text, password)
    raise ValueError(f"Unknown action: {action}")


class VaultShieldApp(App):
    """Single-screen encrypt/decrypt form."""

    TITLE = "Vault Shield"

    CSS = """
    #card { padding: 1 2; border: heavy $surface; height: auto; }
    .row { height: auto; }
    .row Input { width: 1fr; }
    .row Button { min-width: 8; }
    .section-label { padding: 1 0 0 0; color: $text-muted; text-style: bold; }
    #action { width: 24; }
    #run { width: 100%; margin: 1 0 0 0; }
    #output { width: 1fr; min-height: 3; padding: 0 1; border: round $surface; }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+r", "run_selected", "Run"),
        ("ctrl+y", "copy_output", "Copy"),
    ]

    def __init__(self, ctx: AppContext | None = None):
        self.ctx = ctx or build_context()
        super().__init__()

        self.selected_action: str = self.ctx.default_action
        self.output_text: str = ""
        self.output_view: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="card"):
            with Horizontal(classes="row"):
                yield Label("Select Action:", classes="section-label")
                yield Select(
                    [(action, action) for action in ACTIONS],
                    value=self.selected_action,
                    allow_blank=False,
                    id="action",
                )
            yield Label("Enter Text or Package:", classes="section-label")
            with Horizontal(classes="row"):
                yield Input(placeholder="Enter text", password=True, id="text")
                yield Button("Show", id="toggle-text")
                yield Button("Clear", id="clear-text")
            yield Label("Enter Master Password:", classes="section-label")
            with Horizontal(classes="row"):
                yield Input(placeholder="Enter password", password=True, id="master")
                yield Button("Show", id="toggle-master")
                yield Button("Clear", id="clear-master")
            yield Button(self.selected_action, id="run", variant="primary")
            yield Label("Output Value:", classes="section-label")
            with Horizontal(classes="row"):
                self.output_view = Static("", id="output", markup=False)
                yield self.output_view
                yield Button("Copy", id="copy")
        yield Footer()

    def on_mount(self) -> None:  # pragma: no cover
        self.set_focus(self.query_one("#text", Input))

    # ------------------------------------------------------------------
    # Form handlers
    # ------------------------------------------------------------------

    @on(Select.Changed, "#action")
    def _action_changed(self, event: Select.Changed) -> None:
        if event.value in ACTIONS:
            self.selected_action = str(event.value)
            self.query_one("#run", Button).label = self.selected_action

    @on(Button.Pressed, "#toggle-text")
    def _toggle_text(self) -> None:
        self._toggle_visibility("#text", "#toggle-text")

    @on(Button.Pressed, "#toggle-master")
    def _toggle_master(self) -> None:
        self._toggle_visibility("#master", "#toggle-master")

    @on(Button.Pressed, "#clear-text")
    def _clear_text(self) -> None:
        self.query_one("#text", Input).value = ""

    @on(Button.Pressed, "#clear-master")
    def _clear_master(self) -> None:
        self.query_one("#master", Input).value = ""

    @on(Button.Pressed, "#run")
    def _run_pressed(self) -> None:
        self.action_run_selected()

    @on(Button.Pressed, "#copy")
    def _copy_pressed(self) -> None:
        self.action_copy_output()

    def _toggle_visibility(self, input_id: str, button_id: str) -> None:
        field = self.query_one(input_id, Input)
        field.password = not field.password
        self.query_one(button_id, Button).label = "Show" if field.password else "Hide"

    def _set_output(self, text: str) -> None:
        self.output_text = text
        if self.output_view is not None:
            self.output_view.update(text)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_run_selected(self) -> None:
        """Encrypt or decrypt the form contents and show the result or error message."""
        text = self.query_one("#text", Input).value
        password = self.query_one("#master", Input).value
        try:
            result = perform_action(self.ctx.codec, self.selected_action, text, password)
        except VaultShieldError as e:
            logger.info("%s failed: %s", self.selected_action, type(e).__name__)
            self._set_output(str(e))
            return
        self._set_output(result)

    def action_copy_output(self) -> None:
        if not self.output_text:
            self.notify("Nothing to copy", severity="warning")
            return
        try:
            copy_to_clipboard(self.output_text)
        except pyperclip.PyperclipException as e:
            self.notify(f"Clipboard unavailable: {e}", severity="error")
            return
        self.notify("Copied to clipboard")


def run_app(ctx: Optional[AppContext] = None) -> None:  # pragma: no cover - UI only
    """Run the Textual app, building the context from the environment when none is given."""
    VaultShieldApp(ctx).run()


if __name__ == "__main__":  # pragma: no cover
    run_app()
