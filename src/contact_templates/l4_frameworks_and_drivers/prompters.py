"""Prompter implementations for the TUI (modal screens) and the CLI (click prompts)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from contact_templates.l4_frameworks_and_drivers.widgets.confirm_modal import ConfirmModal
from contact_templates.l4_frameworks_and_drivers.widgets.prompt_modal import PromptModal

if TYPE_CHECKING:
    from contact_templates.l4_frameworks_and_drivers.app import EditorApp


class TextualPrompter:
    """Blocks the calling worker thread on a modal screen until the user answers.

    Must be called from a thread worker; the modal itself runs on the app loop.
    """

    def __init__(self) -> None:
        self._app: EditorApp | None = None

    def attach(self, app: EditorApp) -> None:
        self._app = app

    def confirm(self, message: str) -> bool:
        return bool(self._ask(ConfirmModal(message)))

    def ask_text(self, message: str, default: str = '') -> str | None:
        return self._ask(PromptModal(message, default))

    def _ask(self, screen):
        if self._app is None:
            raise RuntimeError('TextualPrompter is not attached to an app')
        return self._app.call_from_thread(self._app.ask_screen, screen)


class ClickPrompter:
    """Terminal prompts for the non-TUI command line."""

    def confirm(self, message: str) -> bool:
        return click.confirm(message, default=False)

    def ask_text(self, message: str, default: str = '') -> str | None:
        try:
            return click.prompt(message, default=default, show_default=bool(default))
        except click.Abort:
            return None
