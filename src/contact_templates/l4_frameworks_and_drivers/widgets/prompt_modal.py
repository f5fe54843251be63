"""Prompt modal — single-line text input for names and titles."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Static


class PromptModal(ModalScreen[str | None]):
    """Modal that asks for a line of text. Enter → the text as typed, Escape → None."""

    DEFAULT_CSS = """
    PromptModal {
        align: center middle;
    }

    PromptModal > Vertical {
        width: 60;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    PromptModal > Vertical > #prompt-title {
        text-style: bold;
        margin-bottom: 1;
    }

    PromptModal > Vertical > #prompt-hint {
        color: $text-muted;
        margin-top: 1;
        text-align: center;
    }
    """

    BINDINGS = [('escape', 'cancel', 'Cancel')]

    def __init__(self, message: str, default: str = '', **kwargs) -> None:
        super().__init__(**kwargs)
        self._message = message
        self._default = default

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(self._message, id='prompt-title', markup=False)
            yield Input(value=self._default, id='prompt-input')
            yield Static('Enter to confirm · Escape to cancel', id='prompt-hint')

    def on_mount(self) -> None:
        self.query_one('#prompt-input', Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)
