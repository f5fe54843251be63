"""Gateway: system clipboard via pyperclip — implements Clipboard port."""

from __future__ import annotations

import pyperclip


class PyperclipClipboard:
    def copy(self, text: str) -> None:
        pyperclip.copy(text)
