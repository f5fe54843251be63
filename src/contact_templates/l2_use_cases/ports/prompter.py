"""Port: human decisions at destructive or disambiguating steps."""

from __future__ import annotations

from typing import Protocol


class Prompter(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Synchronous strategy the controller calls whenever it needs a human answer."""

    def confirm(self, message: str) -> bool:
        """Yes/no question. False leaves all state unchanged."""
        ...

    def ask_text(self, message: str, default: str = '') -> str | None:
        """Free-text question. None means the user cancelled."""
        ...
