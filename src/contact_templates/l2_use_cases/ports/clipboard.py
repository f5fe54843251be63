"""Port: sink for rendered text."""

from __future__ import annotations

from typing import Protocol


class Clipboard(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    def copy(self, text: str) -> None:
        """Deliver *text* to the user's clipboard."""
        ...
