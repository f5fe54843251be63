"""Port: persisted workspace snapshot."""

from __future__ import annotations

from typing import Protocol


class SnapshotStore(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Opaque get/set/clear of the serialized workspace."""

    def load(self) -> dict | None:
        """Return the stored snapshot, or None when there is no prior state."""
        ...

    def save(self, snapshot: dict) -> None:
        """Replace the stored snapshot."""
        ...

    def clear(self) -> None:
        """Discard the stored snapshot."""
        ...
