"""Port: built-in default content loader."""

from __future__ import annotations

from typing import Protocol

from contact_templates.l1_entities.defaults import DefaultContent, DefaultsMetadata


class DefaultsLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract defaults loader."""

    def load(self, defaults_ref: str) -> DefaultContent:
        """Load default content by name or file path."""
        ...

    def list_defaults(self) -> list[DefaultsMetadata]:
        """List available default content sets (built-in and user)."""
        ...
