"""Preview panel — shows the rendered active template."""

from __future__ import annotations

from textual.widgets import Static


class PreviewPanel(Static):
    """Plain-text rendering of the active template; no markup is interpreted."""

    DEFAULT_CSS = """
    PreviewPanel {
        height: 1fr;
        overflow-y: auto;
        border: solid $secondary;
        padding: 0 1;
    }
    """

    def __init__(self, title: str = 'Preview', **kwargs) -> None:
        super().__init__('', markup=False, **kwargs)
        self.border_title = title
        self._text = ''

    @property
    def text(self) -> str:
        return self._text

    def update_preview(self, text: str) -> None:
        if text == self._text:
            return
        self._text = text
        self.update(text)
