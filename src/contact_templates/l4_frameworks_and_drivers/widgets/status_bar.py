"""Status bar — bottom bar showing variable counts and keybinding hints."""

from __future__ import annotations

from rich.cells import cell_len
from rich.markup import escape
from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """Bottom status bar with template/group names, counts, and keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    template_title: reactive[str] = reactive('')
    group_title: reactive[str] = reactive('')
    var_count: reactive[int] = reactive(0)
    signature_count: reactive[int] = reactive(0)
    char_count: reactive[int] = reactive(0)
    keybinding_hints: reactive[str] = reactive(r'\[F2] copy  \[Ctrl+Q] quit')

    def render(self) -> str:
        left = ' │ '.join(
            [
                f'{escape(self.template_title)} / {escape(self.group_title)}',
                f'vars {self.var_count} (sig {self.signature_count})',
                f'{self.char_count} chars',
            ]
        )
        content_width = (self.size.width or 80) - 2
        hints = self.keybinding_hints
        gap = content_width - cell_len(left) - cell_len(hints.replace(r'\[', '['))
        if gap >= 2:
            left = left + ' ' * gap + hints
        return left
