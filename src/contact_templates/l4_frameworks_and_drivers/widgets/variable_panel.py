"""Variable panel — one editable row per variable of the active template/group pair."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Checkbox, Input, Static

from contact_templates.l2_use_cases.variable_listing_use_case import VariableRow


class VariableItem(Horizontal):
    """Key label, value input, signature checkbox, insert and delete buttons."""

    DEFAULT_CSS = """
    VariableItem {
        height: auto;
    }
    VariableItem > .var-key {
        width: 16;
        padding: 1 1 0 0;
    }
    VariableItem > .var-key.unused {
        color: $text-muted;
    }
    VariableItem > Input {
        width: 1fr;
    }
    VariableItem > Checkbox {
        width: auto;
    }
    VariableItem > Button {
        min-width: 8;
        width: auto;
    }
    """

    class ValueChanged(Message):
        def __init__(self, key: str, value: str) -> None:
            super().__init__()
            self.key = key
            self.value = value

    class SignatureToggled(Message):
        def __init__(self, key: str, is_signature: bool) -> None:
            super().__init__()
            self.key = key
            self.is_signature = is_signature

    class InsertRequested(Message):
        def __init__(self, key: str) -> None:
            super().__init__()
            self.key = key

    class DeleteRequested(Message):
        def __init__(self, key: str) -> None:
            super().__init__()
            self.key = key

    def __init__(self, row: VariableRow, **kwargs) -> None:
        super().__init__(**kwargs)
        self.key = row.key
        self._row = row

    def compose(self) -> ComposeResult:
        classes = 'var-key' if self._row.in_body else 'var-key unused'
        yield Static(self._row.key, classes=classes, markup=False)
        yield Input(value=self._row.value, placeholder='(empty)', classes='var-value')
        yield Checkbox('sig', value=self._row.is_signature, classes='var-signature')
        yield Button('Insert', classes='var-insert')
        yield Button('Del', classes='var-delete', variant='error')

    def set_value(self, value: str) -> None:
        """Update the input without echoing a ValueChanged back."""
        field = self.query_one('.var-value', Input)
        if field.value == value:
            return
        with field.prevent(Input.Changed):
            field.value = value

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.ValueChanged(self.key, event.value))

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        self.post_message(self.SignatureToggled(self.key, event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class('var-insert'):
            self.post_message(self.InsertRequested(self.key))
        else:
            self.post_message(self.DeleteRequested(self.key))


class VariablePanel(VerticalScroll):
    """Scrollable list of VariableItem rows; rebuilt only when the set of rows changes."""

    DEFAULT_CSS = """
    VariablePanel {
        height: 1fr;
        border: solid $secondary;
        scrollbar-size: 1 1;
    }
    """

    def __init__(self, title: str = 'Variables', **kwargs) -> None:
        super().__init__(**kwargs)
        self.border_title = title
        self._layout: tuple[tuple[str, bool, bool], ...] = ()

    async def show_rows(self, rows: list[VariableRow]) -> None:
        layout = tuple((r.key, r.is_signature, r.in_body) for r in rows)
        if layout == self._layout:
            values = {r.key: r.value for r in rows}
            for item in self.query(VariableItem):
                item.set_value(values[item.key])
            return
        self._layout = layout
        await self.remove_children()
        await self.mount_all([VariableItem(r) for r in rows])
