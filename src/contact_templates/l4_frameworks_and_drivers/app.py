"""EditorApp — Textual shell around the WorkspaceController."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from functools import partial
from pathlib import Path

import pyperclip
from rich.markup import escape
from textual import work
from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Select, Static, TextArea

from contact_templates.l1_entities.errors import WorkspaceError
from contact_templates.l2_use_cases.ports.clipboard import Clipboard
from contact_templates.l3_interface_adapters.controllers.workspace_controller import WorkspaceController
from contact_templates.l4_frameworks_and_drivers.logging_setup import setup_file_logging
from contact_templates.l4_frameworks_and_drivers.prompters import TextualPrompter
from contact_templates.l4_frameworks_and_drivers.widgets.preview_panel import PreviewPanel
from contact_templates.l4_frameworks_and_drivers.widgets.status_bar import StatusBar
from contact_templates.l4_frameworks_and_drivers.widgets.variable_panel import VariableItem, VariablePanel

log = logging.getLogger('ct.app')

# Button id → controller method that may prompt (run in a worker thread)
_PROMPTING_BUTTONS = {
    'template-new': 'create_template',
    'template-duplicate': 'duplicate_template',
    'template-rename': 'rename_template',
    'template-delete': 'delete_template',
    'group-new': 'create_group',
    'group-rename': 'rename_group',
    'group-delete': 'delete_group',
    'var-add': 'add_variable',
    'reset-template': 'reset_template',
    'reset-group': 'reset_group',
    'reset-all': 'reset_all',
}


def location_to_offset(text: str, location: tuple[int, int]) -> int:
    row, col = location
    lines = text.split('\n')
    return sum(len(line) + 1 for line in lines[:row]) + col


def offset_to_location(text: str, offset: int) -> tuple[int, int]:
    before = text[:offset]
    row = before.count('\n')
    return row, offset - (before.rfind('\n') + 1)


class EditorApp(TextualApp):
    """Template editor: selectors, body editor, variable panel, live preview."""

    CSS_PATH = 'app.tcss'

    BINDINGS = [
        Binding('ctrl+q', 'quit', 'Quit', priority=True),
        Binding('f2', 'copy_preview', 'Copy', priority=True),
    ]

    def __init__(
        self,
        controller: WorkspaceController,
        clipboard: Clipboard,
        prompter: TextualPrompter | None = None,
        log_dir: Path | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self._clipboard = clipboard
        if prompter is not None:
            prompter.attach(self)
        if log_dir is not None:
            setup_file_logging(log_dir)
        self._template_options: list[tuple[str, str]] = []
        self._group_options: list[tuple[str, str]] = []
        self._prompting = False

    def compose(self) -> ComposeResult:
        ctrl = self._controller
        self._template_options = [(t.title, t.id) for t in ctrl.workspace.templates]
        self._group_options = [(g.title, g.id) for g in ctrl.workspace.groups]
        yield Static('  contact-templates', id='header')
        with Horizontal(id='template-bar', classes='toolbar'):
            yield Select(
                self._template_options,
                value=ctrl.active_template.id,
                allow_blank=False,
                id='template-select',
            )
            yield Button('New', id='template-new')
            yield Button('Duplicate', id='template-duplicate')
            yield Button('Rename', id='template-rename')
            yield Button('Delete', id='template-delete', variant='error')
        with Horizontal(id='group-bar', classes='toolbar'):
            yield Select(
                self._group_options,
                value=ctrl.active_group.id,
                allow_blank=False,
                id='group-select',
            )
            yield Button('New', id='group-new')
            yield Button('Rename', id='group-rename')
            yield Button('Delete', id='group-delete', variant='error')
        with Horizontal(id='main-panels'):
            with Vertical(id='editor-col'):
                yield TextArea(ctrl.active_template.body, id='body-editor')
            with Vertical(id='vars-col'):
                with Horizontal(id='vars-header'):
                    yield Static('Variables')
                    yield Button('Add', id='var-add')
                yield VariablePanel(id='variable-panel')
            with Vertical(id='preview-col'):
                yield PreviewPanel(id='preview-panel')
                yield Button('Copy', id='copy-preview', variant='primary')
        with Horizontal(id='reset-bar', classes='toolbar'):
            yield Button('Reset template', id='reset-template')
            yield Button('Reset signature', id='reset-group')
            yield Button('Reset all', id='reset-all', variant='error')
        yield StatusBar(id='status-bar')

    async def on_mount(self) -> None:
        self.query_one('#body-editor', TextArea).border_title = 'Body'
        await self.refresh_view()

    # --- View sync ---

    async def refresh_view(self) -> None:
        """Push controller state into every widget. Safe to call repeatedly."""
        ctrl = self._controller
        template = ctrl.active_template
        group = ctrl.active_group
        self.query_one('#header', Static).update(
            f'  contact-templates | {escape(template.title)} — {escape(group.title)}'
        )

        template_options = [(t.title, t.id) for t in ctrl.workspace.templates]
        self._sync_select('#template-select', template_options, self._template_options, template.id)
        self._template_options = template_options
        group_options = [(g.title, g.id) for g in ctrl.workspace.groups]
        self._sync_select('#group-select', group_options, self._group_options, group.id)
        self._group_options = group_options

        editor = self.query_one('#body-editor', TextArea)
        if editor.text != template.body:
            with editor.prevent(TextArea.Changed):
                editor.load_text(template.body)

        rows = ctrl.variables()
        await self.query_one('#variable-panel', VariablePanel).show_rows(rows)
        self.query_one('#preview-panel', PreviewPanel).update_preview(ctrl.preview)

        bar = self.query_one('#status-bar', StatusBar)
        bar.template_title = template.title
        bar.group_title = group.title
        bar.var_count = len(rows)
        bar.signature_count = sum(1 for r in rows if r.is_signature)
        bar.char_count = len(ctrl.preview)

    def _sync_select(
        self,
        selector: str,
        options: list[tuple[str, str]],
        previous: list[tuple[str, str]],
        value: str,
    ) -> None:
        select = self.query_one(selector, Select)
        with select.prevent(Select.Changed):
            if options != previous:
                select.set_options(options)
            if select.value != value:
                select.value = value

    # --- Worker bridge for the prompter ---

    async def ask_screen(self, screen: ModalScreen):
        """Push *screen* and wait for its dismiss result."""
        answer = asyncio.get_running_loop().create_future()

        def _resolve(result) -> None:
            if not answer.done():
                answer.set_result(result)

        await self.push_screen(screen, _resolve)
        return await answer

    def start_prompting(self, operation: Callable[[], object]) -> bool:
        """Start *operation* unless another prompting operation is still in flight."""
        if self._prompting:
            log.debug('Ignoring request while a workspace operation is running')
            return False
        self._prompting = True
        self.run_prompting(operation)
        return True

    @work(thread=True, group='workspace-ops')
    def run_prompting(self, operation: Callable[[], object]) -> None:
        """Run a controller operation that may block on the prompter."""
        try:
            operation()
        except WorkspaceError as e:
            self.call_from_thread(self.notify, str(e), severity='warning', timeout=4)
        finally:
            self.call_from_thread(self._finish_prompting)

    async def _finish_prompting(self) -> None:
        try:
            await self.refresh_view()
        finally:
            self._prompting = False

    # --- Event handlers ---

    async def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.id != 'body-editor':
            return
        self._controller.set_body(event.text_area.text)
        await self.refresh_view()

    async def on_select_changed(self, event: Select.Changed) -> None:
        # Read the settled value; transient values from set_options are ignored.
        value = event.select.value
        if not isinstance(value, str):
            return
        try:
            if event.select.id == 'template-select':
                self._controller.select_template(value)
            elif event.select.id == 'group-select':
                self._controller.select_group(value)
        except WorkspaceError as e:
            self.notify(str(e), severity='warning', timeout=4)
        await self.refresh_view()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == 'copy-preview':
            self.action_copy_preview()
            return
        method = _PROMPTING_BUTTONS.get(event.button.id or '')
        if method is not None:
            self.start_prompting(getattr(self._controller, method))

    async def on_variable_item_value_changed(self, message: VariableItem.ValueChanged) -> None:
        self._controller.set_variable_value(message.key, message.value)
        await self.refresh_view()

    async def on_variable_item_signature_toggled(self, message: VariableItem.SignatureToggled) -> None:
        self._controller.reclassify(message.key, to_signature=message.is_signature)
        await self.refresh_view()

    async def on_variable_item_insert_requested(self, message: VariableItem.InsertRequested) -> None:
        editor = self.query_one('#body-editor', TextArea)
        text = editor.text
        start, end = sorted((editor.selection.start, editor.selection.end))
        cursor = self._controller.insert_token(
            message.key,
            location_to_offset(text, start),
            location_to_offset(text, end),
        )
        await self.refresh_view()
        editor.focus()
        editor.move_cursor(offset_to_location(editor.text, cursor))

    def on_variable_item_delete_requested(self, message: VariableItem.DeleteRequested) -> None:
        self.start_prompting(partial(self._controller.delete_variable, message.key))

    # --- Actions ---

    def action_copy_preview(self) -> None:
        try:
            self._controller.copy_preview(self._clipboard)
        except pyperclip.PyperclipException as e:
            log.warning('Clipboard copy failed: %s', e)
            self.notify(f'Copy failed: {e}', severity='error', timeout=4)
            return
        self.notify('Copied', timeout=2)
