"""WorkspaceController — owns the workspace aggregate, asks the prompter, persists after each change."""

from __future__ import annotations

import locale
import logging
from collections.abc import Callable

from contact_templates.l1_entities.defaults import DefaultContent
from contact_templates.l1_entities.errors import UnknownItemError
from contact_templates.l1_entities.workspace import (
    DeleteResult,
    ReclassifyResult,
    SignatureGroup,
    Template,
    Workspace,
)
from contact_templates.l2_use_cases import catalog_use_case as catalog
from contact_templates.l2_use_cases.key_migration_use_case import KeyMigrationUseCase
from contact_templates.l2_use_cases.ports.clipboard import Clipboard
from contact_templates.l2_use_cases.ports.prompter import Prompter
from contact_templates.l2_use_cases.ports.snapshot_store import SnapshotStore
from contact_templates.l2_use_cases.reconcile_use_case import reconcile
from contact_templates.l2_use_cases.reset_use_case import build_default_workspace, reset_group, reset_template
from contact_templates.l2_use_cases.utils.ids import IdFactory, new_id
from contact_templates.l2_use_cases.utils.placeholders import (
    extract_placeholders,
    insert_token,
    make_token,
    merge_variables,
    render_template,
)
from contact_templates.l2_use_cases.utils.snapshot import workspace_from_snapshot, workspace_to_snapshot
from contact_templates.l2_use_cases.variable_listing_use_case import VariableRow, list_variables

log = logging.getLogger('ct.controller')


class WorkspaceController:
    """Central orchestrator between the use cases and the UI.

    Every mutating method runs to completion, reconciles the active pair, and
    saves a snapshot before returning. Callers never touch the maps directly.
    """

    def __init__(
        self,
        defaults: DefaultContent,
        store: SnapshotStore,
        prompter: Prompter,
        id_factory: IdFactory = new_id,
        sort_key: Callable[[str], object] = locale.strxfrm,
    ) -> None:
        self._defaults = defaults
        self._store = store
        self.prompter = prompter
        self._id_factory = id_factory
        self._sort_key = sort_key
        self._migrate = KeyMigrationUseCase()

        self._workspace = self._load()
        self._commit()

    # --- Read side ---

    @property
    def workspace(self) -> Workspace:
        return self._workspace

    @property
    def active_template(self) -> Template:
        return self._workspace.active_template

    @property
    def active_group(self) -> SignatureGroup:
        return self._workspace.active_group

    @property
    def signature_keys(self) -> tuple[str, ...]:
        return tuple(self._workspace.signature_keys)

    @property
    def keys_in_body(self) -> frozenset[str]:
        return extract_placeholders(self.active_template.body)

    @property
    def merged_vars(self) -> dict[str, str]:
        return merge_variables(self.active_template.vars, self.active_group.vars)

    @property
    def preview(self) -> str:
        return render_template(self.active_template.body, self.merged_vars)

    def variables(self) -> list[VariableRow]:
        return list_variables(self._workspace, self._sort_key)

    def find_template(self, ref: str) -> Template:
        """Look a template up by id, then by title."""
        for tmpl in self._workspace.templates:
            if tmpl.id == ref:
                return tmpl
        for tmpl in self._workspace.templates:
            if tmpl.title == ref:
                return tmpl
        raise UnknownItemError(f'Template not found: {ref!r}')

    def find_group(self, ref: str) -> SignatureGroup:
        for group in self._workspace.groups:
            if group.id == ref:
                return group
        for group in self._workspace.groups:
            if group.title == ref:
                return group
        raise UnknownItemError(f'Signature group not found: {ref!r}')

    # --- Body and values ---

    def set_body(self, body: str) -> None:
        template = self.active_template
        if template.body == body:
            return
        template.body = body
        self._commit()

    def set_variable_value(self, key: str, value: str) -> None:
        """Store *value* in whichever scope *key* belongs to."""
        target = self.active_group if self._workspace.is_signature(key) else self.active_template
        if target.vars.get(key) == value:
            return
        target.vars = {**target.vars, key: value}
        self._commit()

    def select_template(self, template_id: str) -> None:
        if template_id == self._workspace.active_template_id:
            return
        catalog.select_template(self._workspace, template_id)
        self._commit()

    def select_group(self, group_id: str) -> None:
        if group_id == self._workspace.active_group_id:
            return
        catalog.select_group(self._workspace, group_id)
        self._commit()

    def insert_token(self, key: str, cursor: int | None = None, selection_end: int | None = None) -> int:
        """Splice the token for *key* into the body. Returns the cursor position after the token."""
        body, new_cursor = insert_token(self.active_template.body, key, cursor, selection_end)
        self.set_body(body)
        return new_cursor

    # --- Keys ---

    def add_variable(self, name: str | None = None) -> str | None:
        """Add a template-local variable. Asks for the name when none is given; None if cancelled."""
        if name is None:
            name = self.prompter.ask_text('Name of the variable to add')
            if not name:
                return None
        key = self._migrate.add(self._workspace, name)
        self._commit()
        return key

    def reclassify(self, key: str, *, to_signature: bool) -> ReclassifyResult:
        result = self._migrate.reclassify(self._workspace, key, to_signature=to_signature)
        if result is ReclassifyResult.MOVED:
            self._commit()
        return result

    def delete_variable(self, key: str) -> DeleteResult:
        """Delete *key* everywhere after confirmation, stripping its tokens if the body uses it."""
        used = key in self.keys_in_body
        if used:
            message = (
                f"'{key}' is used in the body.\n"
                f'Remove every {make_token(key)} from the body and delete the variable?'
            )
        else:
            message = f"Delete variable '{key}'?"
        if not self.prompter.confirm(message):
            return DeleteResult.CANCELLED
        self._migrate.remove(self._workspace, key, strip_body=used)
        self._commit()
        return DeleteResult.DELETED

    # --- Templates ---

    def create_template(self) -> Template | None:
        title = self.prompter.ask_text('New template name')
        if not title:
            return None
        template = catalog.add_template(self._workspace, title, self._defaults, self._id_factory)
        self._commit()
        return template

    def duplicate_template(self) -> Template | None:
        source = self.active_template
        title = self.prompter.ask_text('Name for the copy', source.title + self._defaults.copy_suffix)
        if not title:
            return None
        if not title.strip():
            title = source.title + self._defaults.copy_suffix
        template = catalog.duplicate_template(self._workspace, title, self._id_factory)
        self._commit()
        return template

    def rename_template(self) -> bool:
        title = self.prompter.ask_text('Rename template', self.active_template.title)
        if not title:
            return False
        catalog.rename_template(self._workspace, title)
        self._commit()
        return True

    def delete_template(self) -> bool:
        """Delete the active template. Raises LastItemError before asking when it is the only one."""
        catalog.ensure_template_removable(self._workspace)
        if not self.prompter.confirm(f"Delete template '{self.active_template.title}'?"):
            return False
        catalog.remove_template(self._workspace)
        self._commit()
        return True

    # --- Signature groups ---

    def create_group(self) -> SignatureGroup | None:
        title = self.prompter.ask_text('New signature group name')
        if not title:
            return None
        group = catalog.add_group(self._workspace, title, self._defaults, self._id_factory)
        self._commit()
        return group

    def rename_group(self) -> bool:
        title = self.prompter.ask_text('Rename signature group', self.active_group.title)
        if not title:
            return False
        catalog.rename_group(self._workspace, title)
        self._commit()
        return True

    def delete_group(self) -> bool:
        catalog.ensure_group_removable(self._workspace)
        if not self.prompter.confirm(f"Delete signature group '{self.active_group.title}'?"):
            return False
        catalog.remove_group(self._workspace)
        self._commit()
        return True

    # --- Resets ---

    def reset_template(self) -> bool:
        message = (
            f"Reset template '{self.active_template.title}'?\n"
            '(Body and template variables return to their defaults.)'
        )
        if not self.prompter.confirm(message):
            return False
        reset_template(self._workspace, self._defaults)
        self._commit()
        return True

    def reset_group(self) -> bool:
        message = f"Reset signature group '{self.active_group.title}'?\n(Signature values become empty.)"
        if not self.prompter.confirm(message):
            return False
        reset_group(self._workspace)
        self._commit()
        return True

    def reset_all(self) -> bool:
        if not self.prompter.confirm('Reset everything? Templates, signature groups, and saved data are discarded.'):
            return False
        try:
            self._store.clear()
        except Exception:  # noqa: BLE001 -- persistence is best-effort
            log.warning('Failed to clear snapshot', exc_info=True)
        self._workspace = build_default_workspace(self._defaults, self._id_factory)
        self._commit()
        return True

    # --- Export ---

    def copy_preview(self, clipboard: Clipboard) -> str:
        """Send the rendered active template to *clipboard*. Returns the text sent."""
        text = self.preview
        clipboard.copy(text)
        log.debug('Copied %d chars', len(text))
        return text

    # --- Internals ---

    def _load(self) -> Workspace:
        fallback = build_default_workspace(self._defaults, self._id_factory)
        try:
            raw = self._store.load()
        except Exception:  # noqa: BLE001 -- unreadable store means no prior state
            log.warning('Failed to load snapshot', exc_info=True)
            raw = None
        return workspace_from_snapshot(raw, fallback)

    def _commit(self) -> None:
        reconcile(self._workspace)
        try:
            self._store.save(workspace_to_snapshot(self._workspace))
        except Exception:  # noqa: BLE001 -- persistence is best-effort
            log.warning('Failed to save snapshot', exc_info=True)
