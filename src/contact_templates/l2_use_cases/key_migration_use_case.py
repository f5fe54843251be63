"""Use case: move, add, and remove variable keys across the two stores."""

from __future__ import annotations

import logging

from contact_templates.l1_entities.errors import DuplicateVariableError, EmptyNameError
from contact_templates.l1_entities.workspace import ReclassifyResult, Workspace
from contact_templates.l2_use_cases.utils.placeholders import (
    extract_placeholders,
    merge_variables,
    strip_placeholder,
)

log = logging.getLogger('ct.migrate')


def _without(values: dict[str, str], key: str) -> dict[str, str]:
    return {k: v for k, v in values.items() if k != key}


class KeyMigrationUseCase:
    """Applies key moves to a Workspace.

    Every method computes the new maps first and assigns them together, so a
    reader never sees a key in both stores or in neither.
    """

    def reclassify(self, workspace: Workspace, key: str, *, to_signature: bool) -> ReclassifyResult:
        """Move *key* into the signature scope (or back to the template scope), carrying its value."""
        if workspace.is_signature(key) == to_signature:
            return ReclassifyResult.UNCHANGED

        template = workspace.active_template
        group = workspace.active_group
        known = key in template.vars or key in group.vars or key in extract_placeholders(template.body)
        if not known and not workspace.is_signature(key):
            return ReclassifyResult.NOT_FOUND

        # Merged view covers every fallback: source store, then the other
        # store, then ''. When both stores hold the key the signature value wins.
        value = merge_variables(template.vars, group.vars).get(key, '')

        if to_signature:
            registry = [*workspace.signature_keys, key]
            template_vars = {tmpl.id: _without(tmpl.vars, key) for tmpl in workspace.templates}
            group_vars = {group.id: {**group.vars, key: value}}
        else:
            registry = [k for k in workspace.signature_keys if k != key]
            template_vars = {template.id: {**template.vars, key: value}}
            group_vars = {grp.id: _without(grp.vars, key) for grp in workspace.groups}

        for tmpl in workspace.templates:
            if tmpl.id in template_vars:
                tmpl.vars = template_vars[tmpl.id]
        for grp in workspace.groups:
            if grp.id in group_vars:
                grp.vars = group_vars[grp.id]
        workspace.signature_keys = registry

        log.info('Reclassified %r → %s', key, 'signature' if to_signature else 'template')
        return ReclassifyResult.MOVED

    def add(self, workspace: Workspace, name: str) -> str:
        """Add an empty template-local variable. Returns the trimmed key."""
        key = name.strip()
        if not key:
            raise EmptyNameError('Variable name must not be blank')

        template = workspace.active_template
        group = workspace.active_group
        if key in template.vars or key in group.vars or workspace.is_signature(key):
            raise DuplicateVariableError(f"Variable '{key}' already exists (template or signature)")

        template.vars = {**template.vars, key: ''}
        log.info('Added variable %r to template %s', key, template.id)
        return key

    def remove(self, workspace: Workspace, key: str, *, strip_body: bool = False) -> None:
        """Drop *key* from the active template, every group, and the registry.

        With *strip_body* every token for the key is removed from the active body too.
        """
        template = workspace.active_template
        body = strip_placeholder(template.body, key) if strip_body else template.body
        template_vars = _without(template.vars, key)
        group_vars = {grp.id: _without(grp.vars, key) for grp in workspace.groups}
        registry = [k for k in workspace.signature_keys if k != key]

        template.body = body
        template.vars = template_vars
        for grp in workspace.groups:
            grp.vars = group_vars[grp.id]
        workspace.signature_keys = registry
        log.info('Removed variable %r (strip_body=%s)', key, strip_body)
