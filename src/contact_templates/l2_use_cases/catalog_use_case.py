"""Use cases: create, duplicate, rename, select, and delete templates and signature groups."""

from __future__ import annotations

import logging

from contact_templates.l1_entities.defaults import DefaultContent
from contact_templates.l1_entities.errors import LastItemError, UnknownItemError
from contact_templates.l1_entities.workspace import SignatureGroup, Template, Workspace
from contact_templates.l2_use_cases.reset_use_case import default_group_vars, default_template_vars
from contact_templates.l2_use_cases.utils.ids import GROUP_PREFIX, TEMPLATE_PREFIX, IdFactory, new_id

log = logging.getLogger('ct.catalog')


# --- Templates ---


def add_template(
    workspace: Workspace,
    title: str,
    defaults: DefaultContent,
    id_factory: IdFactory = new_id,
) -> Template:
    """Insert a template with the default body at the top and make it active."""
    template = Template(
        id=id_factory(TEMPLATE_PREFIX),
        title=title.strip() or defaults.new_template_title,
        body=defaults.template_body,
        vars=default_template_vars(defaults, workspace.signature_keys),
    )
    workspace.templates = [template, *workspace.templates]
    workspace.active_template_id = template.id
    log.info('Created template %s (%r)', template.id, template.title)
    return template


def duplicate_template(workspace: Workspace, title: str, id_factory: IdFactory = new_id) -> Template:
    source = workspace.active_template
    template = Template(
        id=id_factory(TEMPLATE_PREFIX),
        title=title.strip() or source.title,
        body=source.body,
        vars=dict(source.vars),
    )
    workspace.templates = [template, *workspace.templates]
    workspace.active_template_id = template.id
    log.info('Duplicated template %s → %s', source.id, template.id)
    return template


def rename_template(workspace: Workspace, title: str) -> None:
    """Blank titles keep the current one."""
    template = workspace.active_template
    template.title = title.strip() or template.title


def ensure_template_removable(workspace: Workspace) -> None:
    if len(workspace.templates) <= 1:
        raise LastItemError('At least one template is required')


def remove_template(workspace: Workspace) -> Template:
    """Delete the active template; the first remaining one becomes active."""
    ensure_template_removable(workspace)
    removed = workspace.active_template
    workspace.templates = [t for t in workspace.templates if t.id != removed.id]
    workspace.active_template_id = workspace.templates[0].id
    log.info('Deleted template %s', removed.id)
    return removed


def select_template(workspace: Workspace, template_id: str) -> None:
    if not any(t.id == template_id for t in workspace.templates):
        raise UnknownItemError(f'No template with id {template_id!r}')
    workspace.active_template_id = template_id


# --- Signature groups ---


def add_group(
    workspace: Workspace,
    title: str,
    defaults: DefaultContent,
    id_factory: IdFactory = new_id,
) -> SignatureGroup:
    group = SignatureGroup(
        id=id_factory(GROUP_PREFIX),
        title=title.strip() or defaults.new_group_title,
        vars=default_group_vars(defaults, workspace.signature_keys),
    )
    workspace.groups = [group, *workspace.groups]
    workspace.active_group_id = group.id
    log.info('Created group %s (%r)', group.id, group.title)
    return group


def rename_group(workspace: Workspace, title: str) -> None:
    group = workspace.active_group
    group.title = title.strip() or group.title


def ensure_group_removable(workspace: Workspace) -> None:
    if len(workspace.groups) <= 1:
        raise LastItemError('At least one signature group is required')


def remove_group(workspace: Workspace) -> SignatureGroup:
    ensure_group_removable(workspace)
    removed = workspace.active_group
    workspace.groups = [g for g in workspace.groups if g.id != removed.id]
    workspace.active_group_id = workspace.groups[0].id
    log.info('Deleted group %s', removed.id)
    return removed


def select_group(workspace: Workspace, group_id: str) -> None:
    if not any(g.id == group_id for g in workspace.groups):
        raise UnknownItemError(f'No signature group with id {group_id!r}')
    workspace.active_group_id = group_id
