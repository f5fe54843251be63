"""Use cases: build the default workspace and reset parts of it."""

from __future__ import annotations

import logging

from contact_templates.l1_entities.defaults import DefaultContent
from contact_templates.l1_entities.workspace import SignatureGroup, Template, Workspace
from contact_templates.l2_use_cases.utils.ids import GROUP_PREFIX, TEMPLATE_PREFIX, IdFactory, new_id

log = logging.getLogger('ct.reset')


def default_template_vars(defaults: DefaultContent, signature_keys: list[str]) -> dict[str, str]:
    """Default local vars minus any key already routed to signature groups."""
    return {k: v for k, v in defaults.template_vars.items() if k not in signature_keys}


def default_group_vars(defaults: DefaultContent, signature_keys: list[str]) -> dict[str, str]:
    """One entry per registry key, seeded from the defaults where they define a value."""
    return {k: defaults.group_vars.get(k, '') for k in signature_keys}


def build_default_workspace(defaults: DefaultContent, id_factory: IdFactory = new_id) -> Workspace:
    signature_keys = list(dict.fromkeys(defaults.signature_keys))
    template = Template(
        id=id_factory(TEMPLATE_PREFIX),
        title=defaults.template_title,
        body=defaults.template_body,
        vars=default_template_vars(defaults, signature_keys),
    )
    group = SignatureGroup(
        id=id_factory(GROUP_PREFIX),
        title=defaults.group_title,
        vars=default_group_vars(defaults, signature_keys),
    )
    return Workspace(
        templates=[template],
        active_template_id=template.id,
        groups=[group],
        active_group_id=group.id,
        signature_keys=signature_keys,
    )


def reset_template(workspace: Workspace, defaults: DefaultContent) -> None:
    """Restore the active template's body and vars; the title is kept."""
    template = workspace.active_template
    template.body = defaults.template_body
    template.vars = default_template_vars(defaults, workspace.signature_keys)
    log.info('Reset template %s', template.id)


def reset_group(workspace: Workspace) -> None:
    """Blank every registry key in the active group and drop everything else; the title is kept."""
    group = workspace.active_group
    group.vars = {k: '' for k in workspace.signature_keys}
    log.info('Reset group %s', group.id)
