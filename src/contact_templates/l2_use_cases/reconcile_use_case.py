"""Use case: give every placeholder in the active body a backing variable entry."""

from __future__ import annotations

import logging

from contact_templates.l1_entities.workspace import Workspace
from contact_templates.l2_use_cases.utils.placeholders import extract_placeholders

log = logging.getLogger('ct.reconcile')


def reconcile(workspace: Workspace) -> bool:
    """Create missing entries for the active pair. Returns True if anything was added.

    Signature names go to the active group, everything else to the active
    template. Existing values are never overwritten and stale entries are kept.
    """
    template = workspace.active_template
    group = workspace.active_group
    added_local: dict[str, str] = {}
    added_group: dict[str, str] = {}

    for key in extract_placeholders(template.body):
        if workspace.is_signature(key):
            if key not in group.vars:
                added_group[key] = ''
        elif key not in template.vars:
            added_local[key] = ''

    if added_local:
        template.vars = {**template.vars, **added_local}
    if added_group:
        group.vars = {**group.vars, **added_group}
    if added_local or added_group:
        log.debug(
            'Reconciled template=%s group=%s: +%d local, +%d signature',
            template.id,
            group.id,
            len(added_local),
            len(added_group),
        )
    return bool(added_local or added_group)
