"""Pure functions converting a Workspace to and from its persisted snapshot dict."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from contact_templates.l1_entities.workspace import SignatureGroup, Template, Workspace

log = logging.getLogger('ct.snapshot')

_TEMPLATES = TypeAdapter(list[Template])
_GROUPS = TypeAdapter(list[SignatureGroup])
_KEYS = TypeAdapter(list[str])


def workspace_to_snapshot(workspace: Workspace) -> dict:
    return workspace.model_dump(mode='json')


def workspace_from_snapshot(raw: object, fallback: Workspace) -> Workspace:
    """Rebuild a Workspace from *raw*, using *fallback* for any missing or malformed field.

    A non-mapping *raw* is treated as no prior state. The result is normalized
    so that registry keys live only in group maps.
    """
    if not isinstance(raw, dict):
        if raw is not None:
            log.debug('Ignoring snapshot of type %s', type(raw).__name__)
        return fallback.model_copy(deep=True)

    templates = _field(raw, 'templates', _TEMPLATES, fallback.templates)
    groups = _field(raw, 'groups', _GROUPS, fallback.groups)
    keys = _field(raw, 'signature_keys', _KEYS, fallback.signature_keys)

    active_template_id = raw.get('active_template_id')
    if not isinstance(active_template_id, str) or not any(t.id == active_template_id for t in templates):
        active_template_id = templates[0].id
    active_group_id = raw.get('active_group_id')
    if not isinstance(active_group_id, str) or not any(g.id == active_group_id for g in groups):
        active_group_id = groups[0].id

    workspace = Workspace(
        templates=[t.model_copy(deep=True) for t in templates],
        active_template_id=active_template_id,
        groups=[g.model_copy(deep=True) for g in groups],
        active_group_id=active_group_id,
        signature_keys=list(keys),
    )
    normalize(workspace)
    return workspace


def normalize(workspace: Workspace) -> None:
    """Trim and de-duplicate the registry, then drop keys stored in the wrong scope."""
    keys = list(dict.fromkeys(k.strip() for k in workspace.signature_keys if k.strip()))
    workspace.signature_keys = keys
    registry = set(keys)
    for tmpl in workspace.templates:
        tmpl.vars = {k: v for k, v in tmpl.vars.items() if k not in registry}
    for group in workspace.groups:
        group.vars = {k: v for k, v in group.vars.items() if k in registry}


def _field(raw: dict, name: str, adapter: TypeAdapter, default: list):
    value = raw.get(name)
    if value is None:
        return default
    try:
        parsed = adapter.validate_python(value)
    except ValidationError:
        log.debug('Snapshot field %r is malformed; using default', name)
        return default
    if name in {'templates', 'groups'} and not parsed:
        return default
    return parsed
