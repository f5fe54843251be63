"""Use case: list the variables of the active pair in display order."""

from __future__ import annotations

import locale
from collections.abc import Callable
from dataclasses import dataclass

from contact_templates.l1_entities.workspace import Workspace
from contact_templates.l2_use_cases.utils.placeholders import extract_placeholders, merge_variables


@dataclass(frozen=True)
class VariableRow:
    """One line of the variable panel."""

    key: str
    value: str
    is_signature: bool
    in_body: bool


def list_variables(
    workspace: Workspace,
    sort_key: Callable[[str], object] = locale.strxfrm,
) -> list[VariableRow]:
    """Rows for body names, both active maps, and the registry.

    Ordered: used in the body first, then signature keys, then the rest,
    each bucket collated with *sort_key*.
    """
    template = workspace.active_template
    group = workspace.active_group
    in_body = extract_placeholders(template.body)
    merged = merge_variables(template.vars, group.vars)

    keys = set(in_body) | set(template.vars) | set(group.vars) | set(workspace.signature_keys)
    ordered = sorted(
        keys,
        key=lambda k: (k not in in_body, not workspace.is_signature(k), sort_key(k), k),
    )
    return [
        VariableRow(
            key=k,
            value=merged.get(k, ''),
            is_signature=workspace.is_signature(k),
            in_body=k in in_body,
        )
        for k in ordered
    ]
