"""Pure functions for scanning, rendering, and editing placeholder tokens."""

from __future__ import annotations

import re

# {{ name }}: inner whitespace ignored, braces never nest
PLACEHOLDER_RE = re.compile(r'\{\{\s*([^{}]+?)\s*\}\}')


def extract_placeholders(text: str) -> frozenset[str]:
    """Return the distinct, trimmed placeholder names referenced in *text*."""
    names = set()
    for match in PLACEHOLDER_RE.finditer(text):
        name = match.group(1).strip()
        if name:
            names.add(name)
    return frozenset(names)


def merge_variables(template_vars: dict[str, str], group_vars: dict[str, str]) -> dict[str, str]:
    """Overlay group values on template values; group wins on collision."""
    return {**template_vars, **group_vars}


def render_template(body: str, merged: dict[str, str]) -> str:
    """Substitute every token with its merged value, or '' when absent."""
    return PLACEHOLDER_RE.sub(lambda m: merged.get(m.group(1).strip(), ''), body)


def make_token(name: str) -> str:
    return '{{' + name + '}}'


def strip_placeholder(body: str, name: str) -> str:
    """Remove every token for *name*, whatever whitespace it carries inside the braces."""
    pattern = re.compile(r'\{\{\s*' + re.escape(name) + r'\s*\}\}')
    return pattern.sub('', body)


def insert_token(
    body: str,
    name: str,
    cursor: int | None = None,
    selection_end: int | None = None,
) -> tuple[str, int]:
    """Splice the token for *name* into *body*. Returns (new_body, new_cursor).

    With no cursor the token is appended. A selection (cursor..selection_end)
    is replaced by the token.
    """
    token = make_token(name)
    if cursor is None:
        return body + token, len(body) + len(token)
    start = min(max(cursor, 0), len(body))
    end = start if selection_end is None else min(max(selection_end, start), len(body))
    return body[:start] + token + body[end:], start + len(token)
