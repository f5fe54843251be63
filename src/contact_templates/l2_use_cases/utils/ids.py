"""Identifier generation for templates and signature groups."""

from __future__ import annotations

import uuid
from collections.abc import Callable

IdFactory = Callable[[str], str]

TEMPLATE_PREFIX = 't_'
GROUP_PREFIX = 'p_'


def new_id(prefix: str) -> str:
    """Return a process-unique identifier such as ``t_3f2a9c0e1b4d``."""
    return f'{prefix}{uuid.uuid4().hex[:12]}'
