"""Workspace Pydantic models — templates, signature groups, and the signature-key registry."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Template(BaseModel):
    """Reusable body text plus its own local placeholder values."""

    id: str
    title: str
    body: str = ''
    vars: dict[str, str] = Field(default_factory=dict)


class SignatureGroup(BaseModel):
    """Named set of values shared across every template."""

    id: str
    title: str
    vars: dict[str, str] = Field(default_factory=dict)


class Workspace(BaseModel):
    """Aggregate of all templates and groups plus the signature-key registry.

    Template maps never hold registry keys; group maps hold only registry keys.
    """

    templates: list[Template]
    active_template_id: str
    groups: list[SignatureGroup]
    active_group_id: str
    signature_keys: list[str] = Field(default_factory=list)

    @property
    def active_template(self) -> Template:
        for tmpl in self.templates:
            if tmpl.id == self.active_template_id:
                return tmpl
        return self.templates[0]

    @property
    def active_group(self) -> SignatureGroup:
        for group in self.groups:
            if group.id == self.active_group_id:
                return group
        return self.groups[0]

    def is_signature(self, key: str) -> bool:
        return key in self.signature_keys


class ReclassifyResult(Enum):
    MOVED = 'moved'
    UNCHANGED = 'unchanged'  # already in the requested scope
    NOT_FOUND = 'not_found'


class DeleteResult(Enum):
    DELETED = 'deleted'
    CANCELLED = 'cancelled'
