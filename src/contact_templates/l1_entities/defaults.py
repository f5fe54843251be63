"""Built-in default content model — pure data, no I/O."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DefaultsMetadata(BaseModel):
    name: str = ''
    locale: str = ''
    key: str = ''  # file key (set by loader, not stored in YAML)


class DefaultContent(BaseModel):
    """Content used for new items and for every reset operation."""

    metadata: DefaultsMetadata = Field(default_factory=DefaultsMetadata)
    template_title: str = 'Template'
    template_body: str = ''
    template_vars: dict[str, str] = Field(default_factory=dict)
    group_title: str = 'Signature'
    group_vars: dict[str, str] = Field(default_factory=dict)
    signature_keys: list[str] = Field(default_factory=list)
    new_template_title: str = 'New template'
    new_group_title: str = 'New signature'
    copy_suffix: str = ' (copy)'
