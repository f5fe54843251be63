"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel


class StorageConfig(BaseModel):
    path: str


class ContentConfig(BaseModel):
    defaults: str


class DisplayConfig(BaseModel):
    collation_locale: str = ''  # '' keeps the process locale


class AppConfig(BaseModel):
    storage: StorageConfig
    content: ContentConfig
    display: DisplayConfig
