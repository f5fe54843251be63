"""Gateway: YAML default-content loader — implements DefaultsLoader port."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import yaml

from contact_templates.l1_entities.defaults import DefaultContent, DefaultsMetadata
from contact_templates.l3_interface_adapters.gateways.paths import USER_DEFAULTS_DIR

_DEFAULTS_DIR = resources.files('contact_templates') / 'defaults'


def builtin_names() -> set[str]:
    """Discover built-in defaults names from the packaged defaults directory."""
    return {p.name.removesuffix('.yaml') for p in _DEFAULTS_DIR.iterdir() if p.name.endswith('.yaml')}


def user_defaults_names() -> set[str]:
    """Discover user defaults names from the user defaults directory."""
    if not USER_DEFAULTS_DIR.is_dir():
        return set()
    return {p.name.removesuffix('.yaml') for p in USER_DEFAULTS_DIR.iterdir() if p.name.endswith('.yaml')}


class YamlDefaultsLoader:
    """Loads DefaultContent from a YAML file, a user defaults name, or a built-in name."""

    def load(self, defaults_ref: str) -> DefaultContent:
        # 1. Explicit file path
        path = Path(defaults_ref)
        if path.exists() and path.is_file():
            return DefaultContent.model_validate(yaml.safe_load(path.read_text(encoding='utf-8')) or {})
        # 2. User defaults (override built-ins of the same name)
        if defaults_ref in user_defaults_names():
            return _load_file(USER_DEFAULTS_DIR / f'{defaults_ref}.yaml', defaults_ref)
        # 3. Built-in defaults
        if defaults_ref in builtin_names():
            return _load_file(_DEFAULTS_DIR / f'{defaults_ref}.yaml', defaults_ref)
        available = sorted(builtin_names() | user_defaults_names())
        raise FileNotFoundError(f"Defaults not found: '{defaults_ref}'. Available: {', '.join(available)}")

    def list_defaults(self) -> list[DefaultsMetadata]:
        loaded: dict[str, DefaultsMetadata] = {}
        for name in builtin_names():
            loaded[name] = _load_file(_DEFAULTS_DIR / f'{name}.yaml', name).metadata
        for name in user_defaults_names():
            loaded[name] = _load_file(USER_DEFAULTS_DIR / f'{name}.yaml', name).metadata
        return [loaded[k] for k in sorted(loaded)]


def _load_file(source, name: str) -> DefaultContent:
    content = DefaultContent.model_validate(yaml.safe_load(source.read_text(encoding='utf-8')) or {})
    content.metadata.key = name
    return content
