"""Application config defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from contact_templates.l1_entities.config import AppConfig
from contact_templates.l3_interface_adapters.gateways.paths import DEFAULT_SNAPSHOT_PATH
from contact_templates.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'storage': {
        'path': str(DEFAULT_SNAPSHOT_PATH),
    },
    'content': {
        'defaults': 'default_ja',
    },
    'display': {
        'collation_locale': '',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
