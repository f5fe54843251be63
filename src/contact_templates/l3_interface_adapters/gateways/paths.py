"""Shared path constants for configuration, user defaults, and the snapshot."""

from __future__ import annotations

from platformdirs import user_config_path, user_data_path

CONFIG_DIR = user_config_path('contact-templates')
USER_DEFAULTS_DIR = CONFIG_DIR / 'defaults'

DATA_DIR = user_data_path('contact-templates')
DEFAULT_SNAPSHOT_PATH = DATA_DIR / 'snapshot.yaml'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
