"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

import locale
import logging
from pathlib import Path

from contact_templates.l1_entities.config import AppConfig
from contact_templates.l1_entities.defaults import DefaultContent
from contact_templates.l2_use_cases.ports.clipboard import Clipboard
from contact_templates.l2_use_cases.ports.defaults_loader import DefaultsLoader
from contact_templates.l2_use_cases.ports.prompter import Prompter
from contact_templates.l2_use_cases.ports.snapshot_store import SnapshotStore
from contact_templates.l3_interface_adapters.controllers.workspace_controller import WorkspaceController
from contact_templates.l3_interface_adapters.gateways.pyperclip_clipboard import PyperclipClipboard
from contact_templates.l3_interface_adapters.gateways.yaml_defaults_loader import YamlDefaultsLoader
from contact_templates.l3_interface_adapters.gateways.yaml_snapshot_store import YamlSnapshotStore
from contact_templates.l4_frameworks_and_drivers.prompters import TextualPrompter

log = logging.getLogger('ct.container')


def apply_collation_locale(name: str, fallback: str = '') -> None:
    """Switch LC_COLLATE for variable ordering.

    A blank *name* takes the collation from the environment, then *fallback*.
    When nothing can be applied the current collation is kept.
    """
    if name:
        candidates = [name]
    else:
        candidates = ['', fallback] if fallback else ['']
    for candidate in candidates:
        try:
            locale.setlocale(locale.LC_COLLATE, candidate)
        except locale.Error:
            log.warning('Collation locale %r is not available', candidate or '<environment>')
            continue
        log.debug('Collation locale set to %r', candidate or '<environment>')
        return
    log.warning('Keeping the default collation')


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        prompter: Prompter | None = None,
        defaults: DefaultContent | None = None,
    ) -> None:
        self.config = config

        self.defaults_loader: DefaultsLoader = YamlDefaultsLoader()
        self.defaults: DefaultContent = defaults or self.defaults_loader.load(config.content.defaults)
        apply_collation_locale(config.display.collation_locale, self.defaults.metadata.locale)
        self.store: SnapshotStore = YamlSnapshotStore(Path(config.storage.path))
        self.clipboard: Clipboard = PyperclipClipboard()
        self.prompter: Prompter = prompter or TextualPrompter()

        self.controller = WorkspaceController(
            defaults=self.defaults,
            store=self.store,
            prompter=self.prompter,
        )

    @property
    def log_dir(self) -> Path:
        return Path(self.config.storage.path).parent
