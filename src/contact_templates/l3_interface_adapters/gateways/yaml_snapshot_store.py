"""Gateway: YAML file snapshot store — implements SnapshotStore port."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

log = logging.getLogger('ct.store')


class YamlSnapshotStore:
    """Keeps the workspace snapshot in a single YAML file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict | None:
        if not self._path.exists():
            return None
        try:
            data = yaml.safe_load(self._path.read_text(encoding='utf-8'))
        except yaml.YAMLError:
            log.warning('Snapshot %s is not valid YAML; starting fresh', self._path)
            return None
        return data if isinstance(data, dict) else None

    def save(self, snapshot: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + '.tmp')
        tmp.write_text(
            yaml.safe_dump(snapshot, allow_unicode=True, sort_keys=False),
            encoding='utf-8',
        )
        tmp.replace(self._path)
        log.debug('Saved snapshot to %s', self._path)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
        log.debug('Cleared snapshot %s', self._path)
