from __future__ import annotations

"""
Settings persistence.

`resolve_settings` turns whatever the store returned into a `Settings`
record: stored values are merged over the defaults, legacy keys are mapped
to their current names and values of the wrong type fall back to the
default with a warning.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from roamy.constants import LEGACY_SETTING_KEYS
from roamy.core.errors import SettingsStoreError
from roamy.core.models import Settings
from roamy.logging.helpers import get_logger


def resolve_settings(raw: Optional[Mapping[str, Any]], *, logger: Optional[logging.Logger] = None) -> Settings:
    log = logger or get_logger('io.settings')
    defaults = Settings()
    if not raw:
        return defaults

    types = Settings.field_types()
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        name = LEGACY_SETTING_KEYS.get(key, key)
        if name not in types:
            log.debug('ignoring unknown setting %r', key)
            continue
        # bool is an int subclass; only exact types are accepted.
        if type(value) is not types[name]:
            log.warning('⚠  setting %r has type %s, expected %s – using default',
                        key, type(value).__name__, types[name].__name__)
            continue
        if name in values and key != name:
            continue
        values[name] = value
    return Settings(**{**defaults.to_dict(), **values})


class InMemorySettingsStore:
    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._data: Optional[Dict[str, Any]] = dict(initial) if initial is not None else None
        self.saves = 0

    def load(self) -> Optional[Mapping[str, Any]]:
        return dict(self._data) if self._data is not None else None

    def save(self, data: Mapping[str, Any]) -> None:
        self._data = dict(data)
        self.saves += 1


class JsonSettingsStore:
    """Settings blob stored as a UTF-8 JSON object on disk."""

    def __init__(self, path: Path | str, *, logger: Optional[logging.Logger] = None) -> None:
        self._path = Path(path)
        self._log = logger or get_logger('io.settings')

    @classmethod
    def default(cls, *, logger: Optional[logging.Logger] = None) -> 'JsonSettingsStore':
        from roamy.runtime.config import PluginConfig

        return cls(PluginConfig.from_env().settings_path, logger=logger)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[Mapping[str, Any]]:
        if not self._path.exists():
            self._log.debug('no settings at %s – using defaults', self._path)
            return None
        try:
            data = json.loads(self._path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as exc:
            raise SettingsStoreError(f'could not read settings from {self._path}: {exc}') from exc
        if not isinstance(data, dict):
            raise SettingsStoreError(f'settings in {self._path} must be a JSON object')
        return data

    def save(self, data: Mapping[str, Any]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=str(self._path.parent), prefix='.roamy-', suffix='.json')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                    json.dump(dict(data), fh, ensure_ascii=False, indent=2)
                os.replace(tmp, self._path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise SettingsStoreError(f'could not write settings to {self._path}: {exc}') from exc
        self._log.debug('settings saved → %s', self._path)
