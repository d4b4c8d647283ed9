from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from roamy.constants import DIAGNOSTIC_INTERVAL_S


def _default_settings_path() -> Path:
    return Path.home() / '.config' / 'roamy' / 'data.json'


@dataclass(frozen=True)
class PluginConfig:
    """Process-level knobs; none of them affect the line rules."""
    json_logs: bool = False
    log_level: int = logging.INFO
    diagnostic_interval_s: float = DIAGNOSTIC_INTERVAL_S
    settings_path: Path = field(default_factory=_default_settings_path)

    def __post_init__(self) -> None:
        if self.diagnostic_interval_s <= 0:
            raise ValueError('diagnostic_interval_s must be positive')

    @classmethod
    def from_env(cls) -> 'PluginConfig':
        level_name = (os.getenv('ROAMY_LOG_LEVEL') or 'INFO').strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f'unknown log level {level_name!r} in ROAMY_LOG_LEVEL')

        interval_raw = os.getenv('ROAMY_DIAGNOSTIC_INTERVAL')
        try:
            interval = float(interval_raw) if interval_raw else DIAGNOSTIC_INTERVAL_S
        except ValueError as exc:
            raise ValueError(f'ROAMY_DIAGNOSTIC_INTERVAL must be a number, got {interval_raw!r}') from exc

        path_raw = os.getenv('ROAMY_SETTINGS_PATH')
        return cls(
            json_logs=os.getenv('ROAMY_JSON_LOGS') == '1',
            log_level=level,
            diagnostic_interval_s=interval,
            settings_path=Path(path_raw).expanduser() if path_raw else _default_settings_path(),
        )
