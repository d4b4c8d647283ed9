from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, TextIO

from roamy.logging.helpers import get_logger, setup_base_logger

if TYPE_CHECKING:
    from roamy.runtime.config import PluginConfig


class DefaultLoggerFactory:
    """Hands out 'roamy.*' loggers, configuring the base logger on first use."""

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream = stream
        self._configured = False

    @classmethod
    def from_config(cls, config: 'PluginConfig', *, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        return cls(json_logs=config.json_logs, level=config.log_level, stream=stream)

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
            self._configured = True
        return get_logger(name)
