from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from roamy.constants import SETTINGS_TAB_TITLE
from roamy.core.interfaces.logging import LoggerLikeProtocol
from roamy.logging.helpers import get_logger

if TYPE_CHECKING:
    from roamy.plugin import RoamyPlugin


@dataclass(frozen=True)
class TextBinding:
    key: str
    name: str
    description: str
    placeholder: str
    value: str


class SettingsTab:
    """Two-way text bindings for the editable settings fields.

    Every change is persisted immediately through the plugin.
    """

    title = SETTINGS_TAB_TITLE

    def __init__(self, plugin: 'RoamyPlugin', *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._plugin = plugin
        self._log = logger or get_logger('ui.settings')

    def display(self) -> List[TextBinding]:
        settings = self._plugin.settings
        return [
            TextBinding('label', 'Setting #1', "It's a secret", 'Enter your secret', settings.label),
            TextBinding('message', 'Message', 'What should Roamy Say?', 'Message', settings.message),
        ]

    def on_change(self, key: str, value: str) -> None:
        if key not in ('label', 'message'):
            raise KeyError(key)
        self._log.debug('%s: %s', key, value)
        self._plugin.update_setting(key, value)
