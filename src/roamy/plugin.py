from __future__ import annotations

"""
Plugin lifecycle.

`initialize` loads settings, registers commands, ribbon icon, status text,
settings tab, a click listener and a diagnostic interval with the host, and
returns a handle on the line rewriter. `teardown` releases exactly what was
registered.
"""

import logging
from dataclasses import dataclass
from typing import Any, Hashable, List, Optional, Tuple

from roamy.commands.dialog import OpenMessageDialogCommand
from roamy.commands.fix_lines import FixLinesCommand
from roamy.commands.registry import CommandRegistry
from roamy.constants import RIBBON_ICON, RIBBON_NOTICE, RIBBON_TITLE, STATUS_TEXT
from roamy.core.interfaces.host import HostProtocol
from roamy.core.interfaces.logging import LoggerFactoryProtocol
from roamy.core.interfaces.settings import SettingsStoreProtocol
from roamy.core.models import Settings
from roamy.io.settings_store import resolve_settings
from roamy.logging.factory import DefaultLoggerFactory
from roamy.processing.line_ops import LineRewriter
from roamy.runtime.config import PluginConfig
from roamy.ui.settings_tab import SettingsTab


class RoamyPlugin:
    def __init__(
        self,
        host: HostProtocol,
        store: SettingsStoreProtocol,
        *,
        config: Optional[PluginConfig] = None,
        rewriter: Optional[LineRewriter] = None,
        logger_factory: Optional[LoggerFactoryProtocol] = None,
    ) -> None:
        self._host = host
        self._store = store
        self._config = config or PluginConfig.from_env()
        factory = logger_factory or DefaultLoggerFactory.from_config(self._config)
        self._log = factory.get_logger('plugin')
        self._rewriter = rewriter or LineRewriter(logger=factory.get_logger('processing.lineops'))
        self._settings = Settings()
        self.commands = CommandRegistry()
        self._registrations: List[Tuple[str, Hashable]] = []
        self._loaded = False

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def rewriter(self) -> LineRewriter:
        return self._rewriter

    @property
    def loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------ #
    # Settings
    # ------------------------------------------------------------------ #
    def load_settings(self) -> Settings:
        self._settings = resolve_settings(self._store.load(), logger=self._log)
        return self._settings

    def save_settings(self) -> None:
        self._store.save(self._settings.to_dict())

    def update_setting(self, key: str, value: Any) -> Settings:
        self._settings = self._settings.with_value(key, value)
        self.save_settings()
        return self._settings

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    def load(self) -> None:
        if self._loaded:
            return
        self.load_settings()
        self._log.info('Loading Roamy Plugin')

        h = self._host
        self._track('ribbon', h.add_ribbon_icon(RIBBON_ICON, RIBBON_TITLE, self._on_ribbon_click))
        h.set_status_text(STATUS_TEXT)

        for command in (
            OpenMessageDialogCommand(h, lambda: self._settings.message),
            OpenMessageDialogCommand(h, lambda: self._settings.message, gated=True),
            FixLinesCommand(self._rewriter),
        ):
            self.commands.register(command)
            self._track('command', h.add_command(command))

        self._track('settings_tab', h.add_settings_tab(SettingsTab(self)))
        self._track('listener', h.register_listener('click', self._on_click))
        self._track('interval', h.register_interval(self._on_tick, self._config.diagnostic_interval_s))
        self._loaded = True

    def unload(self) -> None:
        h = self._host
        release = {
            'ribbon': h.remove_ribbon_icon,
            'command': h.remove_command,
            'settings_tab': h.remove_settings_tab,
            'listener': h.remove_listener,
            'interval': h.clear_interval,
        }
        while self._registrations:
            kind, handle = self._registrations.pop()
            release[kind](handle)
        for command_id in self.commands.ids():
            self.commands.unregister(command_id)
        if self._loaded:
            self._log.info('Unloading Roamy Plugin')
        self._loaded = False

    def _track(self, kind: str, handle: Hashable) -> None:
        self._registrations.append((kind, handle))

    def _on_ribbon_click(self, _event: Any) -> None:
        self._host.show_notice(RIBBON_NOTICE)

    def _on_click(self, event: Any) -> None:
        self._log.debug('Roamy click %r', event)

    def _on_tick(self) -> None:
        self._log.debug('diagnostic tick')


@dataclass(frozen=True)
class PluginHandle:
    plugin: RoamyPlugin
    rewriter: LineRewriter


def initialize(
    host: HostProtocol,
    store: SettingsStoreProtocol,
    *,
    config: Optional[PluginConfig] = None,
    logger_factory: Optional[LoggerFactoryProtocol] = None,
) -> PluginHandle:
    plugin = RoamyPlugin(host, store, config=config, logger_factory=logger_factory)
    plugin.load()
    return PluginHandle(plugin=plugin, rewriter=plugin.rewriter)


def teardown(handle: PluginHandle) -> None:
    handle.plugin.unload()
