from __future__ import annotations

"""
HeadlessHost – synchronous in-process host.

Keeps every registration in plain dictionaries so callers (and tests) can
drive the plugin without an editor: run commands, click ribbon icons,
dispatch events and fire intervals by hand.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from roamy.core.errors import CommandUnavailableError
from roamy.core.interfaces.command import CommandProtocol
from roamy.core.models import CommandSpec, EditorContext
from roamy.logging.helpers import get_logger


@dataclass(frozen=True)
class _Interval:
    callback: Callable[[], None]
    seconds: float


@dataclass(frozen=True)
class _Listener:
    event: str
    callback: Callable[[Any], None]


@dataclass(frozen=True)
class _RibbonIcon:
    icon: str
    title: str
    callback: Callable[[Any], None]


class HeadlessHost:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('runtime.host')
        self._ids = itertools.count(1)
        self.commands: Dict[int, CommandProtocol] = {}
        self.ribbon_icons: Dict[int, _RibbonIcon] = {}
        self.settings_tabs: Dict[int, Any] = {}
        self.intervals: Dict[int, _Interval] = {}
        self.listeners: Dict[int, _Listener] = {}
        self.notices: List[str] = []
        self.dialogs: List[Any] = []
        self.status_text: str = ''

    # ------------------------------------------------------------------ #
    # HostProtocol
    # ------------------------------------------------------------------ #
    def add_command(self, command: CommandProtocol) -> int:
        handle = next(self._ids)
        self.commands[handle] = command
        return handle

    def remove_command(self, handle: int) -> None:
        self.commands.pop(handle, None)

    def add_ribbon_icon(self, icon: str, title: str, callback: Callable[[Any], None]) -> int:
        handle = next(self._ids)
        self.ribbon_icons[handle] = _RibbonIcon(icon, title, callback)
        return handle

    def remove_ribbon_icon(self, handle: int) -> None:
        self.ribbon_icons.pop(handle, None)

    def set_status_text(self, text: str) -> None:
        self.status_text = text

    def show_notice(self, text: str) -> None:
        self._log.info('%s', text)
        self.notices.append(text)

    def show_dialog(self, dialog: Any) -> None:
        self.dialogs.append(dialog)

    def close_dialog(self, dialog: Any) -> None:
        if dialog in self.dialogs:
            self.dialogs.remove(dialog)

    def add_settings_tab(self, tab: Any) -> int:
        handle = next(self._ids)
        self.settings_tabs[handle] = tab
        return handle

    def remove_settings_tab(self, handle: int) -> None:
        self.settings_tabs.pop(handle, None)

    def register_interval(self, callback: Callable[[], None], seconds: float) -> int:
        if seconds <= 0:
            raise ValueError('interval must be positive')
        handle = next(self._ids)
        self.intervals[handle] = _Interval(callback, seconds)
        return handle

    def clear_interval(self, handle: int) -> None:
        self.intervals.pop(handle, None)

    def register_listener(self, event: str, callback: Callable[[Any], None]) -> int:
        handle = next(self._ids)
        self.listeners[handle] = _Listener(event, callback)
        return handle

    def remove_listener(self, handle: int) -> None:
        self.listeners.pop(handle, None)

    # ------------------------------------------------------------------ #
    # Driving helpers
    # ------------------------------------------------------------------ #
    def palette(self, ctx: EditorContext) -> List[CommandSpec]:
        """Commands the palette would list for `ctx`."""
        return [c.spec for c in self.commands.values() if c.is_available(ctx)]

    def run_command(self, command_id: str, ctx: EditorContext) -> Any:
        for command in list(self.commands.values()):
            if command.spec.id == command_id:
                if not command.is_available(ctx):
                    raise CommandUnavailableError(command_id)
                return command.execute(ctx)
        raise KeyError(f"unknown command '{command_id}'")

    def click_ribbon(self, title: str, event: Any = None) -> None:
        for icon in list(self.ribbon_icons.values()):
            if icon.title == title:
                icon.callback(event)
                return
        raise KeyError(f"no ribbon icon titled '{title}'")

    def dispatch(self, event: str, payload: Any = None) -> int:
        n = 0
        for listener in list(self.listeners.values()):
            if listener.event == event:
                listener.callback(payload)
                n += 1
        return n

    def tick(self) -> int:
        """Fire every registered interval once."""
        n = 0
        for interval in list(self.intervals.values()):
            interval.callback()
            n += 1
        return n
