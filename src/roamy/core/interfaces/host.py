from __future__ import annotations

"""
Protocol describing what roamy needs from the host application.

Every `register_*` / `add_*` call returns an opaque handle that the plugin
keeps so teardown can release exactly what it registered.
"""

from typing import TYPE_CHECKING, Any, Callable, Hashable, Protocol

if TYPE_CHECKING:
    from roamy.core.interfaces.command import CommandProtocol


class HostProtocol(Protocol):
    def add_command(self, command: 'CommandProtocol') -> Hashable: ...

    def remove_command(self, handle: Hashable) -> None: ...

    def add_ribbon_icon(self, icon: str, title: str, callback: Callable[[Any], None]) -> Hashable: ...

    def remove_ribbon_icon(self, handle: Hashable) -> None: ...

    def set_status_text(self, text: str) -> None: ...

    def show_notice(self, text: str) -> None: ...

    def show_dialog(self, dialog: Any) -> None: ...

    def close_dialog(self, dialog: Any) -> None: ...

    def add_settings_tab(self, tab: Any) -> Hashable: ...

    def remove_settings_tab(self, handle: Hashable) -> None: ...

    def register_interval(self, callback: Callable[[], None], seconds: float) -> Hashable: ...

    def clear_interval(self, handle: Hashable) -> None: ...

    def register_listener(self, event: str, callback: Callable[[Any], None]) -> Hashable: ...

    def remove_listener(self, handle: Hashable) -> None: ...
