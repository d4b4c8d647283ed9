from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from roamy.core.models import CommandSpec, EditorContext


@runtime_checkable
class CommandProtocol(Protocol):
    """A user action exposed in the host command palette.

    `is_available` answers whether the command may run now and never has
    side effects; `execute` performs the action.
    """

    @property
    def spec(self) -> 'CommandSpec': ...

    def is_available(self, ctx: 'EditorContext') -> bool: ...

    def execute(self, ctx: 'EditorContext') -> Any: ...
