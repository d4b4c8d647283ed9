from __future__ import annotations

"""
Command registry keyed by command id.

Ids are normalized (stripped) on the way in; lookups of unknown ids raise
KeyError so a typo in host wiring fails loudly.
"""

from typing import Any, Dict, Iterator, List

from roamy.core.errors import CommandUnavailableError
from roamy.core.interfaces.command import CommandProtocol
from roamy.core.models import EditorContext


class CommandRegistry:
    def __init__(self) -> None:
        self._by_id: Dict[str, CommandProtocol] = {}

    def register(self, command: CommandProtocol) -> None:
        key = command.spec.id.strip()
        if key in self._by_id:
            raise ValueError(f"command '{key}' is already registered")
        self._by_id[key] = command

    def unregister(self, command_id: str) -> None:
        self._by_id.pop((command_id or '').strip(), None)

    def get(self, command_id: str) -> CommandProtocol:
        key = (command_id or '').strip()
        try:
            return self._by_id[key]
        except KeyError:
            raise KeyError(f"unknown command '{key}'") from None

    def available(self, ctx: EditorContext) -> List[CommandProtocol]:
        return [c for c in self._by_id.values() if c.is_available(ctx)]

    def execute(self, command_id: str, ctx: EditorContext) -> Any:
        command = self.get(command_id)
        if not command.is_available(ctx):
            raise CommandUnavailableError(command.spec.id)
        return command.execute(ctx)

    def ids(self) -> List[str]:
        return list(self._by_id)

    def __iter__(self) -> Iterator[CommandProtocol]:
        return iter(list(self._by_id.values()))

    def __len__(self) -> int:
        return len(self._by_id)
