from __future__ import annotations

"""Document edit surface supplied by the host editor."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentProtocol(Protocol):
    """Ordered lines owned by the host and mutated in place.

    Indices are zero-based. `set_line` replaces a single line's text and is
    expected to be visible immediately to the next `get_line` call.
    """

    def line_count(self) -> int: ...

    def get_line(self, index: int) -> str: ...

    def set_line(self, index: int, text: str) -> None: ...
