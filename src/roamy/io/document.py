from __future__ import annotations

from typing import Iterable, List


class ListDocument:
    """In-memory document over a list of lines (no trailing newlines)."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: List[str] = list(lines)

    @classmethod
    def from_text(cls, text: str) -> 'ListDocument':
        if not text:
            return cls()
        return cls(text.split('\n'))

    def to_text(self) -> str:
        return '\n'.join(self._lines)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"line index out of range: {index}")

    def get_line(self, index: int) -> str:
        self._check(index)
        return self._lines[index]

    def set_line(self, index: int, text: str) -> None:
        self._check(index)
        self._lines[index] = text
