from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

from roamy.constants import DEFAULT_FLAG, DEFAULT_LABEL, DEFAULT_MESSAGE, MARKDOWN_VIEW
from roamy.core.interfaces.document import DocumentProtocol


@dataclass(frozen=True)
class Settings:
    """Flat settings record persisted by the host.

    `flag` is stored and round-tripped but no rule consults it.
    """
    label: str = DEFAULT_LABEL
    flag: bool = DEFAULT_FLAG
    message: str = DEFAULT_MESSAGE

    @classmethod
    def field_types(cls) -> Dict[str, type]:
        return {'label': str, 'flag': bool, 'message': str}

    def with_value(self, key: str, value: Any) -> 'Settings':
        types = self.field_types()
        if key not in types:
            raise KeyError(key)
        if type(value) is not types[key]:
            raise TypeError(f'{key} must be {types[key].__name__}, got {type(value).__name__}')
        return replace(self, **{key: value})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class Edit:
    index: int
    text: str
    rule: Optional[str] = None


@dataclass(frozen=True)
class EditorContext:
    """What the host reports as active when a command is looked up or run."""
    view_type: Optional[str] = None
    document: Optional[DocumentProtocol] = None

    @property
    def is_markdown(self) -> bool:
        return self.view_type == MARKDOWN_VIEW


@dataclass(frozen=True)
class CommandSpec:
    id: str
    name: str

    def __post_init__(self) -> None:
        if not (self.id or '').strip():
            raise ValueError('command id must be non-empty')
