from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class SettingsStoreProtocol(Protocol):
    """Opaque key-value blob persisted by the host.

    `load` returns None when nothing has been stored yet.
    """

    def load(self) -> Optional[Mapping[str, Any]]: ...

    def save(self, data: Mapping[str, Any]) -> None: ...
