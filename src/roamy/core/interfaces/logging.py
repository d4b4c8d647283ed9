from __future__ import annotations

"""Logger seams.

Anything with the four level methods can be handed to roamy components;
`extra={"context": {...}}` is passed through to the record.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
