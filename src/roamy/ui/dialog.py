from __future__ import annotations

from typing import Optional

from roamy.core.interfaces.host import HostProtocol
from roamy.core.interfaces.logging import LoggerLikeProtocol
from roamy.logging.helpers import get_logger


class MessageDialog:
    """Modal that shows a single line of text."""

    def __init__(self, host: HostProtocol, message: str, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._host = host
        self._message = message
        self._log = logger or get_logger('ui.dialog')
        self.content = ''
        self.is_open = False

    @property
    def message(self) -> str:
        return self._message

    def open(self) -> None:
        self.on_open()
        self._host.show_dialog(self)

    def close(self) -> None:
        if not self.is_open:
            return
        self._host.close_dialog(self)
        self.on_close()

    def on_open(self) -> None:
        self.content = self._message
        self.is_open = True
        self._log.debug('message dialog opened')

    def on_close(self) -> None:
        self.content = ''
        self.is_open = False
