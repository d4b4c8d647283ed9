from __future__ import annotations

from typing import Callable, Optional

from roamy.constants import CMD_OPEN_MODAL_COMPLEX, CMD_OPEN_MODAL_SIMPLE
from roamy.core.errors import CommandUnavailableError
from roamy.core.interfaces.host import HostProtocol
from roamy.core.models import CommandSpec, EditorContext
from roamy.core.interfaces.logging import LoggerLikeProtocol
from roamy.logging.helpers import get_logger
from roamy.ui.dialog import MessageDialog


class OpenMessageDialogCommand:
    """Open a dialog showing the configured message.

    The gated variant only shows up while a markdown view is active.
    """

    def __init__(
        self,
        host: HostProtocol,
        message: Callable[[], str],
        *,
        gated: bool = False,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        cmd_id, name = CMD_OPEN_MODAL_COMPLEX if gated else CMD_OPEN_MODAL_SIMPLE
        self._spec = CommandSpec(cmd_id, name)
        self._host = host
        self._message = message
        self._gated = gated
        self._log = logger or get_logger('commands.dialog')

    @property
    def spec(self) -> CommandSpec:
        return self._spec

    def is_available(self, ctx: EditorContext) -> bool:
        return ctx.is_markdown if self._gated else True

    def execute(self, ctx: EditorContext) -> MessageDialog:
        if not self.is_available(ctx):
            raise CommandUnavailableError(self._spec.id)
        dialog = MessageDialog(self._host, self._message(), logger=self._log)
        dialog.open()
        return dialog
