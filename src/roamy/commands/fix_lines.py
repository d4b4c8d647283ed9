from __future__ import annotations

from typing import Optional

from roamy.constants import CMD_FIX_BULLETS
from roamy.core.errors import CommandUnavailableError
from roamy.core.models import CommandSpec, EditorContext
from roamy.core.report import RewriteReport
from roamy.core.interfaces.logging import LoggerLikeProtocol
from roamy.logging.helpers import get_logger
from roamy.processing.line_ops import LineRewriter


class FixLinesCommand:
    """Rewrite malformed headings, separators and indented bullets."""

    def __init__(self, rewriter: LineRewriter, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._spec = CommandSpec(*CMD_FIX_BULLETS)
        self._rewriter = rewriter
        self._log = logger or get_logger('commands.fix')

    @property
    def spec(self) -> CommandSpec:
        return self._spec

    def is_available(self, ctx: EditorContext) -> bool:
        return ctx.is_markdown and ctx.document is not None

    def execute(self, ctx: EditorContext) -> RewriteReport:
        if not self.is_available(ctx):
            raise CommandUnavailableError(self._spec.id)
        self._log.debug('fixing bullets')
        return self._rewriter.rewrite_with_report(ctx.document)
