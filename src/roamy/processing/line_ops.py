# src/roamy/processing/line_ops.py
from typing import Iterable, List, Optional, Sequence, Tuple

from roamy.core.interfaces.document import DocumentProtocol
from roamy.core.models import Edit
from roamy.core.report import RewriteReport, StageTimer
from roamy.core.interfaces.logging import LoggerLikeProtocol
from roamy.logging.helpers import get_logger, trace_io
from roamy.processing.line_rules import LINE_RULES, LineRule


class LineRewriter:
    """Scan a document top to bottom and fix malformed lines.

    Every rule is tested against every line; when several match, the one
    evaluated last wins. A line is written back only when the final
    rewrite is non-empty, and at most once.
    """

    def __init__(
        self,
        *,
        rules: Sequence[LineRule] = LINE_RULES,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._rules: Tuple[LineRule, ...] = tuple(rules)
        self._log = logger or get_logger('processing.lineops')

    @property
    def rules(self) -> Tuple[LineRule, ...]:
        return self._rules

    def rewrite_line(self, line: str) -> Optional[Tuple[str, str]]:
        """Return (replacement, rule name) for `line`, or None to leave it alone."""
        replacement = ''
        rule_name = ''
        for rule in self._rules:
            if rule.matches(line):
                replacement = rule.rewrite(line)
                rule_name = rule.name
        if not replacement:
            return None
        return replacement, rule_name

    def compute_edits(self, lines: Iterable[str]) -> List[Edit]:
        """Return the edits for `lines` without touching them."""
        edits: List[Edit] = []
        for idx, ln in enumerate(lines):
            hit = self.rewrite_line(ln)
            if hit is None:
                continue
            text, rule = hit
            edits.append(Edit(index=idx, text=text, rule=rule))
        return edits

    def apply_edits(self, document: DocumentProtocol, edits: Iterable[Edit]) -> int:
        n = 0
        for edit in edits:
            trace_io(self._log, 'set_line', index=edit.index, rule=edit.rule, text=edit.text)
            document.set_line(edit.index, edit.text)
            n += 1
        return n

    def _scan(self, document: DocumentProtocol) -> Tuple[int, List[Edit]]:
        total = document.line_count()
        lines = [document.get_line(i) for i in range(total)]
        return total, self.compute_edits(lines)

    def rewrite(self, document: DocumentProtocol) -> None:
        """Fix every malformed line of `document` in place."""
        _, edits = self._scan(document)
        self.apply_edits(document, edits)

    def rewrite_with_report(self, document: DocumentProtocol) -> RewriteReport:
        report = RewriteReport()
        with StageTimer(report):
            total, edits = self._scan(document)
            self.apply_edits(document, edits)
            report.lines_scanned = total
            report.add_edits(edits)
        self._log.info('✔ %d line(s) fixed out of %d', report.edits, report.lines_scanned)
        return report
