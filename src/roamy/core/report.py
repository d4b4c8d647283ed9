from __future__ import annotations

"""
Per-run report for the line rewriter.

Counts are collected while edits are applied; `by_rule` is keyed by the
name of the rule that produced each edit.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable

from roamy.core.models import Edit


@dataclass
class RewriteReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    lines_scanned: int = 0
    edits: int = 0
    by_rule: Dict[str, int] = field(default_factory=dict)

    def add_edits(self, edits: Iterable[Edit]) -> None:
        for edit in edits:
            self.edits += 1
            key = edit.rule or 'unknown'
            self.by_rule[key] = self.by_rule.get(key, 0) + 1

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "lines_scanned": self.lines_scanned,
                "edits": self.edits,
                "by_rule": self.by_rule,
            },
            indent=indent,
        )


class StageTimer:
    """Context manager that closes a report on exit."""

    def __init__(self, report: RewriteReport):
        self._report = report

    def __enter__(self):
        self._report.started_at = time.perf_counter()
        return self._report

    def __exit__(self, exc_type, exc, tb):
        self._report.finish()
        return False
