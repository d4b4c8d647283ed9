"""
line_rules – Ordered regex rules for malformed note lines.

Each rule pairs a recognizer (matched at line start) with a rewrite. The
recognizer and the rewrite pattern are deliberately distinct for the
heading rule: the test requires the hyphen in column 0, the rewrite also
strips any indentation in front of it.

Rules:
  • heading-under-bullet   "- # Title"      -> "# Title"
  • separator              "- - - -"        -> "- - -"
  • indented-bullet        "   - short"     -> "- short"
                           (longer than BULLET_LENGTH_LIMIT: bullet dropped)
"""

import re
from dataclasses import dataclass
from typing import Callable, Pattern, Tuple

from roamy.constants import BULLET_LENGTH_LIMIT


@dataclass(frozen=True)
class LineRule:
    name: str
    test: Pattern[str]
    rewrite: Callable[[str], str]

    def matches(self, line: str) -> bool:
        return self.test.match(line) is not None


_HEADING_TEST = re.compile(r"^-\s#")
_HEADING_SUB = re.compile(r"^\s*-\s#")

_SEPARATOR_TEST = re.compile(r"^-\s-")

_INDENTED_BULLET = re.compile(r"^\s+-\s")


def fix_heading(line: str) -> str:
    return _HEADING_SUB.sub("#", line, count=1)


def fix_separator(line: str) -> str:
    return _SEPARATOR_TEST.sub("-", line, count=1)


def fix_indented_bullet(line: str) -> str:
    if len(line) > BULLET_LENGTH_LIMIT:
        return _INDENTED_BULLET.sub("", line, count=1)
    return _INDENTED_BULLET.sub("- ", line, count=1)


LINE_RULES: Tuple[LineRule, ...] = (
    LineRule("heading-under-bullet", _HEADING_TEST, fix_heading),
    LineRule("separator", _SEPARATOR_TEST, fix_separator),
    LineRule("indented-bullet", _INDENTED_BULLET, fix_indented_bullet),
)
