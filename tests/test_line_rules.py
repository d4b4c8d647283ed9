#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Rule-level tests for roamy.processing.line_rules.

Each rule is checked on its own: recognizer first, then rewrite.
"""
from __future__ import annotations

import unittest

from roamy.constants import BULLET_LENGTH_LIMIT
from roamy.processing.line_rules import (
    LINE_RULES,
    fix_heading,
    fix_indented_bullet,
    fix_separator,
)

RULES = {r.name: r for r in LINE_RULES}


# --------------------------------------------------------------------------- #
#  Table                                                                      #
# --------------------------------------------------------------------------- #
class RuleTableTests(unittest.TestCase):
    def test_order_is_fixed(self) -> None:
        self.assertEqual(
            [r.name for r in LINE_RULES],
            ["heading-under-bullet", "separator", "indented-bullet"],
        )


# --------------------------------------------------------------------------- #
#  Heading under bullet                                                       #
# --------------------------------------------------------------------------- #
class HeadingRuleTests(unittest.TestCase):
    rule = RULES["heading-under-bullet"]

    def test_matches_bullet_heading_in_column_zero(self) -> None:
        self.assertTrue(self.rule.matches("- # Title"))
        self.assertTrue(self.rule.matches("-\t## Sub"))

    def test_does_not_match_indented_or_double_space(self) -> None:
        self.assertFalse(self.rule.matches("  - # Title"))
        self.assertFalse(self.rule.matches("-  # Title"))
        self.assertFalse(self.rule.matches("# Title"))

    def test_rewrite_keeps_level_and_text(self) -> None:
        self.assertEqual(fix_heading("- # Title"), "# Title")
        self.assertEqual(fix_heading("- ### Deep heading"), "### Deep heading")

    def test_rewrite_strips_indentation_too(self) -> None:
        self.assertEqual(fix_heading("  - # Title"), "# Title")
        self.assertEqual(fix_heading("\t- ## Sub"), "## Sub")


# --------------------------------------------------------------------------- #
#  Separator                                                                  #
# --------------------------------------------------------------------------- #
class SeparatorRuleTests(unittest.TestCase):
    rule = RULES["separator"]

    def test_matches(self) -> None:
        self.assertTrue(self.rule.matches("- - - -"))
        self.assertTrue(self.rule.matches("- -"))
        self.assertFalse(self.rule.matches("--"))
        self.assertFalse(self.rule.matches(" - -"))

    def test_only_first_pair_collapses(self) -> None:
        self.assertEqual(fix_separator("- - - -"), "- - -")
        self.assertEqual(fix_separator("- -"), "-")


# --------------------------------------------------------------------------- #
#  Indented bullet                                                            #
# --------------------------------------------------------------------------- #
class IndentedBulletRuleTests(unittest.TestCase):
    rule = RULES["indented-bullet"]

    def test_matches_only_with_indentation(self) -> None:
        self.assertTrue(self.rule.matches("   - short"))
        self.assertTrue(self.rule.matches("\t- tab"))
        self.assertFalse(self.rule.matches("- top level"))
        self.assertFalse(self.rule.matches("   -nospace"))

    def test_short_line_keeps_clean_bullet(self) -> None:
        self.assertEqual(fix_indented_bullet("   - short"), "- short")

    def test_long_line_drops_bullet(self) -> None:
        line = "   - this indented bullet line is quite long"
        self.assertGreater(len(line), BULLET_LENGTH_LIMIT)
        self.assertEqual(fix_indented_bullet(line), "this indented bullet line is quite long")

    def test_boundary_is_inclusive_for_bullet(self) -> None:
        at_limit = "  - " + "x" * (BULLET_LENGTH_LIMIT - 4)
        over = "  - " + "x" * (BULLET_LENGTH_LIMIT - 3)
        self.assertEqual(len(at_limit), BULLET_LENGTH_LIMIT)
        self.assertEqual(fix_indented_bullet(at_limit), "- " + "x" * (BULLET_LENGTH_LIMIT - 4))
        self.assertEqual(fix_indented_bullet(over), "x" * (BULLET_LENGTH_LIMIT - 3))


if __name__ == "__main__":
    unittest.main()
