"""Unit tests for Lint records and Location."""

import dataclasses
import unittest
from unittest.mock import MagicMock

from scss_lint.domain.errors import MalformedTreeError
from scss_lint.domain.lint import Lint, Severity
from scss_lint.domain.location import Location
from scss_lint.domain.tree import RuleNode, Variable


class TestLint(unittest.TestCase):
    def setUp(self) -> None:
        self.linter = MagicMock()
        self.linter.name = "ColorVariable"
        self.location = Location(line=3, column=10, length=4)

    def test_default_severity_is_warning(self) -> None:
        """A lint without severity is a warning and does not fail the build."""
        lint = Lint(self.linter, "a.scss", self.location, "x")

        self.assertIs(lint.severity, Severity.WARNING)
        self.assertFalse(lint.is_error())

    def test_error_severity(self) -> None:
        lint = Lint(self.linter, "a.scss", self.location, "x", severity=Severity.ERROR)

        self.assertTrue(lint.is_error())

    def test_lint_is_immutable(self) -> None:
        lint = Lint(self.linter, "a.scss", self.location, "x")

        with self.assertRaises(dataclasses.FrozenInstanceError):
            lint.description = "y"  # type: ignore[misc]

    def test_autocorrect_is_stored_but_not_compared(self) -> None:
        fix = MagicMock(return_value="color: $red;")
        with_fix = Lint(self.linter, "a.scss", self.location, "x", autocorrect=fix)
        without_fix = Lint(self.linter, "a.scss", self.location, "x")

        self.assertEqual(with_fix, without_fix)
        self.assertEqual(len({with_fix, without_fix}), 1)
        self.assertIs(with_fix.autocorrect, fix)
        fix.assert_not_called()

    def test_lints_at_different_locations_differ(self) -> None:
        first = Lint(self.linter, "a.scss", Location(line=1), "x")
        second = Lint(self.linter, "a.scss", Location(line=2), "x")

        self.assertNotEqual(first, second)


class TestLocation(unittest.TestCase):
    def test_locations_sort_by_line_then_column(self) -> None:
        locations = [Location(2, 1), Location(1, 5), Location(1, 2)]

        self.assertEqual(sorted(locations), [Location(1, 2), Location(1, 5), Location(2, 1)])

    def test_from_node_defaults_column(self) -> None:
        node = Variable(name="x", line=7)

        self.assertEqual(Location.from_node(node), Location(line=7, column=1, length=1))

    def test_from_node_uses_column_and_length(self) -> None:
        node = Variable(name="x", line=7, column=3)

        self.assertEqual(Location.from_node(node, length=2), Location(7, 3, 2))

    def test_from_node_without_line_is_malformed(self) -> None:
        with self.assertRaises(MalformedTreeError):
            Location.from_node(RuleNode(column=3))
