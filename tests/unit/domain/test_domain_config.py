"""Unit tests for the immutable ConfigurationLoader."""

import unittest

from scss_lint.domain.config import ConfigurationLoader
from scss_lint.domain.lint import Severity
from scss_lint.domain.tree import ParentPolicy


class TestConfigurationLoader(unittest.TestCase):
    def setUp(self) -> None:
        self.loader = ConfigurationLoader(
            {
                "parent_policy": "strict",
                "linters": {
                    "ColorVariable": {"severity": "error"},
                    "ImportPath": {"enabled": False},
                },
            }
        )

    def test_defaults_without_config(self) -> None:
        loader = ConfigurationLoader()

        self.assertIs(loader.parent_policy, ParentPolicy.REFRESH)
        self.assertTrue(loader.is_linter_enabled("Anything"))
        self.assertIs(loader.linter_severity("Anything"), Severity.WARNING)

    def test_parent_policy_from_config(self) -> None:
        self.assertIs(self.loader.parent_policy, ParentPolicy.STRICT)

    def test_linter_severity_from_config(self) -> None:
        self.assertIs(self.loader.linter_severity("ColorVariable"), Severity.ERROR)
        self.assertIs(
            self.loader.linter_severity("ImportPath", default=Severity.ERROR), Severity.ERROR
        )

    def test_linter_enabled_from_config(self) -> None:
        self.assertFalse(self.loader.is_linter_enabled("ImportPath"))
        self.assertTrue(self.loader.is_linter_enabled("ColorVariable"))

    def test_unknown_severity_falls_back_with_warning(self) -> None:
        loader = ConfigurationLoader({"linters": {"Foo": {"severity": "fatal"}}})

        with self.assertLogs("scss_lint.domain.config", level="WARNING"):
            severity = loader.linter_severity("Foo")
        self.assertIs(severity, Severity.WARNING)

    def test_unknown_parent_policy_falls_back_with_warning(self) -> None:
        with self.assertLogs("scss_lint.domain.config", level="WARNING"):
            loader = ConfigurationLoader({"parent_policy": "sometimes"})
        self.assertIs(loader.parent_policy, ParentPolicy.REFRESH)

    def test_malformed_linter_sections_are_ignored(self) -> None:
        loader = ConfigurationLoader({"linters": ["ColorVariable"]})

        self.assertEqual(loader.linter_config("ColorVariable"), {})
        self.assertTrue(loader.is_linter_enabled("ColorVariable"))

    def test_config_is_copied(self) -> None:
        raw: dict[str, object] = {"parent_policy": "strict"}
        loader = ConfigurationLoader(raw)
        raw["parent_policy"] = "refresh"

        self.assertEqual(loader.config["parent_policy"], "strict")

    def test_config_cannot_be_mutated_through_accessors(self) -> None:
        self.loader.config["parent_policy"] = "refresh"
        self.loader.linter_config("ColorVariable")["severity"] = "warning"

        self.assertEqual(self.loader.config["parent_policy"], "strict")
        self.assertIs(self.loader.linter_severity("ColorVariable"), Severity.ERROR)
