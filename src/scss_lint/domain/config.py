"""Linter settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from scss_lint.domain.constants import LINTERS_KEY, PARENT_POLICY_KEY
from scss_lint.domain.lint import Severity
from scss_lint.domain.tree.parents import ParentPolicy

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from a merged config dict. Domain does not read
    the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at the composition root.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config: dict[str, object] = dict(config_dict or {})
        self._parent_policy = self._resolve_parent_policy()

    @property
    def config(self) -> dict[str, object]:
        """Return a copy of the loaded configuration."""
        return dict(self._config)

    @property
    def parent_policy(self) -> ParentPolicy:
        """How re-attaching an already-parented node is handled during traversal."""
        return self._parent_policy

    def linter_config(self, linter_name: str) -> dict[str, object]:
        """Return the `linters.<name>` section, or an empty dict."""
        linters = self._config.get(LINTERS_KEY, {})
        if not isinstance(linters, dict):
            return {}
        section = linters.get(linter_name, {})
        return dict(section) if isinstance(section, dict) else {}

    def is_linter_enabled(self, linter_name: str) -> bool:
        return bool(self.linter_config(linter_name).get("enabled", True))

    def linter_severity(
        self, linter_name: str, default: Severity = Severity.WARNING
    ) -> Severity:
        """Severity configured for the linter; unknown values fall back to default."""
        raw = self.linter_config(linter_name).get("severity")
        if raw is None:
            return default
        try:
            return Severity(str(raw).lower())
        except ValueError:
            logger.warning(
                "Configuration Warning: unknown severity %r for linter %s, using %s.",
                raw, linter_name, default.value,
            )
            return default

    def _resolve_parent_policy(self) -> ParentPolicy:
        raw = self._config.get(PARENT_POLICY_KEY, ParentPolicy.REFRESH.value)
        try:
            return ParentPolicy(str(raw).lower())
        except ValueError:
            logger.warning(
                "Configuration Warning: unknown parent_policy %r, using %s.",
                raw, ParentPolicy.REFRESH.value,
            )
            return ParentPolicy.REFRESH
