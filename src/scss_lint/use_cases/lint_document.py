"""Run a set of linters over one parsed document."""

import logging
from typing import TYPE_CHECKING

from scss_lint.domain.lint import Lint
from scss_lint.domain.protocols import RunnableLinterProtocol

if TYPE_CHECKING:
    from scss_lint.domain.config import ConfigurationLoader
    from scss_lint.domain.tree.nodes import Node

logger = logging.getLogger(__name__)


class LintDocumentUseCase:
    """
    Drive every enabled linter over a document's tree.

    One instance lints one document at a time; trees are mutated by
    traversal and must not be shared between concurrent runs.
    """

    def __init__(
        self,
        linters: list[RunnableLinterProtocol],
        config_loader: "ConfigurationLoader",
    ) -> None:
        self._linters = linters
        self._config_loader = config_loader

    def execute(self, root: "Node", filename: str) -> list[Lint]:
        """Return the document's lints, de-duplicated and sorted by position."""
        unique: list[Lint] = []
        for linter in self._linters:
            if not self._config_loader.is_linter_enabled(linter.name):
                logger.debug("Skipping disabled linter %s", linter.name)
                continue
            for lint in linter.run(root, filename):
                if lint not in unique:
                    unique.append(lint)

        unique.sort(key=lambda lint: (lint.filename, lint.location, lint.linter.name))
        logger.debug(
            "%s: %d lint(s), %d error(s)",
            filename, len(unique), sum(1 for lint in unique if lint.is_error()),
        )
        return unique
