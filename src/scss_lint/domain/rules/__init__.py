"""Base class for linters that walk the augmented tree and report lints."""

from __future__ import annotations

__all__ = ["Linter"]

from typing import TYPE_CHECKING, Callable, ClassVar

from scss_lint.domain.lint import Lint, Severity
from scss_lint.domain.location import Location
from scss_lint.domain.tree.base import TraversalNode
from scss_lint.domain.tree.parents import ParentPolicy

if TYPE_CHECKING:
    from scss_lint.domain.config import ConfigurationLoader


class Linter:
    """
    Visitor over traversal children that collects Lint records.

    Subclasses define `visit_<kind>(node)` for the variants they care about.
    A visit method that wants to descend further calls `visit_children(node)`;
    variants without a visit method are descended into automatically.
    """

    name: ClassVar[str] = ""
    severity: ClassVar[Severity] = Severity.WARNING

    def __init__(self, config_loader: "ConfigurationLoader | None" = None) -> None:
        self._config_loader = config_loader
        self._lints: list[Lint] = []
        self._filename = ""

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get("name"):
            cls.name = cls.__name__

    @property
    def lints(self) -> list[Lint]:
        return list(self._lints)

    @property
    def parent_policy(self) -> ParentPolicy:
        if self._config_loader is None:
            return ParentPolicy.REFRESH
        return self._config_loader.parent_policy

    def get_severity(self) -> Severity:
        """Severity for lints from this linter; config overrides the class default."""
        if self._config_loader is None:
            return self.severity
        return self._config_loader.linter_severity(self.name, default=self.severity)

    def run(self, root: TraversalNode, filename: str) -> list[Lint]:
        """Walk the tree from root and return the lints found in this run."""
        self._lints = []
        self._filename = filename
        self.visit(root)
        return self.lints

    def visit(self, node: TraversalNode) -> None:
        method = getattr(self, f"visit_{node.kind}", None)
        if method is None:
            self.visit_children(node)
        else:
            method(node)

    def visit_children(self, node: TraversalNode) -> None:
        for child in node.traversal_children(self.parent_policy):
            self.visit(child)

    def add_lint(
        self,
        node_or_location: TraversalNode | Location,
        description: str,
        autocorrect: Callable[[str], str] | None = None,
    ) -> Lint:
        """Record a lint at a node (or explicit location) in the current file."""
        if isinstance(node_or_location, Location):
            location = node_or_location
        else:
            location = Location.from_node(node_or_location)
        lint = Lint(
            linter=self,
            filename=self._filename,
            location=location,
            description=description,
            severity=self.get_severity(),
            autocorrect=autocorrect,
        )
        self._lints.append(lint)
        return lint

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
