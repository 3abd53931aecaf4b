from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from scss_lint.domain.lint import Lint
    from scss_lint.domain.tree.nodes import Node


class LinterProtocol(Protocol):
    """Identity of the rule that produced a lint."""

    name: str


class RunnableLinterProtocol(LinterProtocol, Protocol):
    """A linter the document use case can drive over one tree."""

    def run(self, root: "Node", filename: str) -> list["Lint"]:
        """Walk the tree from root and return the lints found."""
        ...
