"""Source location value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from scss_lint.domain.errors import MalformedTreeError

if TYPE_CHECKING:
    from scss_lint.domain.tree.base import TraversalNode


@dataclass(frozen=True, order=True)
class Location:
    """
    Position of a lint in a file.

    Ordered by line, then column, then length so lints can be sorted.
    Columns and lengths are 1-based.
    """

    line: int = 1
    column: int = 1
    length: int = 1

    @classmethod
    def from_node(cls, node: "TraversalNode", length: int = 1) -> "Location":
        """
        Build a Location from a visited node. Missing column defaults to 1.

        A node without a line was never positioned by the parser or by
        traversal back-fill, which means the tree is malformed.
        """
        if node.line is None:
            raise MalformedTreeError(f"{node.kind} node has no source line")
        return cls(
            line=node.line,
            column=node.column if node.column is not None else 1,
            length=length,
        )
