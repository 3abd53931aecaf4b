"""The capability every node variant shares: traversal children, location and parent."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar

from scss_lint.domain.errors import MalformedTreeError
from scss_lint.domain.tree.parents import ParentPolicy, attach_parent, parent_of

T = TypeVar("T")


@dataclass(eq=False)
class TraversalNode:
    """
    Base of the tagged union mirroring the host grammar.

    Location fields may be None where the parser does not position a
    sub-expression; they are back-filled from the containing node the first
    time the node is exposed to traversal. Location and parent never take part
    in equality.
    """

    kind: ClassVar[str] = "node"
    is_expression: ClassVar[bool] = False

    line: int | None = field(default=None, compare=False)
    column: int | None = field(default=None, compare=False)
    filename: str | None = field(default=None, compare=False)
    _parent_ref: weakref.ref[TraversalNode] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def parent(self) -> TraversalNode | None:
        return parent_of(self)

    def structural_children(self) -> list[Any]:
        """Children the parser itself models for this node."""
        return []

    def _collect_children(self) -> list[TraversalNode]:
        # Variants extend this through super() and never replace it.
        return concat_expr_lists(self.structural_children())

    def traversal_children(
        self, policy: ParentPolicy = ParentPolicy.REFRESH
    ) -> list[TraversalNode]:
        """
        Return the sub-nodes a linter should recurse into, in a stable order.

        Unpositioned expression children get this node's line, and each child
        is attached to this node as its parent.
        """
        children = self._collect_children()
        for child in children:
            add_line_number(child, self)
            attach_parent(child, self, policy)
        return children


def add_line_number(node: T, container: TraversalNode) -> T:
    """
    Give an unpositioned expression node its container's location.

    Parser-assigned lines are never overwritten, and anything that is not an
    expression node is returned untouched.
    """
    if isinstance(node, TraversalNode) and node.is_expression and node.line is None:
        node.line = container.line
        if node.column is None:
            node.column = container.column
        if node.filename is None:
            node.filename = container.filename
    return node


def concat_expr_lists(*expr_lists: Any) -> list[TraversalNode]:
    """
    Flatten any mix of nodes, lists, tuples and None into a flat list of nodes.

    None entries are dropped. Anything else that is not a node means the
    parser handed over a broken tree and raises MalformedTreeError.
    """
    flat: list[TraversalNode] = []
    _flatten_into(flat, expr_lists)
    return flat


def _flatten_into(flat: list[TraversalNode], items: Any) -> None:
    for item in items:
        if item is None:
            continue
        if isinstance(item, (list, tuple)):
            _flatten_into(flat, item)
        elif isinstance(item, TraversalNode):
            flat.append(item)
        else:
            raise MalformedTreeError(
                f"Expected a node in child list, got {type(item).__name__}: {item!r}"
            )
