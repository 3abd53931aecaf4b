"""
Free-function entry points for drivers that walk an augmented tree.

A tree, and the parent back-references written while walking it, belongs to
a single document being linted. Walk separate documents on separate trees.
"""

from __future__ import annotations

from collections.abc import Iterator

from scss_lint.domain.errors import UnknownNodeError
from scss_lint.domain.tree.base import TraversalNode
from scss_lint.domain.tree.parents import ParentPolicy, parent_of


def traversal_children(
    node: object, policy: ParentPolicy = ParentPolicy.REFRESH
) -> list[TraversalNode]:
    """Return the children a linter should recurse into, attaching each to node."""
    if not isinstance(node, TraversalNode):
        raise UnknownNodeError(node)
    return node.traversal_children(policy)


def parent(node: object) -> TraversalNode | None:
    """Return the node's traversal parent, if it has been visited through one."""
    if not isinstance(node, TraversalNode):
        raise UnknownNodeError(node)
    return parent_of(node)


def walk(
    root: TraversalNode, policy: ParentPolicy = ParentPolicy.REFRESH
) -> Iterator[TraversalNode]:
    """Yield root and every node reachable through traversal children, depth-first."""
    stack: list[TraversalNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(traversal_children(node, policy)))
