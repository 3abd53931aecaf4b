"""Parent back-references set while the tree is traversed."""

from __future__ import annotations

import logging
import weakref
from enum import Enum
from typing import TYPE_CHECKING

from scss_lint.domain.errors import MalformedTreeError

if TYPE_CHECKING:
    from scss_lint.domain.tree.base import TraversalNode

logger = logging.getLogger(__name__)


class ParentPolicy(Enum):
    """How attaching a node that already has a live parent is handled."""

    REFRESH = "refresh"
    """The most recent attaching parent wins. Suits trees re-walked across passes."""
    STRICT = "strict"
    """The first parent wins; a second distinct parent is a malformed tree."""


def parent_of(node: TraversalNode) -> TraversalNode | None:
    """Return the node's traversal parent, or None for a root or an unvisited node."""
    ref = node._parent_ref
    return ref() if ref is not None else None


def attach_parent(
    child: TraversalNode,
    parent: TraversalNode,
    policy: ParentPolicy = ParentPolicy.REFRESH,
) -> None:
    """Record parent as the traversal parent of child without taking ownership of it."""
    current = parent_of(child)
    if current is parent:
        return
    if current is not None:
        if policy is ParentPolicy.STRICT:
            raise MalformedTreeError(
                f"{child.kind} node at line {child.line} is already attached to "
                f"a {current.kind} node at line {current.line}"
            )
        logger.debug(
            "Re-parenting %s node at line %s from %s to %s",
            child.kind, child.line, current.kind, parent.kind,
        )
    child._parent_ref = weakref.ref(parent)
