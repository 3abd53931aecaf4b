"""Unit tests for parent back-references and re-attachment policies."""

import gc
import unittest

from scss_lint.domain.errors import MalformedTreeError
from scss_lint.domain.tree import DebugNode, Literal, ParentPolicy, RuleNode, WarnNode
from scss_lint.domain.tree.parents import attach_parent, parent_of


class TestParentPolicy(unittest.TestCase):
    def setUp(self) -> None:
        self.shared = Literal(value="oops", line=1)
        self.first = WarnNode(line=1, expr=self.shared)
        self.second = DebugNode(line=2, expr=self.shared)

    def test_unvisited_node_has_no_parent(self) -> None:
        self.assertIsNone(self.shared.parent)

    def test_refresh_moves_to_latest_parent(self) -> None:
        self.first.traversal_children()
        with self.assertLogs("scss_lint.domain.tree.parents", level="DEBUG") as logs:
            self.second.traversal_children(ParentPolicy.REFRESH)

        self.assertIs(self.shared.parent, self.second)
        self.assertIn("Re-parenting", logs.output[0])

    def test_strict_rejects_second_parent(self) -> None:
        self.first.traversal_children(ParentPolicy.STRICT)

        with self.assertRaises(MalformedTreeError):
            self.second.traversal_children(ParentPolicy.STRICT)
        self.assertIs(self.shared.parent, self.first)

    def test_same_parent_can_attach_again(self) -> None:
        self.first.traversal_children(ParentPolicy.STRICT)
        self.first.traversal_children(ParentPolicy.STRICT)

        self.assertIs(parent_of(self.shared), self.first)


class TestBackReference(unittest.TestCase):
    def test_back_reference_does_not_keep_parent_alive(self) -> None:
        child = RuleNode(line=2)
        holder = RuleNode(line=1, children=[child])
        holder.traversal_children()

        del holder
        gc.collect()

        self.assertIsNone(child.parent)

    def test_dead_parent_does_not_block_strict_attach(self) -> None:
        child = Literal(value=1)
        attach_parent(child, WarnNode(line=1), ParentPolicy.STRICT)
        gc.collect()
        new_parent = WarnNode(line=2)

        attach_parent(child, new_parent, ParentPolicy.STRICT)

        self.assertIs(child.parent, new_parent)
