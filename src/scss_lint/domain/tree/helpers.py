"""Free functions the node variants compose when assembling traversal children."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from scss_lint.domain.tree.base import TraversalNode, add_line_number, concat_expr_lists
from scss_lint.domain.tree.script import ScriptNode, Variable

__all__ = [
    "add_line_number",
    "add_line_numbers_to_args",
    "concat_expr_lists",
    "create_variable",
    "extract_script_nodes",
]


def add_line_numbers_to_args(arg_list: Iterable[Any], container: TraversalNode) -> None:
    """
    Back-fill lines on argument name nodes.

    Accepts both `(variable, default)` pairs from definitions and bare
    expressions from invocations; only the first member of a pair is touched.
    """
    for arg in arg_list:
        variable = arg[0] if isinstance(arg, tuple) else arg
        add_line_number(variable, container)


def create_variable(var_name: str, container: TraversalNode) -> Variable:
    """Turn a bare name into a Variable node positioned at its container."""
    return Variable(
        name=var_name,
        line=container.line,
        column=container.column,
        filename=container.filename,
    )


def extract_script_nodes(items: Iterable[Any] | None) -> list[ScriptNode]:
    """Keep only the expression nodes of a list that mixes them with plain text."""
    if items is None:
        return []
    return [item for item in items if isinstance(item, ScriptNode)]
