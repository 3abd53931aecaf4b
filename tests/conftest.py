"""Pytest configuration.

Run pytest from the project root; pythonpath in pyproject.toml puts src/ on
the import path so tests import scss_lint without an install.
"""

import pytest

from scss_lint.domain.tree import (
    ForNode,
    Funcall,
    Literal,
    MixinNode,
    PropNode,
    RootNode,
    RuleNode,
    Variable,
)


@pytest.fixture
def document_root() -> RootNode:
    """A small document whose sub-expressions are left unpositioned, as the parser does."""
    prop = PropNode(
        line=3,
        name=["color"],
        value=Funcall(name="darken", args=[Variable(name="base"), Literal(value="10%")]),
    )
    include = MixinNode(
        line=4,
        name="button",
        args=[Variable(name="size")],
        keywords={"color": Literal(value="red")},
    )
    loop = ForNode(
        line=5,
        var="i",
        from_=Literal(value=1),
        to=Literal(value=3),
        children=[PropNode(line=6, name=["width"], value=Variable(name="i"))],
    )
    rule = RuleNode(line=2, rule=[".nav"], children=[prop, include, loop])
    return RootNode(line=1, children=[rule])
