"""Stylesheet tree variants and the traversal contract linters rely on."""

from scss_lint.domain.tree.base import TraversalNode
from scss_lint.domain.tree.nodes import (
    AtRootNode,
    CharsetNode,
    CommentNode,
    ContentNode,
    CssImportNode,
    DebugNode,
    DirectiveNode,
    EachNode,
    ErrorNode,
    ExtendNode,
    ForNode,
    FunctionNode,
    IfNode,
    ImportNode,
    KeyframeRuleNode,
    MediaNode,
    MixinDefNode,
    MixinNode,
    Node,
    PropNode,
    ReturnNode,
    RootNode,
    RuleNode,
    SupportsNode,
    VariableNode,
    WarnNode,
    WhileNode,
)
from scss_lint.domain.tree.parents import ParentPolicy
from scss_lint.domain.tree.script import (
    Funcall,
    Interpolation,
    ListLiteral,
    Literal,
    MapLiteral,
    Operation,
    ScriptNode,
    StringInterpolation,
    UnaryOperation,
    Variable,
)
from scss_lint.domain.tree.traversal import parent, traversal_children, walk

__all__ = [
    "AtRootNode",
    "CharsetNode",
    "CommentNode",
    "ContentNode",
    "CssImportNode",
    "DebugNode",
    "DirectiveNode",
    "EachNode",
    "ErrorNode",
    "ExtendNode",
    "ForNode",
    "Funcall",
    "FunctionNode",
    "IfNode",
    "ImportNode",
    "Interpolation",
    "KeyframeRuleNode",
    "ListLiteral",
    "Literal",
    "MapLiteral",
    "MediaNode",
    "MixinDefNode",
    "MixinNode",
    "Node",
    "Operation",
    "ParentPolicy",
    "PropNode",
    "ReturnNode",
    "RootNode",
    "RuleNode",
    "ScriptNode",
    "StringInterpolation",
    "SupportsNode",
    "TraversalNode",
    "UnaryOperation",
    "Variable",
    "VariableNode",
    "WarnNode",
    "WhileNode",
    "parent",
    "traversal_children",
    "walk",
]
