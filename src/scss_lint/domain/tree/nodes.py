"""
Statement nodes and the traversal children each variant exposes.

Every variant extends the base computation through super(): structural
children come first, then the expressions embedded in the variant's own
fields in a fixed order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from scss_lint.domain.tree.base import TraversalNode
from scss_lint.domain.tree.helpers import (
    add_line_number,
    add_line_numbers_to_args,
    concat_expr_lists,
    create_variable,
    extract_script_nodes,
)
from scss_lint.domain.tree.script import ScriptNode, Variable

# A selector, property name or comment body as the parser stores it:
# plain text interleaved with interpolated expressions.
InterpolatedText = list[Any]


@dataclass(eq=False)
class Node(TraversalNode):
    """
    Base class for statement nodes.

    Two statement nodes are equal when they are of the same variant and their
    structural children are equal; location is not compared.
    """

    kind = "node"

    children: list[Node] = field(default_factory=list)

    def structural_children(self) -> list[Any]:
        return list(self.children)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.children == other.children  # type: ignore[attr-defined]


@dataclass(eq=False)
class RootNode(Node):
    """The top of a parsed document."""

    kind = "root"

    template: str = ""


@dataclass(eq=False)
class RuleNode(Node):
    """A rule set, e.g. `.nav #{$item} { ... }`."""

    kind = "rule"

    rule: InterpolatedText = field(default_factory=list)

    def _collect_children(self) -> list[TraversalNode]:
        return concat_expr_lists(super()._collect_children(), extract_script_nodes(self.rule))


@dataclass(eq=False)
class PropNode(Node):
    """A property declaration. Nested property groups have no value."""

    kind = "prop"

    name: InterpolatedText = field(default_factory=list)
    value: ScriptNode | None = None

    def _collect_children(self) -> list[TraversalNode]:
        return concat_expr_lists(
            super()._collect_children(),
            extract_script_nodes(self.name),
            add_line_number(self.value, self),
        )


@dataclass(eq=False)
class CommentNode(Node):
    """A comment. Loud comments may interpolate expressions."""

    kind = "comment"

    value: InterpolatedText = field(default_factory=list)
    type: str = "normal"

    def _collect_children(self) -> list[TraversalNode]:
        return concat_expr_lists(super()._collect_children(), extract_script_nodes(self.value))


@dataclass(eq=False)
class ExprNode(Node):
    """Shared shape of directives that carry a single expression."""

    expr: ScriptNode | None = None

    def _collect_children(self) -> list[TraversalNode]:
        return concat_expr_lists(super()._collect_children(), self.expr)


@dataclass(eq=False)
class DebugNode(ExprNode):
    kind = "debug"


@dataclass(eq=False)
class WarnNode(ExprNode):
    kind = "warn"


@dataclass(eq=False)
class ErrorNode(ExprNode):
    kind = "error"


@dataclass(eq=False)
class ReturnNode(ExprNode):
    kind = "return"


@dataclass(eq=False)
class WhileNode(ExprNode):
    kind = "while"


@dataclass(eq=False)
class VariableNode(ExprNode):
    """A variable assignment, e.g. `$gutter: 10px !default`."""

    kind = "variable"

    name: str = ""
    guarded: bool = False
    global_: bool = False


@dataclass(eq=False)
class IfNode(Node):
    """
    An `@if` with its optional `@else` chain.

    A plain `@else` is an IfNode without an expression.
    """

    kind = "if"

    expr: ScriptNode | None = None
    else_: IfNode | None = None

    def _collect_children(self) -> list[TraversalNode]:
        return concat_expr_lists(super()._collect_children(), self.expr, self.else_)


@dataclass(eq=False)
class EachNode(Node):
    """`@each $key, $value in $map`. Loop variables are stored as bare names."""

    kind = "each"

    vars: list[str] = field(default_factory=list)
    list_: ScriptNode | None = None

    def _collect_children(self) -> list[TraversalNode]:
        loop_vars = [create_variable(var, self) for var in self.vars]
        return concat_expr_lists(super()._collect_children(), loop_vars, self.list_)


@dataclass(eq=False)
class ForNode(Node):
    """`@for $i from 1 through 3`. The loop variable is stored as a bare name."""

    kind = "for"

    var: str = ""
    from_: ScriptNode | None = None
    to: ScriptNode | None = None
    exclusive: bool = False

    def _collect_children(self) -> list[TraversalNode]:
        return concat_expr_lists(
            super()._collect_children(), create_variable(self.var, self), self.from_, self.to
        )


@dataclass(eq=False)
class CallableDefNode(Node):
    """Shared shape of `@function` and `@mixin` definitions."""

    name: str = ""
    args: list[tuple[Variable, ScriptNode | None]] = field(default_factory=list)
    splat: Variable | None = None

    def _collect_children(self) -> list[TraversalNode]:
        add_line_numbers_to_args(self.args, self)
        return concat_expr_lists(super()._collect_children(), self.args, self.splat)


@dataclass(eq=False)
class FunctionNode(CallableDefNode):
    kind = "function"


@dataclass(eq=False)
class MixinDefNode(CallableDefNode):
    kind = "mixindef"

    has_content: bool = False


@dataclass(eq=False)
class MixinNode(Node):
    """An `@include`. Keyword names are stored as bare strings."""

    kind = "mixin"

    name: str = ""
    args: list[ScriptNode] = field(default_factory=list)
    keywords: dict[str, ScriptNode] = field(default_factory=dict)
    splat: ScriptNode | None = None
    kwarg_splat: ScriptNode | None = None

    def _collect_children(self) -> list[TraversalNode]:
        add_line_numbers_to_args(self.args, self)
        keyword_exprs = [
            (create_variable(var_name, self), var_expr)
            for var_name, var_expr in self.keywords.items()
        ]
        return concat_expr_lists(
            super()._collect_children(),
            self.args,
            keyword_exprs,
            self.splat,
            self.kwarg_splat,
        )


@dataclass(eq=False)
class ContentNode(Node):
    kind = "content"


@dataclass(eq=False)
class ExtendNode(Node):
    """`@extend %placeholder !optional`."""

    kind = "extend"

    selector: InterpolatedText = field(default_factory=list)
    optional: bool = False

    def _collect_children(self) -> list[TraversalNode]:
        return concat_expr_lists(super()._collect_children(), extract_script_nodes(self.selector))


@dataclass(eq=False)
class ImportNode(Node):
    """
    An `@import` of a Sass file.

    Imports of the same file are equal wherever they appear in the source.
    """

    kind = "import"

    imported_filename: str = ""

    def __eq__(self, other: object) -> bool:
        return (
            type(self) is type(other)
            and self.imported_filename == other.imported_filename  # type: ignore[attr-defined]
            and super().__eq__(other)
        )


@dataclass(eq=False)
class CssImportNode(ImportNode):
    """An `@import` left for the browser to resolve, e.g. `@import url(foo.css)`."""

    kind = "cssimport"

    uri: str = ""

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other) and self.uri == other.uri  # type: ignore[attr-defined]


@dataclass(eq=False)
class CharsetNode(Node):
    kind = "charset"

    name: str = ""


@dataclass(eq=False)
class DirectiveNode(Node):
    """A generic at-directive, e.g. `@font-face` or `@page :first`."""

    kind = "directive"

    value: InterpolatedText = field(default_factory=list)

    def directive_value(self) -> InterpolatedText | None:
        """The directive's value, or None for variants whose grammar defines none."""
        return self.value

    def _collect_children(self) -> list[TraversalNode]:
        return concat_expr_lists(
            super()._collect_children(), extract_script_nodes(self.directive_value())
        )


@dataclass(eq=False)
class MediaNode(DirectiveNode):
    kind = "media"

    query: InterpolatedText = field(default_factory=list)

    def directive_value(self) -> InterpolatedText | None:
        return None


@dataclass(eq=False)
class SupportsNode(DirectiveNode):
    kind = "supports"

    name: str = "supports"
    condition: Any = None

    def directive_value(self) -> InterpolatedText | None:
        return None


@dataclass(eq=False)
class AtRootNode(Node):
    kind = "atroot"

    query: InterpolatedText = field(default_factory=list)


@dataclass(eq=False)
class KeyframeRuleNode(Node):
    """A keyframe selector such as `from`, `to` or `50%`."""

    kind = "keyframerule"

    resolved_value: str = ""
