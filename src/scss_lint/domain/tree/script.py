"""
Expression nodes (SassScript).

Expression nodes compare by value: two nodes of the same class with equal
fields are equal regardless of where they sit in the source.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from scss_lint.domain.tree.base import TraversalNode


@dataclass
class ScriptNode(TraversalNode):
    """Base class for all expression nodes."""

    kind = "script"
    is_expression = True


@dataclass
class Variable(ScriptNode):
    """A variable reference, e.g. `$base-color`. The name excludes the `$`."""

    kind = "script_variable"

    name: str = ""

    @property
    def underscored_name(self) -> str:
        """Sass treats `-` and `_` as the same character in variable names."""
        return self.name.replace("-", "_")


@dataclass
class Literal(ScriptNode):
    """A literal value: number, color, string, keyword or null."""

    kind = "script_literal"

    value: Any = None


@dataclass
class StringInterpolation(ScriptNode):
    """A quoted string containing `#{}`."""

    kind = "script_string_interpolation"

    before: ScriptNode | None = None
    mid: ScriptNode | None = None
    after: ScriptNode | None = None

    def structural_children(self) -> list[Any]:
        return [self.before, self.mid, self.after]


@dataclass
class Interpolation(ScriptNode):
    """An unquoted `#{}` interpolation."""

    kind = "script_interpolation"

    before: ScriptNode | None = None
    mid: ScriptNode | None = None
    after: ScriptNode | None = None
    whitespace_before: bool = False
    whitespace_after: bool = False

    def structural_children(self) -> list[Any]:
        return [self.before, self.mid, self.after]


@dataclass
class Funcall(ScriptNode):
    """A function call, e.g. `darken($color, 10%)`."""

    kind = "script_funcall"

    name: str = ""
    args: list[ScriptNode] = field(default_factory=list)
    keywords: dict[str, ScriptNode] = field(default_factory=dict)
    splat: ScriptNode | None = None
    kwarg_splat: ScriptNode | None = None

    def structural_children(self) -> list[Any]:
        return [self.args, list(self.keywords.values()), self.splat, self.kwarg_splat]


@dataclass
class ListLiteral(ScriptNode):
    """A space or comma separated list."""

    kind = "script_list"

    elements: list[ScriptNode] = field(default_factory=list)
    separator: str = "space"

    def structural_children(self) -> list[Any]:
        return list(self.elements)


@dataclass
class MapLiteral(ScriptNode):
    """A map literal, e.g. `(small: 4px, large: 8px)`."""

    kind = "script_map"

    pairs: list[tuple[ScriptNode, ScriptNode]] = field(default_factory=list)

    def structural_children(self) -> list[Any]:
        return list(self.pairs)


@dataclass
class Operation(ScriptNode):
    """A binary operation, e.g. `$a + 1`."""

    kind = "script_operation"

    operand1: ScriptNode | None = None
    operator: str = ""
    operand2: ScriptNode | None = None

    def structural_children(self) -> list[Any]:
        return [self.operand1, self.operand2]


@dataclass
class UnaryOperation(ScriptNode):
    """A unary operation, e.g. `-$gutter` or `not $flag`."""

    kind = "script_unary_operation"

    operator: str = ""
    operand: ScriptNode | None = None

    def structural_children(self) -> list[Any]:
        return [self.operand]
