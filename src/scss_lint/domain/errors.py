"""Errors raised when the tree handed to the traversal layer breaks its contract."""


class TreeError(Exception):
    """Base class for tree contract violations coming from the upstream parser."""


class UnknownNodeError(TreeError, TypeError):
    """A value that is not a node variant was asked for its traversal children."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Not a traversable node: {type(value).__name__}")
        self.value = value


class MalformedTreeError(TreeError, ValueError):
    """A structural invariant of the parsed tree does not hold."""
