"""The record a linter emits when it flags a location."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

from scss_lint.domain.location import Location

if TYPE_CHECKING:
    from scss_lint.domain.protocols import LinterProtocol


class Severity(Enum):
    """Severity levels for lints."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Lint:
    """
    A single problem detected by a linter.

    Immutable once created. The optional autocorrect callable is deferred:
    it receives the source text and returns the corrected text, and it is
    only ever invoked by a fixer outside this package. It is excluded from
    equality so duplicate lints compare equal.
    """

    linter: "LinterProtocol"
    filename: str
    location: Location
    description: str
    severity: Severity = Severity.WARNING
    autocorrect: Callable[[str], str] | None = field(
        default=None, compare=False, repr=False
    )

    def is_error(self) -> bool:
        """Whether this lint should fail the build."""
        return self.severity is Severity.ERROR
