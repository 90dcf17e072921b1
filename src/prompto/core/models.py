"""Domain models for prompto.

:class:`Outcome` is a **frozen** dataclass — an immutable record of one
pass through the acquisition pipeline.  It carries no I/O and exists
only long enough for the retry loop to decide what to do next.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

from prompto.exceptions import HardFailure, PromptoError, SoftFailure

T = TypeVar("T")


class OutcomeKind(enum.Enum):
    """Tri-state classification of a pipeline pass."""

    SUCCESS = "success"
    SOFT_FAILURE = "soft_failure"
    HARD_FAILURE = "hard_failure"


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Result of a single acquire → parse → validate pass.

    Exactly one of :attr:`value` / :attr:`error` is meaningful: a
    successful outcome has ``error is None``.  Build instances with
    :meth:`success` or :meth:`failure` rather than directly.
    """

    value: T | None = None
    """The accepted value, or ``None`` on failure."""

    error: PromptoError | None = None
    """The failure that ended the pass, or ``None`` on success."""

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: PromptoError) -> Outcome[T]:
        return cls(error=error)

    @property
    def kind(self) -> OutcomeKind:
        if self.error is None:
            return OutcomeKind.SUCCESS
        if isinstance(self.error, HardFailure):
            return OutcomeKind.HARD_FAILURE
        if isinstance(self.error, SoftFailure):
            return OutcomeKind.SOFT_FAILURE
        # Any other PromptoError cannot be fixed by asking again.
        return OutcomeKind.HARD_FAILURE

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Return the value, or *default* when the pass failed."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]
