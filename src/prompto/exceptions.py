"""Custom exception hierarchy for prompto.

Every failure of the acquisition pipeline is a :class:`PromptoError`.
The two intermediate classes encode the retry policy: a
:class:`SoftFailure` is recoverable and retry loops continue past it,
while a :class:`HardFailure` always terminates them.  Raw device
exceptions (``OSError`` and friends) must NEVER propagate beyond the
infrastructure layer — they are caught there and re-raised as
:class:`IoFaultError`.

Hierarchy
---------
PromptoError
├── SoftFailure
│   ├── ParseError
│   └── ValidationError
├── HardFailure
│   ├── EndOfInputError
│   └── IoFaultError
└── EnvironmentError
"""

from __future__ import annotations

from typing import Any


class PromptoError(Exception):
    """Base exception for all prompto errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Soft failures ---------------------------------------------------------

class SoftFailure(PromptoError):
    """A recoverable failure: the line was read but not accepted."""


class ParseError(SoftFailure):
    """Raised when raw text cannot be converted to the target type."""

    def __init__(
        self,
        message: str,
        *,
        text: str,
        target: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.text: str = text
        """The raw line that failed to parse."""
        self.target: str = target
        """Human-readable name of the target type."""


class ValidationError(SoftFailure):
    """Raised when a parsed value is rejected by the caller's validator."""

    def __init__(self, message: str, *, value: Any, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.value: Any = value
        """The parsed value that failed validation."""


# --- Hard failures ---------------------------------------------------------

class HardFailure(PromptoError):
    """An unrecoverable failure that always ends a retry loop."""


class EndOfInputError(HardFailure):
    """Raised when the input source is exhausted."""


class IoFaultError(HardFailure):
    """Raised when the source or sink reports an underlying device error."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(PromptoError):
    """Raised when a required runtime dependency is not available."""
