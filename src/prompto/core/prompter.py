"""The prompter — acquisition, parsing, validation and retry.

This is the central class consumed by host programs.  It depends on a
:class:`~prompto.core.protocols.LineSource` and a
:class:`~prompto.core.protocols.LineSink` injected at construction time
(dependency inversion), keeping the core free of any device imports.

Pipeline
--------
Each layer builds on the one below it and adds exactly one step:

1. :meth:`Prompter.input` — write the prompt, read one raw line.
2. :meth:`Prompter.get` — parse the line into the target type.
3. :meth:`Prompter.valid` — apply the caller's validator.
4. :meth:`Prompter.attempt` — run 1-3 once and classify the result.
5. :meth:`Prompter.prompt` / :meth:`Prompter.rprompt` — loop on 4
   until a value is accepted or a hard failure occurs.

Guarantees
----------
* Exactly one line is read per attempt; nothing is buffered.
* A :class:`~prompto.exceptions.HardFailure` always ends a retry loop.
* The validator only ever sees a value that parsed successfully.
* Retrying is unbounded — only valid input or a hard failure stop it.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from prompto.core.models import Outcome, OutcomeKind
from prompto.core.parsing import Parser, default_for, parse_text
from prompto.core.protocols import LineSink, LineSource
from prompto.core.validators import Validator
from prompto.exceptions import HardFailure, SoftFailure, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRY_MESSAGE: str = "Invalid input! Please try again.\n"
"""Notice written to the sink after every rejected line."""

_UNSET: Any = object()


class Prompter:
    """Reads validated values from a line source.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`LineSource` protocol.
    sink:
        Any object satisfying the :class:`LineSink` protocol; receives
        prompts and retry notices.
    retry_message:
        Text written after each rejected line in :meth:`prompt` and
        :meth:`rprompt`.  ``None`` disables the notice.

    A prompter owns its source and sink exclusively and is not safe to
    share between threads.
    """

    def __init__(
        self,
        source: LineSource,
        sink: LineSink,
        *,
        retry_message: str | None = RETRY_MESSAGE,
    ) -> None:
        self._source: LineSource = source
        self._sink: LineSink = sink
        self._retry_message: str | None = retry_message

    # ------------------------------------------------------------------
    # Single-pass operations
    # ------------------------------------------------------------------

    def input(self, message: str) -> str:
        """Write *message* and return the next raw line.

        Raises
        ------
        EndOfInputError
            If the source is exhausted.
        IoFaultError
            If writing the prompt or reading the line fails.
        """
        self._sink.write(message)
        return self._source.read_line()

    def get_line(self, message: str) -> str:
        """Return one line of text; shorthand for ``get(message, str)``."""
        return self.get(message, str)

    def get(self, message: str, type: Parser[T] = str) -> T:  # noqa: A002
        """Read one line and parse it with *type*.

        The line is not retried: a malformed answer is reported to the
        caller, who decides whether to ask again.

        Raises
        ------
        ParseError
            If the line cannot be converted by *type*.
        EndOfInputError, IoFaultError
            Propagated unchanged from :meth:`input`.
        """
        line = self.input(message)
        return parse_text(line, type)

    def valid(
        self,
        message: str,
        validator: Validator[T] | None = None,
        type: Parser[T] = str,  # noqa: A002
    ) -> T:
        """Read, parse and validate one line.

        ``validator=None`` accepts every parsed value.

        Raises
        ------
        ValidationError
            If the parsed value is rejected by *validator*.
        ParseError, EndOfInputError, IoFaultError
            Propagated unchanged from :meth:`get`.
        """
        value = self.get(message, type)
        if validator is not None and not validator(value):
            raise ValidationError(f"Value {value!r} was rejected.", value=value)
        return value

    def attempt(
        self,
        message: str,
        validator: Validator[T] | None = None,
        type: Parser[T] = str,  # noqa: A002
    ) -> Outcome[T]:
        """Run :meth:`valid` once and classify the result as an :class:`Outcome`."""
        try:
            return Outcome.success(self.valid(message, validator, type))
        except (SoftFailure, HardFailure) as exc:
            return Outcome.failure(exc)

    # ------------------------------------------------------------------
    # Retry loops
    # ------------------------------------------------------------------

    def prompt(
        self,
        message: str,
        validator: Validator[T] | None = None,
        type: Parser[T] = str,  # noqa: A002
        *,
        default: Any = _UNSET,
    ) -> Any:
        """Ask until the answer is valid; never raise on exhausted input.

        On end of input or an I/O fault, *default* is returned — or,
        when no default was given, the target's own default value
        (``0`` for ``int``, ``""`` for ``str``, ``None`` for targets
        without one).  Callers that must tell "no input" apart from a
        genuine answer should use :meth:`rprompt`.
        """
        outcome = self._run(message, validator, type)
        if outcome.ok:
            return outcome.value
        if default is _UNSET:
            return default_for(type)
        return default

    def rprompt(
        self,
        message: str,
        validator: Validator[T] | None = None,
        type: Parser[T] = str,  # noqa: A002
    ) -> T:
        """Ask until the answer is valid; report why input stopped.

        Raises
        ------
        EndOfInputError
            If the source is exhausted before a valid answer arrives.
        IoFaultError
            If the source or sink fails.
        """
        return self._run(message, validator, type).unwrap()

    def _run(
        self,
        message: str,
        validator: Validator[T] | None,
        type: Parser[T],  # noqa: A002
    ) -> Outcome[T]:
        """Loop over :meth:`attempt` until success or a hard failure."""
        attempts = 0
        while True:
            attempts += 1
            outcome = self.attempt(message, validator, type)
            if outcome.kind is OutcomeKind.SUCCESS:
                return outcome
            if outcome.kind is OutcomeKind.HARD_FAILURE:
                logger.debug(
                    "Prompt %r stopped after %d attempt(s): %s",
                    message, attempts, outcome.error,
                )
                return outcome
            logger.debug("Attempt %d rejected: %s", attempts, outcome.error)
            try:
                self._notify_retry()
            except HardFailure as exc:
                return Outcome.failure(exc)

    def _notify_retry(self) -> None:
        if self._retry_message is not None:
            self._sink.write(self._retry_message)


__all__: list[str] = ["RETRY_MESSAGE", "Prompter"]
