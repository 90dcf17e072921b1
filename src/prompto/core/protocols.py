"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so a :class:`~prompto.core.prompter.Prompter` can be
driven by a terminal, a file, or an in-memory buffer alike.
"""

from __future__ import annotations

from typing import Protocol


class LineSource(Protocol):
    """Contract for line-oriented input sources.

    Any object that implements :meth:`read_line` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def read_line(self) -> str:
        """Return the next line with its trailing terminator removed.

        Exactly one line is consumed per call.  An empty line is
        returned as ``""``; exhaustion is signalled by an exception,
        never by a sentinel value.

        Raises
        ------
        EndOfInputError
            When the source has no more lines.
        IoFaultError
            When the underlying device fails.
        """
        ...  # pragma: no cover


class LineSink(Protocol):
    """Contract for prompt output sinks.

    Implementations must make the text visible before returning (i.e.
    flush any buffer) so that a prompt always precedes the read it
    announces.
    """

    def write(self, text: str) -> None:
        """Write *text* verbatim, without appending a newline.

        Raises
        ------
        IoFaultError
            When the underlying device fails.
        """
        ...  # pragma: no cover
