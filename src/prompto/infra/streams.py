"""Infrastructure: text-stream adapters for the core protocols.

Any file-like text object works — ``sys.stdin``/``sys.stdout``, an
opened file, or :class:`io.StringIO` in tests.

Rules
-----
* ``readline()`` returning ``""`` is end of input; ``"\\n"`` is an
  empty line.
* ``OSError`` and the ``ValueError`` raised by closed streams are
  mapped to :class:`~prompto.exceptions.IoFaultError`.
* Standard streams are looked up at call time, never at import time.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from prompto.core.prompter import Prompter
from prompto.exceptions import EndOfInputError, IoFaultError
from prompto.utils import strip_terminator

_DEVICE_ERRORS: tuple[type[BaseException], ...] = (OSError, ValueError)


class TextStreamSource:
    """:class:`~prompto.core.protocols.LineSource` over a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream: TextIO = stream

    def read_line(self) -> str:
        try:
            line = self._stream.readline()
        except _DEVICE_ERRORS as exc:
            raise IoFaultError(f"Failed to read from input: {exc}") from exc
        if line == "":
            raise EndOfInputError("Input stream is exhausted.")
        return strip_terminator(line)


class TextStreamSink:
    """:class:`~prompto.core.protocols.LineSink` over a text stream.

    Every write is flushed so prompts appear before the read they
    announce, even on block-buffered streams.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream: TextIO = stream

    def write(self, text: str) -> None:
        try:
            self._stream.write(text)
            self._stream.flush()
        except _DEVICE_ERRORS as exc:
            raise IoFaultError(f"Failed to write prompt: {exc}") from exc


def stream_prompter(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    **options: Any,
) -> Prompter:
    """Build a :class:`Prompter` over text streams.

    Parameters
    ----------
    stdin:
        Input stream; defaults to the current ``sys.stdin``.
    stdout:
        Prompt stream; defaults to the current ``sys.stdout``.
    **options:
        Forwarded to :class:`Prompter` (e.g. ``retry_message``).
    """
    return Prompter(
        TextStreamSource(sys.stdin if stdin is None else stdin),
        TextStreamSink(sys.stdout if stdout is None else stdout),
        **options,
    )
