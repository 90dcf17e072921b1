"""Shared utilities — text helpers and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from __future__ import annotations

_TERMINATORS: tuple[str, ...] = ("\r\n", "\n", "\r")


def strip_terminator(line: str) -> str:
    """Remove exactly one trailing line terminator from *line*.

    ``\\r\\n``, ``\\n`` and a lone ``\\r`` are recognised.  Any other
    trailing whitespace belongs to the line and is preserved.
    """
    for terminator in _TERMINATORS:
        if line.endswith(terminator):
            return line[: -len(terminator)]
    return line


__all__: list[str] = ["strip_terminator"]
