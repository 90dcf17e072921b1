"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — a valid answer was printed."""

GENERAL_ERROR: int = 1
"""A known PromptoError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

END_OF_INPUT: int = 3
"""Input was closed before a valid answer arrived."""

IO_FAULT: int = 4
"""The input or prompt device reported an error."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
