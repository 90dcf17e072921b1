"""Core layer — the acquisition/parse/validate pipeline.

Rules
-----
* No ``print()`` calls.
* No direct device access; all I/O goes through the protocols.
* No imports from ``cli`` or ``infra``.
"""

from prompto.core.models import Outcome, OutcomeKind
from prompto.core.parsing import Parser, default_for, parse_bool, parse_text
from prompto.core.prompter import RETRY_MESSAGE, Prompter
from prompto.core.protocols import LineSink, LineSource
from prompto.core.validators import Validator, all_of, in_range, non_empty, one_of

__all__: list[str] = [
    "LineSink",
    "LineSource",
    "Outcome",
    "OutcomeKind",
    "Parser",
    "Prompter",
    "RETRY_MESSAGE",
    "Validator",
    "all_of",
    "default_for",
    "in_range",
    "non_empty",
    "one_of",
    "parse_bool",
    "parse_text",
]
