"""prompto — simple, typed, validated command-line prompts.

Read a line, parse it into a value, check it against a predicate, and
ask again until the answer is acceptable::

    from prompto import stream_prompter

    prompter = stream_prompter()
    age = prompter.rprompt("Age: ", lambda n: 0 <= n <= 150, int)
"""

from prompto.core import (
    RETRY_MESSAGE,
    LineSink,
    LineSource,
    Outcome,
    OutcomeKind,
    Parser,
    Prompter,
    Validator,
    all_of,
    default_for,
    in_range,
    non_empty,
    one_of,
    parse_bool,
    parse_text,
)
from prompto.exceptions import (
    EndOfInputError,
    HardFailure,
    IoFaultError,
    ParseError,
    PromptoError,
    SoftFailure,
    ValidationError,
)
from prompto.infra import TextStreamSink, TextStreamSource, stream_prompter
from prompto.version import __version__

__all__: list[str] = [
    "EndOfInputError",
    "HardFailure",
    "IoFaultError",
    "LineSink",
    "LineSource",
    "Outcome",
    "OutcomeKind",
    "ParseError",
    "Parser",
    "Prompter",
    "PromptoError",
    "RETRY_MESSAGE",
    "SoftFailure",
    "TextStreamSink",
    "TextStreamSource",
    "ValidationError",
    "Validator",
    "__version__",
    "all_of",
    "default_for",
    "in_range",
    "non_empty",
    "one_of",
    "parse_bool",
    "parse_text",
    "stream_prompter",
]
