"""Infrastructure layer — concrete devices behind the core protocols.

Every raw device exception must be caught here and re-raised as a
:class:`~prompto.exceptions.IoFaultError`.

Rules
-----
* No imports from ``cli``.
* No user-facing output beyond what the sink is asked to write.
"""

from prompto.infra.streams import TextStreamSink, TextStreamSource, stream_prompter

__all__: list[str] = [
    "TextStreamSink",
    "TextStreamSource",
    "stream_prompter",
]
