"""CLI application entry point for prompto.

``prompto`` asks a single question on stdin, writes the prompt to
stderr, and prints the accepted answer to stdout, so shell scripts can
capture validated input::

    age=$(prompto --type int --min 0 --max 150 "Age: ")

This module is the **sole error boundary** for the application.  It
catches :class:`~prompto.exceptions.PromptoError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No parsing or retry logic lives here — all work is delegated to
  :class:`~prompto.core.prompter.Prompter`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal
from typing import Any

from prompto.cli import exit_codes
from prompto.cli.console import (
    RichConsoleSink,
    configure_logging,
    console,
    escape_markup,
)
from prompto.core.parsing import Parser, parse_text
from prompto.core.prompter import RETRY_MESSAGE, Prompter
from prompto.core.protocols import LineSink
from prompto.core.validators import Validator, all_of, in_range, non_empty, one_of
from prompto.exceptions import (
    EndOfInputError,
    EnvironmentError,
    IoFaultError,
    ParseError,
    PromptoError,
)
from prompto.infra.streams import TextStreamSink, TextStreamSource
from prompto.version import __version__

_TYPES: dict[str, Parser[Any]] = {
    "bool": bool,
    "decimal": Decimal,
    "float": float,
    "int": int,
    "str": str,
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _as_line(text: str) -> str:
    """Ensure a retry notice ends with a newline."""
    return text if text.endswith("\n") else f"{text}\n"


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="prompto",
        description="Ask one question on stdin and print the validated answer.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "message",
        help="Prompt text shown before each read (written to stderr).",
    )
    parser.add_argument(
        "-t",
        "--type",
        choices=sorted(_TYPES),
        default="str",
        help="Type the answer must parse as (default: str).",
    )
    parser.add_argument("--min", metavar="VALUE", help="Smallest accepted value.")
    parser.add_argument("--max", metavar="VALUE", help="Largest accepted value.")
    parser.add_argument(
        "-c",
        "--choice",
        dest="choices",
        action="append",
        metavar="CHOICE",
        help="Accepted answer; repeat to allow several.",
    )
    parser.add_argument(
        "--non-empty",
        action="store_true",
        help="Reject blank answers.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--once",
        action="store_true",
        help="Ask a single time and fail instead of asking again.",
    )
    mode.add_argument(
        "--default",
        metavar="VALUE",
        help="Print VALUE instead of failing when input ends.",
    )
    retry = parser.add_mutually_exclusive_group()
    retry.add_argument(
        "--retry-message",
        type=_as_line,
        default=RETRY_MESSAGE,
        metavar="TEXT",
        help="Notice shown after a rejected answer.",
    )
    retry.add_argument(
        "--no-retry-message",
        dest="retry_message",
        action="store_const",
        const=None,
        help="Ask again without any notice.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each attempt to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Option conversion
# ---------------------------------------------------------------------------

def _parse_option(option: str, text: str, target: Parser[Any]) -> Any:
    """Parse a command-line value with the answer's type."""
    try:
        return parse_text(text, target)
    except ParseError as exc:
        raise PromptoError(
            f"Invalid {option} value: {text!r}",
            hint=f"{option} must be a valid {exc.target}.",
        ) from exc


def _build_validator(args: argparse.Namespace, target: Parser[Any]) -> Validator[Any] | None:
    """Combine the constraint flags into one validator (or none)."""
    validators: list[Validator[Any]] = []
    if args.min is not None or args.max is not None:
        minimum = None if args.min is None else _parse_option("--min", args.min, target)
        maximum = None if args.max is None else _parse_option("--max", args.max, target)
        validators.append(in_range(minimum, maximum))
    if args.choices:
        validators.append(
            one_of(_parse_option("--choice", choice, target) for choice in args.choices),
        )
    if args.non_empty:
        validators.append(non_empty)
    if not validators:
        return None
    if len(validators) == 1:
        return validators[0]
    return all_of(*validators)


def _prompt_sink() -> LineSink:
    """Prompt through Rich on stderr, or plain stderr without Rich."""
    try:
        return RichConsoleSink()
    except EnvironmentError:
        return TextStreamSink(sys.stderr)


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the prompto CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    PromptoError
        Any pipeline failure not absorbed by the chosen call style;
        :func:`cli` maps these to exit codes.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging()

    target = _TYPES[args.type]
    validator = _build_validator(args, target)
    prompter = Prompter(
        TextStreamSource(sys.stdin),
        _prompt_sink(),
        retry_message=args.retry_message,
    )

    if args.once:
        value = prompter.valid(args.message, validator, target)
    elif args.default is not None:
        default = _parse_option("--default", args.default, target)
        value = prompter.prompt(args.message, validator, target, default=default)
    else:
        value = prompter.rprompt(args.message, validator, target)

    sys.stdout.write(f"{_render(value)}\n")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except EndOfInputError:
        console.print("\n[yellow]No input received.[/yellow]")
        sys.exit(exit_codes.END_OF_INPUT)
    except IoFaultError as exc:
        console.print(f"[bold red]I/O error:[/bold red] {escape_markup(exc)}")
        sys.exit(exit_codes.IO_FAULT)
    except PromptoError as exc:
        # Messages may quote the user's answer.
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
