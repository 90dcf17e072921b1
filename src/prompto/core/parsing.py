"""Typed parse layer — converting a raw line into a target value.

A *target* is any callable that accepts a ``str`` and returns a value,
exactly like argparse's ``type=``: built-in types (``int``, ``float``,
``str``, :class:`decimal.Decimal`, :class:`fractions.Fraction`), user
classes, or plain functions.  Parsing follows the target's own rules,
so ``int("32.32")`` is rejected while ``float("32")`` is accepted.

Rules
-----
* Parsing is deterministic and side-effect-free.
* Conversion failures surface as :class:`~prompto.exceptions.ParseError`
  and nothing else; genuine programming errors propagate untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from prompto.exceptions import ParseError

T = TypeVar("T")

Parser = Callable[[str], T]
"""A callable converting raw text into a value of type ``T``."""

# Exceptions a well-behaved parser raises for malformed text.
# ArithmeticError covers decimal.InvalidOperation and Fraction("1/0").
_CONVERSION_ERRORS: tuple[type[BaseException], ...] = (
    ValueError,
    TypeError,
    ArithmeticError,
)

_TRUE_WORDS: frozenset[str] = frozenset({"true", "yes", "y", "on", "1"})
_FALSE_WORDS: frozenset[str] = frozenset({"false", "no", "n", "off", "0"})


def parse_bool(text: str) -> bool:
    """Parse a yes/no style answer.

    ``bool()`` cannot be used as a parser: every non-empty string,
    including ``"false"``, is truthy.
    """
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def resolve_parser(target: Parser[T]) -> Parser[T]:
    """Return the callable actually used to parse text for *target*."""
    if target is bool:
        return parse_bool  # type: ignore[return-value]
    return target


def target_name(target: Any) -> str:
    """Human-readable name for *target* (used in error messages)."""
    return getattr(target, "__name__", None) or repr(target)


def parse_text(text: str, target: Parser[T]) -> T:
    """Convert *text* to a value using *target*'s parser.

    Raises
    ------
    ParseError
        If the parser rejects *text*.
    """
    parser = resolve_parser(target)
    try:
        return parser(text)
    except ParseError:
        raise
    except _CONVERSION_ERRORS as exc:
        name = target_name(target)
        raise ParseError(
            f"Could not read {text!r} as {name}.",
            text=text,
            target=name,
            hint=str(exc) or None,
        ) from exc


def default_for(target: Any) -> Any:
    """Return the default value of *target*, or ``None`` when it has none.

    A class that can be constructed without arguments provides its own
    default (``int() == 0``, ``str() == ""``, ``bool() is False``).
    Plain functions and classes requiring arguments have no default.
    """
    if not isinstance(target, type):
        return None
    try:
        return target()
    except TypeError:
        return None


__all__: list[str] = [
    "Parser",
    "default_for",
    "parse_bool",
    "parse_text",
    "resolve_parser",
    "target_name",
]
