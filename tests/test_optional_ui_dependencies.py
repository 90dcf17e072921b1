"""Regression tests for the optional Rich dependency.

The CLI must keep prompting through plain stderr when Rich is missing,
and only Rich-specific entry points may fail — cleanly, with an install
hint.
"""

from __future__ import annotations

import io
import sys
from unittest.mock import patch

import pytest

from prompto.cli import exit_codes
from prompto.cli.app import main
from prompto.cli.console import RichConsoleSink, configure_logging, console, escape_markup
from prompto.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_prompting_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "stdin", io.StringIO("x\n5\n"))

    assert main(["--type", "int", "Count: "]) == exit_codes.SUCCESS
    captured = capsys.readouterr()
    assert captured.out == "5\n"
    assert captured.err == "Count: Invalid input! Please try again.\nCount: "


def test_rich_sink_requires_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        RichConsoleSink()


def test_console_proxy_prints_plain(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("plain message")
    assert capsys.readouterr().err == "plain message\n"


def test_logging_falls_back_to_basic_config(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with patch("prompto.cli.console.logging.basicConfig") as basic_config:
        configure_logging()
    assert "handlers" not in basic_config.call_args.kwargs
    assert basic_config.call_args.kwargs["stream"] is sys.stderr


def test_escape_markup_passes_text_through(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape_markup("[red]boom") == "[red]boom"
