"""Tests for the shared console helpers."""

from __future__ import annotations

import os

import pytest

from console import console, print_debug, print_error, print_warning, set_verbose


@pytest.mark.skipif("FORCE_COLOR" in os.environ, reason="colors forced by the environment")
def test_captured_output_is_plain_text(capsys: pytest.CaptureFixture[str]) -> None:
    """Terminal detection is left to rich, so a captured stream gets no escapes."""
    print_warning("Failed to fetch the latest version for foo, skipping...")

    out = capsys.readouterr().out
    assert "\x1b[" not in out
    assert out == "Warning: Failed to fetch the latest version for foo, skipping...\n"
    assert console.is_terminal is False


def test_messages_are_not_parsed_as_markup(capsys: pytest.CaptureFixture[str]) -> None:
    print_error("Invalid package name: [bold]x")

    assert "Error: Invalid package name: [bold]x" in capsys.readouterr().out


def test_debug_output_follows_verbose_switch(capsys: pytest.CaptureFixture[str]) -> None:
    try:
        print_debug("hidden")
        set_verbose(True)
        print_debug("shown")
    finally:
        set_verbose(False)

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out
