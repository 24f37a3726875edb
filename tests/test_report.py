"""Unit tests for report rendering and writing."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from constants import COLUMN_HEADERS, ROW_FORMAT, SEPARATOR
from models import OutdatedEntry
from report import ReportWriter, build_environment, render_section

HEADER_ROW = ROW_FORMAT % COLUMN_HEADERS


def test_render_section_lays_out_fixed_width_rows() -> None:
    """Heading, column headers, separator, rows, then a blank line."""
    entries: List[OutdatedEntry] = [
        {"name": "http", "local_version": "1.1.0", "latest_version": "1.2.0"},
        {"name": "path", "local_version": "1.8.0", "latest_version": "1.9.0"},
    ]

    text = render_section("Direct Main Dependencies", entries, env=build_environment())

    assert text.split("\n") == [
        "Direct Main Dependencies",
        HEADER_ROW,
        SEPARATOR,
        ROW_FORMAT % ("http", "1.1.0", "1.2.0"),
        ROW_FORMAT % ("path", "1.8.0", "1.9.0"),
        "",
        "",
    ]


def test_render_section_keeps_headers_for_empty_tables() -> None:
    text = render_section("Transitive Dependencies", [], env=build_environment())

    assert text == f"Transitive Dependencies\n{HEADER_ROW}\n{SEPARATOR}\n\n"


def test_rows_are_left_aligned_in_columns() -> None:
    entries: List[OutdatedEntry] = [
        {"name": "a", "local_version": "1.0.0", "latest_version": "2.0.0"},
    ]

    row = render_section("X", entries, env=build_environment()).split("\n")[3]

    assert row.startswith("a" + " " * 50 + "1.0.0")
    assert row.index("2.0.0") == 50 + 1 + 15 + 1


def test_report_writer_truncates_existing_file(tmp_path: Path) -> None:
    """Previous report contents never survive a new run."""
    output = tmp_path / "dependencies_versions.txt"
    output.write_text("stale content\n", encoding="utf-8")

    with ReportWriter(output) as writer:
        writer.write_section("Direct Dev Dependencies", [])

    content = output.read_text(encoding="utf-8")
    assert "stale content" not in content
    assert content.startswith("Direct Dev Dependencies\n")


def test_report_writer_flushes_each_section(tmp_path: Path) -> None:
    output = tmp_path / "report.txt"

    with ReportWriter(output) as writer:
        writer.write_section("Direct Main Dependencies", [])
        assert output.read_text(encoding="utf-8").startswith("Direct Main Dependencies")


def test_report_writer_requires_context_manager(tmp_path: Path) -> None:
    writer = ReportWriter(tmp_path / "report.txt")

    with pytest.raises(RuntimeError):
        writer.write_section("Transitive Dependencies", [])
