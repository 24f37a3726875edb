"""Rendering and writing of the fixed-width outdated-dependency report."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import IO, Optional, Sequence, Type

from jinja2 import DictLoader, Environment

from constants import COLUMN_HEADERS, OUTPUT_FILE, ROW_FORMAT, SEPARATOR
from models import OutdatedEntry

__all__ = ["SECTION_TEMPLATE", "build_environment", "render_section", "ReportWriter"]

SECTION_TEMPLATE = (
    "{{ heading }}\n"
    "{{ header_row }}\n"
    "{{ separator }}\n"
    "{% for entry in entries %}\n"
    "{{ row_format|format(entry.name, entry.local_version, entry.latest_version) }}\n"
    "{% endfor %}\n"
    "\n"
)


def build_environment() -> Environment:
    """Create the jinja2 environment holding the report section template."""
    return Environment(
        loader=DictLoader({"section.txt": SECTION_TEMPLATE}),
        autoescape=False,
        trim_blocks=True,
        keep_trailing_newline=True,
    )


def render_section(
    heading: str,
    entries: Sequence[OutdatedEntry],
    *,
    env: Environment,
) -> str:
    template = env.get_template("section.txt")
    return template.render(
        heading=heading,
        entries=entries,
        row_format=ROW_FORMAT,
        header_row=ROW_FORMAT % COLUMN_HEADERS,
        separator=SEPARATOR,
    )


class ReportWriter:
    """Owns the report file for one run.

    The file is truncated when the writer is entered and every section is
    flushed as soon as it is written.
    """

    def __init__(self, path: Path = OUTPUT_FILE, *, env: Optional[Environment] = None) -> None:
        self.path = Path(path)
        self.env = env or build_environment()
        self._handle: Optional[IO[str]] = None

    def __enter__(self) -> "ReportWriter":
        if self.path.parent != Path("."):
            self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self.path.open("w", encoding="utf-8")
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def write_section(self, heading: str, entries: Sequence[OutdatedEntry]) -> None:
        if self._handle is None:
            raise RuntimeError("ReportWriter must be used as a context manager")
        self._handle.write(render_section(heading, entries, env=self.env))
        self._handle.flush()
