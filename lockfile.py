"""Extraction of dependency records from a ``pubspec.lock`` file."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional

from console import print_debug
from constants import (
    BLOCK_START_REGEX,
    DEPENDENCY_LINE_REGEX,
    LOCKFILE_NAME,
    VERSION_LINE_REGEX,
)
from models import Category, DependencyRecord, LockfileNotFoundError

__all__ = [
    "ScanState",
    "LockfileScanner",
    "lockfile_path",
    "scan_lines",
    "parse_lockfile",
]


class ScanState(Enum):
    IDLE = "idle"
    IN_MATCHING_BLOCK = "in_matching_block"


class LockfileScanner:
    """Line-driven state machine over the ``packages:`` section.

    A package block opens with ``  <name>:``. The block becomes matching once
    a ``    dependency:`` line equals the requested category token, and the
    next ``    version:`` line then produces a record and returns to idle.
    """

    def __init__(self, category: Category) -> None:
        self.category = category
        self.state = ScanState.IDLE
        self.pending_name: Optional[str] = None

    def _reset(self) -> None:
        self.state = ScanState.IDLE
        self.pending_name = None

    def feed(self, line: str) -> Optional[DependencyRecord]:
        """Consume one line and return a record when a block completes."""
        line = line.rstrip("\r\n")

        block = BLOCK_START_REGEX.match(line)
        if block:
            self.pending_name = block.group(1)
            self.state = ScanState.IDLE
            return None

        dependency = DEPENDENCY_LINE_REGEX.match(line)
        if dependency:
            if self.pending_name is not None and dependency.group(1) == self.category.lockfile_token:
                self.state = ScanState.IN_MATCHING_BLOCK
            return None

        version = VERSION_LINE_REGEX.match(line)
        if version and self.state is ScanState.IN_MATCHING_BLOCK:
            record: DependencyRecord = {
                "name": self.pending_name or "",
                "category": self.category,
                "local_version": version.group(1).replace('"', ""),
            }
            self._reset()
            return record

        return None


def lockfile_path(directory: Path) -> Path:
    """Return the location of ``pubspec.lock`` inside a project directory."""
    return Path(directory) / LOCKFILE_NAME


def scan_lines(lines: Iterable[str], category: Category) -> Iterator[DependencyRecord]:
    scanner = LockfileScanner(category)
    for line in lines:
        record = scanner.feed(line)
        if record is not None:
            yield record


def parse_lockfile(path: Path, category: Category) -> Iterator[DependencyRecord]:
    """Yield the records of ``category`` found in the lockfile at ``path``.

    The existence check runs immediately; the file itself is read lazily in
    a single pass while the returned iterator is consumed.
    """
    path = Path(path)
    if not path.is_file():
        raise LockfileNotFoundError(path)
    return _iter_records(path, category)


def _iter_records(path: Path, category: Category) -> Iterator[DependencyRecord]:
    with path.open(encoding="utf-8") as handle:
        for record in scan_lines(handle, category):
            print_debug(f"Parsed {record['name']}: {record['local_version']}")
            yield record
