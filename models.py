"""Data structures used across the application."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional, TypedDict


class Category(str, Enum):
    """Dependency category as written in ``pubspec.lock``, plus ``all``."""

    TRANSITIVE = "transitive"
    DIRECT_MAIN = "direct main"
    DIRECT_DEV = "direct dev"
    ALL = "all"

    @property
    def lockfile_token(self) -> str:
        """Value found after ``dependency:``; multi-word values are quoted."""
        if " " in self.value:
            return f'"{self.value}"'
        return self.value

    @property
    def heading(self) -> str:
        return f"{self.value.title()} Dependencies"


REPORT_ORDER: List[Category] = [
    Category.DIRECT_MAIN,
    Category.DIRECT_DEV,
    Category.TRANSITIVE,
]


def categories_for(category_filter: Category) -> List[Category]:
    """Expand a category filter into the categories to report, in order."""
    if category_filter is Category.ALL:
        return list(REPORT_ORDER)
    return [category_filter]


class VersionOrder(Enum):
    """Relation of a first version to a second one."""

    EQUAL = "equal"
    OLDER = "older"
    NEWER = "newer"


class DependencyRecord(TypedDict):
    """A package read from the lockfile for the requested category."""

    name: str
    category: Category
    local_version: str


class RegistryLookup(TypedDict):
    name: str
    latest_version: Optional[str]


class OutdatedEntry(TypedDict):
    """A report row: the local version is older than the latest one."""

    name: str
    local_version: str
    latest_version: str


class CheckSummary(TypedDict):
    """Counters for one processed category."""

    category: Category
    checked: int
    outdated: int
    skipped: int


class RunConfig(TypedDict):
    """Settings resolved once from CLI flags, environment and prompt."""

    lockfile_path: Path
    category_filter: Category
    verbose: bool
    output_path: Path
    registry_url: str


class LockfileCheckError(Exception):
    """Base class for fatal errors that abort the run."""


class LockfileNotFoundError(LockfileCheckError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"pubspec.lock file not found at {path}!")
        self.path = path


class InvalidChoiceError(LockfileCheckError):
    def __init__(self, choice: str) -> None:
        super().__init__(
            f"Invalid choice {choice!r}. Please run the script again and select 1, 2, 3, or 4."
        )
        self.choice = choice


__all__ = [
    "Category",
    "REPORT_ORDER",
    "categories_for",
    "VersionOrder",
    "DependencyRecord",
    "RegistryLookup",
    "OutdatedEntry",
    "CheckSummary",
    "RunConfig",
    "LockfileCheckError",
    "LockfileNotFoundError",
    "InvalidChoiceError",
]
