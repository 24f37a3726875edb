"""Shared configuration constants for the lockfile checker."""

from __future__ import annotations

from pathlib import Path
import re

DEFAULT_PATH = Path(".")
LOCKFILE_NAME = "pubspec.lock"
OUTPUT_FILE = Path("dependencies_versions.txt")

DEFAULT_REGISTRY_URL = "https://pub.dev"
REGISTRY_URL_ENV = "PUB_HOSTED_URL"
USER_AGENT = "pubspec-lock-check/1.0 (+https://pub.dev/help/api)"

# Identifier syntax accepted by pub for package names.
PACKAGE_NAME_REGEX = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

BLOCK_START_REGEX = re.compile(r"^ {2}([a-zA-Z0-9_-]+):$")
DEPENDENCY_LINE_REGEX = re.compile(r"^ {4}dependency:\s*(.*?)\s*$")
VERSION_LINE_REGEX = re.compile(r"^ {4}version:\s*(.*?)\s*$")

ROW_FORMAT = "%-50s %-15s %-15s"
COLUMN_HEADERS = ("Package", "Local version", "Latest version")
SEPARATOR = "-" * 82

_EXPORTED_NAMES = (
    "DEFAULT_PATH",
    "LOCKFILE_NAME",
    "OUTPUT_FILE",
    "DEFAULT_REGISTRY_URL",
    "REGISTRY_URL_ENV",
    "USER_AGENT",
    "PACKAGE_NAME_REGEX",
    "BLOCK_START_REGEX",
    "DEPENDENCY_LINE_REGEX",
    "VERSION_LINE_REGEX",
    "ROW_FORMAT",
    "COLUMN_HEADERS",
    "SEPARATOR",
)

__all__ = [name for name in _EXPORTED_NAMES if name in globals()]
