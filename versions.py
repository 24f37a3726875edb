"""Ordering of version strings the way ``sort -V`` orders them."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import List, Tuple

from models import VersionOrder

__all__ = ["split_release", "compare_suffixes", "compare_versions", "is_outdated"]

_RELEASE_REGEX = re.compile(r"^(\d+(?:\.\d+)*)(.*)$", flags=re.DOTALL)


def split_release(version: str) -> Tuple[List[int], str]:
    """Split ``1.2.0-dev.3`` into ``([1, 2, 0], "-dev.3")``."""
    match = _RELEASE_REGEX.match(version)
    if not match:
        return [], version
    release = [int(part) for part in match.group(1).split(".")]
    return release, match.group(2)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _char_order(char: str) -> int:
    # '~' < end of string < letters < everything else
    if char == "" or _is_digit(char):
        return 0
    if char.isalpha():
        return ord(char)
    if char == "~":
        return -1
    return ord(char) + 256


def compare_suffixes(first: str, second: str) -> int:
    """Return <0, 0 or >0 comparing two strings with version-sort rules.

    Non-digit runs are compared character by character, digit runs
    numerically.
    """
    i = j = 0
    while i < len(first) or j < len(second):
        while (i < len(first) and not _is_digit(first[i])) or (
            j < len(second) and not _is_digit(second[j])
        ):
            a = _char_order(first[i] if i < len(first) else "")
            b = _char_order(second[j] if j < len(second) else "")
            if a != b:
                return a - b
            i += 1
            j += 1

        while i < len(first) and first[i] == "0":
            i += 1
        while j < len(second) and second[j] == "0":
            j += 1

        first_diff = 0
        while i < len(first) and j < len(second) and _is_digit(first[i]) and _is_digit(second[j]):
            if not first_diff:
                first_diff = ord(first[i]) - ord(second[j])
            i += 1
            j += 1
        if i < len(first) and _is_digit(first[i]):
            return 1
        if j < len(second) and _is_digit(second[j]):
            return -1
        if first_diff:
            return first_diff
    return 0


def compare_versions(first: str, second: str) -> VersionOrder:
    """Tell whether ``first`` is equal to, older or newer than ``second``."""
    if first == second:
        return VersionOrder.EQUAL

    first_release, first_suffix = split_release(first)
    second_release, second_suffix = split_release(second)

    if first_release and second_release:
        for a, b in zip_longest(first_release, second_release, fillvalue=0):
            if a != b:
                return VersionOrder.OLDER if a < b else VersionOrder.NEWER
        result = compare_suffixes(first_suffix, second_suffix)
    else:
        result = compare_suffixes(first, second)

    if result < 0:
        return VersionOrder.OLDER
    if result > 0:
        return VersionOrder.NEWER
    return VersionOrder.EQUAL


def is_outdated(local_version: str, latest_version: str) -> bool:
    return compare_versions(local_version, latest_version) is VersionOrder.OLDER
