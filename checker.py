"""Core pipeline: lockfile records -> registry lookups -> report sections."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from jinja2 import Environment

from console import print_debug, print_error, print_success, print_warning
from constants import PACKAGE_NAME_REGEX
from lockfile import parse_lockfile
from models import (
    Category,
    CheckSummary,
    DependencyRecord,
    OutdatedEntry,
    RegistryLookup,
    RunConfig,
    VersionOrder,
    categories_for,
)
from registry import LatestVersionLookup
from report import ReportWriter
from versions import compare_versions

__all__ = ["check_record", "check_category", "run_check"]


def check_record(record: DependencyRecord, lookup: LatestVersionLookup) -> Tuple[Optional[OutdatedEntry], bool]:
    """Check one dependency against the registry.

    Returns ``(entry, skipped)`` where ``entry`` is set only when the local
    version is older than the latest one.
    """
    name = record["name"]
    local_version = record["local_version"]

    if not PACKAGE_NAME_REGEX.match(name):
        print_error(f"Invalid package name: {name}")
        return None, True
    if not local_version:
        print_error(f"Skipping invalid line: {name}: {local_version}")
        return None, True

    print_debug(f"Package: {name}, Local version: {local_version}")
    result: RegistryLookup = {"name": name, "latest_version": lookup(name)}
    latest_version = result["latest_version"]

    if not latest_version:
        print_warning(f"Failed to fetch the latest version for {name}, skipping...")
        return None, True

    if compare_versions(local_version, latest_version) is VersionOrder.OLDER:
        return {
            "name": name,
            "local_version": local_version,
            "latest_version": latest_version,
        }, False
    return None, False


def check_category(
    records: Iterable[DependencyRecord],
    lookup: LatestVersionLookup,
    category: Category,
) -> Tuple[List[OutdatedEntry], CheckSummary]:
    """Run `check_record` over every record, keeping the outdated ones."""
    outdated: List[OutdatedEntry] = []
    summary: CheckSummary = {"category": category, "checked": 0, "outdated": 0, "skipped": 0}
    for record in records:
        summary["checked"] += 1
        entry, skipped = check_record(record, lookup)
        if skipped:
            summary["skipped"] += 1
        elif entry is not None:
            outdated.append(entry)
    summary["outdated"] = len(outdated)
    return outdated, summary


def run_check(
    config: RunConfig,
    lookup: LatestVersionLookup,
    *,
    env: Optional[Environment] = None,
) -> List[CheckSummary]:
    """Write one report section per requested category and return the counters."""
    categories = categories_for(config["category_filter"])
    # Fail before truncating the report when the lockfile is missing.
    first_records = parse_lockfile(config["lockfile_path"], categories[0])

    summaries: List[CheckSummary] = []
    with ReportWriter(config["output_path"], env=env) as writer:
        for index, category in enumerate(categories):
            print_success(f"Processing dependencies of type: {category.lockfile_token}, please wait...")
            records = first_records if index == 0 else parse_lockfile(config["lockfile_path"], category)
            outdated, summary = check_category(records, lookup, category)
            writer.write_section(category.heading, outdated)
            summaries.append(summary)
            print_debug(
                f"{category.heading}: {summary['checked']} checked, "
                f"{summary['outdated']} outdated, {summary['skipped']} skipped"
            )

    print_success(f"Filtered dependency versions have been written to {config['output_path']}")
    return summaries
