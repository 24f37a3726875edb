#!/usr/bin/env python3
"""Compare the versions locked in pubspec.lock with the latest ones on pub.dev."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Callable, Dict, List, NoReturn, Optional, Sequence

from checker import run_check
from console import console, print_error, print_info, set_verbose
from constants import DEFAULT_PATH, DEFAULT_REGISTRY_URL, OUTPUT_FILE, REGISTRY_URL_ENV
from lockfile import lockfile_path
from models import Category, InvalidChoiceError, LockfileCheckError, LockfileNotFoundError, RunConfig
from registry import build_session, make_lookup

__all__ = ["parse_args", "prompt_category", "resolve_config", "main"]

ReadInput = Callable[[str], str]

CATEGORY_FLAGS: Dict[str, Category] = {
    "transitive": Category.TRANSITIVE,
    "direct-main": Category.DIRECT_MAIN,
    "direct-dev": Category.DIRECT_DEV,
    "all": Category.ALL,
}

MENU_CHOICES: Dict[str, Category] = {
    "1": Category.TRANSITIVE,
    "2": Category.DIRECT_MAIN,
    "3": Category.DIRECT_DEV,
    "4": Category.ALL,
}


class CheckerArgumentParser(argparse.ArgumentParser):
    """Reports usage errors as a fatal error with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage()
        print_error(message)
        raise SystemExit(1)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = CheckerArgumentParser(
        description="Compare the versions of dependencies in pubspec.lock with the latest versions on pub.dev.",
        epilog="If no path is provided, pubspec.lock is searched for in the current directory.",
    )
    p.add_argument(
        "path",
        nargs="*",
        default=[],
        help="Directory containing pubspec.lock (the last one given wins).",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose mode to show debug information.")
    p.add_argument(
        "--category",
        "-c",
        choices=sorted(CATEGORY_FLAGS),
        help="Dependency type to check (prompted for when omitted).",
    )
    p.add_argument(
        "--output",
        "-o",
        default=str(OUTPUT_FILE),
        help=f"Report file (default: {OUTPUT_FILE}).",
    )
    args = p.parse_intermixed_args(argv)
    args.path = args.path[-1] if args.path else str(DEFAULT_PATH)
    return args


def prompt_category(read_input: ReadInput) -> Category:
    """Ask the operator which dependency type to check."""
    console.print("Select dependency type to filter:")
    console.print("1. Transitive")
    console.print("2. Direct main")
    console.print("3. Direct dev")
    console.print("4. All")
    try:
        choice = read_input("Enter your choice (1, 2, 3, or 4): ").strip()
    except EOFError:
        raise InvalidChoiceError("") from None
    try:
        return MENU_CHOICES[choice]
    except KeyError:
        raise InvalidChoiceError(choice) from None


def resolve_config(args: argparse.Namespace, read_input: ReadInput) -> RunConfig:
    """Build the run configuration; the lockfile is checked before prompting."""
    lock_path = lockfile_path(Path(args.path))
    if not lock_path.is_file():
        raise LockfileNotFoundError(lock_path)

    if args.category:
        category = CATEGORY_FLAGS[args.category]
    else:
        category = prompt_category(read_input)

    return {
        "lockfile_path": lock_path,
        "category_filter": category,
        "verbose": bool(args.verbose),
        "output_path": Path(args.output),
        "registry_url": os.getenv(REGISTRY_URL_ENV) or DEFAULT_REGISTRY_URL,
    }


def main(argv: Optional[Sequence[str]] = None, read_input: Optional[ReadInput] = None) -> int:
    args = parse_args(argv)

    try:
        config = resolve_config(args, read_input or console.input)
    except LockfileCheckError as exc:
        print_error(str(exc))
        return 1
    set_verbose(config["verbose"])

    session = build_session()
    try:
        summaries = run_check(config, make_lookup(session, config["registry_url"]))
    except LockfileNotFoundError as exc:
        print_error(str(exc))
        return 1
    except OSError as exc:
        print_error(f"Cannot write report to {config['output_path']}: {exc}")
        return 1
    finally:
        session.close()

    outdated: List[str] = [f"{s['category'].heading}: {s['outdated']}" for s in summaries]
    print_info(f"Outdated -> {', '.join(outdated)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
