"""Latest-version lookups against the pub package registry."""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional

import requests

from console import print_debug
from constants import DEFAULT_REGISTRY_URL, USER_AGENT

__all__ = [
    "LatestVersionLookup",
    "build_session",
    "package_url",
    "extract_latest_version",
    "fetch_latest_version",
    "make_lookup",
]

LatestVersionLookup = Callable[[str], Optional[str]]


def build_session() -> requests.Session:
    """Create a `requests.Session` carrying the registry headers."""
    session = requests.Session()
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    })
    return session


def package_url(name: str, base_url: str = DEFAULT_REGISTRY_URL) -> str:
    return f"{base_url.rstrip('/')}/api/packages/{name}"


def extract_latest_version(payload: Any) -> Optional[str]:
    """Return ``latest.version`` from a package metadata document, if usable."""
    if not isinstance(payload, dict):
        return None
    latest = payload.get("latest")
    if not isinstance(latest, dict):
        return None
    version = latest.get("version")
    if version is None:
        return None
    version = str(version).strip()
    if not version or version == "null":
        return None
    return version


def fetch_latest_version(
    session: requests.Session,
    name: str,
    base_url: str = DEFAULT_REGISTRY_URL,
) -> Optional[str]:
    """Fetch the package metadata and return its latest version.

    Returns None when the request fails, the body is not JSON or the
    document has no usable ``latest.version``.
    """
    url = package_url(name, base_url)
    try:
        resp = session.get(url)
    except requests.exceptions.RequestException as exc:
        print_debug(f"Request to {url} failed: {exc}")
        return None

    print_debug(f"Response from {url} (HTTP {resp.status_code}): {resp.text}")

    try:
        payload = resp.json()
    except ValueError as exc:
        print_debug(f"Invalid JSON from {url}: {exc}")
        return None

    version = extract_latest_version(payload)
    print_debug(f"Parsed latest version: {version}")
    return version


def make_lookup(session: requests.Session, base_url: str = DEFAULT_REGISTRY_URL) -> LatestVersionLookup:
    """Bind a session and registry URL into a ``name -> version`` callable."""
    return functools.partial(fetch_latest_version, session, base_url=base_url)
