"""Endpoint paths of the registry's box/version/provider hierarchy."""

from __future__ import annotations

from urllib.parse import quote

from packages.boxcloud_sdk.errors import InternalError

BOXES_PATH = "/boxes"

# Normalized away by URL resolution, which would retarget the parent resource.
DOT_SEGMENTS = frozenset({".", ".."})


def _segment(value: str, *, label: str) -> str:
    """Percent-encode one path segment, rejecting blanks and dot segments."""
    if not value or not value.strip():
        raise InternalError(f"cannot build endpoint path: {label} is empty")
    if value in DOT_SEGMENTS:
        raise InternalError(
            f"cannot build endpoint path: {label} {value!r} is a dot segment"
        )
    return quote(value, safe="")


def box_path(owner: str, name: str) -> str:
    return f"/box/{_segment(owner, label='owner')}/{_segment(name, label='box name')}"


def versions_path(owner: str, name: str) -> str:
    return f"{box_path(owner, name)}/versions"


def version_path(owner: str, name: str, version: str) -> str:
    return f"{box_path(owner, name)}/version/{_segment(version, label='version')}"


def release_path(owner: str, name: str, version: str) -> str:
    return f"{version_path(owner, name, version)}/release"


def providers_path(owner: str, name: str, version: str) -> str:
    return f"{version_path(owner, name, version)}/providers"


def provider_path(owner: str, name: str, version: str, provider: str) -> str:
    return (
        f"{version_path(owner, name, version)}"
        f"/provider/{_segment(provider, label='provider name')}"
    )
