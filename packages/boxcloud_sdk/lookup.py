"""Key lookups inside remote box collections."""

from __future__ import annotations

from typing import Sequence

from packages.boxcloud_sdk.models import RemoteProvider, RemoteVersion


def find_version(versions: Sequence[RemoteVersion], label: str) -> int | None:
    """Return the index of the version labelled ``label``, if any."""
    for index, version in enumerate(versions):
        if version.version == label:
            return index
    return None


def find_provider(providers: Sequence[RemoteProvider], name: str) -> int | None:
    """Return the index of the provider named ``name``, if any."""
    for index, provider in enumerate(providers):
        if provider.name == name:
            return index
    return None
