"""Structural comparison of desired specifications against remote state.

Optional text fields are compared three ways: ``UNSPECIFIED`` when either side
is absent, ``MATCHES`` when both are present and equal, ``DIFFERS`` otherwise.
Only ``MATCHES`` counts as agreement, so a missing value on either side
always forces an update call instead of silently skipping one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from packages.boxcloud_sdk.models import (
    BoxSpec,
    ProviderSpec,
    RemoteBox,
    RemoteProvider,
    RemoteVersion,
    VersionSpec,
)


class Outcome(Enum):
    """Result kind of one optional field comparison."""

    UNSPECIFIED = "unspecified"
    MATCHES = "matches"
    DIFFERS = "differs"


@dataclass(frozen=True, slots=True)
class FieldComparison:
    """Outcome of comparing one desired field with its remote counterpart."""

    outcome: Outcome
    remote: str | None = None

    @property
    def is_match(self) -> bool:
        return self.outcome is Outcome.MATCHES


def compare_field(desired: str | None, remote: str | None) -> FieldComparison:
    """Compare one optional desired value with the remote value."""
    if desired is None or remote is None:
        return FieldComparison(Outcome.UNSPECIFIED, remote)
    if desired == remote:
        return FieldComparison(Outcome.MATCHES, remote)
    return FieldComparison(Outcome.DIFFERS, remote)


def box_mismatches(desired: BoxSpec, remote: RemoteBox) -> list[str]:
    """Return the names of box fields that do not agree with the remote."""
    mismatches = [
        name
        for name, wanted, actual in (
            ("owner", desired.owner, remote.owner),
            ("name", desired.name, remote.name),
        )
        if wanted != actual
    ]
    if not compare_field(desired.short_description, remote.short_description).is_match:
        mismatches.append("short_description")
    if not compare_field(desired.description, remote.description_markdown).is_match:
        mismatches.append("description")
    # Privacy is a plain optional: both unset agree.
    if desired.is_private != remote.private:
        mismatches.append("is_private")
    return mismatches


def box_matches(desired: BoxSpec, remote: RemoteBox) -> bool:
    """Return whether the remote box already satisfies ``desired``."""
    return not box_mismatches(desired, remote)


def version_matches(desired: VersionSpec, remote: RemoteVersion) -> bool:
    """Return whether the remote version already satisfies ``desired``."""
    return (
        desired.version == remote.version
        and compare_field(desired.description, remote.description_markdown).is_match
    )


def provider_matches(desired: ProviderSpec, remote: RemoteProvider) -> bool:
    """Return whether the remote provider already satisfies ``desired``.

    Hosted providers carry no ``original_url`` and therefore never match.
    """
    return (
        desired.name == remote.name
        and compare_field(desired.url, remote.original_url).is_match
    )
