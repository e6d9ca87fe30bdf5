"""Desired-state specifications and remote representations of boxes.

Specifications (``BoxSpec``, ``VersionSpec``, ``ProviderSpec``) are built by
callers for each call and never carry server-assigned fields. Remote
representations (``RemoteBox``, ``RemoteVersion``, ``RemoteProvider``) are
parsed from registry responses and never constructed by the SDK itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _without_unset(values: dict[str, Any]) -> dict[str, Any]:
    """Drop ``None`` entries so absent options are not sent as nulls."""
    return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True, slots=True)
class BoxSpec:
    """Desired state of one box, identified by ``(owner, name)``."""

    owner: str
    name: str
    short_description: str | None = None
    description: str | None = None
    is_private: bool | None = None

    def create_payload(self) -> dict[str, Any]:
        """Return the request body for box creation."""
        return _without_unset(
            {
                "username": self.owner,
                "name": self.name,
                "short_description": self.short_description,
                "description": self.description,
                "is_private": self.is_private,
            }
        )

    def update_payload(self) -> dict[str, Any]:
        """Return the request body for a box update.

        The owner is part of the endpoint path and cannot be changed here.
        """
        return {
            "box": _without_unset(
                {
                    "name": self.name,
                    "short_description": self.short_description,
                    "description": self.description,
                    "is_private": self.is_private,
                }
            )
        }


@dataclass(frozen=True, slots=True)
class VersionSpec:
    """Desired state of one version, identified by its label."""

    version: str
    description: str | None = None

    def payload(self) -> dict[str, Any]:
        """Return the request body for version creation or update."""
        return {
            "version": _without_unset(
                {"version": self.version, "description": self.description}
            )
        }


@dataclass(frozen=True, slots=True)
class ProviderSpec:
    """Desired state of one provider, identified by its name."""

    name: str
    url: str

    def payload(self) -> dict[str, Any]:
        """Return the request body for provider creation or update."""
        return {"provider": {"name": self.name, "url": self.url}}


class RemoteProvider(BaseModel):
    """Provider as reported by the registry."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    hosted: bool = False
    hosted_token: str | None = None
    original_url: str | None = None
    download_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class RemoteVersion(BaseModel):
    """Version as reported by the registry."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    version: str
    status: str | None = None
    description_html: str | None = None
    description_markdown: str | None = None
    number: str | None = None
    release_url: str | None = None
    revoke_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    providers: tuple[RemoteProvider, ...] = ()

    @field_validator("number", mode="before")
    @classmethod
    def _number_as_text(cls, value: object) -> object:
        """Accept numeric sequence numbers; the label stays opaque text."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class RemoteBox(BaseModel):
    """Box as reported by the registry, including every version."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    owner: str = Field(alias="username")
    name: str
    tag: str | None = None
    private: bool | None = None
    downloads: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    short_description: str | None = None
    description_markdown: str | None = None
    description_html: str | None = None
    versions: tuple[RemoteVersion, ...] = ()
    current_version: RemoteVersion | None = None
