"""Runtime configuration primitives for Vagrant Cloud clients."""

from __future__ import annotations

from dataclasses import dataclass, field
import os

from packages.boxcloud_shared.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    BoxCloudSettings,
)

TOKEN_ENV_VARS = ("VAGRANT_CLOUD_TOKEN", "ATLAS_TOKEN")


@dataclass(frozen=True, slots=True)
class VagrantCloudConfig:
    """Connection defaults for one Vagrant Cloud client."""

    base_url: str = DEFAULT_BASE_URL
    token: str | None = field(default=None, repr=False)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    follow_redirects: bool = False

    @classmethod
    def from_settings(cls, settings: BoxCloudSettings) -> VagrantCloudConfig:
        """Build one client config from resolved runtime settings."""
        api = settings.api
        token = api.token.get_secret_value() if api.token is not None else None
        return cls(
            base_url=api.base_url,
            token=resolve_token(token),
            timeout_seconds=api.timeout_seconds,
            follow_redirects=api.follow_redirects,
        )


def resolve_token(value: str | None = None) -> str | None:
    """Resolve one API token from an explicit value or the environment.

    Returns ``None`` when no token is configured; calls are then made
    unauthenticated.
    """
    if value is not None and value.strip() != "":
        return value
    for name in TOKEN_ENV_VARS:
        env_value = os.getenv(name, "").strip()
        if env_value != "":
            return env_value
    return None


def resolve_base_url(value: str | None = None) -> str:
    """Resolve the registry base URL from an explicit value or environment."""
    if value is not None and value.strip() != "":
        return value.strip().rstrip("/")
    env_value = os.getenv("BOXCLOUD_BASE_URL", "").strip()
    return env_value.rstrip("/") if env_value != "" else DEFAULT_BASE_URL


def resolve_timeout_seconds(value: float | None = None) -> float:
    """Resolve one timeout value from explicit override or environment."""
    if value is not None:
        return value
    env_value = os.getenv("BOXCLOUD_TIMEOUT_SECONDS", "").strip()
    if env_value == "":
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(env_value)
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS
