"""Synchronous Vagrant Cloud client.

All access to the registry goes through ``VagrantCloudClient``. The CRUD
methods map one-to-one onto registry endpoints and return the parsed reply;
``ensure_provider_present`` builds a usable box out of them in one call::

    with VagrantCloudClient.from_token("my-token") as client:
        client.ensure_provider_present(
            BoxSpec(owner="me", name="awesome_box"),
            VersionSpec(version="1.2.3", description="Release from today!"),
            ProviderSpec(name="libvirt", url="https://example.org/awesome.box"),
        )

Without a token calls are made unauthenticated; the registry rejects those
that need authentication with an ``ApiCallError``.
"""

from __future__ import annotations

import httpx

from packages.boxcloud_sdk import endpoints, reconcile
from packages.boxcloud_sdk.config import (
    VagrantCloudConfig,
    resolve_base_url,
    resolve_timeout_seconds,
    resolve_token,
)
from packages.boxcloud_sdk.models import (
    BoxSpec,
    ProviderSpec,
    RemoteBox,
    RemoteProvider,
    RemoteVersion,
    VersionSpec,
)
from packages.boxcloud_sdk.service import HttpResourceService, RemoteResourceService
from packages.boxcloud_shared.config import BoxCloudSettings, load_settings
from packages.boxcloud_shared.logging import configure_logging


class VagrantCloudClient:
    """Thin client for box, version and provider operations."""

    def __init__(
        self,
        *,
        config: VagrantCloudConfig | None = None,
        service: RemoteResourceService | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create one client with an injected service or a config-built one."""
        self._config = VagrantCloudConfig() if config is None else config
        self._owns_service = service is None
        self._service: RemoteResourceService = (
            HttpResourceService(config=self._config, transport=transport)
            if service is None
            else service
        )

    @classmethod
    def from_token(
        cls,
        token: str | None = None,
        *,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> VagrantCloudClient:
        """Create one client, falling back to environment for unset fields."""
        return cls(
            config=VagrantCloudConfig(
                base_url=resolve_base_url(base_url),
                token=resolve_token(token),
                timeout_seconds=resolve_timeout_seconds(timeout_seconds),
            ),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: BoxCloudSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> VagrantCloudClient:
        """Create one client for an application and set up its logging.

        ``settings`` defaults to ``load_settings()``. Root logging is
        configured from ``settings.logging`` before the client is built.
        """
        settings = load_settings() if settings is None else settings
        configure_logging(settings.logging)
        return cls(config=VagrantCloudConfig.from_settings(settings), transport=transport)

    def close(self) -> None:
        """Close the underlying service when this client created it."""
        if self._owns_service:
            self._service.close()

    def __enter__(self) -> VagrantCloudClient:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close the client."""
        self.close()

    def create_box(self, box: BoxSpec) -> RemoteBox:
        """Create ``box`` under its owner; the box starts with no versions."""
        return self._service.call(
            "POST", endpoints.BOXES_PATH, RemoteBox, box.create_payload()
        )

    def read_box(self, box: BoxSpec) -> RemoteBox:
        """Return ``box`` with all its versions and their providers."""
        return self._service.call("GET", endpoints.box_path(box.owner, box.name), RemoteBox)

    def update_box(self, box: BoxSpec) -> RemoteBox:
        """Update the descriptive and privacy fields of ``box``."""
        return self._service.call(
            "PUT",
            endpoints.box_path(box.owner, box.name),
            RemoteBox,
            box.update_payload(),
        )

    def delete_box(self, box: BoxSpec) -> RemoteBox:
        """Delete ``box`` with every version and provider it holds."""
        return self._service.call(
            "DELETE", endpoints.box_path(box.owner, box.name), RemoteBox
        )

    def create_version(self, box: BoxSpec, version: VersionSpec) -> RemoteVersion:
        """Add an unreleased ``version`` to ``box``."""
        return self._service.call(
            "POST",
            endpoints.versions_path(box.owner, box.name),
            RemoteVersion,
            version.payload(),
        )

    def read_version(self, box: BoxSpec, version: VersionSpec) -> RemoteVersion:
        """Return one version of ``box`` with its providers."""
        return self._service.call(
            "GET",
            endpoints.version_path(box.owner, box.name, version.version),
            RemoteVersion,
        )

    def update_version(self, box: BoxSpec, version: VersionSpec) -> RemoteVersion:
        """Update the description of an existing ``version``."""
        return self._service.call(
            "PUT",
            endpoints.version_path(box.owner, box.name, version.version),
            RemoteVersion,
            version.payload(),
        )

    def delete_version(self, box: BoxSpec, version: VersionSpec) -> RemoteVersion:
        """Delete ``version`` together with its providers."""
        return self._service.call(
            "DELETE",
            endpoints.version_path(box.owner, box.name, version.version),
            RemoteVersion,
        )

    def release_version(self, box: BoxSpec, version: VersionSpec) -> RemoteVersion:
        """Mark ``version`` as released so it becomes downloadable."""
        return self._service.call(
            "PUT",
            endpoints.release_path(box.owner, box.name, version.version),
            RemoteVersion,
        )

    def create_provider(
        self, box: BoxSpec, version: VersionSpec, provider: ProviderSpec
    ) -> RemoteProvider:
        """Create ``provider`` in an existing ``version`` of an existing ``box``."""
        return self._service.call(
            "POST",
            endpoints.providers_path(box.owner, box.name, version.version),
            RemoteProvider,
            provider.payload(),
        )

    def update_provider(
        self, box: BoxSpec, version: VersionSpec, provider: ProviderSpec
    ) -> RemoteProvider:
        """Point an existing ``provider`` at its new URL."""
        return self._service.call(
            "PUT",
            endpoints.provider_path(box.owner, box.name, version.version, provider.name),
            RemoteProvider,
            provider.payload(),
        )

    def delete_provider(
        self, box: BoxSpec, version: VersionSpec, provider: ProviderSpec
    ) -> RemoteProvider:
        """Delete ``provider`` from ``version``; the version itself is kept."""
        return self._service.call(
            "DELETE",
            endpoints.provider_path(box.owner, box.name, version.version, provider.name),
            RemoteProvider,
        )

    def ensure_provider_present(
        self,
        box: BoxSpec,
        version: VersionSpec,
        provider: ProviderSpec,
        *,
        prune_others: bool = False,
    ) -> RemoteBox:
        """Create or update everything needed for ``provider`` to be released.

        See ``packages.boxcloud_sdk.reconcile.ensure_provider_present``.
        """
        return reconcile.ensure_provider_present(
            self, box, version, provider, prune_others=prune_others
        )
