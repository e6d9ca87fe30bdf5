"""Public Vagrant Cloud SDK interface."""

from packages.boxcloud_sdk.client import VagrantCloudClient
from packages.boxcloud_sdk.config import VagrantCloudConfig, resolve_token
from packages.boxcloud_sdk.equivalence import (
    FieldComparison,
    Outcome,
    box_matches,
    compare_field,
    provider_matches,
    version_matches,
)
from packages.boxcloud_sdk.errors import (
    ApiCallError,
    InternalError,
    TransportError,
    UnexpectedResponseError,
    VagrantCloudError,
    status_of,
)
from packages.boxcloud_sdk.lookup import find_provider, find_version
from packages.boxcloud_sdk.models import (
    BoxSpec,
    ProviderSpec,
    RemoteBox,
    RemoteProvider,
    RemoteVersion,
    VersionSpec,
)
from packages.boxcloud_sdk.reconcile import ensure_provider_present
from packages.boxcloud_sdk.service import HttpResourceService, RemoteResourceService

__all__ = [
    "ApiCallError",
    "BoxSpec",
    "FieldComparison",
    "HttpResourceService",
    "InternalError",
    "Outcome",
    "ProviderSpec",
    "RemoteBox",
    "RemoteProvider",
    "RemoteResourceService",
    "RemoteVersion",
    "TransportError",
    "UnexpectedResponseError",
    "VagrantCloudClient",
    "VagrantCloudConfig",
    "VagrantCloudError",
    "VersionSpec",
    "box_matches",
    "compare_field",
    "ensure_provider_present",
    "find_provider",
    "find_version",
    "provider_matches",
    "resolve_token",
    "status_of",
    "version_matches",
]
