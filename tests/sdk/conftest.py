"""Shared fixtures for SDK tests backed by the in-memory registry."""

from __future__ import annotations

from typing import Iterator

import pytest

from packages.boxcloud_sdk import VagrantCloudClient, VagrantCloudConfig
from tests.sdk.helpers import BASE_URL, TOKEN, FakeRegistry


@pytest.fixture
def registry() -> FakeRegistry:
    """Return an empty registry requiring ``TOKEN`` for writes."""
    return FakeRegistry(token=TOKEN)


@pytest.fixture
def client(registry: FakeRegistry) -> Iterator[VagrantCloudClient]:
    """Return an authenticated client talking to ``registry``."""
    with VagrantCloudClient(
        config=VagrantCloudConfig(base_url=BASE_URL, token=TOKEN),
        transport=registry.transport(),
    ) as value:
        yield value
