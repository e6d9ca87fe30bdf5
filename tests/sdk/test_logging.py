"""Logging behaviour of SDK calls."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from packages.boxcloud_sdk import (
    BoxSpec,
    ProviderSpec,
    VagrantCloudClient,
    VagrantCloudConfig,
    VersionSpec,
)
from packages.boxcloud_shared.config import load_settings
from packages.boxcloud_shared.logging import JsonFormatter, clear_context
from tests.sdk.helpers import BASE_URL, TOKEN, FakeRegistry


def test_reconciliation_logs_decisions_but_never_the_token(
    caplog: pytest.LogCaptureFixture,
) -> None:
    registry = FakeRegistry(token=TOKEN)
    caplog.set_level(logging.DEBUG, logger="packages")

    with VagrantCloudClient(
        config=VagrantCloudConfig(base_url=BASE_URL, token=TOKEN),
        transport=registry.transport(),
    ) as client:
        client.ensure_provider_present(
            BoxSpec(owner="me", name="logged_box"),
            VersionSpec(version="1.0", description="first"),
            ProviderSpec(name="libvirt", url="https://foo.bar.baz/1.0.box"),
        )

    messages = [record.getMessage() for record in caplog.records]
    assert "Box me/logged_box not found, creating it" in messages
    assert "Creating version 1.0" in messages
    assert "Creating provider libvirt" in messages
    assert "Releasing version 1.0" in messages
    assert all(TOKEN not in message for message in messages)


def test_each_registry_call_logs_method_url_and_status(
    caplog: pytest.LogCaptureFixture,
) -> None:
    registry = FakeRegistry(token=TOKEN)
    caplog.set_level(logging.DEBUG, logger="packages.boxcloud_sdk.service")

    with VagrantCloudClient(
        config=VagrantCloudConfig(base_url=BASE_URL, token=TOKEN),
        transport=registry.transport(),
    ) as client:
        client.create_box(BoxSpec(owner="me", name="logged_box"))

    calls = [record for record in caplog.records if hasattr(record, "status_code")]
    assert len(calls) == 1
    assert calls[0].http_method == "POST"
    assert calls[0].http_url == f"{BASE_URL}/boxes"
    assert calls[0].status_code == 200


def test_from_settings_configures_logging_and_connection(tmp_path: Path) -> None:
    registry = FakeRegistry(token=TOKEN)
    settings = load_settings(
        cli_params={
            "api": {"base_url": BASE_URL, "token": TOKEN},
            "logging": {"level": "DEBUG", "json_output": True, "environment": "ci"},
        },
        config_path=tmp_path / "missing.yaml",
    )
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        with VagrantCloudClient.from_settings(
            settings, transport=registry.transport()
        ) as client:
            created = client.create_box(BoxSpec(owner="me", name="configured_box"))

        assert created.name == "configured_box"
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        clear_context()
