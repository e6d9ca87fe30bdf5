"""Shared helpers for integration tests."""

from __future__ import annotations

import os


def real_registry_tests_enabled() -> bool:
    """Return True when live registry integration tests are explicitly enabled."""
    raw = os.getenv("BOXCLOUD_RUN_INTEGRATION_REAL", "").strip().lower()
    return raw in {"1", "true", "yes", "on"}


def live_box_owner() -> str:
    """Return the account that owns boxes created by live tests."""
    return os.getenv("BOXCLOUD_LIVE_OWNER", "").strip()
