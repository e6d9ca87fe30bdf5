"""Public API for shared boxcloud configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    ApiSettings,
    BoxCloudSettings,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_TIMEOUT_SECONDS",
    "ApiSettings",
    "BoxCloudSettings",
    "LoggingSettings",
    "load_settings",
]
