"""Canonical logging field names for structured boxcloud logs."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"

# Remote call fields.
HTTP_METHOD = "http_method"
HTTP_URL = "http_url"
STATUS_CODE = "status_code"

# Box hierarchy fields.
BOX_OWNER = "box_owner"
BOX_NAME = "box_name"
BOX_VERSION = "box_version"
PROVIDER = "provider"
PRUNE_OTHERS = "prune_others"

# Bound once by configure_logging.
SERVICE = "service"
ENVIRONMENT = "environment"
