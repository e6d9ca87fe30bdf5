"""Error models and HTTP failure mapping for Vagrant Cloud calls.

Every failure surfaced by the SDK derives from ``VagrantCloudError``:

- ``TransportError``: the call never completed (DNS, connect, TLS, timeout).
- ``ApiCallError``: the registry answered with a non-success status. The
  ``errors`` tuple carries the human-readable messages from the response
  body; ``message`` joins them with ``", "``.
- ``UnexpectedResponseError``: a success status with a body that is not the
  expected JSON shape. The raw body is kept for diagnostics.
- ``InternalError``: the SDK was handed something it cannot turn into a
  request. Seeing this indicates a bug in the caller or in the SDK.

Nothing here retries. ``status_of`` extracts the HTTP status of an API call
failure so callers can branch on specific codes::

    try:
        client.read_box(box)
    except VagrantCloudError as exc:
        if status_of(exc) == 404:
            ...
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from http import HTTPStatus

from packages.boxcloud_shared.http import HttpRequestError, HttpStatusError


@dataclass(eq=False)
class VagrantCloudError(Exception):
    """Base error type for Vagrant Cloud SDK failures."""

    message: str

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self.message


@dataclass(eq=False)
class TransportError(VagrantCloudError):
    """Communication with the registry failed for an external reason."""

    method: str
    url: str
    cause: Exception | None = None


@dataclass(eq=False)
class ApiCallError(VagrantCloudError):
    """The registry reported an error status."""

    method: str
    url: str
    status_code: int
    errors: tuple[str, ...] = ()

    @property
    def is_not_found(self) -> bool:
        """Return whether the registry reported the resource as missing."""
        return self.status_code == HTTPStatus.NOT_FOUND


@dataclass(eq=False)
class UnexpectedResponseError(VagrantCloudError):
    """The registry replied with data of an unexpected shape."""

    method: str
    url: str
    status_code: int
    response_body: str = ""


@dataclass(eq=False)
class InternalError(VagrantCloudError):
    """The SDK could not build a request from its inputs."""


def status_of(error: BaseException) -> int | None:
    """Return the HTTP status of an API call failure, otherwise ``None``."""
    if isinstance(error, ApiCallError):
        return error.status_code
    return None


def parse_error_messages(body: str) -> tuple[str, ...]:
    """Extract the ``errors`` list from a registry error payload.

    The registry answers failures with ``{"errors": [...], "success": false}``.
    Anything else yields no messages.
    """
    try:
        payload = json.loads(body)
    except ValueError:
        return ()
    if not isinstance(payload, dict):
        return ()
    errors = payload.get("errors")
    if not isinstance(errors, list):
        return ()
    return tuple(str(item) for item in errors)


def map_status_error(error: HttpStatusError) -> ApiCallError:
    """Map one shared-layer status error into an ``ApiCallError``."""
    messages = parse_error_messages(error.response_body)
    message = f"Request failed with status {error.status_code}"
    if messages:
        message = f"{message}: {', '.join(messages)}"
    return ApiCallError(
        message=message,
        method=error.method,
        url=error.url,
        status_code=error.status_code,
        errors=messages,
    )


def map_request_error(error: HttpRequestError) -> TransportError:
    """Map one shared-layer transport error into a ``TransportError``."""
    detail = str(error.cause) if error.cause is not None else error.message
    return TransportError(
        message=f"{error.method} {error.url} failed: {detail}",
        method=error.method,
        url=error.url,
        cause=error.cause,
    )


def unexpected_response(
    *, method: str, url: str, status_code: int, body: str
) -> UnexpectedResponseError:
    """Build an unexpected-response error carrying the raw body."""
    return UnexpectedResponseError(
        message=f"Unexpected response from the API: {body}",
        method=method,
        url=url,
        status_code=status_code,
        response_body=body,
    )
