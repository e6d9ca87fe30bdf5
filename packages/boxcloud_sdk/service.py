"""Remote resource service used by the client and the reconciler."""

from __future__ import annotations

import logging
from typing import Any, Literal, Protocol, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from packages.boxcloud_sdk.config import VagrantCloudConfig
from packages.boxcloud_sdk.errors import (
    InternalError,
    map_request_error,
    map_status_error,
    unexpected_response,
)
from packages.boxcloud_shared.http import (
    HttpClient,
    HttpRequestError,
    response_text,
    status_error,
)
from packages.boxcloud_shared.logging import fields

logger = logging.getLogger(__name__)

Method = Literal["GET", "POST", "PUT", "DELETE"]
SUPPORTED_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE"})
SUCCESS_STATUS_CODES: frozenset[int] = frozenset({200, 201, 204})

TModel = TypeVar("TModel", bound=BaseModel)


class RemoteResourceService(Protocol):
    """Performs one call against the registry and parses the reply."""

    def call(
        self,
        method: Method,
        path: str,
        response_model: type[TModel],
        payload: dict[str, Any] | None = None,
    ) -> TModel:
        """Return the parsed reply or raise a ``VagrantCloudError``."""
        ...

    def close(self) -> None:
        """Release transport resources."""
        ...


class HttpResourceService:
    """``RemoteResourceService`` backed by the shared httpx wrapper."""

    def __init__(
        self,
        *,
        config: VagrantCloudConfig | None = None,
        transport: httpx.BaseTransport | None = None,
        http: HttpClient | None = None,
    ) -> None:
        """Create one service over an injected or config-built HTTP client."""
        self._config = VagrantCloudConfig() if config is None else config
        self._owns_http = http is None
        self._http = self._new_http(transport) if http is None else http

    def close(self) -> None:
        """Close the HTTP client when this service created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> HttpResourceService:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close the service."""
        self.close()

    def call(
        self,
        method: Method,
        path: str,
        response_model: type[TModel],
        payload: dict[str, Any] | None = None,
    ) -> TModel:
        """Issue one request and parse a success reply into ``response_model``.

        Statuses other than 200/201/204 raise ``ApiCallError``; a success reply
        that does not validate raises ``UnexpectedResponseError``.
        """
        if method not in SUPPORTED_METHODS:
            raise InternalError(f"unsupported request method: {method!r}")
        if not path.startswith("/"):
            raise InternalError(f"endpoint path must be absolute: {path!r}")

        if payload is not None:
            logger.debug("Sending payload keys: %s", sorted(payload))
        try:
            response = self._http.request(
                method, path, json=payload, raise_for_status=False
            )
        except HttpRequestError as exc:
            raise map_request_error(exc) from exc

        logger.debug(
            "Registry replied %s to %s %s",
            response.status_code,
            method,
            path,
            extra={
                fields.HTTP_METHOD: method,
                fields.HTTP_URL: str(response.request.url),
                fields.STATUS_CODE: response.status_code,
            },
        )
        if response.status_code not in SUCCESS_STATUS_CODES:
            raise map_status_error(status_error(response))

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as exc:
            body = response_text(response)
            logger.debug("Received unexpected response: %s", exc)
            raise unexpected_response(
                method=method,
                url=str(response.request.url),
                status_code=response.status_code,
                body=body,
            ) from exc

    def _new_http(self, transport: httpx.BaseTransport | None) -> HttpClient:
        headers = {"Accept": "application/json"}
        if self._config.token is not None:
            logger.debug("Passing Authorization token")
            headers["Authorization"] = f"Bearer {self._config.token}"
        return HttpClient(
            base_url=self._config.base_url,
            timeout_seconds=self._config.timeout_seconds,
            headers=headers,
            follow_redirects=self._config.follow_redirects,
            transport=transport,
        )
