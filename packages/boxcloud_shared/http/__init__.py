"""Public shared HTTP API for boxcloud packages."""

from .client import HttpClient, response_text, status_error
from .errors import (
    HttpClientError,
    HttpError,
    HttpRequestError,
    HttpStatusError,
)

__all__ = [
    "HttpClient",
    "HttpClientError",
    "HttpError",
    "HttpRequestError",
    "HttpStatusError",
    "response_text",
    "status_error",
]
