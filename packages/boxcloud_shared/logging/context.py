"""Box-scoped logging context.

While one reconciliation runs, the owner, box, version and provider it works
on are bound here so every log line of the run carries them.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from types import TracebackType
from typing import Mapping

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar(
    "boxcloud_log_context", default={}
)


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound for the current run."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind fields for the rest of the current context; ``None`` is skipped."""
    bound = {str(key): str(value) for key, value in values.items() if value is not None}
    if bound:
        _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **bound})


def clear_context(*keys: str) -> None:
    """Drop the named fields, or every field when no names are given."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    _LOG_CONTEXT.set(
        {key: value for key, value in _LOG_CONTEXT.get().items() if key not in keys}
    )


class log_context:
    """Bind fields for one ``with`` block and restore the previous ones after.

    Exceptions leaving the block are never touched, so SDK errors reach the
    caller as raised.
    """

    def __init__(self, values: Mapping[str, object]) -> None:
        self._values = dict(values)
        self._token: Token[dict[str, str]] | None = None

    def __enter__(self) -> None:
        self._token = _LOG_CONTEXT.set(_LOG_CONTEXT.get())
        bind_context(**self._values)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if self._token is not None:
            _LOG_CONTEXT.reset(self._token)
            self._token = None
