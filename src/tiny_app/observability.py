"""Lifecycle logging for the tiny app.

Events go to the ``tiny_app`` logger, which carries only a ``NullHandler``:
stdout is reserved for the three lines the app prints, and hosts that want
the diagnostics attach their own handler. Each record exposes its structured
fields as ``record.context``.
"""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger("tiny_app")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the ``tiny_app`` logger."""

    return _LOGGER


def log_debug(message: str, **fields: Any) -> None:
    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    _emit(logging.INFO, message, fields)


def make_event(stage: str, payload: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Tag *payload* with the run stage it belongs to.

    >>> make_event('startup', {'port': 3000})
    {'stage': 'startup', 'port': 3000}
    >>> make_event('shutdown')
    {'stage': 'shutdown'}
    """

    event: dict[str, Any] = {"stage": stage}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    _LOGGER.log(level, message, extra={"context": dict(fields)})
