"""Environment-backed settings for the tiny app.

The only setting is ``PORT``. It is read once at startup and kept on
:class:`AppSettings`, but nothing binds a listener to it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Mapping

from .observability import log_debug

PORT_VARIABLE: Final[str] = "PORT"
DEFAULT_PORT: Final[int] = 3000


@dataclass(frozen=True)
class AppSettings:
    """Immutable snapshot of the process configuration."""

    port: int | str = DEFAULT_PORT


def load_settings(environ: Mapping[str, str] | None = None) -> AppSettings:
    """Read ``PORT`` from *environ* (defaults to :data:`os.environ`).

    Missing or empty values fall back to :data:`DEFAULT_PORT`. Decimal digits
    become an ``int``; anything else is kept verbatim.

    Examples
    --------
    >>> load_settings({}).port
    3000
    >>> load_settings({'PORT': '8080'}).port
    8080
    >>> load_settings({'PORT': 'http'}).port
    'http'
    """

    source = os.environ if environ is None else environ
    raw = source.get(PORT_VARIABLE, "")
    settings = AppSettings(port=_coerce_port(raw) if raw else DEFAULT_PORT)
    log_debug("settings_loaded", stage="settings", port=settings.port, from_env=bool(raw))
    return settings


def _coerce_port(value: str) -> int | str:
    """Return *value* as ``int`` when it is a plain decimal, else unchanged.

    >>> _coerce_port('3001'), _coerce_port(' 80 '), _coerce_port('-1')
    (3001, 80, '-1')
    """

    stripped = value.strip()
    if stripped.isascii() and stripped.isdigit():
        return int(stripped)
    return value
