"""Tiny demonstration app: greet the world, then exit after a short pause.

``greet`` is the pure helper; ``run`` is what ``python -m tiny_app`` executes.
"""

from __future__ import annotations

from .app import run
from .greeter import DEFAULT_NAME, greet
from .observability import get_logger
from .settings import AppSettings, load_settings

__all__ = [
    "AppSettings",
    "DEFAULT_NAME",
    "get_logger",
    "greet",
    "load_settings",
    "run",
]
