"""Greeting helper shared by the CLI and the ``python -m`` entry point.

Contents
--------
* :data:`DEFAULT_NAME` – subject used when no name is supplied.
* :func:`greet` – pure mapping from an optional name to a greeting string.
"""

from __future__ import annotations

from typing import Final

DEFAULT_NAME: Final[str] = "World"


def greet(name: str | None = None) -> str:
    """Return ``"Hello, <name>!"`` for *name*.

    Only omission (``None``) falls back to :data:`DEFAULT_NAME`; an empty
    string is greeted as-is. No validation or normalisation is applied.

    Examples
    --------
    >>> greet('Herit')
    'Hello, Herit!'
    >>> greet()
    'Hello, World!'
    >>> greet('')
    'Hello, !'
    """

    subject = DEFAULT_NAME if name is None else name
    return f"Hello, {subject}!"
