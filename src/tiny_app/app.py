"""Process entry point: announce, greet, then exit after a fixed delay.

The delayed exit is a single one-shot task on a :class:`sched.scheduler`.
Nothing repeats and nothing runs concurrently; the only suspension point is
the wait before the completion line.
"""

from __future__ import annotations

import sched
import time
from typing import Callable, Final

import rich_click as click

from .greeter import DEFAULT_NAME, greet
from .observability import log_debug, log_info, make_event
from .settings import AppSettings, load_settings

STARTUP_MESSAGE: Final[str] = "Starting tiny app..."
COMPLETION_MESSAGE: Final[str] = "App run complete - exiting."
EXIT_DELAY_SECONDS: Final[float] = 2.0
EXIT_SUCCESS: Final[int] = 0


def run(
    settings: AppSettings | None = None,
    *,
    delay: float = EXIT_DELAY_SECONDS,
    echo: Callable[[str], None] = click.echo,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Print the startup and greeting lines, wait *delay* seconds, then finish.

    Parameters
    ----------
    settings:
        Preloaded settings; read from the environment when omitted. The port
        is recorded in the startup event only.
    delay:
        Seconds before the completion task fires.
    echo:
        Line writer, :func:`click.echo` by default.
    clock, sleep:
        Time source and delay function driving the scheduler.

    Returns
    -------
    int
        Exit status produced by the deferred completion task.
    """

    active = settings if settings is not None else load_settings()
    log_info("app_started", **make_event("startup", {"port": active.port}))
    echo(STARTUP_MESSAGE)

    echo(greet(DEFAULT_NAME))
    log_debug("greeting_emitted", **make_event("greeting", {"name": DEFAULT_NAME}))

    outcome: list[int] = []
    scheduler = sched.scheduler(clock, sleep)
    scheduler.enter(delay, 1, _complete, argument=(echo, outcome))
    log_debug("exit_scheduled", **make_event("shutdown", {"delay": delay}))
    scheduler.run()
    return outcome[0]


def _complete(echo: Callable[[str], None], outcome: list[int]) -> None:
    """Deferred task: print the completion line and record the exit status."""

    echo(COMPLETION_MESSAGE)
    outcome.append(EXIT_SUCCESS)
    log_info("app_completed", **make_event("shutdown", {"exit_code": EXIT_SUCCESS}))
