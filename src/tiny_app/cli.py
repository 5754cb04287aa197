"""Command line surface of ``tiny_app``.

Running ``tiny_app`` (or ``python -m tiny_app``) with no subcommand performs
the app run: two lines, a two second pause, the completion line, exit 0.
``run --delay`` shortens or lengthens the pause and ``hello`` prints a single
greeting. :func:`main` hands the group to ``lib_cli_exit_tools`` so faults
raised during a run become a short message on stderr and a non-zero status.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .app import EXIT_DELAY_SECONDS
from .app import run as _run_app
from .greeter import greet

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _installed_version() -> str:
    try:
        return metadata.version("tiny_app")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Print a greeting and exit after a short delay",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(version=_installed_version(), prog_name="tiny_app")
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full traceback when the run fails",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Record the traceback preference; run the app when no subcommand follows."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if ctx.invoked_subcommand is None:
        ctx.exit(_run_app())


@cli.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--delay",
    type=click.FloatRange(min=0),
    default=EXIT_DELAY_SECONDS,
    show_default=True,
    help="Seconds between the greeting and the completion line",
)
@click.pass_context
def cli_run(ctx: click.Context, delay: float) -> None:
    """Start, greet the world, and exit after DELAY seconds."""

    ctx.exit(_run_app(delay=delay))


@cli.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
def cli_hello(name: Optional[str]) -> None:
    """Print the greeting for NAME, or for World when NAME is omitted.

    >>> from click.testing import CliRunner
    >>> CliRunner().invoke(cli, ["hello", "Herit"]).output.strip()
    'Hello, Herit!'
    """

    click.echo(greet(name))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit status instead of raising.

    Any exception escaping the group is printed by ``lib_cli_exit_tools``
    (trimmed unless ``--traceback`` was given) and mapped to an exit code.
    The global traceback flags are put back afterwards unless
    *restore_traceback* is false.
    """

    saved = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="tiny_app",
            )
        except BaseException as exc:  # noqa: BLE001 - rendered by lib_cli_exit_tools
            verbose = lib_cli_exit_tools.config.traceback
            lib_cli_exit_tools.print_exception_message(
                trace_back=verbose,
                length_limit=_TRACEBACK_VERBOSE_LIMIT if verbose else _TRACEBACK_SUMMARY_LIMIT,
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = saved


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
