"""Click command exposing metadata and a backend smoke test.

Contents
--------
* :func:`cli` - root group; prints the metadata banner without a subcommand.
* :func:`info` - print the metadata banner.
* :func:`demo` - build a logger on stdout and emit one line per level.
"""

from __future__ import annotations

import sys
from typing import Callable

import click

from . import __init__conf__
from .adapters import RichConsoleLogger, StructLogger
from .application.ports import Logger
from .domain.levels import Level

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

BACKENDS: dict[str, Callable[..., Logger]] = {
    "structlog": StructLogger,
    "rich": RichConsoleLogger,
}


def parse_level(ctx: click.Context | None, param: click.Parameter | None, value: str) -> Level | int:
    """Return a :class:`Level` for names and pass integers through untouched.

    Integers are not validated so the logger's own fallback reporting can be
    observed from the shell.

    Examples
    --------
    >>> parse_level(None, None, "notice")
    <Level.NOTICE: 2>
    >>> parse_level(None, None, "99")
    99
    """

    text = value.strip()
    if text.lstrip("-").isdigit():
        return int(text)
    try:
        return Level.from_name(text)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(prog)s version %(version)s")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Structured logging facade utilities."""

    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def info() -> None:
    """Print package metadata."""

    click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--backend",
    type=click.Choice(sorted(BACKENDS), case_sensitive=False),
    default="structlog",
    show_default=True,
    envvar="LOGSHIM_BACKEND",
    help="Backend to mount.",
)
@click.option(
    "--level",
    default="debug",
    show_default=True,
    envvar="LOGSHIM_LEVEL",
    callback=parse_level,
    help="Minimum level name, or a raw number to exercise the fallback.",
)
def demo(backend: str, level: Level | int) -> None:
    """Emit one sample line per level through the chosen backend."""

    logger = BACKENDS[backend.lower()](sys.stdout, level)
    logger.info().str("backend", logger.name).msg("logger mounted")
    logger.debug().bool("verbose", True).msg("debug detail")
    logger.info().int("step", 1).int64("bytes", 4096).msg("step finished")
    logger.notice().uint64("items", 42).msgf("processed %d items", 42)
    logger.warn().str("hint", "retry later").msg("slow response")
    logger.err(RuntimeError("disk full")).str("path", "/tmp").msg("write failed")


__all__ = ["cli", "demo", "info", "parse_level"]
