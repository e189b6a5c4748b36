from __future__ import annotations

import sys
import logging
import pathlib
from typing import Optional

import typer
import structlog
from rich.console import Console
from rich.table import Table

from .config import load_config, IdcheckConfig
from .engine.checker import Checker, SCHEMES, Status
from .exceptions import ConfigError, UnknownSchemeError

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="idcheck: check-digit validator for identification numbers")

# Exit codes for `check`
_EXIT = {Status.valid: 0, Status.invalid: 1, Status.unsupported: 2}
_STYLE = {Status.valid: "green", Status.invalid: "red", Status.unsupported: "yellow"}


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"idcheck {__version__}")
        raise typer.Exit()


def _checker(ctx: typer.Context) -> Checker:
    return Checker(ctx.obj["config"])


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .idcheck.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO if verbose else logging.WARNING),
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
    )
    try:
        ctx.obj = {"config": load_config(config) if config else IdcheckConfig()}
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--config")
    if verbose:
        log.info("verbose_enabled")


@app.command()
def schemes():
    """List the known identifier schemes."""
    table = Table("Name", "Description", "Lengths", "Supported")
    for s in SCHEMES.values():
        lengths = ", ".join(str(n) for n in s.lengths) or "any"
        table.add_row(s.name, s.title, lengths, "yes" if s.supported else "no")
    console.print(table)


@app.command()
def check(
    ctx: typer.Context,
    scheme: str = typer.Argument(..., help="Scheme name (see `idcheck schemes`)"),
    value: str = typer.Argument(..., help="Identifier to validate"),
):
    """Validate a single identifier. Exit code 0 valid, 1 invalid, 2 unsupported."""
    try:
        result = _checker(ctx).check(scheme, value)
    except UnknownSchemeError as e:
        raise typer.BadParameter(str(e), param_hint="SCHEME")
    style = _STYLE[result.status]
    console.print(f"[{style}]{result.status.value}[/{style}]")
    raise typer.Exit(code=_EXIT[result.status])


@app.command()
def identify(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Identifier of unknown scheme"),
):
    """List every enabled scheme that accepts VALUE."""
    matches = _checker(ctx).identify(value)
    if not matches:
        console.print("[red]no matching scheme[/red]")
        raise typer.Exit(code=1)
    for name in matches:
        console.print(f"{name}\t{SCHEMES[name].title}")


@app.command()
def batch(
    ctx: typer.Context,
    scheme: str = typer.Argument(..., help="Scheme name applied to every line"),
    src: pathlib.Path = typer.Argument(..., exists=True, dir_okay=False, help="Text file, one identifier per line"),
    report: Optional[pathlib.Path] = typer.Option(None, "--report", help="Write HTML report to this path"),
):
    """Validate a file of identifiers. Exit code 0 only if every line is valid."""
    cfg: IdcheckConfig = ctx.obj["config"]
    try:
        result = _checker(ctx).check_path(scheme, src)
    except UnknownSchemeError as e:
        raise typer.BadParameter(str(e), param_hint="SCHEME")
    except (UnicodeDecodeError, OSError) as e:
        raise typer.BadParameter(f"cannot read {src}: {e}", param_hint="SRC")
    console.print(f"Checked {result.total} values, {result.valid} valid, {result.invalid} invalid")
    if report:
        from .reporting.html import write_report
        write_report(result, report, show_valid=cfg.report.show_valid)
        console.print(f"[green]Report written:[/green] {report}")
    if result.invalid:
        raise typer.Exit(code=1)
