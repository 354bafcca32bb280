"""pclint parse command - turn captured lint output into diagnostics."""

import json
from pathlib import Path
from typing import Any, TextIO

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pclint.config.loader import load_config
from pclint.core.errors import ConfigError, MalformedLineError
from pclint.core.logging import configure_logging, get_logger
from pclint.lint.models import Diagnostic, Severity
from pclint.lint.parsers import parse_output

_SEVERITY_STYLE = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}


def _split_codes(value: str) -> list[str]:
    return [c.strip() for c in value.split(",") if c.strip()]


def _make_table(diagnostics: list[Diagnostic]) -> Table:
    table = Table(show_header=True, box=None, padding=(0, 1), pad_edge=False)
    table.add_column("File")
    table.add_column("Line", justify="right")
    table.add_column("Col", justify="right")
    table.add_column("Severity")
    table.add_column("Code", justify="right")
    table.add_column("Message")
    for d in diagnostics:
        style = _SEVERITY_STYLE[d.severity]
        table.add_row(
            escape(d.file_name),
            str(d.line),
            str(d.column) if d.column else "",
            f"[{style}]{d.severity.value}[/{style}]",
            d.code,
            escape(d.message),
        )
    return table


@click.command()
@click.argument("source", default="-", type=click.File("r"))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--location-only-codes",
    default=None,
    help="Comma-separated codes folded into the preceding diagnostic (default: 830,831)",
)
@click.option(
    "--config-dir",
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory holding .pclint.yaml (default: current directory)",
)
@click.pass_context
def parse_command(
    ctx: click.Context,
    source: TextIO,
    as_json: bool,
    location_only_codes: str | None,
    config_dir: Path | None,
) -> None:
    """Parse captured PC-lint output.

    SOURCE is a file holding the tool's combined output (default: stdin).
    """
    overrides: dict[str, Any] = {}
    if location_only_codes is not None:
        overrides["parser"] = {"location_only_codes": _split_codes(location_only_codes)}

    try:
        config = load_config(config_dir, **overrides)
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    configure_logging(config.logging, verbose=bool((ctx.obj or {}).get("verbose")))

    result = parse_output(
        source.read(),
        location_only_codes=frozenset(config.parser.location_only_codes),
    )
    try:
        diagnostics = result.raise_for_error()
    except MalformedLineError as e:
        if as_json:
            click.echo(json.dumps(e.to_dict()), err=True)
            ctx.exit(1)
        raise click.ClickException(e.message) from e

    get_logger(__name__).debug("pclint_parse_complete", diagnostics=len(diagnostics))

    if as_json:
        click.echo(json.dumps([d.to_dict() for d in diagnostics], indent=2))
        return

    console = Console()
    if not diagnostics:
        console.print("[green]No diagnostics[/green]")
        return
    console.print(_make_table(diagnostics))
    noun = "diagnostic" if len(diagnostics) == 1 else "diagnostics"
    console.print(f"{len(diagnostics)} {noun}")
