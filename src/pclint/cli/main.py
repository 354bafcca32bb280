"""pclint CLI - pclint command."""

import click

from pclint.cli.command import command_command, tools_command
from pclint.cli.parse import parse_command
from pclint.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="pclint")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """pclint - structured diagnostics from PC-lint / FlexeLint output."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(verbose=verbose)


cli.add_command(parse_command, name="parse")
cli.add_command(command_command, name="command")
cli.add_command(tools_command, name="tools")


if __name__ == "__main__":
    cli()
