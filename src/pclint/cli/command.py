"""pclint command / tools commands - inspect registered tool definitions."""

import shlex

import click

from pclint.lint import registry


@click.command()
@click.argument("tool_id")
@click.argument("path")
def command_command(tool_id: str, path: str) -> None:
    """Print the command line TOOL_ID would run to analyze PATH.

    Header files (.h, .hpp, ...) get the header argument set.
    """
    tool = registry.get(tool_id)
    if tool is None:
        known = ", ".join(t.tool_id for t in registry.all())
        raise click.ClickException(f"Unknown tool '{tool_id}'. Known tools: {known}")
    click.echo(shlex.join(tool.build_command(path)))


@click.command()
def tools_command() -> None:
    """List registered tools."""
    for tool in registry.all():
        click.echo(f"{tool.tool_id}\t{tool.name}\t{tool.executable}")
