"""Diagnostic commands for driver resolution."""

from __future__ import annotations

import sys

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .console import console
from .logging_setup import init_logging
from .module_resolution import DirectImport
from .module_resolution import UnresolvedCapabilityError
from .module_resolution import create_module_resolver


@click.group(invoke_without_command=True)
@click.option("--log-level", default=None, help="Log level (overrides ORM_PLATFORM_LOG_LEVEL)")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Inspect which database drivers this environment can load."""
    init_logging(level=log_level)
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


@cli.command("drivers")
def list_drivers():
    """List known driver capabilities and whether each resolves."""
    resolver = create_module_resolver()

    table = Table(title="Driver Capabilities", show_header=True, header_style="bold cyan")
    table.add_column("Capability", style="green")
    table.add_column("Import", style="magenta")
    table.add_column("Status")

    for name in sorted(resolver.table):
        action = resolver.table[name]
        target = action.module if isinstance(action, DirectImport) else "[dim](fallback only)[/dim]"
        try:
            _handle, strategy = resolver.resolve_with_strategy(name)
            status = f"[green]available[/green] [dim]({strategy})[/dim]"
        except UnresolvedCapabilityError:
            status = "[dim]missing[/dim]"
        table.add_row(escape(name), target, status)

    console.print(table)
    console.print(f"[dim]Fallback root: {escape(str(resolver.fallback_root))}[/dim]")


@cli.command("resolve")
@click.argument("name")
def resolve_command(name: str):
    """Resolve a single capability and show where it came from."""
    resolver = create_module_resolver()

    try:
        handle, strategy = resolver.resolve_with_strategy(name)
    except UnresolvedCapabilityError as e:
        console.print(Panel(escape(str(e)), title="Unresolved", border_style="red", title_align="left"))
        sys.exit(1)

    location = getattr(handle, "__file__", None) or "(built-in)"
    panel_content = f"""[bold]Capability:[/bold] {escape(name)}
[bold]Module:[/bold] {escape(handle.__name__)}
[bold]Strategy:[/bold] {strategy}
[bold]Location:[/bold] {escape(str(location))}"""
    console.print(Panel(panel_content, title=f"Capability: {escape(name)}", border_style="cyan"))


if __name__ == "__main__":
    cli()
