"""CLI entry point for langtour.

Invoked as::

    langtour [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m langtour.cli.main

Commands
--------
list        List registered demos
run         Run one demo and print its output
run-all     Run every demo and report the results
show        Show the source of a demo module
catalog     Export the demo catalog as JSON or YAML
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from langtour.config import TourConfig
    from langtour.registry import Demo, DemoRegistry

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_config_or_exit(path: str | None) -> "TourConfig":
    """Load the YAML config at *path*, or the defaults, exiting on error."""
    from langtour.config import TourConfig
    from langtour.errors import ConfigError

    if path is None:
        return TourConfig()
    try:
        return TourConfig.from_yaml(path)
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)


def _registry() -> "DemoRegistry":
    from langtour.registry import get_default_registry

    registry = get_default_registry()
    registry.load_entrypoints()
    return registry


def _get_or_exit(name: str) -> "Demo":
    from langtour.errors import DemoNotFoundError

    try:
        return _registry().get(name)
    except DemoNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="langtour")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="YAML configuration file",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Runnable catalog of small language-feature demonstrations."""
    _configure_logging(verbose)
    ctx.obj = _load_config_or_exit(config_path)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from langtour import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]langtour[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Demos", str(len(_registry())))
    console.print(table)


# ---------------------------------------------------------------------------
# list command
# ---------------------------------------------------------------------------


@cli.command(name="list")
@click.option("--topic", default=None, help="Only list demos in this topic")
@click.option("--tag", default=None, help="Only list demos carrying this tag")
@click.pass_obj
def list_command(config: "TourConfig", topic: str | None, tag: str | None) -> None:
    """List registered demos."""
    registry = _registry()

    if topic:
        demos = registry.list_by_topic(topic)
    elif config.topics:
        wanted = {t.lower() for t in config.topics}
        demos = [d for d in registry.list_demos() if d.topic.lower() in wanted]
    else:
        demos = registry.list_demos()
    if tag:
        tag_matches = {d.name for d in registry.search_by_tag(tag)}
        demos = [d for d in demos if d.name in tag_matches]

    if not demos:
        console.print("[yellow]No demos match the given filters.[/yellow]")
        return

    table = Table(title="Demos")
    table.add_column("Name", style="bold")
    table.add_column("Topic")
    table.add_column("Title")
    table.add_column("Tags", style="dim")
    for demo in demos:
        table.add_row(demo.name, demo.topic, demo.title, ", ".join(demo.tags))
    console.print(table)


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
@click.argument("name")
@click.option("--strict", is_flag=True, default=False, help="Require exactly one output line")
@click.pass_obj
def run_command(config: "TourConfig", name: str, strict: bool) -> None:
    """Run a single demo.

    NAME is the registry name of the demo, as shown by ``langtour list``.
    """
    from langtour.errors import DemoContractError
    from langtour.runner import DemoRunner

    demo = _get_or_exit(name)
    runner = DemoRunner(strict=strict or config.strict)
    try:
        result = runner.run(demo)
    except DemoContractError as exc:
        err_console.print(f"[red]Contract error:[/red] {exc}")
        sys.exit(1)

    if not result.ok:
        err_console.print(f"[red]Demo failed:[/red] {result.output}")
        sys.exit(result.exit_code)
    click.echo(result.output)


# ---------------------------------------------------------------------------
# run-all command
# ---------------------------------------------------------------------------


@cli.command(name="run-all")
@click.option("--strict", is_flag=True, default=False, help="Require exactly one output line")
@click.pass_obj
def run_all_command(config: "TourConfig", strict: bool) -> None:
    """Run every demo and print a results table."""
    from langtour.errors import DemoContractError
    from langtour.runner import DemoResult, DemoRunner

    registry = _registry()
    demos = registry.list_demos()
    if config.topics:
        wanted = {t.lower() for t in config.topics}
        demos = [d for d in demos if d.topic.lower() in wanted]

    runner = DemoRunner(strict=strict or config.strict)
    results: list[DemoResult] = []
    for demo in demos:
        try:
            results.append(runner.run(demo))
        except DemoContractError as exc:
            results.append(DemoResult(name=demo.name, output=str(exc), exit_code=1))

    table = Table(title="Demo results", show_lines=True)
    table.add_column("Demo", style="bold")
    table.add_column("Status", min_width=6)
    table.add_column("Output")
    for result in results:
        status = "[green]OK[/green]" if result.ok else "[red]FAIL[/red]"
        table.add_row(result.name, status, result.output)
    console.print(table)

    failed = [r for r in results if not r.ok]
    console.print(
        f"\n[bold]Summary:[/bold] {len(results) - len(failed)} passed, {len(failed)} failed"
    )
    if failed:
        sys.exit(1)


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("name")
def show_command(name: str) -> None:
    """Show the source code of a demo.

    NAME is the registry name of the demo.
    """
    demo = _get_or_exit(name)
    path = demo.source_path
    if path is None:
        err_console.print(f"[red]Error:[/red] Source for {name!r} is not available")
        sys.exit(1)
    try:
        source = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)

    console.print(f"[bold]{demo.title}[/bold] [dim]({demo.module})[/dim]")
    console.print(Syntax(source, "python", line_numbers=True))


# ---------------------------------------------------------------------------
# catalog command
# ---------------------------------------------------------------------------


@cli.command(name="catalog")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default=None,
    help="Catalog output format (defaults to the configured format)",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.pass_obj
def catalog_command(config: "TourConfig", output_format: str | None, output: str | None) -> None:
    """Export the demo catalog."""
    from langtour.catalog import CatalogSerializer

    fmt = (output_format or config.output_format).lower()
    serializer = CatalogSerializer()
    registry = _registry()
    text = serializer.to_yaml(registry) if fmt == "yaml" else serializer.to_json(registry)

    if output:
        try:
            Path(output).write_text(text, encoding="utf-8")
        except OSError as exc:
            err_console.print(f"[red]Error:[/red] Cannot write {output}: {exc}")
            sys.exit(1)
        console.print(f"[green]Catalog written to[/green] {output}")
    else:
        click.echo(text)


if __name__ == "__main__":
    cli()
