"""z-command CLI - install AI coding assistant skills and agents."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from zcommand import __version__
from zcommand.exceptions import ZCommandError
from zcommand.platforms import ALL_TARGET, PLATFORMS

app = typer.Typer(
    name="z-command",
    help="Install curated AI coding assistant skills and agents for your project.",
    no_args_is_help=True,
)

console = Console()

TARGET_CHOICES = ", ".join([*PLATFORMS, ALL_TARGET])


def version_callback(value: bool) -> None:
    if value:
        console.print(f"z-command {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Z-Command - skills and agents for Copilot, Claude, Cursor and friends."""


@app.command("init")
def init(
    skills: Annotated[bool, typer.Option("--skills", "-s", help="Install skills only")] = False,
    agents: Annotated[bool, typer.Option("--agents", "-a", help="Install agents only")] = False,
    global_install: Annotated[
        bool, typer.Option("--global", "-g", help="Install to user home directory")
    ] = False,
    category: Annotated[
        Optional[str], typer.Option("--category", "-c", help="Install specific category only")
    ] = None,
    target: Annotated[
        Optional[str],
        typer.Option("--target", "-t", help=f"Target platform: {TARGET_CHOICES} (default: all)"),
    ] = None,
) -> None:
    """Initialize skills and agents in current project."""
    from zcommand.install.models import InitOptions
    from zcommand.install.orchestrator import init_command

    options = InitOptions(
        target=target,
        global_install=global_install,
        skills=skills,
        agents=agents,
        category=category,
    )
    try:
        init_command(options)
    except ZCommandError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)


@app.command("list")
def list_templates(
    skills: Annotated[bool, typer.Option("--skills", "-s", help="List skills only")] = False,
    agents: Annotated[bool, typer.Option("--agents", "-a", help="List agents only")] = False,
) -> None:
    """List available skills and agents."""
    from zcommand.templates.catalog import list_agent_templates, list_skill_templates
    from zcommand.templates.source import resolve_templates_dir

    try:
        templates_dir = resolve_templates_dir()
    except ZCommandError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)

    console.print("\n[cyan]📋 Available Templates[/cyan]\n")

    sections = []
    if not agents or skills:
        sections.append(("Skills", list_skill_templates(templates_dir)))
    if not skills or agents:
        sections.append(("Agents", list_agent_templates(templates_dir)))

    for title, entries in sections:
        if entries is None:
            console.print(f"[yellow]No {title.lower()} found[/yellow]\n")
            continue

        table = Table(title=title)
        table.add_column("Name", style="green")
        table.add_column("Description", style="dim")
        for entry in entries:
            table.add_row(entry.name, entry.description)
        console.print(table)


@app.command("bump")
def bump(
    bump_type: Annotated[
        str, typer.Argument(help="Version part to bump: patch, minor or major")
    ] = "patch",
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Show the new version without writing it")
    ] = False,
) -> None:
    """Bump the project version (run from the project root)."""
    from zcommand.release import bump_project

    try:
        bump_project(Path.cwd(), bump_type, dry_run=dry_run)
    except ZCommandError as exc:
        console.print(f"[red]❌ {exc}[/red]")
        raise typer.Exit(1)


@app.command("update")
def update() -> None:
    """Update z-command to the latest version."""
    from zcommand.release import run_update

    try:
        run_update()
    except ZCommandError:
        raise typer.Exit(1)


@app.command("bundle")
def bundle(
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Archive path (default: package templates.zip)")
    ] = None,
) -> None:
    """Bundle the local templates directory into templates.zip."""
    from zcommand.templates.source import bundle_templates

    console.print("[cyan]📦 Bundling templates...[/cyan]")
    try:
        path = bundle_templates(output_zip=output)
    except ZCommandError as exc:
        console.print(f"[red]❌ {exc}[/red]")
        raise typer.Exit(1)

    size_kb = path.stat().st_size / 1024
    console.print("[green]✅ Templates bundled successfully![/green]")
    console.print(f"[dim]   Size: {size_kb:.2f} KB[/dim]")
    console.print(f"[dim]   Path: {path}[/dim]")
