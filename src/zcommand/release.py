"""Version bump and self-update."""

import re
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from zcommand.exceptions import UpdateError, VersionBumpError

console = Console()

BUMP_TYPES = ("patch", "minor", "major")
DIST_NAME = "z-command"

PYPROJECT_VERSION_RE = re.compile(r'^(version\s*=\s*)"([^"]*)"', re.MULTILINE)
INIT_VERSION_RE = re.compile(r'^(__version__\s*=\s*)"([^"]*)"', re.MULTILINE)


def parse_version(version: str) -> tuple[int, int, int]:
    """Parse ``major.minor.patch``; missing or non-numeric parts count as 0."""
    parts = []
    for part in version.split(".")[:3]:
        parts.append(int(part) if part.isdigit() else 0)
    while len(parts) < 3:
        parts.append(0)
    return parts[0], parts[1], parts[2]


def bump_version(current: str, bump_type: str) -> str:
    major, minor, patch = parse_version(current)
    if bump_type == "major":
        return f"{major + 1}.0.0"
    if bump_type == "minor":
        return f"{major}.{minor + 1}.0"
    return f"{major}.{minor}.{patch + 1}"


def _replace_version(path: Path, pattern: re.Pattern, new_version: str) -> bool:
    text = path.read_text(encoding="utf-8")
    updated, count = pattern.subn(rf'\g<1>"{new_version}"', text, count=1)
    if count:
        path.write_text(updated, encoding="utf-8")
    return bool(count)


def _sync_lockfile(project_dir: Path) -> None:
    if not (project_dir / "uv.lock").exists():
        return
    console.print("  [dim]✓ Syncing uv.lock...[/dim]")
    try:
        subprocess.run(
            ["uv", "lock"],
            cwd=project_dir,
            check=True,
            capture_output=True,
            text=True,
        )
        console.print("  [dim]✓ Updated uv.lock[/dim]")
    except (FileNotFoundError, subprocess.CalledProcessError):
        console.print("  [yellow]⚠ Could not sync uv.lock[/yellow]")


def bump_project(project_dir: Path, bump_type: str = "patch", dry_run: bool = False) -> str:
    """Bump the version in ``pyproject.toml`` and the package ``__version__``.

    Unknown bump types fall back to ``patch``. Returns the new version.

    Raises:
        VersionBumpError: If pyproject.toml or its version field is missing.
    """
    if bump_type not in BUMP_TYPES:
        bump_type = "patch"

    pyproject = project_dir / "pyproject.toml"
    if not pyproject.exists():
        raise VersionBumpError(f"No pyproject.toml found in {project_dir}")

    match = PYPROJECT_VERSION_RE.search(pyproject.read_text(encoding="utf-8"))
    if not match:
        raise VersionBumpError("No version field found in pyproject.toml")

    current = match.group(2)
    new_version = bump_version(current, bump_type)

    console.print("\n[cyan]📦 Version Bump[/cyan]\n")
    console.print(f"  [dim]Type: [bold]{bump_type}[/bold][/dim]")
    console.print(f"  [dim]Current: [yellow]{current}[/yellow][/dim]")
    console.print(f"  [dim]New: [green]{new_version}[/green][/dim]")

    if dry_run:
        console.print("\n[yellow]⚠️  Dry run - no changes made[/yellow]\n")
        return new_version

    _replace_version(pyproject, PYPROJECT_VERSION_RE, new_version)

    for init_file in sorted(project_dir.glob("src/*/__init__.py")):
        if _replace_version(init_file, INIT_VERSION_RE, new_version):
            console.print(f"  [dim]✓ Updated {init_file.relative_to(project_dir)} version[/dim]")

    _sync_lockfile(project_dir)

    console.print(f"\n[green]✅ Version bumped to {new_version}[/green]\n")
    console.print("[bold]Next steps:[/bold]")
    console.print("  [dim]1. git add .[/dim]")
    console.print(f'  [dim]2. git commit -m "chore: bump version to {new_version}"[/dim]')
    console.print(f"  [dim]3. git tag v{new_version}[/dim]")
    console.print("  [dim]4. git push && git push --tags[/dim]")
    console.print()

    return new_version


def run_update(run: Callable[..., subprocess.CompletedProcess] = subprocess.run) -> None:
    """Upgrade the installed distribution with pip.

    ``run`` is injectable so tests never spawn pip.

    Raises:
        UpdateError: If pip cannot be started or exits non-zero.
    """
    command = [sys.executable, "-m", "pip", "install", "--upgrade", DIST_NAME]
    console.print("[blue]Checking for updates and installing...[/blue]")
    console.print(f"[dim]Running: pip install --upgrade {DIST_NAME}[/dim]")

    try:
        result = run(command)
    except OSError as exc:
        console.print("[red]❌ Failed to start update process.[/red]")
        raise UpdateError(str(exc)) from exc

    if result.returncode != 0:
        console.print(f"[red]❌ Update failed with code {result.returncode}.[/red]")
        console.print("[yellow]Please try running manually:[/yellow]")
        console.print(f"[cyan]pip install --upgrade {DIST_NAME}[/cyan]")
        raise UpdateError(f"Update process exited with code {result.returncode}")

    console.print("[green]✅ Update successful![/green]")
    console.print("[dim]Please restart your terminal to use the new version.[/dim]")
