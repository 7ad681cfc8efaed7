"""Install skills and agents for every selected platform."""

from pathlib import Path

from rich.console import Console

from zcommand.config import GIT_EXCLUDE_ENTRIES
from zcommand.install.agents import install_agents
from zcommand.install.models import InitOptions, InstallResult
from zcommand.install.skills import install_skills
from zcommand.platforms import PlatformConfig, get_target_platforms
from zcommand.templates.source import resolve_templates_dir

console = Console()


def resolve_target_base(
    platform: PlatformConfig, is_global: bool, cwd: Path, home: Path
) -> Path:
    if is_global:
        return home / platform.global_dir
    return cwd / platform.project_dir


def install_for_platform(
    platform: PlatformConfig,
    options: InitOptions,
    templates_dir: Path,
    cwd: Path,
    home: Path,
) -> InstallResult:
    """Run the skill and agent installers for one platform."""
    target_base = resolve_target_base(platform, options.global_install, cwd, home)

    skills_count = 0
    agents_count = 0

    if options.install_skills and platform.supports_skills:
        skills_count = install_skills(
            target_base, platform, templates_dir, category=options.category, cwd=cwd
        )

    if options.install_agents:
        agents_count = install_agents(
            target_base,
            platform,
            templates_dir,
            is_global=options.global_install,
            category=options.category,
        )

    return InstallResult(
        platform=platform.display_name,
        skills_count=skills_count,
        agents_count=agents_count,
        location=str(target_base),
    )


def update_git_exclude(cwd: Path, entries: tuple[str, ...] = GIT_EXCLUDE_ENTRIES) -> bool:
    """Append missing ignore entries to ``.git/info/exclude``.

    Best-effort: returns False when there is no git repo or the file could
    not be read or written, True otherwise.
    """
    git_dir = cwd / ".git"
    if not git_dir.is_dir():
        return False

    exclude_path = git_dir / "info" / "exclude"
    try:
        exclude_path.parent.mkdir(parents=True, exist_ok=True)
        text = (
            exclude_path.read_text(encoding="utf-8", errors="surrogateescape")
            if exclude_path.exists()
            else ""
        )
        existing = {line.strip() for line in text.splitlines()}
        missing = [entry for entry in entries if entry not in existing]
        if missing:
            separator = "\n" if text and not text.endswith("\n") else ""
            exclude_path.write_text(
                text + separator + "\n".join(missing) + "\n",
                encoding="utf-8",
                errors="surrogateescape",
            )
    except (OSError, UnicodeError):
        return False
    return True


def print_summary(results: list[InstallResult]) -> None:
    console.print("\n[green]✅ Installation complete![/green]\n")
    console.print("[bold]Summary:[/bold]")
    for result in results:
        console.print(f"  [cyan]{result.platform}:[/cyan]")
        console.print(f"    [dim]Skills: {result.skills_count}[/dim]")
        console.print(f"    [dim]Agents: {result.agents_count}[/dim]")
    console.print()


def init_command(
    options: InitOptions,
    cwd: Path | None = None,
    home: Path | None = None,
    templates_dir: Path | None = None,
) -> list[InstallResult]:
    """Install skills and agents for the platforms selected by ``options``.

    Raises:
        TemplatesNotFoundError: If no template library can be located.
        UnknownPlatformError: If ``options.target`` is not a registered platform.
    """
    cwd = cwd or Path.cwd()
    home = home or Path.home()

    console.print("\n[cyan]🚀 Z-Command - Installing AI Coding Assistant Skills & Agents[/cyan]\n")

    templates_dir = templates_dir or resolve_templates_dir()
    platforms = get_target_platforms(options.target)

    results: list[InstallResult] = []
    for platform in platforms:
        console.print(f"\n[blue]📦 Installing for {platform.display_name}...[/blue]")
        result = install_for_platform(platform, options, templates_dir, cwd, home)
        results.append(result)
        console.print(f"   [dim]Location: {result.location}[/dim]")

    update_git_exclude(cwd)
    print_summary(results)

    return results
