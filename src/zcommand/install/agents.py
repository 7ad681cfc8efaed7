"""Install agent definition files into a platform's agents folder."""

from pathlib import Path

from rich.console import Console

from zcommand.config import AGENT_SUFFIX, AGENTS_SUBDIR
from zcommand.platforms import PlatformConfig

console = Console()


def agent_target_filename(source_name: str, platform: PlatformConfig) -> str:
    """``code-reviewer.agent.md`` -> ``code-reviewer`` + the platform extension."""
    return source_name[: -len(AGENT_SUFFIX)] + platform.agent_extension


def install_agents(
    target_base: Path,
    platform: PlatformConfig,
    templates_dir: Path,
    is_global: bool = False,
    category: str | None = None,
) -> int:
    """Install ``*.agent.md`` templates for a platform. Returns the number written.

    Agents whose target file already exists are skipped and not counted.
    """
    agents_source = templates_dir / AGENTS_SUBDIR
    agents_target = target_base / platform.agents_dir_for(is_global)

    if not agents_source.is_dir():
        console.print("  [yellow]⚠ No agents templates found[/yellow]")
        return 0

    agents_target.mkdir(parents=True, exist_ok=True)

    count = 0
    for agent_path in sorted(agents_source.iterdir()):
        name = agent_path.name
        if category and category not in name:
            continue
        if not agent_path.is_file() or not name.endswith(AGENT_SUFFIX):
            continue

        target = agents_target / agent_target_filename(name, platform)
        if target.exists():
            continue

        content = agent_path.read_text(encoding="utf-8")
        if platform.transform_agent:
            content = platform.transform_agent(content, name)

        target.write_text(content, encoding="utf-8")
        console.print(f"    [green]✓[/green] Agent: {name[: -len(AGENT_SUFFIX)]}")
        count += 1

    return count
