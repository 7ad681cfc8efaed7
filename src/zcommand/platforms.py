"""Platform registry - directory conventions and content transforms per assistant."""

import re
from collections.abc import Callable
from dataclasses import dataclass

from zcommand.config import AGENT_SUFFIX
from zcommand.exceptions import UnknownPlatformError

ALL_TARGET = "all"

FRONTMATTER_RE = re.compile(r"^---\r?\n([\s\S]*?)\r?\n---")
NAME_RE = re.compile(r"name:\s*(.+)")
DESCRIPTION_RE = re.compile(r"description:\s*(.+)")


@dataclass(frozen=True)
class PlatformConfig:
    """Where and how one assistant platform expects skills and agents."""

    id: str
    display_name: str
    project_dir: str
    global_dir: str
    agents_dir: str
    agent_extension: str
    skills_dir: str | None = None
    global_agents_dir: str | None = None
    shared_dir: str | None = None
    transform_skill: Callable[[str], str] | None = None
    transform_agent: Callable[[str, str], str] | None = None

    @property
    def supports_skills(self) -> bool:
        return self.skills_dir is not None

    def agents_dir_for(self, is_global: bool) -> str:
        """Agents subdirectory, honouring the global override when installing globally."""
        if is_global and self.global_agents_dir:
            return self.global_agents_dir
        return self.agents_dir


def _strip_agent_suffix(filename: str) -> str:
    return filename.replace(AGENT_SUFFIX, "")


def transform_to_workflow(content: str, filename: str) -> str:
    """Rewrite a Copilot agent into a workflow with description-only frontmatter.

    Content without frontmatter is returned unchanged.
    """
    match = FRONTMATTER_RE.match(content)
    if not match:
        return content

    frontmatter = match.group(1)
    body = content[match.end():].strip()

    desc = DESCRIPTION_RE.search(frontmatter)
    description = desc.group(1).strip() if desc else _strip_agent_suffix(filename)

    return f"---\ndescription: {description}\n---\n\n{body}"


def transform_to_cursor_rule(content: str, filename: str) -> str:
    """Rewrite a Copilot agent into a plain-markdown Cursor rule.

    The frontmatter is dropped and its name and description become a title
    and a leading paragraph.
    """
    match = FRONTMATTER_RE.match(content)
    if match:
        frontmatter = match.group(1)
        body = content[match.end():].strip()
        name_match = NAME_RE.search(frontmatter)
        desc_match = DESCRIPTION_RE.search(frontmatter)
        name = name_match.group(1).strip() if name_match else _strip_agent_suffix(filename)
        description = desc_match.group(1).strip() if desc_match else ""
    else:
        body = content
        name = _strip_agent_suffix(filename)
        description = ""

    title = " ".join(word[:1].upper() + word[1:] for word in name.split("-"))

    result = f"# {title}\n\n"
    if description:
        result += f"{description}\n\n"
    return result + body


PLATFORMS: dict[str, PlatformConfig] = {
    # Source format, no transformation needed
    "copilot": PlatformConfig(
        id="copilot",
        display_name="GitHub Copilot",
        project_dir=".github",
        global_dir=".copilot",
        agents_dir="agents",
        skills_dir="skills",
        agent_extension=".agent.md",
    ),
    "claude": PlatformConfig(
        id="claude",
        display_name="Claude Code",
        project_dir=".claude",
        global_dir=".claude",
        agents_dir="agents",
        skills_dir="skills",
        agent_extension=".agent.md",
    ),
    "agents": PlatformConfig(
        id="agents",
        display_name="Generic Agents",
        project_dir=".agents",
        global_dir=".agents",
        agents_dir="agents",
        skills_dir="skills",
        shared_dir=".shared",
        agent_extension=".md",
        transform_agent=transform_to_workflow,
    ),
    # Antigravity loads each skill directory on its own, so skills stay self-contained
    "antigravity": PlatformConfig(
        id="antigravity",
        display_name="Antigravity",
        project_dir=".agent",
        global_dir=".gemini/antigravity",
        agents_dir="workflows",
        global_agents_dir="global_workflows",
        skills_dir="skills",
        agent_extension=".md",
        transform_agent=transform_to_workflow,
    ),
    "cursor": PlatformConfig(
        id="cursor",
        display_name="Cursor",
        project_dir=".cursor",
        global_dir=".cursor",
        agents_dir="rules",
        agent_extension=".md",
        transform_agent=transform_to_cursor_rule,
    ),
}


def get_all_platforms() -> list[PlatformConfig]:
    return list(PLATFORMS.values())


def get_platform(name: str) -> PlatformConfig:
    """Look up a platform by id."""
    try:
        return PLATFORMS[name]
    except KeyError:
        choices = ", ".join([*PLATFORMS, ALL_TARGET])
        raise UnknownPlatformError(
            f"Unknown platform '{name}'. Choose one of: {choices}"
        ) from None


def get_target_platforms(target: str | None = None) -> list[PlatformConfig]:
    """Platforms to install for a --target value; None or 'all' selects every platform."""
    if not target or target == ALL_TARGET:
        return get_all_platforms()
    return [get_platform(target)]
