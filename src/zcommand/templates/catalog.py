"""Template catalog - enumerate the skills and agents shipped with z-command."""

import re
from dataclasses import dataclass
from pathlib import Path

from zcommand.config import AGENT_SUFFIX, AGENTS_SUBDIR, SKILL_FILE, SKILLS_SUBDIR

DESCRIPTION_RE = re.compile(r"description:\s*(.+)", re.IGNORECASE)
DESCRIPTION_LIMIT = 60


@dataclass
class TemplateEntry:
    """A skill or agent available for installation."""

    name: str
    description: str
    path: Path

    @property
    def display_name(self) -> str:
        return self.name.replace("-", " ").title()


def extract_description(content: str) -> str:
    """First ``description:`` value in the content, truncated for display."""
    match = DESCRIPTION_RE.search(content)
    if match:
        return match.group(1).strip()[:DESCRIPTION_LIMIT]
    return "No description"


def list_skill_templates(templates_dir: Path) -> list[TemplateEntry] | None:
    """List skill directories that have a SKILL.md. None if there is no skills/ dir."""
    skills_dir = templates_dir / SKILLS_SUBDIR
    if not skills_dir.is_dir():
        return None

    entries = []
    for item in sorted(skills_dir.iterdir()):
        skill_file = item / SKILL_FILE
        if item.is_dir() and skill_file.is_file():
            entries.append(
                TemplateEntry(
                    name=item.name,
                    description=extract_description(skill_file.read_text(encoding="utf-8")),
                    path=item,
                )
            )
    return entries


def list_agent_templates(templates_dir: Path) -> list[TemplateEntry] | None:
    """List ``*.agent.md`` files. None if there is no agents/ dir."""
    agents_dir = templates_dir / AGENTS_SUBDIR
    if not agents_dir.is_dir():
        return None

    entries = []
    for item in sorted(agents_dir.iterdir()):
        if item.is_file() and item.name.endswith(AGENT_SUFFIX):
            entries.append(
                TemplateEntry(
                    name=item.name[: -len(AGENT_SUFFIX)],
                    description=extract_description(item.read_text(encoding="utf-8")),
                    path=item,
                )
            )
    return entries
