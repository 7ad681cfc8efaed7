"""Install skill directories into a platform's skills folder."""

import os
import shutil
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from zcommand.config import SHARED_SUBDIRS, SKILL_FILE, SKILLS_SUBDIR
from zcommand.platforms import PlatformConfig

console = Console()


def _skip_existing_copier(transform_skill: Callable[[str], str] | None = None):
    """copytree copy_function that never overwrites and transforms SKILL.md."""

    def copy_file(src: str, dst: str) -> str:
        if os.path.exists(dst):
            return dst
        if transform_skill and os.path.basename(src) == SKILL_FILE:
            content = Path(src).read_text(encoding="utf-8")
            Path(dst).write_text(transform_skill(content), encoding="utf-8")
        else:
            shutil.copyfile(src, dst)
        return dst

    return copy_file


def _mirror_tree(
    source: Path,
    dest: Path,
    transform_skill: Callable[[str], str] | None = None,
) -> None:
    """Recursively copy ``source`` into ``dest`` without overwriting existing files."""
    shutil.copytree(
        source,
        dest,
        copy_function=_skip_existing_copier(transform_skill),
        dirs_exist_ok=True,
    )


def copy_shared_resources(skill_path: Path, shared_root: Path) -> bool:
    """Copy a skill's data/ and scripts/ into ``shared_root/<skill>/``.

    Returns True if the skill had any shared resources.
    """
    present = [name for name in SHARED_SUBDIRS if (skill_path / name).is_dir()]
    if not present:
        return False

    shared_target = shared_root / skill_path.name
    for name in present:
        _mirror_tree(skill_path / name, shared_target / name)
    return True


def install_skill(
    skill_path: Path,
    skills_target: Path,
    platform: PlatformConfig,
    cwd: Path,
) -> Path:
    """Mirror one skill into ``skills_target`` and centralize its shared resources."""
    dest = skills_target / skill_path.name
    _mirror_tree(skill_path, dest, platform.transform_skill)

    if platform.shared_dir:
        if copy_shared_resources(skill_path, cwd / platform.shared_dir):
            console.print(
                f"      [dim]→ Shared resources: {platform.shared_dir}/{skill_path.name}/[/dim]"
            )

    return dest


def install_skills(
    target_base: Path,
    platform: PlatformConfig,
    templates_dir: Path,
    category: str | None = None,
    cwd: Path | None = None,
) -> int:
    """Install every skill (optionally filtered by name substring) for a platform.

    Files already present at the destination are left untouched; a skill
    still counts as installed when all of its files were skipped.

    Args:
        target_base: Platform base directory (project or global).
        platform: Platform config; must have ``skills_dir`` set.
        templates_dir: Directory holding the ``skills/`` source tree.
        category: Case-sensitive substring that skill names must contain.
        cwd: Project directory that ``shared_dir`` is resolved against.

    Returns:
        Number of skill directories processed.
    """
    if not platform.skills_dir:
        return 0

    cwd = cwd or Path.cwd()
    skills_source = templates_dir / SKILLS_SUBDIR
    skills_target = target_base / platform.skills_dir

    if not skills_source.is_dir():
        console.print("  [yellow]⚠ No skills templates found[/yellow]")
        return 0

    skills_target.mkdir(parents=True, exist_ok=True)

    count = 0
    for skill_path in sorted(skills_source.iterdir()):
        if category and category not in skill_path.name:
            continue
        if not skill_path.is_dir():
            continue

        install_skill(skill_path, skills_target, platform, cwd)
        console.print(f"    [green]✓[/green] Skill: {skill_path.name}")
        count += 1

    return count
