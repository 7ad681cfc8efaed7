"""Configuration and directory layout for z-command."""

from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

# Development checkout: <repo>/templates next to <repo>/src/zcommand
LOCAL_TEMPLATES_DIR = PACKAGE_DIR.parent.parent / "templates"

# Installed package: zipped copy of the same tree, built by `z-command bundle`
TEMPLATES_ZIP = PACKAGE_DIR / "templates.zip"

# Extraction cache under the system temp dir, keyed by md5 of the zip bytes
TEMPLATE_CACHE_DIRNAME = "z-command-templates"

SKILLS_SUBDIR = "skills"
AGENTS_SUBDIR = "agents"
SKILL_FILE = "SKILL.md"
AGENT_SUFFIX = ".agent.md"

# Complex-skill side resources that can be centralized in a platform's shared dir
SHARED_SUBDIRS = ("data", "scripts")

# Entries appended to .git/info/exclude after an install
GIT_EXCLUDE_ENTRIES = (
    ".shared",
    ".skills",
    ".agents",
    ".agent",
    ".claude",
    ".cursor",
    "agents",
    "skills",
)
