"""Shared fixtures: a small template library and bare platform configs."""

import pytest

from zcommand.platforms import PlatformConfig


@pytest.fixture
def templates_dir(tmp_path):
    """A template library with a simple skill, a complex skill and two agents."""
    root = tmp_path / "templates"

    simple = root / "skills" / "test-skill"
    simple.mkdir(parents=True)
    (simple / "SKILL.md").write_text("---\nname: test-skill\ndescription: A test skill\n---\n# Test\n")

    complex_skill = root / "skills" / "complex-skill"
    (complex_skill / "data").mkdir(parents=True)
    (complex_skill / "scripts").mkdir()
    (complex_skill / "SKILL.md").write_text("# Complex\nRun scripts/search.py\n")
    (complex_skill / "data" / "styles.csv").write_text("name,color\nminimal,#000\n")
    (complex_skill / "scripts" / "search.py").write_text("print('search')\n")

    agents = root / "agents"
    agents.mkdir(parents=True)
    (agents / "test.agent.md").write_text(
        "---\nname: test\ndescription: Test agent\ntools: ['search']\n---\n\nDo the test thing.\n"
    )
    (agents / "ai-engineer.agent.md").write_text(
        "---\nname: ai-engineer\ndescription: Builds AI features\n---\n\nYou are an AI engineer.\n"
    )
    return root


@pytest.fixture
def project(tmp_path):
    """Empty project working directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def plain_platform():
    """Self-contained skills, agents renamed to .chatmode.md."""
    return PlatformConfig(
        id="plain",
        display_name="Plain",
        project_dir=".plain",
        global_dir=".plain-global",
        agents_dir="agents",
        skills_dir="agents-skills",
        agent_extension=".chatmode.md",
    )


@pytest.fixture
def shared_platform():
    """Centralizes data/ and scripts/ into .shared."""
    return PlatformConfig(
        id="shared",
        display_name="Shared",
        project_dir=".shared-platform",
        global_dir=".shared-platform",
        agents_dir="workflows",
        global_agents_dir="global_workflows",
        skills_dir="skills",
        shared_dir=".shared",
        agent_extension=".md",
    )
