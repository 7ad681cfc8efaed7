"""Install options and per-platform results."""

from pydantic import BaseModel, ConfigDict, Field


class InitOptions(BaseModel):
    """Flags accepted by ``z-command init``."""

    target: str | None = Field(default=None, description="Platform id, or 'all' / None for every platform")
    global_install: bool = Field(default=False, description="Install under the home directory instead of the project")
    skills: bool = Field(default=False, description="Install skills only")
    agents: bool = Field(default=False, description="Install agents only")
    category: str | None = Field(default=None, description="Case-sensitive substring filter on template names")

    @property
    def install_skills(self) -> bool:
        # Neither flag set means both categories
        return not self.agents or self.skills

    @property
    def install_agents(self) -> bool:
        return not self.skills or self.agents


class InstallResult(BaseModel):
    """What one platform received during an install run."""

    model_config = ConfigDict(frozen=True)

    platform: str
    skills_count: int = 0
    agents_count: int = 0
    location: str
