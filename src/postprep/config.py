"""Configuration management using pydantic-settings."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCE = "posts"
DEFAULT_OUTPUT = "content/posts"
DEFAULT_PATTERNS = ["*.md"]
DEFAULT_GIT_TIMEOUT = 10.0
CONFIG_PATH = Path("postprep.toml")


class PathsConfig(BaseModel):
    source: Path = Path(DEFAULT_SOURCE)
    output: Path = Path(DEFAULT_OUTPUT)

    @field_validator("source", "output", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser()


class ScanConfig(BaseModel):
    patterns: list[str] = DEFAULT_PATTERNS


class DatesConfig(BaseModel):
    """Fallback date sources used when a post has no **Date:** line."""

    use_git: bool = True
    git_timeout: float = DEFAULT_GIT_TIMEOUT


class Settings(BaseSettings):
    """Sections are plain models; only POSTPREP_-prefixed variables apply.

    Nested fields are set with a double underscore, e.g.
    POSTPREP_PATHS__OUTPUT.
    """

    model_config = SettingsConfigDict(
        env_prefix="POSTPREP_", env_nested_delimiter="__"
    )

    paths: PathsConfig = Field(default_factory=PathsConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    dates: DatesConfig = Field(default_factory=DatesConfig)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from TOML file, falling back to defaults."""
    path = config_path or CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)

        # Sections are passed as dicts so environment values fill the gaps
        return Settings(
            paths=data.get("paths", {}),
            scan=data.get("scan", {}),
            dates=data.get("dates", {}),
        )

    return Settings()
