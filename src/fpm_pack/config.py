"""Configuration models and loading logic."""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from fpm_pack.errors import ConfigError
from fpm_pack.formats import DEFAULT_DEPENDENCIES, PackageFormat

DEFAULT_SETTINGS_FILE = Path("configs/settings.yaml")
SETTINGS_FILE_ENV = "FPM_PACK_SETTINGS_FILE"


class ProjectMetadata(BaseModel):
    """Read-only description of the project being packaged."""

    name: str
    version: str
    description: str = ""
    url: str = ""
    target_path: Path = Path("target")
    jvm_opts: list[str] = Field(default_factory=list)
    package_dependencies: str | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("name", "version")
    @classmethod
    def _check_path_safe(cls, value: str) -> str:
        # Both values end up unescaped in file names and fpm tokens.
        if not value:
            raise ValueError("must not be empty")
        if "/" in value or any(char.isspace() for char in value):
            raise ValueError("must not contain '/' or whitespace")
        return value


class PackagingConfig(BaseModel):
    """External tool names and per-format defaults."""

    tool: str = "fpm"
    runtime: str = "java"
    shebang: str = "#!/bin/bash"
    artifact_command: list[str] = Field(
        default_factory=lambda: ["lein", "with-profile", "uberjar", "uberjar"],
        min_length=1,
    )
    default_dependencies: dict[PackageFormat, str] = Field(default_factory=lambda: dict(DEFAULT_DEPENDENCIES))


class PathsConfig(BaseModel):
    """Filesystem locations used outside the project target directory."""

    project_root: Path = Path(".")
    logs_root: Path = Path("./logs")

    def resolved(self, project_root: Path) -> "PathsConfig":
        """Return a copy with project-relative paths resolved to absolute paths."""

        updates: dict[str, Path] = {}
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            updates[field_name] = value if value.is_absolute() else (project_root / value).resolve()
        return self.model_copy(update=updates)


class AppSettings(BaseSettings):
    """Top-level application settings."""

    _yaml_file_override: ClassVar[Path | None] = None

    project: ProjectMetadata
    packaging: PackagingConfig = Field(default_factory=PackagingConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)

    model_config = SettingsConfigDict(
        env_prefix="FPM_PACK_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use YAML defaults while allowing env vars to override values."""

        yaml_file = resolve_settings_file(cls._yaml_file_override)
        yaml_settings = YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )

    def as_dict(self) -> dict[str, object]:
        """Return settings as a standard nested dictionary."""

        return self.model_dump(mode="json")


def find_project_root(start: Path | None = None) -> Path:
    """Locate the project root by traversing upward for config markers."""

    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / DEFAULT_SETTINGS_FILE).exists():
            return candidate
    return current


def resolve_settings_file(override: Path | None = None) -> Path:
    """Resolve settings file from explicit override, env var, or default."""

    chosen = override
    if chosen is None:
        env_value = os.getenv(SETTINGS_FILE_ENV)
        if env_value:
            chosen = Path(env_value)
    if chosen is None:
        chosen = DEFAULT_SETTINGS_FILE

    if not chosen.is_absolute():
        chosen = (find_project_root() / chosen).resolve()
    return chosen


def load_settings(config_file: Path | None = None) -> AppSettings:
    """Load settings with YAML defaults and environment variable overrides.

    A file named explicitly (argument or ``FPM_PACK_SETTINGS_FILE``) must
    exist. The discovered default may be absent, leaving env vars as the
    only source.
    """

    settings_file = resolve_settings_file(config_file)
    explicit = config_file is not None or bool(os.getenv(SETTINGS_FILE_ENV))
    if explicit and not settings_file.is_file():
        raise ConfigError(f"Settings file not found: {settings_file}")
    project_root = settings_file.parent.parent.resolve()
    AppSettings._yaml_file_override = settings_file
    try:
        settings = AppSettings()
    except (ValidationError, yaml.YAMLError) as exc:
        raise ConfigError(f"Invalid settings in {settings_file}:\n{exc}") from exc
    finally:
        AppSettings._yaml_file_override = None

    target_path = settings.project.target_path
    if not target_path.is_absolute():
        target_path = (project_root / target_path).resolve()
    return settings.model_copy(
        update={
            "paths": settings.paths.resolved(project_root=project_root),
            "project": settings.project.model_copy(update={"target_path": target_path}),
        }
    )
