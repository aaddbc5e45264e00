"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from classdeps.core.config.loader import ConfigLoader

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent.parent / "config" / "default.yaml"


class AnalysisSettings(BaseSettings):
    """Dependency analysis settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSDEPS_ANALYSIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    extensions: list[str] = Field(
        default_factory=lambda: [".java"],
        description="Source file extensions to analyze",
    )
    excluded_dirs: list[str] = Field(
        default_factory=lambda: [
            ".git",
            ".hg",
            ".svn",
            ".idea",
            ".gradle",
            "node_modules",
        ],
        description="Directory names skipped at any depth while walking a project",
    )
    max_file_size: int = Field(
        default=1024 * 1024,
        ge=1,
        description="Files larger than this many bytes are reported as read errors",
    )
    max_workers: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Worker threads used for project scans",
    )
    encodings: list[str] = Field(
        default_factory=lambda: ["utf-8", "latin-1"],
        description="Encodings tried in order when decoding source files",
    )
    strict_parse: bool = Field(
        default=True,
        description="Treat syntax trees containing error nodes as parse failures",
    )
    include_all_types: bool = Field(
        default=False,
        description="Also extract interface, enum and record declarations",
    )

    @field_validator("extensions", mode="after")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Normalize extensions to lower-case with a leading dot."""
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

    @field_validator("encodings", mode="after")
    @classmethod
    def validate_encodings(cls, v: list[str]) -> list[str]:
        """Require at least one encoding."""
        if not v:
            raise ValueError("At least one encoding must be configured")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSDEPS_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="WARNING",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSDEPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        return cls(
            analysis=AnalysisSettings(**loader.get_section("analysis")),
            logging=LoggingSettings(**loader.get_section("logging")),
        )

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Keys present in config/default.yaml win over environment variables,
        which win over .env and the field defaults.

        Returns:
            Settings instance.
        """
        if DEFAULT_CONFIG_PATH.exists():
            return cls.from_yaml(DEFAULT_CONFIG_PATH)

        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
