"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from .adapters.booking_client import DEFAULT_API_URL
from .domain.calendar_renderer import DEFAULT_PRODID


class ApiConfig(BaseModel):
    """Settings for the upstream booking API."""
    base_url: str = DEFAULT_API_URL
    timeout_seconds: float = 30
    limit: int = 100
    lang: int = 0

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Ensure the request timeout is positive."""
        if value <= 0:
            raise ValueError("timeout_seconds must be greater than zero")
        return value

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, value: int) -> int:
        """Validate the page size is between 1 and 1000."""
        if not 1 <= value <= 1000:
            raise ValueError(f"limit must be between 1 and 1000, got {value}")
        return value


class ServerConfig(BaseModel):
    """Settings for the calendar feed HTTP server."""
    host: str = "0.0.0.0"
    port: int = 10000

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        """Validate port is between 1 and 65535."""
        if not 1 <= value <= 65535:
            raise ValueError(f"Port must be between 1 and 65535, got {value}")
        return value


class CalendarConfig(BaseModel):
    """Settings for the generated calendar document."""
    prodid: str = DEFAULT_PRODID


class AppConfig(BaseModel):
    """Application configuration."""
    api: ApiConfig = Field(default_factory=ApiConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of laundrycal/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load the configuration, falling back to built-in defaults.

    An explicitly given path must exist. Without one, the default location
    is used when present and the defaults otherwise.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)

    return AppConfig()
