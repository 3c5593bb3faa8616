# src/devstreams/config.py
"""Configuration management for devstreams."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tomllib

SQLITE_PREFIX = "sqlite:///"


class ConfigError(Exception):
    """Configuration error."""

    pass


@dataclass
class DatabaseConfig:
    url: str
    echo: bool = False


@dataclass
class PreferencesConfig:
    default_timezone: str | None = None


@dataclass
class DevStreamsConfig:
    database: DatabaseConfig
    preferences: PreferencesConfig = field(default_factory=PreferencesConfig)

    def validate(self) -> None:
        """Validate configuration, raising ConfigError if invalid."""
        if not self.database.url or not self.database.url.strip():
            raise ConfigError("Configuration requires a non-empty url in [database]")

        # Validate timezone (IANA format)
        if self.preferences.default_timezone is not None:
            try:
                ZoneInfo(self.preferences.default_timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ConfigError(
                    f"Invalid default_timezone '{self.preferences.default_timezone}'. "
                    "Must be a valid IANA timezone (e.g., 'America/New_York')"
                ) from e


def expand_database_url(url: str) -> str:
    """Expand ``~`` in the path of a SQLite URL.

    Other URLs are returned unchanged.
    """
    if url.startswith(SQLITE_PREFIX + "~"):
        path = Path(url[len(SQLITE_PREFIX) :]).expanduser()
        return f"{SQLITE_PREFIX}{path}"
    return url


def load_config(config_path: Path) -> DevStreamsConfig:
    """Load configuration from TOML file."""
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    db_data = data.get("database", {})
    database = DatabaseConfig(
        url=expand_database_url(db_data.get("url", "")),
        echo=bool(db_data.get("echo", False)),
    )

    prefs_data = data.get("preferences", {})
    preferences = PreferencesConfig(
        default_timezone=prefs_data.get("default_timezone"),
    )

    return DevStreamsConfig(database=database, preferences=preferences)


def get_default_config_path() -> Path:
    """Get the default config file path."""
    return Path.home() / ".devstreams" / "config.toml"
