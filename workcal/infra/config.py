"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Supports multiple sources (YAML, env vars, defaults)
- Easy to test with different configurations
"""

import os
from pathlib import Path
from typing import Optional
import yaml

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalendarPreferences(BaseModel):
    """
    User-adjustable defaults for the statistics engine.

    Stored in settings.yaml.
    """
    default_daily_work_hours: float = Field(
        default=8.0,
        ge=0,
        le=24,
        description="Daily work hours for calendars without their own quota"
    )


class Settings(BaseSettings):
    """
    Application settings with multiple sources, lowest priority first:
    1. Default values (hardcoded)
    2. YAML config file
    3. Environment variables (WORKCAL_ prefix)
    4. Explicit keyword arguments
    """
    model_config = SettingsConfigDict(
        env_prefix='WORKCAL_',
        env_file='.env',
        env_file_encoding='utf-8',
        env_nested_delimiter='__'
    )

    app_name: str = "WorkCal"
    config_dir: Optional[Path] = None

    preferences: CalendarPreferences = CalendarPreferences()

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._init_paths()
        self._load_yaml_config()

    def _init_paths(self):
        """Initialize default config path based on OS"""
        if self.config_dir is None:
            if os.name == 'nt':  # Windows
                base = Path(os.getenv('APPDATA', Path.home()))
            else:  # Linux/Mac
                base = Path.home() / '.config'
            self.config_dir = base / self.app_name.lower()

    def _load_yaml_config(self):
        """Load preferences from YAML file, below env vars and arguments"""
        # First check in workspace config folder
        config_file = Path("config/settings.yaml")
        if not config_file.exists():
            # Then check in user's config directory
            config_file = self.config_dir / "settings.yaml"

        if config_file.exists():
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
                if config_data:
                    # Values set through env vars or kwargs are kept
                    explicit = self.preferences.model_dump(exclude_unset=True)
                    self.preferences = CalendarPreferences(**{**config_data, **explicit})

    def save_preferences(self):
        """Save current preferences to YAML file"""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config_file = self.config_dir / "settings.yaml"
        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(self.preferences.model_dump(), f, default_flow_style=False)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings():
    """Reload settings from file"""
    global _settings
    _settings = Settings()
    return _settings
