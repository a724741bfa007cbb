"""
Configuration management for agent_transcript.
Handles loading configuration from an optional JSON file, environment variables
and command line overrides.
"""
import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    CONFIG_FILE,
    COLOR_MODES,
    DEFAULT_COLOR_MODE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_THEME,
    ENV_COLOR,
    ENV_LOG_LEVEL,
    ENV_NO_COLOR,
    ENV_THEME,
    LABEL_MAX_LENGTH,
    LOG_LEVELS,
    PROMPT_MAX_LENGTH,
    SUMMARY_MAX_LENGTH,
)


logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass
class RenderConfig:
    """Truncation bounds used when extracting text from events."""
    label_width: int = LABEL_MAX_LENGTH
    summary_width: int = SUMMARY_MAX_LENGTH
    prompt_width: int = PROMPT_MAX_LENGTH


@dataclass
class UIConfig:
    """UI-specific configuration."""
    theme: str = DEFAULT_THEME
    color: str = DEFAULT_COLOR_MODE


@dataclass
class AppConfig:
    """Main application configuration."""
    render: RenderConfig = field(default_factory=RenderConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = DEFAULT_LOG_LEVEL

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a plain dictionary."""
        return {
            'render': asdict(self.render),
            'ui': asdict(self.ui),
            'log_level': self.log_level,
        }


class ConfigManager:
    """
    Loads and holds the application configuration.

    Precedence, lowest first: built-in defaults, the JSON config file,
    environment variables, explicit ``update_*`` calls (command line flags).
    The config file is only ever read.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else CONFIG_FILE
        self._config = AppConfig()
        self._load_config()
        self._load_env_vars()

    @property
    def path(self) -> Path:
        """Get the config file path."""
        return self._path

    def _load_config(self) -> None:
        """Load configuration from the JSON file if it exists."""
        if not self._path.exists():
            return

        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise TypeError("top-level value must be an object")

            if 'render' in data:
                self._config.render = RenderConfig(**data['render'])
            if 'ui' in data:
                self._config.ui = UIConfig(**data['ui'])
            if 'log_level' in data:
                self._config.log_level = str(data['log_level'])
        except (OSError, json.JSONDecodeError, TypeError) as e:
            logger.warning("Failed to load config file %s: %s", self._path, e)
            self._config = AppConfig()

    def _load_env_vars(self) -> None:
        """Apply overrides from environment variables."""
        theme = os.environ.get(ENV_THEME, "").strip()
        if theme:
            self._config.ui.theme = theme

        color = os.environ.get(ENV_COLOR, "").strip().lower()
        if color:
            self._config.ui.color = color

        # https://no-color.org: any non-empty value disables color
        if os.environ.get(ENV_NO_COLOR):
            self._config.ui.color = "never"

        log_level = os.environ.get(ENV_LOG_LEVEL, "").strip()
        if log_level:
            self._config.log_level = log_level

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        return self._config

    @property
    def render(self) -> RenderConfig:
        """Get render configuration."""
        return self._config.render

    @property
    def ui(self) -> UIConfig:
        """Get UI configuration."""
        return self._config.ui

    @property
    def log_level(self) -> str:
        """Get the configured log level name."""
        return self._config.log_level.upper()

    def update_render(self, **kwargs: Any) -> None:
        """Update render configuration, ignoring None values."""
        for key, value in kwargs.items():
            if value is not None and hasattr(self._config.render, key):
                setattr(self._config.render, key, value)

    def update_ui(self, **kwargs: Any) -> None:
        """Update UI configuration, ignoring None values."""
        for key, value in kwargs.items():
            if value is not None and hasattr(self._config.ui, key):
                setattr(self._config.ui, key, value)

    def set_log_level(self, level: Optional[str]) -> None:
        """Override the log level."""
        if level:
            self._config.log_level = level

    def validate(self) -> None:
        """
        Check the configuration for invalid values.

        Raises:
            ConfigError: If any value is out of range or of the wrong type
        """
        for name in ('label_width', 'summary_width', 'prompt_width'):
            value = getattr(self._config.render, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigError(f"render.{name} must be a positive integer, got {value!r}")

        if self._config.ui.color not in COLOR_MODES:
            raise ConfigError(
                f"ui.color must be one of {', '.join(COLOR_MODES)}, got {self._config.ui.color!r}"
            )

        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self._config.log_level!r}"
            )


_config_manager: Optional[ConfigManager] = None


def get_config(path: Optional[Path] = None) -> ConfigManager:
    """Get the shared configuration manager, loading it on first use."""
    global _config_manager
    if _config_manager is None or (path is not None and Path(path) != _config_manager.path):
        _config_manager = ConfigManager(path)
    return _config_manager


def reset_config() -> None:
    """Discard the shared configuration manager."""
    global _config_manager
    _config_manager = None
