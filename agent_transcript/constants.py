"""
Constants and configuration defaults for agent_transcript.
"""
from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "agent_transcript"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = (
    "Render a stream-json agent session log as a readable, colorized transcript"
)

CONFIG_DIR: Final[Path] = Path.home() / ".agent_transcript"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"

# Environment overrides
ENV_THEME: Final[str] = "AGENT_TRANSCRIPT_THEME"
ENV_COLOR: Final[str] = "AGENT_TRANSCRIPT_COLOR"
ENV_LOG_LEVEL: Final[str] = "AGENT_TRANSCRIPT_LOG_LEVEL"
ENV_NO_COLOR: Final[str] = "NO_COLOR"

DEFAULT_THEME: Final[str] = "default"
DEFAULT_COLOR_MODE: Final[str] = "auto"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

COLOR_MODES: Final[tuple] = ("auto", "always", "never")
LOG_LEVELS: Final[tuple] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Truncation bounds
LABEL_MAX_LENGTH: Final[int] = 120
SUMMARY_MAX_LENGTH: Final[int] = 200
PROMPT_MAX_LENGTH: Final[int] = 200

ELLIPSIS: Final[str] = "…"
RESULT_ARROW: Final[str] = "→"
UNKNOWN_TOOL_LABEL: Final[str] = "unknown tool"
SUCCESS_PLACEHOLDER: Final[str] = "ok"
ERROR_PREFIX: Final[str] = "ERROR: "
