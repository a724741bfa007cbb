"""
Theme management for the agent_transcript renderer.
Maps transcript tags to Rich styles.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from rich.theme import Theme as RichTheme

from ..constants import DEFAULT_THEME


@dataclass
class TagStyles:
    """Style definitions for each transcript element.

    Bracketed labels follow the classic terminal palette: cyan for session
    start, yellow for the user prompt, magenta for thinking, green for tool
    calls, red for errors. Arguments and results are dimmed.
    """
    init: str = "cyan"
    prompt: str = "yellow"
    thinking: str = "magenta"
    assistant: str = "bold"
    tool: str = "green"
    result: str = "bold"
    error: str = "red"
    # Emphasis inside a block
    model: str = "bold"
    detail: str = "dim"
    tool_result: str = "dim"


@dataclass
class Theme:
    """Complete theme definition."""
    name: str = "default"
    description: str = "Default theme"
    styles: TagStyles = field(default_factory=TagStyles)

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich Theme object."""
        style_dict = {
            "tag.init": self.styles.init,
            "tag.prompt": self.styles.prompt,
            "tag.thinking": self.styles.thinking,
            "tag.assistant": self.styles.assistant,
            "tag.tool": self.styles.tool,
            "tag.result": self.styles.result,
            "tag.error": self.styles.error,
            "transcript.model": self.styles.model,
            "transcript.detail": self.styles.detail,
            "transcript.tool_result": self.styles.tool_result,
        }
        return RichTheme(style_dict)


class ThemeManager:
    """
    Holds the built-in themes and the active one.
    """

    def __init__(self) -> None:
        self._themes: Dict[str, Theme] = {}
        self._load_builtin_themes()
        self._current_theme: Theme = self._themes[DEFAULT_THEME]

    def _load_builtin_themes(self) -> None:
        """Load built-in themes."""
        self._themes['default'] = Theme()

        # Bright variants for dark terminals
        self._themes['dark'] = Theme(
            name="dark",
            description="Bright colors for dark terminals",
            styles=TagStyles(
                init="bold bright_cyan",
                prompt="bold bright_yellow",
                thinking="bright_magenta",
                assistant="bold grey93",
                tool="bold bright_green",
                result="bold grey93",
                error="bold bright_red",
                model="bold grey93",
                detail="grey58",
                tool_result="grey58",
            )
        )

        self._themes['solarized'] = Theme(
            name="solarized",
            description="Solarized dark theme",
            styles=TagStyles(
                init="#2aa198",
                prompt="#b58900",
                thinking="#d33682",
                assistant="bold #839496",
                tool="#859900",
                result="bold #268bd2",
                error="bold #dc322f",
                model="bold #268bd2",
                detail="#586e75",
                tool_result="#657b83",
            )
        )

    @property
    def current_theme(self) -> Theme:
        """Get the current active theme."""
        return self._current_theme

    @property
    def available_themes(self) -> list[str]:
        """Get list of available theme names."""
        return list(self._themes.keys())

    def get_theme(self, name: str) -> Optional[Theme]:
        """Get a theme by name."""
        return self._themes.get(name)

    def set_theme(self, name: str) -> bool:
        """
        Set the active theme.

        Args:
            name: Name of the theme to activate

        Returns:
            True if theme was set, False if not found
        """
        if name in self._themes:
            self._current_theme = self._themes[name]
            return True
        return False

    def get_rich_theme(self) -> RichTheme:
        """Get the current theme as a Rich Theme object."""
        return self._current_theme.to_rich_theme()
