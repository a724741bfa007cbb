"""
Rich renderer for agent_transcript.
Formats each Emission as a labeled, colorized transcript block.
"""
from typing import IO, Iterable, Optional

from rich.console import COLOR_SYSTEMS, Console
from rich.text import Text

from .theme import ThemeManager
from .transcript_state import Emission, Tag
from ..constants import DEFAULT_COLOR_MODE, RESULT_ARROW


# Tags rendered as "[TAG] text" followed by a blank line
_BLOCK_STYLES = {
    Tag.PROMPT: "tag.prompt",
    Tag.THINKING: "tag.thinking",
    Tag.ASSISTANT: "tag.assistant",
    Tag.RESULT: "tag.result",
    Tag.ERROR: "tag.error",
}

# Width of "[INIT] ", so the cwd line lines up under "model="
_INIT_INDENT = " " * (len(Tag.INIT.label) + 1)


def create_console(
    file: Optional[IO[str]] = None,
    color: str = DEFAULT_COLOR_MODE,
    theme_manager: Optional[ThemeManager] = None,
) -> Console:
    """
    Build a Console suited to transcript output.

    Markup, emoji and highlighting are off so event text is printed
    literally, and soft wrapping keeps long lines intact.

    Args:
        file: Output stream, stdout when None
        color: "auto" to detect a terminal, "always" or "never"
        theme_manager: Source of tag styles

    Returns:
        A configured Rich Console
    """
    theme_manager = theme_manager or ThemeManager()
    options = {
        "file": file,
        "theme": theme_manager.get_rich_theme(),
        "markup": False,
        "emoji": False,
        "highlight": False,
        "soft_wrap": True,
    }
    if color == "always":
        options["force_terminal"] = True
    elif color == "never":
        options["color_system"] = None
    return Console(**options)


class TranscriptRenderer:
    """
    Writes transcript blocks to a Rich console.

    Every labeled block is followed by a blank line, except TOOL lines: the
    tool's result line (if any) follows immediately and the SEPARATOR
    emission closes the block.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """
        Initialize the renderer.

        Args:
            console: Optional Rich Console instance
        """
        self._console = console or create_console()

    @property
    def console(self) -> Console:
        """Get the Rich console."""
        return self._console

    def render_all(self, emissions: Iterable[Emission]) -> None:
        """Render emissions in order."""
        for emission in emissions:
            self.render(emission)

    def render(self, emission: Emission) -> None:
        """
        Render a single emission.

        Tag labels are printed through the console; event text is written
        to the console's file unchanged, wrapped in its style's codes when
        color is on.

        Args:
            emission: The block to print
        """
        tag = emission.tag

        if tag is Tag.PASSTHROUGH:
            self._write(emission.text + "\n")
        elif tag is Tag.INIT:
            self._render_init(emission)
        elif tag is Tag.TOOL:
            self._print_label(tag, "tag.tool")
            self._write(" " + emission.text)
            if emission.detail:
                self._write(" ")
                self._write(emission.detail, "transcript.detail")
            self._write("\n")
        elif tag is Tag.TOOL_RESULT:
            self._write(f"  {RESULT_ARROW} {emission.text}", "transcript.tool_result")
            self._write("\n")
        elif tag is Tag.SEPARATOR:
            self._write("\n")
        else:
            self._print_label(tag, _BLOCK_STYLES.get(tag, ""))
            self._write(" " + emission.text + "\n\n")

    def _render_init(self, emission: Emission) -> None:
        """Two-line session header: model and session id, then cwd."""
        self._print_label(Tag.INIT, "tag.init")
        self._write(" model=")
        self._write(emission.text, "transcript.model")
        self._write(" session=")
        self._write(emission.detail, "transcript.detail")
        self._write(f"\n{_INIT_INDENT}cwd=")
        self._write(emission.extra, "transcript.detail")
        self._write("\n\n")

    def _print_label(self, tag: Tag, style: str) -> None:
        self._console.print(Text(tag.label, style=style), end="")

    def _write(self, text: str, style: str = "") -> None:
        """Write text byte-for-byte, bypassing Rich's text processing."""
        color_system = self._console.color_system
        if text and style and color_system:
            text = self._console.get_style(style).render(
                text, color_system=COLOR_SYSTEMS[color_system]
            )
        out = self._console.file
        out.write(text)
        out.flush()
