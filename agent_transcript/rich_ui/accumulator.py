"""Text accumulator for coalescing streamed fragments.

This module provides the TextAccumulator class that collects fragmented
thinking or assistant deltas into one block until it is explicitly flushed.
"""

from dataclasses import dataclass, field
from typing import Optional

from agent_transcript.rich_ui.transcript_state import Emission, Tag


@dataclass
class TextAccumulator:
    """Append-only buffer that emits its contents as one block on flush.

    Key behaviors:
    - append() ignores empty fragments and otherwise concatenates
    - flush() on an empty buffer emits nothing
    - flush() on a non-empty buffer returns the trimmed text tagged with
      the accumulator's role and resets the buffer

    Attributes:
        role: Tag given to emitted blocks (THINKING or ASSISTANT)
    """
    role: Tag
    _text: str = field(default="", init=False, repr=False)

    @property
    def text(self) -> str:
        """Get the buffered text (for testing/inspection)."""
        return self._text

    def append(self, chunk: Optional[str]) -> None:
        """Append a fragment; None and "" are ignored."""
        if not chunk:
            return
        self._text += chunk

    def is_empty(self) -> bool:
        """Check whether anything is buffered."""
        return not self._text

    def flush(self) -> Optional[Emission]:
        """Emit the buffered text and reset.

        Returns:
            An Emission with the trimmed text, or None if the buffer was empty
        """
        if not self._text:
            return None
        emission = Emission(tag=self.role, text=self._text.strip())
        self._text = ""
        return emission
