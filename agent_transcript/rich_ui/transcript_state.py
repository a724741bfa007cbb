"""Emission models passed from the dispatcher to the renderer.

This module defines the Tag enum naming every kind of transcript block and
the Emission dataclass carrying one block's text.
"""

from dataclasses import dataclass
from enum import Enum


class Tag(Enum):
    """Kinds of transcript output, valued by the label printed in brackets."""
    INIT = "INIT"
    PROMPT = "PROMPT"
    THINKING = "THINKING"
    ASSISTANT = "ASSISTANT"
    TOOL = "TOOL"
    TOOL_RESULT = "TOOL_RESULT"  # indented line under a TOOL line, no label
    SEPARATOR = "SEPARATOR"      # blank line closing a tool block, no label
    RESULT = "RESULT"
    ERROR = "ERROR"
    PASSTHROUGH = "PASSTHROUGH"  # raw undecodable input, no label

    @property
    def label(self) -> str:
        """Bracketed label as printed, e.g. ``[TOOL]``."""
        return f"[{self.value}]"


@dataclass(frozen=True)
class Emission:
    """One block of transcript output.

    Attributes:
        tag: What kind of block this is
        text: The block's main text (already truncated where applicable).
            For TOOL this is the verb, for INIT the model name.
        detail: Secondary text styled separately by the renderer: the tool
            argument for TOOL, the session id for INIT
        extra: The working directory for INIT, unused otherwise
    """
    tag: Tag
    text: str = ""
    detail: str = ""
    extra: str = ""
