"""
Event models for the transcript renderer.

This module defines the data structures that represent decoded stream-json
records before they are dispatched: the event kinds, the tool call sum type
with one variant per recognized tool and its outcome.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


class EventKind(Enum):
    """Kinds of events found in an agent session stream."""
    INIT = "init"
    PROMPT = "prompt"
    THINKING = "thinking"
    ASSISTANT = "assistant"
    TOOL_CALL = "tool_call"
    RESULT = "result"
    ERROR = "error"
    IGNORED = "ignored"


class ToolKind(Enum):
    """Recognized tool call variants, valued by their wire tag."""
    READ = "readToolCall"
    WRITE = "writeToolCall"
    EDIT = "editToolCall"
    SHELL = "shellToolCall"
    SEARCH = "searchToolCall"
    GREP = "grepToolCall"
    GLOB = "globToolCall"
    DELETE = "deleteToolCall"
    UNKNOWN = "unknown"


@dataclass
class ToolSuccess:
    """
    Successful tool outcome.

    Attributes:
        value: The raw ``result.success`` payload. Usually an object with a
            ``content`` field, sometimes a bare string, sometimes anything.
    """
    value: Any


@dataclass
class ToolFailure:
    """
    Failed tool outcome.

    Attributes:
        error: The raw ``result.error`` payload describing the failure
    """
    error: Any


ToolOutcome = Union[ToolSuccess, ToolFailure]


@dataclass
class ToolCall:
    """
    Base model for all tool calls.

    Attributes:
        kind: Which tool variant this is
        outcome: Result of the call, None while the call is still running
    """
    kind: ToolKind = field(default=ToolKind.UNKNOWN, init=False)
    outcome: Optional[ToolOutcome] = None


@dataclass
class ReadToolCall(ToolCall):
    """File read."""
    path: str = ""
    kind: ToolKind = field(default=ToolKind.READ, init=False)


@dataclass
class WriteToolCall(ToolCall):
    """File write."""
    path: str = ""
    kind: ToolKind = field(default=ToolKind.WRITE, init=False)


@dataclass
class EditToolCall(ToolCall):
    """File edit."""
    path: str = ""
    kind: ToolKind = field(default=ToolKind.EDIT, init=False)


@dataclass
class ShellToolCall(ToolCall):
    """Shell command execution."""
    command: str = ""
    kind: ToolKind = field(default=ToolKind.SHELL, init=False)


@dataclass
class SearchToolCall(ToolCall):
    """Semantic or web search."""
    query: str = ""
    kind: ToolKind = field(default=ToolKind.SEARCH, init=False)


@dataclass
class GrepToolCall(ToolCall):
    """Content search by pattern."""
    pattern: str = ""
    kind: ToolKind = field(default=ToolKind.GREP, init=False)


@dataclass
class GlobToolCall(ToolCall):
    """File name match by glob pattern."""
    pattern: str = ""
    kind: ToolKind = field(default=ToolKind.GLOB, init=False)


@dataclass
class DeleteToolCall(ToolCall):
    """File deletion."""
    path: str = ""
    kind: ToolKind = field(default=ToolKind.DELETE, init=False)


@dataclass
class UnknownToolCall(ToolCall):
    """
    A tool call whose tag is not recognized.

    Attributes:
        tag: The raw tag name, None if the payload carried no tag at all
    """
    tag: Optional[str] = None


@dataclass
class Event:
    """
    A decoded stream-json record.

    Only the fields the dispatcher consumes are lifted out of the record;
    everything else stays in ``raw``.

    Attributes:
        kind: The event kind
        type_name: The record's ``type`` field as it appeared on the wire
        subtype: The record's ``subtype`` field, empty if absent
        text: Prose carried by prompt, thinking and assistant events
        model: Model name (init)
        session_id: Session identifier (init)
        cwd: Working directory (init)
        has_marker: True when an assistant event carries a ``model_call_id``
        tool_call: Parsed tool call (tool_call events)
        result: Top-level ``result`` value (result events)
        message: Top-level ``message`` value (result and error events)
        error: Top-level ``error`` value (error events)
        raw: The whole decoded record
    """
    kind: EventKind
    type_name: str = ""
    subtype: str = ""
    text: str = ""
    model: str = ""
    session_id: str = ""
    cwd: str = ""
    has_marker: bool = False
    tool_call: Optional[ToolCall] = None
    result: Any = None
    message: Any = None
    error: Any = None
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Passthrough:
    """
    An input line that could not be decoded as a record.

    Attributes:
        line: The raw line, emitted unchanged
    """
    line: str


StreamItem = Union[Event, Passthrough]
