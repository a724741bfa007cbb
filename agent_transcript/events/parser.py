"""
Best-effort decoding of stream-json lines into events.

Nothing in this module raises on bad input. A line that is not a JSON object
becomes a Passthrough; missing or mistyped fields become empty strings or the
unknown tool variant.
"""

import json
from typing import Any, Dict, Optional, Tuple, Type

from .models import (
    DeleteToolCall,
    EditToolCall,
    Event,
    EventKind,
    GlobToolCall,
    GrepToolCall,
    Passthrough,
    ReadToolCall,
    SearchToolCall,
    ShellToolCall,
    StreamItem,
    ToolCall,
    ToolFailure,
    ToolKind,
    ToolOutcome,
    ToolSuccess,
    UnknownToolCall,
    WriteToolCall,
)


# Wire tag -> (variant, name of the primary argument in ``args``)
TOOL_VARIANTS: Dict[str, Tuple[Type[ToolCall], str]] = {
    ToolKind.READ.value: (ReadToolCall, "path"),
    ToolKind.WRITE.value: (WriteToolCall, "path"),
    ToolKind.EDIT.value: (EditToolCall, "path"),
    ToolKind.SHELL.value: (ShellToolCall, "command"),
    ToolKind.SEARCH.value: (SearchToolCall, "query"),
    ToolKind.GREP.value: (GrepToolCall, "pattern"),
    ToolKind.GLOB.value: (GlobToolCall, "pattern"),
    ToolKind.DELETE.value: (DeleteToolCall, "path"),
}


def _as_text(value: Any) -> str:
    """Coerce a scalar field to text, treating None as empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _is_set(value: Any) -> bool:
    """True for any value other than None, False and the empty string."""
    return value is not None and value is not False and value != ""


def message_text(message: Any) -> str:
    """
    Extract ``message.content[0].text``.

    Args:
        message: The ``message`` field of a record, of any shape

    Returns:
        The text of the first content block, or "" if any level is missing
    """
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    if not isinstance(content, list) or not content:
        return ""
    first = content[0]
    if not isinstance(first, dict):
        return ""
    return _as_text(first.get("text"))


def parse_outcome(inner: Dict[str, Any]) -> Optional[ToolOutcome]:
    """Read the optional ``result.success`` / ``result.error`` of a tool payload."""
    result = inner.get("result")
    if not isinstance(result, dict):
        return None
    success = result.get("success")
    if _is_set(success):
        return ToolSuccess(value=success)
    error = result.get("error")
    if _is_set(error):
        return ToolFailure(error=error)
    return None


def parse_tool_call(payload: Any) -> ToolCall:
    """
    Turn the ``tool_call`` object of an event into a ToolCall variant.

    The payload is keyed by a single tool tag such as ``readToolCall``. The
    first recognized tag holding an object wins; with no such tag the first
    key, if any, is kept on an UnknownToolCall.

    Args:
        payload: The ``tool_call`` field of a record

    Returns:
        The matching ToolCall variant, never None
    """
    if not isinstance(payload, dict) or not payload:
        return UnknownToolCall(tag=None)

    for tag, (variant, arg_name) in TOOL_VARIANTS.items():
        inner = payload.get(tag)
        if not isinstance(inner, dict):
            continue
        args = inner.get("args") if isinstance(inner.get("args"), dict) else {}
        return variant(
            outcome=parse_outcome(inner),
            **{arg_name: _as_text(args.get(arg_name))},
        )

    tag = next(iter(payload))
    inner = payload[tag] if isinstance(payload[tag], dict) else {}
    return UnknownToolCall(tag=_as_text(tag), outcome=parse_outcome(inner))


def parse_event(record: Dict[str, Any]) -> Event:
    """
    Map a decoded record onto an Event.

    Args:
        record: A JSON object from the stream

    Returns:
        An Event; records of an unrendered type get EventKind.IGNORED
    """
    type_name = _as_text(record.get("type"))
    subtype = _as_text(record.get("subtype"))
    common = {"type_name": type_name, "subtype": subtype, "raw": record}

    if type_name == "system":
        if subtype != "init":
            return Event(kind=EventKind.IGNORED, **common)
        return Event(
            kind=EventKind.INIT,
            model=_as_text(record.get("model")),
            session_id=_as_text(record.get("session_id")),
            cwd=_as_text(record.get("cwd")),
            **common,
        )

    if type_name == "user":
        return Event(kind=EventKind.PROMPT, text=message_text(record.get("message")), **common)

    if type_name == "thinking":
        return Event(kind=EventKind.THINKING, text=_as_text(record.get("text")), **common)

    if type_name == "assistant":
        return Event(
            kind=EventKind.ASSISTANT,
            text=message_text(record.get("message")),
            has_marker=bool(record.get("model_call_id")),
            **common,
        )

    if type_name == "tool_call":
        return Event(
            kind=EventKind.TOOL_CALL,
            tool_call=parse_tool_call(record.get("tool_call")),
            **common,
        )

    if type_name == "result":
        return Event(
            kind=EventKind.RESULT,
            result=record.get("result"),
            message=record.get("message"),
            **common,
        )

    if type_name == "error":
        return Event(
            kind=EventKind.ERROR,
            error=record.get("error"),
            message=record.get("message"),
            **common,
        )

    return Event(kind=EventKind.IGNORED, **common)


def decode_line(line: str) -> StreamItem:
    """
    Decode one input line.

    Args:
        line: A raw, non-blank input line

    Returns:
        An Event for JSON objects, a Passthrough for anything else
    """
    try:
        record = json.loads(line)
    except (ValueError, RecursionError):
        return Passthrough(line=line)

    if not isinstance(record, dict):
        return Passthrough(line=line)

    return parse_event(record)
