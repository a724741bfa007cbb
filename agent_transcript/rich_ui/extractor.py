"""Text extraction for tool calls and free-form event fields.

Pure functions that pull a short, single-line, human-readable string out of
tool call payloads and loosely typed event fields. None of them raise.
"""

import json
from typing import Any, Dict, Tuple, Type

from agent_transcript.constants import (
    ELLIPSIS,
    ERROR_PREFIX,
    LABEL_MAX_LENGTH,
    SUCCESS_PLACEHOLDER,
    SUMMARY_MAX_LENGTH,
    UNKNOWN_TOOL_LABEL,
)
from agent_transcript.events.models import (
    DeleteToolCall,
    EditToolCall,
    GlobToolCall,
    GrepToolCall,
    ReadToolCall,
    SearchToolCall,
    ShellToolCall,
    ToolCall,
    ToolFailure,
    ToolSuccess,
    UnknownToolCall,
    WriteToolCall,
)
from agent_transcript.events.parser import message_text


# Variant -> (verb, attribute holding the primary argument)
TOOL_VERBS: Dict[Type[ToolCall], Tuple[str, str]] = {
    ReadToolCall: ("Read", "path"),
    WriteToolCall: ("Write", "path"),
    EditToolCall: ("Edit", "path"),
    ShellToolCall: ("Shell", "command"),
    SearchToolCall: ("Search", "query"),
    GrepToolCall: ("Grep", "pattern"),
    GlobToolCall: ("Glob", "pattern"),
    DeleteToolCall: ("Delete", "path"),
}


def truncate(text: Any, max_length: int) -> str:
    """
    Collapse text onto one line and bound its length.

    Newlines become spaces, surrounding whitespace is trimmed, and anything
    beyond ``max_length`` characters is cut and replaced by an ellipsis.

    Args:
        text: The value to shorten; non-strings are converted with str()
        max_length: Maximum number of characters kept before the ellipsis

    Returns:
        A string of at most ``max_length + 1`` characters, "" for empty input
    """
    if text is None or text == "":
        return ""
    if not isinstance(text, str):
        text = str(text)
    one_line = text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ").strip()
    if len(one_line) > max_length:
        return one_line[:max(max_length, 0)] + ELLIPSIS
    return one_line


def label_parts(tool_call: ToolCall, max_length: int = LABEL_MAX_LENGTH) -> Tuple[str, str]:
    """
    Split a tool call label into its verb and its primary argument.

    Args:
        tool_call: The tool call to describe
        max_length: Bound applied to the argument

    Returns:
        ``(verb, argument)``; unknown tools yield ``(tag, "")``
    """
    entry = TOOL_VERBS.get(type(tool_call))
    if entry is not None:
        verb, attr = entry
        return verb, truncate(getattr(tool_call, attr, ""), max_length)

    if isinstance(tool_call, UnknownToolCall) and tool_call.tag:
        return tool_call.tag, ""
    return UNKNOWN_TOOL_LABEL, ""


def label_of(tool_call: ToolCall, max_length: int = LABEL_MAX_LENGTH) -> str:
    """Verb plus primary argument, e.g. ``Read /a.txt``."""
    verb, argument = label_parts(tool_call, max_length)
    return f"{verb} {argument}" if argument else verb


def summary_of(tool_call: ToolCall, max_length: int = SUMMARY_MAX_LENGTH) -> str:
    """
    Summarize the outcome of a tool call.

    Args:
        tool_call: A completed (or still running) tool call
        max_length: Bound applied to the summary text

    Returns:
        "" without an outcome, the textual content or "ok" on success,
        "ERROR: <description>" on failure
    """
    outcome = tool_call.outcome
    if isinstance(outcome, ToolSuccess):
        value = outcome.value
        if isinstance(value, dict) and isinstance(value.get("content"), str):
            return truncate(value["content"], max_length)
        if isinstance(value, str):
            return truncate(value, max_length)
        return SUCCESS_PLACEHOLDER
    if isinstance(outcome, ToolFailure):
        return ERROR_PREFIX + truncate(str(outcome.error), max_length)
    return ""


def text_of(value: Any) -> str:
    """
    Best-effort readable text for a loosely typed result/error field.

    Strings are returned as is. Message objects are read through
    ``content[0].text``, error objects through their ``message`` field.
    Anything else is dumped as compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        text = message_text(value)
        if text:
            return text
        if isinstance(value.get("message"), str):
            return value["message"]
    return dump(value)


def dump(value: Any) -> str:
    """Compact JSON rendering used as the last-resort fallback."""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    except (TypeError, ValueError):
        return repr(value)
