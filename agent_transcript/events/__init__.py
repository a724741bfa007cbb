"""Stream-json event models and decoding for agent_transcript."""
from .models import (
    EventKind,
    Event,
    Passthrough,
    StreamItem,
    ToolKind,
    ToolCall,
    ReadToolCall,
    WriteToolCall,
    EditToolCall,
    ShellToolCall,
    SearchToolCall,
    GrepToolCall,
    GlobToolCall,
    DeleteToolCall,
    UnknownToolCall,
    ToolOutcome,
    ToolSuccess,
    ToolFailure,
)
from .parser import decode_line, parse_event, parse_tool_call, message_text

__all__ = [
    # Events
    'EventKind', 'Event', 'Passthrough', 'StreamItem',
    # Tool calls
    'ToolKind',
    'ToolCall',
    'ReadToolCall',
    'WriteToolCall',
    'EditToolCall',
    'ShellToolCall',
    'SearchToolCall',
    'GrepToolCall',
    'GlobToolCall',
    'DeleteToolCall',
    'UnknownToolCall',
    'ToolOutcome', 'ToolSuccess', 'ToolFailure',
    # Decoding
    'decode_line', 'parse_event', 'parse_tool_call', 'message_text',
]
