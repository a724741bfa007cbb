"""Rich UI components for agent_transcript."""
from .transcript_state import Tag, Emission
from .accumulator import TextAccumulator
from .extractor import truncate, label_of, label_parts, summary_of, text_of
from .dispatcher import TranscriptDispatcher, TranscriptState
from .theme import ThemeManager, Theme, TagStyles
from .renderer import TranscriptRenderer, create_console

__all__ = [
    # Emissions
    'Tag', 'Emission',
    # Accumulation and dispatch
    'TextAccumulator',
    'TranscriptDispatcher', 'TranscriptState',
    # Text extraction
    'truncate', 'label_of', 'label_parts', 'summary_of', 'text_of',
    # Rendering
    'ThemeManager', 'Theme', 'TagStyles',
    'TranscriptRenderer', 'create_console',
]
