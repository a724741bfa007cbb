"""I/O handlers for agent_transcript."""
from .stream_driver import iter_lines, run_stream

__all__ = ['iter_lines', 'run_stream']
