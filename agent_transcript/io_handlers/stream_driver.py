"""
Stream driver for agent_transcript.

Pulls raw lines from a text stream, decodes them, and hands them through the
dispatcher to the renderer. The final flush always runs, even when the loop
is interrupted.
"""
import logging
from typing import IO, Iterable, Iterator, Optional

from ..events.parser import decode_line
from ..rich_ui.dispatcher import TranscriptDispatcher
from ..rich_ui.renderer import TranscriptRenderer


logger = logging.getLogger(__name__)


def iter_lines(stream: IO[str]) -> Iterator[str]:
    """
    Yield lines from a text stream with their line terminator removed.

    The generator is lazy and consumes the stream, so it can only be
    iterated once.

    Args:
        stream: A text-mode file object such as sys.stdin

    Yields:
        Each line without its trailing "\\n" or "\\r\\n"
    """
    for raw in stream:
        if raw.endswith("\r\n"):
            yield raw[:-2]
        elif raw.endswith("\n"):
            yield raw[:-1]
        else:
            yield raw


def run_stream(
    lines: Iterable[str],
    renderer: TranscriptRenderer,
    dispatcher: Optional[TranscriptDispatcher] = None,
) -> int:
    """
    Render a whole stream of lines.

    Blank lines are skipped. Each other line is decoded, dispatched and its
    emissions rendered before the next line is read.

    Args:
        lines: Raw input lines, e.g. from iter_lines()
        renderer: Where transcript blocks are written
        dispatcher: State machine to use; a fresh one when None

    Returns:
        Number of non-blank lines processed
    """
    dispatcher = dispatcher or TranscriptDispatcher()
    count = 0
    try:
        for line in lines:
            if not line.strip():
                continue
            count += 1
            renderer.render_all(dispatcher.dispatch(decode_line(line)))
    finally:
        renderer.render_all(dispatcher.finish())
        logger.debug("Stream ended after %d records", count)
    return count
