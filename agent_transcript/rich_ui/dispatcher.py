"""Event dispatcher: the state machine behind the transcript.

This module provides the TranscriptDispatcher class that decides, for each
decoded stream item, which accumulators to append to or flush and which
transcript blocks to emit immediately. It never writes output itself; it
returns Emissions for a renderer to print.

State carried across events:
    thinking  - buffered reasoning deltas
    assistant - buffered assistant prose
    last_assistant_was_marker - whether the previous assistant event carried
                                a model_call_id

Flush rules:
    thinking is flushed by thinking/completed and at end of stream.
    assistant is flushed by any tool_call, result or error event, by the
    first marker event after plain prose, and at end of stream.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from agent_transcript.constants import LABEL_MAX_LENGTH, PROMPT_MAX_LENGTH, SUMMARY_MAX_LENGTH
from agent_transcript.events.models import Event, EventKind, Passthrough, StreamItem
from agent_transcript.rich_ui.accumulator import TextAccumulator
from agent_transcript.rich_ui.extractor import dump, label_parts, summary_of, text_of, truncate
from agent_transcript.rich_ui.transcript_state import Emission, Tag


logger = logging.getLogger(__name__)


@dataclass
class TranscriptState:
    """Mutable state for one stream's processing.

    Attributes:
        thinking: Accumulator for thinking deltas
        assistant: Accumulator for plain assistant text
        last_assistant_was_marker: True when the most recent assistant event
            carried a model_call_id
    """
    thinking: TextAccumulator = field(default_factory=lambda: TextAccumulator(Tag.THINKING))
    assistant: TextAccumulator = field(default_factory=lambda: TextAccumulator(Tag.ASSISTANT))
    last_assistant_was_marker: bool = False


class TranscriptDispatcher:
    """Turns stream items into transcript emissions.

    One dispatcher owns one TranscriptState and serves exactly one stream.
    Call dispatch() for each item in arrival order and finish() once at end
    of stream.

    Example:
        dispatcher = TranscriptDispatcher()
        for item in items:
            renderer.render_all(dispatcher.dispatch(item))
        renderer.render_all(dispatcher.finish())
    """

    def __init__(
        self,
        label_width: int = LABEL_MAX_LENGTH,
        summary_width: int = SUMMARY_MAX_LENGTH,
        prompt_width: int = PROMPT_MAX_LENGTH,
    ) -> None:
        """Initialize the dispatcher with empty state.

        Args:
            label_width: Truncation bound for tool arguments
            summary_width: Truncation bound for tool results
            prompt_width: Truncation bound for prompt text
        """
        self._label_width = label_width
        self._summary_width = summary_width
        self._prompt_width = prompt_width
        self._state = TranscriptState()
        self._finished = False

    @property
    def state(self) -> TranscriptState:
        """Get the dispatcher state (for testing/inspection)."""
        return self._state

    def dispatch(self, item: StreamItem) -> List[Emission]:
        """Process one stream item.

        Args:
            item: A decoded Event or a Passthrough line

        Returns:
            Emissions in the order they must be rendered; may be empty
        """
        if isinstance(item, Passthrough):
            logger.debug("Passing through undecodable line: %.80s", item.line)
            return [Emission(tag=Tag.PASSTHROUGH, text=item.line)]

        handler = self._HANDLERS.get(item.kind)
        if handler is None:
            logger.debug("Ignoring event type=%r subtype=%r", item.type_name, item.subtype)
            return []

        out: List[Emission] = []
        handler(self, item, out)
        return out

    def dispatch_all(self, items: Iterable[StreamItem]) -> List[Emission]:
        """Process a finite sequence of items, including the final flush."""
        out: List[Emission] = []
        for item in items:
            out.extend(self.dispatch(item))
        out.extend(self.finish())
        return out

    def finish(self) -> List[Emission]:
        """Flush thinking then assistant at end of stream.

        Safe to call more than once; later calls emit nothing.
        """
        if self._finished:
            return []
        self._finished = True
        out: List[Emission] = []
        self._flush(self._state.thinking, out)
        self._flush(self._state.assistant, out)
        return out

    @staticmethod
    def _flush(accumulator: TextAccumulator, out: List[Emission]) -> None:
        emission = accumulator.flush()
        if emission is not None:
            out.append(emission)

    def _on_init(self, event: Event, out: List[Emission]) -> None:
        out.append(Emission(
            tag=Tag.INIT,
            text=event.model,
            detail=event.session_id,
            extra=event.cwd,
        ))

    def _on_prompt(self, event: Event, out: List[Emission]) -> None:
        out.append(Emission(tag=Tag.PROMPT, text=truncate(event.text, self._prompt_width)))

    def _on_thinking(self, event: Event, out: List[Emission]) -> None:
        if event.subtype == "delta":
            self._state.thinking.append(event.text)
        elif event.subtype == "completed":
            self._flush(self._state.thinking, out)

    def _on_assistant(self, event: Event, out: List[Emission]) -> None:
        state = self._state
        if event.has_marker:
            # First marker after plain prose closes that prose block;
            # the marker's own text is dropped
            if not state.last_assistant_was_marker:
                self._flush(state.assistant, out)
            state.last_assistant_was_marker = True
        else:
            state.assistant.append(event.text)
            state.last_assistant_was_marker = False

    def _on_tool_call(self, event: Event, out: List[Emission]) -> None:
        self._flush(self._state.assistant, out)
        tool_call = event.tool_call
        if tool_call is None:
            return

        if event.subtype == "started":
            verb, argument = label_parts(tool_call, self._label_width)
            out.append(Emission(tag=Tag.TOOL, text=verb, detail=argument))
        elif event.subtype == "completed":
            summary = summary_of(tool_call, self._summary_width)
            if summary:
                out.append(Emission(tag=Tag.TOOL_RESULT, text=summary))
            out.append(Emission(tag=Tag.SEPARATOR))

    def _on_result(self, event: Event, out: List[Emission]) -> None:
        self._flush(self._state.assistant, out)
        value = _first_set(event.result, event.message)
        # false, 0 and "" print nothing; empty objects still do
        if not value and not isinstance(value, (dict, list)):
            return
        text = text_of(value)
        if text:
            out.append(Emission(tag=Tag.RESULT, text=text))

    def _on_error(self, event: Event, out: List[Emission]) -> None:
        self._flush(self._state.assistant, out)
        value = _first_set(event.error, event.message)
        text = text_of(value) if value is not None else dump(event.raw)
        out.append(Emission(tag=Tag.ERROR, text=text))

    _HANDLERS = {
        EventKind.INIT: _on_init,
        EventKind.PROMPT: _on_prompt,
        EventKind.THINKING: _on_thinking,
        EventKind.ASSISTANT: _on_assistant,
        EventKind.TOOL_CALL: _on_tool_call,
        EventKind.RESULT: _on_result,
        EventKind.ERROR: _on_error,
    }


def _first_set(*values: object) -> Optional[object]:
    """First value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None
