"""
Property-based tests for TextAccumulator.

Tests flush behavior and independence of the thinking and assistant buffers.
"""

from hypothesis import given, settings, strategies as st

from agent_transcript.rich_ui.accumulator import TextAccumulator
from agent_transcript.rich_ui.transcript_state import Emission, Tag


# **Feature: accumulators, Property 1: Flush idempotence**
@settings(max_examples=100)
@given(chunks=st.lists(st.text(), max_size=10))
def test_second_flush_never_emits(chunks: list[str]):
    """
    For any sequence of appended chunks, flushing twice in a row emits at
    most once, and never for an empty buffer.
    """
    acc = TextAccumulator(Tag.THINKING)
    for chunk in chunks:
        acc.append(chunk)

    first = acc.flush()
    second = acc.flush()

    if "".join(chunks):
        assert first == Emission(tag=Tag.THINKING, text="".join(chunks).strip())
    else:
        assert first is None
    assert second is None
    assert acc.is_empty()


# **Feature: accumulators, Property 2: Concatenation preserves order**
@settings(max_examples=100)
@given(chunks=st.lists(st.text(min_size=1), min_size=1, max_size=10))
def test_append_concatenates_in_order(chunks: list[str]):
    """Buffered text is exactly the appended chunks, in order."""
    acc = TextAccumulator(Tag.ASSISTANT)
    for chunk in chunks:
        acc.append(chunk)

    assert acc.text == "".join(chunks)
    assert not acc.is_empty()


def test_new_accumulator_is_empty_and_flush_is_noop():
    acc = TextAccumulator(Tag.ASSISTANT)

    assert acc.is_empty()
    assert acc.flush() is None


def test_append_ignores_none_and_empty():
    acc = TextAccumulator(Tag.ASSISTANT)
    acc.append(None)
    acc.append("")

    assert acc.is_empty()


def test_flush_trims_and_tags_with_role():
    acc = TextAccumulator(Tag.ASSISTANT)
    acc.append("  Hello, ")
    acc.append("world!\n")

    emission = acc.flush()

    assert emission.tag is Tag.ASSISTANT
    assert emission.text == "Hello, world!"
    assert acc.text == ""


def test_whitespace_only_buffer_still_flushes_empty_block():
    acc = TextAccumulator(Tag.THINKING)
    acc.append("   ")

    assert acc.flush() == Emission(tag=Tag.THINKING, text="")


def test_accumulators_are_independent():
    thinking = TextAccumulator(Tag.THINKING)
    assistant = TextAccumulator(Tag.ASSISTANT)
    thinking.append("pondering")
    assistant.append("answer")

    assert assistant.flush().text == "answer"
    assert thinking.text == "pondering"
    assert thinking.flush().text == "pondering"
