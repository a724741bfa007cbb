"""
Tests for TranscriptRenderer output and whole-stream scenarios.

Output is captured from a colorless console so the transcript text can be
compared exactly.
"""

import io
import json

import pytest

from agent_transcript.io_handlers.stream_driver import run_stream
from agent_transcript.rich_ui.renderer import TranscriptRenderer, create_console
from agent_transcript.rich_ui.theme import ThemeManager
from agent_transcript.rich_ui.transcript_state import Emission, Tag


def make_renderer(color: str = "never"):
    buffer = io.StringIO()
    renderer = TranscriptRenderer(create_console(file=buffer, color=color))
    return renderer, buffer


def render_lines(lines: list[str]) -> str:
    renderer, buffer = make_renderer()
    run_stream(lines, renderer)
    return buffer.getvalue()


@pytest.mark.parametrize("tag", [Tag.PROMPT, Tag.THINKING, Tag.ASSISTANT, Tag.RESULT, Tag.ERROR])
def test_labeled_block_is_followed_by_blank_line(tag):
    renderer, buffer = make_renderer()
    renderer.render(Emission(tag=tag, text="hello"))

    assert buffer.getvalue() == f"[{tag.value}] hello\n\n"


def test_init_renders_two_line_header():
    renderer, buffer = make_renderer()
    renderer.render(Emission(tag=Tag.INIT, text="gpt-5", detail="abc", extra="/repo"))

    assert buffer.getvalue() == (
        "[INIT] model=gpt-5 session=abc\n"
        "       cwd=/repo\n"
        "\n"
    )


def test_tool_block_has_no_blank_line_until_separator():
    renderer, buffer = make_renderer()
    renderer.render_all([
        Emission(tag=Tag.TOOL, text="Read", detail="/a.txt"),
        Emission(tag=Tag.TOOL_RESULT, text="hello"),
        Emission(tag=Tag.SEPARATOR),
    ])

    assert buffer.getvalue() == "[TOOL] Read /a.txt\n  → hello\n\n"


def test_tool_without_argument():
    renderer, buffer = make_renderer()
    renderer.render(Emission(tag=Tag.TOOL, text="mcpToolCall"))

    assert buffer.getvalue() == "[TOOL] mcpToolCall\n"


def test_passthrough_is_written_unchanged():
    raw = "\x1b[31mraw [bold]text[/bold] :smile:\x1b[0m"
    renderer, buffer = make_renderer(color="always")
    renderer.render(Emission(tag=Tag.PASSTHROUGH, text=raw))

    assert buffer.getvalue() == raw + "\n"


def test_event_text_is_not_interpreted_as_markup():
    renderer, buffer = make_renderer()
    renderer.render(Emission(tag=Tag.ASSISTANT, text="[bold]not bold[/bold] :smile:"))

    assert buffer.getvalue() == "[ASSISTANT] [bold]not bold[/bold] :smile:\n\n"


def test_long_lines_are_not_wrapped():
    text = "word " * 60
    renderer, buffer = make_renderer()
    renderer.render(Emission(tag=Tag.RESULT, text=text.strip()))

    assert buffer.getvalue() == f"[RESULT] {text.strip()}\n\n"


def test_color_always_emits_ansi_codes(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")
    renderer, buffer = make_renderer(color="always")
    renderer.render(Emission(tag=Tag.ERROR, text="boom"))

    output = buffer.getvalue()
    assert "\x1b[" in output
    assert "[ERROR]" in output
    assert "boom" in output


@pytest.mark.parametrize("theme_name", ["default", "dark", "solarized"])
def test_every_builtin_theme_renders(theme_name):
    themes = ThemeManager()
    assert themes.set_theme(theme_name)
    buffer = io.StringIO()
    renderer = TranscriptRenderer(create_console(file=buffer, color="always", theme_manager=themes))

    renderer.render(Emission(tag=Tag.TOOL, text="Read", detail="/a.txt"))

    assert "[TOOL]" in buffer.getvalue()


def test_unknown_theme_is_rejected():
    assert ThemeManager().set_theme("neon") is False


def test_scenario_thinking_deltas_make_one_block():
    output = render_lines([
        '{"type":"thinking","subtype":"delta","text":"foo "}',
        '{"type":"thinking","subtype":"delta","text":"bar"}',
        '{"type":"thinking","subtype":"completed"}',
    ])

    assert output == "[THINKING] foo bar\n\n"
    assert output.count("[THINKING]") == 1


def test_scenario_read_tool_started():
    output = render_lines([
        '{"type":"tool_call","subtype":"started","tool_call":{"readToolCall":{"args":{"path":"/a.txt"}}}}',
    ])

    assert output == "[TOOL] Read /a.txt\n"


def test_scenario_unparseable_line_passes_through():
    assert render_lines(["not json"]) == "not json\n"


def test_full_session_transcript():
    events = [
        {"type": "system", "subtype": "init", "model": "gpt-5", "session_id": "s1", "cwd": "/repo"},
        {"type": "user", "message": {"role": "user", "content": [{"type": "text", "text": "Fix the bug"}]}},
        {"type": "thinking", "subtype": "delta", "text": "Need to read "},
        {"type": "thinking", "subtype": "delta", "text": "the file."},
        {"type": "thinking", "subtype": "completed"},
        {"type": "assistant", "message": {"role": "assistant", "content": [{"type": "text", "text": "Reading "}]}},
        {"type": "assistant", "message": {"role": "assistant", "content": [{"type": "text", "text": "main.py."}]}},
        {"type": "assistant", "model_call_id": "m1", "message": {"role": "assistant", "content": [{"type": "text", "text": "Reading main.py."}]}},
        {"type": "tool_call", "subtype": "started", "tool_call": {"readToolCall": {"args": {"path": "main.py"}}}},
        {"type": "tool_call", "subtype": "completed", "tool_call": {"readToolCall": {"args": {"path": "main.py"}, "result": {"success": {"content": "print('hi')\n"}}}}},
        {"type": "tool_call", "subtype": "started", "tool_call": {"shellToolCall": {"args": {"command": "python main.py"}}}},
        {"type": "tool_call", "subtype": "completed", "tool_call": {"shellToolCall": {"args": {"command": "python main.py"}, "result": {"error": "exit code 1"}}}},
        {"type": "assistant", "message": {"role": "assistant", "content": [{"type": "text", "text": "Fixed."}]}},
        {"type": "result", "subtype": "success", "result": "Done"},
    ]
    lines = [json.dumps(e) for e in events]
    lines.insert(3, "")
    lines.append("stray log line")

    assert render_lines(lines) == (
        "[INIT] model=gpt-5 session=s1\n"
        "       cwd=/repo\n"
        "\n"
        "[PROMPT] Fix the bug\n"
        "\n"
        "[THINKING] Need to read the file.\n"
        "\n"
        "[ASSISTANT] Reading main.py.\n"
        "\n"
        "[TOOL] Read main.py\n"
        "  → print('hi')\n"
        "\n"
        "[TOOL] Shell python main.py\n"
        "  → ERROR: exit code 1\n"
        "\n"
        "[ASSISTANT] Fixed.\n"
        "\n"
        "[RESULT] Done\n"
        "\n"
        "stray log line\n"
    )


def test_end_of_stream_flushes_thinking_then_assistant():
    output = render_lines([
        '{"type":"thinking","subtype":"delta","text":"hmm"}',
        '{"type":"assistant","message":{"content":[{"type":"text","text":"answer"}]}}',
    ])

    assert output == "[THINKING] hmm\n\n[ASSISTANT] answer\n\n"


def test_event_text_control_characters_are_kept():
    delta = "col1\tcol2\r\nnext\x08bs\x0bvt\x0cff"
    output = render_lines([
        json.dumps({"type": "assistant", "message": {"content": [{"type": "text", "text": delta}]}}),
    ])

    assert output == f"[ASSISTANT] {delta}\n\n"


def test_tool_argument_tabs_are_kept():
    output = render_lines([
        json.dumps({"type": "tool_call", "subtype": "started",
                    "tool_call": {"grepToolCall": {"args": {"pattern": "a\tb"}}}}),
        json.dumps({"type": "tool_call", "subtype": "completed",
                    "tool_call": {"grepToolCall": {"args": {"pattern": "a\tb"},
                                                   "result": {"success": {"content": "x\ty"}}}}}),
    ])

    assert output == "[TOOL] Grep a\tb\n  → x\ty\n\n"


def test_styled_text_is_written_unchanged_inside_color_codes(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")
    renderer, buffer = make_renderer(color="always")
    renderer.render(Emission(tag=Tag.TOOL, text="Shell", detail="printf 'a\tb'"))

    output = buffer.getvalue()
    assert "\x1b[" in output
    assert "printf 'a\tb'" in output
    assert output.endswith("\n")
