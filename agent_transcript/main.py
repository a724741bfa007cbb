"""
Main entry point for agent_transcript.
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION, COLOR_MODES


logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION,
        epilog="Reads stream-json events from standard input, one per line.",
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    parser.add_argument(
        "-t", "--theme",
        type=str,
        help="Color theme (default, dark, solarized)"
    )

    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        help="When to emit ANSI colors (default: auto)"
    )

    parser.add_argument(
        "--label-width",
        type=_positive_int,
        help="Maximum length of tool arguments in [TOOL] lines"
    )

    parser.add_argument(
        "--summary-width",
        type=_positive_int,
        help="Maximum length of tool result summaries"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        help="Diagnostic log level on stderr (default: WARNING)"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to config file"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    from .config import ConfigError, get_config
    from .io_handlers.stream_driver import iter_lines, run_stream
    from .rich_ui.dispatcher import TranscriptDispatcher
    from .rich_ui.renderer import TranscriptRenderer, create_console
    from .rich_ui.theme import ThemeManager
    from .utils import setup_logging

    config = get_config(args.config)
    config.update_ui(theme=args.theme, color=args.color)
    config.update_render(label_width=args.label_width, summary_width=args.summary_width)
    config.set_log_level(args.log_level)

    try:
        config.validate()
    except ConfigError as e:
        print(f"{APP_NAME}: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)

    themes = ThemeManager()
    if not themes.set_theme(config.ui.theme):
        logger.warning(
            "Unknown theme %r, using default (available: %s)",
            config.ui.theme, ", ".join(themes.available_themes),
        )

    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(encoding="utf-8", errors="replace")

    console = create_console(color=config.ui.color, theme_manager=themes)
    renderer = TranscriptRenderer(console)
    dispatcher = TranscriptDispatcher(
        label_width=config.render.label_width,
        summary_width=config.render.summary_width,
        prompt_width=config.render.prompt_width,
    )

    try:
        run_stream(iter_lines(sys.stdin), renderer, dispatcher)
        return 0
    except KeyboardInterrupt:
        return 0
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); silence the flush at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0
    except Exception as e:
        logger.debug("Fatal error while rendering", exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
