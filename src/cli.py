"""Command-line entry point: runs the demonstration transcript.

No arguments are required and the command always exits 0. Options only
affect diagnostics and coloring, never the transcript's content.
"""
import click

import theme
from config import COLOR_MODES, get_settings, parse_log_level
from demo import run_demo
from logging_setup import setup_logging

_SETTINGS = get_settings()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--log-level",
    default=_SETTINGS.log_level,
    show_default=True,
    help="Diagnostic log level written to stderr (DEBUG, INFO, WARNING, ...).",
)
@click.option(
    "--color",
    "color_mode",
    type=click.Choice(COLOR_MODES, case_sensitive=False),
    default=_SETTINGS.color,
    show_default=True,
    help="Colored output: detect the terminal, or force it on or off.",
)
def main(log_level: str, color_mode: str) -> None:
    """Run the Smart Task Manager demonstration."""
    setup_logging(parse_log_level(log_level))
    mode = color_mode.lower()
    if mode != "auto":
        theme.set_enabled(mode == "always")
    run_demo(click.echo)


if __name__ == '__main__':  # pragma: no cover
    main()
