"""
textbar — entry point.

CLI flags, config merge, one-shot render or live animation.
"""

import logging
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from textbar import __version__
from textbar.bar import Bar
from textbar.config import bar_from_config, load_config
from textbar.errors import OutOfRangeError
from textbar.ui.progress import render_styled
from textbar.ui.theme import TEXTBAR_THEME


# ── Consoles (shared across the tool) ─────────────────────────────────────────

console = Console(theme=TEXTBAR_THEME)
err_console = Console(theme=TEXTBAR_THEME, stderr=True)


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="textbar", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="textbar")
# State
@click.option("--value", type=float, default=None,
              help="Current progress value (default 0). Not allowed with --animate.")
@click.option("--text", default=None, help="Trailing annotation shown after the bar.")
# Dimensions
@click.option("--max", "maximum", type=float, default=None, help="Maximum value (default 100).")
@click.option("--width", type=int, default=None, help="Number of body cells (default 10).")
# Tokens
@click.option("--start", default=None, help="Token before the bar body.")
@click.option("--end", default=None, help="Token after the bar body.")
@click.option("--filled", default=None, help="Character for completed cells.")
@click.option("--empty", default=None, help="Character for remaining cells.")
# Animation
@click.option("--animate", is_flag=True, default=False, help="Step the bar from 0 to max on one live line.")
@click.option("--steps", type=click.IntRange(min=1), default=10, show_default=True,
              help="With --animate: number of frames.")
@click.option("--delay", type=click.FloatRange(min=0), default=0.1, show_default=True,
              help="With --animate: seconds between frames.")
# Output
@click.option("--plain", is_flag=True, default=False, help="Print without color, even on a terminal.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(
    value: Optional[float],
    text: Optional[str],
    maximum: Optional[float],
    width: Optional[int],
    start: Optional[str],
    end: Optional[str],
    filled: Optional[str],
    empty: Optional[str],
    animate: bool,
    steps: int,
    delay: float,
    plain: bool,
    verbose: bool,
) -> None:
    """Render a single-line text progress bar.

    Defaults come from ~/.config/textbar/config.toml when present;
    flags override the file.

    \b
    Examples:
      textbar --value 50 --text updating     |█████░░░░░| updating
      textbar --animate --text testing
    """
    if verbose:
        _setup_logging()

    # ── Validate --value is not combined with --animate ───────────────────────
    if animate and value is not None:
        err_console.print("[error]Error:[/error] --value cannot be used with --animate.", highlight=False)
        raise SystemExit(1)

    bar = _build_bar(
        maximum=maximum, width=width, start=start, end=end,
        filled=filled, empty=empty, text=text,
    )

    try:
        # ── Live animation ────────────────────────────────────────────────────
        if animate:
            _animate(bar, steps=steps, delay=delay)
            return

        # ── One-shot render ───────────────────────────────────────────────────
        bar = bar.with_value(value if value is not None else 0.0)
    except OutOfRangeError as exc:
        err_console.print(f"[error]Error:[/error] {exc}", highlight=False)
        raise SystemExit(1)

    if plain or not console.is_terminal:
        click.echo(bar.render())
    else:
        console.print(render_styled(bar))


# ── Helpers ───────────────────────────────────────────────────────────────────

def _build_bar(**flags) -> Bar:
    """Merge built-in defaults, then the config file, then CLI flags."""
    bar = bar_from_config(load_config())

    if flags["maximum"] is not None:
        bar = bar.with_max(flags["maximum"])
    if flags["width"] is not None:
        bar = bar.with_width(flags["width"])
    if flags["start"] is not None:
        bar = bar.with_start(flags["start"])
    if flags["end"] is not None:
        bar = bar.with_end(flags["end"])
    if flags["filled"] is not None:
        try:
            bar = bar.with_filled(flags["filled"])
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="'--filled'") from exc
    if flags["empty"] is not None:
        try:
            bar = bar.with_empty(flags["empty"])
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="'--empty'") from exc
    if flags["text"] is not None:
        bar = bar.with_text(flags["text"])

    return bar


def _animate(bar: Bar, steps: int, delay: float) -> None:
    """Drive the bar from 0 to max on one live line."""
    from textbar.ui.narrator import BarNarrator
    try:
        with BarNarrator(console, bar, steps=steps, delay=delay) as narrator:
            narrator.run()
    except KeyboardInterrupt:
        console.print("\n  [dim]Cancelled.[/dim]")


def _setup_logging() -> None:
    """Route textbar's debug logging through rich on stderr."""
    logger = logging.getLogger("textbar")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


# ── Entry ─────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
