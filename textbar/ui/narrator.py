"""
BarNarrator — live single-line bar driver.

Wraps rich.live.Live and repaints one line each time the value moves.
The Bar stays pure; this is the only place that touches the terminal
or the clock.

Usage:
    with BarNarrator(console, Bar().with_text("testing")) as narrator:
        narrator.run()                 # 10%, 20%, … 100%

    with BarNarrator(console, bar) as narrator:
        for done in work():
            narrator.advance(done, text=f"{done} files")
"""

import time

from rich.console import Console
from rich.live import Live

from textbar.bar import Bar
from textbar.ui.progress import render_styled


class BarNarrator:
    """
    Context manager for live bar feedback.

    The final frame is left on screen when the context exits.
    """

    def __init__(self, console: Console, bar: Bar, steps: int = 10, delay: float = 0.1) -> None:
        self.console = console
        self.bar = bar
        self.steps = steps
        self.delay = delay

        self._live = Live(
            console=console,
            refresh_per_second=12,
            transient=False,
        )

    # ── Context manager ───────────────────────────────────────────────────────

    def __enter__(self) -> "BarNarrator":
        self._live.__enter__()
        self._live.update(render_styled(self.bar))
        return self

    def __exit__(self, *args) -> None:
        try:
            self._live.update(render_styled(self.bar), refresh=True)
        finally:
            self._live.__exit__(*args)

    # ── Public API ────────────────────────────────────────────────────────────

    def advance(self, value: float, text: str | None = None) -> Bar:
        """
        Move the bar to value and repaint.

        Raises OutOfRangeError if value exceeds the bar's max; the
        displayed bar is left unchanged in that case.
        """
        bar = self.bar.with_value(value)
        if text is not None:
            bar = bar.with_text(text)
        self.bar = bar
        self._live.update(render_styled(self.bar))
        return self.bar

    def run(self) -> Bar:
        """Step evenly from max/steps up to max, pausing delay between frames."""
        maximum = self.bar.max
        for i in range(1, self.steps + 1):
            # last frame lands on max exactly, not on a rounded quotient
            self.advance(maximum if i == self.steps else maximum * i / self.steps)
            if self.delay:
                time.sleep(self.delay)
        return self.bar
