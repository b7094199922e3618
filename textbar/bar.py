"""
Bar — the progress bar configuration and renderer.

A Bar is an immutable value. Every with_* call returns a new Bar and
leaves the receiver untouched, so bars can be chained, shared across
threads, and compared by value.

Output:  |█████░░░░░| updating
"""

import logging
import math
from dataclasses import dataclass, replace

from textbar.errors import OutOfRangeError

logger = logging.getLogger(__name__)


# ── Defaults ──────────────────────────────────────────────────────────────────

DEFAULT_START = "|"
DEFAULT_END = "|"
DEFAULT_FILLED = "█"
DEFAULT_EMPTY = "░"
DEFAULT_MAX = 100.0
DEFAULT_WIDTH = 10


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Bar:
    # Tokens
    start: str = DEFAULT_START          # before the body
    end: str = DEFAULT_END              # after the body
    filled: str = DEFAULT_FILLED        # one character per completed cell
    empty: str = DEFAULT_EMPTY          # one character per remaining cell

    # Dimensions
    max: float = DEFAULT_MAX
    width: int = DEFAULT_WIDTH          # body cells; not validated

    # State
    value: float = 0.0
    text: str = ""                      # trailing annotation

    # ── Setters ───────────────────────────────────────────────────────────────

    def with_start(self, token: str) -> "Bar":
        """Set the start token."""
        return replace(self, start=token)

    def with_end(self, token: str) -> "Bar":
        """Set the end token."""
        return replace(self, end=token)

    def with_filled(self, token: str) -> "Bar":
        """Set the filled cell character."""
        return replace(self, filled=_single_char(token, "filled"))

    def with_empty(self, token: str) -> "Bar":
        """Set the empty cell character."""
        return replace(self, empty=_single_char(token, "empty"))

    def with_max(self, maximum: float) -> "Bar":
        """
        Set the maximum value.

        The current value is not re-checked; a later with_value call is
        the only place the upper bound is enforced.
        """
        return replace(self, max=float(maximum))

    def with_width(self, width: int) -> "Bar":
        """Set the body width. Zero and negative widths render an empty body."""
        return replace(self, width=int(width))

    def with_text(self, text: str) -> "Bar":
        """Set the trailing annotation."""
        return replace(self, text=text)

    def with_value(self, value: float) -> "Bar":
        """
        Return a Bar at the given value.

        Raises OutOfRangeError when value > max. Negative values are
        accepted and render as an empty body.
        """
        value = float(value)
        if value > self.max:
            logger.debug("rejected value %s (max %s)", value, self.max)
            raise OutOfRangeError(value, self.max)
        return replace(self, value=value)

    # ── Rendering ─────────────────────────────────────────────────────────────

    @property
    def ratio(self) -> float:
        """value / max with IEEE semantics: a zero max gives inf or nan."""
        return _divide(self.value, self.max)

    def counts(self) -> tuple[int, int]:
        """
        Return (filled, empty) cell counts.

        filled = ceil(width * pct) so any progress above zero shows at
        least one cell; empty = floor(width - filled). filled is kept
        within [0, width], so a value above max (a lowered max, a tiny
        or zero max) renders a full body and a negative value or width
        renders an empty one.
        """
        cells = max(self.width, 0)
        raw_filled = self.width * self.ratio
        if math.isnan(raw_filled) or raw_filled <= 0:
            filled = 0
        elif raw_filled >= cells:
            filled = cells
        else:
            filled = math.ceil(raw_filled)

        empty = max(math.floor(self.width - filled), 0)
        return filled, empty

    def render(self) -> str:
        """Return the bar as a single line of text."""
        filled, empty = self.counts()
        line = f"{self.start}{self.filled * filled}{self.empty * empty}{self.end}"
        if self.text:
            line += f" {self.text}"
        return line

    def __str__(self) -> str:
        return self.render()

    def __format__(self, format_spec: str) -> str:
        return format(self.render(), format_spec)


# ── Module-level helpers ──────────────────────────────────────────────────────


def _single_char(token: str, name: str) -> str:
    if not isinstance(token, str) or len(token) != 1:
        raise ValueError(f"{name} token must be a single character, got {token!r}")
    return token


def _divide(numerator: float, denominator: float) -> float:
    """Float division that follows IEEE-754 for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        # -0.0 flips the sign the same way hardware division does
        positive = (numerator > 0) == (math.copysign(1.0, denominator) > 0)
        return math.inf if positive else -math.inf
    return numerator / denominator
