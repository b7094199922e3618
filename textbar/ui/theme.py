"""
textbar visual design system.

All colors and styles used by the styled renderer as named constants.
Import from here — never hardcode markup strings in other modules.

The palette is selected at import time from the terminal background
reported in COLORFGBG (set by rxvt, Konsole, iTerm2 and others).
"""

import os

from rich.style import Style
from rich.theme import Theme


# ── Dark/light detection ──────────────────────────────────────────────────────

def _is_dark_background() -> bool:
    """
    Guess the terminal background from COLORFGBG ("fg;bg" or "fg;default;bg").

    Background colors 0–6 and 8 are dark. Falls back to True when the
    variable is missing or unparseable.
    """
    raw = os.environ.get("COLORFGBG", "")
    bg = raw.split(";")[-1]
    if not bg.isdigit():
        return True
    return int(bg) in (0, 1, 2, 3, 4, 5, 6, 8)


DARK_MODE: bool = _is_dark_background()


# ── Color palette ─────────────────────────────────────────────────────────────

if DARK_MODE:
    COLOR_DIM  = "#787878"          # Medium gray
    COLOR_TEXT = "#F0F0F0"          # Near-white
    COLOR_ERROR = "#E05252"         # Warm red

    BAR_COLOR          = "#7B9FD4"  # Periwinkle blue
    BAR_COMPLETE_COLOR = "#4DBD74"  # Sage green

else:
    # WCAG AA (≥ 4.5:1) on white
    COLOR_DIM  = "#4B5563"          # Dark gray   (7.9:1)
    COLOR_TEXT = "#0F172A"          # Near-black  (18.1:1)
    COLOR_ERROR = "#B91C1C"         # Deep red    (6.5:1)

    BAR_COLOR          = "#1D4ED8"  # Deep blue   (6.2:1)
    BAR_COMPLETE_COLOR = "#166534"  # Deep green  (7.5:1)


# ── Rich styles ───────────────────────────────────────────────────────────────

STYLE_BAR      = Style(color=BAR_COLOR)
STYLE_COMPLETE = Style(color=BAR_COMPLETE_COLOR, bold=True)
STYLE_DIM      = Style(color=COLOR_DIM)
STYLE_TEXT     = Style(color=COLOR_TEXT)


# ── Rich Theme ────────────────────────────────────────────────────────────────

TEXTBAR_THEME = Theme(
    {
        "bar":      BAR_COLOR,
        "complete": f"{BAR_COMPLETE_COLOR} bold",
        "dim":      COLOR_DIM,
        "error":    f"{COLOR_ERROR} bold",
        "text":     COLOR_TEXT,
    }
)
