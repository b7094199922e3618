"""
Styled bar renderer.

Stateless — takes a Bar, returns a rich Text whose plain text is
exactly str(bar). Only color is added, never characters.

Output:  |█████░░░░░| updating
"""

from rich.text import Text

from textbar.bar import Bar
from textbar.ui.theme import STYLE_BAR, STYLE_COMPLETE, STYLE_DIM, STYLE_TEXT


def render_styled(bar: Bar) -> Text:
    """
    Return the bar as a styled rich Text.

    The filled run switches to the complete color once value >= max.
    """
    filled, empty = bar.counts()
    done = bar.value >= bar.max

    t = Text()
    t.append(bar.start, style=STYLE_DIM)
    t.append(bar.filled * filled, style=STYLE_COMPLETE if done else STYLE_BAR)
    t.append(bar.empty * empty, style=STYLE_DIM)
    t.append(bar.end, style=STYLE_DIM)
    if bar.text:
        t.append(f" {bar.text}", style=STYLE_TEXT)

    return t
