"""Theme definitions for timelines."""

from sankey_timeline.themes.dark import DARK_THEME
from sankey_timeline.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
