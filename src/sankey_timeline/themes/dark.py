"""Dark theme (default)."""

from sankey_timeline.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#1f1f24",
    label_color="#d8d8d8",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=10.0,
    title_color="#ffffff",
    title_font_size=22.0,
    header_font_size=13.0,
    axis_color="#9a9a9a",
    axis_font_size=11.0,
    grid_color="rgba(255, 255, 255, 0.08)",
)
