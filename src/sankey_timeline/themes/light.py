"""Light theme."""

from sankey_timeline.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=10.0,
    title_color="#111111",
    title_font_size=22.0,
    header_font_size=13.0,
    axis_color="#666666",
    axis_font_size=11.0,
    grid_color="rgba(0, 0, 0, 0.08)",
    direct_link_opacity=0.3,
    cross_link_color="#555555",
    filtered_opacity=0.15,
)
