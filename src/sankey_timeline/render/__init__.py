from sankey_timeline.render.svg import render_svg

__all__ = ["render_svg"]
