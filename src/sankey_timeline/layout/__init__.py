from sankey_timeline.layout.canvas import compute_canvas_size, compute_year_ticks
from sankey_timeline.layout.engine import compute_layout

__all__ = ["compute_canvas_size", "compute_layout", "compute_year_ticks"]
