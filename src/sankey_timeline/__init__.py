"""sankey-timeline: lay out lineages of traditions on a shared time axis."""

__version__ = "0.3.0"
