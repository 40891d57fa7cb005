"""Data containers and geometry for plot elements: curves, histograms, heat maps, Sankey diagrams and more."""

__version__ = "0.1.0"