"""Console inventory for keeping track of a small set of boxes."""

__version__ = "0.1.0"