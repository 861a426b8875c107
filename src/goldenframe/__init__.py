"""Golden-ratio decomposition overlay for raster images."""

__version__ = "0.1.0"
