"""Crisp and fuzzy c-means clustering of two-dimensional point sets, with file reading and plotting helpers."""

__version__ = "0.5.0"
__all__ = ["point", "data", "data_tools", "linspace", "files", "crisp", "fuzzy", "plotting", "cli"]