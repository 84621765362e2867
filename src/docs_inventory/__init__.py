"""Inventory of markdown docs and their front matter summaries."""

__version__ = "0.1.0"
