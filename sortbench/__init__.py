"""Sorting algorithms, dataset generation and timing tools."""

__version__ = "0.1.0"