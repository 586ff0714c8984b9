"""Hierarchical category aggregation for personal finance reports."""

__version__ = "0.1.0"
