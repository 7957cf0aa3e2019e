"""Arbitrary-precision signed integers, the algorithms that work on them, and timing tools."""

__version__ = "1.0.0"