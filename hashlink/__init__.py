"""Ordered map, set and LRU cache containers whose entry order the user controls."""

__version__ = "0.1.0"