"""
Graph helpers for connected grouping
"""

from .closure import find_connected

__all__ = ["find_connected"]
