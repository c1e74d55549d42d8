"""Utility functions."""

from .scroll_math import distance_to_edge, is_near_edge

__all__ = ["distance_to_edge", "is_near_edge"]
