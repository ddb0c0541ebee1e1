"""
Shared Size Tiers

Base class and utilities for marketplace size tiers.
"""

from .base import SizeTier, sorted_sides

__all__ = [
    "SizeTier",
    "sorted_sides",
]
