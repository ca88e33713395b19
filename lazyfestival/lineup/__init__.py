"""
Lineup module
"""

from .loader import Lineup, Performance, load_lineup
from .resolver import PerformanceResolver

__all__ = [
    "Lineup",
    "Performance",
    "load_lineup",
    "PerformanceResolver",
]
