"""
Determinism-friendly runtime helpers.

This package intentionally contains *small* primitives (named RNG channels + a tick
driven clock) that let gameplay and animation code avoid wall-clock time and the
global `random` module without pulling in a framework.
"""

from .prandom import PRandom, RNGIndex, get_registry, set_registry
from .timebase import GameClock, get_clock, set_clock

__all__ = [
    "PRandom",
    "RNGIndex",
    "get_registry",
    "set_registry",
    "GameClock",
    "get_clock",
    "set_clock",
]
