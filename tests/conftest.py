"""Shared fixtures: fresh process defaults + diagnostic de-dup keys per test."""
import sys
from pathlib import Path

_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_root))

import pytest

from gamekit.sim import debug, prandom, timebase


@pytest.fixture(autouse=True)
def _fresh_defaults():
    debug.reset_once_keys()
    prandom.set_registry(None)
    timebase.set_clock(None)
    yield
    prandom.set_registry(None)
    timebase.set_clock(None)


@pytest.fixture
def clock():
    return timebase.GameClock()
