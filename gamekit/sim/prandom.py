"""
Named, independently seedable RNG channels.

Goals:
- Let each system (world gen, spawns, loot, ...) own a replayable random stream
- Toggle any channel between its seeded stream and the engine default (unseeded) source

Non-goals:
- Cryptographic security
- Thread safety (main-thread only, like the rest of the frame loop)
- Perfect cross-language reproducibility (this is Python's Mersenne Twister)
"""

from __future__ import annotations

import random
import zlib
from enum import Enum
from typing import Dict, Optional, Union

from gamekit.sim.debug import debug_log, log_error, log_warning

Number = Union[int, float]


class RNGIndex(Enum):
    """Closed set of logical RNG channels. Grow this enum to add a channel."""

    WORLD_GEN = 0
    SPAWNS = 1
    LOOT = 2
    COMBAT = 3
    AI = 4
    VFX = 5
    AUDIO = 6


def derive_seed(base_seed: int, tag: str) -> int:
    # Use stable hashing (NEVER Python's built-in hash(), which is randomized per process).
    crc = zlib.crc32(tag.encode("utf-8")) & 0xFFFFFFFF
    return (int(base_seed) ^ crc) & 0xFFFFFFFF


class PRandom:
    """
    Registry of RNG channels.

    Every channel has a slot after `init_if_needed()`: an optional seeded generator and
    an enabled flag. Disabled channels (and enabled channels that were never seeded)
    draw from `default_source`, which is not reproducible.
    """

    def __init__(self, default_source=None):
        # Anything exposing random() and randrange(a, b).
        self.default_source = default_source if default_source is not None else random.Random()
        self._rngs: Optional[Dict[RNGIndex, Optional[random.Random]]] = None
        self._enabled: Optional[Dict[RNGIndex, bool]] = None

    def init_if_needed(self) -> None:
        if self._rngs is not None:
            return
        self._rngs = {index: None for index in RNGIndex}
        self._enabled = {index: False for index in RNGIndex}

    # ------------------------------------------------------------------
    # Channel setup
    # ------------------------------------------------------------------

    def set_seed(self, index: RNGIndex, seed: int) -> None:
        """Create (or replace) the seeded generator. Does not enable the channel."""
        self.init_if_needed()
        self._rngs[index] = random.Random(int(seed))
        debug_log("PRandom", f"seeded {index.name} with {int(seed)}")

    def set_enabled(self, index: RNGIndex, enabled: bool) -> None:
        self.init_if_needed()
        self._enabled[index] = bool(enabled)

    def is_enabled(self, index: RNGIndex) -> bool:
        self.init_if_needed()
        return self._enabled[index]

    def has_seed(self, index: RNGIndex) -> bool:
        self.init_if_needed()
        return self._rngs[index] is not None

    def seed_all(self, base_seed: int, enable: bool = True) -> None:
        """
        Seed every channel with an independent stream derived from `base_seed`.

        Channels derive from their name, so reordering the enum doesn't shift streams.
        """
        for index in RNGIndex:
            self.set_seed(index, derive_seed(base_seed, index.name))
            if enable:
                self.set_enabled(index, True)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _seeded(self, index: RNGIndex) -> Optional[random.Random]:
        self.init_if_needed()
        if not self._enabled[index]:
            return None
        rng = self._rngs[index]
        if rng is None:
            log_warning(
                "PRandom",
                f"{index.name} is enabled but was never seeded; using the default source",
                once_key=f"prandom:unseeded:{index.name}",
            )
        return rng

    def get_float(self, index: RNGIndex) -> float:
        """Uniform float in [0, 1)."""
        rng = self._seeded(index)
        if rng is None:
            return float(self.default_source.random())
        return rng.random()

    def get_range(self, index: RNGIndex, min_value: Number, max_value: Number) -> Number:
        """
        Two int bounds: uniform int, min inclusive, max exclusive.
        Otherwise: float lerp between the bounds (max reachable only through rounding).

        An empty int range (max <= min) returns min without drawing; max < min also
        prints an error once per channel.
        """
        if _is_int(min_value) and _is_int(max_value):
            if max_value <= min_value:
                if max_value < min_value:
                    log_error(
                        "PRandom",
                        f"{index.name} get_range({min_value}, {max_value}): max below min; returning min",
                        once_key=f"prandom:inverted:{index.name}",
                    )
                return min_value
            rng = self._seeded(index)
            if rng is None:
                return int(self.default_source.randrange(min_value, max_value))
            return rng.randrange(min_value, max_value)

        t = self.get_float(index)
        return float(min_value) + (float(max_value) - float(min_value)) * t


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ----------------------------------------------------------------------
# Process default registry
# ----------------------------------------------------------------------

_REGISTRY: Optional[PRandom] = None


def get_registry() -> PRandom:
    global _REGISTRY
    if _REGISTRY is None:
        _REGISTRY = PRandom()
        _REGISTRY.init_if_needed()
    return _REGISTRY


def set_registry(registry: Optional[PRandom]) -> None:
    """Replace the process default registry (None: rebuilt lazily on next use)."""
    global _REGISTRY
    _REGISTRY = registry


def configure_from_config(registry: Optional[PRandom] = None) -> PRandom:
    """Seed + enable every channel from SIM_SEED when DETERMINISTIC_SIM is on."""
    from config import DETERMINISTIC_SIM, SIM_SEED

    reg = registry if registry is not None else get_registry()
    reg.init_if_needed()
    if DETERMINISTIC_SIM:
        reg.seed_all(SIM_SEED, enable=True)
    return reg


def init_if_needed() -> None:
    get_registry().init_if_needed()


def set_seed(index: RNGIndex, seed: int) -> None:
    get_registry().set_seed(index, seed)


def set_enabled(index: RNGIndex, enabled: bool) -> None:
    get_registry().set_enabled(index, enabled)


def get_float(index: RNGIndex) -> float:
    return get_registry().get_float(index)


def get_range(index: RNGIndex, min_value: Number, max_value: Number) -> Number:
    return get_registry().get_range(index, min_value, max_value)
