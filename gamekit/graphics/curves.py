from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence


@dataclass(frozen=True)
class Keyframe:
    time: float
    value: float
    in_tangent: float = 0.0
    out_tangent: float = 0.0


class KeyframeCurve:
    """
    Hand-authored curve for `EasingBehavior.CURVE`.

    - Outside the key range the curve holds the first / last value
    - Between two keys it is a cubic Hermite segment using the keys' tangents
    """

    def __init__(self, keys: Iterable[Keyframe]):
        ordered = sorted(keys, key=lambda k: k.time)
        if not ordered:
            raise ValueError("KeyframeCurve requires at least one key")
        for a, b in zip(ordered, ordered[1:]):
            if a.time == b.time:
                raise ValueError(f"Duplicate key time {a.time}")
        self._keys: List[Keyframe] = ordered

    @property
    def keys(self) -> Sequence[Keyframe]:
        return tuple(self._keys)

    @classmethod
    def linear(cls, t0: float, v0: float, t1: float, v1: float) -> "KeyframeCurve":
        if t1 == t0:
            raise ValueError(f"Duplicate key time {t0}")
        slope = (v1 - v0) / (t1 - t0)
        return cls([Keyframe(t0, v0, slope, slope), Keyframe(t1, v1, slope, slope)])

    @classmethod
    def ease_in_out(cls, t0: float, v0: float, t1: float, v1: float) -> "KeyframeCurve":
        return cls([Keyframe(t0, v0), Keyframe(t1, v1)])

    def evaluate(self, t: float) -> float:
        keys = self._keys
        t = float(t)
        if t <= keys[0].time:
            return keys[0].value
        if t >= keys[-1].time:
            return keys[-1].value

        # Few keys per curve; a linear scan beats bisect bookkeeping here.
        i = 1
        while keys[i].time < t:
            i += 1
        k0 = keys[i - 1]
        k1 = keys[i]

        span = k1.time - k0.time
        s = (t - k0.time) / span
        s2 = s * s
        s3 = s2 * s

        h00 = 2 * s3 - 3 * s2 + 1
        h10 = s3 - 2 * s2 + s
        h01 = -2 * s3 + 3 * s2
        h11 = s3 - s2
        return (
            h00 * k0.value
            + h10 * span * k0.out_tangent
            + h01 * k1.value
            + h11 * span * k1.in_tangent
        )
