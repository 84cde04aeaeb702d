"""
Print sampled easing values for visual tuning / diffing.

Examples:
  python tools/curve_table.py --steps 10
  python tools/curve_table.py --shapes BACK_IN BACK_OUT --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from gamekit.graphics.curve_preview import demo_curve  # noqa: E402
from gamekit.graphics.easing import PLAYABLE_BEHAVIORS, EasingBehavior, ease  # noqa: E402


def build_table(shapes: list[EasingBehavior], steps: int) -> dict[str, list[float]]:
    steps = max(1, int(steps))
    curve = demo_curve()
    table: dict[str, list[float]] = {}
    for shape in shapes:
        table[shape.name] = [ease(shape, i / steps, curve) for i in range(steps + 1)]
    return table


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Dump sampled easing curves")
    ap.add_argument("--steps", type=int, default=10, help="samples per curve (plus the endpoint)")
    ap.add_argument("--shapes", nargs="*", default=[], help="EasingBehavior names (default: all)")
    ap.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    ns = ap.parse_args(argv)

    try:
        shapes = [EasingBehavior[name.upper()] for name in ns.shapes] if ns.shapes else list(PLAYABLE_BEHAVIORS)
    except KeyError as e:
        print(f"[curve_table] ERROR: unknown shape {e}")
        return 2

    steps = max(1, int(ns.steps))
    table = build_table(shapes, steps)
    if ns.json:
        print(json.dumps({"steps": steps, "curves": table}, indent=2))
        return 0

    for name, values in table.items():
        row = " ".join(f"{v:7.3f}" for v in values)
        print(f"{name:<16} {row}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
