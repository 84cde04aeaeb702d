"""
Determinism guard (static check).

Purpose:
- Keep easing / animation code reading time from gamekit.sim.timebase.GameClock and
  randomness from gamekit.sim.prandom channels, so fixed-tick runs replay exactly.

What we flag (in scanned code):
- Wall-clock-ish time: pygame.time.get_ticks(), time.time(), time.monotonic(),
  time.perf_counter(), datetime.now(), etc.
- Module-level RNG: random.random/randint/choice/shuffle/...
- Unseeded generators: random.Random() with no seed argument
- Python's hash() (process-randomized by default)

We intentionally DO NOT scan:
- gamekit/sim/** (this contains the clock + RNG wrappers themselves)
"""

from __future__ import annotations

import argparse
import ast
import json
import sys
from pathlib import Path
from typing import Iterable


PROJECT_ROOT = Path(__file__).resolve().parents[1]


DEFAULT_SCAN_DIRS = [
    PROJECT_ROOT / "gamekit" / "graphics",
]

DEFAULT_EXCLUDE_DIRS = [
    PROJECT_ROOT / "gamekit" / "sim",
]


_RANDOM_ATTRS = {
    "random",
    "randint",
    "randrange",
    "uniform",
    "choice",
    "choices",
    "sample",
    "shuffle",
    "seed",
}

_TIME_ATTRS_FORBIDDEN = {
    "time",
    "monotonic",
    "perf_counter",
}

_DATETIME_ATTRS_FORBIDDEN = {
    "now",
    "utcnow",
    "today",
}


def _is_under(path: Path, parent: Path) -> bool:
    try:
        path.resolve().relative_to(parent.resolve())
        return True
    except ValueError:
        return False


def iter_py_files(roots: Iterable[Path], *, exclude_dirs: list[Path]) -> list[Path]:
    out: list[Path] = []
    for root in roots:
        if not root.exists():
            continue
        if root.is_file():
            if root.suffix.lower() == ".py":
                out.append(root)
            continue
        for p in root.rglob("*.py"):
            if any(_is_under(p, ex) for ex in exclude_dirs):
                continue
            out.append(p)
    return sorted(set(out))


def _attr_chain(node: ast.AST) -> list[str] | None:
    """["pygame", "time", "get_ticks"] for attribute chains, ["name"] for bare names."""
    if isinstance(node, ast.Name):
        return [node.id]
    if isinstance(node, ast.Attribute):
        base = _attr_chain(node.value)
        if base is None:
            return None
        return [*base, node.attr]
    return None


def _display_path(file: Path) -> str:
    try:
        return str(file.resolve().relative_to(PROJECT_ROOT))
    except ValueError:
        return str(file)


def _finding(kind: str, file: Path, node: ast.AST, detail: str) -> dict:
    return {
        "kind": kind,
        "file": _display_path(file),
        "line": int(getattr(node, "lineno", 0) or 0),
        "col": int(getattr(node, "col_offset", 0) or 0),
        "detail": detail,
    }


def _check_call(file_path: Path, node: ast.Call) -> dict | None:
    chain = _attr_chain(node.func)
    if not chain:
        return None

    if chain == ["pygame", "time", "get_ticks"]:
        return _finding("wall_clock_time", file_path, node, "Read GameClock.current_time() instead of pygame.time.get_ticks().")

    if len(chain) == 2 and chain[0] == "time" and chain[1] in _TIME_ATTRS_FORBIDDEN:
        return _finding(
            "wall_clock_time",
            file_path,
            node,
            f"Avoid time.{chain[1]}(); read GameClock.current_time() / tick_delta() instead.",
        )

    if chain[-1] in _DATETIME_ATTRS_FORBIDDEN and "datetime" in chain:
        return _finding("wall_clock_time", file_path, node, "Avoid datetime.now()/utcnow()/today(); use GameClock.")

    if len(chain) == 2 and chain[0] == "random" and chain[1] in _RANDOM_ATTRS:
        return _finding(
            "global_rng",
            file_path,
            node,
            "Use gamekit.sim.prandom.get_float/get_range(RNGIndex...) instead of random.*.",
        )

    if chain == ["random", "Random"] and not node.args and not node.keywords:
        return _finding("unseeded_rng", file_path, node, "random.Random() without a seed is not reproducible.")

    if chain == ["hash"]:
        return _finding(
            "unstable_hash",
            file_path,
            node,
            "Avoid Python hash() for deterministic behavior; use zlib.crc32 or explicit IDs.",
        )
    return None


def scan_file(file_path: Path) -> list[dict]:
    src = file_path.read_text(encoding="utf-8", errors="replace")
    try:
        tree = ast.parse(src, filename=str(file_path))
    except SyntaxError as e:
        return [
            {
                "kind": "parse_error",
                "file": _display_path(file_path),
                "line": int(e.lineno or 0),
                "col": int(e.offset or 0),
                "detail": f"SyntaxError: {e}",
            }
        ]

    findings: list[dict] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Call):
            f = _check_call(file_path, node)
            if f is not None:
                findings.append(f)
    return findings


def scan(roots: Iterable[Path] | None = None) -> list[dict]:
    roots = list(roots) if roots is not None else list(DEFAULT_SCAN_DIRS)
    files = iter_py_files(roots, exclude_dirs=list(DEFAULT_EXCLUDE_DIRS))
    out: list[dict] = []
    for f in files:
        out.extend(scan_file(f))
    return out


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Static determinism guard (easing / animation code)")
    ap.add_argument(
        "--paths",
        nargs="*",
        default=[],
        help="Optional paths to scan (files or dirs). Default scans gamekit/graphics.",
    )
    ap.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    ns = ap.parse_args(argv)

    findings = scan([Path(p) for p in ns.paths] if ns.paths else None)

    if ns.json:
        print(json.dumps({"findings": findings}, indent=2))
    elif not findings:
        print("[determinism_guard] PASS: no violations found")
    else:
        print(f"[determinism_guard] FAIL: {len(findings)} violation(s)")
        for v in findings:
            print(f"- {v['file']}:{v['line']}:{v['col']} [{v['kind']}] {v['detail']}")

    return 0 if not findings else 1


if __name__ == "__main__":
    sys.exit(main())
