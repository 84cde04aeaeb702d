"""
Console diagnostics.

Warnings and errors are always printed; `debug_log` only prints when GAMEKIT_DEBUG is set.
Repeated messages can be collapsed with `once_key` (keyed, no wall-clock throttling so
output stays identical between deterministic runs).
"""

from __future__ import annotations

from typing import Optional

from config import GAMEKIT_DEBUG

DEBUG_ENABLED = GAMEKIT_DEBUG

_seen_keys: set[str] = set()


def _emit(tag: str, level: str, msg: str, once_key: Optional[str]) -> bool:
    if once_key is not None:
        if once_key in _seen_keys:
            return False
        _seen_keys.add(once_key)
    prefix = f"[{tag}]" if not level else f"[{tag}] {level}:"
    print(f"{prefix} {msg}")
    return True


def log_warning(tag: str, msg: str, once_key: Optional[str] = None) -> bool:
    """Print a warning. Returns False if it was suppressed by `once_key`."""
    return _emit(tag, "WARN", msg, once_key)


def log_error(tag: str, msg: str, once_key: Optional[str] = None) -> bool:
    """Print an error. Returns False if it was suppressed by `once_key`."""
    return _emit(tag, "ERROR", msg, once_key)


def debug_log(tag: str, msg: str, once_key: Optional[str] = None) -> bool:
    if not DEBUG_ENABLED:
        return False
    return _emit(tag, "", msg, once_key)


def reset_once_keys() -> None:
    _seen_keys.clear()
