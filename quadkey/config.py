from __future__ import annotations

import os


def max_tiles() -> int | None:
    """
    Upper bound on tiles returned by a single `keys_in_bound` call.

    Unset (or non-positive) means unbounded.
    """
    raw = (os.getenv("QUADKEY_MAX_TILES") or "").strip()
    if raw:
        try:
            v = int(raw)
        except ValueError:
            return None
        return v if v > 0 else None
    return None
