from __future__ import annotations

from quadkey.codec import decode, is_valid, validate
from quadkey.errors import RootKeyError
from quadkey.key import QuadKey, from_xyz


def parent(key: str) -> QuadKey:
    """
    The enclosing tile one zoom level up.

    One-digit keys are the coarsest representable tiles and have no parent.
    """
    validate(key)
    if len(key) == 1:
        raise RootKeyError(key)
    return QuadKey(key[:-1])


def children(key: str) -> list[QuadKey]:
    """
    The 2x2 subdivision at zoom z+1, in digit order 0, 1, 2, 3
    (upper-left, upper-right, lower-left, lower-right).

    Invalid keys have no children: returns [].
    """
    if not is_valid(key):
        return []

    x, y, z = decode(key)
    cx, cy = x << 1, y << 1
    zz = z + 1
    return [
        from_xyz(cx, cy, zz),
        from_xyz(cx + 1, cy, zz),
        from_xyz(cx, cy + 1, zz),
        from_xyz(cx + 1, cy + 1, zz),
    ]
