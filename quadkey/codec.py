"""
Quadkey digit codec.

Each digit packs one bit of x (value 1) and one bit of y (value 2), most
significant bit first, so the leftmost digit picks the zoom-1 quadrant:

    0 | 1
    --+--
    2 | 3
"""

from __future__ import annotations

from quadkey.errors import InvalidKeyError
from quadkey.types import Tile


QUAD_DIGITS = "0123"


def encode(x: int, y: int, z: int) -> str:
    """
    Grid coordinate -> digit string. Callers guarantee 0 <= x, y < 2**z.
    """
    digits: list[str] = []
    for i in range(z, 0, -1):
        mask = 1 << (i - 1)
        d = 0
        if x & mask:
            d += 1
        if y & mask:
            d += 2
        digits.append(QUAD_DIGITS[d])
    return "".join(digits)


def validate(key: str) -> None:
    if not key:
        raise InvalidKeyError(key)
    for i, ch in enumerate(key):
        if ch not in QUAD_DIGITS:
            raise InvalidKeyError(key, index=i, char=ch)


def is_valid(key: str) -> bool:
    try:
        validate(key)
    except InvalidKeyError:
        return False
    return True


def decode(key: str) -> Tile:
    validate(key)

    x = 0
    y = 0
    z = len(key)
    for pos, ch in enumerate(key):
        mask = 1 << (z - pos - 1)
        d = QUAD_DIGITS.index(ch)
        if d & 1:
            x |= mask
        if d & 2:
            y |= mask
    return Tile(x=x, y=y, z=z)
