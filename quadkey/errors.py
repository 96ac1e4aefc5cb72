from __future__ import annotations


class QuadKeyError(ValueError):
    pass


class InvalidKeyError(QuadKeyError):
    """
    Raised when a digit string is not a usable quadkey.

    `index`/`char` point at the first offending character; both are None
    when the key is empty.
    """

    def __init__(self, key: str, *, index: int | None = None, char: str | None = None):
        self.key = key
        self.index = index
        self.char = char
        if index is None:
            msg = "key is empty"
        else:
            msg = f"key contains invalid digit at index {index}: {char!r}"
        super().__init__(msg)


class RootKeyError(QuadKeyError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"key is root: {key!r}")


class TooManyTilesError(QuadKeyError):
    def __init__(self, *, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"bound covers {count} tiles, over the limit of {limit}. "
            "Use a smaller bound or a lower zoom."
        )
