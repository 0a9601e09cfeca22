"""Fixed-size membership set over ``[0, size)``."""

import numpy as np

_WORD_BITS = 64


class Bitset:
    """
    Compact bit membership set backed by ``uint64`` words.

    Only insertion and membership tests are supported; the set is used to
    find which choice indices a ballot did not mention.
    """

    __slots__ = ("_size", "_words")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        self._size = int(size)
        self._words = np.zeros(self._size // _WORD_BITS + 1, dtype=np.uint64)

    def __len__(self) -> int:
        return self._size

    def _locate(self, i: int) -> tuple[int, np.uint64]:
        if not 0 <= i < self._size:
            raise IndexError(f"bit index {i} out of range for size {self._size}")
        return i // _WORD_BITS, np.uint64(1) << np.uint64(i % _WORD_BITS)

    def set(self, i: int) -> None:
        word, mask = self._locate(i)
        self._words[word] |= mask

    def is_set(self, i: int) -> bool:
        word, mask = self._locate(i)
        return bool(self._words[word] & mask)


__all__ = ["Bitset"]
