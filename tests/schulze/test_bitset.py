from __future__ import annotations

import numpy as np
import pytest

from beatpath.schulze import Bitset


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_bitset_random_membership(seed: int) -> None:
    rng = np.random.default_rng(seed)
    size = int(rng.integers(1, 12345))
    values = {int(v) for v in rng.integers(0, size, size=int(rng.integers(0, 100)))}

    s = Bitset(size)
    for v in values:
        s.set(v)

    assert len(s) == size
    for i in range(size):
        assert s.is_set(i) == (i in values), f"index {i} (seed {seed})"


@pytest.mark.parametrize("size", [1, 63, 64, 65, 128])
def test_bitset_word_boundaries(size: int) -> None:
    s = Bitset(size)
    s.set(size - 1)
    assert s.is_set(size - 1)
    assert not any(s.is_set(i) for i in range(size - 1))


def test_bitset_empty() -> None:
    s = Bitset(0)
    assert len(s) == 0
    with pytest.raises(IndexError):
        s.set(0)


def test_bitset_out_of_range() -> None:
    s = Bitset(10)
    with pytest.raises(IndexError, match="out of range"):
        s.set(10)
    with pytest.raises(IndexError):
        s.is_set(-1)
    with pytest.raises(ValueError, match="size must be >= 0"):
        Bitset(-1)
