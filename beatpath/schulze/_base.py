"""
Base utilities for the Schulze engine.

This module provides the choice lookup table and matrix validation used
across the ballot, preference and result modules.
"""

from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Generic, overload

import numpy as np

from ._types import C

PREFERENCE_DTYPE = np.int64


class ChoiceIndex(Sequence, Generic[C]):
    """
    Bijection between choices and their positions in a fixed-order sequence.

    Positions are the indices every matrix operation works with. When a
    choice occurs more than once, lookups resolve to its first occurrence
    and later occurrences are never addressable by value.
    """

    __slots__ = ("_choices", "_positions")

    def __init__(self, choices: Iterable[C] = ()) -> None:
        self._choices: tuple[C, ...] = tuple(choices)
        self._positions: dict[C, int] = {}
        for i, choice in enumerate(self._choices):
            self._positions.setdefault(choice, i)

    @classmethod
    def of(cls, choices: "Iterable[C] | ChoiceIndex[C]") -> "ChoiceIndex[C]":
        """Return ``choices`` unchanged if it is already an index, else build one."""
        if isinstance(choices, ChoiceIndex):
            return choices
        return cls(choices)

    def __len__(self) -> int:
        return len(self._choices)

    @overload
    def __getitem__(self, i: int) -> C: ...

    @overload
    def __getitem__(self, i: slice) -> tuple[C, ...]: ...

    def __getitem__(self, i):
        return self._choices[i]

    def __iter__(self) -> Iterator[C]:
        return iter(self._choices)

    def __repr__(self) -> str:
        return f"ChoiceIndex({list(self._choices)!r})"

    def index_of(self, choice: Hashable) -> int | None:
        """Position of the first occurrence of ``choice``, or ``None``."""
        return self._positions.get(choice)

    def is_addressable(self, i: int) -> bool:
        """Whether position ``i`` holds the first occurrence of its choice."""
        return self._positions.get(self._choices[i]) == i


def validate_preferences(preferences: np.ndarray, choices_count: int) -> np.ndarray:
    """
    Validate a flat preference matrix against the number of choices.

    Args:
        preferences: 1D array of length ``choices_count**2`` addressed as
            ``preferences[i * choices_count + j]``.
        choices_count: Number of choices N.

    Returns:
        The same array (no copy is made).

    Raises:
        ValueError: If the array is not a flat array of N² integer counts.
    """
    if not isinstance(preferences, np.ndarray):
        raise ValueError(
            f"preferences must be a numpy array, got {type(preferences).__name__}"
        )
    if preferences.ndim != 1:
        raise ValueError(
            f"preferences must be a flat 1D array, got shape {preferences.shape}"
        )
    if preferences.size and not np.issubdtype(preferences.dtype, np.integer):
        raise ValueError(
            f"preferences must hold integer counts, got {preferences.dtype}"
        )
    expected = choices_count * choices_count
    if preferences.shape[0] != expected:
        raise ValueError(
            f"preferences length {preferences.shape[0]} does not match "
            f"{choices_count} choices (expected {expected})"
        )
    return preferences


def as_square(preferences: np.ndarray, choices_count: int) -> np.ndarray:
    """Return an ``(N, N)`` view of a validated flat preference matrix."""
    return validate_preferences(preferences, choices_count).reshape(
        choices_count, choices_count
    )


__all__ = [
    "PREFERENCE_DTYPE",
    "ChoiceIndex",
    "validate_preferences",
    "as_square",
]
