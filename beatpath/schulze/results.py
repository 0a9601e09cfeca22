"""
Results and pairwise duels derived from beatpath strengths.

Choice ``i`` beats choice ``j`` when ``p[i, j] > p[j, i]``. Results are
ordered by the number of such wins; the cumulative strength and the
cumulative advantage over defeated opponents are reported alongside and
only break ties in ordering, never in who wins.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic

import numpy as np

from scipy.stats import rankdata

from ._base import ChoiceIndex
from ._types import C, RankMethod
from .strength import compute_strengths


@dataclass(frozen=True)
class Result(Generic[C]):
    """Outcome for a single choice."""

    choice: C
    index: int
    wins: int
    strength: int = 0
    advantage: int = 0


@dataclass(frozen=True)
class ChoiceStrength(Generic[C]):
    """One side of a duel: a choice and its strongest path to the opponent."""

    choice: C
    index: int
    strength: int


@dataclass(frozen=True)
class Duel(Generic[C]):
    """Strongest path strengths in both directions between two choices."""

    left: ChoiceStrength[C]
    right: ChoiceStrength[C]

    def outcome(
        self,
    ) -> tuple[ChoiceStrength[C], ChoiceStrength[C]] | tuple[None, None]:
        """Return ``(winner, defeated)``, or ``(None, None)`` on equal strengths."""
        if self.left.strength > self.right.strength:
            return self.left, self.right
        if self.right.strength > self.left.strength:
            return self.right, self.left
        return None, None


def calculate_results(
    choices: Iterable[C] | ChoiceIndex[C],
    strengths: np.ndarray,
) -> tuple[list[Result[C]], bool]:
    """
    Rank choices by Schulze wins.

    Args:
        choices: Choice sequence the strengths are indexed by.
        strengths: Strongest path matrix of shape ``(N, N)``.

    Returns:
        ``(results, tie)`` where ``results`` is sorted by wins (descending),
        then cumulative strength (descending), then index, and ``tie`` is
        ``True`` when the two best results have the same number of wins.
    """
    index = ChoiceIndex.of(choices)
    p = np.asarray(strengths)
    if p.shape != (len(index), len(index)):
        raise ValueError(
            f"strengths must have shape ({len(index)}, {len(index)}), got {p.shape}"
        )

    beats = p > p.T
    wins = beats.sum(axis=1)
    strength = np.where(beats, p, 0).sum(axis=1)
    advantage = np.where(beats, p - p.T, 0).sum(axis=1)

    results = [
        Result(
            choice=index[i],
            index=i,
            wins=int(wins[i]),
            strength=int(strength[i]),
            advantage=int(advantage[i]),
        )
        for i in range(len(index))
    ]
    results.sort(key=lambda r: (-r.wins, -r.strength, r.index))

    tie = len(results) >= 2 and results[0].wins == results[1].wins
    return results, tie


def duels(
    choices: Iterable[C] | ChoiceIndex[C],
    strengths: np.ndarray,
) -> Iterator[Duel[C]]:
    """Yield one :class:`Duel` per pair ``i < j`` in row-major order."""
    index = ChoiceIndex.of(choices)
    p = np.asarray(strengths)
    n = len(index)
    for i in range(n):
        for j in range(i + 1, n):
            yield Duel(
                left=ChoiceStrength(choice=index[i], index=i, strength=int(p[i, j])),
                right=ChoiceStrength(choice=index[j], index=j, strength=int(p[j, i])),
            )


def compute(
    preferences: np.ndarray,
    choices: Iterable[C] | ChoiceIndex[C],
) -> tuple[list[Result[C]], Iterator[Duel[C]], bool]:
    """
    Compute the Schulze outcome of a preference matrix.

    Args:
        preferences: Flat preference matrix indexed by ``choices``.
        choices: Choice sequence.

    Returns:
        ``(results, duels, tie)``; ``duels`` is a lazy, single-pass
        iterator over all pairwise duels.

    Examples:
        >>> from beatpath import schulze
        >>> choices = ["A", "B", "C"]
        >>> preferences = schulze.new_preferences(len(choices))
        >>> _ = schulze.vote(preferences, choices, {"A": 1, "B": 2})
        >>> results, _, tie = schulze.compute(preferences, choices)
        >>> [(r.choice, r.wins) for r in results], tie
        ([('A', 2), ('B', 1), ('C', 0)], False)
    """
    index = ChoiceIndex.of(choices)
    strengths = compute_strengths(preferences, len(index))
    results, tie = calculate_results(index, strengths)
    return results, duels(index, strengths), tie


_RANKDATA_METHODS = {
    "competition": "min",  # 1,2,2,4
    "competition_max": "max",  # 1,3,3,4
    "dense": "dense",  # 1,2,2,3
    "avg": "average",  # 1.0,2.5,2.5,4.0
}


def placements(
    results: Iterable[Result[C]],
    method: RankMethod = "competition",
) -> np.ndarray:
    """
    Place numbers by win count, aligned by choice index.

    Args:
        results: Results for every choice, in any order.
        method: How choices with equal wins share places: ``"competition"``,
            ``"competition_max"``, ``"dense"`` or ``"avg"``.

    Returns:
        Array of shape ``(N,)`` where entry ``i`` is the place of the choice
        at index ``i``; choices with equal wins share a place.
    """
    if method not in _RANKDATA_METHODS:
        raise ValueError(f'unknown method "{method}"')

    results = list(results)
    wins = np.zeros(len(results), dtype=np.int64)
    for r in results:
        wins[r.index] = r.wins
    return rankdata(-wins, method=_RANKDATA_METHODS[method])


__all__ = [
    "Result",
    "ChoiceStrength",
    "Duel",
    "calculate_results",
    "duels",
    "compute",
    "placements",
]
