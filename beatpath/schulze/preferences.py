"""
Pairwise preference matrix: voting, unvoting and choice-set remapping.

The matrix is a flat ``int64`` array of length N² addressed as
``preferences[i * N + j]``. Off the diagonal, cell ``(i, j)`` counts the
ballots that ranked choice ``i`` strictly above choice ``j``.

The diagonal cell ``(i, i)`` counts the ballots that ranked choice ``i``
explicitly, i.e. did not leave it in the unranked tail. Strengths never
read it. :func:`set_choices` uses it to score a newly added choice as if
it had been present, and unranked, on every ballot already counted.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic

import numpy as np

from ._base import PREFERENCE_DTYPE, ChoiceIndex, as_square
from ._types import Ballot, C
from .ballot import ballot_ranks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Record(Generic[C]):
    """
    Normalized tiering of an applied ballot, by choice value.

    Attributes:
        ranked: Tiers of explicitly ranked choices, most preferred first.
        unranked: Choices the ballot left out when it was cast.
        generation: Choice-set generation the ballot was cast against, as
            counted by :class:`~beatpath.schulze.Voting`. Zero outside it.
    """

    ranked: tuple[tuple[C, ...], ...]
    unranked: tuple[C, ...] = ()
    generation: int = 0

    @property
    def tiers(self) -> tuple[tuple[C, ...], ...]:
        """All tiers including the trailing unranked tier, if any."""
        if self.unranked:
            return self.ranked + (self.unranked,)
        return self.ranked


def new_preferences(choices_count: int) -> np.ndarray:
    """Return an all-zero flat preference matrix for ``choices_count`` choices."""
    if choices_count < 0:
        raise ValueError(f"choices_count must be >= 0, got {choices_count}")
    return np.zeros(choices_count * choices_count, dtype=PREFERENCE_DTYPE)


def _apply(matrix: np.ndarray, tiers: list[np.ndarray], ranked_tiers: int, delta: int):
    """Add ``delta`` for every (earlier tier, later tier) pair and ranked diagonal."""
    for t in range(len(tiers) - 1):
        rest = np.concatenate(tiers[t + 1 :])
        if tiers[t].size and rest.size:
            matrix[np.ix_(tiers[t], rest)] += delta

    if ranked_tiers:
        ranked = np.concatenate(tiers[:ranked_tiers])
        matrix[ranked, ranked] += delta


def vote(
    preferences: np.ndarray,
    choices: Iterable[C] | ChoiceIndex[C],
    ballot: Ballot,
) -> Record[C]:
    """
    Add a ballot to the preference matrix.

    For every pair of tiers where tier ``e`` comes before tier ``l``, each
    cell ``(i, j)`` with ``i`` in ``e`` and ``j`` in ``l`` is incremented.
    Choices sharing a tier contribute nothing to each other.

    Args:
        preferences: Flat preference matrix, updated in place.
        choices: Choice sequence the matrix is indexed by.
        ballot: Mapping of choice to rank number (lower is better).

    Returns:
        The :class:`Record` needed to reverse this vote with :func:`unvote`.

    Raises:
        UnknownChoiceError: If the ballot names an unknown choice. The
            matrix is left untouched.
    """
    index = ChoiceIndex.of(choices)
    tiers, has_unranked = ballot_ranks(index, ballot)
    matrix = as_square(preferences, len(index))

    ranked_tiers = len(tiers) - 1 if has_unranked else len(tiers)
    _apply(
        matrix,
        [np.asarray(tier, dtype=np.intp) for tier in tiers],
        ranked_tiers,
        1,
    )

    record = Record(
        ranked=tuple(tuple(index[i] for i in tier) for tier in tiers[:ranked_tiers]),
        unranked=(
            tuple(index[i] for i in tiers[-1] if index.is_addressable(i))
            if has_unranked
            else ()
        ),
    )
    logger.debug(
        "vote applied: %d ranked tiers, %d unranked choices",
        ranked_tiers,
        len(record.unranked),
    )
    return record


def unvote(
    preferences: np.ndarray,
    choices: Iterable[C] | ChoiceIndex[C],
    record: Record[C],
    readded: Iterable[C] = (),
) -> None:
    """
    Remove a previously applied ballot from the preference matrix.

    Choices of the record are resolved against the current choice
    sequence, which may differ from the one the vote was cast against.
    Choices that no longer exist are skipped. Every current choice that the
    record does not rank explicitly is treated as unranked, including
    choices added after the vote.

    Args:
        preferences: Flat preference matrix, updated in place.
        choices: Current choice sequence.
        record: Record returned by :func:`vote`.
        readded: Choices the record ranks that were removed and added back
            since the vote. :func:`set_choices` scored them as new, so they
            are reversed as unranked.
    """
    index = ChoiceIndex.of(choices)
    choices_count = len(index)
    matrix = as_square(preferences, choices_count)
    readded = set(readded)

    seen = np.zeros(choices_count, dtype=bool)
    tiers: list[np.ndarray] = []
    skipped = 0
    for tier in record.ranked:
        resolved = []
        for choice in tier:
            i = index.index_of(choice)
            if i is None or seen[i] or choice in readded:
                skipped += 1
                continue
            seen[i] = True
            resolved.append(i)
        if resolved:
            tiers.append(np.asarray(resolved, dtype=np.intp))

    ranked_tiers = len(tiers)
    unranked = np.flatnonzero(~seen)
    if unranked.size:
        tiers.append(unranked)

    _apply(matrix, tiers, ranked_tiers, -1)
    logger.debug(
        "vote reversed: %d ranked tiers, %d unranked choices, %d skipped",
        ranked_tiers,
        unranked.size,
        skipped,
    )


def set_choices(
    preferences: np.ndarray,
    current: Iterable[C] | ChoiceIndex[C],
    updated: Iterable[C] | ChoiceIndex[C],
) -> np.ndarray:
    """
    Remap a preference matrix onto a new choice sequence.

    Counts between choices present in both sequences are carried over.
    Removed choices are dropped. A new choice is scored as if every ballot
    already counted had left it unranked: it loses to each choice a ballot
    ranked explicitly and beats nobody.

    Args:
        preferences: Flat preference matrix indexed by ``current``.
        current: Choice sequence ``preferences`` is indexed by.
        updated: New choice sequence (additions, removals, reordering).

    Returns:
        A new flat preference matrix indexed by ``updated``.
    """
    current = ChoiceIndex.of(current)
    updated = ChoiceIndex.of(updated)
    old = as_square(preferences, len(current))

    updated_count = len(updated)
    result = new_preferences(updated_count)
    matrix = result.reshape(updated_count, updated_count)

    old_positions = np.full(updated_count, -1, dtype=np.intp)
    for i, choice in enumerate(updated):
        if updated.is_addressable(i):
            j = current.index_of(choice)
            if j is not None:
                old_positions[i] = j

    kept = np.flatnonzero(old_positions >= 0)
    added = np.flatnonzero(old_positions < 0)
    kept_old = old_positions[kept]

    matrix[np.ix_(kept, kept)] = old[np.ix_(kept_old, kept_old)]
    if added.size:
        # every explicit ranking of a kept choice put it above the unranked tail
        matrix[np.ix_(kept, added)] = old[kept_old, kept_old][:, np.newaxis]

    logger.debug(
        "choices remapped: %d -> %d (%d kept, %d added)",
        len(current),
        updated_count,
        kept.size,
        added.size,
    )
    return result


__all__ = [
    "Record",
    "new_preferences",
    "vote",
    "unvote",
    "set_choices",
]
