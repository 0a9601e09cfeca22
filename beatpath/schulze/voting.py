"""
Voting: a preference matrix together with the choices it is indexed by.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import Generic

import numpy as np

from ._base import PREFERENCE_DTYPE, ChoiceIndex
from ._types import Ballot, C
from .preferences import Record, new_preferences, set_choices, unvote, vote
from .results import Duel, Result, compute

logger = logging.getLogger(__name__)


class Voting(Generic[C]):
    """
    In-memory voting state for a list of choices.

    Holds the number of votes for every ordered pair of choices and
    delegates to the functional API in :mod:`beatpath.schulze`. A single
    instance is not safe for concurrent use; callers serialize access.

    Examples:
        >>> from beatpath.schulze import Voting
        >>> v = Voting(["A", "B", "C", "D", "E"])
        >>> _ = v.vote({"A": 1})
        >>> _ = v.vote({"A": 1, "B": 1, "D": 2})
        >>> results, _, tie = v.compute()
        >>> results[0].choice, tie
        ('A', False)
    """

    def __init__(self, choices: Iterable[C] = ()) -> None:
        self._choices = ChoiceIndex(choices)
        self._preferences = new_preferences(len(self._choices))
        self._generation = 0
        # choice -> generation it last entered the choice set at
        self._added: dict[C, int] = {}

    def __repr__(self) -> str:
        return f"Voting(choices={list(self._choices)!r})"

    @property
    def choices(self) -> tuple[C, ...]:
        return tuple(self._choices)

    def vote(self, ballot: Ballot) -> Record[C]:
        """Add a ballot; keep the returned record to be able to unvote it."""
        record = vote(self._preferences, self._choices, ballot)
        return replace(record, generation=self._generation)

    def unvote(self, record: Record[C]) -> None:
        """
        Remove a ballot previously added with :meth:`vote`.

        A choice the ballot ranked that was removed and added back since
        then counts as unranked, matching how :meth:`set_choices` scored it.
        """
        readded = [
            choice
            for tier in record.ranked
            for choice in tier
            if self._added.get(choice, 0) > record.generation
        ]
        unvote(self._preferences, self._choices, record, readded=readded)

    def set_choices(self, choices: Iterable[C]) -> None:
        """Replace the choices, carrying over votes between retained choices."""
        updated = ChoiceIndex(choices)
        self._preferences = set_choices(self._preferences, self._choices, updated)

        self._generation += 1
        for choice in updated:
            if self._choices.index_of(choice) is None:
                self._added[choice] = self._generation
        self._choices = updated

    def compute(self) -> tuple[list[Result[C]], Iterator[Duel[C]], bool]:
        """Return ``(results, duels, tie)``; see :func:`beatpath.schulze.compute`."""
        return compute(self._preferences, self._choices)

    def preferences(self) -> np.ndarray:
        """Copy of the flat preference matrix."""
        return self._preferences.copy()

    def pairwise_counts(self) -> dict[C, dict[C, int]]:
        """Off-diagonal vote counts keyed by choice, first occurrences only."""
        n = len(self._choices)
        matrix = self._preferences.reshape(n, n)
        addressable = [i for i in range(n) if self._choices.is_addressable(i)]
        return {
            self._choices[i]: {
                self._choices[j]: int(matrix[i, j]) for j in addressable if j != i
            }
            for i in addressable
        }

    def export(self) -> tuple[list[C], np.ndarray]:
        """Return copies of the choices and the ``(N, N)`` preference matrix."""
        n = len(self._choices)
        return list(self._choices), self._preferences.reshape(n, n).copy()

    def import_matrix(self, matrix) -> None:
        """
        Replace the vote counts with a previously exported ``(N, N)`` matrix.

        Raises:
            ValueError: If the matrix does not have one row of N counts per
                choice, or holds non-integer values.
        """
        n = len(self._choices)
        rows = list(matrix)
        if len(rows) != n:
            raise ValueError(f"incorrect matrix length {len(rows)}")
        for i, row in enumerate(rows):
            if len(row) != n:
                raise ValueError(f"incorrect length {len(row)} of row {i}")

        imported = np.asarray(rows).reshape(n * n)
        if imported.size and not np.issubdtype(imported.dtype, np.integer):
            raise ValueError(f"matrix must hold integer counts, got {imported.dtype}")

        self._preferences = imported.astype(PREFERENCE_DTYPE, copy=True)
        logger.debug("imported preference matrix for %d choices", n)


__all__ = ["Voting"]
