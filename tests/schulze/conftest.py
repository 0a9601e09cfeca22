from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass

import numpy as np
import pytest

from beatpath import schulze


@dataclass
class BallotHelper:
    def random_ballots(
        self, rng: np.random.Generator, choices: Sequence[Hashable], count: int
    ) -> list[dict[Hashable, int]]:
        """Partial ballots with random ranks; repeated picks overwrite each other."""
        n = len(choices)
        ballots = []
        for _ in range(count):
            ballot = {}
            for _ in range(n):
                ballot[choices[int(rng.integers(n))]] = int(rng.integers(n))
            ballots.append(ballot)
        return ballots

    def without(self, ballot: dict, removed: Sequence[Hashable]) -> dict:
        return {c: r for c, r in ballot.items() if c not in removed}

    def removed_choices(self, current: Sequence, updated: Sequence) -> list:
        return [c for c in current if c not in updated]

    def replay(self, choices: Sequence, ballots: Sequence[dict]) -> np.ndarray:
        preferences = schulze.new_preferences(len(choices))
        for ballot in ballots:
            schulze.vote(preferences, choices, ballot)
        return preferences

    def remapped_replay(
        self, current: Sequence, updated: Sequence, ballots: Sequence[dict]
    ) -> np.ndarray:
        """Votes cast against ``updated`` with removed choices dropped from ballots."""
        removed = self.removed_choices(current, updated)
        return self.replay(updated, [self.without(b, removed) for b in ballots])

    def square(self, preferences: np.ndarray) -> np.ndarray:
        n = int(round(np.sqrt(preferences.size)))
        assert n * n == preferences.size
        return preferences.reshape(n, n)

    def summary(self, results) -> list[tuple]:
        return [(r.choice, r.index, r.wins) for r in results]


@pytest.fixture(scope="session")
def ballots() -> BallotHelper:
    return BallotHelper()
