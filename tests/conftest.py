from __future__ import annotations

import pytest


def _repeat(ballot: dict[str, int], count: int) -> list[dict[str, int]]:
    return [dict(ballot) for _ in range(count)]


@pytest.fixture(scope="session")
def wikipedia_ballots() -> list[dict[str, int]]:
    """The 45-voter example from the Wikipedia article on the Schulze method."""
    return (
        _repeat({"A": 1, "C": 2, "B": 3, "E": 4, "D": 5}, 5)
        + _repeat({"A": 1, "D": 2, "E": 3, "C": 4, "B": 5}, 5)
        + _repeat({"B": 1, "E": 2, "D": 3, "A": 4, "C": 5}, 8)
        + _repeat({"C": 1, "A": 2, "B": 3, "E": 4, "D": 5}, 3)
        + _repeat({"C": 1, "A": 2, "E": 3, "B": 4, "D": 5}, 7)
        + _repeat({"C": 1, "B": 2, "A": 3, "D": 4, "E": 5}, 2)
        + _repeat({"D": 1, "C": 2, "E": 3, "B": 4, "A": 5}, 7)
        + _repeat({"E": 1, "B": 2, "A": 3, "D": 4, "C": 5}, 8)
    )


@pytest.fixture(scope="session")
def staircase_ballots() -> list[dict[str, int]]:
    """Partial ballots with shared ranks over choices A..F."""
    return (
        _repeat({"A": 1}, 10)
        + [{"B": 1, "A": 2}, {"B": 1}]
        + _repeat({"B": 1, "A": 2}, 5)
        + _repeat({"C": 1}, 3)
        + [
            {"C": 1, "B": 2},
            {"C": 2, "B": 2, "A": 3},
            {"D": 1},
            {"D": 1},
            {"D": 1, "C": 2},
            {"D": 2, "C": 2, "B": 3},
            {"D": 1, "C": 3, "B": 3, "A": 4},
            {"E": 1},
            {"E": 1},
            {"E": 2, "D": 2},
            {"E": 1, "D": 2},
            {"E": 2, "D": 2, "C": 3},
            {"E": 1, "D": 2, "C": 3, "B": 3},
            {"E": 2, "D": 2, "C": 3, "B": 4, "A": 5},
            {"A": 1, "B": 2, "C": 3, "D": 4, "E": 5},
            {"A": 1, "B": 2, "C": 3, "D": 4},
            {"F": 1},
        ]
    )
