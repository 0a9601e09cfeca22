"""Shared type aliases for ballots, choices and placement policies."""

from collections.abc import Hashable, Mapping
from typing import Literal, TypeAlias, TypeVar

C = TypeVar("C", bound=Hashable)

Ballot: TypeAlias = Mapping[C, int]
RankMethod: TypeAlias = Literal["competition", "competition_max", "dense", "avg"]
