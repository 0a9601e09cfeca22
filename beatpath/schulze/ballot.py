"""
Ballot ranking.

A ballot maps choices to rank numbers where a lower number is a stronger
preference. Ballots may be partial, may share rank numbers between
choices, and rank numbers do not have to be consecutive. Every choice a
ballot leaves out is placed together in a trailing "unranked" tier.
"""

from collections.abc import Iterable

from ._base import ChoiceIndex
from ._bitset import Bitset
from ._types import Ballot, C
from .errors import UnknownChoiceError


def ballot_ranks(
    choices: Iterable[C] | ChoiceIndex[C],
    ballot: Ballot,
) -> tuple[list[list[int]], bool]:
    """
    Convert a ballot into ordered tiers of choice indices.

    Args:
        choices: Choice sequence (or a prebuilt :class:`ChoiceIndex`).
        ballot: Mapping of choice to rank number.

    Returns:
        ``(tiers, has_unranked)`` where ``tiers`` lists index groups from
        the most to the least preferred, and ``has_unranked`` tells whether
        the last tier holds the choices the ballot did not mention.

    Raises:
        UnknownChoiceError: If the ballot names a choice that is not in
            ``choices``. Nothing is resolved partially.
    """
    index = ChoiceIndex.of(choices)
    choices_count = len(index)

    by_rank: dict[int, list[int]] = {}
    ranked = Bitset(choices_count)

    for choice, rank in ballot.items():
        i = index.index_of(choice)
        if i is None:
            raise UnknownChoiceError(choice)
        by_rank.setdefault(rank, []).append(i)
        ranked.set(i)

    tiers = [by_rank[rank] for rank in sorted(by_rank)]

    has_unranked = False
    if len(ballot) < choices_count:
        unranked = [i for i in range(choices_count) if not ranked.is_set(i)]
        if unranked:
            tiers.append(unranked)
            has_unranked = True

    return tiers, has_unranked


__all__ = ["ballot_ranks"]
