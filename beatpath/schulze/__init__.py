"""
Schulze method for single-winner preferential elections.

The engine works on a flat pairwise preference matrix indexed by a choice
sequence. Ballots can be added and removed incrementally, and the choice
sequence can be changed without replaying the ballots.

Input Format
------------
- Choices: any hashable values, in a fixed order. The order defines the
  matrix indices and the final tie-break.
- Ballot: a mapping of choice to rank number. A lower number is a stronger
  preference; ranks may be shared and need not be consecutive; choices left
  out are ranked together below every ranked choice.

Output Format
-------------
- ``results``: list of :class:`Result` sorted by Schulze wins.
- ``duels``: lazy iterator over :class:`Duel` for every pair of choices.
- ``tie``: ``True`` when the two best results have equal wins.

Available API
-------------

**Matrix operations:**
- `new_preferences`: Empty preference matrix
- `vote`: Add a ballot, returning its `Record`
- `unvote`: Remove a ballot by its `Record`
- `set_choices`: Remap the matrix onto a new choice sequence

**Outcome:**
- `compute_strengths`: Strongest path strengths
- `calculate_results`: Results and tie flag from strengths
- `duels`: Pairwise duels from strengths
- `compute`: Results, duels and tie flag from a preference matrix
- `placements`: Place numbers by win count

**Stateful wrapper:**
- `Voting`: Choices and preference matrix kept together

Examples
--------
>>> from beatpath import schulze
>>> v = schulze.Voting(["A", "B", "C"])
>>> record = v.vote({"B": 1, "A": 2})
>>> results, duels, tie = v.compute()
>>> results[0].choice
'B'
>>> v.unvote(record)
>>> int(v.preferences().sum())
0
"""

from ._base import ChoiceIndex
from ._bitset import Bitset
from .ballot import ballot_ranks
from .errors import UnknownChoiceError
from .preferences import Record, new_preferences, set_choices, unvote, vote
from .results import (
    ChoiceStrength,
    Duel,
    Result,
    calculate_results,
    compute,
    duels,
    placements,
)
from .strength import compute_strengths
from .voting import Voting

__all__ = [
    # Choices
    "ChoiceIndex",
    "Bitset",
    "ballot_ranks",
    "UnknownChoiceError",
    # Matrix operations
    "Record",
    "new_preferences",
    "vote",
    "unvote",
    "set_choices",
    # Outcome
    "compute_strengths",
    "calculate_results",
    "duels",
    "compute",
    "placements",
    "Result",
    "ChoiceStrength",
    "Duel",
    # Wrapper
    "Voting",
]
