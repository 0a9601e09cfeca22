"""beatpath: incremental Schulze method elections.

Modules
------------------
- ``beatpath.schulze`` provides the pairwise preference matrix engine:
  voting and unvoting ballots, beatpath strengths, results and duels, and
  remapping the matrix when the set of choices changes.

"""

__version__ = "0.1.0"

from . import schulze

__all__ = ["schulze"]
