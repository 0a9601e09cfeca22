"""
Strongest path (beatpath) strengths.

Method context:
    Start from direct pairwise victories, then run a widest-path closure
    over the margin graph: the strength of a path is its weakest link, and
    ``p[i, j]`` is the strongest path from ``i`` to ``j``.

Formula:
    .. math::
        p_{ij} =
        \\begin{cases}
        P_{ij}, & P_{ij} > P_{ji} \\\\
        0, & \\text{otherwise}
        \\end{cases}

    .. math::
        p_{ij} \\leftarrow
        \\max\\bigl(p_{ij}, \\min(p_{ik}, p_{kj})\\bigr)

References:
    Schulze, M. (2011). A new monotonic, clone-independent, reversal
    symmetric, and Condorcet-consistent single-winner election method.
    Social Choice and Welfare.
"""

import numpy as np

from ._base import PREFERENCE_DTYPE, as_square


def compute_strengths(preferences: np.ndarray, choices_count: int) -> np.ndarray:
    """
    Compute the strongest path strength for every ordered pair of choices.

    Args:
        preferences: Flat preference matrix of length ``choices_count**2``.
            It is only read.
        choices_count: Number of choices N.

    Returns:
        Array of shape ``(N, N)`` with a zero diagonal.

    Notes:
        Space complexity is O(N²) and time complexity O(N³). The
        intermediate ``k`` is the outermost loop; for a fixed ``k`` the
        relaxation touches every pair at once, which is exact because row
        ``k`` and column ``k`` cannot change while ``k`` is the
        intermediate.
    """
    d = as_square(preferences, choices_count)

    # p[i,j] = strength of the strongest path from i to j
    p = np.where(d > d.T, d, 0).astype(PREFERENCE_DTYPE, copy=True)
    np.fill_diagonal(p, 0)

    through = np.empty_like(p)
    for k in range(choices_count):
        np.minimum.outer(p[:, k], p[k, :], out=through)
        np.maximum(p, through, out=p)

    np.fill_diagonal(p, 0)
    return p


__all__ = ["compute_strengths"]
