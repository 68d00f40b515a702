# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Utilities for turning 'snakes', or contiguous sequences of equal elements of two sequences,
into hunks.
"""

from ..hunk_format import HunkBuilder, join_tokens_for

__all__ = ["compute_hunks_from_snakes"]


def pick_new(a, b):
    "Report an unchanged token the way it reads in the new sequence."
    return b


def compute_hunks_from_snakes(a, b, snakes, join=None, pick=None):
    """Compute hunks from snakes.

    Everything between two snakes is reported as removed from a,
    followed by added from b.
    """
    if pick is None:
        pick = pick_new
    if join is None:
        join = join_tokens_for(a, b)

    hb = HunkBuilder(join)
    i0, j0, i1, j1 = 0, 0, len(a), len(b)
    for i, j, n in snakes + [(i1, j1, 0)]:
        assert i >= i0 and j >= j0, 'Snakes must be ordered and non-overlapping.'
        if i > i0:
            hb.removed(a[i0:i])
        if j > j0:
            hb.added(b[j0:j])
        if n:
            hb.equal([pick(a[i + k], b[j + k]) for k in range(n)])

        # Update corner offsets for next rectangle
        i0, j0 = i+n, j+n
    return hb.validated()
