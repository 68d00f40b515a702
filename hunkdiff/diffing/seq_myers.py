# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Shortest edit script search using Myers' O((N+M)D) greedy algorithm.

The search runs forward from the top left corner of the edit graph,
one edit at a time. V[V0+k] holds the furthest x reached on diagonal
k = x - y by a path with the current number of edits. After each depth
the relevant part of V is kept, so that the path can be walked back
from (N, M) without recursion.
"""

import operator

from ..log import debug

__all__ = ["diff_sequence_myers"]


def alloc_V_array(N, M):
    # Size of array should be big enough for N+M edits,
    # and thus indexing from V[V0-D-1] to V[V0+D+1], V0=N+M
    n = 2*(N + M) + 2

    # None marks a diagonal no D-path can reach
    return [None]*n


def path_start(V, V0, D, k, N, M):
    """Find where the furthest reaching D-path on diagonal k leaves its last edit.

    V[V0+k-1] and V[V0+k+1] must hold the ends of the (D-1)-paths.

    Returns (x, prev_k) with prev_k the diagonal of the (D-1)-path
    extended by one insertion (k+1) or one deletion (k-1),
    or None if no legal edit reaches diagonal k.
    """
    # Coming from diagonal k+1, the diagonal above k, so keeping x
    down = V[V0+k+1] if k < D else None
    if down is not None and down - (k+1) >= M:
        down = None
    # Coming from diagonal k-1, the diagonal to the left of k, so incrementing x
    right = V[V0+k-1] if k > -D else None
    if right is not None and right >= N:
        right = None

    if down is None and right is None:
        return None
    # Ties go to the deletion
    if right is None or (down is not None and right < down):
        return down, k+1
    return right + 1, k-1


def find_snakes(trace, N, M):
    """Walk the recorded frontiers back from (N, M) and collect the snakes on the way."""
    snakes = []
    x, y = N, M
    for D in range(len(trace) - 1, 0, -1):
        k = x - y
        # Frontier of depth D-1 spans diagonals -(D-1)...(D-1)
        V = trace[D-1]
        V0 = D - 1
        x0, prev_k = path_start(V, V0, D, k, N, M)
        if x > x0:
            snakes.append((x0, x0 - k, x - x0))
        x = V[V0+prev_k]
        y = x - prev_k
    # What remains is the initial snake from the corner
    if x > 0:
        snakes.append((0, 0, x))
    snakes.reverse()
    return snakes


def diff_sequence_myers(A, B, compare=operator.__eq__):
    """Compute the shortest edit script of A and B using Myers' O(ND) algorithm.

    Returns a list of snakes, where each snake is a tuple (i,j,n)
    representing a range of n elements that compare equal
    in A and B starting at i and j.
    """
    N, M = len(A), len(B)
    MAX = N + M
    V = alloc_V_array(N, M)
    V0 = MAX
    trace = []
    for D in range(MAX+1):
        for k in range(-D, D+1, 2):
            if D == 0:
                x = 0
            else:
                start = path_start(V, V0, D, k, N, M)
                if start is None:
                    V[V0+k] = None
                    continue
                x = start[0]
            y = x - k
            # Compare sequence elements along k-diagonal
            while x < N and y < M and compare(A[x], B[y]):
                x += 1
                y += 1
            # Store x coordinate at end of snake for this k-line
            V[V0+k] = x
        trace.append(V[V0-D:V0+D+1])
        if V[V0+N-M] == N and abs(N - M) <= D:
            debug("Myers diff of %d and %d items: %d edits", N, M, D)
            return find_snakes(trace, N, M)
    raise RuntimeError("Shortest edit script length exceeds {}.".format(MAX))
