# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from hunkdiff import diff
from hunkdiff.hunk_format import is_valid_hunks
from hunkdiff.hunk_utils import old_from_hunks, new_from_hunks, count_edits
from hunkdiff.diffing.seq_bruteforce import diff_sequence_bruteforce


def llcs(a, b):
    "Length of the longest common subsequence, computed by brute force."
    return sum(n for (i, j, n) in diff_sequence_bruteforce(a, b))


def joined(tokens, *others):
    """The concatenation of tokens the way the hunk values of a diff
    between tokens and others are concatenated."""
    if not tokens or all(isinstance(t, str) for s in (tokens,) + others for t in s):
        return "".join(tokens)
    return list(tokens)


def check_snakes(a, b, snakes):
    "Check that snakes are ordered, disjoint runs of equal items."
    i0, j0 = 0, 0
    for i, j, n in snakes:
        assert n > 0
        assert i >= i0 and j >= j0
        assert a[i:i+n] == b[j:j+n]
        i0, j0 = i + n, j + n
    assert i0 <= len(a) and j0 <= len(b)


def check_diff_and_reconstruct(a, b):
    "Check that diff(a, b) is valid, reconstructs both sides and is minimal."
    hunks = diff(a, b)
    assert is_valid_hunks(hunks)
    assert old_from_hunks(hunks) == joined(a, b)
    assert new_from_hunks(hunks) == joined(b, a)
    removed, added = count_edits(hunks)
    common = llcs(a, b)
    assert removed == len(a) - common
    assert added == len(b) - common
    return hunks


def check_symmetric_diff_and_reconstruct(a, b):
    "Check diff(a, b) and diff(b, a)."
    check_diff_and_reconstruct(a, b)
    check_diff_and_reconstruct(b, a)
