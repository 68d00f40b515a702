# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator
from collections.abc import Sequence

from ..log import debug
from .seq_bruteforce import diff_sequence_bruteforce
from .seq_myers import diff_sequence_myers
from .snakes import compute_hunks_from_snakes

__all__ = ["diff", "diff_sequence"]


legal_diff_sequence_algorithms = ["myers", "bruteforce"]
diff_sequence_algorithm = "myers"


def diff_sequence(a, b, compare=operator.__eq__):
    """Compute the snakes of two sequences.

    This is a wrapper for alternative shortest edit script implementations.
    """
    if diff_sequence_algorithm == "myers":
        return diff_sequence_myers(a, b, compare)
    elif diff_sequence_algorithm == "bruteforce":
        return diff_sequence_bruteforce(a, b, compare)
    else:
        raise RuntimeError("Unknown diff_sequence_algorithm {}.".format(diff_sequence_algorithm))


def _check_sequence(x, name):
    if not isinstance(x, Sequence):
        raise TypeError(
            'Argument %s needs to be a sequence. Got %r' % (name, x))


def diff(a, b, compare=operator.__eq__, join=None, pick=None):
    """Compute the hunks transforming sequence a into sequence b.

    Elements of a and b are the tokens compared with compare(x, y).
    Strings are compared per character.

    join(tokens) renders a run of tokens as a hunk value, and
    pick(x, y) selects which of two equal tokens is reported as
    unchanged, by default the token from b.
    """
    _check_sequence(a, 'a')
    _check_sequence(b, 'b')

    snakes = diff_sequence(a, b, compare)
    debug("Found %d common runs using %s", len(snakes), diff_sequence_algorithm)
    return compute_hunks_from_snakes(a, b, snakes, join=join, pick=pick)
