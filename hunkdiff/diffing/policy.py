# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from .sequences import diff
from .snakes import pick_new


def identity_tokens(value):
    return list(value)


class DiffPolicy:
    """Set of tokenizer/comparison/rendering choices to pass to the engine.

    tokenize: turns an input value into a list of tokens
    compare:  equality predicate between an old and a new token
    join:     turns a run of tokens into a hunk value
    pick:     chooses which of two equal tokens an unchanged hunk shows
    remove_empty: drop falsy tokens produced by the tokenizer
    """

    def __init__(self, *, tokenize=None, compare=None, join=None, pick=None,
                 remove_empty=False):
        self.tokenize = tokenize or identity_tokens
        self.compare = compare or operator.__eq__
        self.join = join
        self.pick = pick or pick_new
        self.remove_empty = remove_empty

    def tokens(self, value):
        "Tokenize value according to this policy."
        tokens = self.tokenize(value)
        if self.remove_empty:
            tokens = [t for t in tokens if t]
        return tokens

    def diff(self, a, b):
        "Tokenize a and b and compute their hunks."
        return diff(self.tokens(a), self.tokens(b),
                    compare=self.compare, join=self.join, pick=self.pick)

    def with_compare(self, compare):
        "Return a copy of this policy using another token equality."
        if compare is None:
            return self
        c = self.__copy__()
        c.compare = compare
        return c

    def __copy__(self):
        return DiffPolicy(
            tokenize=self.tokenize,
            compare=self.compare,
            join=self.join,
            pick=self.pick,
            remove_empty=self.remove_empty,
        )
