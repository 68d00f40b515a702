# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Diff variants for text and arrays.

Each variant is a DiffPolicy choosing how to tokenize its input
and how to compare tokens; the edit script itself always comes
from the same sequence diff.
"""

import operator
from collections.abc import Sequence
from functools import partial

from .policy import DiffPolicy
from .tokenize import (
    tokenize_chars, tokenize_words, tokenize_lines, tokenize_sentences, tokenize_css)

__all__ = [
    "diff_chars", "diff_words", "diff_words_with_space", "diff_lines",
    "diff_trimmed_lines", "diff_sentences", "diff_css", "diff_arrays",
]


def compare_ignore_case(x, y):
    "Compare two strings case insensitively."
    return x == y or x.lower() == y.lower()


def compare_words(x, y, ignore_case=False):
    "Compare two word tokens, where all runs of whitespace are equal."
    if ignore_case:
        x = x.lower()
        y = y.lower()
    return x == y or (not x.strip() and not y.strip())


def _text_policy(tokenize, compare=None, ignore_case=False):
    if compare is None:
        compare = compare_ignore_case if ignore_case else operator.__eq__
    return DiffPolicy(tokenize=tokenize, compare=compare, remove_empty=True)


def _check_strings(a, b):
    if not (isinstance(a, str) and isinstance(b, str)):
        raise TypeError(
            'Arguments need to be string types. Got %r and %r' % (a, b))


def diff_chars(a, b, ignore_case=False, compare=None):
    "Compute char-based diff of two strings."
    _check_strings(a, b)
    return _text_policy(tokenize_chars, compare, ignore_case).diff(a, b)


def diff_words(a, b, ignore_case=False, compare=None):
    """Compute word-based diff of two strings, ignoring changes in whitespace."""
    _check_strings(a, b)
    if compare is None:
        compare = partial(compare_words, ignore_case=ignore_case)
    return _text_policy(tokenize_words, compare).diff(a, b)


def diff_words_with_space(a, b, ignore_case=False, compare=None):
    """Compute word-based diff of two strings where whitespace is significant."""
    _check_strings(a, b)
    return _text_policy(tokenize_words, compare, ignore_case).diff(a, b)


def diff_lines(a, b, ignore_whitespace=False, newline_is_token=False, compare=None):
    """Do a line-wise diff of two strings.

    Lines keep their terminator unless newline_is_token is set,
    in which case every terminator is a token of its own.
    """
    _check_strings(a, b)
    tokenize = partial(tokenize_lines,
                       newline_is_token=newline_is_token,
                       strip=ignore_whitespace)
    return _text_policy(tokenize, compare).diff(a, b)


def diff_trimmed_lines(a, b, compare=None):
    "Do a line-wise diff of two strings, ignoring leading and trailing whitespace."
    return diff_lines(a, b, ignore_whitespace=True, compare=compare)


def diff_sentences(a, b, compare=None):
    "Compute sentence-based diff of two strings."
    _check_strings(a, b)
    return _text_policy(tokenize_sentences, compare).diff(a, b)


def diff_css(a, b, compare=None):
    "Compute diff of two css sources, split on selectors, properties and values."
    _check_strings(a, b)
    return _text_policy(tokenize_css, compare).diff(a, b)


array_policy = DiffPolicy(join=list)


def diff_arrays(a, b, compare=None):
    """Compute diff of two lists, element by element.

    Hunk values are lists of elements. Unlike the text variants,
    falsy elements are kept.
    """
    if isinstance(a, str) or isinstance(b, str) or not (
            isinstance(a, Sequence) and isinstance(b, Sequence)):
        raise TypeError(
            'Arguments need to be list types. Got %r and %r' % (a, b))
    return array_policy.with_compare(compare).diff(a, b)
