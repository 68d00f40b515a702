# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Line based diff of json-like objects.

Objects are canonicalized and serialized with one structural
element per line before the lines are diffed. The trailing comma
that json puts on all but the last item of an object or array is
not counted as a change, so adding or removing a last item does not
also report the line before it.
"""

import json
import re

from ..log import debug
from .canonical import canonicalize
from .policy import DiffPolicy
from .tokenize import tokenize_lines

__all__ = ["diff_json", "serialize_json"]


# Indentation of serialized objects
json_indent = 2

_comma_before_newline = re.compile(r',([\r\n])')


def compare_json_lines(x, y):
    "Compare two lines of json, ignoring a comma just before the line terminator."
    return (x == y or
            _comma_before_newline.sub(r'\1', x) == _comma_before_newline.sub(r'\1', y))


def pick_longest(a, b):
    "Report an unchanged line with its comma if either side has one."
    return a if len(a) > len(b) else b


def serialize_json(obj, replacer=None, indent=None):
    """Return obj as canonical json text with one item per line.

    Strings are taken to be json text already and returned as is.
    Serializing a cyclic object raises the ValueError of json.dumps.
    """
    if isinstance(obj, str):
        return obj
    if indent is None:
        indent = json_indent
    return json.dumps(canonicalize(obj, replacer=replacer),
                      indent=indent, ensure_ascii=False)


def json_line_policy(replacer=None, indent=None):
    "DiffPolicy comparing the serialized lines of two json-like objects."
    return DiffPolicy(
        tokenize=lambda obj: tokenize_lines(serialize_json(obj, replacer, indent)),
        compare=compare_json_lines,
        pick=pick_longest,
        remove_empty=True,
    )


def diff_json(a, b, replacer=None, indent=None):
    """Compute line-based diff of two json-like objects, list or dict or scalar.

    Keys are compared in sorted order, so objects differing only
    in key order have no changes.
    """
    hunks = json_line_policy(replacer, indent).diff(a, b)
    debug("Json diff produced %d hunks", len(hunks))
    return hunks
