# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Key order normalization of json-like objects.

Two objects that are equal up to the insertion order of their
dict keys canonicalize to objects that serialize identically.
"""

from collections.abc import Mapping

__all__ = ["canonicalize"]


def _key_order(k):
    # Keys equal as strings (1 and "1") are ordered by type name
    return (str(k), type(k).__name__)


def canonicalize(obj, seen=None, replacer=None, key=None):
    """Return a copy of obj with the keys of every mapping in sorted order.

    Lists (and tuples) keep their order but have their items canonicalized.
    Other values are returned as they are.

    seen maps id() of the containers currently being canonicalized
    to their copies. A container referring back to one of them gets
    that copy in its place, so a cyclic input terminates and yields
    a cyclic output with the same key order on every level.

    replacer(key, value), if given, is applied to each value before it
    is canonicalized, with key None for obj itself, the dict key for
    mapping values and the index for list items.
    """
    if seen is None:
        seen = {}

    if replacer is not None:
        obj = replacer(key, obj)

    if id(obj) in seen:
        return seen[id(obj)]

    if isinstance(obj, (list, tuple)):
        result = []
        seen[id(obj)] = result
        for i, v in enumerate(obj):
            result.append(canonicalize(v, seen, replacer, i))
        del seen[id(obj)]
    elif isinstance(obj, Mapping):
        result = {}
        seen[id(obj)] = result
        for k in sorted(obj, key=_key_order):
            result[k] = canonicalize(obj[k], seen, replacer, k)
        del seen[id(obj)]
    else:
        result = obj
    return result
