# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .hunk_format import HunkKind, hunk_kind
from .log import HunkFormatError


def _concat(values):
    """Concatenate hunk values, either strings or lists."""
    if all(isinstance(v, str) for v in values):
        return "".join(values)
    result = []
    for v in values:
        if isinstance(v, str):
            raise HunkFormatError(
                "Cannot concatenate string and list hunk values.")
        result.extend(v)
    return result


def old_from_hunks(hunks):
    """Reconstruct the old side of a diff by dropping added hunks."""
    return _concat([h.value for h in hunks if hunk_kind(h) != HunkKind.ADDED])


def new_from_hunks(hunks):
    """Reconstruct the new side of a diff by dropping removed hunks."""
    return _concat([h.value for h in hunks if hunk_kind(h) != HunkKind.REMOVED])


def count_edits(hunks):
    """Count how many tokens are removed and added by a list of hunks.

    Returns a tuple (removed, added).
    """
    removed = 0
    added = 0
    for h in hunks:
        kind = hunk_kind(h)
        if kind == HunkKind.REMOVED:
            removed += h.count
        elif kind == HunkKind.ADDED:
            added += h.count
    return removed, added
