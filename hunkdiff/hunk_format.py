# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import HunkFormatError


class Hunk(dict):
    """A run of tokens sharing one classification.

    Minimal class providing attribute access to the hunk keys
    `count`, `value`, `added` and `removed`. Being a plain dict
    underneath, a hunk compares equal to the corresponding dict
    and serializes directly to json.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class HunkKind:
    "Collection of valid classifications of a hunk."
    EQUAL = "equal"
    ADDED = "added"
    REMOVED = "removed"


def op_equal(count, value):
    "Create a hunk of unchanged tokens."
    return Hunk(count=count, value=value, added=False, removed=False)

def op_added(count, value):
    "Create a hunk of tokens only present in the new sequence."
    return Hunk(count=count, value=value, added=True, removed=False)

def op_removed(count, value):
    "Create a hunk of tokens only present in the old sequence."
    return Hunk(count=count, value=value, added=False, removed=True)


_hunk_factories = {
    HunkKind.EQUAL: op_equal,
    HunkKind.ADDED: op_added,
    HunkKind.REMOVED: op_removed,
}


def _all_strings(*sequences):
    return all(isinstance(t, str) for s in sequences for t in s)


def join_tokens_for(*sequences):
    """Default rendering of runs of tokens drawn from sequences as hunk values.

    If every token is a string, runs are concatenated, otherwise every
    run is kept as a list. The choice is made once, so all hunks of a
    diff hold values of one type.
    """
    if _all_strings(*sequences):
        return "".join
    return list


class HunkBuilder(object):
    """Collects classified tokens in document order and merges them into hunks."""

    # Valid classifications
    KINDS = (
        HunkKind.EQUAL,
        HunkKind.ADDED,
        HunkKind.REMOVED,
        )

    def __init__(self, join=None):
        self._join = join
        self._runs = []

    def validated(self):
        join = self._join or join_tokens_for(*(tokens for _, tokens in self._runs))
        hunks = [_hunk_factories[kind](len(tokens), join(tokens))
                 for kind, tokens in self._runs]
        return hunks

    def append(self, kind, tokens):
        assert kind in HunkBuilder.KINDS
        if not tokens:
            return
        if self._runs and self._runs[-1][0] == kind:
            # Merge with the previous run of the same kind
            self._runs[-1][1].extend(tokens)
        else:
            self._runs.append((kind, list(tokens)))

    def equal(self, tokens):
        self.append(HunkKind.EQUAL, tokens)

    def added(self, tokens):
        self.append(HunkKind.ADDED, tokens)

    def removed(self, tokens):
        self.append(HunkKind.REMOVED, tokens)


def hunk_kind(h):
    "Return the classification of a hunk."
    if h.get("added"):
        return HunkKind.ADDED
    elif h.get("removed"):
        return HunkKind.REMOVED
    return HunkKind.EQUAL


def is_valid_hunks(hunks):
    """Checks whether a list of hunks is well formed.

    Returns a boolean indicating the well-formedness of the hunks.
    """
    try:
        validate_hunks(hunks)
    except HunkFormatError:
        return False
    return True


def validate_hunks(hunks):
    """Check whether a list of hunks is well formed.

    Raises a HunkFormatError if not well formed.
    """
    if not isinstance(hunks, list):
        raise HunkFormatError("Hunks must be a list.")
    previous = None
    for h in hunks:
        validate_hunk(h)
        kind = hunk_kind(h)
        if kind == previous:
            raise HunkFormatError(
                "Adjacent hunks share the classification '{}'.".format(kind))
        previous = kind


def validate_hunk(h):
    """Check that h is a well formed hunk.

    Raises a HunkFormatError if not well formed.
    """
    if not isinstance(h, Hunk):
        raise HunkFormatError("Hunk '{}' is not a hunk type.".format(h))
    for key in ("count", "value", "added", "removed"):
        if key not in h:
            raise HunkFormatError("Hunk '{}' is missing the key '{}'.".format(h, key))
    count = h.count
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise HunkFormatError(
            "Hunk count must be a positive integer, not '{}'.".format(count))
    for key in ("added", "removed"):
        if not isinstance(h[key], bool):
            raise HunkFormatError(
                "Hunk flag '{}' must be a boolean, not '{}'.".format(key, h[key]))
    if h.added and h.removed:
        raise HunkFormatError("Hunk cannot be both added and removed.")
    if isinstance(h.value, list) and len(h.value) != count:
        raise HunkFormatError(
            "Hunk holds {} tokens but has count {}.".format(len(h.value), count))
