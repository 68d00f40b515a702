# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import (
    diff, canonicalize, diff_json,
    diff_chars, diff_words, diff_words_with_space, diff_lines,
    diff_trimmed_lines, diff_sentences, diff_css, diff_arrays)
from .hunk_format import Hunk, validate_hunks, is_valid_hunks
from .hunk_utils import old_from_hunks, new_from_hunks, count_edits


__all__ = [
    "__version__",
    "diff", "canonicalize", "diff_json",
    "diff_chars", "diff_words", "diff_words_with_space", "diff_lines",
    "diff_trimmed_lines", "diff_sentences", "diff_css", "diff_arrays",
    "Hunk", "validate_hunks", "is_valid_hunks",
    "old_from_hunks", "new_from_hunks", "count_edits",
    ]
