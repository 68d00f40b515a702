# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .sequences import diff
from .canonical import canonicalize
from .jsondiff import diff_json
from .generic import (
    diff_chars, diff_words, diff_words_with_space, diff_lines,
    diff_trimmed_lines, diff_sentences, diff_css, diff_arrays)

__all__ = [
    "diff", "canonicalize", "diff_json",
    "diff_chars", "diff_words", "diff_words_with_space", "diff_lines",
    "diff_trimmed_lines", "diff_sentences", "diff_css", "diff_arrays",
    ]
