# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Tokenizers splitting strings into the units compared by the diff variants.
"""

import re

__all__ = [
    "tokenize_chars", "tokenize_words", "tokenize_lines",
    "tokenize_sentences", "tokenize_css",
]


# Letters with diacritics that \b would otherwise treat as word boundaries
_extended_word_chars = re.compile(
    r'^[a-zA-Z\u00C0-\u00FF\u00D8-\u00F6\u00F8-\u02C6\u02C8-\u02D7\u02DE-\u02FF\u1E00-\u1EFF]+$')

_word_split = re.compile(r'''([^\S\r\n]+|[()\[\]{}'"\r\n]|\b)''', re.ASCII)

_line_split = re.compile(r'(\n|\r\n)')

_sentence_split = re.compile(r'(\S.+?[.!?])(?=\s+|$)')

_css_split = re.compile(r'([{}:;,]|\s+)')


def tokenize_chars(value):
    return list(value)


def tokenize_words(value):
    """Split text into words, runs of whitespace and punctuation.

    Boundaries inside words made of extended Latin letters are undone.
    """
    tokens = _word_split.split(value)
    i = 0
    while i < len(tokens) - 2:
        if (not tokens[i+1] and tokens[i+2] and
                _extended_word_chars.match(tokens[i]) and
                _extended_word_chars.match(tokens[i+2])):
            # Stay at i to look again at the merged token
            tokens[i:i+3] = [tokens[i] + tokens[i+2]]
        else:
            i += 1
    return tokens


def tokenize_lines(value, newline_is_token=False, strip=False):
    """Split text into lines, keeping each line terminator.

    With newline_is_token, line terminators become separate tokens.
    With strip, surrounding whitespace is removed from each line.
    """
    parts = _line_split.split(value)
    if not parts[-1]:
        # Drop the empty string after a final terminator
        parts.pop()

    lines = []
    for i, part in enumerate(parts):
        if i % 2 and not newline_is_token:
            lines[-1] += part
        else:
            if strip:
                part = part.strip()
            lines.append(part)
    return lines


def tokenize_sentences(value):
    return _sentence_split.split(value)


def tokenize_css(value):
    return _css_split.split(value)
