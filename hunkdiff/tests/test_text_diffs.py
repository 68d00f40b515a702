# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from hunkdiff import (
    diff_chars, diff_words, diff_words_with_space, diff_lines,
    diff_trimmed_lines, diff_sentences, diff_css, diff_arrays,
    old_from_hunks, new_from_hunks)
from hunkdiff.diffing.tokenize import (
    tokenize_chars, tokenize_words, tokenize_lines, tokenize_sentences, tokenize_css)


def equal(count, value):
    return {"count": count, "value": value, "added": False, "removed": False}

def added(count, value):
    return {"count": count, "value": value, "added": True, "removed": False}

def removed(count, value):
    return {"count": count, "value": value, "added": False, "removed": True}


def test_tokenizers():
    assert tokenize_chars("ab") == ["a", "b"]
    assert [t for t in tokenize_words("foo bar(baz)") if t] == [
        "foo", " ", "bar", "(", "baz", ")"]
    assert [t for t in tokenize_words("café olé") if t] == ["café", " ", "olé"]
    assert tokenize_lines("a\nb\r\nc") == ["a\n", "b\r\n", "c"]
    assert tokenize_lines("a\nb\n") == ["a\n", "b\n"]
    assert tokenize_lines("a\nb", newline_is_token=True) == ["a", "\n", "b"]
    assert tokenize_lines("  a  \nb", strip=True) == ["a\n", "b"]
    assert tokenize_lines("") == []
    assert [t for t in tokenize_sentences("Hi there. How are you?") if t] == [
        "Hi there.", " ", "How are you?"]
    assert [t for t in tokenize_css("a{color:red}") if t] == [
        "a", "{", "color", ":", "red", "}"]


def test_diff_chars():
    assert diff_chars("New Value.", "New ValueMoreData.") == [
        equal(9, "New Value"),
        added(8, "MoreData"),
        equal(1, "."),
    ]


def test_diff_chars_ignore_case():
    assert diff_chars("New Value", "new value", ignore_case=True) == [equal(9, "new value")]
    assert len(diff_chars("New Value", "new value")) > 1


def test_diff_words():
    assert diff_words("foo bar baz", "foo qux baz") == [
        equal(2, "foo "),
        removed(1, "bar"),
        added(1, "qux"),
        equal(2, " baz"),
    ]


def test_diff_words_ignores_whitespace_changes():
    assert diff_words("foo  bar", "foo bar") == [equal(3, "foo bar")]
    assert diff_words("Foo bar", "foo bar", ignore_case=True) == [equal(3, "foo bar")]


def test_diff_words_with_space():
    assert diff_words_with_space("foo  bar", "foo bar") == [
        equal(1, "foo"),
        removed(1, "  "),
        added(1, " "),
        equal(1, "bar"),
    ]


def test_diff_lines():
    assert diff_lines("line\nold value\nline", "line\nnew value\nline") == [
        equal(1, "line\n"),
        removed(1, "old value\n"),
        added(1, "new value\n"),
        equal(1, "line"),
    ]


def test_diff_lines_newline_is_token():
    assert diff_lines("a\nb", "a\nc", newline_is_token=True) == [
        equal(2, "a\n"),
        removed(1, "b"),
        added(1, "c"),
    ]


def test_diff_trimmed_lines():
    assert diff_trimmed_lines("a\n  b\n", "a\nb  \n") == [equal(2, "a\nb\n")]
    assert diff_lines("a\n  b\n", "a\nb\n", ignore_whitespace=True) == [equal(2, "a\nb\n")]


def test_diff_sentences():
    assert diff_sentences("Hello world. How are you?", "Hello world. How is it?") == [
        equal(2, "Hello world. "),
        removed(1, "How are you?"),
        added(1, "How is it?"),
    ]


def test_diff_css():
    assert diff_css("a{color:red}", "a{color:blue}") == [
        equal(4, "a{color:"),
        removed(1, "red"),
        added(1, "blue"),
        equal(1, "}"),
    ]


def test_diff_arrays():
    assert diff_arrays([1, 2, 3], [1, 3]) == [
        equal(1, [1]),
        removed(1, [2]),
        equal(1, [3]),
    ]


def test_diff_arrays_keeps_falsy_elements():
    assert diff_arrays([0, None, ""], [0, ""]) == [
        equal(1, [0]),
        removed(1, [None]),
        equal(1, [""]),
    ]


def test_diff_arrays_custom_compare():
    a = [{"id": 1, "v": "a"}]
    b = [{"id": 1, "v": "b"}]
    assert diff_arrays(a, b, compare=lambda x, y: x["id"] == y["id"]) == [
        equal(1, [{"id": 1, "v": "b"}])]
    assert diff_arrays(a, b) == [removed(1, a), added(1, b)]


def test_text_diffs_reconstruct_inputs():
    a = "The quick brown fox.\nJumps over the lazy dog!\n"
    b = "A quick brown cat.\nJumps over the dog!\nThe end.\n"
    for differ in [diff_chars, diff_words_with_space, diff_lines, diff_sentences, diff_css]:
        hunks = differ(a, b)
        assert old_from_hunks(hunks) == a
        assert new_from_hunks(hunks) == b


def test_text_diffs_reject_non_strings():
    for differ in [diff_chars, diff_words, diff_words_with_space, diff_lines,
                   diff_trimmed_lines, diff_sentences, diff_css]:
        with pytest.raises(TypeError):
            differ(["a"], "a")
    with pytest.raises(TypeError):
        diff_arrays("abc", [1])
    with pytest.raises(TypeError):
        diff_arrays(1, [1])
