# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from hunkdiff.diffing import jsondiff, sequences
from hunkdiff.log import logger


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def json_schema_hunks(request):
    schema_path = pjoin(schema_dir, 'hunk_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def hunk_validator(request, json_schema_hunks):
    return Validator(json_schema_hunks)


@fixture
def reset_module_config(monkeypatch):
    """Restore module level settings changed by a test."""
    monkeypatch.setattr(sequences, 'diff_sequence_algorithm',
                        sequences.diff_sequence_algorithm)
    monkeypatch.setattr(jsondiff, 'json_indent', jsondiff.json_indent)
    level = logger.level
    root_level = logging.getLogger().level
    yield
    logger.setLevel(level)
    logging.getLogger().setLevel(root_level)
