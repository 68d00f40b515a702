#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

HUNKDIFF_PATH = HERE / "hunkdiff"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(HUNKDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='hunkdiff',
      version=VERSION,
      description='Shortest edit script diffs of text, arrays and json-like objects',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD-3-Clause',
      python_requires='>=3.8',
      packages=find_packages(include=['hunkdiff', 'hunkdiff.*']),
      package_data={'hunkdiff': ['*.schema.json']},
      install_requires=[
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
              'pytest-timeout',
          ],
      },
      )
