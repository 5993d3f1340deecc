from __future__ import annotations

import logging

import markstyle

import pytest
from sybil import Sybil
from sybil.parsers.codeblock import PythonCodeBlockParser
from sybil.parsers.doctest import DocTestParser
from sybil.parsers.rest import SkipParser


def _setup(*_args, **_kwargs):
    markstyle._logger.setLevel(logging.CRITICAL)


def _teardown(*_args, **_kwargs):
    markstyle._logger.setLevel(logging.NOTSET)


pytest_collect_file = Sybil(
    parsers=[
        DocTestParser(),
        PythonCodeBlockParser(),
        SkipParser(),
    ],
    patterns=["*.rst", "markstyle/*.py"],
    setup=_setup,
    teardown=_teardown,
).pytest()
