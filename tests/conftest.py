import os
import sys
from glob import glob
from typing import List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import ROOT, open_file  # noqa: E402


@pytest.fixture(scope="session")
def mixed_program() -> str:
    return open_file("data/valid/mixed.mini")


@pytest.fixture(scope="session")
def sample_program() -> str:
    return open_file("data/invalid/ParseError_sample.mini")


def data_files(pattern: str) -> List[str]:
    return sorted(
        os.path.relpath(file, ROOT) for file in glob(os.path.join(ROOT, pattern))
    )


def valid_files() -> List[str]:
    return data_files("data/valid/*.mini")


def lex_error_files() -> List[str]:
    return data_files("data/invalid/LexError_*.mini")


def parse_error_files() -> List[str]:
    return data_files("data/invalid/ParseError_*.mini")


@pytest.fixture(scope="session", params=valid_files())
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=lex_error_files())
def lex_error_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=parse_error_files())
def parse_error_file(request) -> str:
    return request.param
