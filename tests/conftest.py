import os
import sys
from glob import glob
from typing import List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import ROOT  # noqa: E402


def valid_files() -> List[str]:
    return sorted(
        os.path.relpath(file, ROOT)
        for file in glob(os.path.join(ROOT, "data", "valid", "*.expr"))
    )


def invalid_files() -> List[str]:
    return sorted(
        os.path.relpath(file, ROOT)
        for file in glob(os.path.join(ROOT, "data", "invalid", "*.expr"))
    )


@pytest.fixture(scope="session", params=valid_files())
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=invalid_files())
def invalid_file(request) -> str:
    return request.param
