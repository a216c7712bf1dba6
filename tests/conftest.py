import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'python'))

from jubhash import PedersenHasher


@pytest.fixture(scope="session")
def hasher():
    """Shared hasher; building the generator table is the expensive part."""
    return PedersenHasher()


@pytest.fixture(scope="session")
def table(hasher):
    return hasher.table
