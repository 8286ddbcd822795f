"""
Configuration for pytest to set up the import path and shared fixtures.
"""

import sys
from pathlib import Path
import pytest


# Add the project root to Python path so the package imports without installing
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir))


@pytest.fixture
def sample_list():
    """The five-element list most list-utility tests run against."""
    return [1, 2, 3, 4, 5]


@pytest.fixture
def call_counter():
    """Index-to-value mapping that records every index it is called with."""
    calls = []

    def _mapping(i):
        calls.append(i)
        return i * 10

    _mapping.calls = calls
    return _mapping


@pytest.fixture
def one_shot():
    """Factory for single-use iterators, to check sources are pulled lazily."""
    def _make(items):
        return iter(list(items))
    return _make
