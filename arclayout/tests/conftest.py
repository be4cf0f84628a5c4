"""
Shared pytest fixtures for arclayout tests

Supports both development mode (pytest from the repo root) and installed
mode (pip install -e .)
"""
import math
import sys
from pathlib import Path
from typing import Dict, Tuple

import pytest


@pytest.fixture(scope="session", autouse=True)
def setup_arclayout_path():
    """
    Add repository root to Python path for development mode

    Structure:
      repo/                  <- repo root (added to sys.path)
      └── arclayout/         <- package
          └── tests/
              └── conftest.py   <- we are here
    """
    repo_root = Path(__file__).parent.parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


class SizeTable:
    """Measure callback backed by a dict, recording every call"""

    def __init__(self, sizes: Dict[str, Tuple[float, float]]):
        self.sizes = sizes
        self.calls = []

    def __call__(self, item, available):
        self.calls.append((item, available))
        return self.sizes[item]

    @property
    def items(self):
        return list(self.sizes)


@pytest.fixture
def size_table():
    """Factory for SizeTable measure callbacks"""
    return SizeTable


@pytest.fixture
def four_squares():
    """Four 24x24 items"""
    return SizeTable({f"item{i}": (24.0, 24.0) for i in range(4)})


@pytest.fixture
def mixed_items():
    """Six items of assorted sizes"""
    return SizeTable({
        'a': (30.0, 20.0),
        'b': (12.0, 40.0),
        'c': (50.0, 10.0),
        'd': (24.0, 24.0),
        'e': (8.0, 8.0),
        'f': (36.0, 18.0),
    })


@pytest.fixture
def unbounded():
    return (math.inf, math.inf)


@pytest.fixture
def items_file(tmp_path):
    """Item table with ids on disk"""
    path = tmp_path / "items.tsv"
    path.write_text(
        "# test items\n"
        "id\twidth\theight\n"
        "alpha\t24\t24\n"
        "beta\t24\t24\n"
        "gamma\t24\t24\n"
        "delta\t24\t24\n"
    )
    return path


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the CLI end to end"
    )
    config.addinivalue_line(
        "markers", "properties: Geometric property checks over many configurations"
    )
