"""Shared fixtures for the maze core tests."""

import pytest

from mazecore.domain.disjoint_set import DisjointSet
from mazecore.utils.grid_factory import create_grid
from mazecore.utils.rng import SeededRNG


@pytest.fixture
def rng():
    return SeededRNG(42)


@pytest.fixture
def grid3(rng):
    """3x3 grid, all walls up."""
    return create_grid(3, 3, rng)


@pytest.fixture
def sets(grid3):
    ds = DisjointSet()
    ds.make_set(grid3)
    return ds
