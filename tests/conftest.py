"""
Shared pytest fixtures for the mu_linalg test suite.

This module provides:
- A seeded random source so generated matrices are reproducible
- Concrete matrices reused across the determinant and inverse tests
"""

import random

import pytest

from mu_linalg import Matrix


@pytest.fixture
def seeded_random():
    """Seed the global random module and restore its state afterwards."""
    state = random.getstate()
    random.seed(2025)
    yield random
    random.setstate(state)


@pytest.fixture
def matrix_2x2():
    """The 2x2 matrix [[1, 2], [3, 4]] with determinant -2."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def matrix_3x3():
    """A regular 3x3 matrix with determinant 42."""
    return Matrix([[1, 2, 3], [3, 1, 2], [5, 6, 1]])


@pytest.fixture
def singular_3x3():
    """A 3x3 matrix with linearly dependent rows."""
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
