"""Test configuration file."""

import numpy as np
import pytest

from radonct import Matrix


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_matrix(rng):
    def _make(width, height):
        return Matrix.from_array(rng.standard_normal((height, width)))
    return _make
