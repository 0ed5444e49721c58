import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from bitdist.factory import create_bitmap


@pytest.fixture
def corner_bitmap():
    # 2x2, only (1,1) on
    return create_bitmap(2, 2, [1, 0, 0, 0])


@pytest.fixture
def center_bitmap():
    # 3 columns x 2 rows, only (2,2) on
    return create_bitmap(3, 2, [0, 0, 0, 1, 0, 0])


@pytest.fixture
def rng():
    return np.random.default_rng(2024)
