"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

import numpy as np

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def sample_inputs():
    """Finite inputs spanning negative, zero and positive values."""
    return [-50.0, -10.0, -2.5, -1.0, -0.5, 0.0, 0.5, 1.0, 2.5, 10.0, 50.0]


@pytest.fixture(params=[np.float16, np.float32, np.float64])
def float_dtype(request):
    """Each supported floating point precision."""
    return request.param
