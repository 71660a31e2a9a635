"""
Unit tests for hard (piecewise-linear) activation functions.

Tests cover HardSigmoid construction, the two standard hard sigmoid
instances, and hard_tanh.
"""

import pytest
import numpy as np
from nnactivations.activations.hard_activations import (
    HardSigmoid,
    hard_sigmoid,
    hard_sigmoid_keras,
    hard_tanh,
)


# Fixtures
@pytest.fixture
def wide_hard_sigmoid():
    """HardSigmoid with cutoff 4.0 (slope 1/8)."""
    return HardSigmoid(4.0)


class TestHardSigmoidInit:
    """Test HardSigmoid initialization."""

    def test_cutoff_and_slope(self):
        """Test that slope is 1/(2*cutoff)."""
        activation = HardSigmoid(2.0)
        assert activation.cutoff == 2.0
        assert activation.slope == 0.25

    def test_integer_cutoff_converted(self):
        """Test that an integer cutoff is stored as float."""
        activation = HardSigmoid(5)
        assert isinstance(activation.cutoff, float)
        assert activation.slope == 0.1

    @pytest.mark.parametrize("cutoff", [0.0, -1.0, float('inf'), float('nan')])
    def test_invalid_cutoff_raises_error(self, cutoff):
        """Test that non-positive or non-finite cutoffs raise ValueError."""
        with pytest.raises(ValueError, match="Cutoff must be finite and positive"):
            HardSigmoid(cutoff)

    def test_repr(self):
        """Test string representation."""
        assert repr(HardSigmoid(2.5)) == "HardSigmoid(cutoff=2.5)"


class TestHardSigmoidCall:
    """Test HardSigmoid.__call__ method."""

    def test_saturation_points(self, wide_hard_sigmoid):
        """Test f(-c) = 0 and f(c) = 1."""
        assert wide_hard_sigmoid(-4.0) == 0.0
        assert wide_hard_sigmoid(4.0) == 1.0

    def test_beyond_cutoff(self, wide_hard_sigmoid):
        """Test saturation outside [-c, c]."""
        assert wide_hard_sigmoid(-100.0) == 0.0
        assert wide_hard_sigmoid(100.0) == 1.0
        assert wide_hard_sigmoid(-np.inf) == 0.0
        assert wide_hard_sigmoid(np.inf) == 1.0

    def test_midpoint(self, wide_hard_sigmoid):
        """Test f(0) = 0.5."""
        assert wide_hard_sigmoid(0.0) == 0.5

    def test_linear_segment(self, wide_hard_sigmoid):
        """Test slope 1/(2c) between the cutoffs."""
        assert wide_hard_sigmoid(2.0) == 0.75
        assert wide_hard_sigmoid(-2.0) == 0.25

    def test_nan_propagates(self, wide_hard_sigmoid):
        """Test that NaN input gives NaN output."""
        assert np.isnan(wide_hard_sigmoid(np.nan))

    def test_output_range(self, wide_hard_sigmoid, sample_inputs):
        """Test that outputs lie in [0, 1]."""
        for x in sample_inputs:
            assert 0.0 <= wide_hard_sigmoid(x) <= 1.0


class TestStandardHardSigmoids:
    """Test the hard_sigmoid and hard_sigmoid_keras instances."""

    def test_hard_sigmoid(self):
        """Test cutoff 2.0, slope 0.25."""
        assert hard_sigmoid.cutoff == 2.0
        assert hard_sigmoid(-2.0) == 0.0
        assert hard_sigmoid(2.0) == 1.0
        assert hard_sigmoid(0.0) == 0.5
        assert hard_sigmoid(1.0) == 0.75

    def test_hard_sigmoid_keras(self):
        """Test cutoff 2.5, slope 0.2."""
        assert hard_sigmoid_keras.cutoff == 2.5
        assert hard_sigmoid_keras(-2.5) == 0.0
        assert hard_sigmoid_keras(2.5) == 1.0
        assert hard_sigmoid_keras(0.0) == 0.5
        assert hard_sigmoid_keras(1.0) == pytest.approx(0.7)

    def test_float32_preserved(self):
        """Test that float32 input gives float32 output on every branch."""
        for x in [-3.0, 0.3, 3.0]:
            result = hard_sigmoid(np.float32(x))
            assert np.asarray(result).dtype == np.float32


class TestHardTanh:
    """Test hard_tanh function."""

    def test_identity_inside_unit_interval(self):
        """Test hard_tanh(x) = x for x in [-1, 1]."""
        for x in [-1.0, -0.5, 0.0, 0.5, 1.0]:
            assert hard_tanh(x) == x

    def test_clipped_outside(self):
        """Test clipping to ±1."""
        assert hard_tanh(2.0) == 1.0
        assert hard_tanh(-2.0) == -1.0
        assert hard_tanh(np.inf) == 1.0
        assert hard_tanh(-np.inf) == -1.0

    def test_range(self, sample_inputs):
        """Test that outputs lie in [-1, 1]."""
        for x in sample_inputs:
            assert -1.0 <= hard_tanh(x) <= 1.0

    def test_integer_input(self):
        """Test that integer input is promoted to floating point."""
        result = hard_tanh(0)
        assert result == 0.0
        assert np.asarray(result).dtype == np.float64

    def test_nan_propagates(self):
        """Test that NaN input gives NaN output."""
        assert np.isnan(hard_tanh(np.nan))
