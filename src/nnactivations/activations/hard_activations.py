"""
Hard (Piecewise-Linear) Activation Functions Module.

Hard variants replace a smooth activation by its first-order Maclaurin
expansion, clipped where the expansion reaches the saturation values of the
smooth function.

Classes:
    HardSigmoid: Hard sigmoid parameterized by its cutoff

Functions:
    hard_tanh: tanh(z) approximated by z, clipped at ±1

Instances:
    hard_sigmoid:       HardSigmoid(2.0), slope 0.25
    hard_sigmoid_keras: HardSigmoid(2.5), slope 0.2 (as in Keras)
"""

import math

from nnactivations.activations.numerics import as_float, cast_like

# ======================
# HardSigmoid Class
# ======================

class HardSigmoid:
    """
    Hard sigmoid with a configurable cutoff.

    For a cutoff c the function is 0 for z <= -c, 1 for z >= c and linear in
    between with slope 1/(2c), so that it passes through (0, 0.5):

        f(z) = clip(z / (2c) + 0.5, 0, 1)

    Public Methods:
        __call__(z): Apply activation to input z

    Public Attributes:
        cutoff: Input magnitude at which the function saturates
        slope:  Slope of the linear segment, 1/(2*cutoff)
    """

    def __init__(self, cutoff: float):
        """
        Initialize a hard sigmoid.

        Parameters:
            cutoff: Saturation point, must be finite and positive

        Raises:
            ValueError: If cutoff is not finite and positive
        """
        cutoff = float(cutoff)
        if not math.isfinite(cutoff) or cutoff <= 0.0:
            raise ValueError(f"Cutoff must be finite and positive, got {cutoff}")

        self.cutoff = cutoff
        self.slope  = 1.0 / (2.0 * cutoff)

    def __call__(self, z):
        # NaN fails both comparisons and propagates through the linear segment
        if z <= -self.cutoff:
            return cast_like(z, 0)
        if z >= self.cutoff:
            return cast_like(z, 1)
        return z * cast_like(z, self.slope) + cast_like(z, 0.5)

    def __repr__(self):
        return f"HardSigmoid(cutoff={self.cutoff})"


hard_sigmoid       = HardSigmoid(2.0)
hard_sigmoid_keras = HardSigmoid(2.5)


def hard_tanh(z):
    if z >= 1:
        return cast_like(z, 1)
    if z <= -1:
        return cast_like(z, -1)
    return as_float(z)
