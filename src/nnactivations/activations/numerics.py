"""
Numerical Helpers Module.

Precision handling shared by every activation function. All formulas in this
package must return a value of the same floating point type as their input, so
constants are never mixed in as bare Python floats: they are first cast to the
input's type with `cast_like`.

Inputs may be Python numbers, NumPy scalars or autograd boxes (during autograd
tracing values are wrapped in ArrayBox objects). Boxes are unwrapped with
`getval` only to inspect their precision, never to compute with.

Functions:
    float_type:     Floating point scalar type of a value
    cast_like:      Convert a constant to the floating point type of a value
    as_float:       Promote a value to its floating point type
    is_guarded:     Whether sigmoid needs the overflow guard for a value
    sigmoid_stable: Sigmoid with an explicit underflow cutoff
"""

import numpy as onp
import autograd.numpy as np  # type: ignore
from autograd.tracer import getval, isbox  # type: ignore

# Below these inputs exp(-x) overflows (or comes close to it) in the given
# precision. The guard returns 0 there, flushing the tiny true values
# (subnormal in float16) to zero.
# float32: exp(88.7) overflows. float16: exp(11.1) overflows.
SIGMOID_GUARD_THRESHOLDS = {
    onp.float32: -80.0,
    onp.float16: -11.0,
}

DEFAULT_GUARD_THRESHOLD = SIGMOID_GUARD_THRESHOLDS[onp.float32]


def float_type(x):
    """
    Return the NumPy floating point scalar type of 'x'.

    Python numbers and integer types map to float64, mirroring the promotion
    of 'x / 1'.
    """
    dtype = getattr(getval(x), 'dtype', None)
    if dtype is not None and onp.issubdtype(dtype, onp.floating):
        return dtype.type
    return onp.float64


def cast_like(x, value):
    """Convert 'value' to the floating point type of 'x' (boxes pass through)."""
    if isbox(value):
        return value
    return float_type(x)(value)


def as_float(x):
    """Return 'x' promoted to its floating point type."""
    if isbox(x):
        return x * cast_like(x, 1)
    return float_type(x)(x)


def is_guarded(x):
    return float_type(x) in SIGMOID_GUARD_THRESHOLDS


def sigmoid_stable(x, threshold=DEFAULT_GUARD_THRESHOLD):
    """
    Sigmoid that returns exactly 0 for inputs below 'threshold'.

    Exposed on its own so that any derivative-tracking wrapper around a reduced
    precision value can route its own sigmoid through it.

    Parameters:
        x:         Input value (scalar or autograd box)
        threshold: Inputs strictly below this return 0

    Returns:
        1 / (1 + exp(-x)), with the same floating point type as x
    """
    if x < threshold:
        return cast_like(x, 0)
    one = cast_like(x, 1)
    return one / (one + np.exp(-x))
