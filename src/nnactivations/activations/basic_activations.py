import numpy as onp
import autograd.numpy as np  # type: ignore
from autograd.tracer import getval  # type: ignore

from nnactivations.activations.numerics import (
    SIGMOID_GUARD_THRESHOLDS,
    as_float,
    cast_like,
    float_type,
    is_guarded,
    sigmoid_stable,
)
from nnactivations.activations.hard_activations import (
    hard_sigmoid,
    hard_sigmoid_keras,
    hard_tanh,
)

SELU_LAMBDA = 1.0507009873554804934193349852946
SELU_ALPHA  = 1.6732632423543772848170429916717

def sigmoid(z):
    """
    Logistic sigmoid, 1 / (1 + exp(-z)).

    float32 and float16 inputs (bare or inside an autograd box) go through
    'sigmoid_stable' so that exp(-z) never overflows. float64 uses the direct
    formula, whose overflow for z < -709 still rounds to the correct 0.
    """
    if is_guarded(z):
        return sigmoid_stable(z, SIGMOID_GUARD_THRESHOLDS[float_type(z)])
    one = cast_like(z, 1)
    with onp.errstate(over='ignore'):
        return one / (one + np.exp(-z))

def logsigmoid(z):
    """
    log(sigmoid(z)), computed without overflow for very negative z and
    without cancellation for very positive z.

        >>> logsigmoid(0.0)
        -0.6931471805599453
    """
    # -z - max_v below would be inf - inf
    if getval(z) == -onp.inf:
        return as_float(z)
    max_v = np.maximum(cast_like(z, 0), -z)
    s = np.exp(-max_v) + np.exp(-z - max_v)
    return -(max_v + np.log(s))

def relu(z):
    return np.maximum(cast_like(z, 0), z)

def leakyrelu(z, a=0.01):
    return np.maximum(cast_like(z, a) * z, as_float(z))

def elu(z, alpha=1.0):
    """Exponential linear unit: z for z >= 0, alpha * (exp(z) - 1) otherwise."""
    if z >= 0:
        return as_float(z)
    return cast_like(z, alpha) * np.expm1(z)

def swish(z):
    return z * sigmoid(z)

def selu(z):
    """
    Scaled exponential linear unit (self-normalizing networks).

        selu(z) = λ * (z if z > 0 else α * (exp(z) - 1))

    with λ ≈ 1.0507 and α ≈ 1.6733.
    """
    lam   = cast_like(z, SELU_LAMBDA)
    alpha = cast_like(z, SELU_ALPHA)
    if z > 0:
        return lam * as_float(z)
    return lam * (alpha * np.expm1(z))

def softsign(z):
    # inf / inf would be NaN; the limit is ±1
    if onp.isinf(getval(z)):
        return cast_like(z, onp.sign(getval(z)))
    return z / (cast_like(z, 1) + np.abs(z))

def softplus(z):
    # log(1 + exp(z)) rewritten so that exp never sees a positive argument
    return np.maximum(z, cast_like(z, 0)) + np.log1p(np.exp(-np.abs(z)))

activations = {
    "sigmoid"           : sigmoid,
    "logsigmoid"        : logsigmoid,
    "hard_sigmoid"      : hard_sigmoid,
    "hard_sigmoid_keras": hard_sigmoid_keras,
    "relu"              : relu,
    "leakyrelu"         : leakyrelu,
    "elu"               : elu,
    "swish"             : swish,
    "selu"              : selu,
    "softsign"          : softsign,
    "softplus"          : softplus,
    "hard_tanh"         : hard_tanh
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "sigmoid"           : "SIG",
    "logsigmoid"        : "LSG",
    "hard_sigmoid"      : "HSG",
    "hard_sigmoid_keras": "HSK",
    "relu"              : "RLU",
    "leakyrelu"         : "LRL",
    "elu"               : "ELU",
    "swish"             : "SWS",
    "selu"              : "SLU",
    "softsign"          : "SSN",
    "softplus"          : "SPL",
    "hard_tanh"         : "HTH"
    }

# Greek-letter names used in the literature
activation_aliases = {
    "σ"          : "sigmoid",
    "logσ"       : "logsigmoid",
    "hardσ"      : "hard_sigmoid",
    "hardσ_keras": "hard_sigmoid_keras"
    }

def get_activation(name):
    """
    Look up an activation function by name or alias.

    Raises:
        ValueError: If the name is neither a registered name nor an alias
    """
    name = activation_aliases.get(name, name)
    if name not in activations:
        raise ValueError(f"Invalid activation function '{name}'")
    return activations[name]
