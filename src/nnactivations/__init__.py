"""
nnactivations - Scalar activation functions for neural networks.

This package provides numerically stable scalar nonlinearities (sigmoid,
log-sigmoid, ReLU variants, ELU, SELU, softplus, softsign, hard variants,
swish). Every function maps one real value to one real value of the same
floating point precision and is compatible with autograd tracing.

Main components:
- activations: The activation functions and their name registry
- run: INI-driven configuration of an activation function

Example:
    >>> from nnactivations import Config, sigmoid
    >>> y = sigmoid(0.0)                # 0.5
    >>> config = Config("activation.ini")
    >>> f = config.build_activation()
"""

__version__ = "0.1.0"

from nnactivations.activations import *  # noqa: F401,F403
from nnactivations.activations import __all__ as _activations_all
from nnactivations.run.config import Config

__all__ = ["Config"] + list(_activations_all)
