"""
Activations Package

This package provides scalar activation functions for neural network layers.

Exported:
    activations: Dictionary mapping activation function names to functions
    activation_codes: Dictionary mapping activation function names to 3-letter codes
    activation_aliases: Dictionary mapping Greek-letter aliases to names
    get_activation: Look up an activation function by name or alias
    Individual activation functions: sigmoid, logsigmoid, relu, leakyrelu, elu,
                                     swish, selu, softsign, softplus,
                                     hard_sigmoid, hard_sigmoid_keras, hard_tanh
    HardSigmoid: Hard sigmoid parameterized by its cutoff
    sigmoid_stable: Sigmoid with an explicit underflow cutoff
"""

from nnactivations.activations.basic_activations import (
    activations,
    activation_codes,
    activation_aliases,
    get_activation,
    sigmoid,
    logsigmoid,
    relu,
    leakyrelu,
    elu,
    swish,
    selu,
    softsign,
    softplus,
)
from nnactivations.activations.hard_activations import (
    HardSigmoid,
    hard_sigmoid,
    hard_sigmoid_keras,
    hard_tanh,
)
from nnactivations.activations.numerics import sigmoid_stable

__all__ = [
    'activations',
    'activation_codes',
    'activation_aliases',
    'get_activation',
    'sigmoid',
    'logsigmoid',
    'relu',
    'leakyrelu',
    'elu',
    'swish',
    'selu',
    'softsign',
    'softplus',
    'HardSigmoid',
    'hard_sigmoid',
    'hard_sigmoid_keras',
    'hard_tanh',
    'sigmoid_stable',
]
