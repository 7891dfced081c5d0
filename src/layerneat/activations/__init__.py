"""
Activations Package

Activation functions for the neurons of evolved networks, looked up by name.

Exported:
    activations:      Activation function name => function
    activation_codes: Activation function name => 3-letter code
    identity_activation, sigmoid_activation, tanh_activation
"""

from layerneat.activations.basic_activations import (
    activations,
    activation_codes,
    identity_activation,
    sigmoid_activation,
    tanh_activation
)

__all__ = ['activations', 'activation_codes',
           'identity_activation', 'sigmoid_activation', 'tanh_activation']
