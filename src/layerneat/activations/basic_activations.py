"""
Activation functions available to neurons.

Input and bias neurons pass their value through unchanged ('identity');
hidden and output neurons squash their summed input ('tanh' by default,
'sigmoid' when outputs should lie in (0, 1)). The functions accept scalars
as well as numpy arrays.
"""

import numpy as np

def identity_activation(z):
    return z

def sigmoid_activation(z):
    # exp overflows for large negative inputs
    z = np.clip(z, -500, 500)
    return 1.0 / (1.0 + np.exp(-z))

def tanh_activation(z):
    return np.tanh(z)

# Activation function name => activation function
activations = {
    "identity": identity_activation,
    "sigmoid" : sigmoid_activation,
    "tanh"    : tanh_activation,
    }

# Activation function name => 3-letter code used when printing genomes
activation_codes = {
    "identity": "IDN",
    "sigmoid" : "SIG",
    "tanh"    : "TNH",
    }
