"""
Unit tests for basic activation functions.
"""

import math

import numpy as np
import pytest

from layerneat.activations.basic_activations import (
    identity_activation,
    sigmoid_activation,
    tanh_activation,
    activations,
    activation_codes,
)


class TestActivationsDictionary:
    """Test that all activations are accessible via the activations dictionary."""

    def test_dictionary_entries(self):
        assert set(activations) == {'identity', 'sigmoid', 'tanh'}

    def test_dictionary_functions_callable(self):
        for name, func in activations.items():
            assert callable(func), f"{name} is not callable"

    def test_every_activation_has_a_code(self):
        assert set(activation_codes) == set(activations)
        assert all(len(code) == 3 for code in activation_codes.values())


class TestIdentityActivation:

    def test_scalar(self):
        assert identity_activation(0.0) == 0.0
        assert identity_activation(-3.5) == -3.5

    def test_array(self):
        x = np.array([-1.0, 0.0, 2.0])
        np.testing.assert_array_equal(identity_activation(x), x)


class TestSigmoidActivation:

    def test_zero_gives_half(self):
        assert sigmoid_activation(0.0) == pytest.approx(0.5)

    def test_symmetry(self):
        assert sigmoid_activation(2.0) + sigmoid_activation(-2.0) == pytest.approx(1.0)

    def test_large_inputs_do_not_overflow(self):
        with np.errstate(over='raise'):
            assert sigmoid_activation(1e6) == pytest.approx(1.0)
            assert sigmoid_activation(-1e6) == pytest.approx(0.0)


class TestTanhActivation:

    def test_matches_math_tanh(self):
        for x in (-2.0, -0.5, 0.0, 0.5, 2.0):
            assert tanh_activation(x) == pytest.approx(math.tanh(x))

    def test_bounded(self):
        x = np.linspace(-50, 50, 11)
        assert np.all(np.abs(tanh_activation(x)) <= 1.0)
