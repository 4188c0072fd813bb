"""
Unit tests for the activation functions.

Tests the functions in src/neuron/activations/basic_activations.py and
the ActivationFunction enumeration built on top of them.
"""

import pytest
import numpy as np
from autograd import elementwise_grad  # type: ignore

from neuron.activations.basic_activations import (
    ActivationFunction,
    activation_codes,
    activations,
    derivatives,
    sigmoid_activation,
    sigmoid_derivative,
    tanh_activation,
    tanh_derivative,
)


# Fixtures
@pytest.fixture
def sample_1d_array():
    """Standard 1D array for testing."""
    return np.array([-2.0, -1.0, 0.0, 1.0, 2.0])


@pytest.fixture
def sample_column():
    """Column matrix, as used inside the network."""
    return np.array([[-3.0], [0.5], [4.0]])


class TestActivationsDictionary:
    """Test the registries of activation functions and derivatives."""

    def test_same_names_in_all_registries(self):
        assert set(activations) == {'sigmoid', 'tanh'}
        assert set(derivatives) == set(activations)
        assert set(activation_codes) == set(activations)

    def test_every_enum_member_is_registered(self):
        for member in ActivationFunction:
            assert member.value in activations
            assert member.value in derivatives

    def test_codes(self):
        assert ActivationFunction.SIGMOID.code == 'SIG'
        assert ActivationFunction.TANH.code == 'TNH'


class TestSigmoidActivation:
    """Test sigmoid_activation and its derivative."""

    def test_scalar_zero(self):
        assert sigmoid_activation(0.0) == pytest.approx(0.5)

    def test_known_value(self):
        assert sigmoid_activation(1.0) == pytest.approx(1.0 / (1.0 + np.exp(-1.0)))

    def test_symmetry(self, sample_1d_array):
        result = sigmoid_activation(sample_1d_array)
        np.testing.assert_allclose(result + result[::-1], np.ones(5))

    def test_range(self, sample_1d_array):
        result = sigmoid_activation(sample_1d_array * 10)
        assert np.all(result >= 0.0) and np.all(result <= 1.0)

    def test_extreme_inputs_do_not_overflow(self):
        with np.errstate(over='raise'):
            assert sigmoid_activation(-1e6) == pytest.approx(0.0)
            assert sigmoid_activation(1e6) == pytest.approx(1.0)

    def test_preserves_column_shape(self, sample_column):
        assert sigmoid_activation(sample_column).shape == (3, 1)

    def test_derivative_from_output(self):
        assert sigmoid_derivative(0.5) == pytest.approx(0.25)
        assert sigmoid_derivative(1.0) == pytest.approx(0.0)
        assert sigmoid_derivative(0.2) == pytest.approx(0.16)


class TestTanhActivation:
    """Test tanh_activation and its derivative."""

    def test_scalar_zero(self):
        assert tanh_activation(0.0) == 0.0

    def test_matches_numpy(self, sample_1d_array):
        np.testing.assert_allclose(tanh_activation(sample_1d_array), np.tanh(sample_1d_array))

    def test_derivative_from_output(self):
        assert tanh_derivative(0.0) == pytest.approx(1.0)
        assert tanh_derivative(0.5) == pytest.approx(0.75)
        assert tanh_derivative(-1.0) == pytest.approx(0.0)


class TestDerivativeFromOutput:
    """The derivative, fed the output y = f(z), must equal df/dz at z."""

    @pytest.mark.parametrize('activation', list(ActivationFunction))
    def test_matches_autograd(self, activation, sample_1d_array):
        expected = elementwise_grad(activation.apply)(sample_1d_array)
        outputs  = activation.apply(sample_1d_array)
        np.testing.assert_allclose(activation.derivative_from_output(outputs), expected, rtol=1e-10)


class TestActivationFunction:
    """Test the ActivationFunction enumeration."""

    def test_apply_dispatches_to_function(self, sample_1d_array):
        np.testing.assert_array_equal(ActivationFunction.SIGMOID.apply(sample_1d_array),
                                      sigmoid_activation(sample_1d_array))
        np.testing.assert_array_equal(ActivationFunction.TANH.apply(sample_1d_array),
                                      tanh_activation(sample_1d_array))

    def test_apply_is_elementwise_on_columns(self, sample_column):
        result = ActivationFunction.TANH.apply(sample_column)
        np.testing.assert_allclose(result, np.tanh(sample_column))

    def test_from_name(self):
        assert ActivationFunction.from_name('sigmoid') is ActivationFunction.SIGMOID
        assert ActivationFunction.from_name(' TanH ') is ActivationFunction.TANH

    def test_from_name_unknown_raises_error(self):
        with pytest.raises(ValueError, match="Unknown activation function 'relu'"):
            ActivationFunction.from_name('relu')
