"""
Activations Package

This package provides the activation functions used by neural networks.

Exported:
    ActivationFunction: Enumeration pairing each activation with its derivative
    activations:        Dictionary mapping activation function names to functions
    derivatives:        Dictionary mapping activation function names to derivatives
    Individual activation functions: sigmoid_activation, tanh_activation
"""

from neuron.activations.basic_activations import (
    ActivationFunction,
    activations,
    derivatives,
    sigmoid_activation,
    tanh_activation
)

__all__ = [
    'ActivationFunction',
    'activations',
    'derivatives',
    'sigmoid_activation',
    'tanh_activation'
]
