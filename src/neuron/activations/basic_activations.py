import autograd.numpy as np  # type: ignore
from enum import Enum

def sigmoid_activation(z):
    z = np.clip(z, -500, 500)   # to prevent overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-z))

def tanh_activation(z):
    return np.tanh(z)

# Derivatives are written in terms of the activation's output y = f(z),
# which is what backpropagation has at hand after the forward pass.

def sigmoid_derivative(y):
    return y * (1.0 - y)

def tanh_derivative(y):
    return 1.0 - y * y

activations = {
    "sigmoid": sigmoid_activation,
    "tanh"   : tanh_activation
    }

derivatives = {
    "sigmoid": sigmoid_derivative,
    "tanh"   : tanh_derivative
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "sigmoid": "SIG",
    "tanh"   : "TNH"
    }

class ActivationFunction(Enum):
    """
    The activation functions available to a NeuralNetwork.

    Each member pairs a forward function with its derivative, the latter
    expressed as a function of the forward output. Both work element-wise
    on scalars and numpy arrays.
    """

    SIGMOID = "sigmoid"
    TANH    = "tanh"

    def apply(self, z):
        """Evaluate the activation function."""
        return activations[self.value](z)

    def derivative_from_output(self, y):
        """Evaluate the derivative, given the output y = apply(z)."""
        return derivatives[self.value](y)

    @property
    def code(self) -> str:
        return activation_codes[self.value]

    @classmethod
    def from_name(cls, name: str) -> 'ActivationFunction':
        """
        Look up an activation function by its (case-insensitive) name.

        Parameters:
            name: "sigmoid" or "tanh"

        Returns:
            The matching ActivationFunction
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown activation function '{name}'. "
                             f"Use one of: {', '.join(activations)}") from None
