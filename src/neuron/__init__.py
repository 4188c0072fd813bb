"""
neuron - Feedforward neural networks trained by backpropagation or neuroevolution.

This package provides a minimal, fully-connected feedforward neural network that
can learn in two ways: supervised training through backpropagation, one example at
a time, or neuroevolution, where a population of networks evolves through
fitness-proportionate selection and random mutation.

Main components:
- activations: Activation functions and their derivatives
- phenotype: The neural network (evaluate, train, mutate)
- pool: Evolvable elements and the population that evolves them
- run: Configuration and the trial framework

Example:
    >>> from neuron import NeuralNetwork
    >>> network = NeuralNetwork([2, 5, 1])
    >>> network.train([1, 1], [1])
    >>> network.evaluate([1, 1])
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from neuron.activations import ActivationFunction
from neuron.phenotype.network import NeuralNetwork
from neuron.pool.evolvable import Evolvable, Individual
from neuron.pool.population import Population
from neuron.run.config import Config
from neuron.run.trial import Trial

__all__ = [
    "ActivationFunction",
    "NeuralNetwork",
    "Evolvable",
    "Individual",
    "Population",
    "Config",
    "Trial",
]
