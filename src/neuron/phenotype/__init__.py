"""
Phenotype Package

This package implements the executable neural network that powers the
members of an evolving population, and that can also be trained directly
through backpropagation.

Modules:
    network: Fully-connected feedforward network (evaluate, train, mutate)
"""

from neuron.phenotype.network import NeuralNetwork

__all__ = ['NeuralNetwork']
