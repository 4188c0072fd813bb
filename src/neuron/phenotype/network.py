"""
Neural Network Module

This module implements a fully-connected feedforward neural network. The network
can learn in two ways: through backpropagation, one training example at a time,
or by having its parameters randomly perturbed (mutated) as part of an evolutionary
process driven by a Population.

Classes:
    NeuralNetwork: Layered feedforward network with per-layer weights and biases
"""

import numpy as np
from typing import Callable, Sequence, Union
import graphviz  # type: ignore

from neuron.activations import ActivationFunction

class NeuralNetwork:
    """
    A fully-connected feedforward neural network.

    The network consists of a sequence of layers; every node in a layer is connected
    to every node in the following layer. The parameters of the connections between
    layer 'i' and layer 'i+1' are stored as a weight matrix of shape
    (layer_sizes[i+1], layer_sizes[i]) and a bias column of shape (layer_sizes[i+1], 1).
    All layers share the same activation function.

    The network exclusively owns its weight and bias matrices; they are modified in
    place by 'train' and 'mutate', but their shapes never change.

    Public Attributes:
        activation:    The activation function shared by all layers
        learning_rate: Step size used by 'train'

    Public properties:
        layer_sizes:       Number of nodes in each layer
        weights:           List of weight matrices, one per pair of adjacent layers
        biases:            List of bias columns, one per pair of adjacent layers
        num_inputs:        Width of the input layer
        num_outputs:       Width of the output layer
        number_layers:     Number of layers (input and output layers included)
        number_nodes:      Total number of nodes in the network
        number_parameters: Total number of weights and biases

    Public Methods:
        copy():                  Create an independent copy of this network
        evaluate(inputs):        Calculate the output values for an input
        train(inputs, targets):  Perform one backpropagation step
        mutate(mutation):        Perturb every weight and bias
        visualize():             Draw the network using Graphviz
    """

    def __init__(self,
                 layer_sizes  : Sequence[int],
                 activation   : ActivationFunction = ActivationFunction.SIGMOID,
                 learning_rate: float = 0.1,
                 weights      : Sequence[np.ndarray] | None = None,
                 biases       : Sequence[np.ndarray] | None = None):
        """
        Initialize the network.

        If no weights and biases are given, every weight and bias is drawn
        independently from a uniform distribution over [-1, 1].

        Parameters:
            layer_sizes:   Number of nodes in each layer; the first entry is the
                           input width, the last entry the output width
            activation:    The activation function used by all layers
            learning_rate: The step size used when training through backpropagation
            weights:       Optional weight matrices, weights[i] of shape (layer_sizes[i+1], layer_sizes[i])
            biases:        Optional bias columns, biases[i] of shape (layer_sizes[i+1], 1)
        """
        layer_sizes = tuple(int(size) for size in layer_sizes)
        if len(layer_sizes) < 2:
            raise ValueError(f"A network needs at least 2 layers, got {len(layer_sizes)}")
        if any(size <= 0 for size in layer_sizes):
            raise ValueError(f"Layer sizes must be positive, got {layer_sizes}")
        if not learning_rate > 0:
            raise ValueError(f"The learning rate must be positive, got {learning_rate}")
        if (weights is None) != (biases is None):
            raise ValueError("Weights and biases must be either both given or both omitted")

        self._layer_sizes  = layer_sizes
        self.activation    = activation
        self.learning_rate = float(learning_rate)

        if weights is None:
            self._weights = [np.random.uniform(-1.0, 1.0, (n_out, n_in)) for n_in, n_out in self._layer_pairs()]
            self._biases  = [np.random.uniform(-1.0, 1.0, (n_out, 1))    for _   , n_out in self._layer_pairs()]
        else:
            self._weights = [np.array(w, dtype=np.float64) for w in weights]
            self._biases  = [np.array(b, dtype=np.float64) for b in biases]
            self._check_shapes()

    def _layer_pairs(self) -> list[tuple[int, int]]:
        """Return the (input width, output width) of each pair of adjacent layers."""
        return list(zip(self._layer_sizes[:-1], self._layer_sizes[1:]))

    def _check_shapes(self):
        """
        Verify that the weight and bias matrices agree with the layer sizes.
        """
        num_matrices = len(self._layer_sizes) - 1
        if len(self._weights) != num_matrices or len(self._biases) != num_matrices:
            raise ValueError(f"Expected {num_matrices} weight and bias matrices, "
                             f"got {len(self._weights)} weights and {len(self._biases)} biases")

        for i, (n_in, n_out) in enumerate(self._layer_pairs()):
            if self._weights[i].shape != (n_out, n_in):
                raise ValueError(f"Weight matrix {i} has shape {self._weights[i].shape}, expected {(n_out, n_in)}")
            if self._biases[i].shape != (n_out, 1):
                raise ValueError(f"Bias matrix {i} has shape {self._biases[i].shape}, expected {(n_out, 1)}")

    @property
    def layer_sizes(self) -> tuple[int, ...]:
        """Number of nodes in each layer."""
        return self._layer_sizes

    @property
    def weights(self) -> list[np.ndarray]:
        """The weight matrices (owned by the network, modify with care)."""
        return self._weights

    @property
    def biases(self) -> list[np.ndarray]:
        """The bias columns (owned by the network, modify with care)."""
        return self._biases

    @property
    def num_inputs(self) -> int:
        """Width of the input layer."""
        return self._layer_sizes[0]

    @property
    def num_outputs(self) -> int:
        """Width of the output layer."""
        return self._layer_sizes[-1]

    @property
    def number_layers(self) -> int:
        """Number of layers, input and output layers included."""
        return len(self._layer_sizes)

    @property
    def number_nodes(self) -> int:
        """Total number of nodes in the network."""
        return sum(self._layer_sizes)

    @property
    def number_parameters(self) -> int:
        """Total number of weights and biases."""
        return sum(w.size + b.size for w, b in zip(self._weights, self._biases))

    def copy(self) -> 'NeuralNetwork':
        """
        Create a copy of this network.

        The copy owns deep copies of all weight and bias matrices, so changing
        one network never affects the other.
        """
        return NeuralNetwork(self._layer_sizes,
                             self.activation,
                             self.learning_rate,
                             [w.copy() for w in self._weights],
                             [b.copy() for b in self._biases])

    @staticmethod
    def _to_column(values, expected: int, name: str) -> np.ndarray:
        """
        Convert a flat sequence of numbers into a column matrix.

        Parameters:
            values:   The values to convert (list, tuple, 1D array or column array)
            expected: The number of values required
            name:     Used in the error message ('inputs' or 'targets')

        Returns:
            Array of shape (expected, 1)
        """
        array = np.asarray(values, dtype=np.float64)
        if array.ndim == 2 and array.shape[1] == 1:
            array = array[:, 0]
        if array.ndim != 1:
            raise ValueError(f"The {name} must be a flat sequence of numbers, got an array of shape {array.shape}")
        if array.shape[0] != expected:
            raise ValueError(f"Expected {expected} {name}, got {array.shape[0]}")
        return array.reshape(-1, 1)

    def _forward(self, column: np.ndarray) -> list[np.ndarray]:
        """
        Propagate a column of input values through the network.

        Returns:
            The output of every layer, the input layer included
        """
        layer_outputs = [column]
        for w, b in zip(self._weights, self._biases):
            layer_outputs.append(self.activation.apply(w @ layer_outputs[-1] + b))
        return layer_outputs

    def evaluate(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Calculate the output values of an input.

        Parameters:
            inputs: The input values, one per node in the input layer

        Returns:
            The output values as a flat array, one per node in the output layer
        """
        column = self._to_column(inputs, self.num_inputs, 'inputs')
        return self._forward(column)[-1].ravel()

    def train(self, inputs: Sequence[float], targets: Sequence[float]):
        """
        Train the network on a single example, using backpropagation.

        The output error (targets - outputs) is propagated backwards through the
        network; each layer's error is used to update the weights and biases feeding
        into that layer, after having been propagated further back through the same
        (not yet updated) weights.

        Parameters:
            inputs:  The input values, one per node in the input layer
            targets: The desired output values, one per node in the output layer
        """
        column = self._to_column(inputs , self.num_inputs , 'inputs')
        target = self._to_column(targets, self.num_outputs, 'targets')

        layer_outputs = self._forward(column)
        error = target - layer_outputs[-1]

        for i in reversed(range(len(self._weights))):
            gradients  = self.activation.derivative_from_output(layer_outputs[i + 1])
            gradients *= error
            gradients *= self.learning_rate

            delta = gradients @ layer_outputs[i].T

            # Propagate the error before the weights are updated
            error = self._weights[i].T @ error

            self._weights[i] += delta
            self._biases[i]  += gradients

    def mutate(self, mutation: Union[float, Callable[[float], float]]):
        """
        Mutate the weights and biases of the network, in place.

        Parameters:
            mutation: Either a function mapping each weight/bias to its new value,
                      or a mutation rate: the probability with which each weight/bias
                      is perturbed by adding a value drawn from a standard normal
                      distribution
        """
        if not callable(mutation):
            rate = float(mutation)

            def perturb(value: float) -> float:
                if np.random.random() < rate:
                    return value + np.random.normal()
                return value

            mutation = perturb

        mutate_all = np.vectorize(mutation, otypes=[np.float64])
        for matrix in self._weights + self._biases:
            matrix[...] = mutate_all(matrix)

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Parameters:
            view: If True, render the visualization and open it

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t', label=repr(self))

        node_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        last_layer = len(self._layer_sizes) - 1

        # One subgraph per layer
        for layer, size in enumerate(self._layer_sizes):
            if layer == 0:
                fillcolor, label = 'lightgrey', 'Inputs'
            elif layer == last_layer:
                fillcolor, label = 'white', 'Outputs'
            else:
                fillcolor, label = 'lightblue', f'Hidden {layer}'

            with dot.subgraph(name=f'cluster_{layer}') as cluster:
                cluster.attr(rank='same', label=label, style='invisible')
                for node in range(size):
                    attrs = dict(node_attrs, fillcolor=fillcolor)
                    if layer == 0:
                        attrs['label'] = f"in={node}"
                    else:
                        attrs['label'] = f"{layer}:{node}\\nbias={self._biases[layer - 1][node, 0]:.2f}"
                    cluster.node(f"{layer}_{node}", **attrs)

        # Add edges labelled with their weights
        for layer, w in enumerate(self._weights):
            for node_out in range(w.shape[0]):
                for node_in in range(w.shape[1]):
                    dot.edge(f"{layer}_{node_in}", f"{layer + 1}_{node_out}",
                             label=f"w={w[node_out, node_in]:.2f}",
                             fontsize='5', penwidth='0.5', arrowsize='0.5')

        if view:
            dot.view(cleanup=True)

        return dot

    def __repr__(self):
        return (f"NeuralNetwork(layer_sizes={list(self._layer_sizes)}, "
                f"activation={self.activation.name}, learning_rate={self.learning_rate})")
