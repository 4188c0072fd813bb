"""
Logic Gates through Backpropagation

This script trains a small network (2 inputs, 5 hidden nodes, 1 output) on the
truth tables of the basic two-input logic gates, one randomly chosen row at a time.

Unlike AND and OR, the XOR and XNOR gates are not linearly separable, and
can only be learned thanks to the hidden layer.

Usage:
    python examples/train_logic_gates.py [num_steps]
"""

import sys
import numpy as np

from neuron import ActivationFunction, NeuralNetwork

INPUTS = [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]]

GATES = {
    'AND' : [0.0, 0.0, 0.0, 1.0],
    'OR'  : [0.0, 1.0, 1.0, 1.0],
    'XOR' : [0.0, 1.0, 1.0, 0.0],
    'XNOR': [1.0, 0.0, 0.0, 1.0],
}

def train_gate(outputs: list[float], num_steps: int) -> NeuralNetwork:
    """
    Train a fresh network on one truth table.
    """
    network = NeuralNetwork([2, 5, 1], ActivationFunction.SIGMOID, 0.1)
    for _ in range(num_steps):
        row = np.random.randint(0, len(INPUTS))
        network.train(INPUTS[row], [outputs[row]])
    return network

def main():
    num_steps = int(sys.argv[1]) if len(sys.argv) > 1 else 15000

    for gate, outputs in GATES.items():
        network = train_gate(outputs, num_steps)

        s  = f"===============\n"
        s += f"{gate} ({num_steps} training steps)\n"
        s += "input         output   target  error\n"
        s += "------------------------------------\n"
        for values, target in zip(INPUTS, outputs):
            output = network.evaluate(values)[0]
            s += f"{values} -> {output:.4f}    {target}   {abs(output - target):.4f}\n"
        print(s)

if __name__ == '__main__':
    main()
