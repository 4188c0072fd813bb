"""
Evolvable Module

This module defines the members of an evolving population: the abstract Evolvable
base class, and Individual, its default implementation.

Classes:
    Evolvable:  Abstract member of a population, wrapping a network, a score and a fitness
    Individual: Evolvable whose offspring are mutated at a fixed rate
"""

import math
from abc       import ABC, abstractmethod
from itertools import count

from neuron.phenotype.network import NeuralNetwork

class Evolvable(ABC):
    """
    An element of a neuroevolution population.

    An Evolvable is a thin wrapper around the neural network (its "brain") that
    decides how it behaves. Callers judge its performance and reward it through
    'add_score'; the Population then turns the scores of all its members into
    fitness values, and uses them to pick the parents of the next generation.

    Subclasses must implement:
    - get_mutated_copy(): Return a new element powered by a mutated copy of the network

    Public properties:
        network: The neural network of this element (also available as 'brain')
        score:   Accumulated score, starts at 0
        fitness: Normalized fitness in [0, 1], only meaningful after the
                 Population has normalized the scores of the generation

    Public Methods:
        add_score(score): Reward this element
    """

    def __init__(self, network: NeuralNetwork):
        """
        Parameters:
            network: The neural network that powers this element
        """
        self._network: NeuralNetwork = network
        self._score  : float         = 0.0
        self._fitness: float         = 0.0

    @property
    def network(self) -> NeuralNetwork:
        """The neural network of this element."""
        return self._network

    @property
    def brain(self) -> NeuralNetwork:
        """Alias of 'network'."""
        return self._network

    @property
    def score(self) -> float:
        """The score accumulated in the current generation (squared once the generation ends)."""
        return self._score

    @property
    def fitness(self) -> float:
        """The normalized share of the population's squared score, in [0, 1]."""
        return self._fitness

    def add_score(self, score: float):
        """
        Add to the score of this element.

        Parameters:
            score: The (non-negative) amount to add
        """
        score = float(score)
        if not math.isfinite(score) or score < 0:
            raise ValueError(f"Score increments must be finite and non-negative, got {score}")
        self._score += score

    # Only the Population driving the selection writes these two.
    def _set_score(self, score: float):
        self._score = score

    def _set_fitness(self, fitness: float):
        self._fitness = fitness

    @abstractmethod
    def get_mutated_copy(self) -> 'Evolvable':
        """
        Create a mutated copy of this element.

        Returns:
            A new element of the same type, powered by a mutated copy of this
            element's network, with score and fitness reset to 0
        """
        pass

class Individual(Evolvable):
    """
    The default Evolvable: each offspring is powered by a copy of its parent's
    network in which every weight and bias has been perturbed with probability
    'mutation_rate'.

    Public Attributes:
        ID:            Globally unique identifier for this individual
        mutation_rate: Per weight/bias probability of mutation in the offspring
    """

    _id_generator = count(0)

    def __init__(self, network: NeuralNetwork, mutation_rate: float = 0.1):
        """
        Parameters:
            network:       The neural network that powers this individual
            mutation_rate: The probability that each weight and bias is
                           perturbed when creating an offspring
        """
        super().__init__(network)
        self.ID           : int   = next(Individual._id_generator)
        self.mutation_rate: float = mutation_rate

    def get_mutated_copy(self) -> 'Individual':
        network = self._network.copy()
        network.mutate(self.mutation_rate)
        return Individual(network, self.mutation_rate)

    def __str__(self):
        return f"ID={self.ID}, score={self._score:.4f}, fitness={self._fitness:.4f}\n{self._network!r}"

    def __repr__(self):
        return f"Individual(network={self._network!r}, mutation_rate={self.mutation_rate})"
