"""
Population Module

This module implements the Population class, which drives neuroevolution: each
generation, the members of the population are scored by the caller, and the next
generation is built from mutated copies of members picked with probability
proportional to their fitness.

Classes:
    Population: A fixed-size generation of Evolvable elements
"""

import logging
import math
import numpy as np
from typing import Iterable, TYPE_CHECKING

from neuron.phenotype.network import NeuralNetwork
from neuron.pool.evolvable    import Evolvable, Individual

if TYPE_CHECKING:
    from neuron.run.config import Config

logger = logging.getLogger(__name__)

class Population:
    """
    A population of evolving elements.

    There is no crossover, elitism or truncation: the next generation is made
    entirely of mutated copies of members drawn (with replacement) through
    fitness-proportionate "roulette wheel" selection. The size of the population
    never changes.

    Public properties:
        individuals: List of all the elements in the current generation
        generation:  Number of generations spawned so far (starts at 0)

    Public Methods:
        get_population():        Return the elements of the current generation
        get_generation():        Return the generation number
        get_best_individual():   Return the element with the highest score
        spawn_next_generation(): Replace the population with the next generation
        from_config(config):     Create a population of random Individual(s)
    """

    def __init__(self, individuals: Iterable[Evolvable]):
        """
        Parameters:
            individuals: The elements of the first generation
        """
        self._individuals: list[Evolvable] = list(individuals)
        self._generation : int             = 0

        if not self._individuals:
            raise ValueError("A population needs at least one individual")

    @classmethod
    def from_config(cls, config: 'Config') -> 'Population':
        """
        Create a population of Individual(s) powered by randomly initialized networks.

        Parameters:
            config: Stores configuration parameters (population_size, layer_sizes,
                    activation, learning_rate, mutation_rate)
        """
        individuals = []
        for _ in range(config.population_size):
            network    = NeuralNetwork(config.layer_sizes, config.activation, config.learning_rate)
            individual = Individual(network, config.mutation_rate)
            individuals.append(individual)
        return cls(individuals)

    @property
    def individuals(self) -> list[Evolvable]:
        return self._individuals

    @property
    def generation(self) -> int:
        return self._generation

    def get_population(self) -> list[Evolvable]:
        return self._individuals

    def get_generation(self) -> int:
        return self._generation

    def get_best_individual(self) -> Evolvable:
        """
        Return the element of the current generation with the highest score.
        """
        return max(self._individuals, key=lambda individual: individual.score)

    def spawn_next_generation(self):
        """
        Replace the current generation with the next one.

        Step 1: Fitness normalization
        - Square the score of each element, so that higher scores are rewarded
          more than proportionally
        - Divide each squared score by their total, so that fitness sums up to 1

        Step 2: Selection
        - Pick as many parents as there are elements, each pick independent and
          with probability proportional to fitness

        Step 3: Reproduction
        - Each pick contributes a mutated copy of itself to the new generation
        """
        self._normalize_fitness()

        new_individuals = [self._pool_selection().get_mutated_copy() for _ in self._individuals]

        self._individuals  = new_individuals
        self._generation  += 1

        logger.debug("Spawned generation %d (%d individuals)", self._generation, len(new_individuals))

    def _normalize_fitness(self):
        """
        Calculate the fitness of every element from its score.

        Each score is replaced by its square, and the fitness of each element is
        its squared score divided by the sum of all squared scores. If all scores
        are zero, every element is given the same fitness.
        """
        squared = [individual.score * individual.score for individual in self._individuals]
        total   = math.fsum(squared)

        if not math.isfinite(total):
            raise ValueError(f"Cannot normalize fitness, the sum of squared scores is {total}")

        if total > 0:
            fitness = [score / total for score in squared]
        else:
            logger.warning("All individuals in generation %d scored 0, using uniform fitness", self._generation)
            fitness = [1.0 / len(self._individuals)] * len(self._individuals)

        for individual, score, fit in zip(self._individuals, squared, fitness):
            individual._set_score(score)
            individual._set_fitness(fit)

    def _pool_selection(self) -> Evolvable:
        """
        Select a random element, based on its fitness.
        Elements with bigger fitness have more chances of being selected.

        Returns:
            The selected element (not a copy)
        """
        cumulative = np.cumsum([individual.fitness for individual in self._individuals])
        rand       = np.random.random()

        # first element whose cumulative fitness exceeds 'rand'
        index = int(np.searchsorted(cumulative, rand, side='right'))

        # rounding can leave the total just below 'rand': fall back
        # to the last element that has a chance of being selected
        if index >= len(self._individuals):
            index = int(np.searchsorted(cumulative, cumulative[-1], side='left'))

        return self._individuals[index]

    def __len__(self):
        return len(self._individuals)

    def __str__(self):
        return '\n'.join(str(individual) for individual in self._individuals)
