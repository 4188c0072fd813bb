"""
Pool Package

This package contains the classes that take part in neuroevolution: the elements
of a population, and the population itself.

Modules:
    evolvable:  Abstract population element and its default implementation
    population: Fitness normalization and generational selection

Exported Classes:
    Evolvable:  Abstract element of a population
    Individual: Element whose offspring are mutated at a fixed rate
    Population: Fixed-size generation of elements
"""

from neuron.pool.evolvable  import Evolvable, Individual
from neuron.pool.population import Population

__all__ = [
    'Evolvable',
    'Individual',
    'Population',
]
