"""
Run Package

This package implements the configuration and the execution of neuroevolution runs.

A trial represents a complete evolutionary run, managing the population through
generations until a solution is found or maximum generations are reached.

Modules:
    config: Configuration management (network topology, population, termination)
    trial:  Abstract base class for trials

Exported Classes:
    Config: Configuration parameters
    Trial:  Abstract base class for trials with joblib parallelization
"""

from neuron.run.config import Config
from neuron.run.trial  import Trial

__all__ = ['Config', 'Trial']
