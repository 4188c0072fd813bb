"""Pytest configuration and shared fixtures."""

import pytest
import random
import sys
import numpy as np
from itertools import count
from pathlib import Path

# Add the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / 'src'))


@pytest.fixture(autouse=True)
def set_random_seeds():
    """Set random seeds for reproducibility and reset global state."""
    from neuron.pool.evolvable import Individual

    np.random.seed(42)
    random.seed(42)

    # Reset Individual ID generator, so that IDs start from 0 in each test
    Individual._id_generator = count(0)

    yield

    np.random.seed(None)
    random.seed(None)


@pytest.fixture
def default_config():
    """Provide a small default configuration for testing."""
    from neuron.run.config import Config
    config = Config()
    config.layer_sizes = (2, 3, 1)
    config.population_size = 10
    config.max_number_generations = 3
    return config
