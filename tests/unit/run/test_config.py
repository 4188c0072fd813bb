"""
Unit tests for Config class.
"""

import configparser
import pytest
import os
from neuron.activations import ActivationFunction
from neuron.run.config import Config


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def test_config_dir():
    """Return the directory containing test configuration files."""
    return os.path.join(os.path.dirname(__file__), 'test_configs')


# ============================================================================
# Test Config Initialization
# ============================================================================

class TestConfigInit:
    """Test Config initialization."""

    def test_init_without_file_creates_default_config(self):
        """Test that Config() without file creates a usable default config."""
        config = Config()

        assert config.layer_sizes == (2, 5, 1)
        assert config.activation is ActivationFunction.SIGMOID
        assert config.learning_rate == 0.1
        assert config.population_size == 50
        assert config.mutation_rate == 0.1
        assert config.fitness_termination_check is False
        assert config.max_number_generations == 100

    def test_init_with_nonexistent_file_raises_error(self):
        """Test that Config with nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Configuration file .* not found"):
            Config('nonexistent_file.ini')

    def test_init_with_minimal_config(self, test_config_dir):
        """Optional keys fall back to their defaults."""
        config = Config(os.path.join(test_config_dir, 'minimal.ini'))

        assert config.layer_sizes == (2, 5, 1)
        assert config.activation is ActivationFunction.SIGMOID
        assert config.learning_rate == 0.1
        assert config.population_size == 100
        assert config.mutation_rate == 0.1
        assert config.fitness_termination_check is False
        assert config.fitness_criterion == 'max'
        assert config.fitness_threshold is None
        assert config.max_number_generations == 50

    def test_init_with_full_config(self, test_config_dir):
        config = Config(os.path.join(test_config_dir, 'full.ini'))

        assert config.layer_sizes == (4, 8, 8, 2)
        assert config.activation is ActivationFunction.TANH
        assert config.learning_rate == 0.05
        assert config.population_size == 250
        assert config.mutation_rate == 0.02
        assert config.fitness_termination_check is True
        assert config.fitness_criterion == 'mean'
        assert config.fitness_threshold == 3.9
        assert config.max_number_generations == 300

    def test_missing_required_option_raises_error(self, test_config_dir):
        with pytest.raises(configparser.NoSectionError):
            Config(os.path.join(test_config_dir, 'missing_population.ini'))

    def test_unknown_activation_raises_error(self, test_config_dir):
        with pytest.raises(ValueError, match="Unknown activation function 'relu'"):
            Config(os.path.join(test_config_dir, 'bad_activation.ini'))

    def test_none_literal(self, test_config_dir):
        config = Config(os.path.join(test_config_dir, 'none_threshold.ini'))
        assert config.fitness_threshold is None


# ============================================================================
# Test Config attribute parsing
# ============================================================================

class TestConfigSetAttr:
    """Test automatic parsing when setting 'activation' and 'layer_sizes'."""

    def test_set_activation_by_name(self):
        config = Config()
        config.activation = 'TANH'
        assert config.activation is ActivationFunction.TANH

    def test_set_activation_enum(self):
        config = Config()
        config.activation = ActivationFunction.TANH
        assert config.activation is ActivationFunction.TANH

    def test_set_layer_sizes_string(self):
        config = Config()
        config.layer_sizes = "3,4, 2"
        assert config.layer_sizes == (3, 4, 2)

    def test_set_layer_sizes_list(self):
        config = Config()
        config.layer_sizes = [1, 1]
        assert config.layer_sizes == (1, 1)

    @pytest.mark.parametrize('sizes', ["4", "2, x, 1", [2, 0, 1], [], None])
    def test_invalid_layer_sizes_raise_error(self, sizes):
        config = Config()
        with pytest.raises(ValueError):
            config.layer_sizes = sizes

    def test_other_attributes_are_untouched(self):
        config = Config()
        config.population_size = 7
        assert config.population_size == 7
