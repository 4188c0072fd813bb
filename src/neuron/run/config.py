import configparser
import os
from neuron.activations import ActivationFunction

class Config:

    @staticmethod
    def _parse_activation(raw_activation):
        """
        Parse the activation function from its name.

        Parameters:
            raw_activation: Either a name ("sigmoid", "tanh") or already an ActivationFunction

        Returns:
            The ActivationFunction
        """
        if isinstance(raw_activation, ActivationFunction):
            return raw_activation
        return ActivationFunction.from_name(raw_activation)

    @staticmethod
    def _parse_layer_sizes(raw_sizes):
        """
        Parse layer_sizes from a comma-separated string to a tuple of integers.

        Parameters:
            raw_sizes: Either a comma-separated string ("2, 5, 1") or already a sequence

        Returns:
            Tuple with the number of nodes in each layer
        """
        if raw_sizes is None:
            raise ValueError("layer_sizes is required")
        if isinstance(raw_sizes, str):
            raw_sizes = [size.strip() for size in raw_sizes.split(',') if size.strip()]
        try:
            sizes = tuple(int(size) for size in raw_sizes)
        except ValueError:
            raise ValueError(f"Invalid layer_sizes '{raw_sizes}', expected comma-separated integers") from None

        if len(sizes) < 2 or any(size <= 0 for size in sizes):
            raise ValueError(f"Invalid layer_sizes {sizes}, need at least 2 positive sizes")
        return sizes

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.layer_sizes   = (2, 5, 1)
            self.activation    = ActivationFunction.SIGMOID
            self.learning_rate = 0.1

            self.population_size = 50
            self.mutation_rate   = 0.1

            self.fitness_termination_check = False
            self.fitness_criterion         = 'max'
            self.fitness_threshold         = None
            self.max_number_generations    = 100
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [NETWORK]

        # The number of nodes in each layer, input and output layers included.
        # Example: "2, 5, 1" (2 inputs, one hidden layer with 5 nodes, 1 output).
        self.layer_sizes = get_value('NETWORK', 'layer_sizes', str)

        # Activation function shared by all layers.
        # Options: "sigmoid", "tanh".
        self.activation = get_value('NETWORK', 'activation', str, default='sigmoid')

        # The step size used when training through backpropagation.
        self.learning_rate = get_value('NETWORK', 'learning_rate', float, default=0.1)

        # [POPULATION]

        # The number of individuals in each generation.
        self.population_size = get_value('POPULATION', 'population_size', int)

        # [MUTATION]

        # The probability that a weight or bias of an offspring's network
        # is perturbed by a value drawn from a standard normal distribution.
        self.mutation_rate = get_value('MUTATION', 'mutation_rate', float, default=0.1)

        # [TERMINATION]

        # Whether to use the scores of the most recent
        # generation as a criterion for stopping the run.
        self.fitness_termination_check = get_value('TERMINATION', 'fitness_termination_check', bool, default=False)

        # The function used to compute the termination criterion.
        # Only applicable if 'fitness_termination_check' is 'True'.
        # Allowed values:
        #   "mean" calculate the mean score across the entire population
        #   "max"  get the score of the best individual in the population
        self.fitness_criterion = get_value('TERMINATION', 'fitness_criterion', str, default='max')

        # The score value which when met or exceeded causes the run to end.
        # Only applicable if 'fitness_termination_check' is 'True'.
        self.fitness_threshold = get_value('TERMINATION', 'fitness_threshold', float, default=None)

        # The number of generations after which to stop the run.
        # If 'fitness_termination_check' is 'True', the run may stop sooner.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse 'activation' and 'layer_sizes' when set.
        This allows users to write config.activation = "tanh" or config.layer_sizes = "2,3,1"
        and have them automatically converted.
        """
        if name == 'activation':
            value = self._parse_activation(value)
        elif name == 'layer_sizes':
            value = self._parse_layer_sizes(value)
        super().__setattr__(name, value)
