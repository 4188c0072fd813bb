"""
Trial Module

This module defines the abstract base class for neuroevolution trials with built-in
support for CPU-based parallelization using joblib.

A trial represents one independent run of the evolutionary algorithm, evolving a
population through generations until a solution is found or the maximum
number of generations is reached.
"""

import logging
from abc        import ABC, abstractmethod
from joblib     import Parallel, delayed
from statistics import mean

from neuron.run.config      import Config
from neuron.pool.evolvable  import Evolvable
from neuron.pool.population import Population

logger = logging.getLogger(__name__)

class Trial(ABC):
    """
    Abstract base class for implementing a neuroevolution trial.

    Each generation, every individual of the population is scored by
    '_evaluate_score'; the population then spawns the next generation
    from mutated copies of individuals picked proportionally to their score.

    Subclasses must implement:
    - _evaluate_score(individual): Evaluate the score of a single individual
    - _report_progress(): Display progress after each generation
    - _final_report(): Display final results

    Subclasses can override:
    - _reset(): Reset trial-specific state (call super()._reset())
    - _terminate(): Custom termination logic (default: max generations + score threshold)

    Public Attributes:
        failed: False if the run reached the score threshold

    Public Methods:
        run(): Execute a complete trial

    Parallelization of score evaluation for individuals:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            suppress_output: If True, suppress progress and final reports
        """
        self._config         : Config            = config
        self._population     : Population | None = None
        self._suppress_output: bool              = suppress_output
        self.failed          : bool              = True

    @property
    def population(self) -> Population | None:
        return self._population

    def run(self, num_jobs: int = 1):
        """
        Run the trial.

        Resets the trial state and runs the evolutionary
        algorithm until the terminate condition is met.

        Parameters:
            num_jobs: Number of parallel processes for score evaluation of individuals
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes
        """
        if self._config.fitness_termination_check and self._config.fitness_threshold is None:
            raise ValueError("'fitness_threshold' must be set when 'fitness_termination_check' is enabled")

        # Reset the trial state before starting a new run
        self._reset()

        # Create the initial population
        self._population = Population.from_config(self._config)

        # Score the initial population
        self._evaluate_score_all(num_jobs)

        if not self._suppress_output:
            self._report_progress()

        # Evolution loop
        while not self._terminate():

            # The fittest individuals of the population reproduce
            self._population.spawn_next_generation()

            # Score each individual in the new generation
            self._evaluate_score_all(num_jobs)

            if not self._suppress_output:
                self._report_progress()

        logger.info("Trial finished after %d generations (%s)",
                    self._population.generation, "failed" if self.failed else "success")

        if not self._suppress_output:
            self._final_report()

    def _reset(self):
        """
        Reset the trial state before starting a new run.

        Subclasses overriding this method should call super()._reset()
        and then initialize their problem-specific data.
        """
        self._population = None
        self.failed      = True

    @abstractmethod
    def _evaluate_score(self, individual: Evolvable) -> float:
        """
        Evaluate and return the score of an individual.

        This method should test the individual's neural network on the
        problem domain and compute a score. Higher scores make it more
        likely that the individual reproduces.

        IMPORTANT: The score must be a non-negative number.

        Parameters:
            individual: The individual to evaluate

        Returns:
            float: Score of the individual
        """
        pass

    def _evaluate_score_all(self, num_jobs: int):
        """
        Score all individuals in the population.

        Scores are always calculated before being added to the individuals, so
        that evaluation can take place in other processes (num_jobs != 1).

        Parameters:
            num_jobs: Number of parallel processes for score evaluation
        """
        individuals = self._population.individuals

        if num_jobs == 1:
            scores = [self._evaluate_score(individual) for individual in individuals]
        else:
            scores = Parallel(num_jobs)(delayed(self._evaluate_score)(i) for i in individuals)

        for individual, score in zip(individuals, scores):
            individual.add_score(score)

    @abstractmethod
    def _report_progress(self):
        """
        Report trial progress after each generation.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        pass

    @abstractmethod
    def _final_report(self):
        """
        Produce final report at the end of the trial.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        pass

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        This default implementation stops the trial after a maximum number
        of generations and (optionally) also stops it if a given measure of
        the population's scores has reached a given threshold.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        # Has this trial run for too long?
        terminate = self._population.generation >= self._config.max_number_generations

        # Check whether the score has reached a target threshold
        if self._config.fitness_termination_check:
            scores = [individual.score for individual in self._population.individuals]

            if self._config.fitness_criterion == "max":
                overall_score = max(scores)
            elif self._config.fitness_criterion == "mean":
                overall_score = mean(scores)
            else:
                raise RuntimeError("bad 'fitness_criterion' in configuration file")

            success   = overall_score >= self._config.fitness_threshold
            terminate = terminate or success

            if terminate:
                self.failed = not success

        return terminate
