"""
Target Seeking Agents

A small agent-control task, showing how to write a custom Evolvable and drive
a Population directly, without the Trial framework.

Each agent lives on a plane and must walk towards a target. At every step its
network receives the position of the target relative to the agent and outputs
a velocity (tanh outputs, so each component lies in [-1, 1]). The agent earns
one point for every step that brings it closer to the target.

Usage:
    python examples/seek_target.py [config_file]
"""

import sys
import numpy as np
from pathlib    import Path
from statistics import mean

from neuron import Config, Evolvable, NeuralNetwork, Population

NUM_STEPS = 20

class Seeker(Evolvable):
    """
    An agent moving on a plane, steered by its network.
    """

    def __init__(self, network: NeuralNetwork, mutation_rate: float):
        super().__init__(network)
        self.mutation_rate = mutation_rate

    def get_mutated_copy(self) -> 'Seeker':
        network = self.network.copy()
        network.mutate(self.mutation_rate)
        return Seeker(network, self.mutation_rate)

    def run(self, target: np.ndarray) -> int:
        """
        Walk towards the target, and return the number of steps that got closer.
        """
        position = np.zeros(2)
        distance = np.linalg.norm(target - position)
        progress = 0

        for _ in range(NUM_STEPS):
            position    += 0.1 * self.network.evaluate(target - position)
            new_distance = np.linalg.norm(target - position)
            progress    += int(new_distance < distance)
            distance     = new_distance

        return progress

def main():
    config_file = Path(__file__).parent / 'configs' / 'config_target.ini'
    config      = Config(sys.argv[1] if len(sys.argv) > 1 else str(config_file))

    seekers = [Seeker(NeuralNetwork(config.layer_sizes, config.activation, config.learning_rate),
                      config.mutation_rate)
               for _ in range(config.population_size)]
    population = Population(seekers)

    while True:
        # the target moves every generation, so agents must generalize
        target = np.random.uniform(-1.0, 1.0, 2)
        for seeker in population.individuals:
            seeker.add_score(seeker.run(target))

        scores = [seeker.score for seeker in population.individuals]
        print(f"GENERATION {population.generation:04d}: max score = {max(scores):2.0f}, mean score = {mean(scores):5.2f}")

        solved = max(scores) >= config.fitness_threshold
        if solved or population.generation >= config.max_number_generations:
            break

        population.spawn_next_generation()

if __name__ == '__main__':
    main()
