"""
XOR Problem Implementation for Neuroevolution

This module evolves networks that compute the XOR (exclusive OR) function,
without any gradient information: the population only learns through
fitness-proportionate selection and mutation.

The XOR Problem:
    XOR is a two-input, one-output boolean function where the output is True
    only when the inputs differ:
        Input (0, 0) → Output 0
        Input (0, 1) → Output 1
        Input (1, 0) → Output 1
        Input (1, 1) → Output 0

Score Function:
    Score = 4.0 - Σ(output - target)²

    Maximum score of 4.0 is achieved when all four XOR cases produce exact outputs.

Usage:
    config = Config("examples/configs/config_gates.ini")
    trial = Trial_XOR(config)
    trial.run(num_jobs=1)
"""

import sys
from pathlib    import Path
from statistics import mean

from neuron.run.config import Config
from neuron.pool       import Evolvable
from neuron.run        import Trial

class Trial_XOR(Trial):
    """
    Neuroevolution trial for solving the XOR (exclusive OR) problem.

    Implemented Methods:
        _evaluate_score(individual): Test network on all 4 XOR cases
        _report_progress(): Display generation statistics and XOR truth table
        _final_report(): Visualize the evolved network
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        super().__init__(config, suppress_output)

        self.xor_inputs  = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
        self.xor_outputs = [[0.0],      [1.0],      [1.0],      [0.0]]

    def _evaluate_score(self, individual: Evolvable) -> float:
        """
        Evaluate the score of an individual by testing it on the XOR inputs.

        Returns:
            Score (maximum 4.0 for perfect XOR solution)
        """
        score = 4.0  # max possible score
        for inputs, expected_output in zip(self.xor_inputs, self.xor_outputs):
            output = individual.network.evaluate(inputs)      # forward pass through network
            error  = output[0] - expected_output[0]           # calculate error
            score -= error ** 2                               # errors cause the score to decrease
        return score

    def _report_progress(self):
        """
        Print a report describing the current generation.
        """
        best   = self._population.get_best_individual()
        scores = [individual.score for individual in self._population.individuals]

        s  = f"===============\n"
        s += f"GENERATION {self._population.generation:04d}\n"
        s += f"population size = {len(self._population)}\n"
        s += f"maximum score   = {best.score:.4f}\n"
        s += f"mean score      = {mean(scores):.4f}\n"
        s += '\n'

        s += "input         output   target  error\n"
        s += "------------------------------------\n"
        for inputs, target in zip(self.xor_inputs, self.xor_outputs):
            output = best.network.evaluate(inputs)[0]
            s += f"{inputs} -> {output:.4f}    {target[0]}   {abs(output - target[0]):.4f}\n"

        print(s)

    def _final_report(self):
        """
        Display results at the end of the trial.
        """
        print("SUCCESS" if not self.failed else "FAILED")

        best = self._population.get_best_individual()
        try:
            best.network.visualize(view=True)
            print("Network visualization saved as 'Digraph.gv.pdf'")
        except Exception as e:
            print(f"Could not visualize network: {e}")

if __name__ == '__main__':
    config_file = Path(__file__).parent / 'configs' / 'config_gates.ini'
    config      = Config(sys.argv[1] if len(sys.argv) > 1 else str(config_file))

    trial = Trial_XOR(config)
    trial.run(num_jobs=1)
