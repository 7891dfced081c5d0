"""
XOR Problem Implementation for NEAT

This module implements the classic XOR (exclusive OR) problem as a benchmark
for the NEAT algorithm. XOR is not linearly separable, so it can only be
solved by a network with at least one hidden neuron, making it a minimal
test case for topology-evolving algorithms.

The XOR Problem:
    Input (0, 0) → Output 0
    Input (0, 1) → Output 1
    Input (1, 0) → Output 1
    Input (1, 1) → Output 0

Fitness Function:
    Fitness = 4.0 - Σ(output - target)²

    Maximum fitness of 4.0 is achieved when all four XOR cases produce exact
    outputs. A genome counts as a solution when every output lies on the right
    side of 0.5.

Usage:
    python trial_xor.py [config_file] [seed]
"""

import random
import sys
from pathlib import Path

from layerneat import Config, Environment, Genome, NeatAlgorithm

class XorEnvironment(Environment):
    """
    The XOR problem: two binary inputs, one output.
    """

    xor_inputs  = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
    xor_outputs = [[0.0],      [1.0],      [1.0],      [0.0]]

    def get_state(self):
        return self.xor_inputs[0]

    def action_input_size(self):
        return len(self.xor_outputs[0])

    def evaluate(self, genome: Genome) -> float:
        fitness = 4.0  # max possible fitness
        for inputs, expected_output in zip(self.xor_inputs, self.xor_outputs):
            output   = genome.forward(inputs)        # forward pass through network
            error    = output[0] - expected_output[0]
            fitness -= error ** 2                    # errors cause the fitness to decrease
        return fitness

    def solved(self, genome: Genome) -> bool:
        for inputs, expected_output in zip(self.xor_inputs, self.xor_outputs):
            if (genome.forward(inputs)[0] > 0.5) != (expected_output[0] > 0.5):
                return False
        return True

    def show_outputs(self, genome: Genome):
        s  = "input         output   target  error\n"
        s += "------------------------------------\n"
        for inputs, expected_output in zip(self.xor_inputs, self.xor_outputs):
            output = genome.forward(inputs)[0]
            s += f"{inputs} -> {output:.4f}    {expected_output[0]}   {abs(output - expected_output[0]):.4f}\n"
        print(s)

if __name__ == "__main__":
    config_file = sys.argv[1] if len(sys.argv) > 1 else str(Path(__file__).parent / "config_xor.ini")
    seed        = int(sys.argv[2]) if len(sys.argv) > 2 else 42

    environment = XorEnvironment()
    algorithm   = NeatAlgorithm(Config(config_file), random.Random(seed))
    best        = algorithm.solve(environment)

    environment.show_outputs(best)
