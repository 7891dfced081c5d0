"""
Shared fixtures for integration tests.
"""

import pytest

from layerneat.genotype       import Genome
from layerneat.run.environment import Environment


class XorEnvironment(Environment):
    """The XOR problem: two binary inputs, one output."""

    xor_inputs  = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
    xor_outputs = [[0.0],      [1.0],      [1.0],      [0.0]]

    def get_state(self):
        return self.xor_inputs[0]

    def action_input_size(self):
        return 1

    def evaluate(self, genome: Genome) -> float:
        fitness = 4.0
        for inputs, expected_output in zip(self.xor_inputs, self.xor_outputs):
            fitness -= (genome.forward(inputs)[0] - expected_output[0]) ** 2
        return fitness

    def solved(self, genome: Genome) -> bool:
        return all((genome.forward(inputs)[0] > 0.5) == (expected_output[0] > 0.5)
                   for inputs, expected_output in zip(self.xor_inputs, self.xor_outputs))


class InnovationFitnessEnvironment(Environment):
    """
    One input, one output. The fitness of a genome is a function of the
    innovation number of its first connection; the problem is never solved.
    """

    fitness_by_innovation = {1: 10.0, 2: 20.0, 3: 30.0}

    def __init__(self):
        self.evaluated = []

    def get_state(self):
        return [0.0]

    def action_input_size(self):
        return 1

    def evaluate(self, genome: Genome) -> float:
        self.evaluated.append(genome)
        return self.fitness_by_innovation.get(genome.connections[0].innovation, 0.0)

    def solved(self, genome: Genome) -> bool:
        return False


@pytest.fixture
def xor_environment():
    return XorEnvironment()


@pytest.fixture
def innovation_environment():
    return InnovationFitnessEnvironment()


class ScriptedFitnessEnvironment(InnovationFitnessEnvironment):
    """Hands out fitness values in evaluation order, from a fixed list."""

    def __init__(self, fitnesses):
        super().__init__()
        self._fitnesses = list(fitnesses)

    def evaluate(self, genome: Genome) -> float:
        self.evaluated.append(genome)
        return self._fitnesses[len(self.evaluated) - 1]


@pytest.fixture
def scripted_environment():
    """Factory for environments scoring genomes from a fixed list, in evaluation order."""
    return ScriptedFitnessEnvironment
