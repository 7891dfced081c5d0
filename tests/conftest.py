"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from layerneat.genotype import ConnectionGene, Genome, InnovationTracker, NeuronGene, NeuronType
from layerneat.run.config import Config


@pytest.fixture
def rng():
    """Seeded source of randomness."""
    return random.Random(42)


@pytest.fixture
def config():
    """The standard configuration."""
    return Config()


@pytest.fixture
def tracker():
    """An empty innovation tracker."""
    return InnovationTracker()


@pytest.fixture
def input_neuron():
    return NeuronGene(1, "identity", NeuronType.INPUT)


@pytest.fixture
def bias_neuron():
    return NeuronGene(2, "identity", NeuronType.BIAS)


@pytest.fixture
def output_neuron():
    return NeuronGene(3, "identity", NeuronType.OUTPUT)


@pytest.fixture
def minimal_genome(input_neuron, bias_neuron, output_neuron):
    """
    One input, one bias and one output neuron (identity activations).
    Input => output has weight 2.0 (innovation 1), bias => output has weight 0.0 (innovation 2).
    """
    layers = {Genome.INPUT_LAYER : [input_neuron, bias_neuron],
              Genome.OUTPUT_LAYER: [output_neuron]}
    connections = [ConnectionGene(input_neuron, output_neuron, 2.0, True, 1),
                   ConnectionGene(bias_neuron,  output_neuron, 0.0, True, 2)]
    return Genome(layers, connections)


@pytest.fixture
def hidden_genome():
    """
    Genome with a hidden neuron (ID 4) on layer 0.5, splitting input (1) => output (3):

        1 => 3  disabled  innovation 1
        2 => 3  enabled   innovation 2
        1 => 4  enabled   innovation 3
        4 => 3  enabled   innovation 4
    """
    i = NeuronGene(1, "identity", NeuronType.INPUT)
    b = NeuronGene(2, "identity", NeuronType.BIAS)
    o = NeuronGene(3, "identity", NeuronType.OUTPUT)
    h = NeuronGene(4, "identity", NeuronType.HIDDEN)
    layers = {0.0: [i, b], 0.5: [h], 1.0: [o]}
    connections = [ConnectionGene(i, o, 0.7, False, 1),
                   ConnectionGene(b, o, 0.1, True,  2),
                   ConnectionGene(i, h, 1.0, True,  3),
                   ConnectionGene(h, o, 0.7, True,  4)]
    return Genome(layers, connections)
