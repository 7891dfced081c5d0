"""
Genome Generator Module

This module implements the GenomeGenerator class, which creates the
minimal, fully connected genomes the initial population is seeded with.

Classes:
    GenomeGenerator: Factory of fully connected input => output genomes
"""

import random
from typing import TYPE_CHECKING

from layerneat.genotype.connection_gene    import ConnectionGene
from layerneat.genotype.genome             import Genome
from layerneat.genotype.innovation_tracker import ConnectionInnovation, InnovationTracker
from layerneat.genotype.neuron_gene        import NeuronGene, NeuronType
if TYPE_CHECKING:
    from layerneat.run.config import Config

class GenomeGenerator:
    """
    Creates fully connected feed-forward genomes consisting of one input and one output layer.

    Neuron numbering convention:
        - Input neurons: [1, input_size]
        - Bias neuron:   input_size + 1
        - Output neurons: [input_size + 2, input_size + output_size + 1]

    Every input neuron and the bias neuron are connected to every output neuron.
    The innovation numbers of these connections are looked up in (or added to) the
    shared innovation tracker, so all generated genomes agree on them.

    Public Methods:
        generate():                    Create a new genome
        find_innovation(source, target): Look up a registered innovation
    """

    def __init__(self,
                 innovations: InnovationTracker,
                 input_size : int,
                 output_size: int,
                 rng        : random.Random,
                 config     : 'Config | None' = None):
        """
        Parameters:
            innovations: Registry of the innovations that occurred so far in the run
            input_size:  The number of input neurons
            output_size: The number of output neurons
            rng:         Source of randomness
            config:      Stores configuration parameters (weight range);
                         if None, weights are drawn from [-1, 1]

        Raises:
            TypeError: If the innovation tracker or the random source is None
        """
        if innovations is None:
            raise TypeError("'innovations' must not be None")
        if rng is None:
            raise TypeError("'rng' must not be None")

        self._innovations = innovations
        self._input_size  = input_size
        self._output_size = output_size
        self._rng         = rng
        self._min_weight  = -1.0 if config is None else config.min_weight
        self._max_weight  =  1.0 if config is None else config.max_weight

    def generate(self) -> Genome:
        """
        Generate a new fully connected genome, with random connection weights.
        """
        neuron_ids = iter(range(1, self._input_size + self._output_size + 2))

        input_layer = [NeuronGene(next(neuron_ids), "identity", NeuronType.INPUT)
                       for _ in range(self._input_size)]
        input_layer.append(NeuronGene(next(neuron_ids), "identity", NeuronType.BIAS))

        output_layer = [NeuronGene(next(neuron_ids), "tanh", NeuronType.OUTPUT)
                        for _ in range(self._output_size)]

        connections = []
        for source in input_layer:
            for target in output_layer:
                innovation = self._innovations.get_innovation_number(source.id, target.id)
                weight     = self._min_weight + (self._max_weight - self._min_weight) * self._rng.random()
                connections.append(ConnectionGene(source, target, weight, True, innovation))

        layers = {Genome.INPUT_LAYER : input_layer,
                  Genome.OUTPUT_LAYER: output_layer}
        return Genome(layers, connections)

    def find_innovation(self, source: int, target: int) -> ConnectionInnovation | None:
        return self._innovations.find(source, target)
