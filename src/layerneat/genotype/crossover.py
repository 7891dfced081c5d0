"""
Crossover Module

This module implements the NeatCrossover class, which recombines
two parent genomes by aligning their genes on innovation numbers.

Classes:
    NeatCrossover: Innovation-aligned recombination of two genomes
"""

import random

from layerneat.genotype.connection_gene import ConnectionGene
from layerneat.genotype.genome          import Genome
from layerneat.genotype.neuron_gene     import NeuronGene

class NeatCrossover:
    """
    The NEAT crossover operator.

    Connection genes of the two parents are aligned on their innovation numbers:
    - Matching genes (present in both parents): inherited from either parent, 50/50
    - Disjoint & excess genes: inherited only if they belong to the fitter parent

    On equal fitness, the first parent counts as the fitter one.

    The offspring's layers are those of the fitter parent, extended with every
    non-input source neuron and every non-output target neuron of the inherited
    connections (placed on the layer they occupy in the fitter parent).
    The parents are left unchanged.

    Public Methods:
        apply(parent1, parent2):                      Create an offspring genome
        add_neuron_to_map(layers, level, neuron):     Place a neuron on a layer, unless already there
    """

    def __init__(self, rng: random.Random):
        """
        Parameters:
            rng: Source of randomness

        Raises:
            TypeError: If the random source is None
        """
        if rng is None:
            raise TypeError("'rng' must not be None")
        self._rng = rng

    def apply(self, parent1: Genome, parent2: Genome) -> Genome:
        """
        Perform NEAT crossover between two genomes.

        Parameters:
            parent1: the first parent
            parent2: the second parent

        Returns:
            New offspring genome
        """
        if parent1.fitness >= parent2.fitness:
            fitter, other = parent1, parent2
        else:
            fitter, other = parent2, parent1

        fitter_genes = fitter.get_connection_map()
        other_genes  = other.get_connection_map()

        connections: list[ConnectionGene] = []
        for innov in sorted(set(fitter_genes) | set(other_genes)):
            gene_fitter = fitter_genes.get(innov)
            gene_other  = other_genes.get(innov)

            # Matching genes: inherit randomly from either parent
            if gene_fitter is not None and gene_other is not None:
                chosen = gene_fitter if self._rng.random() < 0.5 else gene_other
                connections.append(chosen.clone())

            # Disjoint & excess genes: inherit from the fitter parent only
            elif gene_fitter is not None:
                connections.append(gene_fitter.clone())

        layers = {level: list(neurons) for level, neurons in fitter.layers.items()}
        for conn in connections:
            source_level = fitter.get_layer_for_neuron(conn.source)
            target_level = fitter.get_layer_for_neuron(conn.target)
            if source_level != Genome.INPUT_LAYER:
                self.add_neuron_to_map(layers, source_level, conn.source)
            if target_level != Genome.OUTPUT_LAYER:
                self.add_neuron_to_map(layers, target_level, conn.target)

        return Genome(layers, connections)

    @staticmethod
    def add_neuron_to_map(layers: dict[float, list[NeuronGene]], level: float, neuron: NeuronGene) -> None:
        neurons = layers.setdefault(level, [])
        if all(n.id != neuron.id for n in neurons):
            neurons.append(neuron)
