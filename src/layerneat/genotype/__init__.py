"""
Genotype Package

This package implements the genetic encoding of layered feed-forward networks
and the evolutionary operators acting on it.

Modules:
    neuron_gene:        NeuronType enumeration and NeuronGene class
    connection_gene:    ConnectionGene class
    innovation_tracker: ConnectionInnovation and InnovationTracker classes
    genome:             Genome class
    genome_generator:   GenomeGenerator class
    mutation:           NeatMutation class
    crossover:          NeatCrossover class
"""

from layerneat.genotype.connection_gene    import ConnectionGene
from layerneat.genotype.crossover          import NeatCrossover
from layerneat.genotype.genome             import Genome
from layerneat.genotype.genome_generator   import GenomeGenerator
from layerneat.genotype.innovation_tracker import ConnectionInnovation, InnovationTracker
from layerneat.genotype.mutation           import NeatMutation
from layerneat.genotype.neuron_gene        import NeuronType, NeuronGene

__all__ = ['ConnectionGene',
           'ConnectionInnovation',
           'Genome',
           'GenomeGenerator',
           'InnovationTracker',
           'NeatCrossover',
           'NeatMutation',
           'NeuronGene',
           'NeuronType']
