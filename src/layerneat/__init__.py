"""
layerneat - NEAT (NeuroEvolution of Augmenting Topologies) on layered networks.

This package evolves the weights and the topology of feed-forward neural
networks. Neurons live on layers identified by a coordinate in [0, 1], which
keeps every evolved network acyclic and gives a natural evaluation order.

Main components:
- activations: Activation functions for neural networks
- genotype: Genetic encoding (genes, genomes, innovation tracking) and operators
- pool: Speciation and offspring allocation
- run: Configuration, the environment interface and the evolution loop

Example:
    >>> import random
    >>> from layerneat import Config, Environment, NeatAlgorithm
    >>> class MyEnvironment(Environment):
    ...     # Implement get_state, action_input_size, evaluate and solved
    ...     pass
    >>> algorithm = NeatAlgorithm(Config("config.ini"), random.Random(42))
    >>> best = algorithm.solve(MyEnvironment())
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from layerneat.run.config             import Config
from layerneat.run.environment        import Environment
from layerneat.run.neat_algorithm     import NeatAlgorithm
from layerneat.genotype.genome        import Genome
from layerneat.genotype.neuron_gene   import NeuronGene, NeuronType
from layerneat.genotype.connection_gene import ConnectionGene
from layerneat.genotype.innovation_tracker import InnovationTracker
from layerneat.pool.species           import Species
from layerneat.pool.species_manager   import SpeciesManager

__all__ = [
    "Config",
    "Environment",
    "NeatAlgorithm",
    "Genome",
    "NeuronGene",
    "NeuronType",
    "ConnectionGene",
    "InnovationTracker",
    "Species",
    "SpeciesManager",
]
