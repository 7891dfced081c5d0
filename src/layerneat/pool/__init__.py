"""
Pool Package

This package implements speciation: the division of the population into
species, fitness sharing and the allocation of offspring among species.

Exported Classes:
    Species:        A cluster of genetically similar genomes
    SpeciesManager: Clustering, threshold control and offspring allocation
"""

from layerneat.pool.species         import Species
from layerneat.pool.species_manager import SpeciesManager

__all__ = ['Species', 'SpeciesManager']
