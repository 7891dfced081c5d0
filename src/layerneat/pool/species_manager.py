"""
Species Manager Module

This module implements the SpeciesManager class, which coordinates the
speciation of the population.

Speciation in NEAT:
Structural innovations usually lower fitness at first, before their weights
have been tuned. NEAT protects them by dividing the population into species,
groups of genetically similar genomes that compete primarily within their own
niche, and by sharing reproductive opportunity among species according to
their average fitness.

How Speciation Works:
1. Genetic distance between genomes is measured with the NEAT compatibility
   distance, computed on connection genes aligned by innovation number
2. Genomes are assigned, in population order, to the first species whose
   representative is closer than the compatibility threshold
3. A genome that fits no species founds a new one
4. Each species is allocated offspring proportionally to its shared fitness
5. The threshold is nudged towards a target number of species

Classes:
    SpeciesManager: Clustering, threshold control and offspring allocation
"""

import math
import random
from typing import TYPE_CHECKING

from layerneat.genotype  import Genome, ConnectionGene
from layerneat.pool.species import Species
if TYPE_CHECKING:
    from layerneat.run.config import Config

class SpeciesManager:
    """
    Divides the population into species and allocates offspring among them.

    The compatibility threshold is a self-tuning parameter: after every
    generation it is decreased by a fixed step if there are fewer species than
    desired, and increased by the same step if there are more. There is no
    damping, so the threshold may oscillate around the value which produces
    the target species count.

    Public Properties:
        threshold: The current compatibility threshold

    Public Methods:
        compute_compatibility_distance(a, b):           NEAT distance between two genomes
        assign_species(genomes):                        Cluster genomes into species
        adjust_threshold(species_count):                Move the threshold towards the target species count
        allocate_offspring(species_list, population_size): Set each species' offspring count
    """

    def __init__(self, config: 'Config', rng: random.Random):
        """
        Parameters:
            config: Stores configuration parameters
            rng:    Source of randomness

        Raises:
            TypeError: If the configuration or the random source is None
        """
        if config is None:
            raise TypeError("'config' must not be None")
        if rng is None:
            raise TypeError("'rng' must not be None")

        self._config   = config
        self._rng      = rng
        self.threshold = config.compatibility_threshold

    def compute_compatibility_distance(self, genome1: Genome, genome2: Genome) -> float:
        """
        Calculate the genetic distance between two genomes with the NEAT formula.

           distance = (c1 * D / N) + (c2 * E / N) + c3 * W̄

        Where:
        - D = number of disjoint connection genes (within the smaller maximum innovation number)
        - E = number of excess connection genes (beyond the smaller maximum innovation number)
        - W̄ = average weight difference of matching connection genes
        - N = number of connection genes in the larger genome, or 1 if that is
              below 'distance_normalization_min_genes' (small genomes are not normalized)
        - c1, c2, c3 = weight of the various terms (from configuration)

        Parameters:
            genome1, genome2: the genomes to compare

        Returns:
            the compatibility distance between the two genomes
        """
        genes1 = self._build_gene_map(genome1)
        genes2 = self._build_gene_map(genome2)

        max_innov1  = max(genes1, default=0)
        max_innov2  = max(genes2, default=0)
        lower_bound = min(max_innov1, max_innov2)

        num_matching    = 0
        num_disjoint    = 0
        num_excess      = 0
        weight_diff_sum = 0.0
        for innov in set(genes1) | set(genes2):
            if innov in genes1 and innov in genes2:
                num_matching    += 1
                weight_diff_sum += abs(genes1[innov].weight - genes2[innov].weight)
            elif innov <= lower_bound:
                num_disjoint += 1
            else:
                num_excess += 1

        avg_weight_diff = weight_diff_sum / num_matching if num_matching > 0 else 0.0

        N = max(len(genome1.connections), len(genome2.connections))
        if N < self._config.distance_normalization_min_genes:
            N = 1

        return (self._config.distance_disjoint_coeff * num_disjoint / N +
                self._config.distance_excess_coeff   * num_excess   / N +
                self._config.distance_params_coeff   * avg_weight_diff)

    @staticmethod
    def _build_gene_map(genome: Genome) -> dict[int, ConnectionGene]:
        """
        Index the connection genes of a genome by innovation number (first one wins).
        """
        gene_map = {}
        for conn in genome.connections:
            gene_map.setdefault(conn.innovation, conn)
        return gene_map

    def assign_species(self, genomes: list[Genome]) -> list[Species]:
        """
        Partition genomes into species based on genetic similarity.

        Genomes are processed in order. Each one joins the first species
        (in order of creation) whose representative is closer than the
        compatibility threshold, or founds a new species.

        Parameters:
            genomes: The genomes to speciate

        Returns:
            The species, in order of creation
        """
        species_list: list[Species] = []

        for genome in genomes:
            for species in species_list:
                if self.compute_compatibility_distance(genome, species.representative) < self.threshold:
                    species.add_member(genome)
                    break

            # No species is similar enough: found a new one
            else:
                species_list.append(Species(self._rng, genome))

        return species_list

    def adjust_threshold(self, species_count: int) -> None:
        target = self._config.target_species_count
        step   = self._config.threshold_adjust_step
        if species_count < target:
            self.threshold -= step
        elif species_count > target:
            self.threshold += step

    def allocate_offspring(self, species_list: list[Species], population_size: int) -> None:
        """
        Calculate how many offspring each species should produce.

        Offspring are allocated proportionally to the species' shared fitness,
        rounded half up. No attempt is made to make the allocations add up to the
        population size: the rounding shortfall is filled later by mutation-only
        offspring, and a surplus is cut off when the next generation is full.
        If the total shared fitness is zero, the population is split evenly.

        Parameters:
            species_list:    The species of the current generation
            population_size: The size of the next generation
        """
        if not species_list:
            return

        total_fitness = sum(species.shared_fitness for species in species_list)

        for species in species_list:
            if total_fitness == 0:
                share = population_size / len(species_list)
            else:
                share = species.shared_fitness / total_fitness * population_size
            species.offspring_count = max(0, math.floor(share + 0.5))
