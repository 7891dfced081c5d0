"""
Species Module

This module implements the Species class. A species is a cluster of
genetically similar genomes, which compete for offspring within their niche.

Classes:
    Species: A single species, with its members and offspring count
"""

import random
from statistics import mean

from layerneat.genotype import Genome

class Species:
    """
    A species: a cluster of genetically similar genomes.

    Species are transient. They are built from scratch each generation by
    clustering the population, then used to allocate and produce offspring,
    and finally discarded.

    The representative of a species (used to decide whether a genome belongs
    to it) is a random member, chosen the first time it is needed and kept for
    the rest of the generation. A species founded by a genome has that genome
    as its representative.

    Public Properties:
        members:         The genomes that are part of this species, in order of assignment
        representative:  Genome used for distance calculations during speciation
        shared_fitness:  The average fitness of all members (0.0 for an empty species)
        offspring_count: How many genomes this species contributes to the next generation

    Public Methods:
        add_member(genome):  Add a genome to this species
        select_parent(rng):  Tournament selection of a member
        best_member():       The fittest member
    """

    def __init__(self, rng: random.Random, founder: Genome | None = None):
        """
        Initialize a new species.

        Parameters:
            rng:     Source of randomness (used to pick the representative)
            founder: Optional first member, which becomes the representative

        Raises:
            TypeError: If the random source is None
        """
        if rng is None:
            raise TypeError("'rng' must not be None")

        self._rng            : random.Random = rng
        self._members        : list[Genome]  = []
        self._representative : Genome | None = None
        self.offspring_count : int           = 0

        if founder is not None:
            self._members.append(founder)
            self._representative = founder

    @property
    def members(self) -> list[Genome]:
        return self._members

    @property
    def representative(self) -> Genome:
        if self._representative is None:
            self._representative = self._members[self._rng.randrange(len(self._members))]
        return self._representative

    @property
    def shared_fitness(self) -> float:
        """
        Explicit fitness sharing: every member contributes equally,
        so the species fitness is the average fitness of its members.
        """
        if not self._members:
            return 0.0
        return mean(member.fitness for member in self._members)

    def add_member(self, genome: Genome) -> None:
        self._members.append(genome)

    def best_member(self) -> Genome:
        # First of equally fit members wins
        return max(self._members, key=lambda genome: genome.fitness)

    def select_parent(self, rng: random.Random, tournament_size: int = 3) -> Genome:
        """
        Select a member by tournament.

        'tournament_size' members are sampled uniformly, with replacement, and
        the fittest one is selected (the first sampled wins ties). Species
        smaller than the tournament shrink it to their own size.

        Parameters:
            rng:             Source of randomness
            tournament_size: Number of members competing in the tournament

        Returns:
            The winner of the tournament
        """
        size = min(tournament_size, len(self._members))
        best = None
        for _ in range(size):
            candidate = self._members[rng.randrange(len(self._members))]
            if best is None or candidate.fitness > best.fitness:
                best = candidate
        return best

    def __len__(self):
        return len(self._members)
