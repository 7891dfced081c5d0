"""
NEAT Algorithm Module

This module implements the NeatAlgorithm class, which drives a NEAT run:
it seeds a population of minimal networks and evolves it, generation after
generation, until the environment reports a solution or the maximum number
of generations is reached.

Each generation goes through the following steps:
1. Evaluation:   every genome is scored by the environment
2. Speciation:   the population is clustered into species
3. Allocation:   offspring are allocated to species by shared fitness
4. Adjustment:   the compatibility threshold moves towards the target species count
5. Reproduction: each species produces its offspring (elitism, tournament
                 selection, crossover, mutation); a rounding shortfall is
                 filled with mutated clones from random species
"""

import random

from layerneat.genotype         import Genome, GenomeGenerator, InnovationTracker, NeatCrossover, NeatMutation
from layerneat.pool             import Species, SpeciesManager
from layerneat.run.config       import Config
from layerneat.run.environment  import Environment

class NeatAlgorithm:
    """
    The NEAT evolution loop.

    All randomness is drawn from the random source handed to the constructor,
    so two runs with identically seeded sources (and a deterministic
    environment) are identical.

    The innovation tracker is shared by the genome generator and the mutation
    operator, so that identical structural changes arising independently within
    a run receive the same innovation number.

    Progress is reported after each generation by _report_progress(), and the
    outcome at the end of the run by _final_report(). Subclasses may override
    both; setting 'suppress_output' silences them.

    Public Properties:
        generation:      Index of the current generation
        population:      The genomes of the current generation
        delta_threshold: The current compatibility threshold (read/write)
        best_genome:     The fittest genome evaluated so far
        solved:          Whether the environment reported the best genome as solved

    Public Methods:
        solve(environment): Run NEAT on an environment and return the best genome
    """

    def __init__(self, config: Config, rng: random.Random, suppress_output: bool = False):
        """
        Initialize the algorithm.

        Parameters:
            config:          Configuration parameters
            rng:             Source of randomness
            suppress_output: If True, suppress progress and final reports

        Raises:
            TypeError: If the configuration or the random source is None
        """
        if config is None:
            raise TypeError("'config' must not be None")
        if rng is None:
            raise TypeError("'rng' must not be None")

        self._config          : Config = config
        self._rng             : random.Random = rng
        self._suppress_output : bool = suppress_output
        self._reset()

    def _reset(self):
        """
        Reset the run state before starting a new run.
        """
        self._innovations     = InnovationTracker()
        self._mutation        = NeatMutation(self._innovations, self._rng, self._config)
        self._crossover       = NeatCrossover(self._rng)
        self._species_manager = SpeciesManager(self._config, self._rng)
        self._species         : list[Species] = []
        self._population      : list[Genome]  = []
        self._generation      : int           = 0
        self._best_genome     : Genome | None = None
        self.solved           : bool          = False

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def population(self) -> list[Genome]:
        return self._population

    @property
    def delta_threshold(self) -> float:
        return self._species_manager.threshold

    @delta_threshold.setter
    def delta_threshold(self, value: float):
        self._species_manager.threshold = value

    @property
    def best_genome(self) -> Genome | None:
        return self._best_genome

    def solve(self, environment: Environment) -> Genome | None:
        """
        Run NEAT on an environment.

        The population is seeded with minimal, fully connected networks sized
        after the environment, then evolved until a genome solves the problem or
        the maximum number of generations has passed. The solved check is made
        after each single evaluation, so a solution ends the run immediately,
        leaving the rest of that generation unevaluated.

        Exceptions raised by the environment propagate to the caller.

        Parameters:
            environment: The problem to solve

        Returns:
            The fittest genome evaluated during the run
            (None only if no genome was ever evaluated)
        """
        # Reset the run state before starting a new run
        self._reset()

        generator = GenomeGenerator(self._innovations,
                                    len(environment.get_state()),
                                    environment.action_input_size(),
                                    self._rng,
                                    self._config)

        self._population = [generator.generate() for _ in range(self._config.population_size)]

        while self._generation < self._config.max_number_generations:

            # Evaluate the fitness of each genome, stopping as soon as the problem is solved
            if self._evaluate_population(environment):
                self.solved = True
                break

            # Cluster the population, and decide how many offspring each species gets
            self._species = self._species_manager.assign_species(self._population)
            self._species_manager.allocate_offspring(self._species, self._config.population_size)
            self._species_manager.adjust_threshold(len(self._species))

            # The members of each species mate and create the next generation
            self._population  = self._reproduce(self._species)
            self._generation += 1

            if not self._suppress_output:
                self._report_progress()

        if not self._suppress_output:
            self._final_report()

        return self._best_genome

    def _evaluate_population(self, environment: Environment) -> bool:
        """
        Evaluate every genome, keeping track of the best one seen so far.

        Returns:
            True if the environment reports the best genome as solved
        """
        for genome in self._population:
            genome.fitness = environment.evaluate(genome)

            # Strict comparison: among equally fit genomes, the first found is kept
            if self._best_genome is None or genome.fitness > self._best_genome.fitness:
                self._best_genome = genome

            if environment.solved(self._best_genome):
                return True

        return False

    def _reproduce(self, species_list: list[Species]) -> list[Genome]:
        """
        Produce the next generation.

        Species are processed in clustering order. A species with a positive
        offspring count first contributes an unmodified copy of its best member
        (the elite), then children of tournament-selected parents, until its
        count is used up or the next generation is full. If the allocations
        fall short of the population size, the remaining places are filled with
        mutated copies of parents selected from random species.

        Parameters:
            species_list: The species of the current generation

        Returns:
            The next generation, of exactly 'population_size' genomes
        """
        population_size = self._config.population_size
        tournament_size = self._config.tournament_size
        next_generation: list[Genome] = []

        for species in species_list:
            offspring_count = species.offspring_count

            if offspring_count > 0:
                next_generation.append(species.best_member().copy())
                offspring_count -= 1

            while offspring_count > 0 and len(next_generation) < population_size:
                parent1 = species.select_parent(self._rng, tournament_size)
                parent2 = species.select_parent(self._rng, tournament_size)

                # Mate the parents, or keep the fitter of the two
                if self._rng.random() < self._config.crossover_probability:
                    child = self._crossover.apply(parent1, parent2)
                else:
                    child = parent1.copy() if parent1.fitness >= parent2.fitness else parent2.copy()

                next_generation.append(self._mutation.apply(child))
                offspring_count -= 1

            if len(next_generation) >= population_size:
                break

        # Fill the places left over by rounding
        while len(next_generation) < population_size:
            species = species_list[self._rng.randrange(len(species_list))]
            parent  = species.select_parent(self._rng, tournament_size)
            next_generation.append(self._mutation.apply(parent.copy()))

        return next_generation

    def _report_progress(self):
        """
        Report progress after each generation.

        This method is suppressed by setting 'suppress_output' to 'True'.
        """
        best_fitness = self._best_genome.fitness if self._best_genome is not None else float('nan')

        s  = f"GENERATION {self._generation:04d}  "
        s += f"best fitness = {best_fitness:.4f}  "
        s += f"species = {len(self._species):3d}  "
        s += f"threshold = {self.delta_threshold:.2f}"
        print(s)

    def _final_report(self):
        """
        Report the outcome of the run.

        This method is suppressed by setting 'suppress_output' to 'True'.
        """
        reason = "problem solved" if self.solved else "maximum number of generations reached"

        s  = "===============\n"
        s += f"Run finished after {self._generation} generations: {reason}\n"
        if self._best_genome is not None:
            s += f"best fitness        = {self._best_genome.fitness:.4f}\n"
            s += f"hidden neurons      = {self._best_genome.num_hidden_neurons}\n"
            s += f"enabled connections = {self._best_genome.num_enabled_connections}\n"
            s += '\n'
            s += str(self._best_genome)
        print(s)
