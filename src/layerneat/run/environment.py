"""
Environment Module

This module defines the abstract base class for the problems NEAT is applied to.

Classes:
    Environment: The external collaborator that sizes and scores the networks
"""

from abc    import ABC, abstractmethod
from typing import Sequence

from layerneat.genotype import Genome

class Environment(ABC):
    """
    Abstract base class for implementing a problem solved by NEAT.

    The evolution loop consults the environment once to size the networks
    (number of inputs and outputs), then asks it to score every genome and to
    decide whether the best genome found so far solves the problem.

    Subclasses must implement:
    - get_state():         A sample observation; only its length is used
    - action_input_size(): Number of network outputs
    - evaluate(genome):    Fitness of a genome
    - solved(genome):      Whether a genome solves the problem
    """

    @abstractmethod
    def get_state(self) -> Sequence[float]:
        """
        Return an observation of the environment.
        Its length determines the number of network inputs.
        """
        pass

    @abstractmethod
    def action_input_size(self) -> int:
        """
        Return the number of network outputs.
        """
        pass

    @abstractmethod
    def evaluate(self, genome: Genome) -> float:
        """
        Evaluate and return the fitness of a genome.

        Higher fitness values indicate better performance and a larger share of
        offspring for the genome's species. Fitness should not be negative, as
        offspring are allocated proportionally to it.

        Parameters:
            genome: The genome to evaluate

        Returns:
            float: Fitness score for the genome
        """
        pass

    @abstractmethod
    def solved(self, genome: Genome) -> bool:
        """
        Return True if the genome solves the problem, which ends the run.
        """
        pass
