"""
Innovation Tracker Module

This module implements the registry of structural innovations.

Classes:
    ConnectionInnovation: A structural change, identified by the endpoints of a connection
    InnovationTracker:    Registry assigning innovation numbers to structural changes
"""

from typing import Iterator

class ConnectionInnovation:
    """
    The creation of a connection between two given neurons.

    Two innovations are equal (and hash equally) when they connect the same
    source and target neurons, irrespective of their innovation number. This is
    what allows the same structural change, arising independently in two
    lineages, to be recognized as one innovation.

    Public Properties:
        source:            ID of the neuron the connection starts at
        target:            ID of the neuron the connection ends at
        innovation_number: Number assigned to this innovation
    """

    __slots__ = ('_source', '_target', '_innovation_number')

    def __init__(self, source: int, target: int, innovation_number: int):
        self._source           : int = source
        self._target           : int = target
        self._innovation_number: int = innovation_number

    @property
    def source(self) -> int:
        return self._source

    @property
    def target(self) -> int:
        return self._target

    @property
    def innovation_number(self) -> int:
        return self._innovation_number

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, ConnectionInnovation):
            return NotImplemented
        return self._source == other._source and self._target == other._target

    def __hash__(self):
        return hash((self._source, self._target))

    def __repr__(self):
        return (f"ConnectionInnovation(source={self._source}, target={self._target}, "
                f"innovation_number={self._innovation_number})")

class InnovationTracker:
    """
    Tracks structural changes globally across all genomes of a run.
    Ensures the same structural change gets the same innovation number.

    One tracker is shared (by reference) between the genome generator and the
    mutation operator, so that every lookup for a given (source, target) pair
    goes through the same registry. Innovations are never removed.

    Innovation numbers start at 1 and are assigned in order of creation:
    a new innovation gets the number 'registry size + 1'.

    Public Methods:
        get_innovation_number(source, target): Look up or create the innovation number of a connection
        find(source, target):                  Look up an innovation without creating it
    """

    def __init__(self):
        # For each connection ever created, map its endpoints to its innovation
        self._innovations: dict[tuple[int, int], ConnectionInnovation] = {}

    def get_innovation_number(self, source: int, target: int) -> int:
        """
        Get innovation number for a connection, identified by its endpoints.
        Returns existing innovation number if this connection was created
        before, otherwise registers a new innovation.

        Parameters:
            source: neuron ID for the 'from' end of the connection
            target: neuron ID for the 'to'   end of the connection

        Returns:
            the innovation number of the connection
        """
        innovation = self.find(source, target)

        # This is a new connection
        if innovation is None:
            innovation = ConnectionInnovation(source, target, len(self._innovations) + 1)
            self._innovations[(source, target)] = innovation

        return innovation.innovation_number

    def find(self, source: int, target: int) -> ConnectionInnovation | None:
        return self._innovations.get((source, target))

    def __len__(self) -> int:
        return len(self._innovations)

    def __contains__(self, innovation: ConnectionInnovation) -> bool:
        return (innovation.source, innovation.target) in self._innovations

    def __iter__(self) -> Iterator[ConnectionInnovation]:
        return iter(self._innovations.values())
