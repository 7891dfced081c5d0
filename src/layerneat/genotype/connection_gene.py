"""
Connection Gene Module

This module implements the ConnectionGene class.

Classes:
    ConnectionGene: Immutable gene encoding a weighted connection between two neurons
"""

from layerneat.genotype.neuron_gene import NeuronGene

class ConnectionGene:
    """
    A gene describing a weighted, directed connection between two neurons.

    Connection genes are uniquely identified by their innovation number, which
    serves as a historical marker enabling gene alignment during crossover and
    speciation.

    Connection genes are immutable values. Changing the weight or the enabled
    status of a connection produces a new gene (see 'with_weight()' and
    'with_enabled()'), so that genomes sharing a gene never observe each
    other's mutations.

    Public Properties:
        source:     The neuron the connection starts at
        target:     The neuron the connection ends at
        source_id:  ID of the source neuron
        target_id:  ID of the target neuron
        weight:     Weight of the connection
        enabled:    Whether this connection is active in the network
        innovation: Global innovation number identifying this connection

    Public Methods:
        clone():             Return an equal but distinct gene
        with_weight(weight): Return a copy of this gene with a different weight
        with_enabled(flag):  Return a copy of this gene with a different enabled status
    """

    __slots__ = ('_source', '_target', '_weight', '_enabled', '_innovation')

    def __init__(self,
                 source    : NeuronGene,
                 target    : NeuronGene,
                 weight    : float,
                 enabled   : bool,
                 innovation: int):
        """
        Initialize a connection gene.

        Parameters:
            source:     Neuron the connection starts at
            target:     Neuron the connection ends at
            weight:     Weight of the connection
            enabled:    Whether this connection is active in the network
            innovation: Number uniquely and globally identifying this connection
        """
        self._source    : NeuronGene = source
        self._target    : NeuronGene = target
        self._weight    : float      = weight
        self._enabled   : bool       = enabled
        self._innovation: int        = innovation

    @property
    def source(self) -> NeuronGene:
        return self._source

    @property
    def target(self) -> NeuronGene:
        return self._target

    @property
    def source_id(self) -> int:
        return self._source.id

    @property
    def target_id(self) -> int:
        return self._target.id

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def innovation(self) -> int:
        return self._innovation

    def clone(self) -> 'ConnectionGene':
        return ConnectionGene(self._source, self._target, self._weight, self._enabled, self._innovation)

    def with_weight(self, weight: float) -> 'ConnectionGene':
        return ConnectionGene(self._source, self._target, weight, self._enabled, self._innovation)

    def with_enabled(self, enabled: bool) -> 'ConnectionGene':
        return ConnectionGene(self._source, self._target, self._weight, enabled, self._innovation)

    def __repr__(self):
        return (f"ConnectionGene(source={self.source_id:03d}, target={self.target_id:03d}, "
                f"weight={self._weight:+.6f}, enabled={self._enabled}, innovation={self._innovation:03d})")

    def __str__(self):
        s  = f"[{self._innovation:03d},{'E' if self._enabled else 'D'},"
        s += f"{self.source_id:02d}=>{self.target_id:02d},{self._weight:+.02f}]"
        return s
