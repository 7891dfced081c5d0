"""
Genome Module

This module implements the Genome class: a layered, feed-forward
neural network encoded as neuron and connection genes.

Classes:
    Genome: Complete genome representing a neural network structure
"""

from typing import Sequence

from layerneat.genotype.connection_gene import ConnectionGene
from layerneat.genotype.neuron_gene     import NeuronType, NeuronGene

class Genome:
    """
    A genome representing a neural network as a layered graph of neuron genes
    plus a list of connection genes.

    Neurons are placed on layers, identified by a coordinate in [0, 1]:
        - 0.0 is the input layer (all input neurons, followed by the bias neuron)
        - 1.0 is the output layer (all output neurons)
        - any value strictly in between is the position of a hidden layer
    A new hidden layer can always be inserted strictly between two existing
    ones, so layer coordinates may become arbitrarily dense as networks grow.

    Every connection leads from a lower to a higher layer coordinate. This makes
    the network acyclic, and ordering the layers by coordinate yields a valid
    topological order for evaluating it. The invariant is maintained by the
    mutation operator, it is not checked here.

    Genomes are treated as values by the evolutionary operators: a mutation or
    crossover always produces a new genome, never modifies its inputs.

    Public Attributes:
        fitness: The fitness of this genome, as last evaluated

    Public Properties:
        layers:                  Layer coordinate => ordered list of neuron genes on that layer
        connections:             List of all connection genes (enabled or not)
        num_hidden_neurons:      Number of hidden neurons
        num_enabled_connections: Number of enabled connections

    Public Methods:
        forward(state):                      Evaluate the network on an input vector
        copy():                              Copy the genome (sharing the immutable genes)
        all_neurons():                       List all neuron genes, over all layers
        get_max_neuron_id():                 Largest neuron ID in the genome
        get_layer_for_neuron(neuron):        Layer coordinate of a neuron
        add_neuron_to_level(neuron, level):  Place a neuron on a given layer
        get_connection_map():                Innovation number => connection gene
    """

    INPUT_LAYER  = 0.0
    OUTPUT_LAYER = 1.0

    def __init__(self,
                 layers     : dict[float, list[NeuronGene]],
                 connections: list[ConnectionGene],
                 fitness    : float = 0.0):
        """
        Initialize a genome from its layers and connections.

        Parameters:
            layers:      Layer coordinate => ordered list of the neuron genes on that layer
            connections: All connection genes of the network
            fitness:     Initial fitness value

        Raises:
            TypeError: If either 'layers' or 'connections' is None
        """
        if layers is None:
            raise TypeError("'layers' must not be None")
        if connections is None:
            raise TypeError("'connections' must not be None")

        self._layers     : dict[float, list[NeuronGene]] = layers
        self._connections: list[ConnectionGene]          = connections
        self.fitness     : float                         = fitness

    @property
    def layers(self) -> dict[float, list[NeuronGene]]:
        return self._layers

    @property
    def connections(self) -> list[ConnectionGene]:
        return self._connections

    @property
    def num_hidden_neurons(self) -> int:
        return sum(1 for neuron in self.all_neurons() if neuron.type == NeuronType.HIDDEN)

    @property
    def num_enabled_connections(self) -> int:
        return sum(1 for conn in self._connections if conn.enabled)

    def forward(self, state: Sequence[float]) -> list[float]:
        """
        Evaluate the network on a given input vector.

        The input neurons are seeded with the input values (in the order in which
        they appear on the input layer) and the bias neuron with a constant 1.0.
        Layers are then processed in ascending coordinate order. For each neuron,
        the outputs of its upstream neurons are summed over all enabled incoming
        connections (weighted), and the activation function is applied to the sum.
        Upstream neurons which have not produced an output contribute 0.0.

        Parameters:
            state: Input vector, one value per input neuron

        Returns:
            The output vector, one value per output neuron (in layer order)

        Raises:
            ValueError: If the input vector does not match the number of input neurons
        """
        input_layer   = self._layers.get(Genome.INPUT_LAYER, [])
        input_neurons = [n for n in input_layer if n.type == NeuronType.INPUT]
        if len(state) != len(input_neurons):
            raise ValueError(f"Expected {len(input_neurons)} input values, got {len(state)}")

        outputs: dict[int, float] = {}  # neuron ID => neuron output
        values = iter(state)
        for neuron in input_layer:
            outputs[neuron.id] = 1.0 if neuron.type == NeuronType.BIAS else float(next(values))

        # Group the enabled connections by the neuron they lead to
        incoming: dict[int, list[ConnectionGene]] = {}
        for conn in self._connections:
            if conn.enabled:
                incoming.setdefault(conn.target_id, []).append(conn)

        for level in sorted(self._layers):
            if level == Genome.INPUT_LAYER:
                continue
            for neuron in self._layers[level]:
                total = sum(conn.weight * outputs.get(conn.source_id, 0.0)
                            for conn in incoming.get(neuron.id, []))
                outputs[neuron.id] = neuron.apply_activation(total)

        return [outputs.get(neuron.id, 0.0) for neuron in self._layers.get(Genome.OUTPUT_LAYER, [])]

    def get_output(self, state: Sequence[float]) -> list[float]:
        return self.forward(state)

    def copy(self) -> 'Genome':
        """
        Copy the genome.

        The layer map, the neuron lists and the connection list are new
        containers; the (immutable) neuron and connection genes are shared.
        """
        layers = {level: list(neurons) for level, neurons in self._layers.items()}
        return Genome(layers, list(self._connections), self.fitness)

    def all_neurons(self) -> list[NeuronGene]:
        return [neuron for neurons in self._layers.values() for neuron in neurons]

    def get_max_neuron_id(self) -> int:
        return max((neuron.id for neuron in self.all_neurons()), default=0)

    def get_layer_for_neuron(self, neuron: NeuronGene) -> float:
        """
        Find the layer coordinate of a neuron (matched by ID).

        Raises:
            ValueError: If the neuron is not part of this genome
        """
        for level, neurons in self._layers.items():
            for n in neurons:
                if n.id == neuron.id:
                    return level
        raise ValueError(f"Neuron {neuron.id} does not exist in the genome")

    def add_neuron_to_level(self, neuron: NeuronGene, level: float) -> None:
        self._layers.setdefault(level, []).append(neuron)

    def get_connection_map(self) -> dict[int, ConnectionGene]:
        """
        Index the connection genes by innovation number.
        If two genes share an innovation number, the last one wins.
        """
        return {conn.innovation: conn for conn in self._connections}

    def __str__(self):
        neurons_str = ''.join(str(neuron) for level in sorted(self._layers) for neuron in self._layers[level])
        conns_str   = ''.join(str(conn) for conn in self._connections)
        return f"Neurons: {neurons_str}\nConns: {conns_str}"

    @staticmethod
    def show_aligned(genome1: 'Genome', genome2: 'Genome') -> None:
        """
        Print two genomes aligning their connection genes by innovation number.
        """
        conns1 = genome1.get_connection_map()
        conns2 = genome2.get_connection_map()

        innovs_all = sorted(set(conns1.keys()) | set(conns2.keys()))
        conn_str1 = ""
        conn_str2 = ""
        padding   = ' ' * 18
        for innov in innovs_all:
            conn_str1 += str(conns1[innov]) if innov in conns1 else padding
            conn_str2 += str(conns2[innov]) if innov in conns2 else padding

        print(f"Connections:\n{conn_str1}\n{conn_str2}\n")
