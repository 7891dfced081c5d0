"""
Neuron Gene Module.

This module implements the NeuronGene class and NeuronType enumeration.

Classes:
    NeuronType: Enumeration for neuron roles (INPUT, BIAS, HIDDEN, OUTPUT)
    NeuronGene: Immutable gene encoding a single network neuron
"""

from enum   import Enum
from typing import Callable

from layerneat.activations import activations, activation_codes

class NeuronType(Enum):
    """
    Neurons come in four roles: input, bias, hidden, output.
    """
    INPUT  = "I"
    BIAS   = "B"
    HIDDEN = "H"
    OUTPUT = "O"

class NeuronGene:
    """
    A gene describing a neuron in a layered Neural Network.

    Neuron genes are immutable: once created, neither their ID, their role nor
    their activation function ever change. This allows the very same gene object
    to be shared between a genome, its copies and its offspring; copying a genome
    duplicates the containers holding the genes, never the genes themselves.

    Public Properties:
        id:              Unique positive identifier of this neuron
        type:            Role of the neuron (INPUT, BIAS, HIDDEN or OUTPUT)
        activation_name: Name of the activation function ('identity', 'sigmoid', 'tanh')
        activation:      The activation function itself (callable)

    Public Methods:
        apply_activation(value): Apply the activation function to a summed input
    """

    __slots__ = ('_id', '_type', '_activation_name', '_activation')

    def __init__(self, neuron_id: int, activation_name: str, neuron_type: NeuronType):
        """
        Initialize a neuron gene.

        Parameters:
            neuron_id:       Unique identifier for this neuron
            activation_name: Name of the activation function
            neuron_type:     Role of the neuron within the network

        Raises:
            ValueError: If the activation function is unknown
        """
        if activation_name not in activations:
            raise ValueError(f"Unknown activation function '{activation_name}'")

        self._id             : int                       = neuron_id
        self._type           : NeuronType                = neuron_type
        self._activation_name: str                       = activation_name
        self._activation     : Callable[[float], float]  = activations[activation_name]

    @property
    def id(self) -> int:
        return self._id

    @property
    def type(self) -> NeuronType:
        return self._type

    @property
    def activation_name(self) -> str:
        return self._activation_name

    @property
    def activation(self) -> Callable[[float], float]:
        return self._activation

    def apply_activation(self, value: float) -> float:
        return float(self._activation(value))

    def __repr__(self):
        return (f"NeuronGene(neuron_id={self._id}, activation_name='{self._activation_name}', "
                f"neuron_type=NeuronType.{self._type.name})")

    def __str__(self):
        if self._type in (NeuronType.INPUT, NeuronType.BIAS):
            return f"[{self._type.value}{self._id}]"
        return f"[{self._type.value}{self._id},{activation_codes[self._activation_name]}]"
