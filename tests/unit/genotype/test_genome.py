"""
Unit tests for Genome class.
"""

import pytest

from layerneat.genotype.connection_gene import ConnectionGene
from layerneat.genotype.genome          import Genome
from layerneat.genotype.neuron_gene     import NeuronGene, NeuronType


# ============================================================================
# Test: Initialization
# ============================================================================

class TestGenomeInit:

    def test_none_layers_raises(self):
        with pytest.raises(TypeError):
            Genome(None, [])

    def test_none_connections_raises(self):
        with pytest.raises(TypeError):
            Genome({}, None)

    def test_default_fitness(self, minimal_genome):
        assert minimal_genome.fitness == 0.0

    def test_fitness_is_writable(self, minimal_genome):
        minimal_genome.fitness = 3.5
        assert minimal_genome.fitness == 3.5


# ============================================================================
# Test: Forward pass
# ============================================================================

class TestGenomeForward:

    def test_single_connection(self, minimal_genome):
        assert minimal_genome.forward([0.5]) == pytest.approx([1.0])

    def test_get_output_is_forward(self, minimal_genome):
        assert minimal_genome.get_output([0.5]) == minimal_genome.forward([0.5])

    def test_disabled_connection_is_ignored(self, minimal_genome):
        minimal_genome.connections[0] = minimal_genome.connections[0].with_enabled(False)
        # only the bias path (weight 0.0) remains
        assert minimal_genome.forward([0.5]) == pytest.approx([0.0])

    def test_bias_contributes_one(self, minimal_genome):
        minimal_genome.connections[1] = minimal_genome.connections[1].with_weight(0.25)
        assert minimal_genome.forward([0.5]) == pytest.approx([1.25])

    def test_hidden_layer(self, hidden_genome):
        # hidden = 1.0 * 0.5, output = 0.1 * 1.0 + 0.7 * 0.5 (the direct path is disabled)
        assert hidden_genome.forward([0.5]) == pytest.approx([0.45])

    def test_wrong_input_size_raises(self, minimal_genome):
        with pytest.raises(ValueError, match="Expected 1 input values"):
            minimal_genome.forward([0.5, 0.5])

    def test_output_without_connections_is_activation_of_zero(self):
        i = NeuronGene(1, "identity", NeuronType.INPUT)
        b = NeuronGene(2, "identity", NeuronType.BIAS)
        o = NeuronGene(3, "sigmoid",  NeuronType.OUTPUT)
        genome = Genome({0.0: [i, b], 1.0: [o]}, [])
        assert genome.forward([1.0]) == pytest.approx([0.5])


# ============================================================================
# Test: Copy
# ============================================================================

class TestGenomeCopy:

    def test_copy_has_new_containers(self, hidden_genome):
        clone = hidden_genome.copy()
        assert clone.layers is not hidden_genome.layers
        assert clone.layers[0.5] is not hidden_genome.layers[0.5]
        assert clone.connections is not hidden_genome.connections

    def test_copy_shares_genes(self, hidden_genome):
        clone = hidden_genome.copy()
        assert clone.connections[0] is hidden_genome.connections[0]
        assert clone.layers[0.5][0] is hidden_genome.layers[0.5][0]

    def test_copy_keeps_fitness(self, hidden_genome):
        hidden_genome.fitness = 2.0
        assert hidden_genome.copy().fitness == 2.0

    def test_modifying_copy_leaves_original(self, hidden_genome):
        clone = hidden_genome.copy()
        clone.connections.pop()
        clone.add_neuron_to_level(NeuronGene(9, "tanh", NeuronType.HIDDEN), 0.25)
        assert len(hidden_genome.connections) == 4
        assert 0.25 not in hidden_genome.layers


# ============================================================================
# Test: Queries
# ============================================================================

class TestGenomeQueries:

    def test_all_neurons(self, hidden_genome):
        assert sorted(n.id for n in hidden_genome.all_neurons()) == [1, 2, 3, 4]

    def test_get_max_neuron_id(self, hidden_genome):
        assert hidden_genome.get_max_neuron_id() == 4

    def test_get_max_neuron_id_empty(self):
        assert Genome({}, []).get_max_neuron_id() == 0

    def test_get_layer_for_neuron(self, hidden_genome):
        assert hidden_genome.get_layer_for_neuron(NeuronGene(4, "tanh", NeuronType.HIDDEN)) == 0.5
        assert hidden_genome.get_layer_for_neuron(NeuronGene(3, "tanh", NeuronType.OUTPUT)) == 1.0

    def test_get_layer_for_missing_neuron_raises(self, minimal_genome):
        with pytest.raises(ValueError):
            minimal_genome.get_layer_for_neuron(NeuronGene(99, "tanh", NeuronType.HIDDEN))

    def test_counts(self, hidden_genome):
        assert hidden_genome.num_hidden_neurons == 1
        assert hidden_genome.num_enabled_connections == 3

    def test_connection_map(self, hidden_genome):
        assert sorted(hidden_genome.get_connection_map()) == [1, 2, 3, 4]

    def test_connection_map_last_duplicate_wins(self, input_neuron, output_neuron):
        first  = ConnectionGene(input_neuron, output_neuron, 0.1, True, 1)
        second = ConnectionGene(input_neuron, output_neuron, 0.9, True, 1)
        genome = Genome({0.0: [input_neuron], 1.0: [output_neuron]}, [first, second])
        assert genome.get_connection_map()[1] is second


# ============================================================================
# Test: Mutators
# ============================================================================

class TestGenomeAddNeuron:

    def test_add_to_existing_level(self, hidden_genome):
        neuron = NeuronGene(5, "tanh", NeuronType.HIDDEN)
        hidden_genome.add_neuron_to_level(neuron, 0.5)
        assert [n.id for n in hidden_genome.layers[0.5]] == [4, 5]

    def test_add_to_new_level(self, hidden_genome):
        neuron = NeuronGene(5, "tanh", NeuronType.HIDDEN)
        hidden_genome.add_neuron_to_level(neuron, 0.75)
        assert hidden_genome.layers[0.75] == [neuron]
        assert hidden_genome.get_layer_for_neuron(neuron) == 0.75


# ============================================================================
# Test: Display
# ============================================================================

class TestGenomeDisplay:

    def test_str(self, minimal_genome):
        s = str(minimal_genome)
        assert s.startswith("Neurons: [I1][B2][O3,IDN]")
        assert "[001,E,01=>03,+2.00]" in s

    def test_show_aligned(self, minimal_genome, hidden_genome, capsys):
        Genome.show_aligned(minimal_genome, hidden_genome)
        out = capsys.readouterr().out
        lines = out.strip().split('\n')
        assert lines[0] == "Connections:"
        # innovations 3 and 4 are missing from the first genome => padding
        assert lines[1].endswith(' ' * 36)
        assert "[004,E,04=>03,+0.70]" in lines[2]
