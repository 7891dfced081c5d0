"""
Mutation Module

This module implements the NeatMutation class, the mutation operator
which grows and perturbs genomes.

Classes:
    NeatMutation: Applies structural and weight mutations to genomes
"""

import random
from typing import TYPE_CHECKING

from layerneat.genotype.connection_gene    import ConnectionGene
from layerneat.genotype.genome             import Genome
from layerneat.genotype.innovation_tracker import InnovationTracker
from layerneat.genotype.neuron_gene        import NeuronGene, NeuronType
if TYPE_CHECKING:
    from layerneat.run.config import Config

class NeatMutation:
    """
    The mutation operator, which applies up to four kinds of mutations:
      + add a neuron      (split an existing connection)
      + add a connection  (between two existing neurons)
      + toggle a connection's enabled status
      + perturb the weights of all connections

    A single random draw decides which mutations take place: each mutation is
    applied if the draw falls below its probability. Hence every draw that
    triggers a rare mutation also triggers all more likely ones.
    TODO: draw once per mutation kind instead, once runs no longer need to
          reproduce the correlated behaviour.

    None of the mutations modifies its input genome; each returns a new one.
    New structure gets its innovation numbers from the shared innovation tracker.

    Public Methods:
        apply(parent):             Mutate a genome
        add_neuron(parent):        Split a random connection with a new hidden neuron
        add_connection(parent):    Connect two random, not yet connected neurons
        toggle_connection(parent): Flip the enabled status of a random connection
        mutate_weights(parent):    Perturb the weights of all connections
    """

    def __init__(self, innovations: InnovationTracker, rng: random.Random, config: 'Config | None' = None):
        """
        Parameters:
            innovations: Registry of the innovations that occurred so far in the run
            rng:         Source of randomness
            config:      Stores configuration parameters; if None, the standard values are used

        Raises:
            TypeError: If the innovation tracker or the random source is None
        """
        if innovations is None:
            raise TypeError("'innovations' must not be None")
        if rng is None:
            raise TypeError("'rng' must not be None")

        if config is None:
            # Import here to avoid circular import
            from layerneat.run.config import Config
            config = Config()

        self._innovations = innovations
        self._rng         = rng
        self._config      = config

    def apply(self, parent: Genome) -> Genome:
        """
        Mutate a genome.

        Parameters:
            parent: the genome to mutate (left unchanged)

        Returns:
            The mutated genome
        """
        offspring = parent.copy()
        chance    = self._rng.random()

        if chance < self._config.node_add_probability:
            offspring = self.add_neuron(offspring)

        if chance < self._config.connection_add_probability:
            offspring = self.add_connection(offspring)

        if chance < self._config.connection_toggle_probability:
            offspring = self.toggle_connection(offspring)

        if chance < self._config.weight_mutate_probability:
            offspring = self.mutate_weights(offspring)

        return offspring

    def add_neuron(self, parent: Genome) -> Genome:
        """
        Split a randomly selected connection by adding a new hidden neuron.

        The split connection is disabled (keeping its innovation number) and two
        new connections are added: one from its source to the new neuron (weight
        1.0), and one from the new neuron to its target (inheriting its weight).
        The new neuron is placed on a layer drawn uniformly between the layers of
        the source and the target, so the network remains acyclic.

        A genome without connections is returned unchanged.
        """
        offspring   = parent.copy()
        connections = offspring.connections
        if not connections:
            return offspring

        index    = self._rng.randrange(len(connections))
        selected = connections[index]

        new_neuron = NeuronGene(parent.get_max_neuron_id() + 1, "tanh", NeuronType.HIDDEN)

        # Locate the endpoints before registering anything in the shared tracker
        level = self.random_layer_between(offspring.layers, selected.source_id, selected.target_id)

        innov1 = self._innovations.get_innovation_number(selected.source_id, new_neuron.id)
        innov2 = self._innovations.get_innovation_number(new_neuron.id, selected.target_id)

        offspring.add_neuron_to_level(new_neuron, level)

        connections[index] = selected.with_enabled(False)
        connections.append(ConnectionGene(selected.source, new_neuron, 1.0, True, innov1))
        connections.append(ConnectionGene(new_neuron, selected.target, selected.weight, True, innov2))
        return offspring

    def add_connection(self, parent: Genome) -> Genome:
        """
        Add a connection between two randomly selected neurons.

        The source is any neuron except output neurons, the target is any neuron
        except input and bias neurons. A candidate pair is rejected when the source
        does not lie on a lower layer than the target (the connection would go
        backwards, sideways or create a cycle), or when the two neurons are already
        connected. After a maximum number of rejected attempts the genome is
        returned unchanged.

        The new connection is enabled and has a random weight.
        """
        offspring = parent.copy()
        neurons   = offspring.all_neurons()

        sources = [n for n in neurons if n.type != NeuronType.OUTPUT]
        targets = [n for n in neurons if n.type not in (NeuronType.INPUT, NeuronType.BIAS)]
        if not sources or not targets:
            return offspring

        connected = {(conn.source_id, conn.target_id) for conn in offspring.connections}

        for _ in range(self._config.connection_add_attempts):
            source = sources[self._rng.randrange(len(sources))]
            target = targets[self._rng.randrange(len(targets))]

            if offspring.get_layer_for_neuron(source) >= offspring.get_layer_for_neuron(target):
                continue
            if (source.id, target.id) in connected:
                continue

            innovation = self._innovations.get_innovation_number(source.id, target.id)
            weight     = self._config.min_weight + \
                         (self._config.max_weight - self._config.min_weight) * self._rng.random()
            offspring.connections.append(ConnectionGene(source, target, weight, True, innovation))
            break

        return offspring

    def toggle_connection(self, parent: Genome) -> Genome:
        """
        Flip the enabled status of a randomly selected connection.
        """
        offspring   = parent.copy()
        connections = offspring.connections
        if connections:
            index = self._rng.randrange(len(connections))
            connections[index] = connections[index].with_enabled(not connections[index].enabled)
        return offspring

    def mutate_weights(self, parent: Genome) -> Genome:
        """
        Add gaussian noise to the weight of every connection.
        """
        offspring = parent.copy()
        strength  = self._config.weight_perturb_strength
        offspring.connections[:] = [conn.with_weight(conn.weight + self._rng.gauss(0.0, strength))
                                    for conn in offspring.connections]
        return offspring

    def random_layer_between(self, layers: dict[float, list[NeuronGene]], source_id: int, target_id: int) -> float:
        """
        Draw a layer coordinate uniformly between the layers of two neurons.

        Raises:
            ValueError: If either neuron cannot be found in the layers
        """
        source_level = None
        target_level = None
        for level, neurons in layers.items():
            for neuron in neurons:
                if neuron.id == source_id:
                    source_level = level
                if neuron.id == target_id:
                    target_level = level

        if source_level is None or target_level is None:
            raise ValueError(f"Neuron {source_id} or {target_id} not found in the layers")

        low  = min(source_level, target_level)
        high = max(source_level, target_level)
        return low + (high - low) * self._rng.random()
