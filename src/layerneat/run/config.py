import configparser
import os

class Config:
    """
    Configuration parameters of a NEAT run.

    Parameters are read from an INI file. Every parameter is optional: when a
    section or a key is missing, the standard value is used. Creating a Config
    without a file yields the standard configuration.
    """

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create the standard Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, all parameters take their standard values.

        Raises:
            FileNotFoundError: If the configuration file does not exist
            ValueError:        If a value cannot be parsed or is out of range
        """
        parser = configparser.ConfigParser()
        if config_file is not None:
            if not os.path.exists(config_file):
                raise FileNotFoundError(f"Configuration file '{config_file}' not found")
            parser.read(config_file)

        # Helper function to safely parse values
        def get_value(section, key, value_type, default):
            if not parser.has_option(section, key):
                return default
            raw_value = parser.get(section, key)
            if raw_value.lower() == 'none':
                return None
            if value_type == int:
                return parser.getint(section, key)
            elif value_type == float:
                return parser.getfloat(section, key)
            elif value_type == bool:
                return parser.getboolean(section, key)
            return raw_value

        # [POPULATION_INIT]

        # The number of genomes in each generation.
        self.population_size = get_value('POPULATION_INIT', 'population_size', int, 150)

        # [TERMINATION]

        # The number of generations after which to stop the run.
        # The run stops sooner if the environment reports a genome as solved.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int, 100)

        # [SPECIATION]

        # Genomes whose distance to a species representative is less than
        # this threshold are considered to be in the same species.
        # The threshold is adjusted after every generation.
        self.compatibility_threshold = get_value('SPECIATION', 'compatibility_threshold', float, 2.5)

        # The number of species the threshold adjustment aims for.
        self.target_species_count = get_value('SPECIATION', 'target_species_count', int, 10)

        # The amount by which the threshold moves each generation
        # when the number of species differs from the target.
        self.threshold_adjust_step = get_value('SPECIATION', 'threshold_adjust_step', float, 0.3)

        # The coefficients for the excess and disjoint gene counts'
        # contributions to the compatibility distance.
        self.distance_excess_coeff   = get_value('SPECIATION', 'distance_excess_coeff',   float, 1.0)
        self.distance_disjoint_coeff = get_value('SPECIATION', 'distance_disjoint_coeff', float, 1.0)

        # The coefficient for the mean weight difference of matching
        # connection genes' contribution to the compatibility distance.
        self.distance_params_coeff = get_value('SPECIATION', 'distance_params_coeff', float, 0.4)

        # Genomes with fewer connection genes than this are not
        # normalized by their size when computing the distance.
        self.distance_normalization_min_genes = get_value('SPECIATION', 'distance_normalization_min_genes', int, 20)

        # [STRUCTURAL_MUTATIONS]

        # A single random draw per mutation is compared against each of the
        # following probabilities, so the mutations are correlated: any draw that
        # triggers a rarer mutation also triggers all the more likely ones.

        # The probability that mutation will split a connection with a new neuron.
        self.node_add_probability = get_value('STRUCTURAL_MUTATIONS', 'node_add_probability', float, 0.03)

        # The probability that mutation will add a connection between existing neurons.
        self.connection_add_probability = get_value('STRUCTURAL_MUTATIONS', 'connection_add_probability', float, 0.05)

        # The probability that mutation will flip the enabled status of a connection.
        self.connection_toggle_probability = get_value('STRUCTURAL_MUTATIONS', 'connection_toggle_probability', float, 0.01)

        # How many random neuron pairs to try before giving up on adding a connection.
        self.connection_add_attempts = get_value('STRUCTURAL_MUTATIONS', 'connection_add_attempts', int, 100)

        # [CONNECTION]

        # The range from which the weights of new connections are drawn uniformly.
        self.min_weight = get_value('CONNECTION', 'min_weight', float, -1.0)
        self.max_weight = get_value('CONNECTION', 'max_weight', float,  1.0)

        # The probability that mutation will perturb the weights of all connections.
        self.weight_mutate_probability = get_value('CONNECTION', 'weight_mutate_probability', float, 0.8)

        # The standard deviation of the zero-centered normal distribution
        # from which a weight perturbation value is drawn.
        self.weight_perturb_strength = get_value('CONNECTION', 'weight_perturb_strength', float, 0.1)

        # [REPRODUCTION]

        # The probability that a child is produced by crossover
        # (otherwise the fitter of its two parents is cloned).
        self.crossover_probability = get_value('REPRODUCTION', 'crossover_probability', float, 0.75)

        # The number of members sampled (with replacement) in a parent selection tournament.
        self.tournament_size = get_value('REPRODUCTION', 'tournament_size', int, 3)

        self._validate()

    def _validate(self) -> None:
        """
        Check that all parameters lie within their allowed range.

        Raises:
            ValueError: naming the first offending parameter
        """
        for name in ('population_size',
                     'max_number_generations',
                     'compatibility_threshold',
                     'target_species_count',
                     'threshold_adjust_step',
                     'distance_excess_coeff',
                     'distance_disjoint_coeff',
                     'distance_params_coeff',
                     'distance_normalization_min_genes',
                     'connection_add_attempts',
                     'min_weight',
                     'max_weight',
                     'weight_perturb_strength',
                     'tournament_size'):
            if getattr(self, name) is None:
                raise ValueError(f"'{name}' must not be none")

        if self.population_size < 1:
            raise ValueError("'population_size' must be at least 1")
        if self.max_number_generations < 0:
            raise ValueError("'max_number_generations' must not be negative")
        if self.tournament_size < 1:
            raise ValueError("'tournament_size' must be at least 1")
        if self.connection_add_attempts < 1:
            raise ValueError("'connection_add_attempts' must be at least 1")

        for name in ('node_add_probability',
                     'connection_add_probability',
                     'connection_toggle_probability',
                     'weight_mutate_probability',
                     'crossover_probability'):
            value = getattr(self, name)
            if value is None or not 0.0 <= value <= 1.0:
                raise ValueError(f"'{name}' must be a probability in [0, 1]")

        if self.min_weight > self.max_weight:
            raise ValueError("'min_weight' must not exceed 'max_weight'")
