import configparser
import os

class Config:

    @staticmethod
    def _parse_layer_sizes(raw_sizes):
        """
        Parse hidden_layer_sizes from string to list.

        Parameters:
            raw_sizes: Either a comma-separated list of non-negative integers,
                       an empty string / None (no hidden layers), or already a list

        Returns:
            List of hidden layer sizes
        """
        if raw_sizes is None:
            return []

        # If already a list (or tuple), validate and return a copy
        if isinstance(raw_sizes, (list, tuple)):
            sizes = [int(size) for size in raw_sizes]
        else:
            sizes = [int(opt.strip()) for opt in raw_sizes.split(',') if opt.strip()]

        for size in sizes:
            if size < 0:
                raise ValueError(f"Invalid hidden layer size '{size}' in hidden_layer_sizes")
        return sizes

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding default values,
                         which can then be changed attribute by attribute.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.num_inputs         = 2
            self.num_outputs        = 1
            self.hidden_layer_sizes = []

            self.min_weight = float('-inf')
            self.max_weight = float('inf')
            self.min_bias   = float('-inf')
            self.max_bias   = float('inf')

            # Set defaults for initialization parameters
            self.bias_init_mean    = 0.0
            self.bias_init_stdev   = 1.0
            self.weight_init_mean  = 0.0
            self.weight_init_stdev = 1.0

            # Set defaults for mutation probabilities
            self.bias_replace_prob       = 0.1
            self.bias_perturb_prob       = 0.7
            self.bias_perturb_strength   = 0.5
            self.weight_replace_prob     = 0.1
            self.weight_perturb_prob     = 0.8
            self.weight_perturb_strength = 0.5

            # Set defaults for crossover
            self.crossover_gene_prob = 0.5

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [NETWORK]

        # The number of inputs the network receives.
        self.num_inputs = get_value('NETWORK', 'num_inputs', int)

        # The number of outputs the network delivers.
        self.num_outputs = get_value('NETWORK', 'num_outputs', int)

        # The width of each hidden layer, from the input side to the output side.
        # Comma-separated list; leave empty (or "None") for no hidden layers.
        raw_sizes = get_value('NETWORK', 'hidden_layer_sizes', str, default='')
        self.hidden_layer_sizes = self._parse_layer_sizes(raw_sizes)

        # [NEURON]

        # The mean and standard deviation of the normal distribution
        # used to initialize the 'bias' parameter for new neurons.
        self.bias_init_mean  = get_value('NEURON', 'bias_init_mean' , float, default=0.0)
        self.bias_init_stdev = get_value('NEURON', 'bias_init_stdev', float, default=1.0)

        # The minimum and maximum allowed 'bias' values.
        # Biases outside this range will be clamped to this range.
        self.min_bias = get_value('NEURON', 'min_bias', float, default=float('-inf'))
        self.max_bias = get_value('NEURON', 'max_bias', float, default=float('inf'))

        # The probability that mutation will replace the 'bias' of
        # a neuron with a newly chosen random value.
        self.bias_replace_prob = get_value('NEURON', 'bias_replace_prob', float, default=0.1)

        # The probability that mutation will change the 'bias'
        # of a neuron by adding a random value.
        self.bias_perturb_prob = get_value('NEURON', 'bias_perturb_prob', float, default=0.7)

        # The standard deviation of the zero-centered normal distribution
        # from which a 'bias' perturbation value is drawn.
        self.bias_perturb_strength = get_value('NEURON', 'bias_perturb_strength', float, default=0.5)

        # [CONNECTION]

        # The mean and standard deviation of the normal distribution
        # used to initialize the weights of new neurons.
        self.weight_init_mean  = get_value('CONNECTION', 'weight_init_mean' , float, default=0.0)
        self.weight_init_stdev = get_value('CONNECTION', 'weight_init_stdev', float, default=1.0)

        # The minimum and maximum allowed 'weight' values.
        # Weights outside this range will be clamped to this range.
        self.min_weight = get_value('CONNECTION', 'min_weight', float, default=float('-inf'))
        self.max_weight = get_value('CONNECTION', 'max_weight', float, default=float('inf'))

        # The probability that mutation will replace a weight
        # with a newly chosen random value.
        self.weight_replace_prob = get_value('CONNECTION', 'weight_replace_prob', float, default=0.1)

        # The probability that mutation will change a weight by adding a random value.
        self.weight_perturb_prob = get_value('CONNECTION', 'weight_perturb_prob', float, default=0.8)

        # The standard deviation of the zero-centered normal distribution
        # from which a weight perturbation value is drawn.
        self.weight_perturb_strength = get_value('CONNECTION', 'weight_perturb_strength', float, default=0.5)

        # [CROSSOVER]

        # The probability that a child inherits a given weight (or bias)
        # from the first parent rather than from the second one.
        self.crossover_gene_prob = get_value('CROSSOVER', 'crossover_gene_prob', float, default=0.5)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse hidden_layer_sizes when set.
        This allows users to write config.hidden_layer_sizes = "4, 4" and have it
        automatically converted to a list of integers.
        """
        if name == 'hidden_layer_sizes':
            value = self._parse_layer_sizes(value)
        super().__setattr__(name, value)
