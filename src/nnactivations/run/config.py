import configparser
import math
import os
import warnings
from functools import partial

import numpy as np
from autograd.tracer import isbox  # type: ignore

from nnactivations.activations import activation_aliases, activations, HardSigmoid

class Config:

    # Options recognized in the [ACTIVATION] section
    _OPTIONS = ('activation', 'leakyrelu_slope', 'elu_alpha', 'hard_sigmoid_cutoff', 'precision')

    _PRECISIONS = {
        'float16': np.float16,
        'float32': np.float32,
        'float64': np.float64,
    }

    @staticmethod
    def _parse_activation(raw_name):
        """
        Resolve an activation name or alias to its registered name.

        Parameters:
            raw_name: Activation name (e.g. 'sigmoid') or alias (e.g. 'σ')

        Returns:
            The registered activation function name
        """
        if raw_name is None:
            raise ValueError("Option 'activation' cannot be none")
        name = activation_aliases.get(raw_name.strip(), raw_name.strip())
        if name not in activations:
            raise ValueError(f"Invalid activation function '{raw_name}' in activation")
        return name

    @staticmethod
    def _parse_parameter(key, value):
        """Reject parameters that would turn every output into NaN."""
        if value is None or not math.isfinite(value):
            raise ValueError(f"Option '{key}' must be a finite number, got {value}")
        return value

    @classmethod
    def _parse_precision(cls, raw_precision):
        if raw_precision is None:
            return None
        if raw_precision not in cls._PRECISIONS:
            valid = ', '.join(cls._PRECISIONS)
            raise ValueError(f"Invalid precision '{raw_precision}', expected one of: {valid}, none")
        return raw_precision

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding the defaults.
        """

        # Defaults (also used for options missing from the file)
        self.activation          = 'sigmoid'
        self.leakyrelu_slope     = 0.01
        self.elu_alpha           = 1.0
        self.hard_sigmoid_cutoff = None
        self.precision           = None

        if config_file is None:
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file, encoding='utf-8')

        # Helper function to safely parse values
        def get_value(section, key, value_type, default):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                return default

        if parser.has_section('ACTIVATION'):
            for key in parser.options('ACTIVATION'):
                if key not in self._OPTIONS:
                    warnings.warn(f"Ignoring unknown option '{key}' in section [ACTIVATION]", stacklevel=2)

        # [ACTIVATION]

        # Name (or Greek-letter alias) of the activation function.
        self.activation = self._parse_activation(get_value('ACTIVATION', 'activation', str, self.activation))

        # Slope of 'leakyrelu' for negative inputs.
        self.leakyrelu_slope = self._parse_parameter(
            'leakyrelu_slope', get_value('ACTIVATION', 'leakyrelu_slope', float, self.leakyrelu_slope))

        # Scale of the negative branch of 'elu'.
        self.elu_alpha = self._parse_parameter(
            'elu_alpha', get_value('ACTIVATION', 'elu_alpha', float, self.elu_alpha))

        # Cutoff of 'hard_sigmoid' and 'hard_sigmoid_keras'; 'none' keeps 2.0 and 2.5 respectively.
        self.hard_sigmoid_cutoff = get_value('ACTIVATION', 'hard_sigmoid_cutoff', float, self.hard_sigmoid_cutoff)
        if self.hard_sigmoid_cutoff is not None and not (math.isfinite(self.hard_sigmoid_cutoff) and self.hard_sigmoid_cutoff > 0.0):
            raise ValueError(f"hard_sigmoid_cutoff must be finite and positive, got {self.hard_sigmoid_cutoff}")

        # Floating point type inputs are cast to before evaluation; 'none' keeps the input's own type.
        self.precision = self._parse_precision(get_value('ACTIVATION', 'precision', str, self.precision))

    def build_activation(self):
        """
        Build the configured activation function.

        Returns:
            A one-argument callable with the configured parameters bound
        """
        if self.activation == 'leakyrelu':
            function = partial(activations['leakyrelu'], a=self.leakyrelu_slope)
        elif self.activation == 'elu':
            function = partial(activations['elu'], alpha=self.elu_alpha)
        elif self.activation in ('hard_sigmoid', 'hard_sigmoid_keras') and self.hard_sigmoid_cutoff is not None:
            function = HardSigmoid(self.hard_sigmoid_cutoff)
        else:
            function = activations[self.activation]

        if self.precision is None:
            return function

        cast = self._PRECISIONS[self.precision]

        def activation_with_precision(z):
            # Traced values keep the precision they were traced with
            if isbox(z):
                return function(z)
            return function(cast(z))

        return activation_with_precision
