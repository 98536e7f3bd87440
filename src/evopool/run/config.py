"""Population configuration, read from an INI file or filled with defaults."""

import configparser
import os

class Config:

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config with default values for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.population_size = 0
            self.name            = ""
            self.should_minimize = False
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

        # [POPULATION]

        # The number of genomes the population should hold.
        # Advisory: the population itself never enforces it.
        self.population_size = get_value('POPULATION', 'population_size', int)
        if self.population_size is None or self.population_size < 0:
            raise ValueError(f"population_size must be a non-negative integer, got {self.population_size}")

        # Descriptive name of the population, used in log messages.
        self.name = get_value('POPULATION', 'name', str, default="")

        # [SCORING]

        # Whether lower scores are better. Passed on to species
        # when they calculate their share of the offspring.
        self.should_minimize = get_value('SCORING', 'should_minimize', bool, default=False)
