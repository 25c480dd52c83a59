"""
Settings and configuration for registry_http.

Read values from registry_http.conf.default_config, and then from the module
specified by the REGISTRY_HTTP_CONFIG environment variable; see
default_config.py for a list of all possible variables.
"""

import importlib
import os

from registry_http.conf import default_config
from registry_http.exceptions import ConfigurationError

ENVIRONMENT_VARIABLE = "REGISTRY_HTTP_CONFIG"


class Config:
    """Holder class for Config Variables"""

    def __init__(self, config_module_str=None):
        """Read variables in UPPER_CASE from specified config

        :param config_module_str: Path of the config module to be loaded
        """

        # Update attrs from default settings
        for setting in dir(default_config):
            if setting.isupper():
                setattr(self, setting, getattr(default_config, setting))

        # Fetch Config module string from environment
        config_module_str = os.environ.get(ENVIRONMENT_VARIABLE, config_module_str)

        if not config_module_str:
            config_module_str = "registry_http.conf.default_config"

        # If config module is defined then load it and override the attrs
        config_module = importlib.import_module(config_module_str)

        # Override the config attrs
        for setting in dir(config_module):
            if setting.isupper():
                setattr(self, setting, getattr(config_module, setting))

        # store the settings module for future use
        self.CONFIG_MODULE = config_module

        status = getattr(self, "HUMAN_ERROR_STATUS", None)
        if not isinstance(status, int) or not 100 <= status <= 599:
            raise ConfigurationError(
                f"The HUMAN_ERROR_STATUS setting must be an HTTP status code, "
                f"got {status!r}."
            )

    def __repr__(self):
        """Print along with Config Module name"""
        return '<%(cls)s "%(config_module)s">' % {
            "cls": self.__class__.__name__,
            "config_module": self.CONFIG_MODULE.__name__,
        }


active_config = Config()
