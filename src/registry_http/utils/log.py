"""Module defines logging related utilities"""

import logging.config

from registry_http.conf import active_config


def configure_logging():
    """Function to configure the logging for registry_http"""
    # Load the logger using the logging config
    logging.config.dictConfig(active_config.LOGGING_CONFIG)
