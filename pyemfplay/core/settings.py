#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import logging
from configparser import ConfigParser, Error as ConfigError, ExtendedInterpolation

import appdirs
CONFIG_DIR = appdirs.user_config_dir("pyemfplay", "pyemfplay")


def load(path: str, fallback: ConfigParser = None) -> ConfigParser:
    """
    Retrieve the PyEMFPlay settings from a file

    :param path: The path of the file to load.
    :param fallback: The fallback configuration.

    :returns: A ConfigParser instance with the loaded settings.
    :throws Exception: When the fallback configuration is missing and no configuration is found.
    """
    config = ConfigParser(interpolation=ExtendedInterpolation())
    config.optionxform = str
    try:
        if len(config.read(path)) > 0:
            return config
    except ConfigError as e:
        # Fallback to default settings.
        logging.warning("Ignoring invalid configuration file %s: %s", path, e)

    if not fallback:
        raise Exception('Invalid configuration with no fallback specified')
    return fallback
