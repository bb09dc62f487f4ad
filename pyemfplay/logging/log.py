#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import logging
import logging.config
from configparser import ConfigParser
from pathlib import Path

from pyemfplay.logging.filters import LoggerNameFilter


class LOGGER_NAMES:
    # Root logger
    PYEMFPLAY = "pyemfplay"
    PARSER = f"{PYEMFPLAY}.parser"
    PLAYER = f"{PYEMFPLAY}.player"
    PLAYER_SVG = f"{PLAYER}.svg"
    CONVERT = f"{PYEMFPLAY}.convert"


def convertConfig(cfg: ConfigParser) -> dict:
    """
    Transform a config file into a dictionary.

    Keys with the title format `section:subsection:subsection` are
    transformed into nested dictionaries

    # Examples

    ```ini
    [toplevel]
    a = 1

    [toplevel:sublevel]
    c = 3
    ```

    would convert to

    ```python
    'toplevel': {
        'a': 1,
        'sublevel': {
            'c': 3,
        }
    }
    ```
    """
    out = {}

    for section in cfg.sections():
        current = out

        for part in section.split(":"):
            current = current.setdefault(part, {})

        for (k, v) in cfg.items(section):
            current[k] = v

    return out


def configure(config: ConfigParser) -> bool:
    """Configure logging based on settings from disk."""
    try:
        cfg = convertConfig(config)
        logs = cfg["logs"]
        logs["version"] = int(logs["version"])  # Needs to be integer.

        handlerNames = set()
        for (k, v) in logs["loggers"].items():
            v["handlers"] = [x.strip() for x in v["handlers"].split(",") if x.strip() != ""]
            handlerNames.update(v["handlers"])

        # Only instantiate the handlers that a logger uses, file handlers create their file on construction.
        logs["handlers"] = {name: handler for name, handler in logs["handlers"].items() if name in handlerNames}

        if "json" in handlerNames:
            logDir = Path(cfg["vars"]["output_dir"]) / cfg["vars"]["log_dir"]
            logDir.mkdir(parents=True, exist_ok=True)

        logging.config.dictConfig(logs)

        # Enable the user configured filter.
        if logs.get("filter"):
            root = logging.getLogger(LOGGER_NAMES.PYEMFPLAY)
            for h in root.handlers:
                # Use type() because we want specific type, not a subclass.
                if type(h) == logging.StreamHandler:
                    h.filters.clear()
                    h.addFilter(LoggerNameFilter(logs["filter"]))
        return True
    except Exception as e:
        logging.warning("Error Parsing PyEMFPlay Configuration - %s", e)
        return False
