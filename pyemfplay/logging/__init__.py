#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.logging.filters import LoggerNameFilter
from pyemfplay.logging.formatters import JSONFormatter
from pyemfplay.logging.log import configure, convertConfig, LOGGER_NAMES
