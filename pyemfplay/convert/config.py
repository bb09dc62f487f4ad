#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pathlib import Path

from pyemfplay.core import settings

"""
The default configuration for the converter.
"""
DEFAULTS = settings.load(Path(__file__).parent.absolute() / "convert.default.ini")
