#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

