#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.convert.Converter import Converter
from pyemfplay.convert.EMFConverter import EMFConverter, isEMF
from pyemfplay.convert.FileConverter import FileConverter
from pyemfplay.convert.WMFConverter import WMFConverter
