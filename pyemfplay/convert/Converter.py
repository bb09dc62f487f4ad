#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pathlib import Path


class Converter:
    def __init__(self, inputFile: Path, outputFile: Path):
        self.inputFile = inputFile
        self.outputFile = outputFile

    def process(self):
        raise NotImplementedError("Converter.process is not implemented")
