#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from progressbar import progressbar

from pyemfplay.convert.Converter import Converter
from pyemfplay.convert.EMFConverter import EMFConverter
from pyemfplay.exceptions import ConvertError


class FileConverter(Converter):
    """
    Converts a metafile on disk to an output file. A partially written output file is removed when the conversion
    fails.
    """

    def __init__(self, inputFile, outputFile, converter: EMFConverter = None, showProgress: bool = True):
        super().__init__(inputFile, outputFile)
        self.converter = converter if converter is not None else EMFConverter()
        self.showProgress = showProgress

    def wrapRecords(self, metafile):
        # The record count of the header is informative only, so the bar must tolerate going past it.
        return progressbar(metafile, max_error=False)

    def process(self):
        try:
            with open(self.inputFile, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ConvertError(f"Cannot read '{self.inputFile}': {e}") from e

        print(f"[*] Converting '{self.inputFile}'")
        output = self.converter.convert(data, self.wrapRecords if self.showProgress else None)

        try:
            with open(self.outputFile, "wb") as f:
                f.write(output)
        except OSError as e:
            self.removeOutput()
            raise ConvertError(f"Cannot write '{self.outputFile}': {e}") from e

        print(f"\n[+] Successfully wrote '{self.outputFile}'")

    def removeOutput(self):
        try:
            self.outputFile.unlink()
        except FileNotFoundError:
            pass
