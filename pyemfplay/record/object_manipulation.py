#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List

from pyemfplay.enum import RecordType
from pyemfplay.gdi import LogPaletteEntry
from pyemfplay.record.record import Record


class EmrColorCorrectPalette(Record):
    def __init__(self, size: int, ihPalette: int, nFirstEntry: int, nPalEntries: int, nReserved: int):
        super().__init__(RecordType.EMR_COLORCORRECTPALETTE, size)
        self.ihPalette = ihPalette
        self.nFirstEntry = nFirstEntry
        self.nPalEntries = nPalEntries
        self.nReserved = nReserved


class EmrDeleteColorSpace(Record):
    def __init__(self, size: int, ihCS: int):
        super().__init__(RecordType.EMR_DELETECOLORSPACE, size)
        self.ihCS = ihCS


class EmrDeleteObject(Record):
    def __init__(self, size: int, ihObject: int):
        super().__init__(RecordType.EMR_DELETEOBJECT, size)
        self.ihObject = ihObject


class EmrResizePalette(Record):
    def __init__(self, size: int, ihPal: int, numberOfEntries: int):
        super().__init__(RecordType.EMR_RESIZEPALETTE, size)
        self.ihPal = ihPal
        self.numberOfEntries = numberOfEntries


class EmrSelectObject(Record):
    """
    Select an object of the object table, or a stock object when the high bit of ihObject is set.
    """

    def __init__(self, size: int, ihObject: int):
        super().__init__(RecordType.EMR_SELECTOBJECT, size)
        self.ihObject = ihObject


class EmrSelectPalette(Record):
    def __init__(self, size: int, ihPal: int):
        super().__init__(RecordType.EMR_SELECTPALETTE, size)
        self.ihPal = ihPal


class EmrSetColorSpace(Record):
    def __init__(self, size: int, ihCS: int):
        super().__init__(RecordType.EMR_SETCOLORSPACE, size)
        self.ihCS = ihCS


class EmrSetPaletteEntries(Record):
    def __init__(self, size: int, ihPal: int, start: int, entries: List[LogPaletteEntry]):
        super().__init__(RecordType.EMR_SETPALETTEENTRIES, size)
        self.ihPal = ihPal
        self.start = start
        self.entries = entries

    @property
    def numberOfEntries(self) -> int:
        return len(self.entries)
