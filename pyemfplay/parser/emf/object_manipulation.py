#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core import RecordStream, Uint32LE
from pyemfplay.enum import RecordType
from pyemfplay.exceptions import UnexpectedPatternError
from pyemfplay.parser.emf.base import checkArrayFits, checkMinimumRecordSize, checkObjectIndex, checkRecordSize, \
    RecordCategoryParser
from pyemfplay.parser.gdi import readLogPaletteEntries
from pyemfplay.record import EmrColorCorrectPalette, EmrDeleteColorSpace, EmrDeleteObject, EmrResizePalette, \
    EmrSelectObject, EmrSelectPalette, EmrSetColorSpace, EmrSetPaletteEntries

MAX_PALETTE_ENTRIES = 0x400


class ObjectManipulationRecordParser(RecordCategoryParser):
    """
    Parser for the records that select, delete or modify graphics objects.
    """

    def __init__(self):
        super().__init__()
        self.parsers = {
            RecordType.EMR_COLORCORRECTPALETTE: self.parseColorCorrectPalette,
            RecordType.EMR_DELETECOLORSPACE: self.parseDeleteColorSpace,
            RecordType.EMR_DELETEOBJECT: self.parseDeleteObject,
            RecordType.EMR_RESIZEPALETTE: self.parseResizePalette,
            RecordType.EMR_SELECTOBJECT: self.parseSelectObject,
            RecordType.EMR_SELECTPALETTE: self.parseSelectPalette,
            RecordType.EMR_SETCOLORSPACE: self.parseSetColorSpace,
            RecordType.EMR_SETPALETTEENTRIES: self.parseSetPaletteEntries,
        }

    def readIndex(self, stream: RecordStream, name: str) -> int:
        index = Uint32LE.unpack(stream)

        if index == 0:
            raise UnexpectedPatternError(f"{name} must not be 0")

        return index

    def parseColorCorrectPalette(self, stream: RecordStream) -> EmrColorCorrectPalette:
        checkRecordSize(stream, 24)
        ihPalette = self.readIndex(stream, "ihPalette")
        nFirstEntry = Uint32LE.unpack(stream)
        nPalEntries = Uint32LE.unpack(stream)
        nReserved = Uint32LE.unpack(stream)
        return EmrColorCorrectPalette(stream.size.byteCount, ihPalette, nFirstEntry, nPalEntries, nReserved)

    def parseDeleteColorSpace(self, stream: RecordStream) -> EmrDeleteColorSpace:
        checkRecordSize(stream, 12)
        return EmrDeleteColorSpace(stream.size.byteCount, self.readIndex(stream, "ihCS"))

    def parseDeleteObject(self, stream: RecordStream) -> EmrDeleteObject:
        checkRecordSize(stream, 12)
        return EmrDeleteObject(stream.size.byteCount, self.readIndex(stream, "ihObject"))

    def parseResizePalette(self, stream: RecordStream) -> EmrResizePalette:
        checkRecordSize(stream, 16)
        ihPal = Uint32LE.unpack(stream)
        checkObjectIndex("ihPal", ihPal)
        numberOfEntries = Uint32LE.unpack(stream)

        if numberOfEntries == 0 or numberOfEntries > MAX_PALETTE_ENTRIES:
            raise UnexpectedPatternError(f"Palettes must have between 1 and {MAX_PALETTE_ENTRIES} entries, "
                                         f"got {numberOfEntries}")

        return EmrResizePalette(stream.size.byteCount, ihPal, numberOfEntries)

    def parseSelectObject(self, stream: RecordStream) -> EmrSelectObject:
        checkRecordSize(stream, 12)
        return EmrSelectObject(stream.size.byteCount, self.readIndex(stream, "ihObject"))

    def parseSelectPalette(self, stream: RecordStream) -> EmrSelectPalette:
        checkRecordSize(stream, 12)
        return EmrSelectPalette(stream.size.byteCount, self.readIndex(stream, "ihPal"))

    def parseSetColorSpace(self, stream: RecordStream) -> EmrSetColorSpace:
        checkRecordSize(stream, 12)
        return EmrSetColorSpace(stream.size.byteCount, self.readIndex(stream, "ihCS"))

    def parseSetPaletteEntries(self, stream: RecordStream) -> EmrSetPaletteEntries:
        checkMinimumRecordSize(stream, 20)
        ihPal = Uint32LE.unpack(stream)
        checkObjectIndex("ihPal", ihPal)
        start = Uint32LE.unpack(stream)
        numberOfEntries = Uint32LE.unpack(stream)
        checkArrayFits(stream, "Palette entry array", numberOfEntries, 4)
        return EmrSetPaletteEntries(stream.size.byteCount, ihPal, start, readLogPaletteEntries(stream, numberOfEntries))
