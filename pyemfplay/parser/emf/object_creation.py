#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core import readBytes, RecordStream, Uint32LE
from pyemfplay.enum import DIBColors, parseEnum, RecordType
from pyemfplay.exceptions import UnexpectedPatternError
from pyemfplay.parser.emf.base import checkMinimumRecordSize, checkObjectIndex, checkRecordSize, \
    checkRecordType, RecordCategoryParser
from pyemfplay.parser.gdi import LOG_FONT_PANOSE_SIZE, LOG_FONT_SIZE, readBitmaps, readLogBrushEx, \
    readLogColorSpace, readLogFont, readLogFontExDv, readLogFontPanose, readLogPalette, readLogPen, readLogPenEx
from pyemfplay.record import EmrCreateBrushIndirect, EmrCreateColorSpace, EmrCreateColorSpaceW, \
    EmrCreateDIBPatternBrushPt, EmrCreateMonoBrush, EmrCreatePalette, EmrCreatePen, EmrExtCreateFontIndirectW, \
    EmrExtCreatePen

LOG_FONT_EX_DV_MINIMUM_SIZE = 356
LOG_COLOR_SPACE_SIZE = 328
LOG_COLOR_SPACE_W_SIZE = 588


class ObjectCreationRecordParser(RecordCategoryParser):
    """
    Parser for the records that create graphics objects in the object table.
    """

    def __init__(self):
        super().__init__()
        self.parsers = {
            RecordType.EMR_CREATEBRUSHINDIRECT: self.parseCreateBrushIndirect,
            RecordType.EMR_CREATECOLORSPACE: self.parseCreateColorSpace,
            RecordType.EMR_CREATECOLORSPACEW: self.parseCreateColorSpaceW,
            RecordType.EMR_CREATEDIBPATTERNBRUSHPT: self.parseCreatePatternBrush,
            RecordType.EMR_CREATEMONOBRUSH: self.parseCreatePatternBrush,
            RecordType.EMR_CREATEPALETTE: self.parseCreatePalette,
            RecordType.EMR_CREATEPEN: self.parseCreatePen,
            RecordType.EMR_EXTCREATEFONTINDIRECTW: self.parseExtCreateFontIndirectW,
            RecordType.EMR_EXTCREATEPEN: self.parseExtCreatePen,
        }

    def parseCreateBrushIndirect(self, stream: RecordStream) -> EmrCreateBrushIndirect:
        checkRecordSize(stream, 24)
        ihBrush = Uint32LE.unpack(stream)
        checkObjectIndex("ihBrush", ihBrush)
        return EmrCreateBrushIndirect(stream.size.byteCount, ihBrush, readLogBrushEx(stream))

    def parseCreateColorSpace(self, stream: RecordStream) -> EmrCreateColorSpace:
        checkMinimumRecordSize(stream, 12 + LOG_COLOR_SPACE_SIZE)
        ihCS = Uint32LE.unpack(stream)
        checkObjectIndex("ihCS", ihCS)
        return EmrCreateColorSpace(stream.size.byteCount, ihCS, readLogColorSpace(stream, False))

    def parseCreateColorSpaceW(self, stream: RecordStream) -> EmrCreateColorSpaceW:
        checkMinimumRecordSize(stream, 20 + LOG_COLOR_SPACE_W_SIZE)
        ihCS = Uint32LE.unpack(stream)
        checkObjectIndex("ihCS", ihCS)
        lcs = readLogColorSpace(stream, True)
        dwFlags = Uint32LE.unpack(stream)
        cbData = Uint32LE.unpack(stream)
        data = readBytes(stream, cbData)
        return EmrCreateColorSpaceW(stream.size.byteCount, ihCS, lcs, dwFlags, cbData, data)

    def parseCreatePatternBrush(self, stream: RecordStream):
        checkRecordType(stream, RecordType.EMR_CREATEDIBPATTERNBRUSHPT, RecordType.EMR_CREATEMONOBRUSH)
        checkMinimumRecordSize(stream, 32)
        ihBrush = Uint32LE.unpack(stream)
        checkObjectIndex("ihBrush", ihBrush)
        usage = parseEnum(DIBColors, Uint32LE.unpack(stream))
        location = [Uint32LE.unpack(stream) for _ in range(4)]
        bitmap, = readBitmaps(stream, *location)

        if bitmap is None:
            raise UnexpectedPatternError("Pattern brush records must hold a bitmap")

        if stream.recordType == RecordType.EMR_CREATEMONOBRUSH:
            return EmrCreateMonoBrush(stream.size.byteCount, ihBrush, usage, *location, bitmap)

        return EmrCreateDIBPatternBrushPt(stream.size.byteCount, ihBrush, usage, *location, bitmap)

    def parseCreatePalette(self, stream: RecordStream) -> EmrCreatePalette:
        checkMinimumRecordSize(stream, 16)
        ihPal = Uint32LE.unpack(stream)
        checkObjectIndex("ihPal", ihPal)
        logPalette = readLogPalette(stream)

        if logPalette.numberOfEntries == 0:
            raise UnexpectedPatternError("Palettes must have at least one entry")

        return EmrCreatePalette(stream.size.byteCount, ihPal, logPalette)

    def parseCreatePen(self, stream: RecordStream) -> EmrCreatePen:
        checkRecordSize(stream, 28)
        ihPen = Uint32LE.unpack(stream)
        checkObjectIndex("ihPen", ihPen)
        return EmrCreatePen(stream.size.byteCount, ihPen, readLogPen(stream))

    def parseExtCreateFontIndirectW(self, stream: RecordStream) -> EmrExtCreateFontIndirectW:
        ihFonts = Uint32LE.unpack(stream)
        checkObjectIndex("ihFonts", ihFonts)

        # The kind of font object is only given by the amount of bytes left in the record.
        elwSize = stream.size.remainingBytes()

        if elwSize < LOG_FONT_SIZE:
            raise UnexpectedPatternError(f"Font object of {elwSize} bytes is too small for a LogFont")
        elif elwSize < LOG_FONT_PANOSE_SIZE:
            elw = readLogFont(stream)
        elif elwSize == LOG_FONT_PANOSE_SIZE:
            elw = readLogFontPanose(stream)
        elif elwSize < LOG_FONT_EX_DV_MINIMUM_SIZE:
            raise UnexpectedPatternError(f"Font object of {elwSize} bytes is too small for a LogFontExDv")
        else:
            elw = readLogFontExDv(stream)

        return EmrExtCreateFontIndirectW(stream.size.byteCount, ihFonts, elw)

    def parseExtCreatePen(self, stream: RecordStream) -> EmrExtCreatePen:
        checkMinimumRecordSize(stream, 52)
        ihPen = Uint32LE.unpack(stream)
        checkObjectIndex("ihPen", ihPen)
        location = [Uint32LE.unpack(stream) for _ in range(4)]
        elp = readLogPenEx(stream)
        bitmap, = readBitmaps(stream, *location)
        return EmrExtCreatePen(stream.size.byteCount, ihPen, *location, elp, bitmap)
