#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core import decodeNullTerminatedANSI, decodeNullTerminatedUTF16LE, Int32LE, readBytes, \
    RecordStream, Uint32LE
from pyemfplay.enum import ArcDirection, BackgroundMode, BinaryRasterOperation, ColorMatchToTarget, \
    ColorSpaceAction, ICMMode, LayoutMode, MapMode, parseEnum, parseFlags, PolygonFillMode, RecordType, \
    StretchMode, TextAlignmentMode
from pyemfplay.exceptions import UnexpectedPatternError
from pyemfplay.parser.emf.base import checkArrayFits, checkMinimumRecordSize, checkRecordSize, checkRecordType, \
    RecordCategoryParser
from pyemfplay.parser.gdi import readColorAdjustment, readColorRef, readPixelFormatDescriptor, readPointL, \
    readSizeL, readUniversalFontId
from pyemfplay.record import EmrColorMatchToTargetW, EmrForceUfiMapping, EmrMoveToEx, EmrPixelFormat, \
    EmrRealizePalette, EmrRestoreDC, EmrSaveDC, EmrScaleViewportExtEx, EmrScaleWindowExtEx, EmrSetArcDirection, \
    EmrSetBkColor, EmrSetBkMode, EmrSetBrushOrgEx, EmrSetColorAdjustment, EmrSetIcmMode, EmrSetIcmProfileA, \
    EmrSetIcmProfileW, EmrSetLayout, EmrSetLinkedUfis, EmrSetMapMode, EmrSetMapperFlags, EmrSetMiterLimit, \
    EmrSetPolyFillMode, EmrSetRop2, EmrSetStretchBltMode, EmrSetTextAlign, EmrSetTextColor, \
    EmrSetTextJustification, EmrSetViewportExtEx, EmrSetViewportOrgEx, EmrSetWindowExtEx, EmrSetWindowOrgEx


class StateRecordParser(RecordCategoryParser):
    """
    Parser for the records that change the playback device context.
    """

    def __init__(self):
        super().__init__()

        # Records made of a single 32-bit mode value, with the type of the value.
        self.modes = {
            RecordType.EMR_SETARCDIRECTION: (EmrSetArcDirection, ArcDirection),
            RecordType.EMR_SETBKMODE: (EmrSetBkMode, BackgroundMode),
            RecordType.EMR_SETICMMODE: (EmrSetIcmMode, ICMMode),
            RecordType.EMR_SETLAYOUT: (EmrSetLayout, LayoutMode),
            RecordType.EMR_SETMAPMODE: (EmrSetMapMode, MapMode),
            RecordType.EMR_SETPOLYFILLMODE: (EmrSetPolyFillMode, PolygonFillMode),
            RecordType.EMR_SETROP2: (EmrSetRop2, BinaryRasterOperation),
            RecordType.EMR_SETSTRETCHBLTMODE: (EmrSetStretchBltMode, StretchMode),
        }

        self.points = {
            RecordType.EMR_MOVETOEX: EmrMoveToEx,
            RecordType.EMR_SETBRUSHORGEX: EmrSetBrushOrgEx,
            RecordType.EMR_SETVIEWPORTORGEX: EmrSetViewportOrgEx,
            RecordType.EMR_SETWINDOWORGEX: EmrSetWindowOrgEx,
        }

        self.extents = {
            RecordType.EMR_SETVIEWPORTEXTEX: EmrSetViewportExtEx,
            RecordType.EMR_SETWINDOWEXTEX: EmrSetWindowExtEx,
        }

        self.colors = {
            RecordType.EMR_SETBKCOLOR: EmrSetBkColor,
            RecordType.EMR_SETTEXTCOLOR: EmrSetTextColor,
        }

        self.parsers = {
            RecordType.EMR_COLORMATCHTOTARGETW: self.parseColorMatchToTargetW,
            RecordType.EMR_FORCEUFIMAPPING: self.parseForceUfiMapping,
            RecordType.EMR_PIXELFORMAT: self.parsePixelFormat,
            RecordType.EMR_REALIZEPALETTE: self.parseRealizePalette,
            RecordType.EMR_RESTOREDC: self.parseRestoreDC,
            RecordType.EMR_SAVEDC: self.parseSaveDC,
            RecordType.EMR_SCALEVIEWPORTEXTEX: self.parseScaleExtEx,
            RecordType.EMR_SCALEWINDOWEXTEX: self.parseScaleExtEx,
            RecordType.EMR_SETCOLORADJUSTMENT: self.parseSetColorAdjustment,
            RecordType.EMR_SETICMPROFILEA: self.parseSetIcmProfile,
            RecordType.EMR_SETICMPROFILEW: self.parseSetIcmProfile,
            RecordType.EMR_SETLINKEDUFIS: self.parseSetLinkedUfis,
            RecordType.EMR_SETMAPPERFLAGS: self.parseSetMapperFlags,
            RecordType.EMR_SETMITERLIMIT: self.parseSetMiterLimit,
            RecordType.EMR_SETTEXTALIGN: self.parseSetTextAlign,
            RecordType.EMR_SETTEXTJUSTIFICATION: self.parseSetTextJustification,
        }

        self.parsers.update({recordType: self.parseMode for recordType in self.modes})
        self.parsers.update({recordType: self.parsePoint for recordType in self.points})
        self.parsers.update({recordType: self.parseExtent for recordType in self.extents})
        self.parsers.update({recordType: self.parseColor for recordType in self.colors})

    def parseMode(self, stream: RecordStream):
        checkRecordType(stream, *self.modes)
        checkRecordSize(stream, 12)
        recordClass, modeType = self.modes[stream.recordType]
        return recordClass(stream.size.byteCount, parseEnum(modeType, Uint32LE.unpack(stream)))

    def parsePoint(self, stream: RecordStream):
        checkRecordType(stream, *self.points)
        checkRecordSize(stream, 16)
        return self.points[stream.recordType](stream.size.byteCount, readPointL(stream))

    def parseExtent(self, stream: RecordStream):
        checkRecordType(stream, *self.extents)
        checkRecordSize(stream, 16)
        return self.extents[stream.recordType](stream.size.byteCount, readSizeL(stream))

    def parseColor(self, stream: RecordStream):
        checkRecordType(stream, *self.colors)
        checkRecordSize(stream, 12)
        return self.colors[stream.recordType](stream.size.byteCount, readColorRef(stream))

    def parseColorMatchToTargetW(self, stream: RecordStream) -> EmrColorMatchToTargetW:
        checkMinimumRecordSize(stream, 24)
        action = parseEnum(ColorSpaceAction, Uint32LE.unpack(stream))
        flags = parseEnum(ColorMatchToTarget, Uint32LE.unpack(stream))
        cbName = Uint32LE.unpack(stream)
        cbData = Uint32LE.unpack(stream)
        checkArrayFits(stream, "Color profile name and data", cbName + cbData, 1)
        name = decodeNullTerminatedUTF16LE(readBytes(stream, cbName))
        data = readBytes(stream, cbData)
        return EmrColorMatchToTargetW(stream.size.byteCount, action, flags, cbName, cbData, name, data)

    def parseForceUfiMapping(self, stream: RecordStream) -> EmrForceUfiMapping:
        checkRecordSize(stream, 16)
        return EmrForceUfiMapping(stream.size.byteCount, readUniversalFontId(stream))

    def parsePixelFormat(self, stream: RecordStream) -> EmrPixelFormat:
        checkRecordSize(stream, 48)
        return EmrPixelFormat(stream.size.byteCount, readPixelFormatDescriptor(stream))

    def parseRealizePalette(self, stream: RecordStream) -> EmrRealizePalette:
        checkRecordSize(stream, 8)
        return EmrRealizePalette(stream.size.byteCount)

    def parseRestoreDC(self, stream: RecordStream) -> EmrRestoreDC:
        checkRecordSize(stream, 12)
        savedDC = Int32LE.unpack(stream)

        # Saved contexts are always referred to relatively to the current one.
        if savedDC >= 0:
            raise UnexpectedPatternError(f"EMR_RESTOREDC savedDC must be negative, got {savedDC}")

        return EmrRestoreDC(stream.size.byteCount, savedDC)

    def parseSaveDC(self, stream: RecordStream) -> EmrSaveDC:
        checkRecordSize(stream, 8)
        return EmrSaveDC(stream.size.byteCount)

    def parseScaleExtEx(self, stream: RecordStream):
        checkRecordType(stream, RecordType.EMR_SCALEVIEWPORTEXTEX, RecordType.EMR_SCALEWINDOWEXTEX)
        checkRecordSize(stream, 24)
        xNum, xDenom, yNum, yDenom = [Int32LE.unpack(stream) for _ in range(4)]

        if xDenom == 0 or yDenom == 0:
            raise UnexpectedPatternError("Scaling denominators must not be 0")

        if stream.recordType == RecordType.EMR_SCALEVIEWPORTEXTEX:
            return EmrScaleViewportExtEx(stream.size.byteCount, xNum, xDenom, yNum, yDenom)

        return EmrScaleWindowExtEx(stream.size.byteCount, xNum, xDenom, yNum, yDenom)

    def parseSetColorAdjustment(self, stream: RecordStream) -> EmrSetColorAdjustment:
        checkRecordSize(stream, 0x20)
        return EmrSetColorAdjustment(stream.size.byteCount, readColorAdjustment(stream))

    def parseSetIcmProfile(self, stream: RecordStream):
        checkRecordType(stream, RecordType.EMR_SETICMPROFILEA, RecordType.EMR_SETICMPROFILEW)
        checkMinimumRecordSize(stream, 20)
        dwFlags = Uint32LE.unpack(stream)
        cbName = Uint32LE.unpack(stream)
        cbData = Uint32LE.unpack(stream)
        checkArrayFits(stream, "Color profile name and data", cbName + cbData, 1)
        nameData = readBytes(stream, cbName)
        data = readBytes(stream, cbData)

        if stream.recordType == RecordType.EMR_SETICMPROFILEA:
            return EmrSetIcmProfileA(stream.size.byteCount, dwFlags, cbName, cbData,
                                     decodeNullTerminatedANSI(nameData), data)

        return EmrSetIcmProfileW(stream.size.byteCount, dwFlags, cbName, cbData,
                                 decodeNullTerminatedUTF16LE(nameData), data)

    def parseSetLinkedUfis(self, stream: RecordStream) -> EmrSetLinkedUfis:
        checkMinimumRecordSize(stream, 20)
        numLinkedUfi = Uint32LE.unpack(stream)
        checkArrayFits(stream, "UniversalFontId array", numLinkedUfi, 8)
        ufis = [readUniversalFontId(stream) for _ in range(numLinkedUfi)]
        reserved = readBytes(stream, 8)
        return EmrSetLinkedUfis(stream.size.byteCount, ufis, reserved)

    def parseSetMapperFlags(self, stream: RecordStream) -> EmrSetMapperFlags:
        checkRecordSize(stream, 12)
        return EmrSetMapperFlags(stream.size.byteCount, Uint32LE.unpack(stream))

    def parseSetMiterLimit(self, stream: RecordStream) -> EmrSetMiterLimit:
        checkRecordSize(stream, 12)
        return EmrSetMiterLimit(stream.size.byteCount, Uint32LE.unpack(stream))

    def parseSetTextAlign(self, stream: RecordStream) -> EmrSetTextAlign:
        checkRecordSize(stream, 12)
        return EmrSetTextAlign(stream.size.byteCount, parseFlags(TextAlignmentMode, Uint32LE.unpack(stream)))

    def parseSetTextJustification(self, stream: RecordStream) -> EmrSetTextJustification:
        checkRecordSize(stream, 16)
        nBreakExtra = Int32LE.unpack(stream)
        nBreakCount = Int32LE.unpack(stream)
        return EmrSetTextJustification(stream.size.byteCount, nBreakExtra, nBreakCount)
