#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core import Int32LE, RecordStream, Uint32LE
from pyemfplay.enum import DIBColors, parseEnum, RecordType
from pyemfplay.parser.emf.base import checkMinimumRecordSize, RecordCategoryParser
from pyemfplay.parser.gdi import readBitmaps, readBlendFunction, readColorRef, readPointsL, readRectL, readXForm
from pyemfplay.record import EmrAlphaBlend, EmrBitBlt, EmrMaskBlt, EmrPlgBlt, EmrSetDIBitsToDevice, \
    EmrStretchBlt, EmrStretchDIBits, EmrTransparentBlt


def readInt32s(stream: RecordStream, count: int):
    return [Int32LE.unpack(stream) for _ in range(count)]


def readBitmapLocation(stream: RecordStream):
    """
    Read the offBmi, cbBmi, offBits, cbBits fields that locate a bitmap in a record.
    """
    return [Uint32LE.unpack(stream) for _ in range(4)]


class BitmapRecordParser(RecordCategoryParser):
    """
    Parser for the bit block transfer records.
    """

    def __init__(self):
        super().__init__()
        self.parsers = {
            RecordType.EMR_ALPHABLEND: self.parseAlphaBlend,
            RecordType.EMR_BITBLT: self.parseBitBlt,
            RecordType.EMR_MASKBLT: self.parseMaskBlt,
            RecordType.EMR_PLGBLT: self.parsePlgBlt,
            RecordType.EMR_SETDIBITSTODEVICE: self.parseSetDIBitsToDevice,
            RecordType.EMR_STRETCHBLT: self.parseStretchBlt,
            RecordType.EMR_STRETCHDIBITS: self.parseStretchDIBits,
            RecordType.EMR_TRANSPARENTBLT: self.parseTransparentBlt,
        }

    def parseBitBlt(self, stream: RecordStream) -> EmrBitBlt:
        checkMinimumRecordSize(stream, 100)
        bounds = readRectL(stream)
        xDest, yDest, cxDest, cyDest = readInt32s(stream, 4)
        rop = Uint32LE.unpack(stream)
        xSrc, ySrc = readInt32s(stream, 2)
        xformSrc = readXForm(stream)
        bkColorSrc = readColorRef(stream)
        usageSrc = parseEnum(DIBColors, Uint32LE.unpack(stream))
        location = readBitmapLocation(stream)
        bitmap, = readBitmaps(stream, *location)
        return EmrBitBlt(stream.size.byteCount, bounds, xDest, yDest, cxDest, cyDest, rop, xSrc, ySrc, xformSrc,
                         bkColorSrc, usageSrc, *location, bitmap)

    def parseStretchBlt(self, stream: RecordStream) -> EmrStretchBlt:
        checkMinimumRecordSize(stream, 108)
        bounds = readRectL(stream)
        xDest, yDest, cxDest, cyDest = readInt32s(stream, 4)
        rop = Uint32LE.unpack(stream)
        xSrc, ySrc = readInt32s(stream, 2)
        xformSrc = readXForm(stream)
        bkColorSrc = readColorRef(stream)
        usageSrc = parseEnum(DIBColors, Uint32LE.unpack(stream))
        location = readBitmapLocation(stream)
        cxSrc, cySrc = readInt32s(stream, 2)
        bitmap, = readBitmaps(stream, *location)
        return EmrStretchBlt(stream.size.byteCount, bounds, xDest, yDest, cxDest, cyDest, rop, xSrc, ySrc, xformSrc,
                             bkColorSrc, usageSrc, *location, cxSrc, cySrc, bitmap)

    def parseAlphaBlend(self, stream: RecordStream) -> EmrAlphaBlend:
        checkMinimumRecordSize(stream, 108)
        bounds = readRectL(stream)
        xDest, yDest, cxDest, cyDest = readInt32s(stream, 4)
        blendFunction = readBlendFunction(stream)
        xSrc, ySrc = readInt32s(stream, 2)
        xformSrc = readXForm(stream)
        bkColorSrc = readColorRef(stream)
        usageSrc = parseEnum(DIBColors, Uint32LE.unpack(stream))
        location = readBitmapLocation(stream)
        cxSrc, cySrc = readInt32s(stream, 2)
        bitmap, = readBitmaps(stream, *location)
        return EmrAlphaBlend(stream.size.byteCount, bounds, xDest, yDest, cxDest, cyDest, blendFunction, xSrc, ySrc,
                             xformSrc, bkColorSrc, usageSrc, *location, cxSrc, cySrc, bitmap)

    def parseTransparentBlt(self, stream: RecordStream) -> EmrTransparentBlt:
        checkMinimumRecordSize(stream, 108)
        bounds = readRectL(stream)
        xDest, yDest, cxDest, cyDest = readInt32s(stream, 4)
        transparentColor = readColorRef(stream)
        xSrc, ySrc = readInt32s(stream, 2)
        xformSrc = readXForm(stream)
        bkColorSrc = readColorRef(stream)
        usageSrc = parseEnum(DIBColors, Uint32LE.unpack(stream))
        location = readBitmapLocation(stream)
        cxSrc, cySrc = readInt32s(stream, 2)
        bitmap, = readBitmaps(stream, *location)
        return EmrTransparentBlt(stream.size.byteCount, bounds, xDest, yDest, cxDest, cyDest, transparentColor, xSrc,
                                 ySrc, xformSrc, bkColorSrc, usageSrc, *location, cxSrc, cySrc, bitmap)

    def parseMaskBlt(self, stream: RecordStream) -> EmrMaskBlt:
        checkMinimumRecordSize(stream, 128)
        bounds = readRectL(stream)
        xDest, yDest, cxDest, cyDest = readInt32s(stream, 4)
        rop = Uint32LE.unpack(stream)
        xSrc, ySrc = readInt32s(stream, 2)
        xformSrc = readXForm(stream)
        bkColorSrc = readColorRef(stream)
        usageSrc = parseEnum(DIBColors, Uint32LE.unpack(stream))
        location = readBitmapLocation(stream)
        xMask, yMask = readInt32s(stream, 2)
        usageMask = parseEnum(DIBColors, Uint32LE.unpack(stream))
        maskLocation = readBitmapLocation(stream)
        bitmap, mask = readBitmaps(stream, *location, *maskLocation)
        return EmrMaskBlt(stream.size.byteCount, bounds, xDest, yDest, cxDest, cyDest, rop, xSrc, ySrc, xformSrc,
                          bkColorSrc, usageSrc, *location, xMask, yMask, usageMask, *maskLocation, bitmap, mask)

    def parsePlgBlt(self, stream: RecordStream) -> EmrPlgBlt:
        checkMinimumRecordSize(stream, 140)
        bounds = readRectL(stream)
        aptlDest = readPointsL(stream, 3)
        xSrc, ySrc, cxSrc, cySrc = readInt32s(stream, 4)
        xformSrc = readXForm(stream)
        bkColorSrc = readColorRef(stream)
        usageSrc = parseEnum(DIBColors, Uint32LE.unpack(stream))
        location = readBitmapLocation(stream)
        xMask, yMask = readInt32s(stream, 2)
        usageMask = parseEnum(DIBColors, Uint32LE.unpack(stream))
        maskLocation = readBitmapLocation(stream)
        bitmap, mask = readBitmaps(stream, *location, *maskLocation)
        return EmrPlgBlt(stream.size.byteCount, bounds, aptlDest, xSrc, ySrc, cxSrc, cySrc, xformSrc, bkColorSrc,
                         usageSrc, *location, xMask, yMask, usageMask, *maskLocation, bitmap, mask)

    def parseSetDIBitsToDevice(self, stream: RecordStream) -> EmrSetDIBitsToDevice:
        checkMinimumRecordSize(stream, 76)
        bounds = readRectL(stream)
        xDest, yDest, xSrc, ySrc, cxSrc, cySrc = readInt32s(stream, 6)
        location = readBitmapLocation(stream)
        usageSrc = parseEnum(DIBColors, Uint32LE.unpack(stream))
        iStartScan = Uint32LE.unpack(stream)
        cScans = Uint32LE.unpack(stream)
        bitmap, = readBitmaps(stream, *location)
        return EmrSetDIBitsToDevice(stream.size.byteCount, bounds, xDest, yDest, xSrc, ySrc, cxSrc, cySrc, *location,
                                    usageSrc, iStartScan, cScans, bitmap)

    def parseStretchDIBits(self, stream: RecordStream) -> EmrStretchDIBits:
        checkMinimumRecordSize(stream, 80)
        bounds = readRectL(stream)
        xDest, yDest, xSrc, ySrc, cxSrc, cySrc = readInt32s(stream, 6)
        location = readBitmapLocation(stream)
        usageSrc = parseEnum(DIBColors, Uint32LE.unpack(stream))
        rop = Uint32LE.unpack(stream)
        cxDest, cyDest = readInt32s(stream, 2)
        bitmap, = readBitmaps(stream, *location)
        return EmrStretchDIBits(stream.size.byteCount, bounds, xDest, yDest, xSrc, ySrc, cxSrc, cySrc, *location,
                                usageSrc, rop, cxDest, cyDest, bitmap)
