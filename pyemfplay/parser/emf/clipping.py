#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core import RecordStream, Uint32LE
from pyemfplay.enum import parseEnum, RecordType, RegionMode
from pyemfplay.exceptions import UnexpectedPatternError
from pyemfplay.parser.emf.base import checkMinimumRecordSize, checkRecordSize, RecordCategoryParser
from pyemfplay.parser.gdi import readPointL, readRectL, readRegionData
from pyemfplay.record import EmrExcludeClipRect, EmrExtSelectClipRgn, EmrIntersectClipRect, EmrOffsetClipRgn, \
    EmrSelectClipPath, EmrSetMetaRgn


class ClippingRecordParser(RecordCategoryParser):
    """
    Parser for the records that change the clipping region.
    """

    def __init__(self):
        super().__init__()
        self.parsers = {
            RecordType.EMR_EXCLUDECLIPRECT: self.parseExcludeClipRect,
            RecordType.EMR_EXTSELECTCLIPRGN: self.parseExtSelectClipRgn,
            RecordType.EMR_INTERSECTCLIPRECT: self.parseIntersectClipRect,
            RecordType.EMR_OFFSETCLIPRGN: self.parseOffsetClipRgn,
            RecordType.EMR_SELECTCLIPPATH: self.parseSelectClipPath,
            RecordType.EMR_SETMETARGN: self.parseSetMetaRgn,
        }

    def parseExcludeClipRect(self, stream: RecordStream) -> EmrExcludeClipRect:
        checkRecordSize(stream, 24)
        return EmrExcludeClipRect(stream.size.byteCount, readRectL(stream))

    def parseIntersectClipRect(self, stream: RecordStream) -> EmrIntersectClipRect:
        checkRecordSize(stream, 24)
        return EmrIntersectClipRect(stream.size.byteCount, readRectL(stream))

    def parseExtSelectClipRgn(self, stream: RecordStream) -> EmrExtSelectClipRgn:
        checkMinimumRecordSize(stream, 16)
        rgnDataSize = Uint32LE.unpack(stream)
        regionMode = parseEnum(RegionMode, Uint32LE.unpack(stream))
        rgnData = None

        # A COPY without region data resets the clipping region to the default one.
        if rgnDataSize > 0:
            if rgnDataSize > stream.size.remainingBytes():
                raise UnexpectedPatternError(f"Region data size {rgnDataSize} exceeds the record size")

            rgnData = readRegionData(stream, rgnDataSize)
        elif regionMode != RegionMode.RGN_COPY:
            raise UnexpectedPatternError(f"Region mode {regionMode.name} requires region data")

        return EmrExtSelectClipRgn(stream.size.byteCount, rgnDataSize, regionMode, rgnData)

    def parseOffsetClipRgn(self, stream: RecordStream) -> EmrOffsetClipRgn:
        checkRecordSize(stream, 16)
        return EmrOffsetClipRgn(stream.size.byteCount, readPointL(stream))

    def parseSelectClipPath(self, stream: RecordStream) -> EmrSelectClipPath:
        checkRecordSize(stream, 12)
        return EmrSelectClipPath(stream.size.byteCount, parseEnum(RegionMode, Uint32LE.unpack(stream)))

    def parseSetMetaRgn(self, stream: RecordStream) -> EmrSetMetaRgn:
        checkRecordSize(stream, 8)
        return EmrSetMetaRgn(stream.size.byteCount)
