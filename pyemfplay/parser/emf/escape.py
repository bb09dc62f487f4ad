#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core import decodeNullTerminatedUTF16LE, readBytes, RecordStream, Uint32LE
from pyemfplay.enum import RecordType
from pyemfplay.parser.emf.base import checkArrayFits, checkMinimumRecordSize, RecordCategoryParser
from pyemfplay.record import EmrDrawEscape, EmrExtEscape, EmrNamedEscape


class EscapeRecordParser(RecordCategoryParser):
    """
    Parser for the records that pass data to the output device driver. The data is kept undecoded.
    """

    def __init__(self):
        super().__init__()
        self.parsers = {
            RecordType.EMR_DRAWESCAPE: self.parseDrawEscape,
            RecordType.EMR_EXTESCAPE: self.parseExtEscape,
            RecordType.EMR_NAMEDESCAPE: self.parseNamedEscape,
        }

    def parseDrawEscape(self, stream: RecordStream) -> EmrDrawEscape:
        checkMinimumRecordSize(stream, 16)
        iEscape = Uint32LE.unpack(stream)
        cjIn = Uint32LE.unpack(stream)
        checkArrayFits(stream, "Escape data", cjIn, 1)
        return EmrDrawEscape(stream.size.byteCount, iEscape, cjIn, readBytes(stream, cjIn))

    def parseExtEscape(self, stream: RecordStream) -> EmrExtEscape:
        checkMinimumRecordSize(stream, 16)
        iEscape = Uint32LE.unpack(stream)
        cjIn = Uint32LE.unpack(stream)
        checkArrayFits(stream, "Escape data", cjIn, 1)
        return EmrExtEscape(stream.size.byteCount, iEscape, cjIn, readBytes(stream, cjIn))

    def parseNamedEscape(self, stream: RecordStream) -> EmrNamedEscape:
        checkMinimumRecordSize(stream, 20)
        iEscape = Uint32LE.unpack(stream)
        cjDriver = Uint32LE.unpack(stream)
        cjIn = Uint32LE.unpack(stream)
        checkArrayFits(stream, "Escape driver name and data", cjDriver + cjIn, 1)
        driverName = decodeNullTerminatedUTF16LE(readBytes(stream, cjDriver))
        data = readBytes(stream, cjIn)
        return EmrNamedEscape(stream.size.byteCount, iEscape, cjDriver, cjIn, driverName, data)
