#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core import readBytes, RecordStream, Uint32LE
from pyemfplay.enum import RecordType
from pyemfplay.parser.emf.base import checkArrayFits, checkMinimumRecordSize, RecordCategoryParser
from pyemfplay.parser.gdi import readRectL
from pyemfplay.record import EmrGlsBoundedRecord, EmrGlsRecord


class OpenGLRecordParser(RecordCategoryParser):
    """
    Parser for the records that hold OpenGL function calls. The calls are kept undecoded.
    """

    def __init__(self):
        super().__init__()
        self.parsers = {
            RecordType.EMR_GLSRECORD: self.parseGlsRecord,
            RecordType.EMR_GLSBOUNDEDRECORD: self.parseGlsBoundedRecord,
        }

    def parseGlsRecord(self, stream: RecordStream) -> EmrGlsRecord:
        checkMinimumRecordSize(stream, 12)
        cbData = Uint32LE.unpack(stream)
        checkArrayFits(stream, "OpenGL data", cbData, 1)
        return EmrGlsRecord(stream.size.byteCount, cbData, readBytes(stream, cbData))

    def parseGlsBoundedRecord(self, stream: RecordStream) -> EmrGlsBoundedRecord:
        checkMinimumRecordSize(stream, 28)
        bounds = readRectL(stream)
        cbData = Uint32LE.unpack(stream)
        checkArrayFits(stream, "OpenGL data", cbData, 1)
        return EmrGlsBoundedRecord(stream.size.byteCount, bounds, cbData, readBytes(stream, cbData))
