#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core import RecordStream
from pyemfplay.enum import RecordType
from pyemfplay.parser.emf.base import checkRecordSize, checkRecordType, RecordCategoryParser
from pyemfplay.record import EmrAbortPath, EmrBeginPath, EmrCloseFigure, EmrEndPath, EmrFlattenPath, EmrWidenPath


class PathRecordParser(RecordCategoryParser):
    """
    Parser for the path bracket records. None of them has a body.
    """

    def __init__(self):
        super().__init__()
        self.records = {
            RecordType.EMR_ABORTPATH: EmrAbortPath,
            RecordType.EMR_BEGINPATH: EmrBeginPath,
            RecordType.EMR_CLOSEFIGURE: EmrCloseFigure,
            RecordType.EMR_ENDPATH: EmrEndPath,
            RecordType.EMR_FLATTENPATH: EmrFlattenPath,
            RecordType.EMR_WIDENPATH: EmrWidenPath,
        }

        self.parsers = {recordType: self.parsePathBracket for recordType in self.records}

    def parsePathBracket(self, stream: RecordStream):
        checkRecordType(stream, *self.records)
        checkRecordSize(stream, 8)
        return self.records[stream.recordType](stream.size.byteCount)
