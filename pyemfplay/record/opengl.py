#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.enum import RecordType
from pyemfplay.gdi import RectL
from pyemfplay.record.record import Record


class EmrGlsRecord(Record):
    def __init__(self, size: int, cbData: int, data: bytes):
        super().__init__(RecordType.EMR_GLSRECORD, size)
        self.cbData = cbData
        self.data = data


class EmrGlsBoundedRecord(Record):
    def __init__(self, size: int, bounds: RectL, cbData: int, data: bytes):
        super().__init__(RecordType.EMR_GLSBOUNDEDRECORD, size)
        self.bounds = bounds
        self.cbData = cbData
        self.data = data
