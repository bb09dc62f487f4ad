#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.enum import RecordType
from pyemfplay.record.record import Record


class EmrDrawEscape(Record):
    """
    Escape for the printer driver, passed to the driver when the record is played.
    """

    def __init__(self, size: int, iEscape: int, cjIn: int, data: bytes):
        super().__init__(RecordType.EMR_DRAWESCAPE, size)
        self.iEscape = iEscape
        self.cjIn = cjIn
        self.data = data


class EmrExtEscape(Record):
    def __init__(self, size: int, iEscape: int, cjIn: int, data: bytes):
        super().__init__(RecordType.EMR_EXTESCAPE, size)
        self.iEscape = iEscape
        self.cjIn = cjIn
        self.data = data


class EmrNamedEscape(Record):
    def __init__(self, size: int, iEscape: int, cjDriver: int, cjIn: int, driverName: str, data: bytes):
        super().__init__(RecordType.EMR_NAMEDESCAPE, size)
        self.iEscape = iEscape
        self.cjDriver = cjDriver
        self.cjIn = cjIn
        self.driverName = driverName
        self.data = data
