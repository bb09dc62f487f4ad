#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.enum import RecordType
from pyemfplay.record.record import Record


class EmrAbortPath(Record):
    def __init__(self, size: int):
        super().__init__(RecordType.EMR_ABORTPATH, size)


class EmrBeginPath(Record):
    def __init__(self, size: int):
        super().__init__(RecordType.EMR_BEGINPATH, size)


class EmrCloseFigure(Record):
    def __init__(self, size: int):
        super().__init__(RecordType.EMR_CLOSEFIGURE, size)


class EmrEndPath(Record):
    def __init__(self, size: int):
        super().__init__(RecordType.EMR_ENDPATH, size)


class EmrFlattenPath(Record):
    def __init__(self, size: int):
        super().__init__(RecordType.EMR_FLATTENPATH, size)


class EmrWidenPath(Record):
    def __init__(self, size: int):
        super().__init__(RecordType.EMR_WIDENPATH, size)
