#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import Optional

from pyemfplay.enum import RecordType, RegionMode
from pyemfplay.gdi import PointL, RectL, RegionData
from pyemfplay.record.record import Record


class EmrExcludeClipRect(Record):
    def __init__(self, size: int, clip: RectL):
        super().__init__(RecordType.EMR_EXCLUDECLIPRECT, size)
        self.clip = clip


class EmrIntersectClipRect(Record):
    def __init__(self, size: int, clip: RectL):
        super().__init__(RecordType.EMR_INTERSECTCLIPRECT, size)
        self.clip = clip


class EmrExtSelectClipRgn(Record):
    """
    Combine a region with the clipping region. With RGN_COPY, a missing region resets the clipping region to the
    default.
    """

    def __init__(self, size: int, rgnDataSize: int, regionMode: RegionMode, rgnData: Optional[RegionData]):
        super().__init__(RecordType.EMR_EXTSELECTCLIPRGN, size)
        self.rgnDataSize = rgnDataSize
        self.regionMode = regionMode
        self.rgnData = rgnData


class EmrOffsetClipRgn(Record):
    def __init__(self, size: int, offset: PointL):
        super().__init__(RecordType.EMR_OFFSETCLIPRGN, size)
        self.offset = offset


class EmrSelectClipPath(Record):
    def __init__(self, size: int, regionMode: RegionMode):
        super().__init__(RecordType.EMR_SELECTCLIPPATH, size)
        self.regionMode = regionMode


class EmrSetMetaRgn(Record):
    def __init__(self, size: int):
        super().__init__(RecordType.EMR_SETMETARGN, size)
