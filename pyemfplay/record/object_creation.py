#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import Optional, Union

from pyemfplay.enum import DIBColors, RecordType
from pyemfplay.gdi import DeviceIndependentBitmap, LogBrushEx, LogColorSpace, LogColorSpaceW, LogFont, \
    LogFontExDv, LogFontPanose, LogPalette, LogPen, LogPenEx
from pyemfplay.record.record import Record


class EmrCreateBrushIndirect(Record):
    def __init__(self, size: int, ihBrush: int, logBrush: LogBrushEx):
        super().__init__(RecordType.EMR_CREATEBRUSHINDIRECT, size)
        self.ihBrush = ihBrush
        self.logBrush = logBrush


class EmrCreateColorSpace(Record):
    def __init__(self, size: int, ihCS: int, lcs: LogColorSpace):
        super().__init__(RecordType.EMR_CREATECOLORSPACE, size)
        self.ihCS = ihCS
        self.lcs = lcs


class EmrCreateColorSpaceW(Record):
    """
    Unicode color space. When dwFlags is 1, data holds the color profile itself.
    """

    def __init__(self, size: int, ihCS: int, lcs: LogColorSpaceW, dwFlags: int, cbData: int, data: bytes):
        super().__init__(RecordType.EMR_CREATECOLORSPACEW, size)
        self.ihCS = ihCS
        self.lcs = lcs
        self.dwFlags = dwFlags
        self.cbData = cbData
        self.data = data


class EmrCreatePatternBrush(Record):
    """
    Base class of the brushes made from a bitmap.
    """

    def __init__(self, recordType: RecordType, size: int, ihBrush: int, usage: DIBColors, offBmi: int,
                 cbBmi: int, offBits: int, cbBits: int, bitmap: Optional[DeviceIndependentBitmap]):
        super().__init__(recordType, size)
        self.ihBrush = ihBrush
        self.usage = usage
        self.offBmi = offBmi
        self.cbBmi = cbBmi
        self.offBits = offBits
        self.cbBits = cbBits
        self.bitmap = bitmap


class EmrCreateDIBPatternBrushPt(EmrCreatePatternBrush):
    def __init__(self, size: int, ihBrush: int, usage: DIBColors, offBmi: int, cbBmi: int, offBits: int,
                 cbBits: int, bitmap: Optional[DeviceIndependentBitmap]):
        super().__init__(RecordType.EMR_CREATEDIBPATTERNBRUSHPT, size, ihBrush, usage, offBmi, cbBmi, offBits,
                         cbBits, bitmap)


class EmrCreateMonoBrush(EmrCreatePatternBrush):
    def __init__(self, size: int, ihBrush: int, usage: DIBColors, offBmi: int, cbBmi: int, offBits: int,
                 cbBits: int, bitmap: Optional[DeviceIndependentBitmap]):
        super().__init__(RecordType.EMR_CREATEMONOBRUSH, size, ihBrush, usage, offBmi, cbBmi, offBits, cbBits,
                         bitmap)


class EmrCreatePalette(Record):
    def __init__(self, size: int, ihPal: int, logPalette: LogPalette):
        super().__init__(RecordType.EMR_CREATEPALETTE, size)
        self.ihPal = ihPal
        self.logPalette = logPalette


class EmrCreatePen(Record):
    def __init__(self, size: int, ihPen: int, logPen: LogPen):
        super().__init__(RecordType.EMR_CREATEPEN, size)
        self.ihPen = ihPen
        self.logPen = logPen


class EmrExtCreateFontIndirectW(Record):
    """
    Logical font creation. The kind of elw depends on the size of the record: LogFont, LogFontPanose or
    LogFontExDv. All of them expose the base attributes through their logFont property.
    """

    def __init__(self, size: int, ihFonts: int, elw: Union[LogFont, LogFontPanose, LogFontExDv]):
        super().__init__(RecordType.EMR_EXTCREATEFONTINDIRECTW, size)
        self.ihFonts = ihFonts
        self.elw = elw


class EmrExtCreatePen(Record):
    def __init__(self, size: int, ihPen: int, offBmi: int, cbBmi: int, offBits: int, cbBits: int, elp: LogPenEx,
                 bitmap: Optional[DeviceIndependentBitmap]):
        super().__init__(RecordType.EMR_EXTCREATEPEN, size)
        self.ihPen = ihPen
        self.offBmi = offBmi
        self.cbBmi = cbBmi
        self.offBits = offBits
        self.cbBits = cbBits
        self.elp = elp
        self.bitmap = bitmap
