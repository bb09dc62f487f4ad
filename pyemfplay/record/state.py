#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List

from pyemfplay.enum import ArcDirection, BackgroundMode, BinaryRasterOperation, ColorMatchToTarget, \
    ColorSpaceAction, ICMMode, LayoutMode, MapMode, PolygonFillMode, RecordType, StretchMode, TextAlignmentMode
from pyemfplay.gdi import ColorAdjustment, ColorRef, PixelFormatDescriptor, PointL, SizeL, UniversalFontId
from pyemfplay.record.record import Record


class EmrColorMatchToTargetW(Record):
    def __init__(self, size: int, action: ColorSpaceAction, flags: ColorMatchToTarget, cbName: int, cbData: int,
                 name: str, data: bytes):
        super().__init__(RecordType.EMR_COLORMATCHTOTARGETW, size)
        self.action = action
        self.flags = flags
        self.cbName = cbName
        self.cbData = cbData
        self.name = name
        self.data = data


class EmrForceUfiMapping(Record):
    def __init__(self, size: int, ufi: UniversalFontId):
        super().__init__(RecordType.EMR_FORCEUFIMAPPING, size)
        self.ufi = ufi


class EmrMoveToEx(Record):
    def __init__(self, size: int, offset: PointL):
        super().__init__(RecordType.EMR_MOVETOEX, size)
        self.offset = offset


class EmrPixelFormat(Record):
    def __init__(self, size: int, pfd: PixelFormatDescriptor):
        super().__init__(RecordType.EMR_PIXELFORMAT, size)
        self.pfd = pfd


class EmrRealizePalette(Record):
    def __init__(self, size: int):
        super().__init__(RecordType.EMR_REALIZEPALETTE, size)


class EmrRestoreDC(Record):
    """
    Restore a saved device context. savedDC is negative and relative: -1 is the most recently saved context.
    """

    def __init__(self, size: int, savedDC: int):
        super().__init__(RecordType.EMR_RESTOREDC, size)
        self.savedDC = savedDC


class EmrSaveDC(Record):
    def __init__(self, size: int):
        super().__init__(RecordType.EMR_SAVEDC, size)


class EmrScaleExtEx(Record):
    def __init__(self, recordType: RecordType, size: int, xNum: int, xDenom: int, yNum: int, yDenom: int):
        super().__init__(recordType, size)
        self.xNum = xNum
        self.xDenom = xDenom
        self.yNum = yNum
        self.yDenom = yDenom


class EmrScaleViewportExtEx(EmrScaleExtEx):
    def __init__(self, size: int, xNum: int, xDenom: int, yNum: int, yDenom: int):
        super().__init__(RecordType.EMR_SCALEVIEWPORTEXTEX, size, xNum, xDenom, yNum, yDenom)


class EmrScaleWindowExtEx(EmrScaleExtEx):
    def __init__(self, size: int, xNum: int, xDenom: int, yNum: int, yDenom: int):
        super().__init__(RecordType.EMR_SCALEWINDOWEXTEX, size, xNum, xDenom, yNum, yDenom)


class EmrSetArcDirection(Record):
    def __init__(self, size: int, arcDirection: ArcDirection):
        super().__init__(RecordType.EMR_SETARCDIRECTION, size)
        self.arcDirection = arcDirection


class EmrSetBkColor(Record):
    def __init__(self, size: int, color: ColorRef):
        super().__init__(RecordType.EMR_SETBKCOLOR, size)
        self.color = color


class EmrSetBkMode(Record):
    def __init__(self, size: int, backgroundMode: BackgroundMode):
        super().__init__(RecordType.EMR_SETBKMODE, size)
        self.backgroundMode = backgroundMode


class EmrSetBrushOrgEx(Record):
    def __init__(self, size: int, origin: PointL):
        super().__init__(RecordType.EMR_SETBRUSHORGEX, size)
        self.origin = origin


class EmrSetColorAdjustment(Record):
    def __init__(self, size: int, colorAdjustment: ColorAdjustment):
        super().__init__(RecordType.EMR_SETCOLORADJUSTMENT, size)
        self.colorAdjustment = colorAdjustment


class EmrSetIcmMode(Record):
    def __init__(self, size: int, icmMode: ICMMode):
        super().__init__(RecordType.EMR_SETICMMODE, size)
        self.icmMode = icmMode


class EmrSetIcmProfile(Record):
    """
    Base class of EMR_SETICMPROFILEA and EMR_SETICMPROFILEW. When dwFlags is 1, data holds the profile itself,
    otherwise name is the file name of the profile.
    """

    def __init__(self, recordType: RecordType, size: int, dwFlags: int, cbName: int, cbData: int, name: str,
                 data: bytes):
        super().__init__(recordType, size)
        self.dwFlags = dwFlags
        self.cbName = cbName
        self.cbData = cbData
        self.name = name
        self.data = data


class EmrSetIcmProfileA(EmrSetIcmProfile):
    def __init__(self, size: int, dwFlags: int, cbName: int, cbData: int, name: str, data: bytes):
        super().__init__(RecordType.EMR_SETICMPROFILEA, size, dwFlags, cbName, cbData, name, data)


class EmrSetIcmProfileW(EmrSetIcmProfile):
    def __init__(self, size: int, dwFlags: int, cbName: int, cbData: int, name: str, data: bytes):
        super().__init__(RecordType.EMR_SETICMPROFILEW, size, dwFlags, cbName, cbData, name, data)


class EmrSetLayout(Record):
    def __init__(self, size: int, layoutMode: LayoutMode):
        super().__init__(RecordType.EMR_SETLAYOUT, size)
        self.layoutMode = layoutMode


class EmrSetLinkedUfis(Record):
    def __init__(self, size: int, ufis: List[UniversalFontId], reserved: bytes):
        super().__init__(RecordType.EMR_SETLINKEDUFIS, size)
        self.ufis = ufis
        self.reserved = reserved

    @property
    def numLinkedUfi(self) -> int:
        return len(self.ufis)


class EmrSetMapMode(Record):
    def __init__(self, size: int, mapMode: MapMode):
        super().__init__(RecordType.EMR_SETMAPMODE, size)
        self.mapMode = mapMode


class EmrSetMapperFlags(Record):
    def __init__(self, size: int, flags: int):
        super().__init__(RecordType.EMR_SETMAPPERFLAGS, size)
        self.flags = flags


class EmrSetMiterLimit(Record):
    def __init__(self, size: int, miterLimit: int):
        super().__init__(RecordType.EMR_SETMITERLIMIT, size)
        self.miterLimit = miterLimit


class EmrSetPolyFillMode(Record):
    def __init__(self, size: int, polygonFillMode: PolygonFillMode):
        super().__init__(RecordType.EMR_SETPOLYFILLMODE, size)
        self.polygonFillMode = polygonFillMode


class EmrSetRop2(Record):
    def __init__(self, size: int, rop2Mode: BinaryRasterOperation):
        super().__init__(RecordType.EMR_SETROP2, size)
        self.rop2Mode = rop2Mode


class EmrSetStretchBltMode(Record):
    def __init__(self, size: int, stretchMode: StretchMode):
        super().__init__(RecordType.EMR_SETSTRETCHBLTMODE, size)
        self.stretchMode = stretchMode


class EmrSetTextAlign(Record):
    def __init__(self, size: int, textAlignmentMode: TextAlignmentMode):
        super().__init__(RecordType.EMR_SETTEXTALIGN, size)
        self.textAlignmentMode = textAlignmentMode


class EmrSetTextColor(Record):
    def __init__(self, size: int, color: ColorRef):
        super().__init__(RecordType.EMR_SETTEXTCOLOR, size)
        self.color = color


class EmrSetTextJustification(Record):
    def __init__(self, size: int, nBreakExtra: int, nBreakCount: int):
        super().__init__(RecordType.EMR_SETTEXTJUSTIFICATION, size)
        self.nBreakExtra = nBreakExtra
        self.nBreakCount = nBreakCount


class EmrSetViewportExtEx(Record):
    def __init__(self, size: int, extent: SizeL):
        super().__init__(RecordType.EMR_SETVIEWPORTEXTEX, size)
        self.extent = extent


class EmrSetViewportOrgEx(Record):
    def __init__(self, size: int, origin: PointL):
        super().__init__(RecordType.EMR_SETVIEWPORTORGEX, size)
        self.origin = origin


class EmrSetWindowExtEx(Record):
    def __init__(self, size: int, extent: SizeL):
        super().__init__(RecordType.EMR_SETWINDOWEXTEX, size)
        self.extent = extent


class EmrSetWindowOrgEx(Record):
    def __init__(self, size: int, origin: PointL):
        super().__init__(RecordType.EMR_SETWINDOWORGEX, size)
        self.origin = origin
