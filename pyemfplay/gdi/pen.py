#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List, Optional

from pyemfplay.enum import BrushStyle, DIBColors, HatchStyle, PEN_ENDCAP_MASK, PEN_JOIN_MASK, PEN_STYLE_MASK, \
    PEN_TYPE_MASK, PenEndCap, PenJoin, PenStyle, PenType
from pyemfplay.gdi.base import GDIStructure
from pyemfplay.gdi.color import ColorRef
from pyemfplay.gdi.geometry import PointL


class LogPen(GDIStructure):
    """
    Logical cosmetic pen (MS-EMF 2.2.19). Only the x coordinate of the width is used.
    """

    def __init__(self, penStyle: int, width: PointL, color: ColorRef):
        self.penStyle = penStyle
        self.width = width
        self.color = color


class LogPenEx(GDIStructure):
    """
    Extended logical pen (MS-EMF 2.2.20).

    The brush part depends on brushStyle:
        - BS_SOLID: color
        - BS_HATCHED: color and brushHatch
        - BS_PATTERN: nothing, the pattern comes from the bitmap of the creation record
        - BS_DIBPATTERN, BS_DIBPATTERNPT: colorUsage
        - BS_NULL: nothing
    """

    def __init__(self, penStyle: int, width: int, brushStyle: BrushStyle, color: Optional[ColorRef] = None,
                 brushHatch: Optional[HatchStyle] = None, colorUsage: Optional[DIBColors] = None,
                 styleEntries: List[int] = None):
        self.penStyle = penStyle
        self.width = width
        self.brushStyle = brushStyle
        self.color = color
        self.brushHatch = brushHatch
        self.colorUsage = colorUsage
        self.styleEntries = styleEntries if styleEntries is not None else []

    @property
    def lineStyle(self) -> PenStyle:
        return PenStyle(self.penStyle & PEN_STYLE_MASK)

    @property
    def endCap(self) -> PenEndCap:
        return PenEndCap(self.penStyle & PEN_ENDCAP_MASK)

    @property
    def join(self) -> PenJoin:
        return PenJoin(self.penStyle & PEN_JOIN_MASK)

    @property
    def penType(self) -> PenType:
        return PenType(self.penStyle & PEN_TYPE_MASK)

    @staticmethod
    def fromLogPen(pen: LogPen) -> 'LogPenEx':
        if pen.penStyle & PEN_STYLE_MASK == PenStyle.PS_NULL:
            return LogPenEx(pen.penStyle, abs(pen.width.x), BrushStyle.BS_NULL)

        return LogPenEx(pen.penStyle, abs(pen.width.x), BrushStyle.BS_SOLID, color=pen.color)

    @staticmethod
    def solid(color: ColorRef, width: int = 1) -> 'LogPenEx':
        return LogPenEx(PenStyle.PS_SOLID, width, BrushStyle.BS_SOLID, color=color)

    @staticmethod
    def blackPen() -> 'LogPenEx':
        return LogPenEx.solid(ColorRef.black())

    @staticmethod
    def whitePen() -> 'LogPenEx':
        return LogPenEx.solid(ColorRef.white())

    @staticmethod
    def nullPen() -> 'LogPenEx':
        return LogPenEx(PenStyle.PS_NULL, 1, BrushStyle.BS_NULL)
