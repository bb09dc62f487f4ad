#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import Optional

from pyemfplay.enum import BrushStyle, DIBColors, HatchStyle
from pyemfplay.gdi.base import GDIStructure
from pyemfplay.gdi.bitmap import DeviceIndependentBitmap
from pyemfplay.gdi.color import ColorRef


class LogBrushEx(GDIStructure):
    """
    Logical brush (MS-EMF 2.2.12). The hatch is only meaningful for hatched brushes.
    """

    def __init__(self, brushStyle: BrushStyle, color: ColorRef, brushHatch: Optional[HatchStyle] = None):
        self.brushStyle = brushStyle
        self.color = color
        self.brushHatch = brushHatch

    @staticmethod
    def solid(color: ColorRef) -> 'LogBrushEx':
        return LogBrushEx(BrushStyle.BS_SOLID, color)

    @staticmethod
    def null() -> 'LogBrushEx':
        return LogBrushEx(BrushStyle.BS_NULL, ColorRef.black())

    @staticmethod
    def hatched(color: ColorRef, hatch: HatchStyle) -> 'LogBrushEx':
        return LogBrushEx(BrushStyle.BS_HATCHED, color, hatch)


class PatternBrush(LogBrushEx):
    """
    Brush that paints with a bitmap, created by EMR_CREATEDIBPATTERNBRUSHPT and EMR_CREATEMONOBRUSH records.
    """

    def __init__(self, brushStyle: BrushStyle, bitmap: DeviceIndependentBitmap, usage: DIBColors):
        super().__init__(brushStyle, ColorRef.black())
        self.bitmap = bitmap
        self.usage = usage
