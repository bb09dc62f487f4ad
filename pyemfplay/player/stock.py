#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

"""
Stock objects: predefined graphics objects that records select by index without creating them.
"""

from pyemfplay.enum import CharacterSet, ClipPrecision, FamilyFont, FontQuality, OutPrecision, PitchFont, \
    StockObject
from pyemfplay.gdi import ColorRef, LogBrushEx, LogFont, LogPalette, LogPaletteEntry, LogPenEx

# The 20 static colors of the system palette.
DEFAULT_PALETTE_COLORS = [
    (0x00, 0x00, 0x00), (0x80, 0x00, 0x00), (0x00, 0x80, 0x00), (0x80, 0x80, 0x00),
    (0x00, 0x00, 0x80), (0x80, 0x00, 0x80), (0x00, 0x80, 0x80), (0xC0, 0xC0, 0xC0),
    (0xC0, 0xDC, 0xC0), (0xA6, 0xCA, 0xF0), (0xFF, 0xFB, 0xF0), (0xA0, 0xA0, 0xA4),
    (0x80, 0x80, 0x80), (0xFF, 0x00, 0x00), (0x00, 0xFF, 0x00), (0xFF, 0xFF, 0x00),
    (0x00, 0x00, 0xFF), (0xFF, 0x00, 0xFF), (0x00, 0xFF, 0xFF), (0xFF, 0xFF, 0xFF),
]

FW_NORMAL = 400
FW_BOLD = 700


def gray(level: int) -> ColorRef:
    return ColorRef(level, level, level)


def stockFont(facename: str, height: int, weight: int, pitch: PitchFont, family: FamilyFont,
              charset: CharacterSet = CharacterSet.ANSI_CHARSET) -> LogFont:
    return LogFont(height, 0, 0, 0, weight, False, False, False, charset, OutPrecision.OUT_DEFAULT_PRECIS,
                   ClipPrecision.CLIP_DEFAULT_PRECIS, FontQuality.DEFAULT_QUALITY, pitch, family, facename)


def defaultPalette() -> LogPalette:
    entries = [LogPaletteEntry(0, blue, green, red) for red, green, blue in DEFAULT_PALETTE_COLORS]
    return LogPalette(LogPalette.VERSION, entries)


STOCK_OBJECTS = {
    StockObject.WHITE_BRUSH: lambda: LogBrushEx.solid(ColorRef.white()),
    StockObject.LTGRAY_BRUSH: lambda: LogBrushEx.solid(gray(0xC0)),
    StockObject.GRAY_BRUSH: lambda: LogBrushEx.solid(gray(0x80)),
    StockObject.DKGRAY_BRUSH: lambda: LogBrushEx.solid(gray(0x40)),
    StockObject.BLACK_BRUSH: lambda: LogBrushEx.solid(ColorRef.black()),
    StockObject.NULL_BRUSH: LogBrushEx.null,
    StockObject.WHITE_PEN: LogPenEx.whitePen,
    StockObject.BLACK_PEN: LogPenEx.blackPen,
    StockObject.NULL_PEN: LogPenEx.nullPen,
    StockObject.OEM_FIXED_FONT: lambda: stockFont("Terminal", 12, FW_NORMAL, PitchFont.FIXED_PITCH,
                                                  FamilyFont.FF_MODERN, CharacterSet.OEM_CHARSET),
    StockObject.ANSI_FIXED_FONT: lambda: stockFont("Courier", 12, FW_NORMAL, PitchFont.FIXED_PITCH,
                                                   FamilyFont.FF_MODERN),
    StockObject.ANSI_VAR_FONT: lambda: stockFont("MS Sans Serif", 12, FW_NORMAL, PitchFont.VARIABLE_PITCH,
                                                 FamilyFont.FF_SWISS),
    StockObject.SYSTEM_FONT: lambda: stockFont("System", 16, FW_BOLD, PitchFont.VARIABLE_PITCH,
                                               FamilyFont.FF_SWISS),
    StockObject.DEVICE_DEFAULT_FONT: lambda: stockFont("System", 16, FW_BOLD, PitchFont.VARIABLE_PITCH,
                                                       FamilyFont.FF_SWISS),
    StockObject.DEFAULT_PALETTE: defaultPalette,
    StockObject.SYSTEM_FIXED_FONT: lambda: stockFont("Fixedsys", 15, FW_NORMAL, PitchFont.FIXED_PITCH,
                                                     FamilyFont.FF_MODERN),
    StockObject.DEFAULT_GUI_FONT: lambda: stockFont("MS Shell Dlg", -11, FW_NORMAL, PitchFont.VARIABLE_PITCH,
                                                    FamilyFont.FF_SWISS),
}


def getStockObject(stockObject: StockObject, selected: 'SelectedObject'):
    """
    Get the graphics object for a stock object index.
    :param stockObject: the stock object to realize.
    :param selected: the objects selected in the device context, which hold the DC brush and DC pen.
    """
    if stockObject == StockObject.DC_BRUSH:
        return selected.dcBrush
    elif stockObject == StockObject.DC_PEN:
        return selected.dcPen

    return STOCK_OBJECTS[stockObject]()
