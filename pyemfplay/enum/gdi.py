#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from enum import IntEnum


class BrushStyle(IntEnum):
    BS_SOLID = 0x0000
    BS_NULL = 0x0001
    BS_HATCHED = 0x0002
    BS_PATTERN = 0x0003
    BS_INDEXED = 0x0004
    BS_DIBPATTERN = 0x0005
    BS_DIBPATTERNPT = 0x0006
    BS_PATTERN8X8 = 0x0007
    BS_DIBPATTERN8X8 = 0x0008
    BS_MONOPATTERN = 0x0009


class HatchStyle(IntEnum):
    HS_HORIZONTAL = 0x0000
    HS_VERTICAL = 0x0001
    HS_FDIAGONAL = 0x0002
    HS_BDIAGONAL = 0x0003
    HS_CROSS = 0x0004
    HS_DIAGCROSS = 0x0005
    HS_SOLIDCLR = 0x0006
    HS_DITHEREDCLR = 0x0007
    HS_SOLIDTEXTCLR = 0x0008
    HS_DITHEREDTEXTCLR = 0x0009
    HS_SOLIDBKCLR = 0x000A
    HS_DITHEREDBKCLR = 0x000B


class PenStyle(IntEnum):
    """
    Line style of a pen, stored in the low 4 bits of the pen style field.
    """

    PS_SOLID = 0x0000
    PS_DASH = 0x0001
    PS_DOT = 0x0002
    PS_DASHDOT = 0x0003
    PS_DASHDOTDOT = 0x0004
    PS_NULL = 0x0005
    PS_INSIDEFRAME = 0x0006
    PS_USERSTYLE = 0x0007
    PS_ALTERNATE = 0x0008


class PenEndCap(IntEnum):
    PS_ENDCAP_ROUND = 0x0000
    PS_ENDCAP_SQUARE = 0x0100
    PS_ENDCAP_FLAT = 0x0200


class PenJoin(IntEnum):
    PS_JOIN_ROUND = 0x0000
    PS_JOIN_BEVEL = 0x1000
    PS_JOIN_MITER = 0x2000


class PenType(IntEnum):
    PS_COSMETIC = 0x00000000
    PS_GEOMETRIC = 0x00010000


PEN_STYLE_MASK = 0x0000000F
PEN_ENDCAP_MASK = 0x00000F00
PEN_JOIN_MASK = 0x0000F000
PEN_TYPE_MASK = 0x000F0000


class StockObject(IntEnum):
    """
    Predefined graphics objects, selected by index without being created (MS-EMF 2.1.31).
    """

    WHITE_BRUSH = 0x80000000
    LTGRAY_BRUSH = 0x80000001
    GRAY_BRUSH = 0x80000002
    DKGRAY_BRUSH = 0x80000003
    BLACK_BRUSH = 0x80000004
    NULL_BRUSH = 0x80000005
    WHITE_PEN = 0x80000006
    BLACK_PEN = 0x80000007
    NULL_PEN = 0x80000008
    OEM_FIXED_FONT = 0x8000000A
    ANSI_FIXED_FONT = 0x8000000B
    ANSI_VAR_FONT = 0x8000000C
    SYSTEM_FONT = 0x8000000D
    DEVICE_DEFAULT_FONT = 0x8000000E
    DEFAULT_PALETTE = 0x8000000F
    SYSTEM_FIXED_FONT = 0x80000010
    DEFAULT_GUI_FONT = 0x80000011
    DC_BRUSH = 0x80000012
    DC_PEN = 0x80000013


STOCK_OBJECT_FLAG = 0x80000000


class DIBColors(IntEnum):
    """
    How the color table of a device-independent bitmap is interpreted.
    """

    DIB_RGB_COLORS = 0x00
    DIB_PAL_COLORS = 0x01
    DIB_PAL_INDICES = 0x02


class BitmapCompression(IntEnum):
    BI_RGB = 0x0000
    BI_RLE8 = 0x0001
    BI_RLE4 = 0x0002
    BI_BITFIELDS = 0x0003
    BI_JPEG = 0x0004
    BI_PNG = 0x0005
    BI_CMYK = 0x000B
    BI_CMYKRLE8 = 0x000C
    BI_CMYKRLE4 = 0x000D


class RegionMode(IntEnum):
    RGN_AND = 0x01
    RGN_OR = 0x02
    RGN_XOR = 0x03
    RGN_DIFF = 0x04
    RGN_COPY = 0x05


class BinaryRasterOperation(IntEnum):
    R2_BLACK = 0x0001
    R2_NOTMERGEPEN = 0x0002
    R2_MASKNOTPEN = 0x0003
    R2_NOTCOPYPEN = 0x0004
    R2_MASKPENNOT = 0x0005
    R2_NOT = 0x0006
    R2_XORPEN = 0x0007
    R2_NOTMASKPEN = 0x0008
    R2_MASKPEN = 0x0009
    R2_NOTXORPEN = 0x000A
    R2_NOP = 0x000B
    R2_MERGENOTPEN = 0x000C
    R2_COPYPEN = 0x000D
    R2_MERGEPENNOT = 0x000E
    R2_MERGEPEN = 0x000F
    R2_WHITE = 0x0010


class TernaryRasterOperation(IntEnum):
    """
    The most common ternary raster operations. Records keep the raw value since any of the 256 operations is valid.
    """

    BLACKNESS = 0x00000042
    NOTSRCERASE = 0x001100A6
    NOTSRCCOPY = 0x00330008
    SRCERASE = 0x00440328
    DSTINVERT = 0x00550009
    PATINVERT = 0x005A0049
    SRCINVERT = 0x00660046
    SRCAND = 0x008800C6
    MERGEPAINT = 0x00BB0226
    MERGECOPY = 0x00C000CA
    SRCCOPY = 0x00CC0020
    SRCPAINT = 0x00EE0086
    PATCOPY = 0x00F00021
    PATPAINT = 0x00FB0A09
    WHITENESS = 0x00FF0062


class LogicalColorSpace(IntEnum):
    LCS_CALIBRATED_RGB = 0x00000000
    LCS_sRGB = 0x73524742
    LCS_WINDOWS_COLOR_SPACE = 0x57696E20


class GamutMappingIntent(IntEnum):
    LCS_GM_ABS_COLORIMETRIC = 0x00000008
    LCS_GM_BUSINESS = 0x00000001
    LCS_GM_GRAPHICS = 0x00000002
    LCS_GM_IMAGES = 0x00000004
