#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from enum import IntEnum, IntFlag


class ArcDirection(IntEnum):
    AD_COUNTERCLOCKWISE = 0x00000001
    AD_CLOCKWISE = 0x00000002


class BackgroundMode(IntEnum):
    TRANSPARENT = 0x0001
    OPAQUE = 0x0002


class ColorAdjustmentFlags(IntFlag):
    CA_NEGATIVE = 0x0001
    CA_LOG_FILTER = 0x0002


class ColorMatchToTarget(IntEnum):
    COLORMATCHTOTARGET_NOTEMBEDDED = 0x00000000
    COLORMATCHTOTARGET_EMBEDDED = 0x00000001


class ColorSpaceAction(IntEnum):
    CS_ENABLE = 0x00000001
    CS_DISABLE = 0x00000002
    CS_DELETE_TRANSFORM = 0x00000003


class FloodFill(IntEnum):
    FLOODFILLBORDER = 0x00000000
    FLOODFILLSURFACE = 0x00000001


class GradientFill(IntEnum):
    GRADIENT_FILL_RECT_H = 0x00000000
    GRADIENT_FILL_RECT_V = 0x00000001
    GRADIENT_FILL_TRIANGLE = 0x00000002


class GraphicsMode(IntEnum):
    GM_COMPATIBLE = 0x00000001
    GM_ADVANCED = 0x00000002


class ICMMode(IntEnum):
    ICM_OFF = 0x01
    ICM_ON = 0x02
    ICM_QUERY = 0x03
    ICM_DONE_OUTSIDEDC = 0x04


class Illuminant(IntEnum):
    ILLUMINANT_DEVICE_DEFAULT = 0x00
    ILLUMINANT_TUNGSTEN = 0x01
    ILLUMINANT_B = 0x02
    ILLUMINANT_DAYLIGHT = 0x03
    ILLUMINANT_D50 = 0x04
    ILLUMINANT_D55 = 0x05
    ILLUMINANT_D65 = 0x06
    ILLUMINANT_D75 = 0x07
    ILLUMINANT_FLUORESCENT = 0x08


class LayoutMode(IntEnum):
    LAYOUT_LTR = 0x00000000
    LAYOUT_RTL = 0x00000001
    LAYOUT_BITMAPORIENTATIONPRESERVED = 0x00000008


class MapMode(IntEnum):
    MM_TEXT = 0x01
    MM_LOMETRIC = 0x02
    MM_HIMETRIC = 0x03
    MM_LOENGLISH = 0x04
    MM_HIENGLISH = 0x05
    MM_TWIPS = 0x06
    MM_ISOTROPIC = 0x07
    MM_ANISOTROPIC = 0x08


class ModifyWorldTransformMode(IntEnum):
    MWT_IDENTITY = 0x01
    MWT_LEFTMULTIPLY = 0x02
    MWT_RIGHTMULTIPLY = 0x03
    MWT_SET = 0x04


class PointType(IntFlag):
    """
    Point types used by EMR_POLYDRAW records. PT_CLOSEFIGURE can be combined with PT_LINETO and PT_BEZIERTO.
    """

    PT_CLOSEFIGURE = 0x01
    PT_LINETO = 0x02
    PT_BEZIERTO = 0x04
    PT_MOVETO = 0x06


class PolygonFillMode(IntEnum):
    ALTERNATE = 0x01
    WINDING = 0x02


class StretchMode(IntEnum):
    STRETCH_ANDSCANS = 0x01
    STRETCH_ORSCANS = 0x02
    STRETCH_DELETESCANS = 0x03
    STRETCH_HALFTONE = 0x04


class TextAlignmentMode(IntFlag):
    """
    Text alignment flags. TA_LEFT, TA_TOP and TA_NOUPDATECP are the zero defaults.
    """

    TA_UPDATECP = 0x0001
    TA_RIGHT = 0x0002
    TA_CENTER = 0x0006
    TA_BOTTOM = 0x0008
    TA_BASELINE = 0x0018
    TA_RTLREADING = 0x0100


TEXT_HORIZONTAL_ALIGNMENT_MASK = 0x0006
TEXT_VERTICAL_ALIGNMENT_MASK = 0x0018
