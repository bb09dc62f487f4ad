#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.gdi.base import GDIStructure
from pyemfplay.gdi.bitmap import BitmapInfoHeader, BlendFunction, DeviceIndependentBitmap
from pyemfplay.gdi.brush import LogBrushEx, PatternBrush
from pyemfplay.gdi.color import CIEXYZ, CIEXYZTriple, ColorAdjustment, ColorRef, LogColorSpace, LogColorSpaceW
from pyemfplay.gdi.eps import EmrFormat, EpsData, Point28_4
from pyemfplay.gdi.font import DesignVector, LogFont, LogFontEx, LogFontExDv, LogFontPanose, Panose, UniversalFontId
from pyemfplay.gdi.geometry import PointL, PointS, RectL, SizeL, XForm
from pyemfplay.gdi.gradient import GradientRectangle, GradientTriangle, TriVertex
from pyemfplay.gdi.palette import LogPalette, LogPaletteEntry
from pyemfplay.gdi.pen import LogPen, LogPenEx
from pyemfplay.gdi.pixel import PixelFormatDescriptor, PixelFormatFlags
from pyemfplay.gdi.region import RegionData, RegionDataHeader
from pyemfplay.gdi.text import EmrText
