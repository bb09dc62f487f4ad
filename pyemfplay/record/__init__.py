#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.record.bitmap import EmrAlphaBlend, EmrBitBlt, EmrMaskBlt, EmrPlgBlt, EmrSetDIBitsToDevice, \
    EmrStretchBlt, EmrStretchDIBits, EmrTransparentBlt
from pyemfplay.record.clipping import EmrExcludeClipRect, EmrExtSelectClipRgn, EmrIntersectClipRect, \
    EmrOffsetClipRgn, EmrSelectClipPath, EmrSetMetaRgn
from pyemfplay.record.comment import EmrComment, EmrCommentBeginGroup, EmrCommentEmfPlus, EmrCommentEmfSpool, \
    EmrCommentEndGroup, EmrCommentMultiformats, EmrCommentPublic, EmrCommentWindowsMetafile
from pyemfplay.record.control import EmrEof, EmrHeader
from pyemfplay.record.drawing import EmrAngleArc, EmrArc, EmrArcBase, EmrArcTo, EmrChord, EmrEllipse, \
    EmrExtFloodFill, EmrExtTextOut, EmrExtTextOutA, EmrExtTextOutW, EmrFillPath, EmrFillRgn, EmrFrameRgn, \
    EmrGradientFill, EmrInvertRgn, EmrLineTo, EmrPaintRgn, EmrPie, EmrPoly, EmrPolyBezier, EmrPolyBezier16, \
    EmrPolyBezierTo, EmrPolyBezierTo16, EmrPolyDraw, EmrPolyDraw16, EmrPolyDrawBase, EmrPolyPoly, EmrPolyPolygon, \
    EmrPolyPolygon16, EmrPolyPolyline, EmrPolyPolyline16, EmrPolyTextOut, EmrPolyTextOutA, EmrPolyTextOutW, \
    EmrPolygon, EmrPolygon16, EmrPolyline, EmrPolyline16, EmrPolylineTo, EmrPolylineTo16, EmrRectangle, EmrRoundRect, \
    EmrSetPixelV, EmrSmallTextOut, EmrStrokeAndFillPath, EmrStrokePath
from pyemfplay.record.escape import EmrDrawEscape, EmrExtEscape, EmrNamedEscape
from pyemfplay.record.object_creation import EmrCreateBrushIndirect, EmrCreateColorSpace, EmrCreateColorSpaceW, \
    EmrCreateDIBPatternBrushPt, EmrCreateMonoBrush, EmrCreatePalette, EmrCreatePatternBrush, EmrCreatePen, \
    EmrExtCreateFontIndirectW, EmrExtCreatePen
from pyemfplay.record.object_manipulation import EmrColorCorrectPalette, EmrDeleteColorSpace, EmrDeleteObject, \
    EmrResizePalette, EmrSelectObject, EmrSelectPalette, EmrSetColorSpace, EmrSetPaletteEntries
from pyemfplay.record.opengl import EmrGlsBoundedRecord, EmrGlsRecord
from pyemfplay.record.path import EmrAbortPath, EmrBeginPath, EmrCloseFigure, EmrEndPath, EmrFlattenPath, EmrWidenPath
from pyemfplay.record.record import Record
from pyemfplay.record.state import EmrColorMatchToTargetW, EmrForceUfiMapping, EmrMoveToEx, EmrPixelFormat, \
    EmrRealizePalette, EmrRestoreDC, EmrSaveDC, EmrScaleExtEx, EmrScaleViewportExtEx, EmrScaleWindowExtEx, \
    EmrSetArcDirection, EmrSetBkColor, EmrSetBkMode, EmrSetBrushOrgEx, EmrSetColorAdjustment, EmrSetIcmMode, \
    EmrSetIcmProfile, EmrSetIcmProfileA, EmrSetIcmProfileW, EmrSetLayout, EmrSetLinkedUfis, EmrSetMapMode, \
    EmrSetMapperFlags, EmrSetMiterLimit, EmrSetPolyFillMode, EmrSetRop2, EmrSetStretchBltMode, EmrSetTextAlign, \
    EmrSetTextColor, EmrSetTextJustification, EmrSetViewportExtEx, EmrSetViewportOrgEx, EmrSetWindowExtEx, \
    EmrSetWindowOrgEx
from pyemfplay.record.transform import EmrModifyWorldTransform, EmrSetWorldTransform
