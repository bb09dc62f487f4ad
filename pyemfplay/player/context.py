#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

"""
Playback device context: the state that records are replayed against.
"""

import copy
from typing import List, Optional, Tuple

from pyemfplay.enum import ArcDirection, BackgroundMode, BinaryRasterOperation, ICMMode, LayoutMode, MapMode, \
    PolygonFillMode, STOCK_OBJECT_FLAG, StockObject, StretchMode, TextAlignmentMode
from pyemfplay.exceptions import InvalidRecordError, UnexpectedGraphicsObjectError
from pyemfplay.gdi import ColorAdjustment, ColorRef, LogBrushEx, LogPenEx, PixelFormatDescriptor, PointL, PointS, \
    RegionData, SizeL, UniversalFontId, XForm
from pyemfplay.player.stock import getStockObject


class MetafileReference:
    """
    Object stored in slot 0 of the object table, which always refers to the metafile itself.
    """

    def __repr__(self):
        return "MetafileReference()"


REFERENCE_SELF = MetafileReference()


def isStockObject(index: int) -> bool:
    return index & STOCK_OBJECT_FLAG != 0


class EmfObjectTable:
    """
    Graphics objects created by the metafile, addressed by the index found in creation, selection and deletion records.
    Index 0 refers to the metafile itself and empty slots hold None.
    """

    def __init__(self, count: int):
        """
        :param count: the number of handles declared by the metafile header.
        """
        self.objects = [None] * (count + 1)
        self.objects[0] = REFERENCE_SELF

    def __len__(self):
        return len(self.objects)

    def checkIndex(self, index: int):
        if index == 0 or isStockObject(index):
            raise UnexpectedGraphicsObjectError(f"Object table index {index:#x} cannot be modified")

        if index >= len(self.objects):
            raise InvalidRecordError(
                f"Object table index {index} is out of range (table has {len(self.objects)} slots)"
            )

    def set(self, index: int, graphicsObject: object):
        self.checkIndex(index)
        self.objects[index] = graphicsObject

    def delete(self, index: int):
        self.checkIndex(index)
        self.objects[index] = None

    def get(self, index: int) -> Optional[object]:
        if index >= len(self.objects):
            raise InvalidRecordError(
                f"Object table index {index} is out of range (table has {len(self.objects)} slots)"
            )

        return self.objects[index]


class PlaybackStateRegions:
    def __init__(self):
        self.clipping: Optional[RegionData] = None
        self.metaClipping: Optional[RegionData] = None
        self.viewportExtent = SizeL(1, 1)
        self.viewportOrigin = PointL(0, 0)
        self.windowExtent = SizeL(1, 1)
        self.windowOrigin = PointL(0, 0)


class PlaybackStateColors:
    def __init__(self):
        self.colorAdjustment = ColorAdjustment.default()
        self.colorProfile = b""
        self.colorProfileName = ""
        self.icmMode = ICMMode.ICM_OFF
        self.pixelFormat: Optional[PixelFormatDescriptor] = None


class PlaybackStateText:
    def __init__(self):
        self.mapperFlags = 0
        self.forceUfiMapping: Optional[UniversalFontId] = None
        self.linkedUfis: List[UniversalFontId] = []
        self.textAlignment = TextAlignmentMode(0)
        self.textJustification: Tuple[int, int] = (0, 0)


class PlaybackStateDrawing:
    DEFAULT_MITER_LIMIT = 10

    def __init__(self):
        self.arcDirection = ArcDirection.AD_COUNTERCLOCKWISE
        self.backgroundColor = ColorRef.white()
        self.backgroundMode = BackgroundMode.OPAQUE
        self.brushOrigin = PointL(0, 0)
        self.currentPosition = PointL(0, 0)
        self.layoutMode = LayoutMode.LAYOUT_LTR
        self.mapMode = MapMode.MM_TEXT
        self.miterLimit = PlaybackStateDrawing.DEFAULT_MITER_LIMIT
        self.pathBracket = False
        self.polyFillMode = PolygonFillMode.ALTERNATE
        self.rop2 = BinaryRasterOperation.R2_COPYPEN
        self.stretchMode = StretchMode.STRETCH_ANDSCANS
        self.textColor = ColorRef.black()


class GraphicsEnvironment:
    def __init__(self):
        self.regions = PlaybackStateRegions()
        self.colors = PlaybackStateColors()
        self.text = PlaybackStateText()
        self.drawing = PlaybackStateDrawing()


class SelectedObject:
    """
    Objects currently selected in the device context. Defaults are the stock objects selected in a new GDI device
    context.
    """

    def __init__(self):
        self.dcBrush = LogBrushEx.solid(ColorRef.white())
        self.dcPen = LogPenEx.blackPen()
        self.brush = getStockObject(StockObject.WHITE_BRUSH, self)
        self.pen = getStockObject(StockObject.BLACK_PEN, self)
        self.font = getStockObject(StockObject.SYSTEM_FONT, self)
        self.palette = getStockObject(StockObject.DEFAULT_PALETTE, self)
        self.colorSpace = None


class PlaybackDeviceContext:
    """
    Graphics environment, selected objects and transforms of a metafile being replayed.
    `xform` maps logical coordinates to the output space. It is derived from the viewport and window extents and is
    recomputed when either changes. `worldTransform` holds the transform set by world transform records.
    """

    def __init__(self):
        self.environment = GraphicsEnvironment()
        self.selected = SelectedObject()
        self.xform = XForm.identity()
        self.worldTransform = XForm.identity()

    def applyTransformation(self):
        """
        Recompute the transform as a pure scale from the viewport and window extents. A zero window extent leaves the
        corresponding axis unscaled.
        """
        regions = self.environment.regions
        sx = regions.viewportExtent.cx / regions.windowExtent.cx if regions.windowExtent.cx != 0 else 1.0
        sy = regions.viewportExtent.cy / regions.windowExtent.cy if regions.windowExtent.cy != 0 else 1.0
        self.setScale(sx, sy)

    def setScale(self, sx: float, sy: float):
        self.xform = XForm(m11=sx, m22=sy)

    def transformPoint(self, x: float, y: float) -> Tuple[int, int]:
        tx, ty = self.xform.apply(x, y)
        return int(tx), int(ty)

    def transformPointL(self, point: PointL) -> PointL:
        return PointL(*self.transformPoint(point.x, point.y))

    def transformPointS(self, point: PointS) -> PointS:
        return PointS(*self.transformPoint(point.x, point.y))

    def toDevice(self, x: float, y: float) -> Tuple[float, float]:
        """
        Map a logical point to the output space: the world transform is applied first, then the window to viewport
        mapping.
        """
        regions = self.environment.regions
        px, py = self.worldTransform.apply(x, y)
        dx, dy = self.xform.apply(px - regions.windowOrigin.x, py - regions.windowOrigin.y)
        return dx + regions.viewportOrigin.x, dy + regions.viewportOrigin.y

    def scale(self) -> float:
        """
        Uniform scale from logical units to output units, for pen widths and font sizes.
        """
        return self.worldTransform.multiply(self.xform).calcScale()

    def copy(self) -> 'PlaybackDeviceContext':
        return copy.deepcopy(self)
