#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List, Union

from pyemfplay.enum import ExtTextOutOptions, FloodFill, GradientFill, GraphicsMode, PointType, RecordType
from pyemfplay.gdi import ColorRef, EmrText, GradientRectangle, GradientTriangle, PointL, PointS, RectL, \
    RegionData, SizeL, TriVertex
from pyemfplay.record.record import Record


class EmrAngleArc(Record):
    def __init__(self, size: int, center: PointL, radius: int, startAngle: float, sweepAngle: float):
        super().__init__(RecordType.EMR_ANGLEARC, size)
        self.center = center
        self.radius = radius
        self.startAngle = startAngle
        self.sweepAngle = sweepAngle


class EmrArcBase(Record):
    """
    Base class for the elliptical arc records: the arc of the ellipse bounded by box, from the radial through start
    to the radial through end.
    """

    def __init__(self, recordType: RecordType, size: int, box: RectL, start: PointL, end: PointL):
        super().__init__(recordType, size)
        self.box = box
        self.start = start
        self.end = end


class EmrArc(EmrArcBase):
    def __init__(self, size: int, box: RectL, start: PointL, end: PointL):
        super().__init__(RecordType.EMR_ARC, size, box, start, end)


class EmrArcTo(EmrArcBase):
    def __init__(self, size: int, box: RectL, start: PointL, end: PointL):
        super().__init__(RecordType.EMR_ARCTO, size, box, start, end)


class EmrChord(EmrArcBase):
    def __init__(self, size: int, box: RectL, start: PointL, end: PointL):
        super().__init__(RecordType.EMR_CHORD, size, box, start, end)


class EmrPie(EmrArcBase):
    def __init__(self, size: int, box: RectL, start: PointL, end: PointL):
        super().__init__(RecordType.EMR_PIE, size, box, start, end)


class EmrEllipse(Record):
    def __init__(self, size: int, box: RectL):
        super().__init__(RecordType.EMR_ELLIPSE, size)
        self.box = box


class EmrRectangle(Record):
    def __init__(self, size: int, box: RectL):
        super().__init__(RecordType.EMR_RECTANGLE, size)
        self.box = box


class EmrRoundRect(Record):
    def __init__(self, size: int, box: RectL, corner: SizeL):
        super().__init__(RecordType.EMR_ROUNDRECT, size)
        self.box = box
        self.corner = corner


class EmrExtFloodFill(Record):
    def __init__(self, size: int, start: PointL, color: ColorRef, floodFillMode: FloodFill):
        super().__init__(RecordType.EMR_EXTFLOODFILL, size)
        self.start = start
        self.color = color
        self.floodFillMode = floodFillMode


class EmrExtTextOut(Record):
    """
    Base class of EMR_EXTTEXTOUTA and EMR_EXTTEXTOUTW. The scales are only used in GM_COMPATIBLE mode.
    """

    def __init__(self, recordType: RecordType, size: int, bounds: RectL, graphicsMode: GraphicsMode,
                 exScale: float, eyScale: float, text: EmrText):
        super().__init__(recordType, size)
        self.bounds = bounds
        self.graphicsMode = graphicsMode
        self.exScale = exScale
        self.eyScale = eyScale
        self.text = text


class EmrExtTextOutA(EmrExtTextOut):
    def __init__(self, size: int, bounds: RectL, graphicsMode: GraphicsMode, exScale: float, eyScale: float,
                 text: EmrText):
        super().__init__(RecordType.EMR_EXTTEXTOUTA, size, bounds, graphicsMode, exScale, eyScale, text)


class EmrExtTextOutW(EmrExtTextOut):
    def __init__(self, size: int, bounds: RectL, graphicsMode: GraphicsMode, exScale: float, eyScale: float,
                 text: EmrText):
        super().__init__(RecordType.EMR_EXTTEXTOUTW, size, bounds, graphicsMode, exScale, eyScale, text)


class EmrPolyTextOut(Record):
    def __init__(self, recordType: RecordType, size: int, bounds: RectL, graphicsMode: GraphicsMode,
                 exScale: float, eyScale: float, texts: List[EmrText]):
        super().__init__(recordType, size)
        self.bounds = bounds
        self.graphicsMode = graphicsMode
        self.exScale = exScale
        self.eyScale = eyScale
        self.texts = texts

    @property
    def cStrings(self) -> int:
        return len(self.texts)


class EmrPolyTextOutA(EmrPolyTextOut):
    def __init__(self, size: int, bounds: RectL, graphicsMode: GraphicsMode, exScale: float, eyScale: float,
                 texts: List[EmrText]):
        super().__init__(RecordType.EMR_POLYTEXTOUTA, size, bounds, graphicsMode, exScale, eyScale, texts)


class EmrPolyTextOutW(EmrPolyTextOut):
    def __init__(self, size: int, bounds: RectL, graphicsMode: GraphicsMode, exScale: float, eyScale: float,
                 texts: List[EmrText]):
        super().__init__(RecordType.EMR_POLYTEXTOUTW, size, bounds, graphicsMode, exScale, eyScale, texts)


class EmrSmallTextOut(Record):
    """
    Compact text output. The bounds are absent when ETO_NO_RECT is set and the string is made of 8-bit
    characters when ETO_SMALL_CHARS is set.
    """

    def __init__(self, size: int, reference: PointL, cChars: int, options: ExtTextOutOptions,
                 graphicsMode: GraphicsMode, exScale: float, eyScale: float, bounds: RectL, text: str):
        super().__init__(RecordType.EMR_SMALLTEXTOUT, size)
        self.reference = reference
        self.cChars = cChars
        self.options = options
        self.graphicsMode = graphicsMode
        self.exScale = exScale
        self.eyScale = eyScale
        self.bounds = bounds
        self.text = text


class EmrFillPath(Record):
    def __init__(self, size: int, bounds: RectL):
        super().__init__(RecordType.EMR_FILLPATH, size)
        self.bounds = bounds


class EmrStrokeAndFillPath(Record):
    def __init__(self, size: int, bounds: RectL):
        super().__init__(RecordType.EMR_STROKEANDFILLPATH, size)
        self.bounds = bounds


class EmrStrokePath(Record):
    def __init__(self, size: int, bounds: RectL):
        super().__init__(RecordType.EMR_STROKEPATH, size)
        self.bounds = bounds


class EmrFillRgn(Record):
    def __init__(self, size: int, bounds: RectL, rgnDataSize: int, ihBrush: int, rgnData: RegionData):
        super().__init__(RecordType.EMR_FILLRGN, size)
        self.bounds = bounds
        self.rgnDataSize = rgnDataSize
        self.ihBrush = ihBrush
        self.rgnData = rgnData


class EmrFrameRgn(Record):
    def __init__(self, size: int, bounds: RectL, rgnDataSize: int, ihBrush: int, width: int, height: int,
                 rgnData: RegionData):
        super().__init__(RecordType.EMR_FRAMERGN, size)
        self.bounds = bounds
        self.rgnDataSize = rgnDataSize
        self.ihBrush = ihBrush
        self.width = width
        self.height = height
        self.rgnData = rgnData


class EmrInvertRgn(Record):
    def __init__(self, size: int, bounds: RectL, rgnDataSize: int, rgnData: RegionData):
        super().__init__(RecordType.EMR_INVERTRGN, size)
        self.bounds = bounds
        self.rgnDataSize = rgnDataSize
        self.rgnData = rgnData


class EmrPaintRgn(Record):
    def __init__(self, size: int, bounds: RectL, rgnDataSize: int, rgnData: RegionData):
        super().__init__(RecordType.EMR_PAINTRGN, size)
        self.bounds = bounds
        self.rgnDataSize = rgnDataSize
        self.rgnData = rgnData


class EmrGradientFill(Record):
    """
    Gradient fill of rectangles or triangles. The gradient objects index into vertexObjects.
    """

    def __init__(self, size: int, bounds: RectL, nVer: int, nTri: int, gradientFillMode: GradientFill,
                 vertexObjects: List[TriVertex],
                 gradientObjects: List[Union[GradientRectangle, GradientTriangle]]):
        super().__init__(RecordType.EMR_GRADIENTFILL, size)
        self.bounds = bounds
        self.nVer = nVer
        self.nTri = nTri
        self.gradientFillMode = gradientFillMode
        self.vertexObjects = vertexObjects
        self.gradientObjects = gradientObjects


class EmrLineTo(Record):
    def __init__(self, size: int, point: PointL):
        super().__init__(RecordType.EMR_LINETO, size)
        self.point = point


class EmrSetPixelV(Record):
    def __init__(self, size: int, pixel: PointL, color: ColorRef):
        super().__init__(RecordType.EMR_SETPIXELV, size)
        self.pixel = pixel
        self.color = color


class EmrPoly(Record):
    """
    Base class of the records made of a single list of points: EMR_POLYBEZIER, EMR_POLYGON, EMR_POLYLINE,
    EMR_POLYBEZIERTO, EMR_POLYLINETO and their 16-bit variants.
    """

    def __init__(self, recordType: RecordType, size: int, bounds: RectL, points: List[Union[PointL, PointS]]):
        super().__init__(recordType, size)
        self.bounds = bounds
        self.points = points

    @property
    def count(self) -> int:
        return len(self.points)


class EmrPolyPoly(Record):
    """
    Base class of the records made of several lists of points: EMR_POLYPOLYLINE, EMR_POLYPOLYGON and their 16-bit
    variants. polyPointCounts gives the number of points of each poly, in order.
    """

    def __init__(self, recordType: RecordType, size: int, bounds: RectL, polyPointCounts: List[int],
                 points: List[Union[PointL, PointS]]):
        super().__init__(recordType, size)
        self.bounds = bounds
        self.polyPointCounts = polyPointCounts
        self.points = points

    @property
    def numberOfPolys(self) -> int:
        return len(self.polyPointCounts)

    @property
    def count(self) -> int:
        return len(self.points)

    def polys(self) -> List[List[Union[PointL, PointS]]]:
        """
        Split the points in one list per poly.
        """
        polys = []
        start = 0

        for count in self.polyPointCounts:
            polys.append(self.points[start : start + count])
            start += count

        return polys


class EmrPolyDrawBase(Record):
    """
    Set of line segments and Bézier curves. Each point has a PointType telling how it is used.
    """

    def __init__(self, recordType: RecordType, size: int, bounds: RectL, points: List[Union[PointL, PointS]],
                 types: List[PointType]):
        super().__init__(recordType, size)
        self.bounds = bounds
        self.points = points
        self.types = types

    @property
    def count(self) -> int:
        return len(self.points)


class EmrPolyBezier(EmrPoly):
    def __init__(self, size: int, bounds: RectL, points: List[PointL]):
        super().__init__(RecordType.EMR_POLYBEZIER, size, bounds, points)


class EmrPolygon(EmrPoly):
    def __init__(self, size: int, bounds: RectL, points: List[PointL]):
        super().__init__(RecordType.EMR_POLYGON, size, bounds, points)


class EmrPolyline(EmrPoly):
    def __init__(self, size: int, bounds: RectL, points: List[PointL]):
        super().__init__(RecordType.EMR_POLYLINE, size, bounds, points)


class EmrPolyBezierTo(EmrPoly):
    def __init__(self, size: int, bounds: RectL, points: List[PointL]):
        super().__init__(RecordType.EMR_POLYBEZIERTO, size, bounds, points)


class EmrPolylineTo(EmrPoly):
    def __init__(self, size: int, bounds: RectL, points: List[PointL]):
        super().__init__(RecordType.EMR_POLYLINETO, size, bounds, points)


class EmrPolyBezier16(EmrPoly):
    def __init__(self, size: int, bounds: RectL, points: List[PointS]):
        super().__init__(RecordType.EMR_POLYBEZIER16, size, bounds, points)


class EmrPolygon16(EmrPoly):
    def __init__(self, size: int, bounds: RectL, points: List[PointS]):
        super().__init__(RecordType.EMR_POLYGON16, size, bounds, points)


class EmrPolyline16(EmrPoly):
    def __init__(self, size: int, bounds: RectL, points: List[PointS]):
        super().__init__(RecordType.EMR_POLYLINE16, size, bounds, points)


class EmrPolyBezierTo16(EmrPoly):
    def __init__(self, size: int, bounds: RectL, points: List[PointS]):
        super().__init__(RecordType.EMR_POLYBEZIERTO16, size, bounds, points)


class EmrPolylineTo16(EmrPoly):
    def __init__(self, size: int, bounds: RectL, points: List[PointS]):
        super().__init__(RecordType.EMR_POLYLINETO16, size, bounds, points)


class EmrPolyPolyline(EmrPolyPoly):
    def __init__(self, size: int, bounds: RectL, polyPointCounts: List[int], points: List[PointL]):
        super().__init__(RecordType.EMR_POLYPOLYLINE, size, bounds, polyPointCounts, points)


class EmrPolyPolygon(EmrPolyPoly):
    def __init__(self, size: int, bounds: RectL, polyPointCounts: List[int], points: List[PointL]):
        super().__init__(RecordType.EMR_POLYPOLYGON, size, bounds, polyPointCounts, points)


class EmrPolyPolyline16(EmrPolyPoly):
    def __init__(self, size: int, bounds: RectL, polyPointCounts: List[int], points: List[PointS]):
        super().__init__(RecordType.EMR_POLYPOLYLINE16, size, bounds, polyPointCounts, points)


class EmrPolyPolygon16(EmrPolyPoly):
    def __init__(self, size: int, bounds: RectL, polyPointCounts: List[int], points: List[PointS]):
        super().__init__(RecordType.EMR_POLYPOLYGON16, size, bounds, polyPointCounts, points)


class EmrPolyDraw(EmrPolyDrawBase):
    def __init__(self, size: int, bounds: RectL, points: List[PointL], types: List[PointType]):
        super().__init__(RecordType.EMR_POLYDRAW, size, bounds, points, types)


class EmrPolyDraw16(EmrPolyDrawBase):
    def __init__(self, size: int, bounds: RectL, points: List[PointS], types: List[PointType]):
        super().__init__(RecordType.EMR_POLYDRAW16, size, bounds, points, types)
