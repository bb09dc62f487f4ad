#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core import decodeANSI, decodeUTF16LE, Float32LE, Int32LE, readBytes, RecordStream, Uint32LE, Uint8
from pyemfplay.enum import ExtTextOutOptions, FloodFill, GradientFill, GraphicsMode, parseEnum, parseFlags, \
    PointType, RecordType
from pyemfplay.exceptions import UnexpectedPatternError
from pyemfplay.parser.emf.base import checkArrayFits, checkMinimumRecordSize, checkRecordSize, checkRecordType, \
    RecordCategoryParser
from pyemfplay.parser.gdi import readColorRef, readEmrText, readEmrTextBuffers, readGradientRectangle, \
    readGradientTriangle, readPointL, readPointsL, readPointsS, readRectL, readRegionData, readSizeL, readTriVertex
from pyemfplay.record import EmrAngleArc, EmrArc, EmrArcTo, EmrChord, EmrEllipse, EmrExtFloodFill, EmrExtTextOutA, \
    EmrExtTextOutW, EmrFillPath, EmrFillRgn, EmrFrameRgn, EmrGradientFill, EmrInvertRgn, EmrLineTo, EmrPaintRgn, \
    EmrPie, EmrPolyBezier, EmrPolyBezier16, EmrPolyBezierTo, EmrPolyBezierTo16, EmrPolyDraw, EmrPolyDraw16, \
    EmrPolygon, EmrPolygon16, EmrPolyline, EmrPolyline16, EmrPolylineTo, EmrPolylineTo16, EmrPolyPolygon, \
    EmrPolyPolygon16, EmrPolyPolyline, EmrPolyPolyline16, EmrPolyTextOutA, EmrPolyTextOutW, EmrRectangle, \
    EmrRoundRect, EmrSetPixelV, EmrSmallTextOut, EmrStrokeAndFillPath, EmrStrokePath


class DrawingRecordParser(RecordCategoryParser):
    """
    Parser for the records that draw shapes, text and regions.
    """

    def __init__(self):
        super().__init__()

        self.arcs = {
            RecordType.EMR_ARC: EmrArc,
            RecordType.EMR_ARCTO: EmrArcTo,
            RecordType.EMR_CHORD: EmrChord,
            RecordType.EMR_PIE: EmrPie,
        }

        self.paths = {
            RecordType.EMR_FILLPATH: EmrFillPath,
            RecordType.EMR_STROKEANDFILLPATH: EmrStrokeAndFillPath,
            RecordType.EMR_STROKEPATH: EmrStrokePath,
        }

        # Record class and point size of each point list record.
        self.polys = {
            RecordType.EMR_POLYBEZIER: (EmrPolyBezier, 8),
            RecordType.EMR_POLYGON: (EmrPolygon, 8),
            RecordType.EMR_POLYLINE: (EmrPolyline, 8),
            RecordType.EMR_POLYBEZIERTO: (EmrPolyBezierTo, 8),
            RecordType.EMR_POLYLINETO: (EmrPolylineTo, 8),
            RecordType.EMR_POLYBEZIER16: (EmrPolyBezier16, 4),
            RecordType.EMR_POLYGON16: (EmrPolygon16, 4),
            RecordType.EMR_POLYLINE16: (EmrPolyline16, 4),
            RecordType.EMR_POLYBEZIERTO16: (EmrPolyBezierTo16, 4),
            RecordType.EMR_POLYLINETO16: (EmrPolylineTo16, 4),
        }

        self.polyPolys = {
            RecordType.EMR_POLYPOLYLINE: (EmrPolyPolyline, 8),
            RecordType.EMR_POLYPOLYGON: (EmrPolyPolygon, 8),
            RecordType.EMR_POLYPOLYLINE16: (EmrPolyPolyline16, 4),
            RecordType.EMR_POLYPOLYGON16: (EmrPolyPolygon16, 4),
        }

        self.polyDraws = {
            RecordType.EMR_POLYDRAW: (EmrPolyDraw, 8),
            RecordType.EMR_POLYDRAW16: (EmrPolyDraw16, 4),
        }

        self.parsers = {
            RecordType.EMR_ANGLEARC: self.parseAngleArc,
            RecordType.EMR_ELLIPSE: self.parseEllipse,
            RecordType.EMR_EXTFLOODFILL: self.parseExtFloodFill,
            RecordType.EMR_EXTTEXTOUTA: self.parseExtTextOut,
            RecordType.EMR_EXTTEXTOUTW: self.parseExtTextOut,
            RecordType.EMR_FILLRGN: self.parseFillRgn,
            RecordType.EMR_FRAMERGN: self.parseFrameRgn,
            RecordType.EMR_GRADIENTFILL: self.parseGradientFill,
            RecordType.EMR_INVERTRGN: self.parseInvertRgn,
            RecordType.EMR_LINETO: self.parseLineTo,
            RecordType.EMR_PAINTRGN: self.parsePaintRgn,
            RecordType.EMR_POLYTEXTOUTA: self.parsePolyTextOut,
            RecordType.EMR_POLYTEXTOUTW: self.parsePolyTextOut,
            RecordType.EMR_RECTANGLE: self.parseRectangle,
            RecordType.EMR_ROUNDRECT: self.parseRoundRect,
            RecordType.EMR_SETPIXELV: self.parseSetPixelV,
            RecordType.EMR_SMALLTEXTOUT: self.parseSmallTextOut,
        }

        self.parsers.update({recordType: self.parseArc for recordType in self.arcs})
        self.parsers.update({recordType: self.parsePath for recordType in self.paths})
        self.parsers.update({recordType: self.parsePoly for recordType in self.polys})
        self.parsers.update({recordType: self.parsePolyPoly for recordType in self.polyPolys})
        self.parsers.update({recordType: self.parsePolyDraw for recordType in self.polyDraws})

    def readPoints(self, stream: RecordStream, count: int, pointSize: int):
        checkArrayFits(stream, "Point array", count, pointSize)
        return readPointsL(stream, count) if pointSize == 8 else readPointsS(stream, count)

    def parseAngleArc(self, stream: RecordStream) -> EmrAngleArc:
        checkRecordSize(stream, 28)
        center = readPointL(stream)
        radius = Uint32LE.unpack(stream)
        startAngle = Float32LE.unpack(stream)
        sweepAngle = Float32LE.unpack(stream)
        return EmrAngleArc(stream.size.byteCount, center, radius, startAngle, sweepAngle)

    def parseArc(self, stream: RecordStream):
        checkRecordType(stream, *self.arcs)
        checkRecordSize(stream, 40)
        box = readRectL(stream)
        start = readPointL(stream)
        end = readPointL(stream)
        return self.arcs[stream.recordType](stream.size.byteCount, box, start, end)

    def parseEllipse(self, stream: RecordStream) -> EmrEllipse:
        checkRecordSize(stream, 24)
        return EmrEllipse(stream.size.byteCount, readRectL(stream))

    def parseRectangle(self, stream: RecordStream) -> EmrRectangle:
        checkRecordSize(stream, 24)
        return EmrRectangle(stream.size.byteCount, readRectL(stream))

    def parseRoundRect(self, stream: RecordStream) -> EmrRoundRect:
        checkRecordSize(stream, 32)
        box = readRectL(stream)
        return EmrRoundRect(stream.size.byteCount, box, readSizeL(stream))

    def parseExtFloodFill(self, stream: RecordStream) -> EmrExtFloodFill:
        checkRecordSize(stream, 24)
        start = readPointL(stream)
        color = readColorRef(stream)
        floodFillMode = parseEnum(FloodFill, Uint32LE.unpack(stream))
        return EmrExtFloodFill(stream.size.byteCount, start, color, floodFillMode)

    def parseExtTextOut(self, stream: RecordStream):
        checkRecordType(stream, RecordType.EMR_EXTTEXTOUTA, RecordType.EMR_EXTTEXTOUTW)
        checkMinimumRecordSize(stream, 56)
        bounds = readRectL(stream)
        graphicsMode = parseEnum(GraphicsMode, Uint32LE.unpack(stream))
        exScale = Float32LE.unpack(stream)
        eyScale = Float32LE.unpack(stream)
        text = readEmrText(stream)
        readEmrTextBuffers(stream, [text])
        recordClass = EmrExtTextOutA if stream.recordType == RecordType.EMR_EXTTEXTOUTA else EmrExtTextOutW
        return recordClass(stream.size.byteCount, bounds, graphicsMode, exScale, eyScale, text)

    def parsePolyTextOut(self, stream: RecordStream):
        checkRecordType(stream, RecordType.EMR_POLYTEXTOUTA, RecordType.EMR_POLYTEXTOUTW)
        checkMinimumRecordSize(stream, 40)
        bounds = readRectL(stream)
        graphicsMode = parseEnum(GraphicsMode, Uint32LE.unpack(stream))
        exScale = Float32LE.unpack(stream)
        eyScale = Float32LE.unpack(stream)
        cStrings = Uint32LE.unpack(stream)
        checkArrayFits(stream, "EmrText array", cStrings, 20)

        # The fixed parts of all the EmrText objects come before the strings they point to.
        texts = [readEmrText(stream) for _ in range(cStrings)]
        readEmrTextBuffers(stream, texts)
        recordClass = EmrPolyTextOutA if stream.recordType == RecordType.EMR_POLYTEXTOUTA else EmrPolyTextOutW
        return recordClass(stream.size.byteCount, bounds, graphicsMode, exScale, eyScale, texts)

    def parseSmallTextOut(self, stream: RecordStream) -> EmrSmallTextOut:
        checkMinimumRecordSize(stream, 36)
        reference = readPointL(stream)
        cChars = Uint32LE.unpack(stream)
        options = parseFlags(ExtTextOutOptions, Uint32LE.unpack(stream))
        graphicsMode = parseEnum(GraphicsMode, Uint32LE.unpack(stream))
        exScale = Float32LE.unpack(stream)
        eyScale = Float32LE.unpack(stream)
        bounds = None

        if not options & ExtTextOutOptions.ETO_NO_RECT:
            bounds = readRectL(stream)

        if options & ExtTextOutOptions.ETO_SMALL_CHARS:
            text = decodeANSI(readBytes(stream, cChars))
        else:
            text = decodeUTF16LE(readBytes(stream, cChars * 2))

        return EmrSmallTextOut(stream.size.byteCount, reference, cChars, options, graphicsMode, exScale, eyScale,
                               bounds, text)

    def parsePath(self, stream: RecordStream):
        checkRecordType(stream, *self.paths)
        checkRecordSize(stream, 24)
        return self.paths[stream.recordType](stream.size.byteCount, readRectL(stream))

    def readRegion(self, stream: RecordStream, rgnDataSize: int):
        if rgnDataSize > stream.size.remainingBytes():
            raise UnexpectedPatternError(f"Region data size {rgnDataSize} exceeds the record size")

        return readRegionData(stream, rgnDataSize)

    def parseFillRgn(self, stream: RecordStream) -> EmrFillRgn:
        checkMinimumRecordSize(stream, 32)
        bounds = readRectL(stream)
        rgnDataSize = Uint32LE.unpack(stream)
        ihBrush = Uint32LE.unpack(stream)
        rgnData = self.readRegion(stream, rgnDataSize)
        return EmrFillRgn(stream.size.byteCount, bounds, rgnDataSize, ihBrush, rgnData)

    def parseFrameRgn(self, stream: RecordStream) -> EmrFrameRgn:
        checkMinimumRecordSize(stream, 40)
        bounds = readRectL(stream)
        rgnDataSize = Uint32LE.unpack(stream)
        ihBrush = Uint32LE.unpack(stream)
        width = Int32LE.unpack(stream)
        height = Int32LE.unpack(stream)
        rgnData = self.readRegion(stream, rgnDataSize)
        return EmrFrameRgn(stream.size.byteCount, bounds, rgnDataSize, ihBrush, width, height, rgnData)

    def parseInvertRgn(self, stream: RecordStream) -> EmrInvertRgn:
        checkMinimumRecordSize(stream, 28)
        bounds = readRectL(stream)
        rgnDataSize = Uint32LE.unpack(stream)
        return EmrInvertRgn(stream.size.byteCount, bounds, rgnDataSize, self.readRegion(stream, rgnDataSize))

    def parsePaintRgn(self, stream: RecordStream) -> EmrPaintRgn:
        checkMinimumRecordSize(stream, 28)
        bounds = readRectL(stream)
        rgnDataSize = Uint32LE.unpack(stream)
        return EmrPaintRgn(stream.size.byteCount, bounds, rgnDataSize, self.readRegion(stream, rgnDataSize))

    def parseGradientFill(self, stream: RecordStream) -> EmrGradientFill:
        checkMinimumRecordSize(stream, 36)
        bounds = readRectL(stream)
        nVer = Uint32LE.unpack(stream)
        nTri = Uint32LE.unpack(stream)
        gradientFillMode = parseEnum(GradientFill, Uint32LE.unpack(stream))

        checkArrayFits(stream, "TriVertex array", nVer, 16)
        vertexObjects = [readTriVertex(stream) for _ in range(nVer)]

        if gradientFillMode == GradientFill.GRADIENT_FILL_TRIANGLE:
            checkArrayFits(stream, "GradientTriangle array", nTri, 12)
            gradientObjects = [readGradientTriangle(stream) for _ in range(nTri)]
        else:
            checkArrayFits(stream, "GradientRectangle array", nTri, 8)
            gradientObjects = [readGradientRectangle(stream) for _ in range(nTri)]

        for gradient in gradientObjects:
            indices = [gradient.vertex1, gradient.vertex2, gradient.vertex3] \
                if gradientFillMode == GradientFill.GRADIENT_FILL_TRIANGLE \
                else [gradient.upperLeft, gradient.lowerRight]

            if any(index >= nVer for index in indices):
                raise UnexpectedPatternError(f"Gradient object refers to a vertex outside of the {nVer} vertices")

        return EmrGradientFill(stream.size.byteCount, bounds, nVer, nTri, gradientFillMode, vertexObjects,
                               gradientObjects)

    def parseLineTo(self, stream: RecordStream) -> EmrLineTo:
        checkRecordSize(stream, 16)
        return EmrLineTo(stream.size.byteCount, readPointL(stream))

    def parseSetPixelV(self, stream: RecordStream) -> EmrSetPixelV:
        checkRecordSize(stream, 20)
        pixel = readPointL(stream)
        return EmrSetPixelV(stream.size.byteCount, pixel, readColorRef(stream))

    def parsePoly(self, stream: RecordStream):
        checkRecordType(stream, *self.polys)
        checkMinimumRecordSize(stream, 28)
        recordClass, pointSize = self.polys[stream.recordType]
        bounds = readRectL(stream)
        count = Uint32LE.unpack(stream)
        points = self.readPoints(stream, count, pointSize)
        return recordClass(stream.size.byteCount, bounds, points)

    def parsePolyPoly(self, stream: RecordStream):
        checkRecordType(stream, *self.polyPolys)
        checkMinimumRecordSize(stream, 32)
        recordClass, pointSize = self.polyPolys[stream.recordType]
        bounds = readRectL(stream)
        numberOfPolys = Uint32LE.unpack(stream)
        count = Uint32LE.unpack(stream)
        checkArrayFits(stream, "Polygon point count array", numberOfPolys, 4)
        polyPointCounts = [Uint32LE.unpack(stream) for _ in range(numberOfPolys)]

        if sum(polyPointCounts) != count:
            raise UnexpectedPatternError(f"Polygon point counts add up to {sum(polyPointCounts)}, "
                                         f"but the record holds {count} points")

        points = self.readPoints(stream, count, pointSize)
        return recordClass(stream.size.byteCount, bounds, polyPointCounts, points)

    def parsePolyDraw(self, stream: RecordStream):
        checkRecordType(stream, *self.polyDraws)
        checkMinimumRecordSize(stream, 28)
        recordClass, pointSize = self.polyDraws[stream.recordType]
        bounds = readRectL(stream)
        count = Uint32LE.unpack(stream)
        points = self.readPoints(stream, count, pointSize)
        checkArrayFits(stream, "Point type array", count, 1)
        types = [parseFlags(PointType, Uint8.unpack(stream)) for _ in range(count)]
        return recordClass(stream.size.byteCount, bounds, points, types)
