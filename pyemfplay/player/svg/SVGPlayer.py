#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import logging
import math
from typing import List, Optional, Sequence, Tuple, Union
from xml.etree.ElementTree import Element, SubElement, tostring

from pyemfplay.enum import ArcDirection, ExtTextOutOptions, GradientFill, PointType, \
    TernaryRasterOperation
from pyemfplay.exceptions import FailedGenerateError, InvalidBrushError
from pyemfplay.gdi import ColorRef, DeviceIndependentBitmap, EmrText, LogBrushEx, LogPenEx, PointL, PointS, RectL, \
    RegionData
from pyemfplay.logging import LOGGER_NAMES
from pyemfplay.player.DeviceContextPlayer import DeviceContextPlayer
from pyemfplay.player.svg.util import bitmapToDataURI, colorFromColorRef, dominantBaseline, Fill, formatNumber, \
    polygonFillRule, setFontProps, Stroke, SVG_NAMESPACE, textAnchor, urlString
from pyemfplay.record import EmrAbortPath, EmrAlphaBlend, EmrAngleArc, EmrArc, EmrArcBase, EmrArcTo, EmrBeginPath, \
    EmrBitBlt, EmrChord, EmrCloseFigure, EmrComment, EmrEllipse, EmrExtFloodFill, EmrExtTextOutA, EmrExtTextOutW, \
    EmrFillPath, EmrFillRgn, EmrFlattenPath, EmrFrameRgn, EmrGradientFill, EmrInvertRgn, EmrLineTo, EmrMaskBlt, \
    EmrMoveToEx, EmrPaintRgn, EmrPie, EmrPlgBlt, EmrPoly, EmrPolyBezier, EmrPolyBezier16, EmrPolyBezierTo, \
    EmrPolyBezierTo16, EmrPolyDraw, EmrPolyDraw16, EmrPolyDrawBase, EmrPolygon, EmrPolygon16, EmrPolyline, \
    EmrPolyline16, EmrPolylineTo, EmrPolylineTo16, EmrPolyPoly, EmrPolyPolygon, EmrPolyPolygon16, EmrPolyPolyline, \
    EmrPolyPolyline16, EmrPolyTextOutA, EmrPolyTextOutW, EmrRectangle, EmrRoundRect, EmrSelectClipPath, \
    EmrSetDIBitsToDevice, EmrSetPixelV, EmrSmallTextOut, EmrStretchBlt, EmrStretchDIBits, EmrStrokeAndFillPath, \
    EmrStrokePath, EmrTransparentBlt, EmrWidenPath, Record

LOG = logging.getLogger(LOGGER_NAMES.PLAYER_SVG)

Point = Union[PointL, PointS]


def logNotImplemented(record: Record):
    LOG.info("%(record)s: not implemented", {"record": record.recordType.name})


class SVGPlayer(DeviceContextPlayer):
    """
    Player that renders a metafile as an SVG document.

    Shapes are emitted as SVG paths in output coordinates. Between EMR_BEGINPATH and EMR_ENDPATH, shapes are added to
    the current path instead, which EMR_FILLPATH, EMR_STROKEPATH and EMR_STROKEANDFILLPATH then draw.
    Bitmaps are embedded as PNG images.

    Some of the records are not rendered and only logged:

        - clipping regions
        - raster operations other than copies (EMR_MASKBLT, EMR_PLGBLT, EMR_INVERTRGN)
        - flood fills
    """

    def __init__(self):
        super().__init__()
        self.definitions: List[Element] = []
        self.elements: List[Element] = []
        self.path: List[str] = []
        self.definitionCount = 0

    def generate(self) -> bytes:
        if self.metafileHeader is None:
            raise FailedGenerateError("Cannot generate an SVG document before the metafile header was played")

        bounds = self.metafileHeader.bounds
        width, height = bounds.width + 1, bounds.height + 1
        document = Element("svg", {
            "xmlns": SVG_NAMESPACE,
            "viewBox": f"{bounds.left} {bounds.top} {width} {height}",
            "width": str(width),
            "height": str(height),
        })

        if self.definitions:
            defs = SubElement(document, "defs")
            defs.extend(self.definitions)

        document.extend(self.elements)
        return tostring(document, encoding="unicode").encode("utf-8")

    # Rendering helpers.
    def nextDefinitionId(self, prefix: str) -> str:
        self.definitionCount += 1
        return f"{prefix}{self.definitionCount}"

    def devicePoint(self, x: float, y: float) -> str:
        dx, dy = self.context.toDevice(x, y)
        return f"{formatNumber(dx)} {formatNumber(dy)}"

    def moveToData(self, point: Point) -> str:
        return f"M {self.devicePoint(point.x, point.y)}"

    def lineToData(self, point: Point) -> str:
        return f"L {self.devicePoint(point.x, point.y)}"

    def bezierToData(self, points: Sequence[Point]) -> str:
        return "C " + " ".join(self.devicePoint(point.x, point.y) for point in points)

    def bezierSegments(self, points: Sequence[Point]) -> List[str]:
        # Points come in groups of three: two control points and an end point.
        return [self.bezierToData(points[index:index + 3]) for index in range(0, len(points) - 2, 3)]

    def polyData(self, points: Sequence[Point], close: bool) -> str:
        if len(points) == 0:
            return ""

        data = [self.moveToData(points[0])] + [self.lineToData(point) for point in points[1:]]

        if close:
            data.append("Z")

        return " ".join(data)

    def rectangleData(self, box: RectL) -> str:
        corners = [PointL(box.left, box.top), PointL(box.right, box.top), PointL(box.right, box.bottom),
                   PointL(box.left, box.bottom)]
        return self.polyData(corners, True)

    def radii(self, rx: float, ry: float) -> Tuple[float, float]:
        xform = self.context.worldTransform.multiply(self.context.xform)
        return abs(rx * math.hypot(xform.m11, xform.m12)), abs(ry * math.hypot(xform.m21, xform.m22))

    def sweepFlag(self, counterClockwise: bool) -> int:
        """
        SVG sweep flag for a logical drawing direction. Counterclockwise drawing in GDI's y-down logical space is
        the negative angle direction of SVG, unless the transform mirrors one axis.
        """
        xform = self.context.worldTransform.multiply(self.context.xform)
        mirrored = xform.m11 * xform.m22 - xform.m12 * xform.m21 < 0
        return int(counterClockwise == mirrored)

    def ellipseArc(self, cx: float, cy: float, rx: float, ry: float, startAngle: float, endAngle: float,
                   counterClockwise: bool) -> Tuple[str, str]:
        """
        Path data of an elliptic arc.
        :return: the start point of the arc and the arc command.
        """
        start = self.devicePoint(cx + rx * math.cos(startAngle), cy + ry * math.sin(startAngle))
        end = self.devicePoint(cx + rx * math.cos(endAngle), cy + ry * math.sin(endAngle))
        deviceRx, deviceRy = self.radii(rx, ry)
        sweep = self.sweepFlag(counterClockwise)

        if counterClockwise:
            extent = (startAngle - endAngle) % (2 * math.pi)
        else:
            extent = (endAngle - startAngle) % (2 * math.pi)

        radii = f"{formatNumber(deviceRx)} {formatNumber(deviceRy)}"

        if extent == 0:
            # Full ellipse, drawn as two half arcs since an arc to its own start point draws nothing.
            opposite = startAngle + math.pi
            middle = self.devicePoint(cx + rx * math.cos(opposite), cy + ry * math.sin(opposite))
            return start, f"A {radii} 0 0 {sweep} {middle} A {radii} 0 0 {sweep} {start}"

        largeArc = int(extent > math.pi)
        return start, f"A {radii} 0 {largeArc} {sweep} {end}"

    def boxArc(self, record: EmrArcBase) -> Tuple[str, str]:
        """
        Arc of the ellipse inscribed in a box, from the radial through the start point to the radial through the end
        point.
        """
        box = record.box
        cx, cy = (box.left + box.right) / 2, (box.top + box.bottom) / 2
        rx, ry = abs(box.right - box.left) / 2, abs(box.bottom - box.top) / 2
        startAngle = math.atan2((record.start.y - cy) / (ry or 1), (record.start.x - cx) / (rx or 1))
        endAngle = math.atan2((record.end.y - cy) / (ry or 1), (record.end.x - cx) / (rx or 1))
        counterClockwise = self.context.environment.drawing.arcDirection == ArcDirection.AD_COUNTERCLOCKWISE
        return self.ellipseArc(cx, cy, rx, ry, startAngle, endAngle, counterClockwise)

    def arcEndPoint(self, record: EmrArcBase) -> PointL:
        box = record.box
        cx, cy = (box.left + box.right) / 2, (box.top + box.bottom) / 2
        rx, ry = abs(box.right - box.left) / 2, abs(box.bottom - box.top) / 2
        angle = math.atan2((record.end.y - cy) / (ry or 1), (record.end.x - cx) / (rx or 1))
        return PointL(int(cx + rx * math.cos(angle)), int(cy + ry * math.sin(angle)))

    def fill(self, element: Element, brush: Optional[LogBrushEx] = None):
        brush = brush if brush is not None else self.context.selected.brush
        fill = Fill.fromBrush(self.context, brush, self.nextDefinitionId("pattern"))

        if fill.pattern is not None:
            self.definitions.append(fill.pattern)

        element.set("fill", fill.value)
        element.set("fill-rule", polygonFillRule(self.context.environment.drawing.polyFillMode))

    def stroke(self, element: Element, pen: Optional[LogPenEx] = None):
        pen = pen if pen is not None else self.context.selected.pen
        Stroke.fromPen(pen).setProps(self.context, element)

    def draw(self, data: str, fill: bool = True, stroke: bool = True) -> Optional[Element]:
        """
        Draw a shape with the selected brush and pen, or add it to the current path inside a path bracket.
        :param data: SVG path data of the shape, in output coordinates.
        :param fill: whether the shape is filled.
        :param stroke: whether the shape is outlined.
        """
        if data == "":
            return None

        if self.context.environment.drawing.pathBracket:
            self.path.append(data)
            return None

        element = Element("path", {"d": data})

        if fill:
            self.fill(element)
        else:
            element.set("fill", "none")

        if stroke:
            self.stroke(element)

        self.elements.append(element)
        return element

    def drawRegion(self, region: RegionData, brush: LogBrushEx):
        data = " ".join(self.rectangleData(rect) for rect in region.rects)

        if data == "":
            return

        element = Element("path", {"d": data})
        self.fill(element, brush)
        element.set("stroke", "none")
        self.elements.append(element)

    def drawBitmap(self, bitmap: Optional[DeviceIndependentBitmap], x: int, y: int, width: int, height: int,
                   crop: Optional[Tuple[int, int, int, int]] = None, opacity: Optional[float] = None):
        """
        Draw a bitmap stretched into a logical rectangle.
        """
        if bitmap is None:
            return

        uri = bitmapToDataURI(bitmap, crop)

        if uri is None:
            return

        left, top = self.context.toDevice(x, y)
        right, bottom = self.context.toDevice(x + width, y + height)
        element = Element("image", {
            "x": formatNumber(min(left, right)),
            "y": formatNumber(min(top, bottom)),
            "width": formatNumber(abs(right - left)),
            "height": formatNumber(abs(bottom - top)),
            "preserveAspectRatio": "none",
            "href": uri,
        })

        if opacity is not None and opacity < 1.0:
            element.set("opacity", f"{opacity:.02f}")

        self.elements.append(element)

    def drawText(self, reference: Point, string: str, dx: List[int], options: ExtTextOutOptions,
                 rectangle: Optional[RectL]):
        if options & ExtTextOutOptions.ETO_OPAQUE and rectangle is not None:
            background = Element("path", {"d": self.rectangleData(rectangle), "stroke": "none"})
            background.set("fill", colorFromColorRef(self.context.environment.drawing.backgroundColor))
            self.elements.append(background)

        if string == "":
            return

        drawing = self.context.environment.drawing
        alignment = self.context.environment.text.textAlignment
        x, y = self.context.toDevice(reference.x, reference.y)
        element = Element("text", {
            "x": formatNumber(x),
            "y": formatNumber(y),
            "fill": colorFromColorRef(drawing.textColor),
            "text-anchor": textAnchor(alignment),
            "dominant-baseline": dominantBaseline(alignment),
            "xml:space": "preserve",
        })

        if len(dx) >= len(string) > 1:
            # Place every character where the intercharacter spacing puts it.
            positions = []
            offset = 0

            for advance in dx[:len(string)]:
                positions.append(formatNumber(self.context.toDevice(reference.x + offset, reference.y)[0]))
                offset += advance

            element.set("x", " ".join(positions))

        styles = setFontProps(self.context.selected.font.logFont, self.context, element, x, y)

        if styles:
            element.set("style", " ".join(styles))

        element.text = string
        self.elements.append(element)

    def drawEmrText(self, text: EmrText):
        self.drawText(text.reference, text.string, text.dx, text.options, text.rectangle)

    # Bitmap records
    def alphaBlend(self, record: EmrAlphaBlend):
        crop = (record.xSrc, record.ySrc, record.xSrc + record.cxSrc, record.ySrc + record.cySrc)
        opacity = record.blendFunction.sourceConstantAlpha / 0xFF
        self.drawBitmap(record.bitmap, record.xDest, record.yDest, record.cxDest, record.cyDest, crop, opacity)

    def bitBlt(self, record: EmrBitBlt):
        if record.bitmap is not None:
            crop = (record.xSrc, record.ySrc, record.xSrc + record.cxDest, record.ySrc + record.cyDest)
            self.drawBitmap(record.bitmap, record.xDest, record.yDest, record.cxDest, record.cyDest, crop)
        else:
            self.patternBlt(record, record.cxDest, record.cyDest)

    def patternBlt(self, record: EmrBitBlt, width: int, height: int):
        """
        Blit without a source bitmap: only the selected brush and the destination take part in the operation.
        """
        operation = record.bitBltRasterOperation
        data = self.rectangleData(RectL(record.xDest, record.yDest, record.xDest + width, record.yDest + height))
        element = Element("path", {"d": data, "stroke": "none"})

        if operation == TernaryRasterOperation.PATCOPY:
            self.fill(element)
        elif operation == TernaryRasterOperation.BLACKNESS:
            element.set("fill", colorFromColorRef(ColorRef.black()))
        elif operation == TernaryRasterOperation.WHITENESS:
            element.set("fill", colorFromColorRef(ColorRef.white()))
        else:
            LOG.info("Raster operation %(operation)#x without source bitmap is not implemented",
                     {"operation": operation})
            return

        self.elements.append(element)

    def maskBlt(self, record: EmrMaskBlt):
        logNotImplemented(record)

    def plgBlt(self, record: EmrPlgBlt):
        logNotImplemented(record)

    def setDIBitsToDevice(self, record: EmrSetDIBitsToDevice):
        crop = (record.xSrc, record.ySrc, record.xSrc + record.cxSrc, record.ySrc + record.cySrc)
        self.drawBitmap(record.bitmap, record.xDest, record.yDest, record.cxSrc, record.cySrc, crop)

    def stretchBlt(self, record: EmrStretchBlt):
        if record.bitmap is not None:
            crop = (record.xSrc, record.ySrc, record.xSrc + record.cxSrc, record.ySrc + record.cySrc)
            self.drawBitmap(record.bitmap, record.xDest, record.yDest, record.cxDest, record.cyDest, crop)
        else:
            self.patternBlt(record, record.cxDest, record.cyDest)

    def stretchDIBits(self, record: EmrStretchDIBits):
        crop = (record.xSrc, record.ySrc, record.xSrc + record.cxSrc, record.ySrc + record.cySrc)
        self.drawBitmap(record.bitmap, record.xDest, record.yDest, record.cxDest, record.cyDest, crop)

    def transparentBlt(self, record: EmrTransparentBlt):
        crop = (record.xSrc, record.ySrc, record.xSrc + record.cxSrc, record.ySrc + record.cySrc)
        self.drawBitmap(record.bitmap, record.xDest, record.yDest, record.cxDest, record.cyDest, crop)

    # Clipping records
    def selectClipPath(self, record: EmrSelectClipPath):
        self.path = []
        logNotImplemented(record)

    # Comment records
    def comment(self, record: EmrComment):
        LOG.debug("Ignoring comment %(comment)r", {"comment": record})

    # Drawing records
    def angleArc(self, record: EmrAngleArc):
        cx, cy, radius = record.center.x, record.center.y, record.radius
        # Angles are counterclockwise from the x axis, with y pointing down.
        startAngle = -math.radians(record.startAngle)
        endAngle = -math.radians(record.startAngle + record.sweepAngle)
        counterClockwise = record.sweepAngle >= 0
        start, arc = self.ellipseArc(cx, cy, radius, radius, startAngle, endAngle, counterClockwise)

        current = self.context.environment.drawing.currentPosition
        self.draw(f"{self.moveToData(current)} L {start} {arc}", fill=False)
        self.context.environment.drawing.currentPosition = PointL(
            int(cx + radius * math.cos(endAngle)), int(cy + radius * math.sin(endAngle))
        )

    def arc(self, record: EmrArc):
        start, arc = self.boxArc(record)
        self.draw(f"M {start} {arc}", fill=False)

    def arcTo(self, record: EmrArcTo):
        start, arc = self.boxArc(record)
        current = self.context.environment.drawing.currentPosition
        self.draw(f"{self.moveToData(current)} L {start} {arc}", fill=False)
        self.context.environment.drawing.currentPosition = self.arcEndPoint(record)

    def chord(self, record: EmrChord):
        start, arc = self.boxArc(record)
        self.draw(f"M {start} {arc} Z")

    def pie(self, record: EmrPie):
        start, arc = self.boxArc(record)
        box = record.box
        center = self.devicePoint((box.left + box.right) / 2, (box.top + box.bottom) / 2)
        self.draw(f"M {center} L {start} {arc} Z")

    def ellipse(self, record: EmrEllipse):
        box = record.box
        cx, cy = (box.left + box.right) / 2, (box.top + box.bottom) / 2
        rx, ry = abs(box.right - box.left) / 2, abs(box.bottom - box.top) / 2
        counterClockwise = self.context.environment.drawing.arcDirection == ArcDirection.AD_COUNTERCLOCKWISE
        start, arc = self.ellipseArc(cx, cy, rx, ry, 0.0, 0.0, counterClockwise)
        self.draw(f"M {start} {arc} Z")

    def rectangle(self, record: EmrRectangle):
        self.draw(self.rectangleData(record.box))

    def roundRect(self, record: EmrRoundRect):
        box = record.box
        left, right = min(box.left, box.right), max(box.left, box.right)
        top, bottom = min(box.top, box.bottom), max(box.top, box.bottom)
        rx = min(abs(record.corner.cx) / 2, (right - left) / 2)
        ry = min(abs(record.corner.cy) / 2, (bottom - top) / 2)
        deviceRx, deviceRy = self.radii(rx, ry)
        radii = f"{formatNumber(deviceRx)} {formatNumber(deviceRy)}"
        sweep = self.sweepFlag(False)

        data = [
            f"M {self.devicePoint(left + rx, top)}",
            f"L {self.devicePoint(right - rx, top)}",
            f"A {radii} 0 0 {sweep} {self.devicePoint(right, top + ry)}",
            f"L {self.devicePoint(right, bottom - ry)}",
            f"A {radii} 0 0 {sweep} {self.devicePoint(right - rx, bottom)}",
            f"L {self.devicePoint(left + rx, bottom)}",
            f"A {radii} 0 0 {sweep} {self.devicePoint(left, bottom - ry)}",
            f"L {self.devicePoint(left, top + ry)}",
            f"A {radii} 0 0 {sweep} {self.devicePoint(left + rx, top)}",
            "Z",
        ]
        self.draw(" ".join(data))

    def extFloodFill(self, record: EmrExtFloodFill):
        logNotImplemented(record)

    def extTextOutA(self, record: EmrExtTextOutA):
        self.drawEmrText(record.text)

    def extTextOutW(self, record: EmrExtTextOutW):
        self.drawEmrText(record.text)

    def polyTextOutA(self, record: EmrPolyTextOutA):
        for text in record.texts:
            self.drawEmrText(text)

    def polyTextOutW(self, record: EmrPolyTextOutW):
        for text in record.texts:
            self.drawEmrText(text)

    def smallTextOut(self, record: EmrSmallTextOut):
        rectangle = None if record.options & ExtTextOutOptions.ETO_NO_RECT else record.bounds
        self.drawText(record.reference, record.text, [], record.options, rectangle)

    def fillRgn(self, record: EmrFillRgn):
        brush = self.getGraphicsObject(record.ihBrush)

        if not isinstance(brush, LogBrushEx):
            raise InvalidBrushError(f"Object {record.ihBrush} is not a brush: {brush!r}")

        self.drawRegion(record.rgnData, brush)

    def frameRgn(self, record: EmrFrameRgn):
        brush = self.getGraphicsObject(record.ihBrush)

        if not isinstance(brush, LogBrushEx):
            raise InvalidBrushError(f"Object {record.ihBrush} is not a brush: {brush!r}")

        pen = LogPenEx.solid(brush.color, max(record.width, record.height, 1))
        data = " ".join(self.rectangleData(rect) for rect in record.rgnData.rects)

        if data != "":
            element = Element("path", {"d": data, "fill": "none"})
            self.stroke(element, pen)
            self.elements.append(element)

    def invertRgn(self, record: EmrInvertRgn):
        logNotImplemented(record)

    def paintRgn(self, record: EmrPaintRgn):
        self.drawRegion(record.rgnData, self.context.selected.brush)

    def gradientFill(self, record: EmrGradientFill):
        vertices = record.vertexObjects

        if record.gradientFillMode == GradientFill.GRADIENT_FILL_TRIANGLE:
            for triangle in record.gradientObjects:
                corners = [vertices[triangle.vertex1], vertices[triangle.vertex2], vertices[triangle.vertex3]]
                data = self.polyData([PointL(vertex.x, vertex.y) for vertex in corners], True)
                # SVG has no triangle gradients: the triangle is painted with its first vertex color.
                self.elements.append(Element("path", {"d": data, "fill": corners[0].toHex(), "stroke": "none"}))

            return

        horizontal = record.gradientFillMode == GradientFill.GRADIENT_FILL_RECT_H

        for rectangle in record.gradientObjects:
            upperLeft, lowerRight = vertices[rectangle.upperLeft], vertices[rectangle.lowerRight]
            gradientId = self.nextDefinitionId("gradient")
            gradient = Element("linearGradient", {
                "id": gradientId,
                "x1": "0",
                "y1": "0",
                "x2": "1" if horizontal else "0",
                "y2": "0" if horizontal else "1",
            })
            SubElement(gradient, "stop", {"offset": "0", "stop-color": upperLeft.toHex()})
            SubElement(gradient, "stop", {"offset": "1", "stop-color": lowerRight.toHex()})
            self.definitions.append(gradient)

            box = RectL(upperLeft.x, upperLeft.y, lowerRight.x, lowerRight.y)
            self.elements.append(Element("path", {
                "d": self.rectangleData(box),
                "fill": urlString(gradientId),
                "stroke": "none",
            }))

    def lineTo(self, record: EmrLineTo):
        drawing = self.context.environment.drawing

        if drawing.pathBracket:
            if not self.path:
                self.path.append(self.moveToData(drawing.currentPosition))

            self.path.append(self.lineToData(record.point))
        else:
            self.draw(f"{self.moveToData(drawing.currentPosition)} {self.lineToData(record.point)}", fill=False)

        drawing.currentPosition = record.point

    def setPixelV(self, record: EmrSetPixelV):
        x, y = self.context.toDevice(record.pixel.x, record.pixel.y)
        self.elements.append(Element("rect", {
            "x": formatNumber(x),
            "y": formatNumber(y),
            "width": "1",
            "height": "1",
            "fill": colorFromColorRef(record.color),
        }))

    def drawPoly(self, record: EmrPoly, close: bool):
        self.draw(self.polyData(record.points, close), fill=close)

    def drawPolyBezier(self, record: EmrPoly):
        if len(record.points) == 0:
            return

        self.draw(" ".join([self.moveToData(record.points[0])] + self.bezierSegments(record.points[1:])), fill=False)

    def drawPolyTo(self, record: EmrPoly, bezier: bool):
        drawing = self.context.environment.drawing

        if len(record.points) == 0:
            return

        if bezier:
            segments = self.bezierSegments(record.points)
        else:
            segments = [self.lineToData(point) for point in record.points]

        if drawing.pathBracket:
            if not self.path:
                self.path.append(self.moveToData(drawing.currentPosition))

            self.path.extend(segments)
        else:
            self.draw(" ".join([self.moveToData(drawing.currentPosition)] + segments), fill=False)

        last = record.points[-1]
        drawing.currentPosition = PointL(last.x, last.y)

    def drawPolyPoly(self, record: EmrPolyPoly, close: bool):
        data = []
        start = 0

        for count in record.polyPointCounts:
            data.append(self.polyData(record.points[start:start + count], close))
            start += count

        self.draw(" ".join(part for part in data if part != ""), fill=close)

    def drawPolyDraw(self, record: EmrPolyDrawBase):
        drawing = self.context.environment.drawing
        data = [] if drawing.pathBracket and self.path else [self.moveToData(drawing.currentPosition)]
        index = 0

        while index < len(record.points):
            pointType = record.types[index]

            if pointType & PointType.PT_MOVETO == PointType.PT_MOVETO:
                data.append(self.moveToData(record.points[index]))
                index += 1
            elif pointType & PointType.PT_BEZIERTO:
                data.append(self.bezierToData(record.points[index:index + 3]))
                index += 3
            else:
                data.append(self.lineToData(record.points[index]))
                index += 1

            if record.types[index - 1] & PointType.PT_CLOSEFIGURE:
                data.append("Z")

        if record.points:
            last = record.points[-1]
            drawing.currentPosition = PointL(last.x, last.y)

        self.draw(" ".join(data), fill=False)

    def polyBezier(self, record: EmrPolyBezier):
        self.drawPolyBezier(record)

    def polyBezier16(self, record: EmrPolyBezier16):
        self.drawPolyBezier(record)

    def polyBezierTo(self, record: EmrPolyBezierTo):
        self.drawPolyTo(record, True)

    def polyBezierTo16(self, record: EmrPolyBezierTo16):
        self.drawPolyTo(record, True)

    def polyDraw(self, record: EmrPolyDraw):
        self.drawPolyDraw(record)

    def polyDraw16(self, record: EmrPolyDraw16):
        self.drawPolyDraw(record)

    def polygon(self, record: EmrPolygon):
        self.drawPoly(record, True)

    def polygon16(self, record: EmrPolygon16):
        self.drawPoly(record, True)

    def polyline(self, record: EmrPolyline):
        self.drawPoly(record, False)

    def polyline16(self, record: EmrPolyline16):
        self.drawPoly(record, False)

    def polylineTo(self, record: EmrPolylineTo):
        self.drawPolyTo(record, False)

    def polylineTo16(self, record: EmrPolylineTo16):
        self.drawPolyTo(record, False)

    def polyPolygon(self, record: EmrPolyPolygon):
        self.drawPolyPoly(record, True)

    def polyPolygon16(self, record: EmrPolyPolygon16):
        self.drawPolyPoly(record, True)

    def polyPolyline(self, record: EmrPolyPolyline):
        self.drawPolyPoly(record, False)

    def polyPolyline16(self, record: EmrPolyPolyline16):
        self.drawPolyPoly(record, False)

    def drawPath(self, fill: bool, stroke: bool):
        data = " ".join(self.path)
        self.path = []

        if data == "":
            return

        element = Element("path", {"d": data})

        if fill:
            self.fill(element)
        else:
            element.set("fill", "none")

        if stroke:
            self.stroke(element)
        else:
            element.set("stroke", "none")

        self.elements.append(element)

    def fillPath(self, record: EmrFillPath):
        self.drawPath(True, False)

    def strokeAndFillPath(self, record: EmrStrokeAndFillPath):
        self.drawPath(True, True)

    def strokePath(self, record: EmrStrokePath):
        self.drawPath(False, True)

    # Path bracket records
    def beginPath(self, record: EmrBeginPath):
        super().beginPath(record)
        self.path = []

    def abortPath(self, record: EmrAbortPath):
        super().abortPath(record)
        self.path = []

    def closeFigure(self, record: EmrCloseFigure):
        if self.path:
            self.path.append("Z")

    def flattenPath(self, record: EmrFlattenPath):
        logNotImplemented(record)

    def widenPath(self, record: EmrWidenPath):
        logNotImplemented(record)

    # State records
    def moveToEx(self, record: EmrMoveToEx):
        super().moveToEx(record)

        if self.context.environment.drawing.pathBracket:
            self.path.append(self.moveToData(record.offset))
