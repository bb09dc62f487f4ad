#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

"""
Conversion of device context state (brushes, pens, fonts, alignment) to SVG attributes.
"""

import base64
import logging
from io import BytesIO
from typing import List, Optional, Tuple
from xml.etree.ElementTree import Element, SubElement

from PIL import Image

from pyemfplay.enum import BrushStyle, HatchStyle, PenEndCap, PenJoin, PenStyle, PolygonFillMode, TextAlignmentMode
from pyemfplay.gdi import ColorRef, DeviceIndependentBitmap, LogBrushEx, LogFont, LogPenEx, PatternBrush
from pyemfplay.logging import LOGGER_NAMES
from pyemfplay.player.context import PlaybackDeviceContext

LOG = logging.getLogger(LOGGER_NAMES.PLAYER_SVG)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
URI_PREFIX_PNG = "data:image/png;base64,"

# Size of a hatch pattern tile, in output units before scaling.
HATCH_SIZE = 10

# Font height used when a logical font leaves the height to the font mapper.
DEFAULT_FONT_HEIGHT = 12

# Line segments of each hatch style, in fractions of the tile size.
HATCH_LINES = {
    HatchStyle.HS_HORIZONTAL: [(0, 0, 1, 0)],
    HatchStyle.HS_VERTICAL: [(0, 0, 0, 1)],
    HatchStyle.HS_FDIAGONAL: [(0, 1, 1, 0)],
    HatchStyle.HS_BDIAGONAL: [(0, 0, 1, 1)],
    HatchStyle.HS_CROSS: [(0, 0, 1, 0), (0, 0, 0, 1)],
    HatchStyle.HS_DIAGCROSS: [(0, 0, 1, 1), (1, 0, 0, 1)],
}


def colorFromColorRef(color: ColorRef) -> str:
    return color.toHex()


def urlString(link: str) -> str:
    return f"url(#{link})"


def formatNumber(value: float) -> str:
    """
    Format a coordinate without a trailing ".0" for integral values.
    """
    if float(value).is_integer():
        return str(int(value))

    return f"{value:.3f}".rstrip("0").rstrip(".")


def polygonFillRule(mode: PolygonFillMode) -> str:
    return "nonzero" if mode == PolygonFillMode.WINDING else "evenodd"


def textAnchor(mode: TextAlignmentMode) -> str:
    # TA_CENTER contains the TA_RIGHT bit.
    if mode & TextAlignmentMode.TA_CENTER == TextAlignmentMode.TA_CENTER:
        return "middle"
    elif mode & TextAlignmentMode.TA_RIGHT:
        return "end"

    return "start"


def dominantBaseline(mode: TextAlignmentMode) -> str:
    if mode & TextAlignmentMode.TA_BASELINE == TextAlignmentMode.TA_BASELINE:
        return "alphabetic"
    elif mode & TextAlignmentMode.TA_BOTTOM:
        return "text-after-edge"

    return "text-before-edge"


def bitmapToDataURI(bitmap: DeviceIndependentBitmap,
                    crop: Optional[Tuple[int, int, int, int]] = None) -> Optional[str]:
    """
    Convert a device-independent bitmap to a PNG data URI.
    :param bitmap: the bitmap to convert.
    :param crop: the (left, top, right, bottom) box of the bitmap to keep.
    :return: the URI, or None if the bitmap cannot be decoded.
    """
    if bitmap.header is None:
        return None

    try:
        with Image.open(BytesIO(bitmap.toBMP())) as image:
            if crop is not None and crop != (0, 0, image.width, image.height):
                image = image.crop(crop)

            buffer = BytesIO()
            image.save(buffer, "PNG")
    except (Image.DecompressionBombError, OSError, ValueError) as e:
        LOG.warning("Cannot convert bitmap to PNG: %(error)s", {"error": e})
        return None

    return URI_PREFIX_PNG + base64.b64encode(buffer.getvalue()).decode("ascii")


class Fill:
    """
    Fill paint of a shape: either a plain value (a color or "none") or a pattern that must be added to the
    definitions of the document.
    """

    def __init__(self, value: str, pattern: Optional[Element] = None):
        self.value = value
        self.pattern = pattern

    @staticmethod
    def fromBrush(context: PlaybackDeviceContext, brush: LogBrushEx, patternId: str) -> 'Fill':
        """
        :param context: the device context, for the text and background colors and the scale.
        :param brush: the brush to convert.
        :param patternId: identifier to give to the pattern, if one is needed.
        """
        drawing = context.environment.drawing

        if isinstance(brush, PatternBrush):
            return Fill.fromPatternBrush(brush, patternId)
        elif brush.brushStyle == BrushStyle.BS_NULL:
            return Fill("none")
        elif brush.brushStyle != BrushStyle.BS_HATCHED:
            return Fill(colorFromColorRef(brush.color))

        hatch = brush.brushHatch

        if hatch in [HatchStyle.HS_SOLIDCLR, HatchStyle.HS_DITHEREDCLR]:
            return Fill(colorFromColorRef(brush.color))
        elif hatch in [HatchStyle.HS_SOLIDTEXTCLR, HatchStyle.HS_DITHEREDTEXTCLR]:
            return Fill(colorFromColorRef(drawing.textColor))
        elif hatch in [HatchStyle.HS_SOLIDBKCLR, HatchStyle.HS_DITHEREDBKCLR]:
            return Fill(colorFromColorRef(drawing.backgroundColor))

        size = max(int(HATCH_SIZE * context.scale()), 1)
        pattern = Element("pattern", {
            "id": patternId,
            "patternUnits": "userSpaceOnUse",
            "patternContentUnits": "userSpaceOnUse",
            "x": "0",
            "y": "0",
            "width": str(size),
            "height": str(size),
        })

        data = " ".join(
            f"M {x1 * size} {y1 * size} L {x2 * size} {y2 * size}" for x1, y1, x2, y2 in HATCH_LINES[hatch]
        )
        SubElement(pattern, "path", {"stroke": colorFromColorRef(brush.color), "d": data})
        return Fill(urlString(patternId), pattern)

    @staticmethod
    def fromPatternBrush(brush: PatternBrush, patternId: str) -> 'Fill':
        uri = bitmapToDataURI(brush.bitmap)

        if uri is None:
            return Fill("none")

        width, height = str(brush.bitmap.width), str(brush.bitmap.height)
        pattern = Element("pattern", {
            "id": patternId,
            "patternUnits": "userSpaceOnUse",
            "x": "0",
            "y": "0",
            "width": width,
            "height": height,
        })
        SubElement(pattern, "image", {"href": uri, "width": width, "height": height})
        return Fill(urlString(patternId), pattern)


class Stroke:
    """
    Stroke attributes of an SVG element, computed from a logical pen.
    """

    def __init__(self):
        self.color = ColorRef.black()
        self.width = 1
        self.opacity = 1.0
        self.lineCap = "butt"
        self.dashArray = "none"
        self.lineJoin = "miter"

    @staticmethod
    def fromPen(pen: LogPenEx) -> 'Stroke':
        stroke = Stroke()

        if pen.brushStyle in [BrushStyle.BS_DIBPATTERN, BrushStyle.BS_DIBPATTERNPT]:
            stroke.opacity = 0.0
        elif pen.brushStyle == BrushStyle.BS_NULL:
            stroke.width = 0
            stroke.opacity = 0.0
            return stroke
        elif pen.color is not None:
            stroke.color = pen.color

        stroke.width = max(pen.width, 1)
        width = stroke.width
        lineStyle = pen.lineStyle

        if lineStyle == PenStyle.PS_DASH:
            stroke.dashArray = f"{width * 10} {width * 10}"
        elif lineStyle in [PenStyle.PS_DOT, PenStyle.PS_ALTERNATE]:
            stroke.dashArray = f"{width} {width * 10}"
        elif lineStyle == PenStyle.PS_DASHDOT:
            stroke.dashArray = f"{width * 10} {width * 2} {width} {width * 2}"
        elif lineStyle == PenStyle.PS_DASHDOTDOT:
            stroke.dashArray = f"{width * 10} {width * 2} {width} {width * 2} {width} {width * 2}"
        elif lineStyle == PenStyle.PS_USERSTYLE and pen.styleEntries:
            stroke.dashArray = " ".join(str(entry) for entry in pen.styleEntries)
        elif lineStyle == PenStyle.PS_NULL:
            stroke.opacity = 0.0
        elif lineStyle == PenStyle.PS_INSIDEFRAME:
            LOG.info("Pen style %(style)s is not implemented", {"style": lineStyle.name})

        if pen.endCap in [PenEndCap.PS_ENDCAP_SQUARE, PenEndCap.PS_ENDCAP_FLAT]:
            stroke.lineCap = "square"

        if pen.join == PenJoin.PS_JOIN_BEVEL:
            stroke.lineJoin = "bevel"
        elif pen.join == PenJoin.PS_JOIN_MITER:
            stroke.lineJoin = "miter"

        return stroke

    def setProps(self, context: PlaybackDeviceContext, element: Element):
        if self.opacity == 0.0:
            element.set("stroke", "none")
            return

        scale = context.scale()
        element.set("stroke", colorFromColorRef(self.color))
        element.set("stroke-width", str(max(int(self.width * scale), 1)))
        element.set("stroke-opacity", f"{self.opacity:.02f}")
        element.set("stroke-linecap", self.lineCap)
        element.set("stroke-linejoin", self.lineJoin)
        element.set("stroke-dasharray", self.dashArray)
        element.set("stroke-miterlimit", formatNumber(context.environment.drawing.miterLimit * scale))


def setFontProps(font: LogFont, context: PlaybackDeviceContext, element: Element, x: float, y: float) -> List[str]:
    """
    Set the font attributes of a text element.
    :return: the CSS declarations that have no attribute equivalent.
    """
    styles = []

    if font.italic:
        styles.append("font-style: italic;")

    decorations = []

    if font.underline:
        decorations.append("underline")

    if font.strikeOut:
        decorations.append("line-through")

    if decorations:
        styles.append(f"text-decoration: {' '.join(decorations)};")

    if font.orientation != 0:
        element.set("rotate", str(int(-font.orientation / 10)))

    if font.escapement != 0:
        element.set("transform", f"rotate({-font.escapement / 10}, {formatNumber(x)} {formatNumber(y)})")

    element.set("font-family", font.facename)
    height = abs(font.height) if font.height != 0 else DEFAULT_FONT_HEIGHT
    element.set("font-size", str(round(height * context.scale())))
    element.set("font-weight", str(font.weight))
    return styles
