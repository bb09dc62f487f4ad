#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import logging
from typing import List, Optional

from pyemfplay.enum import BrushStyle, MapMode, ModifyWorldTransformMode, RegionMode, StockObject
from pyemfplay.exceptions import InvalidRecordError, UnexpectedGraphicsObjectError
from pyemfplay.gdi import LogBrushEx, LogColorSpace, LogFont, LogFontExDv, LogFontPanose, LogPalette, \
    LogPaletteEntry, LogPenEx, PatternBrush, PointL, RegionData, SizeL, XForm
from pyemfplay.logging import LOGGER_NAMES
from pyemfplay.player.context import EmfObjectTable, isStockObject, PlaybackDeviceContext
from pyemfplay.player.Player import Player
from pyemfplay.player.stock import getStockObject
from pyemfplay.record import EmrAbortPath, EmrBeginPath, EmrCreateBrushIndirect, EmrCreateColorSpace, \
    EmrCreateColorSpaceW, EmrCreateDIBPatternBrushPt, EmrCreateMonoBrush, EmrCreatePalette, EmrCreatePen, \
    EmrDeleteColorSpace, EmrDeleteObject, EmrEndPath, EmrExcludeClipRect, EmrExtCreateFontIndirectW, EmrExtCreatePen, \
    EmrExtSelectClipRgn, EmrForceUfiMapping, EmrHeader, EmrIntersectClipRect, EmrModifyWorldTransform, EmrMoveToEx, \
    EmrOffsetClipRgn, EmrPixelFormat, EmrResizePalette, EmrRestoreDC, EmrSaveDC, EmrScaleViewportExtEx, \
    EmrScaleWindowExtEx, EmrSelectObject, EmrSelectPalette, EmrSetArcDirection, EmrSetBkColor, EmrSetBkMode, \
    EmrSetBrushOrgEx, EmrSetColorAdjustment, EmrSetColorSpace, EmrSetIcmMode, EmrSetIcmProfileA, EmrSetIcmProfileW, \
    EmrSetLayout, EmrSetLinkedUfis, EmrSetMapMode, EmrSetMapperFlags, EmrSetMetaRgn, EmrSetMiterLimit, \
    EmrSetPaletteEntries, EmrSetPolyFillMode, EmrSetRop2, EmrSetStretchBltMode, EmrSetTextAlign, EmrSetTextColor, \
    EmrSetTextJustification, EmrSetViewportExtEx, EmrSetViewportOrgEx, EmrSetWindowExtEx, EmrSetWindowOrgEx, \
    EmrSetWorldTransform

# Size of one logical unit in millimeters, for the metric mapping modes.
METRIC_UNITS = {
    MapMode.MM_LOMETRIC: 0.1,
    MapMode.MM_HIMETRIC: 0.01,
    MapMode.MM_LOENGLISH: 0.254,
    MapMode.MM_HIENGLISH: 0.0254,
    MapMode.MM_TWIPS: 25.4 / 1440,
}


class DeviceContextPlayer(Player):
    """
    Player that keeps the playback device context and the object table up to date. Renderers extend it and read
    the state in their drawing handlers.
    """

    def __init__(self):
        super().__init__()
        self.log = logging.getLogger(LOGGER_NAMES.PLAYER)
        self.context = PlaybackDeviceContext()
        self.objectTable = EmfObjectTable(0)
        self.savedContexts: List[PlaybackDeviceContext] = []
        self.metafileHeader: Optional[EmrHeader] = None

    # Control records
    def header(self, record: EmrHeader):
        self.metafileHeader = record
        self.objectTable = EmfObjectTable(record.handles)
        self.context = PlaybackDeviceContext()
        self.savedContexts = []

        bounds = record.bounds
        regions = self.context.environment.regions
        regions.viewportExtent = SizeL(bounds.width, bounds.height)
        regions.viewportOrigin = PointL(bounds.left, bounds.top)
        regions.windowExtent = SizeL(bounds.width, bounds.height)
        regions.windowOrigin = PointL(bounds.left, bounds.top)
        self.updateTransformation()

    # Transformation
    def updateTransformation(self):
        """
        Recompute the logical to device transform after a change of mapping mode or extents.
        """
        mapMode = self.context.environment.drawing.mapMode

        if mapMode in [MapMode.MM_ISOTROPIC, MapMode.MM_ANISOTROPIC]:
            self.context.applyTransformation()

            if mapMode == MapMode.MM_ISOTROPIC:
                sx, sy = self.context.xform.m11, self.context.xform.m22
                magnitude = min(abs(sx), abs(sy))
                self.context.setScale(magnitude if sx >= 0 else -magnitude, magnitude if sy >= 0 else -magnitude)
        elif mapMode in METRIC_UNITS:
            pixelsPerMillimeter = self.getPixelsPerMillimeter()
            self.context.setScale(
                METRIC_UNITS[mapMode] * pixelsPerMillimeter[0],
                -METRIC_UNITS[mapMode] * pixelsPerMillimeter[1],
            )
        else:
            self.context.setScale(1.0, 1.0)

    def getPixelsPerMillimeter(self) -> (float, float):
        header = self.metafileHeader

        if header is None or header.millimeters.cx == 0 or header.millimeters.cy == 0:
            return 1.0, 1.0

        return header.device.cx / header.millimeters.cx, header.device.cy / header.millimeters.cy

    # Object creation records
    def createBrushIndirect(self, record: EmrCreateBrushIndirect):
        self.objectTable.set(record.ihBrush, record.logBrush)

    def createColorSpace(self, record: EmrCreateColorSpace):
        self.objectTable.set(record.ihCS, record.lcs)

    def createColorSpaceW(self, record: EmrCreateColorSpaceW):
        self.objectTable.set(record.ihCS, record.lcs)

    def createDIBPatternBrushPt(self, record: EmrCreateDIBPatternBrushPt):
        self.objectTable.set(record.ihBrush, PatternBrush(BrushStyle.BS_DIBPATTERNPT, record.bitmap, record.usage))

    def createMonoBrush(self, record: EmrCreateMonoBrush):
        self.objectTable.set(record.ihBrush, PatternBrush(BrushStyle.BS_PATTERN, record.bitmap, record.usage))

    def createPalette(self, record: EmrCreatePalette):
        self.objectTable.set(record.ihPal, record.logPalette)

    def createPen(self, record: EmrCreatePen):
        self.objectTable.set(record.ihPen, LogPenEx.fromLogPen(record.logPen))

    def extCreateFontIndirectW(self, record: EmrExtCreateFontIndirectW):
        self.objectTable.set(record.ihFonts, record.elw)

    def extCreatePen(self, record: EmrExtCreatePen):
        self.objectTable.set(record.ihPen, record.elp)

    # Object manipulation records
    def getGraphicsObject(self, index: int) -> object:
        """
        Get a stock object or an object of the table.
        :raises UnexpectedGraphicsObjectError: when the index refers to no object.
        """
        if isStockObject(index):
            try:
                stockObject = StockObject(index)
            except ValueError:
                raise UnexpectedGraphicsObjectError(f"Unknown stock object {index:#x}")

            return getStockObject(stockObject, self.context.selected)

        graphicsObject = self.objectTable.get(index)

        if graphicsObject is None:
            raise UnexpectedGraphicsObjectError(f"Object table index {index} is empty")

        return graphicsObject

    def selectObject(self, record: EmrSelectObject):
        graphicsObject = self.getGraphicsObject(record.ihObject)
        selected = self.context.selected

        if isinstance(graphicsObject, LogBrushEx):
            selected.brush = graphicsObject
        elif isinstance(graphicsObject, LogPenEx):
            selected.pen = graphicsObject
        elif isinstance(graphicsObject, (LogFont, LogFontExDv, LogFontPanose)):
            selected.font = graphicsObject
        elif isinstance(graphicsObject, LogPalette):
            selected.palette = graphicsObject
        elif isinstance(graphicsObject, LogColorSpace):
            selected.colorSpace = graphicsObject
        else:
            raise UnexpectedGraphicsObjectError(f"Cannot select graphics object {graphicsObject!r}")

    def selectPalette(self, record: EmrSelectPalette):
        palette = self.getGraphicsObject(record.ihPal)

        if not isinstance(palette, LogPalette):
            raise UnexpectedGraphicsObjectError(f"Object {record.ihPal} is not a palette: {palette!r}")

        self.context.selected.palette = palette

    def deleteObject(self, record: EmrDeleteObject):
        self.objectTable.delete(record.ihObject)

    def deleteColorSpace(self, record: EmrDeleteColorSpace):
        self.objectTable.delete(record.ihCS)

    def setColorSpace(self, record: EmrSetColorSpace):
        self.context.selected.colorSpace = self.getGraphicsObject(record.ihCS)

    def getPalette(self, index: int) -> LogPalette:
        palette = self.objectTable.get(index)

        if not isinstance(palette, LogPalette):
            raise UnexpectedGraphicsObjectError(f"Object {index} is not a palette: {palette!r}")

        return palette

    def setPaletteEntries(self, record: EmrSetPaletteEntries):
        palette = self.getPalette(record.ihPal)
        end = record.start + len(record.entries)

        if end > palette.numberOfEntries:
            raise InvalidRecordError(
                f"Palette entries {record.start}..{end} do not fit in a palette of {palette.numberOfEntries} entries"
            )

        palette.entries[record.start:end] = record.entries

    def resizePalette(self, record: EmrResizePalette):
        palette = self.getPalette(record.ihPal)
        entries = palette.entries[:record.numberOfEntries]
        entries += [LogPaletteEntry(0, 0, 0, 0) for _ in range(record.numberOfEntries - len(entries))]
        palette.entries = entries

    # State records
    def saveDC(self, record: EmrSaveDC):
        self.savedContexts.append(self.context.copy())

    def restoreDC(self, record: EmrRestoreDC):
        count = -record.savedDC

        if count > len(self.savedContexts):
            raise InvalidRecordError(
                f"Cannot restore device context {record.savedDC}, only {len(self.savedContexts)} contexts are saved"
            )

        for _ in range(count):
            self.context = self.savedContexts.pop()

    def moveToEx(self, record: EmrMoveToEx):
        self.context.environment.drawing.currentPosition = record.offset

    def setArcDirection(self, record: EmrSetArcDirection):
        self.context.environment.drawing.arcDirection = record.arcDirection

    def setBkColor(self, record: EmrSetBkColor):
        self.context.environment.drawing.backgroundColor = record.color

    def setBkMode(self, record: EmrSetBkMode):
        self.context.environment.drawing.backgroundMode = record.backgroundMode

    def setBrushOrgEx(self, record: EmrSetBrushOrgEx):
        self.context.environment.drawing.brushOrigin = record.origin

    def setLayout(self, record: EmrSetLayout):
        self.context.environment.drawing.layoutMode = record.layoutMode

    def setMapMode(self, record: EmrSetMapMode):
        self.context.environment.drawing.mapMode = record.mapMode
        self.updateTransformation()

    def setMiterLimit(self, record: EmrSetMiterLimit):
        self.context.environment.drawing.miterLimit = record.miterLimit

    def setPolyFillMode(self, record: EmrSetPolyFillMode):
        self.context.environment.drawing.polyFillMode = record.polygonFillMode

    def setRop2(self, record: EmrSetRop2):
        self.context.environment.drawing.rop2 = record.rop2Mode

    def setStretchBltMode(self, record: EmrSetStretchBltMode):
        self.context.environment.drawing.stretchMode = record.stretchMode

    def setTextColor(self, record: EmrSetTextColor):
        self.context.environment.drawing.textColor = record.color

    def setColorAdjustment(self, record: EmrSetColorAdjustment):
        self.context.environment.colors.colorAdjustment = record.colorAdjustment

    def setIcmMode(self, record: EmrSetIcmMode):
        self.context.environment.colors.icmMode = record.icmMode

    def setIcmProfileA(self, record: EmrSetIcmProfileA):
        self.setIcmProfile(record)

    def setIcmProfileW(self, record: EmrSetIcmProfileW):
        self.setIcmProfile(record)

    def setIcmProfile(self, record):
        colors = self.context.environment.colors
        colors.colorProfileName = record.name
        colors.colorProfile = record.data

    def pixelFormat(self, record: EmrPixelFormat):
        self.context.environment.colors.pixelFormat = record.pfd

    def forceUfiMapping(self, record: EmrForceUfiMapping):
        self.context.environment.text.forceUfiMapping = record.ufi

    def setLinkedUfis(self, record: EmrSetLinkedUfis):
        self.context.environment.text.linkedUfis = list(record.ufis)

    def setMapperFlags(self, record: EmrSetMapperFlags):
        self.context.environment.text.mapperFlags = record.flags

    def setTextAlign(self, record: EmrSetTextAlign):
        self.context.environment.text.textAlignment = record.textAlignmentMode

    def setTextJustification(self, record: EmrSetTextJustification):
        self.context.environment.text.textJustification = (record.nBreakExtra, record.nBreakCount)

    def setViewportExtEx(self, record: EmrSetViewportExtEx):
        self.context.environment.regions.viewportExtent = record.extent
        self.updateTransformation()

    def setViewportOrgEx(self, record: EmrSetViewportOrgEx):
        self.context.environment.regions.viewportOrigin = record.origin

    def setWindowExtEx(self, record: EmrSetWindowExtEx):
        self.context.environment.regions.windowExtent = record.extent
        self.updateTransformation()

    def setWindowOrgEx(self, record: EmrSetWindowOrgEx):
        self.context.environment.regions.windowOrigin = record.origin

    def scaleViewportExtEx(self, record: EmrScaleViewportExtEx):
        regions = self.context.environment.regions
        regions.viewportExtent = self.scaleExtent(regions.viewportExtent, record)
        self.updateTransformation()

    def scaleWindowExtEx(self, record: EmrScaleWindowExtEx):
        regions = self.context.environment.regions
        regions.windowExtent = self.scaleExtent(regions.windowExtent, record)
        self.updateTransformation()

    @staticmethod
    def scaleExtent(extent: SizeL, record) -> SizeL:
        # Scaled extents are truncated toward 0.
        return SizeL(int(extent.cx * record.xNum / record.xDenom), int(extent.cy * record.yNum / record.yDenom))

    # Clipping records
    def excludeClipRect(self, record: EmrExcludeClipRect):
        regions = self.context.environment.regions

        if regions.clipping is None:
            # Without a clipping region, the metafile bounds stand for the whole drawing surface.
            if self.metafileHeader is None:
                self.log.debug("Ignoring EMR_EXCLUDECLIPRECT played before the metafile header")
                return

            bounds = self.metafileHeader.bounds
            regions.clipping = RegionData.fromRects([bounds.normalized()])

        regions.clipping = regions.clipping.exclude(record.clip)

    def intersectClipRect(self, record: EmrIntersectClipRect):
        regions = self.context.environment.regions

        if regions.clipping is None:
            regions.clipping = RegionData.fromRects([record.clip.normalized()])
        else:
            regions.clipping = regions.clipping.intersect(record.clip)

    def extSelectClipRgn(self, record: EmrExtSelectClipRgn):
        regions = self.context.environment.regions

        if record.regionMode == RegionMode.RGN_COPY:
            regions.clipping = record.rgnData
        elif record.rgnData is not None:
            self.log.debug("Clipping region combination %(mode)s replaces the clipping region",
                           {"mode": record.regionMode.name})
            regions.clipping = record.rgnData

    def offsetClipRgn(self, record: EmrOffsetClipRgn):
        clipping = self.context.environment.regions.clipping

        if clipping is None:
            return

        for rect in clipping.rects:
            rect.left += record.offset.x
            rect.right += record.offset.x
            rect.top += record.offset.y
            rect.bottom += record.offset.y

    def setMetaRgn(self, record: EmrSetMetaRgn):
        regions = self.context.environment.regions
        regions.metaClipping = regions.clipping
        regions.clipping = None

    # Path bracket records
    def beginPath(self, record: EmrBeginPath):
        self.context.environment.drawing.pathBracket = True

    def endPath(self, record: EmrEndPath):
        self.context.environment.drawing.pathBracket = False

    def abortPath(self, record: EmrAbortPath):
        self.context.environment.drawing.pathBracket = False

    # Transform records
    def setWorldTransform(self, record: EmrSetWorldTransform):
        self.context.worldTransform = record.xform

    def modifyWorldTransform(self, record: EmrModifyWorldTransform):
        mode = record.modifyWorldTransformMode
        current = self.context.worldTransform

        if mode == ModifyWorldTransformMode.MWT_IDENTITY:
            self.context.worldTransform = XForm.identity()
        elif mode == ModifyWorldTransformMode.MWT_LEFTMULTIPLY:
            self.context.worldTransform = record.xform.multiply(current)
        elif mode == ModifyWorldTransformMode.MWT_RIGHTMULTIPLY:
            self.context.worldTransform = current.multiply(record.xform)
        else:
            self.context.worldTransform = record.xform
