#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.enum import RecordType
from pyemfplay.record import Record, EmrAbortPath, EmrAlphaBlend, EmrAngleArc, EmrArc, EmrArcTo, EmrBeginPath, \
    EmrBitBlt, EmrChord, EmrCloseFigure, EmrColorCorrectPalette, EmrColorMatchToTargetW, EmrComment, \
    EmrCreateBrushIndirect, EmrCreateColorSpace, EmrCreateColorSpaceW, EmrCreateDIBPatternBrushPt, EmrCreateMonoBrush, \
    EmrCreatePalette, EmrCreatePen, EmrDeleteColorSpace, EmrDeleteObject, EmrDrawEscape, EmrEllipse, EmrEndPath, \
    EmrEof, EmrExcludeClipRect, EmrExtCreateFontIndirectW, EmrExtCreatePen, EmrExtEscape, EmrExtFloodFill, \
    EmrExtSelectClipRgn, EmrExtTextOutA, EmrExtTextOutW, EmrFillPath, EmrFillRgn, EmrFlattenPath, EmrForceUfiMapping, \
    EmrFrameRgn, EmrGlsBoundedRecord, EmrGlsRecord, EmrGradientFill, EmrHeader, EmrIntersectClipRect, EmrInvertRgn, \
    EmrLineTo, EmrMaskBlt, EmrModifyWorldTransform, EmrMoveToEx, EmrNamedEscape, EmrOffsetClipRgn, EmrPaintRgn, \
    EmrPie, EmrPixelFormat, EmrPlgBlt, EmrPolyBezier, EmrPolyBezier16, EmrPolyBezierTo, EmrPolyBezierTo16, \
    EmrPolyDraw, EmrPolyDraw16, EmrPolyPolygon, EmrPolyPolygon16, EmrPolyPolyline, EmrPolyPolyline16, EmrPolyTextOutA, \
    EmrPolyTextOutW, EmrPolygon, EmrPolygon16, EmrPolyline, EmrPolyline16, EmrPolylineTo, EmrPolylineTo16, \
    EmrRealizePalette, EmrRectangle, EmrResizePalette, EmrRestoreDC, EmrRoundRect, EmrSaveDC, EmrScaleViewportExtEx, \
    EmrScaleWindowExtEx, EmrSelectClipPath, EmrSelectObject, EmrSelectPalette, EmrSetArcDirection, EmrSetBkColor, \
    EmrSetBkMode, EmrSetBrushOrgEx, EmrSetColorAdjustment, EmrSetColorSpace, EmrSetDIBitsToDevice, EmrSetIcmMode, \
    EmrSetIcmProfileA, EmrSetIcmProfileW, EmrSetLayout, EmrSetLinkedUfis, EmrSetMapMode, EmrSetMapperFlags, \
    EmrSetMetaRgn, EmrSetMiterLimit, EmrSetPaletteEntries, EmrSetPixelV, EmrSetPolyFillMode, EmrSetRop2, \
    EmrSetStretchBltMode, EmrSetTextAlign, EmrSetTextColor, EmrSetTextJustification, EmrSetViewportExtEx, \
    EmrSetViewportOrgEx, EmrSetWindowExtEx, EmrSetWindowOrgEx, EmrSetWorldTransform, EmrSmallTextOut, EmrStretchBlt, \
    EmrStretchDIBits, EmrStrokeAndFillPath, EmrStrokePath, EmrTransparentBlt, EmrWidenPath


class Player:
    """
    Interface for objects that replay metafile records.

    The metafile calls onRecordReceived for each decoded record, which forwards the record to the method
    registered for its type. Once the whole metafile has been replayed, generate is called to produce the output.

    NOTE: Unimplemented methods will act as No-Op.
    """

    def __init__(self):
        self.handlers = {
            RecordType.EMR_ALPHABLEND: self.alphaBlend,
            RecordType.EMR_BITBLT: self.bitBlt,
            RecordType.EMR_MASKBLT: self.maskBlt,
            RecordType.EMR_PLGBLT: self.plgBlt,
            RecordType.EMR_SETDIBITSTODEVICE: self.setDIBitsToDevice,
            RecordType.EMR_STRETCHBLT: self.stretchBlt,
            RecordType.EMR_STRETCHDIBITS: self.stretchDIBits,
            RecordType.EMR_TRANSPARENTBLT: self.transparentBlt,
            RecordType.EMR_EXCLUDECLIPRECT: self.excludeClipRect,
            RecordType.EMR_EXTSELECTCLIPRGN: self.extSelectClipRgn,
            RecordType.EMR_INTERSECTCLIPRECT: self.intersectClipRect,
            RecordType.EMR_OFFSETCLIPRGN: self.offsetClipRgn,
            RecordType.EMR_SELECTCLIPPATH: self.selectClipPath,
            RecordType.EMR_SETMETARGN: self.setMetaRgn,
            RecordType.EMR_COMMENT: self.comment,
            RecordType.EMR_EOF: self.eof,
            RecordType.EMR_HEADER: self.header,
            RecordType.EMR_ANGLEARC: self.angleArc,
            RecordType.EMR_ARC: self.arc,
            RecordType.EMR_ARCTO: self.arcTo,
            RecordType.EMR_CHORD: self.chord,
            RecordType.EMR_ELLIPSE: self.ellipse,
            RecordType.EMR_EXTFLOODFILL: self.extFloodFill,
            RecordType.EMR_EXTTEXTOUTA: self.extTextOutA,
            RecordType.EMR_EXTTEXTOUTW: self.extTextOutW,
            RecordType.EMR_FILLPATH: self.fillPath,
            RecordType.EMR_FILLRGN: self.fillRgn,
            RecordType.EMR_FRAMERGN: self.frameRgn,
            RecordType.EMR_GRADIENTFILL: self.gradientFill,
            RecordType.EMR_INVERTRGN: self.invertRgn,
            RecordType.EMR_LINETO: self.lineTo,
            RecordType.EMR_PAINTRGN: self.paintRgn,
            RecordType.EMR_PIE: self.pie,
            RecordType.EMR_POLYBEZIER: self.polyBezier,
            RecordType.EMR_POLYBEZIER16: self.polyBezier16,
            RecordType.EMR_POLYBEZIERTO: self.polyBezierTo,
            RecordType.EMR_POLYBEZIERTO16: self.polyBezierTo16,
            RecordType.EMR_POLYDRAW: self.polyDraw,
            RecordType.EMR_POLYDRAW16: self.polyDraw16,
            RecordType.EMR_POLYGON: self.polygon,
            RecordType.EMR_POLYGON16: self.polygon16,
            RecordType.EMR_POLYLINE: self.polyline,
            RecordType.EMR_POLYLINE16: self.polyline16,
            RecordType.EMR_POLYLINETO: self.polylineTo,
            RecordType.EMR_POLYLINETO16: self.polylineTo16,
            RecordType.EMR_POLYPOLYGON: self.polyPolygon,
            RecordType.EMR_POLYPOLYGON16: self.polyPolygon16,
            RecordType.EMR_POLYPOLYLINE: self.polyPolyline,
            RecordType.EMR_POLYPOLYLINE16: self.polyPolyline16,
            RecordType.EMR_POLYTEXTOUTA: self.polyTextOutA,
            RecordType.EMR_POLYTEXTOUTW: self.polyTextOutW,
            RecordType.EMR_RECTANGLE: self.rectangle,
            RecordType.EMR_ROUNDRECT: self.roundRect,
            RecordType.EMR_SETPIXELV: self.setPixelV,
            RecordType.EMR_SMALLTEXTOUT: self.smallTextOut,
            RecordType.EMR_STROKEANDFILLPATH: self.strokeAndFillPath,
            RecordType.EMR_STROKEPATH: self.strokePath,
            RecordType.EMR_DRAWESCAPE: self.drawEscape,
            RecordType.EMR_EXTESCAPE: self.extEscape,
            RecordType.EMR_NAMEDESCAPE: self.namedEscape,
            RecordType.EMR_CREATEBRUSHINDIRECT: self.createBrushIndirect,
            RecordType.EMR_CREATECOLORSPACE: self.createColorSpace,
            RecordType.EMR_CREATECOLORSPACEW: self.createColorSpaceW,
            RecordType.EMR_CREATEDIBPATTERNBRUSHPT: self.createDIBPatternBrushPt,
            RecordType.EMR_CREATEMONOBRUSH: self.createMonoBrush,
            RecordType.EMR_CREATEPALETTE: self.createPalette,
            RecordType.EMR_CREATEPEN: self.createPen,
            RecordType.EMR_EXTCREATEFONTINDIRECTW: self.extCreateFontIndirectW,
            RecordType.EMR_EXTCREATEPEN: self.extCreatePen,
            RecordType.EMR_COLORCORRECTPALETTE: self.colorCorrectPalette,
            RecordType.EMR_DELETECOLORSPACE: self.deleteColorSpace,
            RecordType.EMR_DELETEOBJECT: self.deleteObject,
            RecordType.EMR_RESIZEPALETTE: self.resizePalette,
            RecordType.EMR_SELECTOBJECT: self.selectObject,
            RecordType.EMR_SELECTPALETTE: self.selectPalette,
            RecordType.EMR_SETCOLORSPACE: self.setColorSpace,
            RecordType.EMR_SETPALETTEENTRIES: self.setPaletteEntries,
            RecordType.EMR_GLSBOUNDEDRECORD: self.glsBoundedRecord,
            RecordType.EMR_GLSRECORD: self.glsRecord,
            RecordType.EMR_ABORTPATH: self.abortPath,
            RecordType.EMR_BEGINPATH: self.beginPath,
            RecordType.EMR_CLOSEFIGURE: self.closeFigure,
            RecordType.EMR_ENDPATH: self.endPath,
            RecordType.EMR_FLATTENPATH: self.flattenPath,
            RecordType.EMR_WIDENPATH: self.widenPath,
            RecordType.EMR_COLORMATCHTOTARGETW: self.colorMatchToTargetW,
            RecordType.EMR_FORCEUFIMAPPING: self.forceUfiMapping,
            RecordType.EMR_MOVETOEX: self.moveToEx,
            RecordType.EMR_PIXELFORMAT: self.pixelFormat,
            RecordType.EMR_REALIZEPALETTE: self.realizePalette,
            RecordType.EMR_RESTOREDC: self.restoreDC,
            RecordType.EMR_SAVEDC: self.saveDC,
            RecordType.EMR_SCALEVIEWPORTEXTEX: self.scaleViewportExtEx,
            RecordType.EMR_SCALEWINDOWEXTEX: self.scaleWindowExtEx,
            RecordType.EMR_SETARCDIRECTION: self.setArcDirection,
            RecordType.EMR_SETBKCOLOR: self.setBkColor,
            RecordType.EMR_SETBKMODE: self.setBkMode,
            RecordType.EMR_SETBRUSHORGEX: self.setBrushOrgEx,
            RecordType.EMR_SETCOLORADJUSTMENT: self.setColorAdjustment,
            RecordType.EMR_SETICMMODE: self.setIcmMode,
            RecordType.EMR_SETICMPROFILEA: self.setIcmProfileA,
            RecordType.EMR_SETICMPROFILEW: self.setIcmProfileW,
            RecordType.EMR_SETLAYOUT: self.setLayout,
            RecordType.EMR_SETLINKEDUFIS: self.setLinkedUfis,
            RecordType.EMR_SETMAPMODE: self.setMapMode,
            RecordType.EMR_SETMAPPERFLAGS: self.setMapperFlags,
            RecordType.EMR_SETMITERLIMIT: self.setMiterLimit,
            RecordType.EMR_SETPOLYFILLMODE: self.setPolyFillMode,
            RecordType.EMR_SETROP2: self.setRop2,
            RecordType.EMR_SETSTRETCHBLTMODE: self.setStretchBltMode,
            RecordType.EMR_SETTEXTALIGN: self.setTextAlign,
            RecordType.EMR_SETTEXTCOLOR: self.setTextColor,
            RecordType.EMR_SETTEXTJUSTIFICATION: self.setTextJustification,
            RecordType.EMR_SETVIEWPORTEXTEX: self.setViewportExtEx,
            RecordType.EMR_SETVIEWPORTORGEX: self.setViewportOrgEx,
            RecordType.EMR_SETWINDOWEXTEX: self.setWindowExtEx,
            RecordType.EMR_SETWINDOWORGEX: self.setWindowOrgEx,
            RecordType.EMR_MODIFYWORLDTRANSFORM: self.modifyWorldTransform,
            RecordType.EMR_SETWORLDTRANSFORM: self.setWorldTransform,
        }

    def onRecordReceived(self, record: Record):
        if record.recordType in self.handlers:
            self.handlers[record.recordType](record)

    def generate(self) -> bytes:
        """
        Produce the output of the replayed metafile.
        """
        return b""

    # Bitmap records
    def alphaBlend(self, record: EmrAlphaBlend):
        pass

    def bitBlt(self, record: EmrBitBlt):
        pass

    def maskBlt(self, record: EmrMaskBlt):
        pass

    def plgBlt(self, record: EmrPlgBlt):
        pass

    def setDIBitsToDevice(self, record: EmrSetDIBitsToDevice):
        pass

    def stretchBlt(self, record: EmrStretchBlt):
        pass

    def stretchDIBits(self, record: EmrStretchDIBits):
        pass

    def transparentBlt(self, record: EmrTransparentBlt):
        pass

    # Clipping records
    def excludeClipRect(self, record: EmrExcludeClipRect):
        pass

    def extSelectClipRgn(self, record: EmrExtSelectClipRgn):
        pass

    def intersectClipRect(self, record: EmrIntersectClipRect):
        pass

    def offsetClipRgn(self, record: EmrOffsetClipRgn):
        pass

    def selectClipPath(self, record: EmrSelectClipPath):
        pass

    def setMetaRgn(self, record: EmrSetMetaRgn):
        pass

    # Comment records
    def comment(self, record: EmrComment):
        pass

    # Control records
    def eof(self, record: EmrEof):
        """
        Called for the last record of the metafile.
        """
        pass

    def header(self, record: EmrHeader):
        """
        Called for the first record of the metafile, before any other record.
        """
        pass

    # Drawing records
    def angleArc(self, record: EmrAngleArc):
        pass

    def arc(self, record: EmrArc):
        pass

    def arcTo(self, record: EmrArcTo):
        pass

    def chord(self, record: EmrChord):
        pass

    def ellipse(self, record: EmrEllipse):
        pass

    def extFloodFill(self, record: EmrExtFloodFill):
        pass

    def extTextOutA(self, record: EmrExtTextOutA):
        pass

    def extTextOutW(self, record: EmrExtTextOutW):
        pass

    def fillPath(self, record: EmrFillPath):
        pass

    def fillRgn(self, record: EmrFillRgn):
        pass

    def frameRgn(self, record: EmrFrameRgn):
        pass

    def gradientFill(self, record: EmrGradientFill):
        pass

    def invertRgn(self, record: EmrInvertRgn):
        pass

    def lineTo(self, record: EmrLineTo):
        pass

    def paintRgn(self, record: EmrPaintRgn):
        pass

    def pie(self, record: EmrPie):
        pass

    def polyBezier(self, record: EmrPolyBezier):
        pass

    def polyBezier16(self, record: EmrPolyBezier16):
        pass

    def polyBezierTo(self, record: EmrPolyBezierTo):
        pass

    def polyBezierTo16(self, record: EmrPolyBezierTo16):
        pass

    def polyDraw(self, record: EmrPolyDraw):
        pass

    def polyDraw16(self, record: EmrPolyDraw16):
        pass

    def polygon(self, record: EmrPolygon):
        pass

    def polygon16(self, record: EmrPolygon16):
        pass

    def polyline(self, record: EmrPolyline):
        pass

    def polyline16(self, record: EmrPolyline16):
        pass

    def polylineTo(self, record: EmrPolylineTo):
        pass

    def polylineTo16(self, record: EmrPolylineTo16):
        pass

    def polyPolygon(self, record: EmrPolyPolygon):
        pass

    def polyPolygon16(self, record: EmrPolyPolygon16):
        pass

    def polyPolyline(self, record: EmrPolyPolyline):
        pass

    def polyPolyline16(self, record: EmrPolyPolyline16):
        pass

    def polyTextOutA(self, record: EmrPolyTextOutA):
        pass

    def polyTextOutW(self, record: EmrPolyTextOutW):
        pass

    def rectangle(self, record: EmrRectangle):
        pass

    def roundRect(self, record: EmrRoundRect):
        pass

    def setPixelV(self, record: EmrSetPixelV):
        pass

    def smallTextOut(self, record: EmrSmallTextOut):
        pass

    def strokeAndFillPath(self, record: EmrStrokeAndFillPath):
        pass

    def strokePath(self, record: EmrStrokePath):
        pass

    # Escape records
    def drawEscape(self, record: EmrDrawEscape):
        pass

    def extEscape(self, record: EmrExtEscape):
        pass

    def namedEscape(self, record: EmrNamedEscape):
        pass

    # Object creation records
    def createBrushIndirect(self, record: EmrCreateBrushIndirect):
        pass

    def createColorSpace(self, record: EmrCreateColorSpace):
        pass

    def createColorSpaceW(self, record: EmrCreateColorSpaceW):
        pass

    def createDIBPatternBrushPt(self, record: EmrCreateDIBPatternBrushPt):
        pass

    def createMonoBrush(self, record: EmrCreateMonoBrush):
        pass

    def createPalette(self, record: EmrCreatePalette):
        pass

    def createPen(self, record: EmrCreatePen):
        pass

    def extCreateFontIndirectW(self, record: EmrExtCreateFontIndirectW):
        pass

    def extCreatePen(self, record: EmrExtCreatePen):
        pass

    # Object manipulation records
    def colorCorrectPalette(self, record: EmrColorCorrectPalette):
        pass

    def deleteColorSpace(self, record: EmrDeleteColorSpace):
        pass

    def deleteObject(self, record: EmrDeleteObject):
        pass

    def resizePalette(self, record: EmrResizePalette):
        pass

    def selectObject(self, record: EmrSelectObject):
        pass

    def selectPalette(self, record: EmrSelectPalette):
        pass

    def setColorSpace(self, record: EmrSetColorSpace):
        pass

    def setPaletteEntries(self, record: EmrSetPaletteEntries):
        pass

    # OpenGL records
    def glsBoundedRecord(self, record: EmrGlsBoundedRecord):
        pass

    def glsRecord(self, record: EmrGlsRecord):
        pass

    # Path bracket records
    def abortPath(self, record: EmrAbortPath):
        pass

    def beginPath(self, record: EmrBeginPath):
        pass

    def closeFigure(self, record: EmrCloseFigure):
        pass

    def endPath(self, record: EmrEndPath):
        pass

    def flattenPath(self, record: EmrFlattenPath):
        pass

    def widenPath(self, record: EmrWidenPath):
        pass

    # State records
    def colorMatchToTargetW(self, record: EmrColorMatchToTargetW):
        pass

    def forceUfiMapping(self, record: EmrForceUfiMapping):
        pass

    def moveToEx(self, record: EmrMoveToEx):
        pass

    def pixelFormat(self, record: EmrPixelFormat):
        pass

    def realizePalette(self, record: EmrRealizePalette):
        pass

    def restoreDC(self, record: EmrRestoreDC):
        pass

    def saveDC(self, record: EmrSaveDC):
        pass

    def scaleViewportExtEx(self, record: EmrScaleViewportExtEx):
        pass

    def scaleWindowExtEx(self, record: EmrScaleWindowExtEx):
        pass

    def setArcDirection(self, record: EmrSetArcDirection):
        pass

    def setBkColor(self, record: EmrSetBkColor):
        pass

    def setBkMode(self, record: EmrSetBkMode):
        pass

    def setBrushOrgEx(self, record: EmrSetBrushOrgEx):
        pass

    def setColorAdjustment(self, record: EmrSetColorAdjustment):
        pass

    def setIcmMode(self, record: EmrSetIcmMode):
        pass

    def setIcmProfileA(self, record: EmrSetIcmProfileA):
        pass

    def setIcmProfileW(self, record: EmrSetIcmProfileW):
        pass

    def setLayout(self, record: EmrSetLayout):
        pass

    def setLinkedUfis(self, record: EmrSetLinkedUfis):
        pass

    def setMapMode(self, record: EmrSetMapMode):
        pass

    def setMapperFlags(self, record: EmrSetMapperFlags):
        pass

    def setMiterLimit(self, record: EmrSetMiterLimit):
        pass

    def setPolyFillMode(self, record: EmrSetPolyFillMode):
        pass

    def setRop2(self, record: EmrSetRop2):
        pass

    def setStretchBltMode(self, record: EmrSetStretchBltMode):
        pass

    def setTextAlign(self, record: EmrSetTextAlign):
        pass

    def setTextColor(self, record: EmrSetTextColor):
        pass

    def setTextJustification(self, record: EmrSetTextJustification):
        pass

    def setViewportExtEx(self, record: EmrSetViewportExtEx):
        pass

    def setViewportOrgEx(self, record: EmrSetViewportOrgEx):
        pass

    def setWindowExtEx(self, record: EmrSetWindowExtEx):
        pass

    def setWindowOrgEx(self, record: EmrSetWindowOrgEx):
        pass

    # Transform records
    def modifyWorldTransform(self, record: EmrModifyWorldTransform):
        pass

    def setWorldTransform(self, record: EmrSetWorldTransform):
        pass
