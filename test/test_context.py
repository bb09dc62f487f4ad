#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import unittest
from io import BytesIO

import emfdata
from pyemfplay.enum import MapMode, StockObject
from pyemfplay.exceptions import InvalidRecordError, UnexpectedGraphicsObjectError
from pyemfplay.gdi import ColorRef, LogBrushEx, PointL, PointS, RectL, SizeL
from pyemfplay.parser import EMFParser
from pyemfplay.player import DeviceContextPlayer, EmfObjectTable, PlaybackDeviceContext, REFERENCE_SELF, \
    getStockObject


class EmfObjectTableTest(unittest.TestCase):
    def test_init_hasSlotForSelfReference(self):
        table = EmfObjectTable(3)
        self.assertEqual(len(table), 4)
        self.assertIs(table.get(0), REFERENCE_SELF)
        self.assertIsNone(table.get(3))

    def test_set_selfReference_raisesUnexpectedGraphicsObject(self):
        table = EmfObjectTable(3)

        with self.assertRaises(UnexpectedGraphicsObjectError):
            table.set(0, LogBrushEx.solid(ColorRef.black()))

        self.assertIs(table.get(0), REFERENCE_SELF)

    def test_set_stockObject_raisesUnexpectedGraphicsObject(self):
        with self.assertRaises(UnexpectedGraphicsObjectError):
            EmfObjectTable(3).set(StockObject.WHITE_BRUSH, LogBrushEx.solid(ColorRef.black()))

    def test_set_outOfRange_raisesInvalidRecord(self):
        with self.assertRaises(InvalidRecordError):
            EmfObjectTable(3).set(4, LogBrushEx.solid(ColorRef.black()))

    def test_delete_emptiesSlot(self):
        table = EmfObjectTable(2)
        table.set(1, LogBrushEx.solid(ColorRef.black()))
        table.delete(1)
        self.assertIsNone(table.get(1))


class PlaybackDeviceContextTest(unittest.TestCase):
    def test_applyTransformation_scalesByExtents(self):
        context = PlaybackDeviceContext()
        context.environment.regions.viewportExtent = SizeL(2000, 1000)
        context.environment.regions.windowExtent = SizeL(1000, 1000)
        context.applyTransformation()

        self.assertEqual(context.xform.m11, 2.0)
        self.assertEqual(context.xform.m22, 1.0)
        self.assertEqual(context.transformPointL(PointL(100, 50)), PointL(200, 50))

    def test_applyTransformation_zeroWindowExtent_keepsScale(self):
        context = PlaybackDeviceContext()
        context.environment.regions.viewportExtent = SizeL(500, 500)
        context.environment.regions.windowExtent = SizeL(0, 0)
        context.applyTransformation()

        self.assertEqual(context.transformPoint(10, 20), (10, 20))

    def test_transformPointS_truncatesTowardZero(self):
        context = PlaybackDeviceContext()
        context.environment.regions.viewportExtent = SizeL(3, 3)
        context.environment.regions.windowExtent = SizeL(2, 2)
        context.applyTransformation()
        point = context.transformPointS(PointS(-3, 3))

        self.assertIsInstance(point, PointS)
        self.assertEqual(point, PointS(-4, 4))

    def test_copy_isIndependent(self):
        context = PlaybackDeviceContext()
        saved = context.copy()
        context.environment.drawing.textColor = ColorRef(1, 2, 3)

        self.assertEqual(saved.environment.drawing.textColor, ColorRef.black())


class DeviceContextPlayerTest(unittest.TestCase):
    def play(self, *records: bytes) -> DeviceContextPlayer:
        player = DeviceContextPlayer()
        stream = BytesIO(emfdata.metafile(*records))
        parser = EMFParser()

        while stream.tell() < len(stream.getvalue()):
            record = parser.parse(stream)

            if record is not None:
                player.onRecordReceived(record)

        return player

    def test_header_sizesObjectTable(self):
        player = self.play()
        self.assertEqual(len(player.objectTable), 5)

    def test_selectObject_createdBrush(self):
        player = self.play(emfdata.createBrushIndirect(1, 255, 0, 0), emfdata.selectObject(1))
        self.assertEqual(player.context.selected.brush, LogBrushEx.solid(ColorRef(255, 0, 0)))

    def test_selectObject_stockObject(self):
        player = self.play(emfdata.selectObject(StockObject.NULL_BRUSH))
        self.assertEqual(player.context.selected.brush, getStockObject(StockObject.NULL_BRUSH, player.context.selected))

    def test_selectObject_deletedObject_raisesUnexpectedGraphicsObject(self):
        with self.assertRaises(UnexpectedGraphicsObjectError):
            self.play(emfdata.createBrushIndirect(1, 255, 0, 0), emfdata.deleteObject(1), emfdata.selectObject(1))

    def test_restoreDC_restoresSavedState(self):
        player = self.play(
            emfdata.createBrushIndirect(1, 0, 0, 255),
            emfdata.saveDC(),
            emfdata.selectObject(1),
            emfdata.setMapMode(MapMode.MM_ANISOTROPIC),
            emfdata.restoreDC(-1),
        )

        self.assertEqual(player.context.selected.brush, LogBrushEx.solid(ColorRef.white()))
        self.assertEqual(player.context.environment.drawing.mapMode, MapMode.MM_TEXT)
        self.assertIsNotNone(player.objectTable.get(1))

    def test_restoreDC_withoutSave_raisesInvalidRecord(self):
        with self.assertRaises(InvalidRecordError):
            self.play(emfdata.restoreDC(-1))

    def test_anisotropic_usesExtents(self):
        player = self.play(
            emfdata.setMapMode(MapMode.MM_ANISOTROPIC),
            emfdata.setWindowExtEx(1000, 1000),
            emfdata.setViewportExtEx(2000, 1000),
        )

        self.assertEqual(player.context.transformPoint(100, 50), (200, 50))

    def test_isotropic_keepsAspectRatio(self):
        player = self.play(
            emfdata.setMapMode(MapMode.MM_ISOTROPIC),
            emfdata.setWindowExtEx(1000, 1000),
            emfdata.setViewportExtEx(2000, 1000),
        )

        self.assertEqual(player.context.transformPoint(100, 50), (100, 50))

    def test_scaleViewportExtEx_truncatesTowardZero(self):
        player = self.play(
            emfdata.setMapMode(MapMode.MM_ANISOTROPIC),
            emfdata.setViewportExtEx(-100, 100),
            emfdata.scaleViewportExtEx(1, 3, 1, 3),
        )

        self.assertEqual(player.context.environment.regions.viewportExtent, SizeL(-33, 33))

    def test_intersectClipRect_withoutClipping_setsRect(self):
        player = self.play(emfdata.intersectClipRect(20, 20, 10, 10))
        self.assertEqual(player.context.environment.regions.clipping.rects, [RectL(10, 10, 20, 20)])

    def test_intersectClipRect_intersectsCurrentClipping(self):
        player = self.play(emfdata.intersectClipRect(0, 0, 50, 50), emfdata.intersectClipRect(25, 25, 100, 100))
        clipping = player.context.environment.regions.clipping

        self.assertEqual(clipping.rects, [RectL(25, 25, 50, 50)])
        self.assertEqual(clipping.header.bounds, RectL(25, 25, 50, 50))

    def test_intersectClipRect_disjoint_emptiesClipping(self):
        player = self.play(emfdata.intersectClipRect(0, 0, 10, 10), emfdata.intersectClipRect(20, 20, 30, 30))
        clipping = player.context.environment.regions.clipping

        self.assertEqual(clipping.rects, [])
        self.assertEqual(clipping.header.countRects, 0)

    def test_excludeClipRect_withoutClipping_excludesFromBounds(self):
        player = self.play(emfdata.excludeClipRect(0, 0, 100, 50))
        self.assertEqual(player.context.environment.regions.clipping.rects, [RectL(0, 50, 100, 100)])

    def test_excludeClipRect_splitsOverlappedRect(self):
        player = self.play(emfdata.intersectClipRect(0, 0, 30, 30), emfdata.excludeClipRect(10, 10, 20, 20))
        clipping = player.context.environment.regions.clipping

        self.assertEqual(clipping.rects, [
            RectL(0, 0, 30, 10),
            RectL(0, 10, 10, 20),
            RectL(20, 10, 30, 20),
            RectL(0, 20, 30, 30),
        ])
        self.assertEqual(clipping.header.bounds, RectL(0, 0, 30, 30))

    def test_excludeClipRect_disjoint_keepsClipping(self):
        player = self.play(emfdata.intersectClipRect(0, 0, 10, 10), emfdata.excludeClipRect(50, 50, 60, 60))
        self.assertEqual(player.context.environment.regions.clipping.rects, [RectL(0, 0, 10, 10)])

    def test_excludeClipRect_beforeHeader_isIgnored(self):
        player = DeviceContextPlayer()
        player.onRecordReceived(EMFParser().parse(BytesIO(emfdata.excludeClipRect(0, 0, 10, 10))))
        self.assertIsNone(player.context.environment.regions.clipping)


if __name__ == "__main__":
    unittest.main()
