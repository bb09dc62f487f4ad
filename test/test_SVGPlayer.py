#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import unittest
from io import BytesIO
from xml.etree.ElementTree import fromstring

import emfdata
from pyemfplay.enum import BrushStyle, RecordType, StockObject
from pyemfplay.exceptions import FailedGenerateError
from pyemfplay.player import Metafile, SVGPlayer

NS = {"svg": "http://www.w3.org/2000/svg"}


class SVGPlayerTest(unittest.TestCase):
    def render(self, *records: bytes):
        output = Metafile(BytesIO(emfdata.metafile(*records))).play(SVGPlayer())
        return fromstring(output.decode("utf-8"))

    def test_generate_withoutHeader_raisesFailedGenerate(self):
        with self.assertRaises(FailedGenerateError):
            SVGPlayer().generate()

    def test_generate_usesHeaderBounds(self):
        document = self.render()
        self.assertEqual(document.get("viewBox"), "0 0 101 101")
        self.assertEqual(document.findall("svg:path", NS), [])

    def test_rectangle_usesSelectedBrushAndPen(self):
        document = self.render(
            emfdata.createBrushIndirect(1, 255, 0, 0),
            emfdata.selectObject(1),
            emfdata.rectangle(10, 10, 20, 20),
        )
        paths = document.findall("svg:path", NS)

        self.assertEqual(len(paths), 1)
        self.assertEqual(paths[0].get("d"), "M 10 10 L 20 10 L 20 20 L 10 20 Z")
        self.assertEqual(paths[0].get("fill"), "#FF0000")
        self.assertEqual(paths[0].get("stroke"), "#000000")

    def test_rectangle_nullBrush_isNotFilled(self):
        document = self.render(emfdata.selectObject(StockObject.NULL_BRUSH), emfdata.rectangle(10, 10, 20, 20))
        self.assertEqual(document.find("svg:path", NS).get("fill"), "none")

    def test_rectangle_hatchedBrush_addsPattern(self):
        document = self.render(
            emfdata.createBrushIndirect(1, 0, 0, 255, style=BrushStyle.BS_HATCHED),
            emfdata.selectObject(1),
            emfdata.rectangle(10, 10, 20, 20),
        )
        pattern = document.find("svg:defs/svg:pattern", NS)

        self.assertIsNotNone(pattern)
        self.assertEqual(document.find("svg:path", NS).get("fill"), f"url(#{pattern.get('id')})")

    def test_pathBracket_drawsOnFill(self):
        document = self.render(
            emfdata.record(RecordType.EMR_BEGINPATH),
            emfdata.lineTo(50, 50),
            emfdata.record(RecordType.EMR_ENDPATH),
            emfdata.record(RecordType.EMR_FILLPATH, emfdata.rectL(0, 0, 50, 50)),
        )
        paths = document.findall("svg:path", NS)

        self.assertEqual(len(paths), 1)
        self.assertEqual(paths[0].get("d"), "M 0 0 L 50 50")
        self.assertEqual(paths[0].get("stroke"), "none")

    def test_restoreDC_restoresBrush(self):
        document = self.render(
            emfdata.createBrushIndirect(1, 255, 0, 0),
            emfdata.saveDC(),
            emfdata.selectObject(1),
            emfdata.restoreDC(-1),
            emfdata.rectangle(10, 10, 20, 20),
        )
        self.assertEqual(document.find("svg:path", NS).get("fill"), "#FFFFFF")

    def test_stretchDIBits_addsPNGImage(self):
        # 2x2 24-bit bitmap, rows padded to 8 bytes.
        bits = b"\x00\x00\xff\x00\xff\x00\x00\x00" + b"\xff\x00\x00\xff\xff\xff\x00\x00"
        document = self.render(
            emfdata.stretchDIBits((10, 10, 20, 20), (0, 0, 2, 2), emfdata.bitmapInfoHeader(2, 2, 24), bits),
        )
        image = document.find("svg:image", NS)

        self.assertIsNotNone(image)
        self.assertTrue(image.get("href").startswith("data:image/png;base64,"))
        self.assertEqual(image.get("width"), "20")

    def test_stretchDIBits_decompressionBomb_skipsImage(self):
        info = emfdata.bitmapInfoHeader(20000, 20000, 1, colorCount=2) + b"\x00\x00\x00\x00\xff\xff\xff\x00"
        document = self.render(
            emfdata.stretchDIBits((0, 0, 50, 50), (0, 0, 20000, 20000), info, b"\x00" * 16),
            emfdata.rectangle(10, 10, 20, 20),
        )

        self.assertIsNone(document.find("svg:image", NS))
        self.assertEqual(len(document.findall("svg:path", NS)), 1)


if __name__ == "__main__":
    unittest.main()
