#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import struct
import unittest
from io import BytesIO

import emfdata
from pyemfplay.core import RecordStream, Size
from pyemfplay.enum import BrushStyle, DIBColors, ExtTextOutOptions, HatchStyle, PenType, RecordType, RegionMode
from pyemfplay.exceptions import NotSupportedError, UnexpectedPatternError
from pyemfplay.gdi import ColorRef, LogFont, LogFontExDv, LogFontPanose, RectL, SizeL
from pyemfplay.parser import EMFParser
from pyemfplay.parser.emf.drawing import DrawingRecordParser
from pyemfplay.parser.emf.object_creation import ObjectCreationRecordParser
from pyemfplay.parser.emf.path import PathRecordParser
from pyemfplay.parser.emf.state import StateRecordParser
from pyemfplay.record import EmrBeginPath, EmrComment, EmrCreatePalette, EmrEof, EmrExtCreateFontIndirectW, \
    EmrExtCreatePen, EmrExtEscape, EmrExtSelectClipRgn, EmrExtTextOutA, EmrExtTextOutW, EmrGlsRecord, EmrHeader, \
    EmrPolyline16, EmrSaveDC, EmrSetIcmProfileW, EmrSetPaletteEntries, EmrSetWorldTransform, EmrStretchDIBits


class RecordParserTest(unittest.TestCase):
    def setUp(self):
        self.parser = EMFParser()

    def parse(self, data: bytes):
        return self.parser.parse(BytesIO(data))


class TextRecordTest(RecordParserTest):
    def test_extTextOutW_readsStringAndSpacing(self):
        record = self.parse(emfdata.extTextOut(RecordType.EMR_EXTTEXTOUTW, "Hi".encode("utf-16le"), 2, [8, 9]))

        self.assertIsInstance(record, EmrExtTextOutW)
        self.assertEqual(record.text.string, "Hi")
        self.assertEqual(record.text.dx, [8, 9])
        self.assertEqual(record.text.offString, 76)
        self.assertEqual(record.text.rectangle, RectL(0, 0, 100, 20))

    def test_extTextOutA_readsSingleByteCharacters(self):
        record = self.parse(emfdata.extTextOut(RecordType.EMR_EXTTEXTOUTA, b"Hey", 3, [1, 2, 3]))

        self.assertIsInstance(record, EmrExtTextOutA)
        self.assertEqual(record.text.string, "Hey")
        self.assertEqual(record.text.dx, [1, 2, 3])

    def test_extTextOut_pdy_readsTwoValuesPerCharacter(self):
        record = self.parse(emfdata.extTextOut(RecordType.EMR_EXTTEXTOUTW, "Hi".encode("utf-16le"), 2, [1, 2, 3, 4],
                                               options=ExtTextOutOptions.ETO_PDY))

        self.assertEqual(record.text.string, "Hi")
        self.assertEqual(record.text.dx, [1, 2, 3, 4])

    def test_extTextOut_noRect_spacingBeforeString(self):
        record = self.parse(emfdata.extTextOut(RecordType.EMR_EXTTEXTOUTW, "Hi".encode("utf-16le"), 2, [7, 7],
                                               options=ExtTextOutOptions.ETO_NO_RECT, dxFirst=True))

        self.assertIsNone(record.text.rectangle)
        self.assertEqual(record.text.offDx, 60)
        self.assertEqual(record.text.offString, 68)
        self.assertEqual(record.text.string, "Hi")
        self.assertEqual(record.text.dx, [7, 7])

    def test_extTextOut_offsetInsideFixedPart_raisesUnexpectedPattern(self):
        data = bytearray(emfdata.extTextOut(RecordType.EMR_EXTTEXTOUTW, "Hi".encode("utf-16le"), 2, [1, 1]))
        # offString sits right after the reference point and the character count.
        data[48:52] = struct.pack("<I", 40)

        with self.assertRaises(UnexpectedPatternError):
            self.parse(bytes(data))


class PenRecordTest(RecordParserTest):
    def test_extCreatePen_cosmeticHatchedPen_raisesNotSupported(self):
        data = emfdata.extCreatePen(PenType.PS_COSMETIC, BrushStyle.BS_HATCHED, 0x0000FF, HatchStyle.HS_CROSS)

        with self.assertRaises(NotSupportedError):
            self.parse(data)

    def test_extCreatePen_cosmeticSolidColorHatch(self):
        record = self.parse(emfdata.extCreatePen(PenType.PS_COSMETIC, BrushStyle.BS_HATCHED, 0x0000FF,
                                                 HatchStyle.HS_SOLIDTEXTCLR))

        self.assertEqual(record.elp.brushHatch, HatchStyle.HS_SOLIDTEXTCLR)
        self.assertEqual(record.elp.color, ColorRef(255, 0, 0))

    def test_extCreatePen_geometricHatchedPen(self):
        record = self.parse(emfdata.extCreatePen(PenType.PS_GEOMETRIC, BrushStyle.BS_HATCHED, 0x00FF00,
                                                 HatchStyle.HS_CROSS))

        self.assertIsInstance(record, EmrExtCreatePen)
        self.assertEqual(record.elp.brushHatch, HatchStyle.HS_CROSS)
        self.assertEqual(record.elp.color, ColorRef(0, 255, 0))
        self.assertIsNone(record.bitmap)

    def test_extCreatePen_bitsBeforeBitmapInfo(self):
        bits = b"\x10\x20\x30\x00"
        record = self.parse(emfdata.extCreatePen(PenType.PS_GEOMETRIC, BrushStyle.BS_DIBPATTERNPT,
                                                 DIBColors.DIB_RGB_COLORS, info=emfdata.bitmapInfoHeader(1, 1, 24),
                                                 bits=bits, bitsFirst=True))

        self.assertLess(record.offBits, record.offBmi)
        self.assertEqual(record.elp.colorUsage, DIBColors.DIB_RGB_COLORS)
        self.assertEqual(record.bitmap.bits, bits)
        self.assertEqual(record.bitmap.header.width, 1)
        self.assertEqual(record.bitmap.header.bitCount, 24)


class PaletteRecordTest(RecordParserTest):
    def test_createPalette_withoutEntries_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parse(emfdata.createPalette())

    def test_createPalette_readsEntries(self):
        record = self.parse(emfdata.createPalette((0, 1, 2, 3), (4, 5, 6, 7)))

        self.assertIsInstance(record, EmrCreatePalette)
        self.assertEqual(record.logPalette.numberOfEntries, 2)


class FontRecordTest(RecordParserTest):
    def parseFont(self, elw: bytes):
        record = self.parse(emfdata.extCreateFontIndirectW(elw))
        self.assertIsInstance(record, EmrExtCreateFontIndirectW)
        return record.elw

    def test_extCreateFontIndirectW_tooSmall_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parseFont(emfdata.logFont()[: 88])

    def test_extCreateFontIndirectW_logFont(self):
        elw = self.parseFont(emfdata.logFont(height=-16, facename="Courier"))

        self.assertIsInstance(elw, LogFont)
        self.assertEqual(elw.height, -16)
        self.assertEqual(elw.facename, "Courier")

    def test_extCreateFontIndirectW_logFontWithTrailingBytes(self):
        self.assertIsInstance(self.parseFont(emfdata.logFont() + b"\x00" * 8), LogFont)

    def test_extCreateFontIndirectW_logFontPanose(self):
        elw = self.parseFont(emfdata.logFontPanose(facename="Times"))

        self.assertIsInstance(elw, LogFontPanose)
        self.assertEqual(elw.logFont.facename, "Times")

    def test_extCreateFontIndirectW_betweenPanoseAndExDv_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parseFont(emfdata.logFontPanose() + b"\x00" * 4)

        with self.assertRaises(UnexpectedPatternError):
            self.parseFont(emfdata.logFontEx())

    def test_extCreateFontIndirectW_logFontExDv(self):
        elw = self.parseFont(emfdata.logFontEx(facename="Calibri") + emfdata.designVector([3, -4]))

        self.assertIsInstance(elw, LogFontExDv)
        self.assertEqual(elw.logFont.facename, "Calibri")
        self.assertEqual(elw.designVector.values, [3, -4])

    def test_extCreateFontIndirectW_sixteenAxes(self):
        elw = self.parseFont(emfdata.logFontEx() + emfdata.designVector(list(range(16))))
        self.assertEqual(len(elw.designVector.values), 16)

    def test_extCreateFontIndirectW_seventeenAxes_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parseFont(emfdata.logFontEx() + emfdata.designVector(list(range(17))))

    def test_extCreateFontIndirectW_badDesignVectorSignature_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parseFont(emfdata.logFontEx() + emfdata.designVector([], signature=0x12345678))


class HeaderExtensionTest(RecordParserTest):
    def test_header_extension1(self):
        header = self.parse(emfdata.header(openGL=1))

        self.assertEqual(header.size, EmrHeader.EXTENSION_1_SIZE)
        self.assertTrue(header.hasExtension1)
        self.assertFalse(header.hasExtension2)
        self.assertEqual(header.openGL, 1)
        self.assertIsNone(header.pixelFormat)

    def test_header_extension2(self):
        header = self.parse(emfdata.header(micrometers=(338666, 190500)))

        self.assertEqual(header.size, EmrHeader.EXTENSION_2_SIZE)
        self.assertTrue(header.hasExtension1)
        self.assertTrue(header.hasExtension2)
        self.assertEqual(header.micrometers, SizeL(338666, 190500))

    def test_header_descriptionEndsFixedPart(self):
        header = self.parse(emfdata.header(description="Test"))

        self.assertEqual(header.description, "Test")
        self.assertFalse(header.hasExtension1)

    def test_header_descriptionAfterExtension1(self):
        header = self.parse(emfdata.header(openGL=0, description="Hi"))

        self.assertEqual(header.offDescription, EmrHeader.EXTENSION_1_SIZE)
        self.assertEqual(header.description, "Hi")
        self.assertTrue(header.hasExtension1)
        self.assertFalse(header.hasExtension2)


class RecordTypeCheckTest(unittest.TestCase):
    def stream(self, recordType: RecordType, body: bytes) -> RecordStream:
        return RecordStream(recordType, body, Size(8 + len(body), 8))

    def test_sharedDecoders_rejectOtherRecordTypes(self):
        state = StateRecordParser()
        drawing = DrawingRecordParser()
        cases = [
            (state.parseMode, RecordType.EMR_SETBKCOLOR, 4),
            (state.parsePoint, RecordType.EMR_SETWINDOWEXTEX, 8),
            (state.parseExtent, RecordType.EMR_MOVETOEX, 8),
            (state.parseColor, RecordType.EMR_SETMAPMODE, 4),
            (drawing.parseArc, RecordType.EMR_ELLIPSE, 32),
            (drawing.parsePath, RecordType.EMR_RECTANGLE, 16),
            (drawing.parsePoly, RecordType.EMR_POLYPOLYGON, 20),
            (drawing.parsePolyPoly, RecordType.EMR_POLYGON, 24),
            (drawing.parsePolyDraw, RecordType.EMR_POLYLINE, 20),
            (PathRecordParser().parsePathBracket, RecordType.EMR_SAVEDC, 0),
            (ObjectCreationRecordParser().parseCreatePatternBrush, RecordType.EMR_CREATEPEN, 24),
        ]

        for decoder, recordType, bodySize in cases:
            with self.subTest(decoder=decoder.__name__, recordType=recordType.name):
                with self.assertRaises(UnexpectedPatternError):
                    decoder(self.stream(recordType, b"\x00" * bodySize))


class RecordConsumptionTest(RecordParserTest):
    def test_parse_consumesPaddedRecordOfEachCategory(self):
        pixel = emfdata.bitmapInfoHeader(1, 1, 24), b"\x00\x00\xff\x00"
        cases = [
            (emfdata.padded(emfdata.stretchDIBits((0, 0, 1, 1), (0, 0, 1, 1), *pixel), 8), EmrStretchDIBits),
            (emfdata.padded(emfdata.record(RecordType.EMR_EXTSELECTCLIPRGN,
                                           struct.pack("<II", 0, RegionMode.RGN_COPY)), 16), EmrExtSelectClipRgn),
            (emfdata.padded(emfdata.record(RecordType.EMR_COMMENT, struct.pack("<I", 3) + b"abc\x00"), 4), EmrComment),
            (emfdata.padded(emfdata.eof(), 8), EmrEof),
            (emfdata.padded(emfdata.record(RecordType.EMR_POLYLINE16, emfdata.rectL(0, 0, 1, 1)
                                           + struct.pack("<Ihhhh", 2, 0, 0, 1, 1)), 12), EmrPolyline16),
            (emfdata.padded(emfdata.record(RecordType.EMR_EXTESCAPE, struct.pack("<II", 1, 4) + b"data"), 4),
             EmrExtEscape),
            (emfdata.padded(emfdata.createPalette((0, 0, 0, 0)), 4), EmrCreatePalette),
            (emfdata.padded(emfdata.record(RecordType.EMR_SETPALETTEENTRIES,
                                           struct.pack("<IIIBBBB", 1, 0, 1, 0, 0, 0, 0)), 8), EmrSetPaletteEntries),
            (emfdata.padded(emfdata.record(RecordType.EMR_GLSRECORD, struct.pack("<I", 4) + b"\x01\x02\x03\x04"), 4),
             EmrGlsRecord),
            (emfdata.record(RecordType.EMR_BEGINPATH), EmrBeginPath),
            (emfdata.padded(emfdata.record(RecordType.EMR_SETICMPROFILEW, struct.pack("<III", 0, 4, 0)
                                           + "A".encode("utf-16le") + b"\x00\x00"), 8), EmrSetIcmProfileW),
            (emfdata.record(RecordType.EMR_SETWORLDTRANSFORM, struct.pack("<6f", 1, 0, 0, 1, 0, 0)),
             EmrSetWorldTransform),
        ]

        for data, recordClass in cases:
            with self.subTest(recordClass=recordClass.__name__):
                declaredSize = struct.unpack("<I", data[4 : 8])[0]
                stream = BytesIO(data + emfdata.saveDC())

                self.assertIsInstance(self.parser.parse(stream), recordClass)
                self.assertEqual(stream.tell(), declaredSize)
                self.assertIsInstance(self.parser.parse(stream), EmrSaveDC)


if __name__ == "__main__":
    unittest.main()
