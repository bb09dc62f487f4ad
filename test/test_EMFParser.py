#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import struct
import unittest
from io import BytesIO

import emfdata
from pyemfplay.enum import FormatSignature, MapMode, RecordType
from pyemfplay.exceptions import FailedReadBufferError, UnexpectedEnumValueError, UnexpectedPatternError
from pyemfplay.gdi import RectL
from pyemfplay.parser import EMFParser
from pyemfplay.record import EmrEof, EmrHeader, EmrRectangle, EmrSetColorAdjustment, EmrSetMapMode


class EMFParserTest(unittest.TestCase):
    def setUp(self):
        self.parser = EMFParser()

    def parse(self, data: bytes):
        return self.parser.parse(BytesIO(data))

    def test_parse_header(self):
        header = self.parse(emfdata.header(bounds=(0, 0, 100, 50), records=3, handles=2))
        self.assertIsInstance(header, EmrHeader)
        self.assertEqual(header.records, 3)
        self.assertEqual(header.handles, 2)
        self.assertEqual(header.bounds.right, 100)
        self.assertEqual(header.bounds.bottom, 50)
        self.assertIsNone(header.description)
        self.assertFalse(header.hasExtension1)

    def test_parse_header_epsSignature_raisesUnexpectedPattern(self):
        data = bytearray(emfdata.header())
        data[40:44] = struct.pack("<I", FormatSignature.EPS_SIGNATURE)

        with self.assertRaises(UnexpectedPatternError):
            self.parse(bytes(data))

    def test_parse_header_unknownSignature_raisesUnexpectedEnumValue(self):
        data = bytearray(emfdata.header())
        data[40:44] = b"\x00\x00\x00\x00"

        with self.assertRaises(UnexpectedEnumValueError) as context:
            self.parse(bytes(data))

        self.assertIs(context.exception.enumType, FormatSignature)
        self.assertEqual(context.exception.value, 0)

    def test_parse_rectangle(self):
        record = self.parse(emfdata.rectangle(0, 0, 100, 100))
        self.assertIsInstance(record, EmrRectangle)
        self.assertEqual(record.box, RectL(0, 0, 100, 100))

    def test_parse_mode(self):
        record = self.parse(emfdata.setMapMode(MapMode.MM_ANISOTROPIC))
        self.assertIsInstance(record, EmrSetMapMode)
        self.assertEqual(record.mapMode, MapMode.MM_ANISOTROPIC)

    def test_parse_consumesDeclaredSize(self):
        paddedEof = emfdata.record(RecordType.EMR_EOF, struct.pack("<IIII", 0, 16, 0, 24))
        data = emfdata.header() + emfdata.saveDC() + emfdata.restoreDC() + paddedEof + b"trailing"
        stream = BytesIO(data)
        offset = 0

        while offset < len(data) - len(b"trailing"):
            declaredSize = struct.unpack("<I", data[offset + 4:offset + 8])[0]
            record = self.parser.parse(stream)
            offset += declaredSize
            self.assertEqual(stream.tell(), offset)

        self.assertIsInstance(record, EmrEof)
        self.assertEqual(record.sizeLast, 24)

    def test_parse_colorAdjustment_referenceWhiteRange(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parse(emfdata.setColorAdjustment(referenceWhite=5999))

        record = self.parse(emfdata.setColorAdjustment(referenceWhite=6000))
        self.assertIsInstance(record, EmrSetColorAdjustment)
        self.assertEqual(record.colorAdjustment.referenceWhite, 6000)

    def test_parse_unknownType_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parse(emfdata.record(0x1234, b""))

    def test_parse_reservedType_isSkipped(self):
        stream = BytesIO(emfdata.record(RecordType.EMR_RESERVED_69, b"\x00" * 8) + emfdata.saveDC())
        self.assertIsNone(self.parser.parse(stream))
        self.assertEqual(stream.tell(), 16)

    def test_parse_zeroSize_isSkipped(self):
        self.assertIsNone(self.parse(struct.pack("<II", RecordType.EMR_SAVEDC, 0)))

    def test_parse_unalignedSize_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parse(struct.pack("<II", RecordType.EMR_SAVEDC, 10) + b"\x00\x00")

    def test_parse_sizeExceedsStream_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parse(struct.pack("<II", RecordType.EMR_RECTANGLE, 24) + b"\x00" * 8)

    def test_parse_wrongRecordSize_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parse(emfdata.record(RecordType.EMR_RECTANGLE, b"\x00" * 20))

    def test_parse_truncatedHeader_raisesFailedReadBuffer(self):
        with self.assertRaises(FailedReadBufferError):
            self.parse(b"\x01\x00")

    def test_parse_restoreDC_positiveIndex_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parse(emfdata.restoreDC(1))

    def test_parse_createBrushIndirect_zeroIndex_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            self.parse(emfdata.createBrushIndirect(0, 255, 0, 0))

    def test_parse_error_addsParserLayer(self):
        with self.assertRaises(UnexpectedPatternError) as context:
            self.parse(emfdata.record(0x1234, b""))

        self.assertIn("EMFParser", context.exception.formatLayers())


if __name__ == "__main__":
    unittest.main()
