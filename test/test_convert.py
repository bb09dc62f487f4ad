#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import emfdata
from pyemfplay.bin.convert import main
from pyemfplay.convert import EMFConverter, FileConverter, isEMF, WMFConverter
from pyemfplay.exceptions import ConvertError, WMFError


class EMFConverterTest(unittest.TestCase):
    def test_isEMF_checksHeaderType(self):
        self.assertTrue(isEMF(emfdata.metafile()))
        self.assertFalse(isEMF(b"\xd7\xcd\xc6\x9a garbage"))
        self.assertFalse(isEMF(b"\x01"))

    def test_convert_emf_usesPlayer(self):
        player = MagicMock()
        player.generate.return_value = b"<svg/>"
        wmfConverter = Mock()
        converter = EMFConverter(playerFactory=lambda: player, wmfConverter=wmfConverter)

        self.assertEqual(converter.convert(emfdata.metafile(emfdata.rectangle(0, 0, 100, 100))), b"<svg/>")
        self.assertEqual(player.onRecordReceived.call_count, 3)
        wmfConverter.convert.assert_not_called()

    def test_convert_otherPrefix_routesWholeBufferToWMF(self):
        data = b"\x02\x00\x00\x00" + emfdata.metafile()[4:]
        wmfConverter = Mock()
        wmfConverter.convert.return_value = b"wmf"
        player = Mock()
        converter = EMFConverter(playerFactory=lambda: player, wmfConverter=wmfConverter)

        self.assertEqual(converter.convert(data), b"wmf")
        wmfConverter.convert.assert_called_once_with(data)
        player.onRecordReceived.assert_not_called()

    def test_convert_wmfError_raisesConvertError(self):
        wmfConverter = Mock()
        wmfConverter.convert.side_effect = WMFError("bad wmf")

        with self.assertRaises(ConvertError):
            EMFConverter(wmfConverter=wmfConverter).convert(b"garbage")

    def test_convert_defaultWMFConverter_raisesConvertError(self):
        with self.assertRaises(WMFError):
            WMFConverter().convert(b"garbage")

        with self.assertRaises(ConvertError):
            EMFConverter().convert(b"garbage")

    def test_convert_malformedRecord_raisesConvertError(self):
        data = emfdata.header() + emfdata.record(0x1234, b"") + emfdata.eof()

        with self.assertRaises(ConvertError):
            EMFConverter().convert(data)

    def test_convert_decompressionBomb_skipsBitmap(self):
        info = emfdata.bitmapInfoHeader(20000, 20000, 1, colorCount=2) + b"\x00\x00\x00\x00\xff\xff\xff\x00"
        data = emfdata.metafile(emfdata.stretchDIBits((0, 0, 50, 50), (0, 0, 20000, 20000), info, b"\x00" * 16))
        output = EMFConverter().convert(data)

        self.assertTrue(output.startswith(b"<"))
        self.assertNotIn(b"data:image/png", output)

    def test_convert_wrapRecords_receivesMetafile(self):
        wrapRecords = Mock(side_effect=lambda metafile: list(metafile))
        EMFConverter().convert(emfdata.metafile(), wrapRecords)
        wrapRecords.assert_called_once()


class FileConverterTest(unittest.TestCase):
    def setUp(self):
        self.directory = tempfile.TemporaryDirectory()
        self.inputFile = Path(self.directory.name) / "input.emf"
        self.outputFile = Path(self.directory.name) / "input.svg"

    def tearDown(self):
        self.directory.cleanup()

    @patch("builtins.print")
    def test_process_writesSVG(self, *_):
        self.inputFile.write_bytes(emfdata.metafile(emfdata.rectangle(0, 0, 100, 100)))
        FileConverter(self.inputFile, self.outputFile, showProgress=False).process()

        self.assertTrue(self.outputFile.read_bytes().startswith(b"<svg"))

    @patch("builtins.print")
    def test_process_conversionError_writesNothing(self, *_):
        self.inputFile.write_bytes(b"not a metafile")

        with self.assertRaises(ConvertError):
            FileConverter(self.inputFile, self.outputFile, showProgress=False).process()

        self.assertFalse(self.outputFile.exists())

    @patch("builtins.print")
    def test_process_writeError_removesPartialOutput(self, *_):
        self.inputFile.write_bytes(emfdata.metafile())
        converter = FileConverter(self.inputFile, self.outputFile, showProgress=False)

        def partialWrite(output):
            self.outputFile.write_bytes(output[:10])
            raise OSError("disk full")

        source = open(self.inputFile, "rb")
        destination = MagicMock()
        destination.__enter__.return_value.write.side_effect = partialWrite

        with patch("builtins.open", side_effect=[source, destination]):
            with self.assertRaises(ConvertError):
                converter.process()

        source.close()
        self.assertFalse(self.outputFile.exists())

    def test_process_missingInput_raisesConvertError(self):
        with self.assertRaises(ConvertError):
            FileConverter(self.inputFile, self.outputFile, showProgress=False).process()

    @patch("sys.stderr")
    @patch("builtins.print")
    def test_main_invalidInput_returnsError(self, *_):
        self.inputFile.write_bytes(b"not a metafile")

        with patch("sys.argv", ["pyemfplay-convert", str(self.inputFile), "--no-progress", "-L", "CRITICAL"]):
            self.assertEqual(main(), 1)

        self.assertFalse(self.outputFile.exists())

    @patch("builtins.print")
    def test_main_writesNextToInput(self, *_):
        self.inputFile.write_bytes(emfdata.metafile())

        with patch("sys.argv", ["pyemfplay-convert", str(self.inputFile), "--no-progress", "-L", "CRITICAL"]):
            self.assertEqual(main(), 0)

        self.assertTrue(self.outputFile.exists())


if __name__ == "__main__":
    unittest.main()
