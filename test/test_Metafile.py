#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import unittest
from io import BytesIO
from unittest.mock import Mock

import emfdata
from pyemfplay.enum import RecordType
from pyemfplay.exceptions import UnexpectedPatternError, UnknownPlayError
from pyemfplay.player import Metafile, Player


class RecordingPlayer(Player):
    def __init__(self):
        super().__init__()
        self.calls = []

    def header(self, record):
        self.calls.append("header")

    def rectangle(self, record):
        self.calls.append("rectangle")

    def eof(self, record):
        self.calls.append("eof")

    def generate(self) -> bytes:
        self.calls.append("generate")
        return b"output"


class MetafileTest(unittest.TestCase):
    def test_iter_stopsAfterEof(self):
        data = emfdata.metafile(emfdata.rectangle(0, 0, 100, 100))
        stream = BytesIO(data + b"trailing bytes")
        records = list(Metafile(stream))

        self.assertEqual([record.recordType for record in records],
                         [RecordType.EMR_HEADER, RecordType.EMR_RECTANGLE, RecordType.EMR_EOF])
        self.assertEqual(stream.tell(), len(data))

    def test_play_dispatchesInOrder(self):
        player = RecordingPlayer()
        output = Metafile(BytesIO(emfdata.metafile(emfdata.rectangle(0, 0, 100, 100)))).play(player)

        self.assertEqual(player.calls, ["header", "rectangle", "eof", "generate"])
        self.assertEqual(output, b"output")

    def test_play_callsOnRecordReceived(self):
        player = Mock()
        player.generate.return_value = b""
        Metafile(BytesIO(emfdata.metafile(emfdata.saveDC()))).play(player)

        self.assertEqual(player.onRecordReceived.call_count, 3)
        player.generate.assert_called_once_with()

    def test_len_usesHeaderRecordCount(self):
        metafile = Metafile(BytesIO(emfdata.metafile(emfdata.saveDC(), emfdata.restoreDC())))
        self.assertEqual(len(metafile), 4)

    def test_iter_skipsZeroSizeRecords(self):
        zeroSize = emfdata.record(RecordType.EMR_SAVEDC)[:4] + b"\x00\x00\x00\x00"
        records = list(Metafile(BytesIO(emfdata.metafile(zeroSize))))
        self.assertEqual(len(records), 2)

    def test_iter_missingEof_raisesUnexpectedPattern(self):
        metafile = Metafile(BytesIO(emfdata.header() + emfdata.rectangle(0, 0, 10, 10)))

        with self.assertRaises(UnexpectedPatternError):
            list(metafile)

    def test_init_firstRecordNotHeader_raisesUnexpectedPattern(self):
        with self.assertRaises(UnexpectedPatternError):
            Metafile(BytesIO(emfdata.rectangle(0, 0, 10, 10) + emfdata.eof()))

    def test_play_handlerFailure_raisesUnknownPlayError(self):
        player = RecordingPlayer()
        player.handlers[RecordType.EMR_RECTANGLE] = Mock(side_effect=ZeroDivisionError("division by zero"))

        with self.assertRaises(UnknownPlayError):
            Metafile(BytesIO(emfdata.metafile(emfdata.rectangle(0, 0, 100, 100)))).play(player)

    def test_onRecordReceived_unimplementedHandlerIsNoOp(self):
        player = Player()
        Metafile(BytesIO(emfdata.metafile(emfdata.lineTo(5, 5)))).play(player)


if __name__ == "__main__":
    unittest.main()
