#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import unittest
from io import BytesIO

from pyemfplay.core import Int16LE, readBytes, RecordStream, Size, Uint32LE
from pyemfplay.exceptions import ReadError, UnexpectedPatternError


class PackingTest(unittest.TestCase):
    def test_unpack_readsLittleEndian(self):
        self.assertEqual(Uint32LE.unpack(b"\x01\x02\x03\x04"), 0x04030201)
        self.assertEqual(Int16LE.unpack(b"\xff\xff"), -1)

    def test_unpack_shortStream_raisesReadError(self):
        with self.assertRaises(ReadError):
            Uint32LE.unpack(BytesIO(b"\x01\x02"))

    def test_readBytes_shortStream_raisesReadError(self):
        with self.assertRaises(ReadError):
            readBytes(BytesIO(b"abc"), 4)


class SizeTest(unittest.TestCase):
    def test_remainingBytes_afterConsume(self):
        size = Size(24, 8)
        size.consume(10)
        self.assertEqual(size.consumedBytes(), 18)
        self.assertEqual(size.remainingBytes(), 6)
        self.assertTrue(size.remaining())

    def test_remainingBytes_overConsumed_raisesUnexpectedPattern(self):
        size = Size(12, 8)
        size.consume(8)

        with self.assertRaises(UnexpectedPatternError):
            size.remainingBytes()


class RecordStreamTest(unittest.TestCase):
    def createStream(self, body: bytes) -> RecordStream:
        return RecordStream(1, body, Size(len(body) + 8, 8))

    def test_read_accountsConsumedBytes(self):
        stream = self.createStream(b"\x00" * 12)
        Uint32LE.unpack(stream)
        self.assertEqual(stream.size.consumedBytes(), 12)

    def test_skipRemaining_consumesWholeRecord(self):
        stream = self.createStream(b"\x00" * 12)
        Uint32LE.unpack(stream)
        stream.skipRemaining()
        self.assertEqual(stream.size.consumedBytes(), stream.size.byteCount)
        self.assertEqual(stream.read(), b"")

    def test_readOffsetBuffer_skipsUndefinedSpace(self):
        stream = self.createStream(b"\x00\x00\x00\x00data")
        self.assertEqual(stream.readOffsetBuffer(12, 4), b"data")
        self.assertEqual(stream.size.consumedBytes(), 16)

    def test_readOffsetBuffer_zeroLengthOrOffset_returnsEmpty(self):
        stream = self.createStream(b"data")
        self.assertEqual(stream.readOffsetBuffer(8, 0), b"")
        self.assertEqual(stream.readOffsetBuffer(0, 4), b"")
        self.assertEqual(stream.size.consumedBytes(), 8)

    def test_readOffsetBuffer_offsetInsideDecodedFields_raisesUnexpectedPattern(self):
        stream = self.createStream(b"\x00" * 8)
        Uint32LE.unpack(stream)

        with self.assertRaises(UnexpectedPatternError):
            stream.readOffsetBuffer(8, 4)

    def test_readOffsetBuffers_returnsRequestOrder(self):
        stream = self.createStream(b"firstsecond!")
        buffers = stream.readOffsetBuffers([(13, 7), (8, 5)])
        self.assertEqual(buffers, [b"second!", b"first"])


if __name__ == "__main__":
    unittest.main()
