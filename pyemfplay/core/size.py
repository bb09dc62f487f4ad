#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from io import BytesIO
from typing import List, Tuple

from pyemfplay.core.helpers import readBytes
from pyemfplay.exceptions import UnexpectedPatternError


class Size:
    """
    Byte accounting for a single record: the size declared in the record header and the amount of bytes
    consumed so far while decoding the record.
    """

    def __init__(self, byteCount: int, consumed: int = 0):
        """
        :param byteCount: the declared size of the record, including its type and size fields.
        :param consumed: bytes already consumed.
        """
        self.byteCount = byteCount
        self.consumed = consumed

    def consume(self, count: int):
        self.consumed += count

    def consumedBytes(self) -> int:
        return self.consumed

    def remaining(self) -> bool:
        return self.consumed < self.byteCount

    def remainingBytes(self) -> int:
        """
        Get the amount of declared bytes that have not been consumed yet.
        :raises UnexpectedPatternError: when more bytes were consumed than what the record declares.
        """
        if self.consumed > self.byteCount:
            raise UnexpectedPatternError(
                f"Consumed {self.consumed} bytes, which is more than the declared record size ({self.byteCount})"
            )

        return self.byteCount - self.consumed

    def __repr__(self):
        return f"Size(byteCount={self.byteCount}, consumed={self.consumed})"


class RecordStream(BytesIO):
    """
    Stream over the body of a single record. Every read is accounted against the record's Size.
    Offsets found in record fields are relative to the start of the record, which makes them directly comparable
    to size.consumedBytes().
    """

    def __init__(self, recordType: int, body: bytes, size: Size):
        """
        :param recordType: the type of the record.
        :param body: the record bytes that follow the type and size fields.
        :param size: the size cursor, with the type and size fields already consumed.
        """
        super().__init__(body)
        self.recordType = recordType
        self.size = size

    def read(self, length: int = -1) -> bytes:
        data = super().read(length)
        self.size.consume(len(data))
        return data

    def skip(self, length: int) -> bytes:
        return readBytes(self, length)

    def readUndefinedSpace(self, offset: int) -> bytes:
        """
        Read the padding that sits between the bytes consumed so far and an offset-addressed field.
        :param offset: offset of the field, from the start of the record.
        """
        gap = offset - self.size.consumedBytes()

        if gap < 0:
            raise UnexpectedPatternError(
                f"Offset {offset} points inside already decoded fields ({self.size.consumedBytes()} bytes consumed)"
            )

        return readBytes(self, gap)

    def readOffsetBuffer(self, offset: int, length: int) -> bytes:
        """
        Read a variable-length buffer located by an offset from the start of the record.
        An empty buffer is returned when the length or the offset is 0.
        """
        if length == 0 or offset == 0:
            return b""

        self.readUndefinedSpace(offset)
        return readBytes(self, length)

    def readOffsetBuffers(self, requests: List[Tuple[int, int]]) -> List[bytes]:
        """
        Read several offset-addressed buffers. Buffers are read in ascending offset order since the stream only
        moves forward, but are returned in the order of the requests.
        :param requests: (offset, length) pairs.
        """
        buffers = [b""] * len(requests)
        order = sorted(range(len(requests)), key = lambda index: requests[index][0])

        for index in order:
            offset, length = requests[index]
            buffers[index] = self.readOffsetBuffer(offset, length)

        return buffers

    def skipRemaining(self):
        """
        Discard the bytes that were not decoded so that the metafile stream lands on the next record.
        """
        readBytes(self, self.size.remainingBytes())
