#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import logging
import typing

from pyemfplay.core import readBytes, RecordStream, Size, Uint32LE
from pyemfplay.enum import RecordType
from pyemfplay.exceptions import FailedReadBufferError, ReadError, UnexpectedPatternError
from pyemfplay.logging import LOGGER_NAMES
from pyemfplay.parser.emf.bitmap import BitmapRecordParser
from pyemfplay.parser.emf.clipping import ClippingRecordParser
from pyemfplay.parser.emf.comment import CommentRecordParser
from pyemfplay.parser.emf.control import ControlRecordParser
from pyemfplay.parser.emf.drawing import DrawingRecordParser
from pyemfplay.parser.emf.escape import EscapeRecordParser
from pyemfplay.parser.emf.object_creation import ObjectCreationRecordParser
from pyemfplay.parser.emf.object_manipulation import ObjectManipulationRecordParser
from pyemfplay.parser.emf.opengl import OpenGLRecordParser
from pyemfplay.parser.emf.path import PathRecordParser
from pyemfplay.parser.emf.state import StateRecordParser
from pyemfplay.parser.emf.transform import TransformRecordParser
from pyemfplay.parser.parser import StreamParser
from pyemfplay.record import Record

RECORD_HEADER_SIZE = 8

# Record types that exist but have no defined layout.
RESERVED_RECORD_TYPES = [
    RecordType.EMR_RESERVED_69,
    RecordType.EMR_RESERVED_107,
    RecordType.EMR_RESERVED_117,
]


class EMFParser(StreamParser):
    """
    Parser for EMF records. Each call to parse consumes exactly one record from the stream, whatever the record
    decoder reads, so that the stream is always left at the start of the next record.
    """

    def __init__(self):
        super().__init__()
        self.log = logging.getLogger(LOGGER_NAMES.PARSER)
        self.parsers = {}

        for categoryParser in [
            BitmapRecordParser(),
            ClippingRecordParser(),
            CommentRecordParser(),
            ControlRecordParser(),
            DrawingRecordParser(),
            EscapeRecordParser(),
            ObjectCreationRecordParser(),
            ObjectManipulationRecordParser(),
            OpenGLRecordParser(),
            PathRecordParser(),
            StateRecordParser(),
            TransformRecordParser(),
        ]:
            self.parsers.update(categoryParser.parsers)

    def parse(self, stream: typing.BinaryIO) -> typing.Optional[Record]:
        """
        Decode the next record of a stream.
        :param stream: stream positioned at the start of a record.
        :return: the record, or None when the record was skipped.
        """
        return super().parse(stream)

    def doParse(self, stream: typing.BinaryIO) -> typing.Optional[Record]:
        try:
            recordType = Uint32LE.unpack(stream)
            size = Uint32LE.unpack(stream)
        except ReadError as e:
            raise FailedReadBufferError(f"Truncated record header: {e}") from e

        try:
            recordType = RecordType(recordType)
        except ValueError:
            raise UnexpectedPatternError(f"Unknown record type {recordType:#010x}")

        if size == 0:
            self.log.warning("Skipping %(recordType)s record with a size of 0", {"recordType": recordType.name})
            return None

        if size < RECORD_HEADER_SIZE or size % 4 != 0:
            raise UnexpectedPatternError(f"Invalid size {size} for {recordType.name} record")

        try:
            body = readBytes(stream, size - RECORD_HEADER_SIZE)
        except ReadError as e:
            raise UnexpectedPatternError(f"{recordType.name} record size {size} exceeds the stream size") from e

        if recordType in RESERVED_RECORD_TYPES or recordType not in self.parsers:
            self.log.warning("Skipping %(recordType)s record, which has no defined layout",
                             {"recordType": recordType.name})
            return None

        recordStream = RecordStream(recordType, body, Size(size, RECORD_HEADER_SIZE))

        try:
            record = self.parsers[recordType](recordStream)
            recordStream.skipRemaining()
        except ReadError as e:
            raise FailedReadBufferError(f"{recordType.name} record is too short for its fields: {e}") from e

        self.log.debug("%(record)r", {"record": record})
        return record
