#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import Callable, Dict

from pyemfplay.core import RecordStream
from pyemfplay.enum import RecordType, STOCK_OBJECT_FLAG
from pyemfplay.exceptions import UnexpectedPatternError
from pyemfplay.record import Record


class RecordCategoryParser:
    """
    Base class for the parsers of a category of records. Subclasses register one method per record type in
    self.parsers. Each method receives a stream over the record body and returns the decoded record. Bytes left
    unread by a method are skipped by the caller.
    """

    def __init__(self):
        self.parsers: Dict[RecordType, Callable[[RecordStream], Record]] = {}


def checkRecordType(stream: RecordStream, *expected: RecordType):
    if stream.recordType not in expected:
        names = ", ".join(recordType.name for recordType in expected)
        raise UnexpectedPatternError(f"Record type must be one of {names}, got {stream.recordType!r}")


def checkRecordSize(stream: RecordStream, expected: int):
    if stream.size.byteCount != expected:
        raise UnexpectedPatternError(
            f"{RecordType(stream.recordType).name} record size must be {expected:#x}, got {stream.size.byteCount:#x}"
        )


def checkMinimumRecordSize(stream: RecordStream, minimum: int):
    if stream.size.byteCount < minimum:
        raise UnexpectedPatternError(
            f"{RecordType(stream.recordType).name} record size must be at least {minimum:#x}, "
            f"got {stream.size.byteCount:#x}"
        )


def checkObjectIndex(name: str, index: int):
    """
    Check an object table index read from a record: 0 is the metafile itself and stock objects cannot be
    created, deleted or modified.
    """
    if index == 0:
        raise UnexpectedPatternError(f"{name} must not be 0")

    if index & STOCK_OBJECT_FLAG:
        raise UnexpectedPatternError(f"{name} must not refer to a stock object, got {index:#010x}")


def checkArrayFits(stream: RecordStream, name: str, count: int, itemSize: int):
    """
    Check that an array of count items of itemSize bytes fits in what is left of the record.
    """
    if count * itemSize > stream.size.remainingBytes():
        raise UnexpectedPatternError(
            f"{name} with {count} items of {itemSize} bytes does not fit in the "
            f"{stream.size.remainingBytes()} bytes left in the record"
        )
