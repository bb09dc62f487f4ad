#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

"""
File that contains helper methods to use in the library.
"""
import typing

from pyemfplay.exceptions import ReadError, UnexpectedPatternError


class FilePositionGuard:
    """
    Object that can be used in a 'with' statement that will restore a file's pointer to the position it had at
    the start of the with statement. E.g:

    # file position is 200
    with FilePositionGuard(file):
        file.read(10)
        file.tell() # file position is now 210

    file.tell() # file position is now 200 again
    """

    def __init__(self, file):
        self.file = file
        self.startingPosition = None

    def __enter__(self):
        self.startingPosition = self.file.tell()
        return self

    def __exit__(self, exc_type, exception, traceback):
        self.file.seek(self.startingPosition)


def readBytes(stream: typing.BinaryIO, length: int) -> bytes:
    """
    Read exactly `length` bytes from a stream.
    A zero length read always succeeds and does not touch the stream.
    :param stream: the stream to read from.
    :param length: the number of bytes to read.
    :return: the bytes that were read.
    """
    if length == 0:
        return b""

    if length < 0:
        raise UnexpectedPatternError(f"Cannot read a negative amount of bytes ({length})")

    data = stream.read(length)

    if len(data) != length:
        raise ReadError(f"Expected {length} bytes, but only {len(data)} are available")

    return data


def decodeUTF16LE(data: bytes) -> str:
    """
    Decode the provided bytes as UTF-16LE.
    :param data: The data to decode as utf-16. Its length must be even.
    :return: The python string
    """
    if len(data) % 2 != 0:
        raise UnexpectedPatternError(f"UTF-16LE data must have an even length, got {len(data)} bytes")

    try:
        return data.decode("utf-16le")
    except UnicodeDecodeError as e:
        raise UnexpectedPatternError(f"Invalid UTF-16LE string: {e}")


def decodeNullTerminatedUTF16LE(data: bytes) -> str:
    """
    Decode a UTF-16LE string that ends at the first null code unit.
    If there is no null code unit, the whole buffer is the string.
    """
    for index in range(0, len(data) - 1, 2):
        if data[index] == 0 and data[index + 1] == 0:
            return decodeUTF16LE(data[: index])

    return decodeUTF16LE(data[: len(data) - len(data) % 2])


def decodeANSI(data: bytes) -> str:
    """
    Decode 8-bit characters. Metafiles do not carry their code page, so Windows-1252 is assumed.
    """
    return data.decode("cp1252", errors="replace")


def decodeNullTerminatedANSI(data: bytes) -> str:
    return decodeANSI(data.split(b"\x00", 1)[0])
