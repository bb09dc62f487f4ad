#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import struct
import typing

from pyemfplay.exceptions import ReadError


class Number:
    FORMAT = ""
    LENGTH = 0

    @classmethod
    def unpack(cls, data: typing.Union[bytes, typing.BinaryIO]):
        """
        Unpack a number from its little-endian binary representation.
        :param data: bytes or stream to unpack from.
        :return: the number's value.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            data = data.read(cls.LENGTH)

        if len(data) != cls.LENGTH:
            raise ReadError(f"{cls.__name__} requires {cls.LENGTH} bytes, but only {len(data)} are available")

        try:
            return struct.unpack(cls.FORMAT, data)[0]
        except struct.error as e:
            raise ReadError(str(e))

    @classmethod
    def pack(cls, value, stream: typing.Optional[typing.BinaryIO] = None) -> bytes:
        """
        Pack a number to its binary representation.
        :param value: value to pack.
        :param stream: stream to pack to (optional).
        :return: the bytes representing the number.
        """
        bytes = struct.pack(cls.FORMAT, value)

        if stream is not None:
            stream.write(bytes)

        return bytes

# 8 bits
class Int8(Number):
    FORMAT = "<b"
    LENGTH = 1

class Uint8(Number):
    FORMAT = "<B"
    LENGTH = 1

# 16 bits
class Int16LE(Number):
    FORMAT = "<h"
    LENGTH = 2

class Uint16LE(Number):
    FORMAT = "<H"
    LENGTH = 2

# 32 bits
class Int32LE(Number):
    FORMAT = "<i"
    LENGTH = 4

class Uint32LE(Number):
    FORMAT = "<I"
    LENGTH = 4

class Float32LE(Number):
    FORMAT = "<f"
    LENGTH = 4

# 64 bits
class Uint64LE(Number):
    FORMAT = "<Q"
    LENGTH = 8
