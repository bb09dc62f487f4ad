#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from io import BytesIO
from typing import Optional

from pyemfplay.core import Uint16LE, Uint32LE
from pyemfplay.enum import BitmapCompression
from pyemfplay.gdi.base import GDIStructure


class BitmapInfoHeader(GDIStructure):
    """
    Header of a device-independent bitmap. Both the 12 byte core header and the 40 byte (and larger) info headers
    are represented by this class, the core header only fills the first five fields.
    """
    CORE_HEADER_SIZE = 12
    INFO_HEADER_SIZE = 40

    def __init__(self, headerSize: int, width: int, height: int, planes: int, bitCount: int,
                 compression: BitmapCompression = BitmapCompression.BI_RGB, imageSize: int = 0,
                 xPelsPerMeter: int = 0, yPelsPerMeter: int = 0, colorUsed: int = 0, colorImportant: int = 0):
        self.headerSize = headerSize
        self.width = width
        self.height = height
        self.planes = planes
        self.bitCount = bitCount
        self.compression = compression
        self.imageSize = imageSize
        self.xPelsPerMeter = xPelsPerMeter
        self.yPelsPerMeter = yPelsPerMeter
        self.colorUsed = colorUsed
        self.colorImportant = colorImportant

    def colorTableSize(self) -> int:
        """
        Get the number of entries of the color table that follows the header.
        """
        if self.bitCount > 8:
            return self.colorUsed

        return self.colorUsed if self.colorUsed else 1 << self.bitCount


class DeviceIndependentBitmap(GDIStructure):
    """
    A bitmap taken from a record: the BitmapInfo buffer (header and color table) and the pixel bits.
    """
    FILE_HEADER_SIZE = 14

    def __init__(self, header: Optional[BitmapInfoHeader], info: bytes, bits: bytes):
        self.header = header
        self.info = info
        self.bits = bits

    def toBMP(self) -> bytes:
        """
        Build the content of a .bmp file for this bitmap by prepending a BITMAPFILEHEADER.
        """
        stream = BytesIO()
        stream.write(b"BM")
        Uint32LE.pack(DeviceIndependentBitmap.FILE_HEADER_SIZE + len(self.info) + len(self.bits), stream)
        Uint16LE.pack(0, stream)
        Uint16LE.pack(0, stream)
        Uint32LE.pack(DeviceIndependentBitmap.FILE_HEADER_SIZE + len(self.info), stream)
        stream.write(self.info)
        stream.write(self.bits)
        return stream.getvalue()

    @property
    def width(self) -> int:
        return self.header.width if self.header else 0

    @property
    def height(self) -> int:
        return abs(self.header.height) if self.header else 0


class BlendFunction(GDIStructure):
    """
    Blending operation of EMR_ALPHABLEND. The only defined operation is AC_SRC_OVER (0).
    """
    AC_SRC_OVER = 0x00
    AC_SRC_ALPHA = 0x01

    def __init__(self, blendOperation: int, blendFlags: int, sourceConstantAlpha: int, alphaFormat: int):
        self.blendOperation = blendOperation
        self.blendFlags = blendFlags
        self.sourceConstantAlpha = sourceConstantAlpha
        self.alphaFormat = alphaFormat
