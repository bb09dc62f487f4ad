#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List, Optional

from pyemfplay.enum import FormatSignature, RecordType
from pyemfplay.gdi import LogPaletteEntry, PixelFormatDescriptor, RectL, SizeL
from pyemfplay.record.record import Record


class EmrHeader(Record):
    """
    First record of every enhanced metafile. Depending on its size, the header carries the first extension (pixel
    format and OpenGL flag) and the second extension (reference device size in micrometers).
    """
    BASE_SIZE = 88
    EXTENSION_1_SIZE = 100
    EXTENSION_2_SIZE = 108

    def __init__(self, size: int, bounds: RectL, frame: RectL, signature: FormatSignature, version: int,
                 bytes: int, records: int, handles: int, reserved: int, nDescription: int, offDescription: int,
                 nPalEntries: int, device: SizeL, millimeters: SizeL, description: Optional[str] = None,
                 cbPixelFormat: Optional[int] = None, offPixelFormat: Optional[int] = None,
                 openGL: Optional[int] = None, pixelFormat: Optional[PixelFormatDescriptor] = None,
                 micrometers: Optional[SizeL] = None):
        super().__init__(RecordType.EMR_HEADER, size)
        self.bounds = bounds
        self.frame = frame
        self.signature = signature
        self.version = version
        self.bytes = bytes
        self.records = records
        self.handles = handles
        self.reserved = reserved
        self.nDescription = nDescription
        self.offDescription = offDescription
        self.nPalEntries = nPalEntries
        self.device = device
        self.millimeters = millimeters
        self.description = description
        self.cbPixelFormat = cbPixelFormat
        self.offPixelFormat = offPixelFormat
        self.openGL = openGL
        self.pixelFormat = pixelFormat
        self.micrometers = micrometers

    @property
    def hasExtension1(self) -> bool:
        return self.cbPixelFormat is not None

    @property
    def hasExtension2(self) -> bool:
        return self.micrometers is not None


class EmrEof(Record):
    """
    Last record of a metafile, with an optional palette.
    """

    def __init__(self, size: int, nPalEntries: int, offPalEntries: int, paletteBuffer: List[LogPaletteEntry],
                 sizeLast: int):
        super().__init__(RecordType.EMR_EOF, size)
        self.nPalEntries = nPalEntries
        self.offPalEntries = offPalEntries
        self.paletteBuffer = paletteBuffer
        self.sizeLast = sizeLast
