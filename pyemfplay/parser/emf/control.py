#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import logging
from io import BytesIO

from pyemfplay.core import decodeUTF16LE, Uint16LE, Uint32LE
from pyemfplay.core import RecordStream
from pyemfplay.enum import FormatSignature, MetafileVersion, parseEnum, RecordType
from pyemfplay.exceptions import UnexpectedPatternError
from pyemfplay.logging import LOGGER_NAMES
from pyemfplay.parser.emf.base import checkMinimumRecordSize, checkRecordType, RecordCategoryParser
from pyemfplay.parser.gdi import readLogPaletteEntries, readPixelFormatDescriptor, readRectL, readSizeL
from pyemfplay.record import EmrEof, EmrHeader

LOG = logging.getLogger(LOGGER_NAMES.PARSER)


class ControlRecordParser(RecordCategoryParser):
    """
    Parser for the records that start and end a metafile.
    """

    def __init__(self):
        super().__init__()
        self.parsers = {
            RecordType.EMR_HEADER: self.parseHeader,
            RecordType.EMR_EOF: self.parseEof,
        }

    def parseHeader(self, stream: RecordStream) -> EmrHeader:
        checkRecordType(stream, RecordType.EMR_HEADER)
        checkMinimumRecordSize(stream, EmrHeader.BASE_SIZE)
        byteCount = stream.size.byteCount

        bounds = readRectL(stream)
        frame = readRectL(stream)
        signature = parseEnum(FormatSignature, Uint32LE.unpack(stream))

        if signature != FormatSignature.ENHMETA_SIGNATURE:
            raise UnexpectedPatternError(f"Header signature must be ENHMETA_SIGNATURE, got {signature.name}")

        version = Uint32LE.unpack(stream)

        if version != MetafileVersion.META_FORMAT_ENHANCED:
            raise UnexpectedPatternError(f"Header version must be {MetafileVersion.META_FORMAT_ENHANCED:#010x}, "
                                         f"got {version:#010x}")

        bytes = Uint32LE.unpack(stream)
        records = Uint32LE.unpack(stream)
        handles = Uint16LE.unpack(stream)
        reserved = Uint16LE.unpack(stream)

        if reserved != 0:
            raise UnexpectedPatternError(f"Header reserved field must be 0, got {reserved:#06x}")

        nDescription = Uint32LE.unpack(stream)
        offDescription = Uint32LE.unpack(stream)
        nPalEntries = Uint32LE.unpack(stream)
        device = readSizeL(stream)
        millimeters = readSizeL(stream)

        # The extensions are present when the fixed part of the header, which ends where the first variable field
        # starts, is large enough to hold them.
        headerSize = byteCount

        if offDescription >= EmrHeader.BASE_SIZE and offDescription + nDescription * 2 <= byteCount:
            headerSize = offDescription

        cbPixelFormat = None
        offPixelFormat = None
        openGL = None
        micrometers = None

        if headerSize >= EmrHeader.EXTENSION_1_SIZE:
            cbPixelFormat = Uint32LE.unpack(stream)
            offPixelFormat = Uint32LE.unpack(stream)
            openGL = Uint32LE.unpack(stream)

            if EmrHeader.EXTENSION_1_SIZE <= offPixelFormat < headerSize \
                    and offPixelFormat + cbPixelFormat <= byteCount:
                headerSize = offPixelFormat

            if headerSize >= EmrHeader.EXTENSION_2_SIZE:
                micrometers = readSizeL(stream)

        requests = [(offDescription, nDescription * 2)]

        if cbPixelFormat:
            requests.append((offPixelFormat, cbPixelFormat))

        buffers = stream.readOffsetBuffers(requests)
        description = decodeUTF16LE(buffers[0]) if buffers[0] else None
        pixelFormat = None

        if len(buffers) > 1 and buffers[1]:
            pixelFormat = readPixelFormatDescriptor(BytesIO(buffers[1]))

        return EmrHeader(byteCount, bounds, frame, signature, version, bytes, records, handles, reserved,
                         nDescription, offDescription, nPalEntries, device, millimeters, description, cbPixelFormat,
                         offPixelFormat, openGL, pixelFormat, micrometers)

    def parseEof(self, stream: RecordStream) -> EmrEof:
        checkRecordType(stream, RecordType.EMR_EOF)
        checkMinimumRecordSize(stream, 20)
        byteCount = stream.size.byteCount

        nPalEntries = Uint32LE.unpack(stream)
        offPalEntries = Uint32LE.unpack(stream)
        paletteData = stream.readOffsetBuffer(offPalEntries, nPalEntries * 4)
        paletteBuffer = readLogPaletteEntries(BytesIO(paletteData), nPalEntries if paletteData else 0)

        # sizeLast is always the last field of the record.
        stream.readUndefinedSpace(byteCount - 4)
        sizeLast = Uint32LE.unpack(stream)

        if sizeLast != byteCount:
            LOG.warning("EMR_EOF sizeLast (%(sizeLast)d) does not match the record size (%(size)d)",
                        {"sizeLast": sizeLast, "size": byteCount})

        return EmrEof(byteCount, nPalEntries, offPalEntries, paletteBuffer, sizeLast)
