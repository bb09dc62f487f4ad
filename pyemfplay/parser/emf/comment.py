#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import logging
from io import BytesIO

from pyemfplay.core import decodeNullTerminatedUTF16LE, readBytes, RecordStream, Uint16LE, Uint32LE
from pyemfplay.enum import CommentIdentifier, CommentPublicType, FormatSignature, RecordType
from pyemfplay.exceptions import UnexpectedPatternError
from pyemfplay.logging import LOGGER_NAMES
from pyemfplay.parser.emf.base import checkMinimumRecordSize, RecordCategoryParser
from pyemfplay.parser.gdi import readEmrFormat, readEpsData, readRectL
from pyemfplay.record import EmrComment, EmrCommentBeginGroup, EmrCommentEmfPlus, EmrCommentEmfSpool, \
    EmrCommentEndGroup, EmrCommentMultiformats, EmrCommentPublic, EmrCommentWindowsMetafile

LOG = logging.getLogger(LOGGER_NAMES.PARSER)


class CommentRecordParser(RecordCategoryParser):
    """
    Parser for EMR_COMMENT records. The comment payload is classified by the identifier found at its start.
    """

    def __init__(self):
        super().__init__()
        self.parsers = {
            RecordType.EMR_COMMENT: self.parseComment,
        }

        self.publicParsers = {
            CommentPublicType.EMR_COMMENT_BEGINGROUP: self.parseBeginGroup,
            CommentPublicType.EMR_COMMENT_ENDGROUP: self.parseEndGroup,
            CommentPublicType.EMR_COMMENT_MULTIFORMATS: self.parseMultiformats,
            CommentPublicType.EMR_COMMENT_WINDOWS_METAFILE: self.parseWindowsMetafile,
        }

    def parseComment(self, stream: RecordStream) -> EmrComment:
        checkMinimumRecordSize(stream, 12)
        size = stream.size.byteCount
        dataSize = Uint32LE.unpack(stream)

        if dataSize > stream.size.remainingBytes():
            raise UnexpectedPatternError(f"Comment data size {dataSize} exceeds the record size {size}")

        data = readBytes(stream, dataSize)

        if dataSize < 4:
            return EmrComment(size, dataSize, data)

        identifier = Uint32LE.unpack(data[: 4])

        if identifier == CommentIdentifier.EMR_COMMENT_EMFPLUS:
            return EmrCommentEmfPlus(size, dataSize, data[4 :])
        elif identifier == CommentIdentifier.EMR_COMMENT_EMFSPOOL:
            return EmrCommentEmfSpool(size, dataSize, data[4 :])
        elif identifier == CommentIdentifier.EMR_COMMENT_PUBLIC and dataSize >= 8:
            return self.parsePublicComment(size, dataSize, data)

        return EmrComment(size, dataSize, data)

    def parsePublicComment(self, size: int, dataSize: int, data: bytes) -> EmrComment:
        publicType = Uint32LE.unpack(data[4 : 8])

        try:
            publicType = CommentPublicType(publicType)
        except ValueError:
            LOG.debug("Unknown public comment type %(type)#010x, keeping it as a private comment", {"type": publicType})
            return EmrComment(size, dataSize, data)

        if publicType in self.publicParsers:
            return self.publicParsers[publicType](size, dataSize, data)

        return EmrCommentPublic(size, dataSize, publicType, data[8 :])

    def parseBeginGroup(self, size: int, dataSize: int, data: bytes) -> EmrCommentBeginGroup:
        stream = BytesIO(data[8 :])
        rectangle = readRectL(stream)
        nDescription = Uint32LE.unpack(stream)
        description = decodeNullTerminatedUTF16LE(readBytes(stream, nDescription * 2))
        return EmrCommentBeginGroup(size, dataSize, rectangle, nDescription, description)

    def parseEndGroup(self, size: int, dataSize: int, data: bytes) -> EmrCommentEndGroup:
        return EmrCommentEndGroup(size, dataSize)

    def parseMultiformats(self, size: int, dataSize: int, data: bytes) -> EmrCommentMultiformats:
        stream = BytesIO(data[8 :])
        outputRect = readRectL(stream)
        countFormats = Uint32LE.unpack(stream)
        formats = [readEmrFormat(stream) for _ in range(countFormats)]
        formatData = []

        # offData is relative to the start of the comment data, the identifier included.
        for format in formats:
            if format.offData + format.sizeData > dataSize:
                raise UnexpectedPatternError(f"Multiformats data at {format.offData} ({format.sizeData} bytes) "
                                             f"exceeds the comment data size {dataSize}")

            buffer = data[format.offData : format.offData + format.sizeData]

            if format.signature == FormatSignature.EPS_SIGNATURE:
                formatData.append(readEpsData(BytesIO(buffer)))
            else:
                formatData.append(buffer)

        return EmrCommentMultiformats(size, dataSize, outputRect, countFormats, formats, formatData)

    def parseWindowsMetafile(self, size: int, dataSize: int, data: bytes) -> EmrCommentWindowsMetafile:
        stream = BytesIO(data[8 :])
        version = Uint16LE.unpack(stream)
        reserved = Uint16LE.unpack(stream)
        checksum = Uint32LE.unpack(stream)
        flags = Uint32LE.unpack(stream)
        winMetafileSize = Uint32LE.unpack(stream)
        winMetafile = readBytes(stream, winMetafileSize)
        return EmrCommentWindowsMetafile(size, dataSize, version, reserved, checksum, flags, winMetafileSize,
                                         winMetafile)
