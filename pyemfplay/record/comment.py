#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List, Union

from pyemfplay.enum import CommentIdentifier, CommentPublicType, RecordType
from pyemfplay.gdi import EmrFormat, EpsData, RectL
from pyemfplay.record.record import Record


class EmrComment(Record):
    """
    Comment record. The base class is used for private comments, whose content is only meaningful to the
    application that wrote them.
    """

    def __init__(self, size: int, dataSize: int, privateData: bytes):
        super().__init__(RecordType.EMR_COMMENT, size)
        self.dataSize = dataSize
        self.commentIdentifier = None
        self.privateData = privateData


class EmrCommentEmfPlus(EmrComment):
    """
    Comment holding EMF+ records. The EMF+ records are kept undecoded.
    """

    def __init__(self, size: int, dataSize: int, emfPlusRecords: bytes):
        super().__init__(size, dataSize, b"")
        self.commentIdentifier = CommentIdentifier.EMR_COMMENT_EMFPLUS
        self.emfPlusRecords = emfPlusRecords


class EmrCommentEmfSpool(EmrComment):
    def __init__(self, size: int, dataSize: int, emfSpoolRecords: bytes):
        super().__init__(size, dataSize, b"")
        self.commentIdentifier = CommentIdentifier.EMR_COMMENT_EMFSPOOL
        self.emfSpoolRecords = emfSpoolRecords


class EmrCommentPublic(EmrComment):
    """
    Base class for public comments. Public comments without a dedicated class keep their payload in publicData.
    """

    def __init__(self, size: int, dataSize: int, publicCommentIdentifier: CommentPublicType,
                 publicData: bytes = b""):
        super().__init__(size, dataSize, b"")
        self.commentIdentifier = CommentIdentifier.EMR_COMMENT_PUBLIC
        self.publicCommentIdentifier = publicCommentIdentifier
        self.publicData = publicData


class EmrCommentBeginGroup(EmrCommentPublic):
    def __init__(self, size: int, dataSize: int, rectangle: RectL, nDescription: int, description: str):
        super().__init__(size, dataSize, CommentPublicType.EMR_COMMENT_BEGINGROUP)
        self.rectangle = rectangle
        self.nDescription = nDescription
        self.description = description


class EmrCommentEndGroup(EmrCommentPublic):
    def __init__(self, size: int, dataSize: int):
        super().__init__(size, dataSize, CommentPublicType.EMR_COMMENT_ENDGROUP)


class EmrCommentMultiformats(EmrCommentPublic):
    """
    Comment holding the same picture in several formats (EMF, EPS...). Encapsulated PostScript data is decoded,
    other formats are kept as bytes.
    """

    def __init__(self, size: int, dataSize: int, outputRect: RectL, countFormats: int, formats: List[EmrFormat],
                 formatData: List[Union[bytes, EpsData]]):
        super().__init__(size, dataSize, CommentPublicType.EMR_COMMENT_MULTIFORMATS)
        self.outputRect = outputRect
        self.countFormats = countFormats
        self.formats = formats
        self.formatData = formatData


class EmrCommentWindowsMetafile(EmrCommentPublic):
    def __init__(self, size: int, dataSize: int, version: int, reserved: int, checksum: int, flags: int,
                 winMetafileSize: int, winMetafile: bytes):
        super().__init__(size, dataSize, CommentPublicType.EMR_COMMENT_WINDOWS_METAFILE)
        self.version = version
        self.reserved = reserved
        self.checksum = checksum
        self.flags = flags
        self.winMetafileSize = winMetafileSize
        self.winMetafile = winMetafile
