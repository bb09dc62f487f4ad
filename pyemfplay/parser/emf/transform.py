#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core import RecordStream, Uint32LE
from pyemfplay.enum import ModifyWorldTransformMode, parseEnum, RecordType
from pyemfplay.parser.emf.base import checkRecordSize, RecordCategoryParser
from pyemfplay.parser.gdi import readXForm
from pyemfplay.record import EmrModifyWorldTransform, EmrSetWorldTransform


class TransformRecordParser(RecordCategoryParser):
    """
    Parser for the world transform records.
    """

    def __init__(self):
        super().__init__()
        self.parsers = {
            RecordType.EMR_MODIFYWORLDTRANSFORM: self.parseModifyWorldTransform,
            RecordType.EMR_SETWORLDTRANSFORM: self.parseSetWorldTransform,
        }

    def parseModifyWorldTransform(self, stream: RecordStream) -> EmrModifyWorldTransform:
        checkRecordSize(stream, 36)
        xform = readXForm(stream)
        mode = parseEnum(ModifyWorldTransformMode, Uint32LE.unpack(stream))
        return EmrModifyWorldTransform(stream.size.byteCount, xform, mode)

    def parseSetWorldTransform(self, stream: RecordStream) -> EmrSetWorldTransform:
        checkRecordSize(stream, 32)
        return EmrSetWorldTransform(stream.size.byteCount, readXForm(stream))
