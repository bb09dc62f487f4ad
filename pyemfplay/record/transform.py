#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.enum import ModifyWorldTransformMode, RecordType
from pyemfplay.gdi import XForm
from pyemfplay.record.record import Record


class EmrModifyWorldTransform(Record):
    def __init__(self, size: int, xform: XForm, modifyWorldTransformMode: ModifyWorldTransformMode):
        super().__init__(RecordType.EMR_MODIFYWORLDTRANSFORM, size)
        self.xform = xform
        self.modifyWorldTransformMode = modifyWorldTransformMode


class EmrSetWorldTransform(Record):
    def __init__(self, size: int, xform: XForm):
        super().__init__(RecordType.EMR_SETWORLDTRANSFORM, size)
        self.xform = xform
