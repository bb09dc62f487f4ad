#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.enum import RecordType
from pyemfplay.gdi.base import GDIStructure


class Record(GDIStructure):
    """
    Base class to represent a decoded metafile record.
    """

    def __init__(self, recordType: RecordType, size: int):
        """
        :param recordType: the type of the record.
        :param size: the declared size of the record, in bytes, including the type and size fields.
        """
        self.recordType = recordType
        self.size = size
