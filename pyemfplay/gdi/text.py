#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List

from pyemfplay.enum import ExtTextOutOptions
from pyemfplay.gdi.base import GDIStructure
from pyemfplay.gdi.geometry import PointL, RectL


class EmrText(GDIStructure):
    """
    Text payload shared by the text output records (MS-EMF 2.2.5).

    The string and the intercharacter spacing array are not embedded in the structure: offString and offDx locate
    them from the start of the enclosing record.
    """

    def __init__(self, reference: PointL, chars: int, offString: int, options: ExtTextOutOptions,
                 rectangle: RectL = None, offDx: int = 0, string: str = "", dx: List[int] = None):
        self.reference = reference
        self.chars = chars
        self.offString = offString
        self.options = options
        self.rectangle = rectangle
        self.offDx = offDx
        self.string = string
        self.dx = dx if dx is not None else []
