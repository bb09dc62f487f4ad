#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List

from pyemfplay.enum import FormatSignature
from pyemfplay.gdi.base import GDIStructure


class Point28_4(GDIStructure):
    """
    Point with fixed point coordinates: 28 bits of integer part and 4 bits of fraction.
    """

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    @property
    def xValue(self) -> float:
        return self.x / 16

    @property
    def yValue(self) -> float:
        return self.y / 16


class EpsData(GDIStructure):
    """
    Embedded PostScript document with the parallelogram it is drawn into.
    """
    VERSION = 0x00000001

    def __init__(self, sizeData: int, version: int, points: List[Point28_4], postScriptData: bytes):
        self.sizeData = sizeData
        self.version = version
        self.points = points
        self.postScriptData = postScriptData


class EmrFormat(GDIStructure):
    """
    Descriptor of one of the pictures embedded in a multi-format comment. offData is relative to the start of the
    comment identifier.
    """

    def __init__(self, signature: FormatSignature, version: int, sizeData: int, offData: int):
        self.signature = signature
        self.version = version
        self.sizeData = sizeData
        self.offData = offData
