#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.gdi.base import GDIStructure


class TriVertex(GDIStructure):
    """
    Gradient vertex. Color components are 16-bit values, the renderer keeps the high byte.
    """

    def __init__(self, x: int, y: int, red: int, green: int, blue: int, alpha: int):
        self.x = x
        self.y = y
        self.red = red
        self.green = green
        self.blue = blue
        self.alpha = alpha

    def toHex(self) -> str:
        return f"#{self.red >> 8:02X}{self.green >> 8:02X}{self.blue >> 8:02X}"


class GradientRectangle(GDIStructure):
    def __init__(self, upperLeft: int, lowerRight: int):
        self.upperLeft = upperLeft
        self.lowerRight = lowerRight


class GradientTriangle(GDIStructure):
    def __init__(self, vertex1: int, vertex2: int, vertex3: int):
        self.vertex1 = vertex1
        self.vertex2 = vertex2
        self.vertex3 = vertex3
