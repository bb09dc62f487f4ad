#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.gdi.base import GDIStructure


class PointL(GDIStructure):
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y


class PointS(GDIStructure):
    """
    16-bit point, used by the compact variants of the poly records.
    """

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y


class RectL(GDIStructure):
    def __init__(self, left: int, top: int, right: int, bottom: int):
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def isEmpty(self) -> bool:
        return self.right <= self.left or self.bottom <= self.top

    def normalized(self) -> 'RectL':
        """
        Get a copy of this rectangle with its left and top edges before its right and bottom edges.
        """
        return RectL(min(self.left, self.right), min(self.top, self.bottom), max(self.left, self.right),
                     max(self.top, self.bottom))


class SizeL(GDIStructure):
    def __init__(self, cx: int, cy: int):
        self.cx = cx
        self.cy = cy


class XForm(GDIStructure):
    """
    2x3 affine transform from page space to device space:
        x' = x * m11 + y * m21 + dx
        y' = x * m12 + y * m22 + dy
    """

    def __init__(self, m11: float = 1.0, m12: float = 0.0, m21: float = 0.0, m22: float = 1.0, dx: float = 0.0,
                 dy: float = 0.0):
        self.m11 = m11
        self.m12 = m12
        self.m21 = m21
        self.m22 = m22
        self.dx = dx
        self.dy = dy

    @staticmethod
    def identity() -> 'XForm':
        return XForm()

    def multiply(self, other: 'XForm') -> 'XForm':
        """
        Compose two transforms: the result applies self first, then other.
        """
        return XForm(
            m11=self.m11 * other.m11 + self.m12 * other.m21,
            m12=self.m11 * other.m12 + self.m12 * other.m22,
            m21=self.m21 * other.m11 + self.m22 * other.m21,
            m22=self.m21 * other.m12 + self.m22 * other.m22,
            dx=self.dx * other.m11 + self.dy * other.m21 + other.dx,
            dy=self.dx * other.m12 + self.dy * other.m22 + other.dy,
        )

    def apply(self, x: float, y: float) -> (float, float):
        return x * self.m11 + y * self.m21 + self.dx, x * self.m12 + y * self.m22 + self.dy

    def calcScale(self) -> float:
        """
        Uniform scale factor of the transform, used for line widths and font sizes.
        """
        return abs(self.m11 * self.m22 - self.m12 * self.m21) ** 0.5
