#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List

from pyemfplay.gdi.base import GDIStructure
from pyemfplay.gdi.geometry import RectL


class RegionDataHeader(GDIStructure):
    SIZE = 0x00000020
    RDH_RECTANGLES = 0x00000001

    def __init__(self, size: int, type: int, countRects: int, rgnSize: int, bounds: RectL):
        self.size = size
        self.type = type
        self.countRects = countRects
        self.rgnSize = rgnSize
        self.bounds = bounds


class RegionData(GDIStructure):
    """
    A region made of non-overlapping rectangles.
    """

    def __init__(self, header: RegionDataHeader, rects: List[RectL]):
        self.header = header
        self.rects = rects

    @staticmethod
    def fromRects(rects: List[RectL]) -> 'RegionData':
        """
        Build a region from non-overlapping rectangles. The bounds of an empty region are all 0.
        """
        if rects:
            bounds = RectL(min(rect.left for rect in rects), min(rect.top for rect in rects),
                           max(rect.right for rect in rects), max(rect.bottom for rect in rects))
        else:
            bounds = RectL(0, 0, 0, 0)

        header = RegionDataHeader(RegionDataHeader.SIZE, RegionDataHeader.RDH_RECTANGLES, len(rects),
                                  len(rects) * 16, bounds)
        return RegionData(header, rects)

    def intersect(self, rect: RectL) -> 'RegionData':
        """
        Get the part of this region that lies inside a rectangle.
        """
        rect = rect.normalized()
        rects = []

        for current in self.rects:
            clipped = RectL(max(current.left, rect.left), max(current.top, rect.top),
                            min(current.right, rect.right), min(current.bottom, rect.bottom))

            if not clipped.isEmpty:
                rects.append(clipped)

        return RegionData.fromRects(rects)

    def exclude(self, rect: RectL) -> 'RegionData':
        """
        Get the part of this region that lies outside of a rectangle. Each rectangle of the region that overlaps
        the excluded one is split into the bands above and below it and the pieces on its left and right.
        """
        rect = rect.normalized()
        rects = []

        for current in self.rects:
            if RectL(max(current.left, rect.left), max(current.top, rect.top), min(current.right, rect.right),
                     min(current.bottom, rect.bottom)).isEmpty:
                rects.append(RectL(current.left, current.top, current.right, current.bottom))
                continue

            top = max(current.top, rect.top)
            bottom = min(current.bottom, rect.bottom)
            pieces = [
                RectL(current.left, current.top, current.right, top),
                RectL(current.left, top, rect.left, bottom),
                RectL(rect.right, top, current.right, bottom),
                RectL(current.left, bottom, current.right, current.bottom),
            ]
            rects.extend(piece for piece in pieces if not piece.isEmpty)

        return RegionData.fromRects(rects)
