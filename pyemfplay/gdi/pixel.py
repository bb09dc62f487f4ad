#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from enum import IntFlag

from pyemfplay.gdi.base import GDIStructure


class PixelFormatFlags(IntFlag):
    PFD_DEPTH_DONTCARE = 1 << 1
    PFD_DOUBLEBUFFER_DONTCARE = 1 << 2
    PFD_STEREO_DONTCARE = 1 << 3
    PFD_NEED_SYSTEM_PALETTE = 1 << 16
    PFD_SWAP_EXCHANGE = 1 << 17
    PFD_SWAP_COPY = 1 << 18
    PFD_SWAP_LAYER_BUFFERS = 1 << 19
    PFD_GENERIC_ACCELERATED = 1 << 20
    PFD_SUPPORT_DIRECTDRAW = 1 << 21
    PFD_DIRECT3D_ACCELERATED = 1 << 22
    PFD_SUPPORT_COMPOSITION = 1 << 23
    PFD_DOUBLEBUFFER = 1 << 24
    PFD_STEREO = 1 << 25
    PFD_DRAW_TO_WINDOW = 1 << 26
    PFD_DRAW_TO_BITMAP = 1 << 27
    PFD_SUPPORT_GDI = 1 << 28
    PFD_SUPPORT_OPENGL = 1 << 29
    PFD_GENERIC_FORMAT = 1 << 30
    PFD_NEED_PALETTE = 1 << 31


class PixelFormatDescriptor(GDIStructure):
    """
    Pixel format of an OpenGL drawing surface (MS-EMF 2.2.22). Only the flags are interpreted, the bit counts
    are kept as decoded.
    """
    SIZE = 40
    VERSION = 0x0001

    def __init__(self, size: int, version: int, flags: PixelFormatFlags, pixelType: int, colorBits: int,
                 bitCounts: bytes, auxBuffers: int, layerType: int, reserved: int, layerMask: int,
                 visibleMask: int, damageMask: int):
        """
        :param bitCounts: the 15 color, accumulator, depth and stencil bit count bytes, from cRedBits to
        cStencilBits.
        """
        self.size = size
        self.version = version
        self.flags = flags
        self.pixelType = pixelType
        self.colorBits = colorBits
        self.bitCounts = bitCounts
        self.auxBuffers = auxBuffers
        self.layerType = layerType
        self.reserved = reserved
        self.layerMask = layerMask
        self.visibleMask = visibleMask
        self.damageMask = damageMask
