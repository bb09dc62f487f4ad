#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.enum import ColorAdjustmentFlags, GamutMappingIntent, Illuminant, LogicalColorSpace
from pyemfplay.gdi.base import GDIStructure


class ColorRef(GDIStructure):
    def __init__(self, red: int, green: int, blue: int, reserved: int = 0):
        self.red = red
        self.green = green
        self.blue = blue
        self.reserved = reserved

    @staticmethod
    def black() -> 'ColorRef':
        return ColorRef(0x00, 0x00, 0x00)

    @staticmethod
    def white() -> 'ColorRef':
        return ColorRef(0xFF, 0xFF, 0xFF)

    def toHex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


class ColorAdjustment(GDIStructure):
    """
    Color adjustment values applied to bitmaps by the stretch operations (MS-EMF 2.2.2).
    """

    def __init__(self, size: int, values: ColorAdjustmentFlags, illuminantIndex: Illuminant, redGamma: int,
                 greenGamma: int, blueGamma: int, referenceBlack: int, referenceWhite: int, contrast: int,
                 brightness: int, colorfulness: int, redGreenTint: int):
        self.size = size
        self.values = values
        self.illuminantIndex = illuminantIndex
        self.redGamma = redGamma
        self.greenGamma = greenGamma
        self.blueGamma = blueGamma
        self.referenceBlack = referenceBlack
        self.referenceWhite = referenceWhite
        self.contrast = contrast
        self.brightness = brightness
        self.colorfulness = colorfulness
        self.redGreenTint = redGreenTint

    @staticmethod
    def default() -> 'ColorAdjustment':
        return ColorAdjustment(0x18, ColorAdjustmentFlags(0), Illuminant.ILLUMINANT_DEVICE_DEFAULT, 10000, 10000,
                               10000, 0, 10000, 0, 0, 0, 0)


class CIEXYZ(GDIStructure):
    def __init__(self, ciexyzX: int, ciexyzY: int, ciexyzZ: int):
        self.ciexyzX = ciexyzX
        self.ciexyzY = ciexyzY
        self.ciexyzZ = ciexyzZ


class CIEXYZTriple(GDIStructure):
    def __init__(self, red: CIEXYZ, green: CIEXYZ, blue: CIEXYZ):
        self.red = red
        self.green = green
        self.blue = blue


class LogColorSpace(GDIStructure):
    """
    Logical color space with an ANSI profile file name.
    """

    def __init__(self, signature: int, version: int, size: int, colorSpaceType: LogicalColorSpace,
                 intent: GamutMappingIntent, endpoints: CIEXYZTriple, gammaRed: int, gammaGreen: int, gammaBlue: int,
                 filename: str):
        self.signature = signature
        self.version = version
        self.size = size
        self.colorSpaceType = colorSpaceType
        self.intent = intent
        self.endpoints = endpoints
        self.gammaRed = gammaRed
        self.gammaGreen = gammaGreen
        self.gammaBlue = gammaBlue
        self.filename = filename


class LogColorSpaceW(LogColorSpace):
    """
    Logical color space with a Unicode profile file name.
    """
