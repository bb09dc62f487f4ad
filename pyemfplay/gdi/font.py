#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List

from pyemfplay.enum import ArmStyle, CharacterSet, ClipPrecision, Contrast, FamilyFont, FamilyType, FontQuality, \
    Letterform, MidLine, OutPrecision, PitchFont, Proportion, SerifType, StrokeVariation, Weight, XHeight
from pyemfplay.gdi.base import GDIStructure


class LogFont(GDIStructure):
    """
    Basic attributes of a logical font (MS-EMF 2.2.13).
    """

    def __init__(self, height: int, width: int, escapement: int, orientation: int, weight: int, italic: bool,
                 underline: bool, strikeOut: bool, charset: CharacterSet, outPrecision: OutPrecision,
                 clipPrecision: ClipPrecision, quality: FontQuality, pitch: PitchFont, family: FamilyFont,
                 facename: str):
        self.height = height
        self.width = width
        self.escapement = escapement
        self.orientation = orientation
        self.weight = weight
        self.italic = italic
        self.underline = underline
        self.strikeOut = strikeOut
        self.charset = charset
        self.outPrecision = outPrecision
        self.clipPrecision = clipPrecision
        self.quality = quality
        self.pitch = pitch
        self.family = family
        self.facename = facename

    @property
    def logFont(self) -> 'LogFont':
        return self


class LogFontEx(GDIStructure):
    def __init__(self, logFont: LogFont, fullName: str, style: str, script: str):
        self.logFont = logFont
        self.fullName = fullName
        self.style = style
        self.script = script


class DesignVector(GDIStructure):
    """
    Axes of a multiple master font. There are at most 16 axes.
    """
    SIGNATURE = 0x08007664
    MAX_AXES = 16

    def __init__(self, signature: int, values: List[int]):
        self.signature = signature
        self.values = values

    @property
    def numAxes(self) -> int:
        return len(self.values)


class LogFontExDv(GDIStructure):
    def __init__(self, logFontEx: LogFontEx, designVector: DesignVector):
        self.logFontEx = logFontEx
        self.designVector = designVector

    @property
    def logFont(self) -> LogFont:
        return self.logFontEx.logFont


class Panose(GDIStructure):
    def __init__(self, familyType: FamilyType, serifStyle: SerifType, weight: Weight, proportion: Proportion,
                 contrast: Contrast, strokeVariation: StrokeVariation, armStyle: ArmStyle, letterform: Letterform,
                 midline: MidLine, xHeight: XHeight):
        self.familyType = familyType
        self.serifStyle = serifStyle
        self.weight = weight
        self.proportion = proportion
        self.contrast = contrast
        self.strokeVariation = strokeVariation
        self.armStyle = armStyle
        self.letterform = letterform
        self.midline = midline
        self.xHeight = xHeight


class LogFontPanose(GDIStructure):
    def __init__(self, logFont: LogFont, fullName: str, style: str, version: int, styleSize: int, match: int,
                 vendorId: int, culture: int, panose: Panose):
        self.logFont = logFont
        self.fullName = fullName
        self.style = style
        self.version = version
        self.styleSize = styleSize
        self.match = match
        self.vendorId = vendorId
        self.culture = culture
        self.panose = panose


class UniversalFontId(GDIStructure):
    def __init__(self, checksum: int, index: int):
        self.checksum = checksum
        self.index = index
