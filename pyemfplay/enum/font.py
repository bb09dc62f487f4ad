#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from enum import IntEnum, IntFlag


class CharacterSet(IntEnum):
    ANSI_CHARSET = 0x00
    DEFAULT_CHARSET = 0x01
    SYMBOL_CHARSET = 0x02
    MAC_CHARSET = 0x4D
    SHIFTJIS_CHARSET = 0x80
    HANGUL_CHARSET = 0x81
    JOHAB_CHARSET = 0x82
    GB2312_CHARSET = 0x86
    CHINESEBIG5_CHARSET = 0x88
    GREEK_CHARSET = 0xA1
    TURKISH_CHARSET = 0xA2
    VIETNAMESE_CHARSET = 0xA3
    HEBREW_CHARSET = 0xB1
    ARABIC_CHARSET = 0xB2
    BALTIC_CHARSET = 0xBA
    RUSSIAN_CHARSET = 0xCC
    THAI_CHARSET = 0xDE
    EASTEUROPE_CHARSET = 0xEE
    OEM_CHARSET = 0xFF


class OutPrecision(IntEnum):
    OUT_DEFAULT_PRECIS = 0x00
    OUT_STRING_PRECIS = 0x01
    OUT_CHARACTER_PRECIS = 0x02
    OUT_STROKE_PRECIS = 0x03
    OUT_TT_PRECIS = 0x04
    OUT_DEVICE_PRECIS = 0x05
    OUT_RASTER_PRECIS = 0x06
    OUT_TT_ONLY_PRECIS = 0x07
    OUT_OUTLINE_PRECIS = 0x08
    OUT_SCREEN_OUTLINE_PRECIS = 0x09
    OUT_PS_ONLY_PRECIS = 0x0A


class ClipPrecision(IntFlag):
    CLIP_DEFAULT_PRECIS = 0x00
    CLIP_CHARACTER_PRECIS = 0x01
    CLIP_STROKE_PRECIS = 0x02
    CLIP_LH_ANGLES = 0x10
    CLIP_TT_ALWAYS = 0x20
    CLIP_DFA_DISABLE = 0x40
    CLIP_EMBEDDED = 0x80


class FontQuality(IntEnum):
    DEFAULT_QUALITY = 0x00
    DRAFT_QUALITY = 0x01
    PROOF_QUALITY = 0x02
    NONANTIALIASED_QUALITY = 0x03
    ANTIALIASED_QUALITY = 0x04
    CLEARTYPE_QUALITY = 0x05


class PitchFont(IntEnum):
    DEFAULT_PITCH = 0x00
    FIXED_PITCH = 0x01
    VARIABLE_PITCH = 0x02


class FamilyFont(IntEnum):
    FF_DONTCARE = 0x00
    FF_ROMAN = 0x01
    FF_SWISS = 0x02
    FF_MODERN = 0x03
    FF_SCRIPT = 0x04
    FF_DECORATIVE = 0x05


class ExtTextOutOptions(IntFlag):
    ETO_OPAQUE = 0x00000002
    ETO_CLIPPED = 0x00000004
    ETO_GLYPH_INDEX = 0x00000010
    ETO_RTLREADING = 0x00000080
    ETO_NO_RECT = 0x00000100
    ETO_SMALL_CHARS = 0x00000200
    ETO_NUMERICSLOCAL = 0x00000400
    ETO_NUMERICSLATIN = 0x00000800
    ETO_IGNORELANGUAGE = 0x00001000
    ETO_PDY = 0x00002000
    ETO_REVERSE_INDEX_MAP = 0x00010000


# Panose classification (MS-EMF 2.2.21). Every enumeration shares PAN_ANY and PAN_NO_FIT.

class FamilyType(IntEnum):
    PAN_ANY = 0x00
    PAN_NO_FIT = 0x01
    PAN_FAMILY_TEXT_DISPLAY = 0x02
    PAN_FAMILY_SCRIPT = 0x03
    PAN_FAMILY_DECORATIVE = 0x04
    PAN_FAMILY_PICTORIAL = 0x05


class SerifType(IntEnum):
    PAN_ANY = 0x00
    PAN_NO_FIT = 0x01
    PAN_SERIF_COVE = 0x02
    PAN_SERIF_OBTUSE_COVE = 0x03
    PAN_SERIF_SQUARE_COVE = 0x04
    PAN_SERIF_OBTUSE_SQUARE_COVE = 0x05
    PAN_SERIF_SQUARE = 0x06
    PAN_SERIF_THIN = 0x07
    PAN_SERIF_BONE = 0x08
    PAN_SERIF_EXAGGERATED = 0x09
    PAN_SERIF_TRIANGLE = 0x0A
    PAN_SERIF_NORMAL_SANS = 0x0B
    PAN_SERIF_OBTUSE_SANS = 0x0C
    PAN_SERIF_PERP_SANS = 0x0D
    PAN_SERIF_FLARED = 0x0E
    PAN_SERIF_ROUNDED = 0x0F


class Weight(IntEnum):
    PAN_ANY = 0x00
    PAN_NO_FIT = 0x01
    PAN_WEIGHT_VERY_LIGHT = 0x02
    PAN_WEIGHT_LIGHT = 0x03
    PAN_WEIGHT_THIN = 0x04
    PAN_WEIGHT_BOOK = 0x05
    PAN_WEIGHT_MEDIUM = 0x06
    PAN_WEIGHT_DEMI = 0x07
    PAN_WEIGHT_BOLD = 0x08
    PAN_WEIGHT_HEAVY = 0x09
    PAN_WEIGHT_BLACK = 0x0A
    PAN_WEIGHT_NORD = 0x0B


class Proportion(IntEnum):
    PAN_ANY = 0x00
    PAN_NO_FIT = 0x01
    PAN_PROP_OLD_STYLE = 0x02
    PAN_PROP_MODERN = 0x03
    PAN_PROP_EVEN_WIDTH = 0x04
    PAN_PROP_EXPANDED = 0x05
    PAN_PROP_CONDENSED = 0x06
    PAN_PROP_VERY_EXPANDED = 0x07
    PAN_PROP_VERY_CONDENSED = 0x08
    PAN_PROP_MONOSPACED = 0x09


class Contrast(IntEnum):
    PAN_ANY = 0x00
    PAN_NO_FIT = 0x01
    PAN_CONTRAST_NONE = 0x02
    PAN_CONTRAST_VERY_LOW = 0x03
    PAN_CONTRAST_LOW = 0x04
    PAN_CONTRAST_MEDIUM_LOW = 0x05
    PAN_CONTRAST_MEDIUM = 0x06
    PAN_CONTRAST_MEDIUM_HIGH = 0x07
    PAN_CONTRAST_HIGH = 0x08
    PAN_CONTRAST_VERY_HIGH = 0x09


class StrokeVariation(IntEnum):
    PAN_ANY = 0x00
    PAN_NO_FIT = 0x01
    PAN_STROKE_GRADUAL_DIAG = 0x02
    PAN_STROKE_GRADUAL_TRAN = 0x03
    PAN_STROKE_GRADUAL_VERT = 0x04
    PAN_STROKE_GRADUAL_HORZ = 0x05
    PAN_STROKE_RAPID_VERT = 0x06
    PAN_STROKE_RAPID_HORZ = 0x07
    PAN_STROKE_INSTANT_VERT = 0x08


class ArmStyle(IntEnum):
    PAN_ANY = 0x00
    PAN_NO_FIT = 0x01
    PAN_STRAIGHT_ARMS_HORZ = 0x02
    PAN_STRAIGHT_ARMS_WEDGE = 0x03
    PAN_STRAIGHT_ARMS_VERT = 0x04
    PAN_STRAIGHT_ARMS_SINGLE_SERIF = 0x05
    PAN_STRAIGHT_ARMS_DOUBLE_SERIF = 0x06
    PAN_BENT_ARMS_HORZ = 0x07
    PAN_BENT_ARMS_WEDGE = 0x08
    PAN_BENT_ARMS_VERT = 0x09
    PAN_BENT_ARMS_SINGLE_SERIF = 0x0A
    PAN_BENT_ARMS_DOUBLE_SERIF = 0x0B


class Letterform(IntEnum):
    PAN_ANY = 0x00
    PAN_NO_FIT = 0x01
    PAN_LETT_NORMAL_CONTACT = 0x02
    PAN_LETT_NORMAL_WEIGHTED = 0x03
    PAN_LETT_NORMAL_BOXED = 0x04
    PAN_LETT_NORMAL_FLATTENED = 0x05
    PAN_LETT_NORMAL_ROUNDED = 0x06
    PAN_LETT_NORMAL_OFF_CENTER = 0x07
    PAN_LETT_NORMAL_SQUARE = 0x08
    PAN_LETT_OBLIQUE_CONTACT = 0x09
    PAN_LETT_OBLIQUE_WEIGHTED = 0x0A
    PAN_LETT_OBLIQUE_BOXED = 0x0B
    PAN_LETT_OBLIQUE_FLATTENED = 0x0C
    PAN_LETT_OBLIQUE_ROUNDED = 0x0D
    PAN_LETT_OBLIQUE_OFF_CENTER = 0x0E
    PAN_LETT_OBLIQUE_SQUARE = 0x0F


class MidLine(IntEnum):
    PAN_ANY = 0x00
    PAN_NO_FIT = 0x01
    PAN_MIDLINE_STANDARD_TRIMMED = 0x02
    PAN_MIDLINE_STANDARD_POINTED = 0x03
    PAN_MIDLINE_STANDARD_SERIFED = 0x04
    PAN_MIDLINE_HIGH_TRIMMED = 0x05
    PAN_MIDLINE_HIGH_POINTED = 0x06
    PAN_MIDLINE_HIGH_SERIFED = 0x07
    PAN_MIDLINE_CONSTANT_TRIMMED = 0x08
    PAN_MIDLINE_CONSTANT_POINTED = 0x09
    PAN_MIDLINE_CONSTANT_SERIFED = 0x0A
    PAN_MIDLINE_LOW_TRIMMED = 0x0B
    PAN_MIDLINE_LOW_POINTED = 0x0C
    PAN_MIDLINE_LOW_SERIFED = 0x0D


class XHeight(IntEnum):
    PAN_ANY = 0x00
    PAN_NO_FIT = 0x01
    PAN_XHEIGHT_CONSTANT_SMALL = 0x02
    PAN_XHEIGHT_CONSTANT_STD = 0x03
    PAN_XHEIGHT_CONSTANT_LARGE = 0x04
    PAN_XHEIGHT_DUCKING_SMALL = 0x05
    PAN_XHEIGHT_DUCKING_STD = 0x06
    PAN_XHEIGHT_DUCKING_LARGE = 0x07
