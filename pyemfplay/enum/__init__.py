#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.enum.core import parseEnum, parseFlags
from pyemfplay.enum.font import ArmStyle, CharacterSet, ClipPrecision, Contrast, ExtTextOutOptions, FamilyFont, \
    FamilyType, FontQuality, Letterform, MidLine, OutPrecision, PitchFont, Proportion, SerifType, StrokeVariation, \
    Weight, XHeight
from pyemfplay.enum.gdi import BinaryRasterOperation, BitmapCompression, BrushStyle, DIBColors, GamutMappingIntent, \
    HatchStyle, LogicalColorSpace, PEN_ENDCAP_MASK, PEN_JOIN_MASK, PEN_STYLE_MASK, PEN_TYPE_MASK, PenEndCap, PenJoin, \
    PenStyle, PenType, RegionMode, STOCK_OBJECT_FLAG, StockObject, TernaryRasterOperation
from pyemfplay.enum.record import CommentIdentifier, CommentPublicType, FormatSignature, MetafileVersion, RecordType
from pyemfplay.enum.state import ArcDirection, BackgroundMode, ColorAdjustmentFlags, ColorMatchToTarget, \
    ColorSpaceAction, FloodFill, GradientFill, GraphicsMode, ICMMode, Illuminant, LayoutMode, MapMode, \
    ModifyWorldTransformMode, PointType, PolygonFillMode, StretchMode, TEXT_HORIZONTAL_ALIGNMENT_MASK, \
    TEXT_VERTICAL_ALIGNMENT_MASK, TextAlignmentMode
