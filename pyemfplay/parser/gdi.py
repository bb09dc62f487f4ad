#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

"""
Decoders for the structures shared by several record types.
Each function reads one structure from a record stream and validates it.
"""

import logging
from io import BytesIO
from typing import BinaryIO, List, Optional

from pyemfplay.core import decodeANSI, decodeNullTerminatedANSI, decodeNullTerminatedUTF16LE, decodeUTF16LE, \
    Float32LE, Int16LE, Int32LE, readBytes, RecordStream, Uint16LE, Uint32LE, Uint8
from pyemfplay.enum import ArmStyle, BitmapCompression, BrushStyle, CharacterSet, ClipPrecision, \
    ColorAdjustmentFlags, Contrast, DIBColors, ExtTextOutOptions, FamilyFont, FamilyType, FontQuality, \
    FormatSignature, GamutMappingIntent, HatchStyle, Illuminant, Letterform, LogicalColorSpace, MidLine, \
    OutPrecision, parseEnum, parseFlags, PEN_ENDCAP_MASK, PEN_JOIN_MASK, PEN_STYLE_MASK, PEN_TYPE_MASK, PenEndCap, \
    PenJoin, PenStyle, PenType, PitchFont, Proportion, RecordType, SerifType, StrokeVariation, Weight, XHeight
from pyemfplay.exceptions import NotSupportedError, UnexpectedPatternError
from pyemfplay.gdi import BitmapInfoHeader, BlendFunction, CIEXYZ, CIEXYZTriple, ColorAdjustment, ColorRef, \
    DesignVector, DeviceIndependentBitmap, EmrFormat, EmrText, EpsData, GradientRectangle, GradientTriangle, \
    LogBrushEx, LogColorSpace, LogColorSpaceW, LogFont, LogFontEx, LogFontExDv, LogFontPanose, LogPalette, \
    LogPaletteEntry, LogPen, LogPenEx, Panose, PixelFormatDescriptor, PixelFormatFlags, Point28_4, PointL, PointS, \
    RectL, RegionData, RegionDataHeader, SizeL, TriVertex, UniversalFontId, XForm
from pyemfplay.logging import LOGGER_NAMES

LOG = logging.getLogger(LOGGER_NAMES.PARSER)

LOG_FONT_SIZE = 92
LOG_FONT_EX_SIZE = 348
LOG_FONT_PANOSE_SIZE = 320
COLOR_ADJUSTMENT_SIZE = 0x18
LOG_COLOR_SPACE_SIGNATURE = 0x50534F43
LOG_COLOR_SPACE_VERSION = 0x400
MAX_PATH = 260

ANSI_TEXT_RECORDS = [RecordType.EMR_EXTTEXTOUTA, RecordType.EMR_POLYTEXTOUTA]


def readPointL(stream: RecordStream) -> PointL:
    return PointL(Int32LE.unpack(stream), Int32LE.unpack(stream))


def readPointS(stream: RecordStream) -> PointS:
    return PointS(Int16LE.unpack(stream), Int16LE.unpack(stream))


def readPointsL(stream: RecordStream, count: int) -> List[PointL]:
    return [readPointL(stream) for _ in range(count)]


def readPointsS(stream: RecordStream, count: int) -> List[PointS]:
    return [readPointS(stream) for _ in range(count)]


def readRectL(stream: RecordStream) -> RectL:
    return RectL(Int32LE.unpack(stream), Int32LE.unpack(stream), Int32LE.unpack(stream), Int32LE.unpack(stream))


def readSizeL(stream: RecordStream) -> SizeL:
    return SizeL(Int32LE.unpack(stream), Int32LE.unpack(stream))


def readXForm(stream: RecordStream) -> XForm:
    return XForm(
        m11=Float32LE.unpack(stream),
        m12=Float32LE.unpack(stream),
        m21=Float32LE.unpack(stream),
        m22=Float32LE.unpack(stream),
        dx=Float32LE.unpack(stream),
        dy=Float32LE.unpack(stream),
    )


def readColorRef(stream: RecordStream) -> ColorRef:
    return ColorRef(Uint8.unpack(stream), Uint8.unpack(stream), Uint8.unpack(stream), Uint8.unpack(stream))


def checkRange(name: str, value: int, minimum: int, maximum: int):
    if value < minimum or value > maximum:
        raise UnexpectedPatternError(f"{name} must be between {minimum} and {maximum}, got {value}")


def readColorAdjustment(stream: RecordStream) -> ColorAdjustment:
    """
    Read a ColorAdjustment object. Every field is range checked.
    """
    size = Uint16LE.unpack(stream)

    if size != COLOR_ADJUSTMENT_SIZE:
        raise UnexpectedPatternError(f"ColorAdjustment size must be {COLOR_ADJUSTMENT_SIZE:#x}, got {size:#x}")

    values = parseFlags(ColorAdjustmentFlags, Uint16LE.unpack(stream))
    illuminantIndex = parseEnum(Illuminant, Uint16LE.unpack(stream))
    redGamma = Uint16LE.unpack(stream)
    greenGamma = Uint16LE.unpack(stream)
    blueGamma = Uint16LE.unpack(stream)
    referenceBlack = Uint16LE.unpack(stream)
    referenceWhite = Uint16LE.unpack(stream)
    contrast = Int16LE.unpack(stream)
    brightness = Int16LE.unpack(stream)
    colorfulness = Int16LE.unpack(stream)
    redGreenTint = Int16LE.unpack(stream)

    checkRange("ColorAdjustment redGamma", redGamma, 2500, 65000)
    checkRange("ColorAdjustment greenGamma", greenGamma, 2500, 65000)
    checkRange("ColorAdjustment blueGamma", blueGamma, 2500, 65000)
    checkRange("ColorAdjustment referenceBlack", referenceBlack, 0, 4000)
    checkRange("ColorAdjustment referenceWhite", referenceWhite, 6000, 10000)
    checkRange("ColorAdjustment contrast", contrast, -100, 100)
    checkRange("ColorAdjustment brightness", brightness, -100, 100)
    checkRange("ColorAdjustment colorfulness", colorfulness, -100, 100)
    checkRange("ColorAdjustment redGreenTint", redGreenTint, -100, 100)

    return ColorAdjustment(size, values, illuminantIndex, redGamma, greenGamma, blueGamma, referenceBlack,
                           referenceWhite, contrast, brightness, colorfulness, redGreenTint)


def readLogBrushEx(stream: RecordStream) -> LogBrushEx:
    """
    Read a LogBrushEx object. Only solid, null and hatched brushes can be described this way.
    """
    brushStyle = parseEnum(BrushStyle, Uint32LE.unpack(stream))
    color = readColorRef(stream)
    brushHatch = Uint32LE.unpack(stream)

    if brushStyle == BrushStyle.BS_HATCHED:
        return LogBrushEx(brushStyle, color, parseEnum(HatchStyle, brushHatch))
    elif brushStyle in [BrushStyle.BS_SOLID, BrushStyle.BS_NULL]:
        return LogBrushEx(brushStyle, color)

    raise NotSupportedError(f"LogBrushEx does not support the {brushStyle.name} brush style")


def checkPenStyle(penStyle: int):
    """
    Validate every part of a pen style: line style, end cap, join and pen type.
    """
    if penStyle & ~(PEN_STYLE_MASK | PEN_ENDCAP_MASK | PEN_JOIN_MASK | PEN_TYPE_MASK):
        raise UnexpectedPatternError(f"Pen style {penStyle:#x} has undefined bits set")

    parseEnum(PenStyle, penStyle & PEN_STYLE_MASK)
    parseEnum(PenEndCap, penStyle & PEN_ENDCAP_MASK)
    parseEnum(PenJoin, penStyle & PEN_JOIN_MASK)
    parseEnum(PenType, penStyle & PEN_TYPE_MASK)


def readLogPen(stream: RecordStream) -> LogPen:
    penStyle = Uint32LE.unpack(stream)
    checkPenStyle(penStyle)
    width = readPointL(stream)
    color = readColorRef(stream)
    return LogPen(penStyle, width, color)


def readLogPenEx(stream: RecordStream) -> LogPenEx:
    """
    Read a LogPenEx object. The 4 bytes that follow the brush style are a ColorRef for solid and hatched brushes,
    a DIBColors value in their low-order word for DIB pattern brushes and are ignored for the other styles.
    """
    penStyle = Uint32LE.unpack(stream)
    checkPenStyle(penStyle)
    width = Uint32LE.unpack(stream)
    brushStyle = parseEnum(BrushStyle, Uint32LE.unpack(stream))
    colorData = readBytes(stream, 4)
    brushHatch = Uint32LE.unpack(stream)
    numStyleEntries = Uint32LE.unpack(stream)

    color = None
    hatch = None
    colorUsage = None

    if brushStyle == BrushStyle.BS_SOLID:
        color = readColorRef(BytesIO(colorData))
    elif brushStyle == BrushStyle.BS_HATCHED:
        color = readColorRef(BytesIO(colorData))
        hatch = parseEnum(HatchStyle, brushHatch)

        if penStyle & PEN_TYPE_MASK != PenType.PS_GEOMETRIC \
                and hatch not in [HatchStyle.HS_SOLIDTEXTCLR, HatchStyle.HS_SOLIDBKCLR]:
            raise NotSupportedError(f"A cosmetic pen cannot use the {hatch.name} hatch style")
    elif brushStyle in [BrushStyle.BS_DIBPATTERN, BrushStyle.BS_DIBPATTERNPT]:
        colorUsage = parseEnum(DIBColors, Uint16LE.unpack(colorData[: 2]))
    elif brushStyle not in [BrushStyle.BS_PATTERN, BrushStyle.BS_NULL]:
        raise NotSupportedError(f"LogPenEx does not support the {brushStyle.name} brush style")

    styleEntries = [Uint32LE.unpack(stream) for _ in range(numStyleEntries)]

    if styleEntries and penStyle & PEN_STYLE_MASK != PenStyle.PS_USERSTYLE:
        raise UnexpectedPatternError("Style entries are only allowed with the PS_USERSTYLE line style")

    return LogPenEx(penStyle, width, brushStyle, color, hatch, colorUsage, styleEntries)


def readFixedUTF16(stream: RecordStream, length: int) -> str:
    return decodeNullTerminatedUTF16LE(readBytes(stream, length))


def readLogFont(stream: RecordStream) -> LogFont:
    height = Int32LE.unpack(stream)
    width = Int32LE.unpack(stream)
    escapement = Int32LE.unpack(stream)
    orientation = Int32LE.unpack(stream)
    weight = Int32LE.unpack(stream)
    italic = Uint8.unpack(stream) != 0
    underline = Uint8.unpack(stream) != 0
    strikeOut = Uint8.unpack(stream) != 0
    charset = parseEnum(CharacterSet, Uint8.unpack(stream))
    outPrecision = parseEnum(OutPrecision, Uint8.unpack(stream))
    clipPrecision = parseFlags(ClipPrecision, Uint8.unpack(stream))
    quality = parseEnum(FontQuality, Uint8.unpack(stream))
    pitchAndFamily = Uint8.unpack(stream)
    pitch = parseEnum(PitchFont, pitchAndFamily & 0x03)
    family = parseEnum(FamilyFont, pitchAndFamily >> 4)
    facename = readFixedUTF16(stream, 64)

    return LogFont(height, width, escapement, orientation, weight, italic, underline, strikeOut, charset,
                   outPrecision, clipPrecision, quality, pitch, family, facename)


def readLogFontEx(stream: RecordStream) -> LogFontEx:
    logFont = readLogFont(stream)
    fullName = readFixedUTF16(stream, 128)
    style = readFixedUTF16(stream, 64)
    script = readFixedUTF16(stream, 64)
    return LogFontEx(logFont, fullName, style, script)


def readDesignVector(stream: RecordStream) -> DesignVector:
    signature = Uint32LE.unpack(stream)

    if signature != DesignVector.SIGNATURE:
        raise UnexpectedPatternError(f"DesignVector signature must be {DesignVector.SIGNATURE:#010x}, "
                                     f"got {signature:#010x}")

    numAxes = Uint32LE.unpack(stream)

    if numAxes > DesignVector.MAX_AXES:
        raise UnexpectedPatternError(f"DesignVector has {numAxes} axes, the maximum is {DesignVector.MAX_AXES}")

    return DesignVector(signature, [Int32LE.unpack(stream) for _ in range(numAxes)])


def readLogFontExDv(stream: RecordStream) -> LogFontExDv:
    return LogFontExDv(readLogFontEx(stream), readDesignVector(stream))


def readPanose(stream: RecordStream) -> Panose:
    return Panose(
        parseEnum(FamilyType, Uint8.unpack(stream)),
        parseEnum(SerifType, Uint8.unpack(stream)),
        parseEnum(Weight, Uint8.unpack(stream)),
        parseEnum(Proportion, Uint8.unpack(stream)),
        parseEnum(Contrast, Uint8.unpack(stream)),
        parseEnum(StrokeVariation, Uint8.unpack(stream)),
        parseEnum(ArmStyle, Uint8.unpack(stream)),
        parseEnum(Letterform, Uint8.unpack(stream)),
        parseEnum(MidLine, Uint8.unpack(stream)),
        parseEnum(XHeight, Uint8.unpack(stream)),
    )


def readLogFontPanose(stream: RecordStream) -> LogFontPanose:
    logFont = readLogFont(stream)
    fullName = readFixedUTF16(stream, 128)
    style = readFixedUTF16(stream, 64)
    version = Uint32LE.unpack(stream)
    styleSize = Uint32LE.unpack(stream)
    match = Uint32LE.unpack(stream)
    Uint32LE.unpack(stream)  # Reserved
    vendorId = Uint32LE.unpack(stream)
    culture = Uint32LE.unpack(stream)
    panose = readPanose(stream)
    readBytes(stream, 2)  # Padding
    return LogFontPanose(logFont, fullName, style, version, styleSize, match, vendorId, culture, panose)


def readLogPaletteEntry(stream: RecordStream) -> LogPaletteEntry:
    return LogPaletteEntry(Uint8.unpack(stream), Uint8.unpack(stream), Uint8.unpack(stream), Uint8.unpack(stream))


def readLogPaletteEntries(stream: RecordStream, count: int) -> List[LogPaletteEntry]:
    return [readLogPaletteEntry(stream) for _ in range(count)]


def readLogPalette(stream: RecordStream) -> LogPalette:
    version = Uint16LE.unpack(stream)

    if version != LogPalette.VERSION:
        raise UnexpectedPatternError(f"LogPalette version must be {LogPalette.VERSION:#06x}, got {version:#06x}")

    numberOfEntries = Uint16LE.unpack(stream)
    return LogPalette(version, readLogPaletteEntries(stream, numberOfEntries))


def readRegionData(stream: RecordStream, rgnDataSize: int) -> RegionData:
    """
    Read a RegionData object.
    :param rgnDataSize: the size of the object in bytes, as declared by the record.
    """
    size = Uint32LE.unpack(stream)

    if size != RegionDataHeader.SIZE:
        raise UnexpectedPatternError(f"RegionDataHeader size must be {RegionDataHeader.SIZE:#x}, got {size:#x}")

    type = Uint32LE.unpack(stream)

    if type != RegionDataHeader.RDH_RECTANGLES:
        raise UnexpectedPatternError(f"RegionDataHeader type must be {RegionDataHeader.RDH_RECTANGLES}, got {type}")

    countRects = Uint32LE.unpack(stream)
    rgnSize = Uint32LE.unpack(stream)
    bounds = readRectL(stream)

    if RegionDataHeader.SIZE + countRects * 16 > rgnDataSize:
        raise UnexpectedPatternError(f"Region with {countRects} rectangles does not fit in {rgnDataSize} bytes")

    header = RegionDataHeader(size, type, countRects, rgnSize, bounds)
    rects = [readRectL(stream) for _ in range(countRects)]
    readBytes(stream, rgnDataSize - RegionDataHeader.SIZE - countRects * 16)
    return RegionData(header, rects)


def readPixelFormatDescriptor(stream: RecordStream) -> PixelFormatDescriptor:
    size = Uint16LE.unpack(stream)
    version = Uint16LE.unpack(stream)

    if version != PixelFormatDescriptor.VERSION:
        raise UnexpectedPatternError(f"PixelFormatDescriptor version must be {PixelFormatDescriptor.VERSION}, "
                                     f"got {version}")

    flags = parseFlags(PixelFormatFlags, Uint32LE.unpack(stream))
    pixelType = Uint8.unpack(stream)
    colorBits = Uint8.unpack(stream)
    bitCounts = readBytes(stream, 15)
    auxBuffers = Uint8.unpack(stream)
    layerType = Uint8.unpack(stream)
    reserved = Uint8.unpack(stream)
    layerMask = Uint32LE.unpack(stream)
    visibleMask = Uint32LE.unpack(stream)
    damageMask = Uint32LE.unpack(stream)
    return PixelFormatDescriptor(size, version, flags, pixelType, colorBits, bitCounts, auxBuffers, layerType,
                                 reserved, layerMask, visibleMask, damageMask)


def readCIEXYZ(stream: RecordStream) -> CIEXYZ:
    return CIEXYZ(Int32LE.unpack(stream), Int32LE.unpack(stream), Int32LE.unpack(stream))


def readLogColorSpace(stream: RecordStream, unicode: bool) -> LogColorSpace:
    """
    Read a LogColorSpace or a LogColorSpaceW object. They only differ by the encoding of the file name.
    """
    signature = Uint32LE.unpack(stream)

    if signature != LOG_COLOR_SPACE_SIGNATURE:
        raise UnexpectedPatternError(f"LogColorSpace signature must be {LOG_COLOR_SPACE_SIGNATURE:#010x}, "
                                     f"got {signature:#010x}")

    version = Uint32LE.unpack(stream)

    if version != LOG_COLOR_SPACE_VERSION:
        raise UnexpectedPatternError(f"LogColorSpace version must be {LOG_COLOR_SPACE_VERSION:#x}, got {version:#x}")

    size = Uint32LE.unpack(stream)
    colorSpaceType = parseEnum(LogicalColorSpace, Uint32LE.unpack(stream))
    intent = parseEnum(GamutMappingIntent, Uint32LE.unpack(stream))
    endpoints = CIEXYZTriple(readCIEXYZ(stream), readCIEXYZ(stream), readCIEXYZ(stream))
    gammaRed = Uint32LE.unpack(stream)
    gammaGreen = Uint32LE.unpack(stream)
    gammaBlue = Uint32LE.unpack(stream)

    if unicode:
        filename = decodeNullTerminatedUTF16LE(readBytes(stream, MAX_PATH * 2))
        return LogColorSpaceW(signature, version, size, colorSpaceType, intent, endpoints, gammaRed, gammaGreen,
                              gammaBlue, filename)

    filename = decodeNullTerminatedANSI(readBytes(stream, MAX_PATH))
    return LogColorSpace(signature, version, size, colorSpaceType, intent, endpoints, gammaRed, gammaGreen,
                         gammaBlue, filename)


def readEmrText(stream: RecordStream) -> EmrText:
    """
    Read the fixed part of an EmrText object. The string and the spacing array are read by readEmrTextBuffers.
    """
    reference = readPointL(stream)
    chars = Uint32LE.unpack(stream)
    offString = Uint32LE.unpack(stream)
    options = parseFlags(ExtTextOutOptions, Uint32LE.unpack(stream))
    rectangle = None

    if not options & ExtTextOutOptions.ETO_NO_RECT:
        rectangle = readRectL(stream)

    offDx = Uint32LE.unpack(stream)
    return EmrText(reference, chars, offString, options, rectangle, offDx)


def readEmrTextBuffers(stream: RecordStream, texts: List[EmrText]):
    """
    Read the strings and spacing arrays of text objects and store them in the objects.
    Characters are 8-bit for the ANSI text records and UTF-16LE otherwise.
    """
    ansi = stream.recordType in ANSI_TEXT_RECORDS
    requests = []

    for text in texts:
        stringLength = text.chars if ansi else text.chars * 2
        dxLength = text.chars * 8 if text.options & ExtTextOutOptions.ETO_PDY else text.chars * 4
        requests.append((text.offString, stringLength))
        requests.append((text.offDx, dxLength))

    buffers = stream.readOffsetBuffers(requests)

    for index, text in enumerate(texts):
        stringData = buffers[index * 2]
        dxData = buffers[index * 2 + 1]
        text.string = decodeANSI(stringData) if ansi else decodeUTF16LE(stringData)
        text.dx = [Uint32LE.unpack(dxData[i : i + 4]) for i in range(0, len(dxData), 4)]


def readTriVertex(stream: RecordStream) -> TriVertex:
    return TriVertex(Int32LE.unpack(stream), Int32LE.unpack(stream), Uint16LE.unpack(stream), Uint16LE.unpack(stream),
                     Uint16LE.unpack(stream), Uint16LE.unpack(stream))


def readGradientRectangle(stream: RecordStream) -> GradientRectangle:
    return GradientRectangle(Uint32LE.unpack(stream), Uint32LE.unpack(stream))


def readGradientTriangle(stream: RecordStream) -> GradientTriangle:
    return GradientTriangle(Uint32LE.unpack(stream), Uint32LE.unpack(stream), Uint32LE.unpack(stream))


def readBlendFunction(stream: RecordStream) -> BlendFunction:
    blendOperation = Uint8.unpack(stream)
    blendFlags = Uint8.unpack(stream)
    sourceConstantAlpha = Uint8.unpack(stream)
    alphaFormat = Uint8.unpack(stream)

    if blendOperation != BlendFunction.AC_SRC_OVER:
        raise UnexpectedPatternError(f"BlendFunction operation must be AC_SRC_OVER, got {blendOperation:#x}")

    if alphaFormat not in [0, BlendFunction.AC_SRC_ALPHA]:
        raise UnexpectedPatternError(f"Unexpected BlendFunction alpha format {alphaFormat:#x}")

    if blendFlags != 0:
        LOG.warning("Ignoring non-zero BlendFunction flags %(flags)d", {"flags": blendFlags})

    return BlendFunction(blendOperation, blendFlags, sourceConstantAlpha, alphaFormat)


def readUniversalFontId(stream: RecordStream) -> UniversalFontId:
    return UniversalFontId(Uint32LE.unpack(stream), Uint32LE.unpack(stream))


def readPoint28_4(stream: RecordStream) -> Point28_4:
    return Point28_4(Int32LE.unpack(stream), Int32LE.unpack(stream))


def readEpsData(stream: BinaryIO) -> EpsData:
    sizeData = Uint32LE.unpack(stream)
    version = Uint32LE.unpack(stream)

    if version != EpsData.VERSION:
        raise UnexpectedPatternError(f"EpsData version must be {EpsData.VERSION}, got {version}")

    points = [readPoint28_4(stream) for _ in range(3)]
    # sizeData covers the whole object, the 32 bytes read so far included.
    postScriptData = readBytes(stream, sizeData - 32)
    return EpsData(sizeData, version, points, postScriptData)


def readEmrFormat(stream: RecordStream) -> EmrFormat:
    signature = parseEnum(FormatSignature, Uint32LE.unpack(stream))
    return EmrFormat(signature, Uint32LE.unpack(stream), Uint32LE.unpack(stream), Uint32LE.unpack(stream))


def readBitmapInfoHeader(info: bytes) -> Optional[BitmapInfoHeader]:
    """
    Read the header at the start of a BitmapInfo buffer.
    :return: the header, or None when the buffer is empty.
    """
    if len(info) == 0:
        return None

    stream = BytesIO(info)
    headerSize = Uint32LE.unpack(stream)

    if headerSize == BitmapInfoHeader.CORE_HEADER_SIZE:
        return BitmapInfoHeader(headerSize, Uint16LE.unpack(stream), Uint16LE.unpack(stream),
                                Uint16LE.unpack(stream), Uint16LE.unpack(stream))
    elif headerSize < BitmapInfoHeader.INFO_HEADER_SIZE or headerSize > len(info):
        raise UnexpectedPatternError(f"Invalid bitmap header size {headerSize} for a {len(info)} bytes BitmapInfo")

    return BitmapInfoHeader(
        headerSize,
        Int32LE.unpack(stream),
        Int32LE.unpack(stream),
        Uint16LE.unpack(stream),
        Uint16LE.unpack(stream),
        parseEnum(BitmapCompression, Uint32LE.unpack(stream)),
        Uint32LE.unpack(stream),
        Int32LE.unpack(stream),
        Int32LE.unpack(stream),
        Uint32LE.unpack(stream),
        Uint32LE.unpack(stream),
    )


def readBitmaps(stream: RecordStream, *locations: int) -> List[Optional[DeviceIndependentBitmap]]:
    """
    Read the bitmaps of a record.
    :param locations: offBmi, cbBmi, offBits, cbBits for each bitmap.
    :return: one DeviceIndependentBitmap per bitmap, or None when the record has no BitmapInfo for it.
    """
    requests = [(locations[i], locations[i + 1]) for i in range(0, len(locations), 2)]
    buffers = stream.readOffsetBuffers(requests)
    bitmaps = []

    for index in range(0, len(buffers), 2):
        info, bits = buffers[index], buffers[index + 1]

        if len(info) == 0:
            bitmaps.append(None)
        else:
            bitmaps.append(DeviceIndependentBitmap(readBitmapInfoHeader(info), info, bits))

    return bitmaps
