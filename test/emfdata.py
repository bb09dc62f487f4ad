#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

"""
Builders for the binary records used by the tests.
"""

import struct

from pyemfplay.enum import ExtTextOutOptions, FormatSignature, GraphicsMode, MetafileVersion, RecordType
from pyemfplay.gdi import DesignVector, LogPalette


def record(recordType: int, body: bytes = b"") -> bytes:
    return struct.pack("<II", recordType, 8 + len(body)) + body


def rectL(left: int, top: int, right: int, bottom: int) -> bytes:
    return struct.pack("<iiii", left, top, right, bottom)


def header(bounds=(0, 0, 100, 100), records: int = 2, handles: int = 1, device=(1920, 1080),
           millimeters=(508, 286), openGL: int = None, micrometers=None, description: str = None) -> bytes:
    """
    Build a header record. The first extension is added when openGL or micrometers is given, the second one when
    micrometers is given. The description is stored after the extensions.
    """
    extensions = b""

    if openGL is not None or micrometers is not None:
        extensions += struct.pack("<III", 0, 0, openGL or 0)

    if micrometers is not None:
        extensions += struct.pack("<ii", *micrometers)

    nDescription = 0
    offDescription = 0
    descriptionData = b""

    if description is not None:
        nDescription = len(description)
        offDescription = 88 + len(extensions)
        descriptionData = description.encode("utf-16le")
        descriptionData += b"\x00" * (-len(descriptionData) % 4)

    body = rectL(*bounds) + rectL(0, 0, 2540, 2540)
    body += struct.pack("<II", FormatSignature.ENHMETA_SIGNATURE, MetafileVersion.META_FORMAT_ENHANCED)
    body += struct.pack("<IIHH", 0, records, handles, 0)
    body += struct.pack("<III", nDescription, offDescription, 0)
    body += struct.pack("<ii", *device) + struct.pack("<ii", *millimeters)
    return record(RecordType.EMR_HEADER, body + extensions + descriptionData)


def eof() -> bytes:
    return record(RecordType.EMR_EOF, struct.pack("<III", 0, 16, 20))


def rectangle(left: int, top: int, right: int, bottom: int) -> bytes:
    return record(RecordType.EMR_RECTANGLE, rectL(left, top, right, bottom))


def lineTo(x: int, y: int) -> bytes:
    return record(RecordType.EMR_LINETO, struct.pack("<ii", x, y))


def createBrushIndirect(index: int, red: int, green: int, blue: int, style: int = 0) -> bytes:
    return record(RecordType.EMR_CREATEBRUSHINDIRECT, struct.pack("<IIBBBBI", index, style, red, green, blue, 0, 0))


def selectObject(index: int) -> bytes:
    return record(RecordType.EMR_SELECTOBJECT, struct.pack("<I", index))


def deleteObject(index: int) -> bytes:
    return record(RecordType.EMR_DELETEOBJECT, struct.pack("<I", index))


def saveDC() -> bytes:
    return record(RecordType.EMR_SAVEDC)


def restoreDC(savedDC: int = -1) -> bytes:
    return record(RecordType.EMR_RESTOREDC, struct.pack("<i", savedDC))


def setMapMode(mapMode: int) -> bytes:
    return record(RecordType.EMR_SETMAPMODE, struct.pack("<I", mapMode))


def setWindowExtEx(cx: int, cy: int) -> bytes:
    return record(RecordType.EMR_SETWINDOWEXTEX, struct.pack("<ii", cx, cy))


def setViewportExtEx(cx: int, cy: int) -> bytes:
    return record(RecordType.EMR_SETVIEWPORTEXTEX, struct.pack("<ii", cx, cy))


def setColorAdjustment(referenceWhite: int = 10000) -> bytes:
    adjustment = struct.pack("<HHHHHHHHhhhh", 0x18, 0, 0, 10000, 10000, 10000, 0, referenceWhite, 0, 0, 0, 0)
    return record(RecordType.EMR_SETCOLORADJUSTMENT, adjustment)


def metafile(*records: bytes) -> bytes:
    """
    Build a complete metafile: a header, the given records and an EOF record.
    """
    return header(records=len(records) + 2, handles=4) + b"".join(records) + eof()


def bitmapInfoHeader(width: int, height: int, bitCount: int, colorCount: int = 0) -> bytes:
    return struct.pack("<IiiHHIIiiII", 40, width, height, 1, bitCount, 0, 0, 0, 0, colorCount, 0)


def stretchDIBits(dest, source, info: bytes, bits: bytes) -> bytes:
    """
    Build an EMR_STRETCHDIBITS record copying the source (x, y, cx, cy) box of a bitmap to the dest box.
    The BitmapInfo and the bits follow the fixed part of the record.
    """
    xDest, yDest, cxDest, cyDest = dest
    xSrc, ySrc, cxSrc, cySrc = source
    offBmi = 80
    offBits = offBmi + len(info)
    body = rectL(xDest, yDest, xDest + cxDest, yDest + cyDest)
    body += struct.pack("<iiiiii", xDest, yDest, xSrc, ySrc, cxSrc, cySrc)
    body += struct.pack("<IIII", offBmi, len(info), offBits, len(bits))
    body += struct.pack("<IIii", 0, 0x00CC0020, cxDest, cyDest)
    return record(RecordType.EMR_STRETCHDIBITS, body + info + bits)


def scaleViewportExtEx(xNum: int, xDenom: int, yNum: int, yDenom: int) -> bytes:
    return record(RecordType.EMR_SCALEVIEWPORTEXTEX, struct.pack("<iiii", xNum, xDenom, yNum, yDenom))


def excludeClipRect(left: int, top: int, right: int, bottom: int) -> bytes:
    return record(RecordType.EMR_EXCLUDECLIPRECT, rectL(left, top, right, bottom))


def intersectClipRect(left: int, top: int, right: int, bottom: int) -> bytes:
    return record(RecordType.EMR_INTERSECTCLIPRECT, rectL(left, top, right, bottom))


def padded(data: bytes, count: int) -> bytes:
    """
    Append count zero bytes to a record and grow its declared size accordingly.
    """
    recordType, size = struct.unpack("<II", data[: 8])
    return struct.pack("<II", recordType, size + count) + data[8 :] + b"\x00" * count


def extTextOut(recordType: int, string: bytes, chars: int, dx, options: int = 0, dxFirst: bool = False) -> bytes:
    """
    Build an EMR_EXTTEXTOUTA or EMR_EXTTEXTOUTW record. The string is given already encoded and the dx array is
    stored either after the string or before it.
    """
    hasRectangle = not options & ExtTextOutOptions.ETO_NO_RECT
    fixedSize = 76 if hasRectangle else 60
    stringData = string + b"\x00" * (-len(string) % 4)
    dxData = struct.pack(f"<{len(dx)}I", *dx)

    if dxFirst:
        offDx, offString = fixedSize, fixedSize + len(dxData)
        buffers = dxData + stringData
    else:
        offString, offDx = fixedSize, fixedSize + len(stringData)
        buffers = stringData + dxData

    body = rectL(0, 0, 100, 20) + struct.pack("<Iff", GraphicsMode.GM_COMPATIBLE, 1.0, 1.0)
    body += struct.pack("<iiIII", 5, 15, chars, offString, options)

    if hasRectangle:
        body += rectL(0, 0, 100, 20)

    body += struct.pack("<I", offDx)
    return record(recordType, body + buffers)


def extCreatePen(penStyle: int, brushStyle: int, color: int = 0, hatch: int = 0, info: bytes = b"",
                 bits: bytes = b"", bitsFirst: bool = False) -> bytes:
    """
    Build an EMR_EXTCREATEPEN record for object index 1, with an optional bitmap stored after the LogPenEx.
    """
    offBmi = offBits = 0

    if info:
        if bitsFirst:
            offBits, offBmi = 52, 52 + len(bits)
        else:
            offBmi, offBits = 52, 52 + len(info)

    body = struct.pack("<IIIII", 1, offBmi, len(info), offBits, len(bits))
    body += struct.pack("<IIIIII", penStyle, 1, brushStyle, color, hatch, 0)
    buffers = bits + info if bitsFirst else info + bits
    return record(RecordType.EMR_EXTCREATEPEN, body + buffers)


def logFont(height: int = -12, facename: str = "Arial") -> bytes:
    name = facename.encode("utf-16le")
    return struct.pack("<iiiii", height, 0, 0, 0, 400) + b"\x00" * 8 + name + b"\x00" * (64 - len(name))


def logFontEx(facename: str = "Arial") -> bytes:
    return logFont(facename=facename) + b"\x00" * (128 + 64 + 64)


def designVector(values, signature: int = DesignVector.SIGNATURE) -> bytes:
    return struct.pack(f"<II{len(values)}i", signature, len(values), *values)


def logFontPanose(facename: str = "Arial") -> bytes:
    return logFont(facename=facename) + b"\x00" * (128 + 64) + struct.pack("<IIIIII", 0, 0, 0, 0, 0, 0) \
        + b"\x00" * 12


def extCreateFontIndirectW(elw: bytes) -> bytes:
    return record(RecordType.EMR_EXTCREATEFONTINDIRECTW, struct.pack("<I", 1) + elw)


def createPalette(*entries) -> bytes:
    body = struct.pack("<IHH", 1, LogPalette.VERSION, len(entries))
    body += b"".join(struct.pack("<BBBB", *entry) for entry in entries)
    return record(RecordType.EMR_CREATEPALETTE, body)
