#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List, Optional

from pyemfplay.enum import DIBColors, RecordType
from pyemfplay.gdi import BlendFunction, ColorRef, DeviceIndependentBitmap, PointL, RectL, XForm
from pyemfplay.record.record import Record


class EmrBitBlt(Record):
    """
    Block transfer of a bitmap, or of the selected brush when there is no source bitmap.
    """

    def __init__(self, size: int, bounds: RectL, xDest: int, yDest: int, cxDest: int, cyDest: int,
                 bitBltRasterOperation: int, xSrc: int, ySrc: int, xformSrc: XForm, bkColorSrc: ColorRef,
                 usageSrc: DIBColors, offBmiSrc: int, cbBmiSrc: int, offBitsSrc: int, cbBitsSrc: int,
                 bitmap: Optional[DeviceIndependentBitmap]):
        super().__init__(RecordType.EMR_BITBLT, size)
        self.bounds = bounds
        self.xDest = xDest
        self.yDest = yDest
        self.cxDest = cxDest
        self.cyDest = cyDest
        self.bitBltRasterOperation = bitBltRasterOperation
        self.xSrc = xSrc
        self.ySrc = ySrc
        self.xformSrc = xformSrc
        self.bkColorSrc = bkColorSrc
        self.usageSrc = usageSrc
        self.offBmiSrc = offBmiSrc
        self.cbBmiSrc = cbBmiSrc
        self.offBitsSrc = offBitsSrc
        self.cbBitsSrc = cbBitsSrc
        self.bitmap = bitmap


class EmrStretchBlt(EmrBitBlt):
    def __init__(self, size: int, bounds: RectL, xDest: int, yDest: int, cxDest: int, cyDest: int,
                 bitBltRasterOperation: int, xSrc: int, ySrc: int, xformSrc: XForm, bkColorSrc: ColorRef,
                 usageSrc: DIBColors, offBmiSrc: int, cbBmiSrc: int, offBitsSrc: int, cbBitsSrc: int, cxSrc: int,
                 cySrc: int, bitmap: Optional[DeviceIndependentBitmap]):
        super().__init__(size, bounds, xDest, yDest, cxDest, cyDest, bitBltRasterOperation, xSrc, ySrc, xformSrc,
                         bkColorSrc, usageSrc, offBmiSrc, cbBmiSrc, offBitsSrc, cbBitsSrc, bitmap)
        self.recordType = RecordType.EMR_STRETCHBLT
        self.cxSrc = cxSrc
        self.cySrc = cySrc


class EmrAlphaBlend(Record):
    def __init__(self, size: int, bounds: RectL, xDest: int, yDest: int, cxDest: int, cyDest: int,
                 blendFunction: BlendFunction, xSrc: int, ySrc: int, xformSrc: XForm, bkColorSrc: ColorRef,
                 usageSrc: DIBColors, offBmiSrc: int, cbBmiSrc: int, offBitsSrc: int, cbBitsSrc: int, cxSrc: int,
                 cySrc: int, bitmap: Optional[DeviceIndependentBitmap]):
        super().__init__(RecordType.EMR_ALPHABLEND, size)
        self.bounds = bounds
        self.xDest = xDest
        self.yDest = yDest
        self.cxDest = cxDest
        self.cyDest = cyDest
        self.blendFunction = blendFunction
        self.xSrc = xSrc
        self.ySrc = ySrc
        self.xformSrc = xformSrc
        self.bkColorSrc = bkColorSrc
        self.usageSrc = usageSrc
        self.offBmiSrc = offBmiSrc
        self.cbBmiSrc = cbBmiSrc
        self.offBitsSrc = offBitsSrc
        self.cbBitsSrc = cbBitsSrc
        self.cxSrc = cxSrc
        self.cySrc = cySrc
        self.bitmap = bitmap


class EmrTransparentBlt(Record):
    """
    Block transfer where the pixels of transparentColor are left untouched in the destination.
    """

    def __init__(self, size: int, bounds: RectL, xDest: int, yDest: int, cxDest: int, cyDest: int,
                 transparentColor: ColorRef, xSrc: int, ySrc: int, xformSrc: XForm, bkColorSrc: ColorRef,
                 usageSrc: DIBColors, offBmiSrc: int, cbBmiSrc: int, offBitsSrc: int, cbBitsSrc: int, cxSrc: int,
                 cySrc: int, bitmap: Optional[DeviceIndependentBitmap]):
        super().__init__(RecordType.EMR_TRANSPARENTBLT, size)
        self.bounds = bounds
        self.xDest = xDest
        self.yDest = yDest
        self.cxDest = cxDest
        self.cyDest = cyDest
        self.transparentColor = transparentColor
        self.xSrc = xSrc
        self.ySrc = ySrc
        self.xformSrc = xformSrc
        self.bkColorSrc = bkColorSrc
        self.usageSrc = usageSrc
        self.offBmiSrc = offBmiSrc
        self.cbBmiSrc = cbBmiSrc
        self.offBitsSrc = offBitsSrc
        self.cbBitsSrc = cbBitsSrc
        self.cxSrc = cxSrc
        self.cySrc = cySrc
        self.bitmap = bitmap


class EmrMaskBlt(Record):
    def __init__(self, size: int, bounds: RectL, xDest: int, yDest: int, cxDest: int, cyDest: int,
                 rasterOperation: int, xSrc: int, ySrc: int, xformSrc: XForm, bkColorSrc: ColorRef,
                 usageSrc: DIBColors, offBmiSrc: int, cbBmiSrc: int, offBitsSrc: int, cbBitsSrc: int, xMask: int,
                 yMask: int, usageMask: DIBColors, offBmiMask: int, cbBmiMask: int, offBitsMask: int,
                 cbBitsMask: int, bitmap: Optional[DeviceIndependentBitmap],
                 mask: Optional[DeviceIndependentBitmap]):
        super().__init__(RecordType.EMR_MASKBLT, size)
        self.bounds = bounds
        self.xDest = xDest
        self.yDest = yDest
        self.cxDest = cxDest
        self.cyDest = cyDest
        self.rasterOperation = rasterOperation
        self.xSrc = xSrc
        self.ySrc = ySrc
        self.xformSrc = xformSrc
        self.bkColorSrc = bkColorSrc
        self.usageSrc = usageSrc
        self.offBmiSrc = offBmiSrc
        self.cbBmiSrc = cbBmiSrc
        self.offBitsSrc = offBitsSrc
        self.cbBitsSrc = cbBitsSrc
        self.xMask = xMask
        self.yMask = yMask
        self.usageMask = usageMask
        self.offBmiMask = offBmiMask
        self.cbBmiMask = cbBmiMask
        self.offBitsMask = offBitsMask
        self.cbBitsMask = cbBitsMask
        self.bitmap = bitmap
        self.mask = mask


class EmrPlgBlt(Record):
    """
    Block transfer into a parallelogram. aptlDest holds the upper-left, upper-right and lower-left corners.
    """

    def __init__(self, size: int, bounds: RectL, aptlDest: List[PointL], xSrc: int, ySrc: int, cxSrc: int,
                 cySrc: int, xformSrc: XForm, bkColorSrc: ColorRef, usageSrc: DIBColors, offBmiSrc: int,
                 cbBmiSrc: int, offBitsSrc: int, cbBitsSrc: int, xMask: int, yMask: int, usageMask: DIBColors,
                 offBmiMask: int, cbBmiMask: int, offBitsMask: int, cbBitsMask: int,
                 bitmap: Optional[DeviceIndependentBitmap], mask: Optional[DeviceIndependentBitmap]):
        super().__init__(RecordType.EMR_PLGBLT, size)
        self.bounds = bounds
        self.aptlDest = aptlDest
        self.xSrc = xSrc
        self.ySrc = ySrc
        self.cxSrc = cxSrc
        self.cySrc = cySrc
        self.xformSrc = xformSrc
        self.bkColorSrc = bkColorSrc
        self.usageSrc = usageSrc
        self.offBmiSrc = offBmiSrc
        self.cbBmiSrc = cbBmiSrc
        self.offBitsSrc = offBitsSrc
        self.cbBitsSrc = cbBitsSrc
        self.xMask = xMask
        self.yMask = yMask
        self.usageMask = usageMask
        self.offBmiMask = offBmiMask
        self.cbBmiMask = cbBmiMask
        self.offBitsMask = offBitsMask
        self.cbBitsMask = cbBitsMask
        self.bitmap = bitmap
        self.mask = mask


class EmrSetDIBitsToDevice(Record):
    def __init__(self, size: int, bounds: RectL, xDest: int, yDest: int, xSrc: int, ySrc: int, cxSrc: int,
                 cySrc: int, offBmiSrc: int, cbBmiSrc: int, offBitsSrc: int, cbBitsSrc: int, usageSrc: DIBColors,
                 iStartScan: int, cScans: int, bitmap: Optional[DeviceIndependentBitmap]):
        super().__init__(RecordType.EMR_SETDIBITSTODEVICE, size)
        self.bounds = bounds
        self.xDest = xDest
        self.yDest = yDest
        self.xSrc = xSrc
        self.ySrc = ySrc
        self.cxSrc = cxSrc
        self.cySrc = cySrc
        self.offBmiSrc = offBmiSrc
        self.cbBmiSrc = cbBmiSrc
        self.offBitsSrc = offBitsSrc
        self.cbBitsSrc = cbBitsSrc
        self.usageSrc = usageSrc
        self.iStartScan = iStartScan
        self.cScans = cScans
        self.bitmap = bitmap


class EmrStretchDIBits(Record):
    def __init__(self, size: int, bounds: RectL, xDest: int, yDest: int, xSrc: int, ySrc: int, cxSrc: int,
                 cySrc: int, offBmiSrc: int, cbBmiSrc: int, offBitsSrc: int, cbBitsSrc: int, usageSrc: DIBColors,
                 bitBltRasterOperation: int, cxDest: int, cyDest: int,
                 bitmap: Optional[DeviceIndependentBitmap]):
        super().__init__(RecordType.EMR_STRETCHDIBITS, size)
        self.bounds = bounds
        self.xDest = xDest
        self.yDest = yDest
        self.xSrc = xSrc
        self.ySrc = ySrc
        self.cxSrc = cxSrc
        self.cySrc = cySrc
        self.offBmiSrc = offBmiSrc
        self.cbBmiSrc = cbBmiSrc
        self.offBitsSrc = offBitsSrc
        self.cbBitsSrc = cbBitsSrc
        self.usageSrc = usageSrc
        self.bitBltRasterOperation = bitBltRasterOperation
        self.cxDest = cxDest
        self.cyDest = cyDest
        self.bitmap = bitmap
