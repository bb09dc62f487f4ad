#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.core.helpers import decodeANSI, decodeNullTerminatedANSI, decodeNullTerminatedUTF16LE, \
    decodeUTF16LE, FilePositionGuard, readBytes
from pyemfplay.core.packing import Float32LE, Int16LE, Int32LE, Int8, Uint16LE, Uint32LE, Uint64LE, Uint8
from pyemfplay.core.size import RecordStream, Size
