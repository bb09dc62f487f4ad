#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from typing import List

from pyemfplay.gdi.base import GDIStructure


class LogPaletteEntry(GDIStructure):
    def __init__(self, reserved: int, blue: int, green: int, red: int):
        self.reserved = reserved
        self.blue = blue
        self.green = green
        self.red = red


class LogPalette(GDIStructure):
    VERSION = 0x0300

    def __init__(self, version: int, entries: List[LogPaletteEntry]):
        self.version = version
        self.entries = entries

    @property
    def numberOfEntries(self) -> int:
        return len(self.entries)
