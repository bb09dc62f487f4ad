#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from logging import Filter, LogRecord


class LoggerNameFilter(Filter):
    """
    Filter object that filters on logger names and supports wildcards (*).
    """

    def __init__(self, name: str):
        super().__init__(name)

    def filter(self, record: LogRecord):
        if self.name == "":
            return True

        filterParts = self.name.split(".")
        loggerParts = record.name.split(".")

        if len(filterParts) > len(loggerParts):
            return False

        for filterPart, logPart in zip(filterParts, loggerParts):
            if filterPart != logPart and filterPart != "*":
                return False

        return True
