#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

"""
Contains custom logging formatters for the library.
"""

import json
import logging
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """
    Formatter that returns a single JSON line of the provided data.
    Example usage: logger.warning("Skipping record %(recordType)s", {"recordType": "EMR_RESERVED_69"})
    Will output: {"message": "Skipping record %(recordType)s", "loggerName": "pyemfplay.parser", "timestamp": "2026-01-03T10:51:12.000000", "level": "WARNING", "recordType": "EMR_RESERVED_69"}
    """

    def __init__(self, baseDict: dict = None):
        """
        :param baseDict: dictionary with base values that should be in every log message.
        """
        super().__init__()
        self.baseDict = baseDict if baseDict is not None else {}

    def format(self, record: logging.LogRecord) -> str:
        data = self.baseDict.copy()

        data.update({
            "message": record.msg,
            "loggerName": record.name,
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f"),
            "level": record.levelname,
        })

        if isinstance(record.args, dict):
            data.update(record.args)

        return json.dumps(data, ensure_ascii=False, default=lambda item: item.__repr__())
