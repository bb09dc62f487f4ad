#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import typing

from pyemfplay.core import FilePositionGuard
from pyemfplay.exceptions import ParsingError


class BaseParser:
    def parse(self, data):
        """
        Decode a record from data.
        :param data: record data.
        :return: an instance of a record class.
        """

        try:
            return self.doParse(data)
        except ParsingError as e:
            self.handleParsingError(e, data)
            raise

    def doParse(self, data):
        raise NotImplementedError("Parse is not implemented")

    def handleParsingError(self, e: ParsingError, data):
        """
        Add self and data to the list of layers of the parsing error.
        """
        raise NotImplementedError("handleParsingError is not implemented")


class StreamParser(BaseParser):
    # For type hints
    def parse(self, stream: typing.BinaryIO):
        return super().parse(stream)

    def doParse(self, stream: typing.BinaryIO):
        return super().doParse(stream)

    def handleParsingError(self, e: ParsingError, stream: typing.BinaryIO):
        with FilePositionGuard(stream):
            e.addLayer(self, stream.read())
