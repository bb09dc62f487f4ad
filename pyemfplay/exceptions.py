#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

class PyEMFError(Exception):
    """Base class for PyEMFPlay errors"""


class ReadError(PyEMFError, EOFError):
    """Fewer bytes were available than what was requested"""


class ParsingError(PyEMFError, ValueError):
    """A parser tried to parse a malformed record"""

    def __init__(self, *args):
        super().__init__(*args)
        self.layers = []

    def addLayer(self, parser: object, data: bytes):
        self.layers.insert(0, (type(parser).__name__, data))

    def formatLayer(self, index: int) -> str:
        layer = self.layers[index]
        return f"{layer[0]} = {layer[1].hex()}"

    def formatLayers(self) -> str:
        return ",".join(self.formatLayer(i) for i in range(len(self.layers)))


class FailedReadBufferError(ParsingError):
    """A record's body was shorter than what its fields require"""


class NotSupportedError(ParsingError):
    """A recognized value that cannot be handled, such as a forbidden brush style combination"""


class UnexpectedEnumValueError(ParsingError):
    """A value outside of its defined enumeration"""

    def __init__(self, message, enumType, value):
        super().__init__(message)
        self.enumType = enumType
        self.value = value


class UnexpectedPatternError(ParsingError):
    """A structural invariant was violated: wrong constant, size mismatch, out of range field..."""


class PlayError(PyEMFError):
    """Base class for errors raised while replaying records against a player"""


class FailedGenerateError(PlayError):
    """The player could not produce its output"""


class InvalidBrushError(PlayError):
    """A brush that cannot be used for the requested operation"""


class InvalidRecordError(PlayError):
    """A record that is inconsistent with the current playback state"""


class UnexpectedGraphicsObjectError(PlayError):
    """The object table contains something other than what a record expects"""


class UnknownPlayError(PlayError):
    """Any other error raised by a player"""


class WMFError(PyEMFError):
    """Error raised by a WMF converter"""


class ConvertError(PyEMFError):
    """
    A conversion failed. The original error is available as __cause__.
    """
