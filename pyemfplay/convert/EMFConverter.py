#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import logging
from io import BytesIO
from typing import Callable, Iterable, Optional

from pyemfplay.core import Uint32LE
from pyemfplay.convert.WMFConverter import WMFConverter
from pyemfplay.enum import RecordType
from pyemfplay.exceptions import ConvertError, ParsingError, PlayError, ReadError, WMFError
from pyemfplay.logging import LOGGER_NAMES
from pyemfplay.parser import EMFParser
from pyemfplay.player import Metafile, Player, SVGPlayer
from pyemfplay.record import Record

LOG = logging.getLogger(LOGGER_NAMES.CONVERT)


def isEMF(data: bytes) -> bool:
    """
    Check whether data holds an EMF metafile, which always starts with an EMR_HEADER record.
    """
    try:
        return Uint32LE.unpack(data[: 4]) == RecordType.EMR_HEADER
    except ReadError:
        return False


class EMFConverter:
    """
    Converts a metafile held in memory by replaying its records against a player. Data that is not an EMF metafile
    is converted by a WMF converter instead.
    """

    def __init__(self, playerFactory: Callable[[], Player] = SVGPlayer, wmfConverter: Optional[WMFConverter] = None,
                 parser: Optional[EMFParser] = None):
        """
        :param playerFactory: creates the player for each conversion.
        :param wmfConverter: converter used for data that is not EMF.
        :param parser: the record parser to use.
        """
        self.playerFactory = playerFactory
        self.wmfConverter = wmfConverter if wmfConverter is not None else WMFConverter()
        self.parser = parser if parser is not None else EMFParser()

    def convert(self, data: bytes, wrapRecords: Optional[Callable[[Metafile], Iterable[Record]]] = None) -> bytes:
        """
        Convert a metafile.
        :param data: the whole metafile.
        :param wrapRecords: optional function that wraps the record iterator, e.g. to show progress.
        :return: the output of the player.
        :raises ConvertError: when the metafile cannot be decoded or played.
        """
        if not isEMF(data):
            LOG.debug("Data does not start with an EMF header, converting as WMF")

            try:
                return self.wmfConverter.convert(data)
            except WMFError as e:
                raise ConvertError(f"Cannot convert WMF metafile: {e}") from e

        try:
            metafile = Metafile(BytesIO(data), self.parser)
            records = wrapRecords(metafile) if wrapRecords is not None else metafile
            return metafile.play(self.playerFactory(), records)
        except ParsingError as e:
            LOG.debug("Parsing error: %(layers)s", {"layers": e.formatLayers()})
            raise ConvertError(f"Cannot decode EMF metafile: {e}") from e
        except (PlayError, ReadError) as e:
            raise ConvertError(f"Cannot play EMF metafile: {e}") from e
