#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

import os
from typing import BinaryIO, Iterator, Optional

from pyemfplay.core import FilePositionGuard
from pyemfplay.enum import RecordType
from pyemfplay.exceptions import PyEMFError, UnexpectedPatternError, UnknownPlayError
from pyemfplay.parser import EMFParser
from pyemfplay.player.Player import Player
from pyemfplay.record import EmrHeader, Record


class Metafile:
    """
    Class giving access to the records of an EMF metafile. The header record is decoded when the metafile is opened,
    the other records are decoded while iterating.
    """

    def __init__(self, file: BinaryIO, parser: Optional[EMFParser] = None):
        """
        :param file: stream positioned at the start of the metafile.
        :param parser: the record parser to use.
        """
        self.file = file
        self.parser = parser if parser is not None else EMFParser()
        self.start = file.tell()

        with FilePositionGuard(file):
            file.seek(0, os.SEEK_END)
            self.end = file.tell()

        header = self.parser.parse(file)

        if not isinstance(header, EmrHeader):
            raise UnexpectedPatternError(f"The first record of an EMF metafile must be EMR_HEADER, got {header!r}")

        self.header: EmrHeader = header
        self.recordsStart = file.tell()

    def __len__(self):
        """
        Number of records declared by the header, including the header and the EOF record.
        """
        return self.header.records

    def __iter__(self) -> Iterator[Record]:
        yield self.header
        self.file.seek(self.recordsStart)

        while True:
            if self.file.tell() >= self.end:
                raise UnexpectedPatternError("The metafile ended before its EMR_EOF record")

            record = self.parser.parse(self.file)

            # Skipped records decode to None.
            if record is None:
                continue

            yield record

            if record.recordType == RecordType.EMR_EOF:
                break

    def play(self, player: Player, records: Optional[Iterator[Record]] = None) -> bytes:
        """
        Replay every record against a player and return the player's output.
        :param player: the player that receives the records.
        :param records: the records to replay, defaults to iterating over the metafile.
        :raises UnknownPlayError: when a player handler fails with an error that is not a PlayError.
        """
        for record in records if records is not None else self:
            try:
                player.onRecordReceived(record)
            except PyEMFError:
                raise
            except (ArithmeticError, LookupError, ValueError) as e:
                raise UnknownPlayError(f"{record.recordType.name} record could not be played: {e}") from e

        return player.generate()
