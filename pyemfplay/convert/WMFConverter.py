#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.exceptions import WMFError


class WMFConverter:
    """
    Converter for legacy Windows metafiles. Data that does not start with an EMF header is handed to this
    converter unmodified.

    The base class supports no WMF records: subclasses wrap an actual WMF decoder.
    """

    def convert(self, data: bytes) -> bytes:
        """
        Convert a WMF metafile.
        :param data: the whole metafile.
        :return: the converted output.
        :raises WMFError: when the metafile cannot be converted.
        """
        raise WMFError("WMF metafiles are not supported")
