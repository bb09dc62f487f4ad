#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#


class GDIStructure:
    """
    Base class for structures decoded from a metafile. Structures compare by value.
    """
    REPR_BYTES_CUTOFF_LENGTH = 64

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __repr__(self):
        properties = dict(self.__dict__)

        for name, value in properties.items():
            if isinstance(value, bytes) and len(value) > GDIStructure.REPR_BYTES_CUTOFF_LENGTH:
                properties[name] = value[: GDIStructure.REPR_BYTES_CUTOFF_LENGTH] + b"<LONG BUFFER>"

        return self.__class__.__name__ + str(properties)
