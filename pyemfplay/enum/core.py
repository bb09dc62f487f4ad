#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from enum import IntEnum, IntFlag
from typing import Type, TypeVar

from pyemfplay.exceptions import UnexpectedEnumValueError

E = TypeVar("E", bound=IntEnum)


def parseEnum(enumType: Type[E], value: int) -> E:
    """
    Convert a decoded integer to a member of an enumeration.
    :param enumType: the enumeration class.
    :param value: the decoded value.
    :raises UnexpectedEnumValueError: when the value is not part of the enumeration.
    """
    try:
        return enumType(value)
    except ValueError:
        raise UnexpectedEnumValueError(f"unexpected value as {enumType.__name__}: {value:#x}", enumType, value)


def parseFlags(flagType: Type[IntFlag], value: int) -> IntFlag:
    """
    Convert a decoded bit set to an IntFlag, rejecting undefined bits.
    """
    known = 0
    for member in flagType.__members__.values():
        known |= member.value

    if value & ~known:
        raise UnexpectedEnumValueError(f"unexpected bits as {flagType.__name__}: {value:#x}", flagType, value)

    return flagType(value)
