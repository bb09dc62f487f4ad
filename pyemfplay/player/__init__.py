#
# This file is part of the PyEMFPlay project.
# Copyright (C) 2026 PyEMFPlay contributors.
# Licensed under the GPLv3 or later.
#

from pyemfplay.player.Player import Player
from pyemfplay.player.context import EmfObjectTable, GraphicsEnvironment, MetafileReference, PlaybackDeviceContext, \
    REFERENCE_SELF, SelectedObject
from pyemfplay.player.stock import getStockObject
from pyemfplay.player.DeviceContextPlayer import DeviceContextPlayer
from pyemfplay.player.Metafile import Metafile
from pyemfplay.player.svg import SVGPlayer
