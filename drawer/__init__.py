# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from drawer.config import ConfigException, POSITIONS
from drawer.geometry import GeometryException, compute_window_placement, parse_percentage
from drawer.host import Host
from drawer.instance import Drawer, MODE_NEW, MODE_PREVIOUS_OR_NEW
from drawer.orchestrator import DrawerManager
from drawer.resolver import \
    OwnershipContext, REASON_LOOKUP, REASON_WINDOW_ENTERED, REASON_CONTENT_DESTROYED

__all__ = [
    'DrawerManager',
    'Drawer',
    'Host',

    'MODE_NEW',
    'MODE_PREVIOUS_OR_NEW',
    'POSITIONS',

    'OwnershipContext',
    'REASON_LOOKUP',
    'REASON_WINDOW_ENTERED',
    'REASON_CONTENT_DESTROYED',

    'compute_window_placement',
    'parse_percentage',

    'ConfigException',
    'GeometryException',
]
