# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Shared pytest fixtures for drawer tests."""

import pytest

from drawer.config import HOOKS
from drawer.hosts import MemoryHost
from drawer.orchestrator import DrawerManager


@pytest.fixture
def host():
    """An 80x24 host with a one line command line."""
    return MemoryHost(width=80, height=24, cmdline_height=1)


@pytest.fixture
def manager(host):
    manager = DrawerManager(host)
    manager.setup()
    return manager


@pytest.fixture
def recorded():
    return []


@pytest.fixture
def recording_hooks(recorded, host):
    """
    Hooks that append ``(event, current_window)`` to ``recorded``.
    """
    def _record(event):
        recorded.append((event, host.current_window()))

    return {name: _record for name in HOOKS if name != 'on_host_ready'}


@pytest.fixture
def left_drawer(manager):
    return manager.create_drawer(size=20, position='left')
