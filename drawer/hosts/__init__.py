# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Implementations of drawer.host.Host.

MemoryHost keeps workspaces, windows and contents in memory. It is
useful for running drawers without an editor, e.g. in tests, and as a
reference for adapting drawers to other hosts.
"""

from drawer.hosts.memory import MemoryHost, HostException, Workspace
