# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module defines the interface between drawers and the application
that manages their windows, referred to as the host.

A host has a number of workspaces, one of which is active. Each
workspace contains a set of windows, and each window displays one
content. Contents exist independently of windows and workspaces.
Windows and contents are identified by integers handed out by the host.

The host notifies drawers about changes by running hooks, which are
registered by calling ``add_hook``. The following hooks are run:

- ``ready``: once, when the host has started.
- ``workspace-new``: a workspace was created, run before it is entered.
- ``workspace-enter``: a workspace became the active one.
- ``workspace-leave``: the active workspace is about to be switched.
- ``resize``: the screen dimensions have changed.
- ``content-destroyed(content_id)``: a content is about to be destroyed.
- ``window-entered(window_id, content_id)``: a window that was not
  opened by ``open_window`` started displaying a content.
- ``window-closed(window_id)``: a window is about to be closed.
"""

HOST_HOOKS = ['ready',
              'workspace-new',
              'workspace-enter',
              'workspace-leave',
              'resize',
              'content-destroyed',
              'window-entered',
              'window-closed']


class Host(object):
    def add_hook(self, name, fn):
        raise NotImplementedError()

    def remove_hook(self, name, fn):
        raise NotImplementedError()

    def schedule(self, fn):
        """
        Run ``fn`` on the next turn of the host's event loop.
        """
        raise NotImplementedError()

    def screen_dimensions(self):
        """
        Return a tuple ``(width, height, cmdline_height)``. The height
        includes the lines occupied by the command line.
        """
        raise NotImplementedError()

    # Workspaces

    def workspace_windows(self):
        """
        Return the ids of the windows in the active workspace.
        """
        raise NotImplementedError()

    def workspace_count(self):
        raise NotImplementedError()

    def close_workspace(self):
        """
        Close the active workspace and all of its windows.
        """
        raise NotImplementedError()

    def quit(self):
        raise NotImplementedError()

    # Windows

    def is_window_valid(self, window_id):
        raise NotImplementedError()

    def open_window(self, content_id, placement):
        """
        Open a window in the active workspace displaying ``content_id``
        and return its id. The current window does not change.

        :param placement: A placement descriptor, see drawer.geometry
        """
        raise NotImplementedError()

    def close_window(self, window_id):
        raise NotImplementedError()

    def window_content(self, window_id):
        raise NotImplementedError()

    def set_window_content(self, window_id, content_id):
        raise NotImplementedError()

    def set_window_placement(self, window_id, placement):
        raise NotImplementedError()

    def is_floating(self, window_id):
        raise NotImplementedError()

    def window_width(self, window_id):
        raise NotImplementedError()

    def window_height(self, window_id):
        raise NotImplementedError()

    def set_window_options(self, window_id, options):
        raise NotImplementedError()

    def current_window(self):
        raise NotImplementedError()

    def set_current_window(self, window_id):
        raise NotImplementedError()

    def window_call(self, window_id, fn):
        """
        Run ``fn`` with ``window_id`` as the current window, then restore
        the previously current window. Returns the result of ``fn``.
        """
        raise NotImplementedError()

    # Contents

    def create_content(self):
        """
        Create a new, empty and unnamed content and return its id.
        """
        raise NotImplementedError()

    def is_content_valid(self, content_id):
        raise NotImplementedError()

    def content_name(self, content_id):
        raise NotImplementedError()
