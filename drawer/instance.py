# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module provides the Drawer class, which represents one persistent
panel.

A drawer is a single logical window, whose size and contents are shared
by all workspaces of the host, although the host creates a separate
window for it in each workspace it is displayed in. Drawers are created
by ``DrawerManager.create_drawer`` and live as long as their manager.

The state of a drawer tracks whether it is meant to be open, which
window of each workspace belongs to it and which contents it has
created. The drawer's window in the active workspace is looked up on
demand, so every operation acts on the active workspace only.

Operations invoke the hooks given in the options of the drawer, see
drawer.events for the events they receive.
"""

from drawer import events
from drawer.geometry import compute_window_placement
from drawer.resolver import OwnershipResolver, REASON_LOOKUP
from drawer.util import find_index

MODE_PREVIOUS_OR_NEW = 'previous_or_new'
MODE_NEW = 'new'

OPEN_MODES = [MODE_PREVIOUS_OR_NEW, MODE_NEW]


class DrawerState(object):
    def __init__(self, index, size):
        self.index = index
        self.is_open = False
        self.size = size
        self.is_zoomed = False
        self.previous_content = None
        self.contents = []
        self.windows_and_contents = {}

    def __repr__(self):
        return ('#<state open=%s size=%s zoomed=%s previous=%s contents=%s windows=%s>'
                % (self.is_open, self.size, self.is_zoomed, self.previous_content,
                   self.contents, self.windows_and_contents))


class Drawer(object):
    def __init__(self, manager, options, index):
        self._manager = manager
        self.options = options
        self.state = DrawerState(index, options['size'])
        self.resolver = OwnershipResolver(self)

    @property
    def host(self):
        return self._manager.host

    @property
    def position(self):
        return self.options['position']

    def _run_hook(self, name, event):
        hook = self.options[name]
        if hook:
            hook(event)

    def _run_hook_in_window(self, window_id, name, event):
        hook = self.options[name]
        if hook:
            self.host.window_call(window_id, lambda: hook(event))

    # Windows

    def forget_invalid_windows(self):
        for window_id in list(self.state.windows_and_contents):
            if not self.host.is_window_valid(window_id):
                del self.state.windows_and_contents[window_id]

    def get_window_id(self):
        """
        Return the id of the drawer's window in the active workspace, or
        None if the drawer is not displayed there.
        """
        self.forget_invalid_windows()
        for window_id in self.host.workspace_windows():
            if self.resolver.is_owned_window(window_id, REASON_LOOKUP):
                return window_id
        return None

    def build_placement(self):
        """
        Return the placement descriptor for the current state of the drawer.
        """
        width, height, cmdline_height = self.host.screen_dimensions()
        return compute_window_placement(self.options, width, height, cmdline_height,
                                        is_zoomed=self.state.is_zoomed,
                                        size=self.state.size)

    def initialize_window(self, window_id):
        vertical = self.options.is_vertical_split
        self.host.set_window_options(window_id, {
            'bufhidden':    'hide',
            'buflisted':    False,
            'equalalways':  False,
            'winfixwidth':  vertical,
            'winfixheight': not vertical,
        })

    def store_content_info(self, window_id):
        """
        Remember the content displayed by ``window_id`` as the drawer's
        content for this window, and as the one to show on reopening.
        """
        if window_id is None:
            return

        content_id = self.host.window_content(window_id)
        self.state.windows_and_contents[window_id] = content_id
        if content_id not in self.state.contents:
            self.state.contents.append(content_id)
        self.state.previous_content = content_id

    # Open / Close

    def _target_content(self, window_id, mode):
        if mode == MODE_NEW:
            return None

        if self.options['should_reuse_previous_content']:
            content_id = self.state.previous_content
        else:
            content_id = self.state.windows_and_contents.get(window_id)

        if content_id is None or not self.host.is_content_valid(content_id):
            return None
        return content_id

    def open(self, focus=False, mode=MODE_PREVIOUS_OR_NEW):
        """
        Open the drawer in the active workspace.

        If the drawer already has a window in this workspace, its content
        and placement are updated, otherwise a window is opened.

        :param focus: Set to True, to make the drawer the current window
        :param mode: ``'previous_or_new'`` displays the previous content
                     if it still exists, ``'new'`` always creates a new
                     content
        """
        if mode not in OPEN_MODES:
            raise ValueError('Unknown open mode %r' % (mode,))

        was_open = self.state.is_open
        self.state.is_open = True
        try:
            self._open(focus, mode)
        except Exception:
            self.state.is_open = was_open
            raise

    def _open(self, focus, mode):
        window_id = self.get_window_id()
        content_id = self._target_content(window_id, mode)
        placement = self.build_placement()

        should_create_content = content_id is None
        if should_create_content:
            self._run_hook('on_will_create_content',
                           events.WillCreateContentEvent(instance=self))
            content_id = self.host.create_content()
            # on_did_create_content runs once the content is displayed,
            # embedded applications may need a window to start in.

        if window_id is None:
            self._run_hook('on_will_open_window',
                           events.WillOpenWindowEvent(instance=self, content_id=content_id))
            self._run_hook('on_will_open_content',
                           events.WillOpenContentEvent(instance=self, content_id=content_id,
                                                       window_id=None))
            window_id = self.host.open_window(content_id, placement)
            self.initialize_window(window_id)
            self._run_hook_in_window(
                window_id, 'on_did_open_window',
                events.DidOpenWindowEvent(instance=self, window_id=window_id,
                                          content_id=content_id))
        else:
            self._run_hook('on_will_open_content',
                           events.WillOpenContentEvent(instance=self, content_id=content_id,
                                                       window_id=window_id))
            self.host.set_window_content(window_id, content_id)
            self.host.set_window_placement(window_id, placement)

        self._run_hook_in_window(
            window_id, 'on_did_open_content',
            events.DidOpenContentEvent(instance=self, window_id=window_id,
                                       content_id=content_id))

        if should_create_content:
            self._run_hook_in_window(
                window_id, 'on_did_create_content',
                events.DidCreateContentEvent(instance=self, window_id=window_id,
                                             content_id=content_id))

        if focus:
            self.host.set_current_window(window_id)

        self._run_hook_in_window(
            window_id, 'on_did_open',
            events.DidOpenEvent(instance=self, window_id=window_id, content_id=content_id))

        self.store_content_info(window_id)

    def close(self, save_size=True):
        """
        Close the drawer's window in the active workspace.

        The hook ``on_will_close`` is run even if the drawer has no
        window. Contents of the drawer are kept.

        :param save_size: Set to False, to discard the current size of
                          the window
        """
        self._run_hook('on_will_close', events.WillCloseEvent(instance=self))

        self.state.is_open = False

        window_id = self.get_window_id()
        if window_id is None:
            return

        if save_size:
            self.state.size = self.get_extent()

        self.store_content_info(window_id)
        self.host.close_window(window_id)
        self._run_hook('on_did_close', events.DidCloseEvent(instance=self, window_id=window_id))

    def toggle(self, open_options=None):
        """
        Close the drawer if it is open, otherwise open it.

        :param open_options: Keyword arguments passed to ``open``
        """
        if self.state.is_open:
            self.close(save_size=True)
        else:
            self.open(**(open_options or {}))

    def focus_or_toggle(self):
        """
        Open and focus the drawer if it has no window. Close it, if it
        is the current window, focus it otherwise.
        """
        if self.get_window_id() is None:
            self.open(focus=True)
        elif self.is_focused():
            self.close(save_size=True)
        else:
            self.focus()

    # Focus

    def focus(self):
        window_id = self.get_window_id()
        if window_id is None:
            return
        self.host.set_current_window(window_id)

    def is_focused(self):
        window_id = self.get_window_id()
        if window_id is None:
            return False
        return self.host.current_window() == window_id

    def focus_and_return(self, callback):
        """
        Focus the drawer, run ``callback`` and return focus to the
        window that was current before.
        """
        window_id = self.get_window_id()
        if window_id is None:
            return

        current_window = self.host.current_window()
        self.host.set_current_window(window_id)
        try:
            callback()
        finally:
            if self.host.is_window_valid(current_window):
                self.host.set_current_window(current_window)

    # Navigation

    def go(self, distance):
        """
        Display the content ``distance`` places away from the current one.

        Contents are ordered by creation, going past the last content
        continues with the first one and vice versa.

        :param distance: Number of contents to move, may be negative
        """
        window_id = self.get_window_id()
        if window_id is None:
            return

        index = find_index(self.state.contents,
                           lambda content_id, _: content_id == self.state.previous_content)
        if index == -1:
            return

        content_id = self.state.contents[(index + distance) % len(self.state.contents)]

        self._run_hook('on_will_open_content',
                       events.WillOpenContentEvent(instance=self, content_id=content_id,
                                                   window_id=window_id))
        self.host.set_window_content(window_id, content_id)
        self._run_hook_in_window(
            window_id, 'on_did_open_content',
            events.DidOpenContentEvent(instance=self, window_id=window_id,
                                       content_id=content_id))
        self.store_content_info(window_id)

    # Size

    def toggle_zoom(self):
        """
        Switch between the drawer's normal size and filling the screen.
        """
        window_id = self.get_window_id()
        if window_id is None:
            return

        self.state.is_zoomed = not self.state.is_zoomed
        try:
            placement = self.build_placement()
        except Exception:
            self.state.is_zoomed = not self.state.is_zoomed
            raise
        self.host.set_window_placement(window_id, placement)

    def get_extent(self):
        """
        Return the size of the drawer in columns for left and right
        drawers, in lines otherwise. While zoomed, the size before
        zooming is returned.
        """
        window_id = self.get_window_id()
        if window_id is None or self.state.is_zoomed:
            return self.state.size

        if self.options.is_vertical_split:
            extent = self.host.window_width(window_id)
        else:
            extent = self.host.window_height(window_id)
        return extent or self.state.size

    def set_extent(self, size):
        self.state.size = size

        window_id = self.get_window_id()
        if window_id is None or self.state.is_zoomed:
            return
        self.host.set_window_placement(window_id, self.build_placement())

    # Claiming

    def claim(self, window_id):
        """
        Make ``window_id``, which was not opened by the drawer, the
        drawer's window in the active workspace.

        If the window is the only regular window of the workspace, a
        blank window is opened above it, so that the workspace keeps a
        window that does not belong to a drawer.
        """
        if not self.host.is_window_valid(window_id):
            return

        tracked_by_any = self._manager.is_tracked_window
        regular_windows = [w for w in self.host.workspace_windows()
                           if not tracked_by_any(w) and not self.host.is_floating(w)]
        if len(regular_windows) == 1:
            self.host.open_window(self.host.create_content(), {'split': 'above'})

        self.store_content_info(window_id)
        self.initialize_window(window_id)
        self.open(mode=MODE_PREVIOUS_OR_NEW)

    def __repr__(self):
        return '#<drawer %s position=%s>' % (self.state.index, self.position)
