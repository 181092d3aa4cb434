# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import contextlib

from drawer.host import Host, HOST_HOOKS
from drawer.util import forward


class HostException(Exception):
    pass


class Workspace(object):
    """
    A set of windows that is displayed at the same time. Each workspace
    has at least one window, one of its windows is the current window.
    """

    def __init__(self, host, content_id):
        self._host = host
        self._windows = {}
        self._order = []
        self._selected_window = self.add_window(content_id, 'window', {})

    def add_window(self, content_id, wm_type, placement):
        window_id = self._host._allocate_window_id()
        self._windows[window_id] = {
            'wm_type':   wm_type,
            'content':   content_id,
            'placement': dict(placement),
            'options':   {},
        }
        self._order.append(window_id)
        return window_id

    def remove_window(self, window_id):
        del self._windows[window_id]
        self._order.remove(window_id)
        if self._selected_window == window_id and self._order:
            self._selected_window = self._order[0]

    def windows(self):
        return list(self._order)

    def window(self, window_id):
        return self._windows[window_id]

    def has_window(self, window_id):
        return window_id in self._windows

    def select_window(self, window_id):
        """Return window_id or None if not part of this Workspace."""
        if window_id not in self._windows:
            return None
        self._selected_window = window_id
        return window_id

    def current_window(self):
        return self._selected_window

    def _split_extents(self, positions, key):
        return sum(w['placement'].get(key) or 0
                   for w in self._windows.values()
                   if w['wm_type'] == 'split' and w['placement'].get('split') in positions)

    def window_width(self, window_id):
        screen_width, _, _ = self._host.screen_dimensions()
        w = self._windows[window_id]
        if w['wm_type'] == 'float':
            return w['placement']['width']
        if w['wm_type'] == 'split' and w['placement'].get('split') in ('left', 'right'):
            return min(w['placement'].get('width') or screen_width // 2, screen_width)
        if w['wm_type'] == 'split':
            return screen_width
        return max(screen_width - self._split_extents(('left', 'right'), 'width'), 1)

    def window_height(self, window_id):
        _, screen_height, cmdline_height = self._host.screen_dimensions()
        available = screen_height - cmdline_height
        w = self._windows[window_id]
        if w['wm_type'] == 'float':
            return w['placement']['height']
        if w['wm_type'] == 'split' and w['placement'].get('split') in ('above', 'below'):
            return min(w['placement'].get('height') or available // 2, available)
        if w['wm_type'] == 'split':
            return available
        return max(available - self._split_extents(('above', 'below'), 'height'), 1)


@forward(lambda self: self.active_workspace(),
         ['current_window'],
         Workspace)
class MemoryHost(Host):
    """
    A host that keeps its workspaces, windows and contents in memory.

    Besides the operations of the Host interface, MemoryHost provides
    the operations a user would perform in an editor, such as creating
    workspaces, splitting windows or editing a named content. Work
    passed to ``schedule`` is queued until ``run_pending`` is called.
    """

    def __init__(self, width=80, height=24, cmdline_height=1):
        self._width = width
        self._height = height
        self._cmdline_height = cmdline_height
        self._hooks = {name: [] for name in HOST_HOOKS}
        self._pending = []
        self._contents = {}
        self._next_content_id = 1
        self._next_window_id = 1000
        self._workspace_index = {}
        self._workspaces = [self._new_workspace()]
        self._active_workspace = 0
        self.has_started = False
        self.has_quit = False

    # Hooks

    def add_hook(self, name, fn):
        hooks = self._hooks[name]
        if fn not in hooks:
            hooks.append(fn)

    def remove_hook(self, name, fn):
        self._hooks[name].remove(fn)

    def run_hook(self, name, *args, **kwargs):
        for hook in list(self._hooks[name]):
            hook(*args, **kwargs)

    def schedule(self, fn):
        self._pending.append(fn)

    def run_pending(self):
        """
        Run all scheduled functions, including those scheduled while
        running. Returns the number of functions run.
        """
        count = 0
        while self._pending:
            self._pending.pop(0)()
            count += 1
        return count

    # Screen

    def screen_dimensions(self):
        return (self._width, self._height, self._cmdline_height)

    def resize(self, width, height, cmdline_height=None):
        self._width = width
        self._height = height
        if cmdline_height is not None:
            self._cmdline_height = cmdline_height
        self.run_hook('resize')

    def start(self):
        if self.has_started:
            return
        self.has_started = True
        self.run_hook('ready')

    def quit(self):
        self.has_quit = True

    # Workspaces

    def _new_workspace(self):
        ws = Workspace(self, self.create_content())
        for window_id in ws.windows():
            self._workspace_index[window_id] = ws
        return ws

    def active_workspace(self):
        return self._workspaces[self._active_workspace]

    @property
    def workspace_index(self):
        return self._active_workspace

    def workspace_count(self):
        return len(self._workspaces)

    def workspace_windows(self):
        return self.active_workspace().windows()

    def new_workspace(self, name=None):
        """
        Create a new workspace after the active one and enter it.

        :param name: If given, the window of the new workspace edits the
                     content with this name
        """
        self.run_hook('workspace-leave')
        ws = self._new_workspace()
        self._active_workspace += 1
        self._workspaces.insert(self._active_workspace, ws)
        self.run_hook('workspace-new')
        self.run_hook('workspace-enter')
        if name is not None:
            self.edit(name)
        return ws

    def select_workspace(self, index):
        if index == self._active_workspace:
            return
        if not 0 <= index < len(self._workspaces):
            raise HostException('No workspace %s.' % index)
        self.run_hook('workspace-leave')
        self._active_workspace = index
        self.run_hook('workspace-enter')

    def next_workspace(self):
        self.select_workspace((self._active_workspace + 1) % len(self._workspaces))

    def previous_workspace(self):
        self.select_workspace((self._active_workspace + len(self._workspaces) - 1)
                              % len(self._workspaces))

    def _delete_workspace(self, ws):
        index = self._workspaces.index(ws)
        for window_id in ws.windows():
            del self._workspace_index[window_id]
        self._workspaces.pop(index)
        if index <= self._active_workspace and self._active_workspace > 0:
            self._active_workspace -= 1

    def close_workspace(self):
        if len(self._workspaces) == 1:
            self.quit()
            return
        self.run_hook('workspace-leave')
        self._delete_workspace(self.active_workspace())
        self.run_hook('workspace-enter')

    # Windows

    def _allocate_window_id(self):
        window_id = self._next_window_id
        self._next_window_id += 1
        return window_id

    def _workspace_of(self, window_id):
        ws = self._workspace_index.get(window_id)
        if ws is None:
            raise HostException('Invalid window id %s.' % window_id)
        return ws

    def _window(self, window_id):
        return self._workspace_of(window_id).window(window_id)

    def _check_content(self, content_id):
        if content_id not in self._contents:
            raise HostException('Invalid content id %s.' % content_id)

    def is_window_valid(self, window_id):
        return window_id in self._workspace_index

    def open_window(self, content_id, placement):
        self._check_content(content_id)
        ws = self.active_workspace()
        wm_type = 'float' if placement.get('relative') else 'split'
        window_id = ws.add_window(content_id, wm_type, placement)
        self._workspace_index[window_id] = ws
        return window_id

    def close_window(self, window_id):
        ws = self._workspace_of(window_id)
        self.run_hook('window-closed', window_id)

        # The hook may have closed the whole workspace
        if not self.is_window_valid(window_id):
            return
        ws.remove_window(window_id)
        del self._workspace_index[window_id]

        if not ws.windows():
            if len(self._workspaces) == 1:
                self.quit()
            elif ws is self.active_workspace():
                self.close_workspace()
            else:
                self._delete_workspace(ws)

    def window_content(self, window_id):
        return self._window(window_id)['content']

    def set_window_content(self, window_id, content_id):
        self._check_content(content_id)
        self._window(window_id)['content'] = content_id

    def window_placement(self, window_id):
        return dict(self._window(window_id)['placement'])

    def set_window_placement(self, window_id, placement):
        w = self._window(window_id)
        w['placement'] = dict(placement)
        if placement.get('relative'):
            w['wm_type'] = 'float'
        elif placement.get('split'):
            w['wm_type'] = 'split'

    def is_floating(self, window_id):
        return self._window(window_id)['wm_type'] == 'float'

    def window_width(self, window_id):
        return self._workspace_of(window_id).window_width(window_id)

    def window_height(self, window_id):
        return self._workspace_of(window_id).window_height(window_id)

    def window_options(self, window_id):
        return dict(self._window(window_id)['options'])

    def set_window_options(self, window_id, options):
        self._window(window_id)['options'].update(options)

    def set_current_window(self, window_id):
        if self.active_workspace().select_window(window_id) is None:
            raise HostException('Window %s is not in the active workspace.' % window_id)

    @contextlib.contextmanager
    def window_selected(self, window_id):
        ws = self._workspace_of(window_id)
        old_window = ws.current_window()
        ws.select_window(window_id)
        try:
            yield window_id
        finally:
            if ws.has_window(old_window):
                ws.select_window(old_window)

    def window_call(self, window_id, fn):
        with self.window_selected(window_id):
            return fn()

    def split_window(self, position='above', content_id=None):
        """
        Split the current window, like a user would. The new window shows
        ``content_id`` or the content of the current window and becomes
        the current window.
        """
        ws = self.active_workspace()
        if content_id is None:
            content_id = self.window_content(ws.current_window())
        self._check_content(content_id)
        window_id = ws.add_window(content_id, 'split', {'split': position})
        self._workspace_index[window_id] = ws
        ws.select_window(window_id)
        self.run_hook('window-entered', window_id, content_id)
        return window_id

    # Contents

    def create_content(self, name=''):
        content_id = self._next_content_id
        self._next_content_id += 1
        self._contents[content_id] = {'name': name}
        return content_id

    def is_content_valid(self, content_id):
        return content_id in self._contents

    def content_name(self, content_id):
        self._check_content(content_id)
        return self._contents[content_id]['name']

    def find_content(self, name):
        return next((content_id for content_id, content in self._contents.items()
                     if content['name'] == name),
                    None)

    def edit(self, name):
        """
        Display the content named ``name`` in the current window, creating
        it if necessary. Returns the id of the content.
        """
        content_id = self.find_content(name)
        if content_id is None:
            content_id = self.create_content(name)
        window_id = self.current_window()
        self.set_window_content(window_id, content_id)
        self.run_hook('window-entered', window_id, content_id)
        return content_id

    def destroy_content(self, content_id):
        """
        Destroy a content. Windows displaying it are closed, unless they
        are the last window of their workspace, which is given a new,
        empty content instead.
        """
        self._check_content(content_id)
        self.run_hook('content-destroyed', content_id)
        for window_id in list(self._workspace_index):
            # Closing a window may have closed its workspace
            if not self.is_window_valid(window_id):
                continue
            ws = self._workspace_index[window_id]
            w = ws.window(window_id)
            if w['content'] != content_id:
                continue
            if len(ws.windows()) > 1:
                self.close_window(window_id)
            else:
                w['content'] = self.create_content()
        del self._contents[content_id]
