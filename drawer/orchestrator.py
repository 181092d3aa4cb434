# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module provides the DrawerManager, which owns all drawers of a
host and keeps them consistent when the host changes.

The embedding application creates one manager per host, creates its
drawers through it and calls ``setup`` once to subscribe to the
host's hooks:

.. code-block:: python

   manager = DrawerManager(host)
   terminal = manager.create_drawer(size=15, position='below',
                                    on_did_create_content=start_shell)
   manager.setup()

From then on the manager restores open drawers in each workspace that
is entered, closes the others, keeps track of destroyed contents and
windows, claims windows that show content belonging to a drawer, and
closes workspaces in which only drawers remain.
"""

import sys
import traceback

from drawer import events
from drawer.config import DrawerOptions, Variables, STARTUP_ORDER_CREATION, \
    validate_startup_order
from drawer.instance import Drawer
from drawer.logger import Logger
from drawer.resolver import REASON_LOOKUP, REASON_WINDOW_ENTERED, REASON_CONTENT_DESTROYED
from drawer.util import find_value


class DrawerManager(Variables):
    def __init__(self, host):
        super(DrawerManager, self).__init__()
        self.host = host
        self.logger = Logger()
        self._instances = []
        self._is_entering_new_workspace = False
        self._last_message = ''
        self._hooks = []
        self.def_variable(['drawer', 'startup-order'], STARTUP_ORDER_CREATION)

    # Messages

    def message(self, msg, log_message=None):
        """
        Log a message.

        :param msg: The message to be logged
        :param log_message: Provide an alternative text for the log
        """
        self._last_message = msg
        self.logger.log(log_message or msg)

    def exception(self):
        """
        Call to log the exception that is currently handled.
        """
        exc_type, exc_value, _ = sys.exc_info()
        self.message(traceback.format_exception_only(exc_type, exc_value)[-1].strip(),
                     log_message=traceback.format_exc())

    @property
    def last_message(self):
        return self._last_message

    # Instances

    @property
    def instances(self):
        return tuple(self._instances)

    def create_drawer(self, **options):
        """
        Create a new drawer and register it with this manager.

        See drawer.config for the accepted options.
        """
        instance = Drawer(self, DrawerOptions(options), len(self._instances) + 1)
        self._instances.append(instance)
        return instance

    def find_instance_for_window(self, window_id, reason=REASON_LOOKUP):
        """
        Return the first drawer that owns ``window_id``, or None.
        """
        if window_id is None or not self.host.is_window_valid(window_id):
            return None
        return find_value(self._instances,
                          lambda instance, _: instance.resolver.is_owned_window(window_id,
                                                                                reason))

    def find_instance_for_content(self, content_id, reason=REASON_LOOKUP):
        """
        Return the first drawer that owns ``content_id``, or None.
        """
        return find_value(self._instances,
                          lambda instance, _: instance.resolver.is_owned_content(content_id,
                                                                                 reason))

    def is_tracked_window(self, window_id):
        if not self.host.is_window_valid(window_id):
            return False
        return any(window_id in instance.state.windows_and_contents
                   for instance in self._instances)

    # Setup

    def setup(self, startup_order=None):
        """
        Subscribe to the hooks of the host.

        :param startup_order: Either ``'creation'``, to run ``on_host_ready``
                              in order of creation, or a list of positions,
                              e.g. ``['left', 'below']``, to run drawers in
                              these positions first
        """
        if startup_order is not None:
            self.set_variable(['drawer', 'startup-order'],
                              validate_startup_order(startup_order))

        if self._hooks:
            return

        self._hooks = [
            ('ready',             self.on_host_ready),
            ('workspace-new',     self.on_workspace_new),
            ('workspace-enter',   self.on_workspace_enter),
            ('workspace-leave',   self.on_workspace_leave),
            ('resize',            self.on_resize),
            ('content-destroyed', self.on_content_destroyed),
            ('window-entered',    self.on_window_entered),
            ('window-closed',     self.on_window_closed),
        ]
        for name, fn in self._hooks:
            self.host.add_hook(name, fn)

    def teardown(self):
        """
        Unsubscribe from the hooks of the host.
        """
        for name, fn in self._hooks:
            self.host.remove_hook(name, fn)
        self._hooks = []

    def _startup_order(self):
        order = self.get_variable(['drawer', 'startup-order'])
        if order == STARTUP_ORDER_CREATION:
            return list(self._instances)

        def _rank(instance):
            if instance.position in order:
                return order.index(instance.position)
            return len(order)
        return sorted(self._instances, key=_rank)

    # Host Hooks

    def on_host_ready(self):
        for instance in self._startup_order():
            hook = instance.options['on_host_ready']
            if not hook:
                continue
            try:
                hook(events.HostReadyEvent(instance=instance))
            except Exception:
                self.exception()

    def on_workspace_new(self):
        self._is_entering_new_workspace = True

    def on_workspace_enter(self):
        # Windows of a closed workspace are gone without being closed
        for instance in self._instances:
            instance.forget_invalid_windows()

        # Contents of the new workspace's windows are not settled yet,
        # so restoring runs on the next turn of the host's loop.
        self.host.schedule(self._restore_workspace)

    def _restore_workspace(self):
        try:
            for instance in self._instances:
                if instance.state.is_open:
                    instance.open(focus=False)
                elif not self._is_entering_new_workspace:
                    # Closing here would close a workspace that has just
                    # been created to edit content owned by a drawer.
                    instance.close(save_size=False)
        finally:
            self._is_entering_new_workspace = False

    def on_workspace_leave(self):
        for instance in self._instances:
            if instance.state.is_open:
                instance.state.size = instance.get_extent()
                instance.store_content_info(instance.get_window_id())

    def on_resize(self):
        for instance in self._instances:
            if instance.position != 'float':
                continue
            instance.forget_invalid_windows()
            for window_id in instance.state.windows_and_contents:
                self.host.set_window_placement(window_id, instance.build_placement())

    def on_content_destroyed(self, content_id):
        for instance in self._instances:
            if not instance.resolver.is_owned_content(content_id, REASON_CONTENT_DESTROYED):
                continue

            state = instance.state
            state.contents = [c for c in state.contents if c != content_id]
            state.previous_content = state.contents[-1] if state.contents else None
            state.windows_and_contents = {w: c for w, c in state.windows_and_contents.items()
                                          if c != content_id}

    def on_window_entered(self, window_id, content_id):
        for instance in self._instances:
            if instance.options['should_claim_new_window'] \
               and not self.is_tracked_window(window_id) \
               and instance.resolver.is_owned_window(window_id, REASON_WINDOW_ENTERED):
                self.message('Drawer %s claims window %s.' % (instance.state.index, window_id))
                instance.claim(window_id)

    def on_window_closed(self, window_id):
        closing_instance = self.find_instance_for_window(window_id)

        for instance in self._instances:
            instance.state.windows_and_contents.pop(window_id, None)

        if closing_instance is not None:
            return

        remaining = [w for w in self.host.workspace_windows() if w != window_id]
        if not remaining:
            return

        if all(self.find_instance_for_window(w) is not None for w in remaining):
            if self.host.workspace_count() > 1:
                self.message('Only drawers remain, closing workspace.')
                self.host.close_workspace()
            else:
                self.message('Only drawers remain, quitting.')
                self.host.quit()
