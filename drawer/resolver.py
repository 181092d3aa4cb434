# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Decides whether a window or a content belongs to a drawer.

A drawer owns the windows it tracks and the contents it has created or
displayed. Beyond that, ownership may be extended by the predicates
``is_owned_window`` and ``is_owned_content`` given in the options of the
drawer. Predicates receive an ``OwnershipContext`` and should return a
boolean. The ``reason`` of the context tells why ownership is queried,
so a predicate may be lenient when drawers look up their window and
strict when a content is destroyed:

.. code-block:: python

   def is_owned_content(ctx):
       if ctx.reason == REASON_CONTENT_DESTROYED:
           return False
       return ctx.content_name.endswith('NOTES.md')

When several drawers are asked, the first drawer in order of creation
that claims ownership wins. Drawers created later with broad
predicates will therefore only get what earlier drawers reject.
"""

from collections import namedtuple

REASON_LOOKUP = 'lookup'
REASON_WINDOW_ENTERED = 'window-entered'
REASON_CONTENT_DESTROYED = 'content-destroyed'

REASONS = [REASON_LOOKUP, REASON_WINDOW_ENTERED, REASON_CONTENT_DESTROYED]

OwnershipContext = namedtuple('OwnershipContext',
                              ['instance', 'window_id', 'content_id',
                               'content_name', 'reason'])


class OwnershipResolver(object):
    def __init__(self, instance):
        self._instance = instance

    @property
    def _host(self):
        return self._instance.host

    @property
    def _state(self):
        return self._instance.state

    def is_owned_window(self, window_id, reason=REASON_LOOKUP):
        """
        Return True if the window ``window_id`` belongs to the drawer.

        Displaying a content of the drawer does not make a window belong
        to it, unless the ``is_owned_window`` predicate says so.
        """
        if window_id is None or not self._host.is_window_valid(window_id):
            return False

        if window_id in self._state.windows_and_contents:
            return True

        predicate = self._instance.options['is_owned_window']
        if predicate is None:
            return False

        content_id = self._host.window_content(window_id)
        return bool(predicate(OwnershipContext(
            instance=self._instance,
            window_id=window_id,
            content_id=content_id,
            content_name=self._host.content_name(content_id),
            reason=reason)))

    def is_owned_content(self, content_id, reason=REASON_LOOKUP):
        """
        Return True if the content ``content_id`` belongs to the drawer.
        """
        if content_id is None:
            return False

        if content_id in self._state.contents or \
           content_id in self._state.windows_and_contents.values():
            return True

        predicate = self._instance.options['is_owned_content']
        if predicate is None or not self._host.is_content_valid(content_id):
            return False

        return bool(predicate(OwnershipContext(
            instance=self._instance,
            window_id=None,
            content_id=content_id,
            content_name=self._host.content_name(content_id),
            reason=reason)))
