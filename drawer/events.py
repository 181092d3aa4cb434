# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Events passed to the hooks of a drawer.

Each hook receives exactly one kind of event, carrying only the fields
that are valid when the hook runs. Hooks that run before a window
exists, or after it has been closed, never get a window to act on.

Hooks prefixed ``on_did_`` that carry a ``window_id`` are run with the
drawer window as the current window, by means of ``Host.window_call``.
All other hooks run in whatever window is current. ``on_did_close`` is
the exception, its ``window_id`` refers to a window that no longer
exists.
"""

from collections import namedtuple


def _event(class_name, kind, fields):
    base = namedtuple(class_name, fields)
    return type(class_name, (base,), {'__slots__': (), 'kind': kind})


HostReadyEvent = _event('HostReadyEvent', 'host-ready',
                        ['instance'])

WillCreateContentEvent = _event('WillCreateContentEvent', 'will-create-content',
                                ['instance'])

DidCreateContentEvent = _event('DidCreateContentEvent', 'did-create-content',
                               ['instance', 'window_id', 'content_id'])

WillOpenWindowEvent = _event('WillOpenWindowEvent', 'will-open-window',
                             ['instance', 'content_id'])

DidOpenWindowEvent = _event('DidOpenWindowEvent', 'did-open-window',
                            ['instance', 'window_id', 'content_id'])

# window_id is None if the window is about to be created
WillOpenContentEvent = _event('WillOpenContentEvent', 'will-open-content',
                              ['instance', 'content_id', 'window_id'])

DidOpenContentEvent = _event('DidOpenContentEvent', 'did-open-content',
                             ['instance', 'window_id', 'content_id'])

WillCloseEvent = _event('WillCloseEvent', 'will-close',
                        ['instance'])

DidCloseEvent = _event('DidCloseEvent', 'did-close',
                       ['instance', 'window_id'])

DidOpenEvent = _event('DidOpenEvent', 'did-open',
                      ['instance', 'window_id', 'content_id'])
