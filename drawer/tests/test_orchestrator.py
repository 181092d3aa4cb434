# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Tests for the reactions of DrawerManager to host hooks."""

import pytest

from drawer.config import ConfigException
from drawer.resolver import REASON_CONTENT_DESTROYED, REASON_WINDOW_ENTERED


# ============================================================================
# Startup
# ============================================================================

def test_host_ready_in_creation_order(host, manager):
    order = []
    manager.create_drawer(size=10, position='right',
                          on_host_ready=lambda e: order.append(e.instance.position))
    manager.create_drawer(size=10, position='left',
                          on_host_ready=lambda e: order.append(e.instance.position))
    host.start()
    host.start()
    assert order == ['right', 'left']


def test_host_ready_in_position_order(host, manager):
    order = []
    for position in ['float', 'right', 'below', 'left']:
        manager.create_drawer(size=10, position=position,
                              win_config={'width': 10, 'height': 10},
                              on_host_ready=lambda e: order.append(e.instance.position))
    manager.setup(startup_order=['left', 'right'])
    host.start()
    assert order == ['left', 'right', 'float', 'below']


def test_failing_host_ready_is_logged(host, manager):
    started = []

    def _fail(event):
        raise RuntimeError('boom')

    manager.create_drawer(size=10, position='left', on_host_ready=_fail)
    manager.create_drawer(size=10, position='right',
                          on_host_ready=lambda e: started.append(e.instance))
    host.start()

    assert len(started) == 1
    assert 'boom' in manager.last_message
    assert 'Traceback' in manager.logger.messages[-1]


def test_drawers_may_open_on_host_ready(host, manager):
    drawer = manager.create_drawer(size=10, position='below',
                                   on_host_ready=lambda e: e.instance.open())
    host.start()
    assert drawer.get_window_id() is not None


# ============================================================================
# Workspaces
# ============================================================================

def test_open_drawer_follows_into_new_workspace(host, left_drawer):
    left_drawer.open()
    content_id = left_drawer.state.previous_content

    host.new_workspace()
    assert left_drawer.get_window_id() is None

    host.run_pending()
    window_id = left_drawer.get_window_id()
    assert window_id is not None
    assert host.window_content(window_id) == content_id
    assert not left_drawer.is_focused()


def test_contents_per_workspace_without_reuse(host, manager):
    drawer = manager.create_drawer(size=20, position='left',
                                   should_reuse_previous_content=False)
    drawer.open()
    window_a = drawer.get_window_id()
    first = host.window_content(window_a)

    host.new_workspace()
    host.run_pending()
    drawer.open()
    window_b = drawer.get_window_id()
    second = host.window_content(window_b)

    assert second != first
    assert drawer.state.contents == [first, second]
    assert drawer.state.windows_and_contents == {window_a: first, window_b: second}

    host.select_workspace(0)
    host.run_pending()
    assert host.window_content(drawer.get_window_id()) == first


def test_closed_drawer_is_closed_on_workspace_enter(host, left_drawer):
    left_drawer.open()
    window_a = left_drawer.get_window_id()

    host.new_workspace()
    host.run_pending()
    left_drawer.close()

    host.select_workspace(0)
    assert host.is_window_valid(window_a)
    host.run_pending()
    assert not host.is_window_valid(window_a)
    assert left_drawer.get_window_id() is None


def test_new_workspace_skips_closing_once(host, manager):
    closes = []
    manager.create_drawer(size=10, position='below',
                          on_will_close=lambda e: closes.append(e))

    host.new_workspace()
    host.run_pending()
    assert closes == []

    host.select_workspace(0)
    host.run_pending()
    assert len(closes) == 1


def test_workspace_leave_saves_size(host, left_drawer):
    left_drawer.open()
    host.set_window_placement(left_drawer.get_window_id(), {'split': 'left', 'width': 30})

    host.new_workspace()
    assert left_drawer.state.size == 30

    host.run_pending()
    assert host.window_width(left_drawer.get_window_id()) == 30


def test_new_workspace_editing_owned_content(host, manager):
    notes_drawer = manager.create_drawer(
        size=20, position='left',
        is_owned_window=lambda ctx: ctx.content_name == 'NOTES.md')
    other = manager.create_drawer(size=10, position='below')
    other.open()
    other.close()

    host.new_workspace('NOTES.md')
    host.run_pending()

    assert host.workspace_count() == 2
    assert host.workspace_index == 1
    assert notes_drawer.state.is_open
    assert notes_drawer.get_window_id() is not None
    assert len(host.workspace_windows()) == 2


def test_closing_workspace_forgets_its_windows(host, manager, left_drawer):
    left_drawer.open()
    host.new_workspace()
    host.run_pending()
    window_id = left_drawer.get_window_id()

    host.close_workspace()

    assert window_id not in left_drawer.state.windows_and_contents
    assert not manager.is_tracked_window(window_id)
    assert len(left_drawer.state.windows_and_contents) == 1


# ============================================================================
# Resize
# ============================================================================

def test_resize_replaces_floats(host, manager, left_drawer):
    floating = manager.create_drawer(size=10, position='float',
                                     win_config={'width': '50%', 'height': '50%'})
    floating.open()
    left_drawer.open()
    float_window = floating.get_window_id()
    assert host.window_placement(float_window)['width'] == 40

    host.resize(100, 41)
    assert host.window_placement(float_window) == {'relative': 'editor', 'row': 9,
                                                   'col': 25, 'width': 50, 'height': 20}
    assert host.window_placement(left_drawer.get_window_id()) == {'split': 'left',
                                                                  'width': 20}


# ============================================================================
# Destroyed contents
# ============================================================================

def test_destroying_displayed_content(host, left_drawer):
    left_drawer.open()
    first = left_drawer.state.previous_content
    left_drawer.open(mode='new')
    second = left_drawer.state.previous_content
    window_id = left_drawer.get_window_id()

    host.destroy_content(second)

    assert left_drawer.state.contents == [first]
    assert left_drawer.state.previous_content == first
    assert window_id not in left_drawer.state.windows_and_contents
    assert not host.is_window_valid(window_id)

    left_drawer.open()
    assert len(host.workspace_windows()) == 2
    assert list(left_drawer.state.windows_and_contents.values()) == [first]


def test_destroying_last_content(host, left_drawer):
    left_drawer.open()
    host.destroy_content(left_drawer.state.previous_content)
    assert left_drawer.state.contents == []
    assert left_drawer.state.previous_content is None

    left_drawer.open()
    assert len(left_drawer.state.contents) == 1


def test_destroying_foreign_content(host, left_drawer):
    left_drawer.open()
    state = (list(left_drawer.state.contents), dict(left_drawer.state.windows_and_contents))

    host.destroy_content(host.create_content('scratch'))
    assert (left_drawer.state.contents, left_drawer.state.windows_and_contents) == state


def test_destroy_reason_reaches_predicate(host, manager):
    reasons = []

    def _is_owned_content(ctx):
        reasons.append(ctx.reason)
        return False

    manager.create_drawer(size=10, position='below', is_owned_content=_is_owned_content)
    host.destroy_content(host.create_content('scratch'))
    assert reasons == [REASON_CONTENT_DESTROYED]


# ============================================================================
# Surfaced windows
# ============================================================================

def test_first_matching_drawer_claims(host, manager):
    def _notes(ctx):
        return ctx.content_name == 'NOTES.md'

    first = manager.create_drawer(size=20, position='left', is_owned_window=_notes)
    second = manager.create_drawer(size=20, position='right', is_owned_window=_notes)
    window_id = host.current_window()
    host.edit('NOTES.md')

    assert window_id in first.state.windows_and_contents
    assert second.state.windows_and_contents == {}
    assert manager.find_instance_for_window(window_id) is first
    assert 'claims' in manager.last_message


def test_entered_reason_reaches_predicate(host, manager):
    reasons = []

    def _is_owned_window(ctx):
        reasons.append(ctx.reason)
        return False

    manager.create_drawer(size=10, position='below', is_owned_window=_is_owned_window)
    host.edit('NOTES.md')
    assert reasons == [REASON_WINDOW_ENTERED]


def test_claiming_can_be_disabled(host, manager):
    drawer = manager.create_drawer(size=20, position='left', should_claim_new_window=False,
                                   is_owned_window=lambda ctx: ctx.content_name == 'NOTES.md')
    host.edit('NOTES.md')
    assert drawer.state.windows_and_contents == {}
    assert not drawer.state.is_open
    assert len(host.workspace_windows()) == 1


# ============================================================================
# Closed windows
# ============================================================================

def test_closing_last_regular_window_closes_workspace(host, left_drawer):
    host.new_workspace()
    host.run_pending()
    main_window = host.current_window()
    left_drawer.open()

    host.close_window(main_window)

    assert host.workspace_count() == 1
    assert host.workspace_index == 0
    assert not host.has_quit

    host.run_pending()
    assert left_drawer.get_window_id() is not None


def test_closing_last_regular_window_of_last_workspace_quits(host, left_drawer):
    main_window = host.current_window()
    left_drawer.open()

    host.close_window(main_window)
    assert host.has_quit
    assert 'quitting' in left_drawer._manager.last_message


def test_closing_with_regular_windows_left(host, left_drawer):
    left_drawer.open()
    window_id = host.split_window('below')

    host.close_window(window_id)
    assert not host.has_quit
    assert host.workspace_count() == 1


def test_closing_drawer_window_from_outside(host, left_drawer):
    left_drawer.open()
    window_id = left_drawer.get_window_id()

    host.close_window(window_id)
    assert left_drawer.state.windows_and_contents == {}
    assert left_drawer.state.is_open
    assert not host.has_quit


def test_teardown_unsubscribes(host, manager, left_drawer):
    left_drawer.open()
    manager.teardown()

    host.new_workspace()
    assert host.run_pending() == 0
    assert left_drawer.get_window_id() is None


def test_setup_rejects_bad_startup_order(manager):
    with pytest.raises(ConfigException):
        manager.setup(startup_order='random')
