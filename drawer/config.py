# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module provides the configuration of drawers.

Each drawer is configured once, when it is created, by a set of
options. The options given by the user are merged over
``DEFAULT_OPTIONS`` and validated, resulting in a ``DrawerOptions``
object that is never modified afterwards. Options are accessed with
item syntax, e.g. ``options['position']``.

Settings that affect all drawers of a manager are kept in a
``Variables`` store, where each variable is addressed by a path of
keys, e.g. ``['drawer', 'startup-order']``.
"""

from drawer.util import deep_get, deep_merge, deep_put

POSITIONS = ['left', 'right', 'above', 'below', 'float']

HOOKS = ['on_host_ready',
         'on_will_create_content',
         'on_did_create_content',
         'on_will_open_window',
         'on_did_open_window',
         'on_will_open_content',
         'on_did_open_content',
         'on_will_close',
         'on_did_close',
         'on_did_open']

PREDICATES = ['is_owned_window',
              'is_owned_content']

DEFAULT_OPTIONS = {
    'size':                          None,
    'position':                      None,
    'win_config':                    None,
    'should_reuse_previous_content': True,
    'should_claim_new_window':       True,
}
DEFAULT_OPTIONS.update({name: None for name in HOOKS + PREDICATES})

DEFAULT_WIN_CONFIG = {
    'anchor': 'CC',
    'margin': 0,
}

STARTUP_ORDER_CREATION = 'creation'


class ConfigException(ValueError):
    pass


class DrawerOptions(object):
    """
    The validated, read-only options of a drawer.

    :param options: A dict of options, as accepted by ``create_drawer``
    """

    def __init__(self, options):
        unknown = sorted(set(options) - set(DEFAULT_OPTIONS))
        if unknown:
            raise ConfigException('Unknown drawer options: %s' % ', '.join(unknown))

        self._options = deep_merge(DEFAULT_OPTIONS, options)
        self._validate()

    def _validate(self):
        position = self._options['position']
        if position not in POSITIONS:
            raise ConfigException('Illegal position %r, expected one of %s.'
                                  % (position, ', '.join(POSITIONS)))

        size = self._options['size']
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigException('Size must be a positive integer, got %r.' % (size,))

        win_config = self._options['win_config']
        if win_config is not None and not isinstance(win_config, dict):
            raise ConfigException('win_config must be a dict, got %r.' % (win_config,))

        for name in HOOKS + PREDICATES:
            value = self._options[name]
            if value is not None and not callable(value):
                raise ConfigException('Option %s must be callable.' % name)

    def __getitem__(self, key):
        return self._options[key]

    def __contains__(self, key):
        return key in self._options

    def get(self, key, default=None):
        return self._options.get(key, default)

    def win_config(self):
        """Return the float configuration merged over its defaults."""
        return deep_merge(DEFAULT_WIN_CONFIG, self._options['win_config'] or {})

    @property
    def is_vertical_split(self):
        return self._options['position'] in ('left', 'right')

    def __repr__(self):
        return '#<options position=%s size=%s>' % (self._options['position'],
                                                   self._options['size'])


class Variables(object):
    """
    A store of variables, each addressed by a path of keys.

    Variables must be defined with ``def_variable`` before they may be
    changed with ``set_variable``.
    """

    def __init__(self):
        self._state = {}

    def def_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=True)

    def set_variable(self, path, value=None):
        try:
            deep_put(self._state, path, value, create_path=False)
        except KeyError as e:
            raise ConfigException('Undefined variable %s.' % path) from e

    def get_variable(self, path):
        try:
            return deep_get(self._state, path, return_none=False)
        except KeyError as e:
            raise ConfigException('Undefined variable %s.' % path) from e


def validate_startup_order(order):
    if order == STARTUP_ORDER_CREATION:
        return order
    if isinstance(order, (list, tuple)) and all(p in POSITIONS for p in order):
        return list(order)
    raise ConfigException('Startup order must be %r or a list of positions, got %r.'
                          % (STARTUP_ORDER_CREATION, order))
