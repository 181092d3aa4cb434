# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module computes where the window of a drawer is placed.

Placement is described by a plain dict, which is handed to the host
when a window is opened or reconfigured. Drawers in one of the split
positions are attached to an edge of the screen:

.. code-block:: python

   {'split': 'left', 'width': 30}

Floating drawers are placed relative to the whole screen, by row and
column of their top-left corner:

.. code-block:: python

   {'relative': 'editor', 'row': 2, 'col': 10, 'width': 60, 'height': 20,
    'border': 'rounded'}

Keys of ``win_config`` that this module does not interpret (e.g.
``border`` or ``zindex``) are copied into the descriptor untouched.
"""

import math
import re

VERTICAL_ANCHORS = 'NCS'
HORIZONTAL_ANCHORS = 'WCE'

ANCHOR_SHORTHANDS = {
    'N': 'NC',
    'S': 'SC',
    'E': 'CE',
    'W': 'CW',
    'C': 'CC',
}

NO_BORDER = {'top': 0, 'bottom': 0, 'left': 0, 'right': 0}
SINGLE_BORDER = {'top': 1, 'bottom': 1, 'left': 1, 'right': 1}

NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


class GeometryException(ValueError):
    pass


def parse_percentage(percentage):
    """
    Convert a percentage to a fraction.

    Strings may end in ``%`` (``'50%'``) or be a plain number
    (``'50'``), both are divided by 100. Numbers not greater than 1
    are taken to be fractions already, greater numbers are divided by
    100. Thus ``'50%'``, ``'50'``, ``50`` and ``0.5`` all yield ``0.5``.

    :param percentage: The string or number to be converted
    """
    if isinstance(percentage, bool):
        raise GeometryException('Could not parse %r' % (percentage,))

    if isinstance(percentage, (int, float)) and math.isfinite(percentage):
        return percentage if percentage <= 1 else percentage / 100

    if isinstance(percentage, str):
        value = percentage.strip()
        if value.endswith('%'):
            value = value[:-1]
        if NUMBER_RE.match(value):
            return float(value) / 100

    raise GeometryException('Could not parse %r' % (percentage,))


def normalize_anchor(anchor):
    """
    Return the two letter form of ``anchor``.

    The first letter is the vertical component (N, C, S), the second one
    the horizontal component (W, C, E).
    """
    anchor = ANCHOR_SHORTHANDS.get(anchor, anchor)
    if not isinstance(anchor, str) or len(anchor) != 2 \
       or anchor[0] not in VERTICAL_ANCHORS or anchor[1] not in HORIZONTAL_ANCHORS:
        raise GeometryException('Unsupported anchor %r' % (anchor,))
    return anchor


def border_width(border):
    if border is None or border == 'none':
        return NO_BORDER
    return SINGLE_BORDER


def _resolve_extent(name, value, screen_extent):
    if value is None:
        raise GeometryException('Floating drawers require a %s.' % name)
    if isinstance(value, bool):
        raise GeometryException('Illegal %s %r' % (name, value))
    if isinstance(value, int):
        return value
    return int(math.floor(parse_percentage(value) * screen_extent))


def _split_placement(options, screen_width, screen_height, is_zoomed, size):
    position = options['position']
    if options.is_vertical_split:
        return {'split': position,
                'width': screen_width if is_zoomed else size}
    return {'split': position,
            'height': screen_height if is_zoomed else size}


def _float_placement(options, screen_width, screen_height, cmdline_height, is_zoomed):
    win_config = options.win_config()
    margin = win_config.pop('margin')
    anchor = normalize_anchor(win_config.pop('anchor'))
    border = border_width(win_config.get('border'))
    screen_height_without_cmdline = screen_height - cmdline_height

    width = _resolve_extent('width', win_config.get('width'), screen_width) \
            - margin * 2
    height = _resolve_extent('height', win_config.get('height'),
                             screen_height_without_cmdline) \
            - margin * 2

    if anchor[0] == 'N':
        row = margin
    elif anchor[0] == 'C':
        row = (screen_height - (height + border['top'] + border['bottom'])) // 2 \
              - cmdline_height
    else:
        row = screen_height_without_cmdline - height - margin \
              - border['top'] - border['bottom']

    if anchor[1] == 'W':
        col = margin
    elif anchor[1] == 'C':
        col = (screen_width - (width + border['left'] + border['right'])) // 2
    else:
        col = screen_width - width - margin - border['left'] - border['right']

    if is_zoomed:
        row = margin
        col = margin
        width = screen_width - margin * 2 - border['left'] - border['right']
        height = screen_height_without_cmdline - margin * 2 \
                 - border['top'] - border['bottom']

    win_config.update({
        'relative': 'editor',
        'row':      row,
        'col':      col,
        'width':    width,
        'height':   height,
    })
    return win_config


def compute_window_placement(options, screen_width, screen_height, cmdline_height,
                             is_zoomed=False, size=None):
    """
    Compute the placement descriptor of a drawer window.

    :param options: The ``DrawerOptions`` of the drawer
    :param screen_width: Number of columns of the screen
    :param screen_height: Number of lines of the screen, including the
                          command line
    :param cmdline_height: Number of lines occupied by the command line
    :param is_zoomed: Whether the drawer should fill the screen
    :param size: Extent along the split axis, defaults to the configured size
    """
    if options['position'] == 'float':
        return _float_placement(options, screen_width, screen_height,
                                cmdline_height, is_zoomed)
    return _split_placement(options, screen_width, screen_height, is_zoomed,
                            options['size'] if size is None else size)
