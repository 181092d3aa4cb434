# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

MAX_MESSAGES = 1000


class Logger(object):
    """
    Keeps the most recent messages of a drawer manager in memory.

    Once more than ``max_messages`` have been logged, the oldest
    message is dropped for each new one.
    """

    def __init__(self, max_messages=MAX_MESSAGES):
        self.max_messages = max_messages
        self.messages = []

    def log(self, msg):
        if (len(self.messages) >= self.max_messages):
            self.messages.pop(0)
        self.messages.append(msg)

    def clear(self):
        self.messages = []
