# Copyright 2024 The StreamReducer Team
#
# This file is part of streamreducer.
#
# streamreducer is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# streamreducer is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with streamreducer.  If not, see <http://www.gnu.org/licenses/>.

__all__ = ['ReducerWindow']

import logging
import numpy as np

class ReducerWindow(object):
    """bounded buffer holding the points of the current reduction window"""

    def __init__(self,capacity):
        """
        :param capacity: maximum number of points held by the window
        :type capacity: int"""
        self._log = logging.getLogger('streamreducer.window')
        self._capacity = int(capacity)
        self._points = []

    @property
    def log(self):
        """get the logger"""
        return self._log

    @property
    def capacity(self):
        return self._capacity

    @property
    def count(self):
        """number of points in the window"""
        return len(self._points)

    def __len__(self):
        return len(self._points)

    def __getitem__(self,idx):
        return self._points[idx]

    def isEmpty(self):
        return len(self._points) == 0

    def isFull(self):
        return len(self._points) >= self._capacity

    def append(self,point):
        """append point to the window

        a full window drops the point and logs a warning

        :return: True if the point was added"""
        if self.isFull():
            self.log.warning('window full, dropping point {0}'.format(point))
            return False
        self._points.append(point)
        return True

    def clear(self):
        """empty the window"""
        self._points = []

    def snapshot(self):
        """:return: tuple of the points currently in the window"""
        return tuple(self._points)

    def arrays(self):
        """:return: (values,timestamps) of the points as numpy arrays"""
        values = np.array([p.value for p in self._points],dtype=float)
        timestamps = np.array([p.timestamp for p in self._points],dtype=float)
        return values,timestamps

    def __repr__(self):
        return 'ReducerWindow [{0}]'.format(', '.join([repr(p) for p in self._points]))
