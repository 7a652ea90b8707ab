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

"""
streaming reduction of a sequence of samples

Samples are collected in a window of fixed capacity. Each time the window
fills up a Douglas-Peucker pass selects the points that need to be kept. The
kept points are handed to the :attr:`StreamingReducer.retained` callback and
the window is refilled with the points following the last kept one.

Example::

  reducer = StreamingReducer(capacity=10,allowedError=2.)
  reducer.retained = store
  for value,timestamp in samples:
      reducer.addPoint(value,timestamp)
  # send the last points to the callback
  reducer.reduce()

The reducer keeps every retained point in :attr:`retainedPoints` for as long
as it exists. Long running streams should consume the points through the
callback instead.

.. note:: the reducer does no locking, see :class:`ReducerWorkerThread` to
          feed it from several threads
"""

__all__ = ['StreamingReducer','reduceSeries','dropSpread']

import logging
import math

from .ReducerPoint import Point
from .ReducerMetric import getMetric
from .ReducerWindow import ReducerWindow
from .ReducerSimplify import DouglasPeuckerSimplifier, maxDistance

def dropSpread(span,modulus):
    """offset of the point dropped when a window made no progress

    :param span: time span covered by the window
    :param modulus: capacity of the window minus 3
    :return: offset relative to the window start"""
    if modulus == 0 or not math.isfinite(span):
        return 1
    return int(math.fmod(span,modulus)) + 1

class StreamingReducer(object):
    """reduce a stream of points with a windowed Douglas-Peucker algorithm"""

    def __init__(self,capacity=10,allowedError=2.0,metric='planar',retained=None):
        """
        :param capacity: number of points in a reduction window
        :type capacity: int
        :param allowedError: largest distance a dropped point may have from
                             the reduced line. A smaller value retains more
                             points
        :param metric: the distance metric, either 'planar' or 'geographic'
                       or a DistanceMetric instance
        :param retained: callback called with each retained point"""

        self._log = logging.getLogger('streamreducer.engine')

        if int(capacity) < 1:
            raise ValueError('window capacity must be positive, got {0}'.format(capacity))
        if allowedError < 0:
            raise ValueError('allowed error must not be negative, got {0}'.format(allowedError))

        self._allowedError = float(allowedError)
        self._metric = getMetric(metric)
        self._window = ReducerWindow(capacity)
        self._retainedPoints = []
        self._retained = None
        self.retained = retained

        if self.capacity < 3:
            self.log.warning('window capacity {0} is too small, points will not be reduced'.format(self.capacity))

        self.log.debug('initialised with capacity {0}, allowed error {1}, metric {2}'.format(
            self.capacity,self.allowedError,self.metric.NAME))

    @property
    def log(self):
        """get the logger"""
        return self._log

    @property
    def capacity(self):
        """capacity of the reduction window"""
        return self._window.capacity

    @property
    def allowedError(self):
        return self._allowedError

    @property
    def metric(self):
        """the distance metric"""
        return self._metric

    @property
    def window(self):
        """the current reduction window"""
        return self._window

    @property
    def retainedPoints(self):
        """all points retained so far in the order they were emitted"""
        return tuple(self._retainedPoints)

    @property
    def retained(self):
        """callback called with every retained point"""
        return self._retained
    @retained.setter
    def retained(self,callback):
        if callback is not None and not callable(callback):
            raise TypeError('retained callback must be callable')
        self._retained = callback

    def distance(self,current,start,end):
        """distance of current from the line through start and end using
        the configured metric"""
        return self.metric.distance(current,start,end)

    def addPoint(self,value,timestamp):
        """add a sample

        :param value: the sample value or latitude
        :param timestamp: the sample time or longitude"""
        self.add(Point(value,timestamp))

    def add(self,point):
        """add a point, either a Point or a LocationPoint

        the first point of a window is retained straight away. A full window
        is reduced before returning."""
        if self._window.isEmpty():
            self._addRetainedPoint(point)
        self._window.append(point)

        if self._window.isFull():
            self.reduce()

    def _addRetainedPoint(self,point):
        self._retainedPoints.append(point)
        if self._retained is not None:
            self._retained(point)

    def _highestErrorIndex(self,values,timestamps,first,last):
        """index of the point between first and last furthest from the line
        joining them, last if there is none"""
        if last - first <= 1:
            return last
        dists = self.metric.distances(values,timestamps,first,last)[1:-1]
        idx,dmax = maxDistance(dists)
        if dmax > 0:
            return first + 1 + idx
        return last

    def reduce(self):
        """reduce the current window

        retained points are passed to the callback and the window is
        refilled with the points that are not resolved yet. Called
        automatically when the window is full; call it once more at the end
        of the stream. Does nothing if the window holds fewer than 3 points."""

        count = self._window.count
        if count <= 2:
            self.log.info('minimum 3 points required for reduction, have {0}'.format(count))
            return

        snapshot = self._window.snapshot()
        values,timestamps = self._window.arrays()

        markers = DouglasPeuckerSimplifier(values,timestamps,self.allowedError,
                                           metric=self.metric).simplifyDouglasPeucker()

        lastSavedIndex = 0
        for i in range(1,count):
            if markers[i]:
                self._addRetainedPoint(snapshot[i])
                lastSavedIndex = i

        self._window.clear()

        last = len(snapshot) - 1
        higherErrorIndex = self._highestErrorIndex(values,timestamps,lastSavedIndex,last)

        dropIndex = None
        if lastSavedIndex == 0:
            # no progress, drop a point so that the window moves on
            span = snapshot[last].timestamp - snapshot[lastSavedIndex].timestamp
            dropIndex = lastSavedIndex + dropSpread(span,self.capacity - 3)
            if dropIndex == higherErrorIndex or dropIndex == lastSavedIndex:
                dropIndex += 1

        self.log.debug('reduced {0} points, last retained index {1}, drop index {2}'.format(
            count,lastSavedIndex,dropIndex))

        for i in range(lastSavedIndex,len(snapshot)):
            if i == dropIndex:
                continue
            self._window.append(snapshot[i])

def reduceSeries(samples,capacity=10,allowedError=2.0,metric='planar'):
    """reduce a complete series

    :param samples: iterable of Point instances or (value,timestamp) pairs
    :return: list of retained points"""
    reducer = StreamingReducer(capacity=capacity,allowedError=allowedError,metric=metric)
    for s in samples:
        if isinstance(s,Point):
            reducer.add(s)
        else:
            reducer.addPoint(*s)
    reducer.reduce()
    return list(reducer.retainedPoints)
