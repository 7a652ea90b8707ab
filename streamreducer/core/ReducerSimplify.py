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
Douglas-Peucker simplification of a reduction window

The simplifier does not modify the points. It returns a boolean marker array
with one entry per window position which is only valid for the pass that
produced it.
"""

__all__ = ['DouglasPeuckerSimplifier','simplify','maxDistance']

import numpy as np
from .ReducerMetric import getMetric

def maxDistance(dists):
    """find the first point with the largest distance

    NaN distances never win. If no distance is larger than zero the first
    index is returned.

    :param dists: array of distances
    :return: (index,distance)"""
    dists = np.where(np.isnan(dists),0.,dists)
    idx = int(np.argmax(dists))
    return idx,float(dists[idx])

class DouglasPeuckerSimplifier(object):

    def __init__(self,values,timestamps,tolerance,metric='planar'):
        """
        :param values: array of point values
        :param timestamps: array of point timestamps
        :param tolerance: largest distance a dropped point may have from the
                          simplified line
        :param metric: name of the distance metric or DistanceMetric instance"""
        self.values = np.asarray(values,dtype=float)
        self.timestamps = np.asarray(timestamps,dtype=float)
        self.tolerance = tolerance
        self.metric = getMetric(metric)

        self.length = self.values.size
        self.markers = np.zeros(self.length,dtype='bool')

    def simplifyDouglasPeucker(self,first=0,last=None):
        """mark the points between first and last that need to be retained

        the end points themselves are not marked

        :return: the marker array"""

        if last is None:
            last = self.length - 1

        # the segment on top of the stack is processed next, so the upper
        # half of a split is handled before the lower half
        stack = [(first,last)]
        while stack:
            first,last = stack.pop()
            if last - first <= 1:
                continue

            dists = self.metric.distances(self.values,self.timestamps,first,last)
            # the end points lie on the line, rounding must not select them
            dists[0] = 0.
            dists[-1] = 0.
            max_idx,max_dist = maxDistance(dists)
            max_idx += first

            if max_dist > self.tolerance:
                self.markers[max_idx] = True
                stack.append((first,max_idx))
                stack.append((max_idx,last))
            else:
                self.markers[first+1:last] = False

        return self.markers

def simplify(values,timestamps,tolerance,metric='planar'):
    """run a Douglas-Peucker pass over all points

    :return: boolean array marking the retained interior points"""
    return DouglasPeuckerSimplifier(values,timestamps,tolerance,metric=metric).simplifyDouglasPeucker()
