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
distance of a point from the line through two other points

Two metrics are provided. :class:`PlanarMetric` treats (value, timestamp)
as Cartesian coordinates and measures the distance to the segment.
:class:`GeographicMetric` treats (value, timestamp) as (latitude, longitude)
in degrees and uses an area over base approximation that is only valid for
short spans.

Each metric computes the distances of a whole window slice at once from
numpy arrays; the scalar :meth:`DistanceMetric.distance` goes through the
same code so both give identical results.
"""

__all__ = ['DistanceMetric','PlanarMetric','GeographicMetric','METRICS','getMetric']

import math
import numpy as np

DEG2RAD = math.pi / 180

class DistanceMetric(object):
    """base class of the distance metrics"""

    NAME = None

    def distances(self,values,timestamps,first,last):
        """distance of each point from the line through points first and last

        :param values: array of point values
        :param timestamps: array of point timestamps
        :param first: index of the start point
        :param last: index of the end point
        :return: array of distances for the points first to last inclusive"""
        raise NotImplementedError

    def distance(self,current,start,end):
        """distance of current from the line through start and end

        :type current: Point
        :type start: Point
        :type end: Point"""
        values = np.array([start.value,current.value,end.value])
        timestamps = np.array([start.timestamp,current.timestamp,end.timestamp])
        return float(self.distances(values,timestamps,0,2)[1])

    def __repr__(self):
        return '{0}()'.format(self.__class__.__name__)

class PlanarMetric(DistanceMetric):
    """Euclidean distance from a point to a segment"""

    NAME = 'planar'

    def distances(self,values,timestamps,first,last):
        inner = slice(first,last+1)
        px = values[inner]
        py = timestamps[inner]

        vx = values[first]
        vy = timestamps[first]
        wx = values[last]
        wy = timestamps[last]

        l2 = (vx-wx)**2 + (vy-wy)**2
        if l2 == 0:
            # degenerate segment
            return np.sqrt((px-vx)**2 + (py-vy)**2)

        ts = ((px-vx)*(wx-vx) + (py-vy)*(wy-vy)) / l2

        final_xs = vx + ts*(wx-vx)
        final_ys = vy + ts*(wy-vy)

        # clamp the projection to the segment end points
        small_ts = ts < 0
        large_ts = ts > 1
        final_xs[small_ts] = vx
        final_ys[small_ts] = vy
        final_xs[large_ts] = wx
        final_ys[large_ts] = wy

        return np.sqrt((px-final_xs)**2 + (py-final_ys)**2)

class GeographicMetric(DistanceMetric):
    """approximate distance of a GPS fix from the line between two fixes

    The area term feeds the mean latitude in degrees straight into cos and
    the result is scaled by 1e6. Both are kept as they are so that reduced
    tracks stay comparable with existing data."""

    NAME = 'geographic'

    @staticmethod
    def estimateLatLonDistance(startLat,startLon,endLat,endLon):
        """equirectangular estimate of the angular distance between two fixes

        :return: distance in radians"""
        startLatRad = startLat * DEG2RAD
        endLatRad = endLat * DEG2RAD
        startLonRad = startLon * DEG2RAD
        endLonRad = endLon * DEG2RAD

        x = (endLonRad - startLonRad) * math.cos((startLatRad + endLatRad) / 2)
        y = endLatRad - startLatRad
        return math.sqrt(x**2 + y**2)

    def distances(self,values,timestamps,first,last):
        inner = slice(first,last+1)
        lat = values[inner]
        lon = timestamps[inner]

        startLat = float(values[first])
        startLon = float(timestamps[first])
        endLat = float(values[last])
        endLon = float(timestamps[last])

        area = np.abs((startLon * (endLat - lat) +
                       lon * (startLat - endLat) +
                       endLon * (lat - startLat)) *
                      math.cos((startLat + endLat) / 2) *
                      DEG2RAD)

        base = self.estimateLatLonDistance(startLat,startLon,endLat,endLon)
        if not base > 0:
            return np.zeros(area.size)
        return (area / base) * 1e6

METRICS = {
    PlanarMetric.NAME : PlanarMetric,
    GeographicMetric.NAME : GeographicMetric,
}

def getMetric(metric):
    """get a distance metric

    :param metric: name of the metric or a DistanceMetric instance
    :return: DistanceMetric instance"""
    if isinstance(metric,DistanceMetric):
        return metric
    name = str(metric).lower()
    if name not in METRICS:
        raise KeyError('unknown distance metric {0}'.format(metric))
    return METRICS[name]()
