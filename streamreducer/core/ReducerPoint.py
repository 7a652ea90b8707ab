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
points handled by the stream reducer

A :class:`Point` is an immutable (value, timestamp) pair. Geographic data is
stored in the same two slots: the latitude goes into *value* and the
longitude into *timestamp*. Only these two slots take part in distance
calculations.
"""

__all__ = ['Point','LocationPoint']

class Point(object):
    """a single sample"""

    __slots__ = ('_value','_timestamp')

    def __init__(self,value,timestamp):
        """
        :param value: the sample value, or latitude in degrees
        :param timestamp: the sample time, or longitude in degrees"""
        self._value = float(value)
        self._timestamp = float(timestamp)

    @property
    def value(self):
        """the sample value"""
        return self._value

    @property
    def timestamp(self):
        """the sample timestamp"""
        return self._timestamp

    def asTuple(self):
        return (self._value,self._timestamp)

    def __repr__(self):
        return '{0}:{1}'.format(self._value,self._timestamp)

class LocationPoint(Point):
    """a GPS fix

    the wall clock time of the fix is carried along for the caller but never
    used by the reducer"""

    __slots__ = ('_time',)

    def __init__(self,lat,lon,time):
        """
        :param lat: latitude in degrees
        :param lon: longitude in degrees
        :param time: time of the fix, eg milliseconds since the epoch"""
        Point.__init__(self,lat,lon)
        self._time = float(time)

    @property
    def lat(self):
        return self._value

    @property
    def lon(self):
        return self._timestamp

    @property
    def time(self):
        return self._time

    def asTuple(self):
        return (self._time,self._value,self._timestamp)

    def __repr__(self):
        return '{0}:{1}@{2}'.format(self._value,self._timestamp,self._time)
