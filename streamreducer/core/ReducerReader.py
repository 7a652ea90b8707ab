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
read samples from and write retained points to CSV files
"""

__all__ = ['readData','readGpsData','writePoints','parseGpsTime','GPS_TIME_FORMAT']

import csv
import os.path
import logging
from datetime import datetime

from .ReducerPoint import Point, LocationPoint

GPS_TIME_FORMAT = '%Y-%m-%d %H:%M:%S.%f%z'

log = logging.getLogger('streamreducer.reader')

def _rows(fname):
    """iterate over the rows of a CSV file skipping the header line"""
    if not os.path.isfile(fname):
        msg = 'no such input file {0}'.format(fname)
        log.error(msg)
        raise RuntimeError(msg)
    with open(fname,'r',newline='') as inf:
        reader = csv.reader(inf)
        next(reader,None)
        for row in reader:
            if len(row) == 0:
                continue
            yield reader.line_num,row

def readData(fname):
    """read scalar samples

    each row holds value,timestamp. Rows that cannot be parsed are skipped.

    :param fname: name of the CSV file
    :return: list of Point instances"""
    points = []
    for lineno,row in _rows(fname):
        try:
            points.append(Point(float(row[0]),float(row[1])))
        except (ValueError,IndexError) as e:
            log.warning('{0}:{1}: skipping row {2}: {3}'.format(fname,lineno,row,e))
    log.debug('read {0} points from {1}'.format(len(points),fname))
    return points

def parseGpsTime(timeString):
    """convert a GPS time stamp to milliseconds since the epoch"""
    t = timeString.strip()
    if t.endswith('Z'):
        t = t[:-1]+'+0000'
    elif t[-3] in '+-' and t[-2:].isdigit():
        # hour only zone offset
        t = t+'00'
    return datetime.strptime(t,GPS_TIME_FORMAT).timestamp()*1000.

def readGpsData(fname):
    """read GPS fixes

    each row holds time,latitude,longitude. Rows that cannot be parsed are
    skipped.

    :param fname: name of the CSV file
    :return: list of LocationPoint instances"""
    points = []
    for lineno,row in _rows(fname):
        try:
            time = parseGpsTime(row[0])
            points.append(LocationPoint(float(row[1]),float(row[2]),time))
        except (ValueError,IndexError) as e:
            log.warning('{0}:{1}: skipping row {2}: {3}'.format(fname,lineno,row,e))
    log.debug('read {0} GPS fixes from {1}'.format(len(points),fname))
    return points

def writePoints(points,out):
    """write points as CSV

    :param points: sequence of Point or LocationPoint instances
    :param out: file like object"""
    writer = csv.writer(out)
    header = False
    for p in points:
        if not header:
            if isinstance(p,LocationPoint):
                writer.writerow(['time','lat','lon'])
            else:
                writer.writerow(['value','timestamp'])
            header = True
        writer.writerow(['{0!r}'.format(v) for v in p.asTuple()])
