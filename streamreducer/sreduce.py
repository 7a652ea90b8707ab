# -*- coding: utf-8 -*-
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

import streamreducer
from streamreducer import core as reducer
import sys
import logging

def stream_reducer(runCfg):

    log = logging.getLogger("streamreducer.main")

    log.info("streamreducer version %s"%streamreducer.__version__)

    # read the reducer configuration file
    reducerCfg = reducer.ReducerConfig()
    if runCfg.cfg['config'] is not None:
        reducerCfg.readCfg(runCfg.cfg['config'])
    runCfg.applyOverrides(reducerCfg)

    inname = runCfg.cfg['input']['filename']
    if inname is None:
        log.error('no input file given')
        return 1

    if runCfg.cfg['input']['format'] == 'gps':
        pointsBefore = reducer.readGpsData(inname)
    else:
        pointsBefore = reducer.readData(inname)

    dataReducer = reducerCfg.makeReducer()
    for p in pointsBefore:
        dataReducer.add(p)
    # final reduce for remaining points
    dataReducer.reduce()
    pointsAfter = dataReducer.retainedPoints

    log.info('reduced {0} points to {1} using {2} metric, capacity {3}, allowed error {4}'.format(
        len(pointsBefore),len(pointsAfter),dataReducer.metric.NAME,
        dataReducer.capacity,dataReducer.allowedError))

    outname = runCfg.cfg['output']['filename']
    if outname is None:
        reducer.writePoints(pointsAfter,sys.stdout)
    else:
        with open(outname,'w',newline='') as out:
            reducer.writePoints(pointsAfter,out)
    return 0

def main(args=None):
    runCfg = reducer.ReducerRunConfig(args)

    # start logging
    reducer.reducerLogging(logfile=runCfg.cfg['logging']['logfile'],
                           debug=runCfg.cfg['logging']['debug'])
    log = logging.getLogger("streamreducer.main")

    try:
        status = stream_reducer(runCfg)
    except RuntimeError as e:
        log.error(str(e))
        status = 1
    return status

if __name__ == '__main__':
    sys.exit(main())
