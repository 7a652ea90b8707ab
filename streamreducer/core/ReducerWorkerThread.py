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

__all__ = ['ReducerWorkerThread']

import threading
from queue import Queue
import logging

from .ReducerPoint import Point
from .ReducerEngine import StreamingReducer

class ReducerWorkerThread(threading.Thread):
    """feed a reducer from a queue

    Samples put on the task queue by any number of producers are added to the
    reducer in the order they are taken off the queue. Retained points are put
    on the results queue. Putting None on the task queue reduces the last
    window and stops the thread."""

    LOGNAME = 'reducer'

    def __init__(self,name,reducer,tasks,results,daemon=True):
        """
        :param name: name of the worker
        :param reducer: the reducer to feed
        :type reducer: StreamingReducer
        :param tasks: queue of Point instances or (value,timestamp) pairs
        :param results: queue receiving the retained points"""
        assert isinstance(reducer,StreamingReducer)
        assert isinstance(tasks,Queue)
        assert isinstance(results,Queue)

        threading.Thread.__init__(self)
        self.name = name
        self.daemon = daemon

        self._log = logging.getLogger('streamreducer.worker.{0}.{1}'.format(self.LOGNAME,name))
        self.log.info('initialising worker')

        self._reducer = reducer
        self._tQ = tasks
        self._rQ = results
        self._reducer.retained = self._rQ.put

    @property
    def log(self):
        return self._log

    @property
    def reducer(self):
        return self._reducer

    @property
    def tasks(self):
        return self._tQ
    @property
    def results(self):
        return self._rQ

    def run(self):
        while True:
            task = self.tasks.get()
            try:
                if task is None:
                    self.log.info('flushing reducer and stopping')
                    self.reducer.reduce()
                    return
                if isinstance(task,Point):
                    self.reducer.add(task)
                else:
                    self.reducer.addPoint(*task)
            except (TypeError,ValueError) as e:
                self.log.error('cannot add {0}: {1}'.format(task,e))
            finally:
                self.tasks.task_done()
