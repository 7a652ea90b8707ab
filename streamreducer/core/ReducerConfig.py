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

__all__ = ['ReducerConfig']

import os.path
import logging
from configobj import ConfigObj
from validate import Validator

from .ReducerEngine import StreamingReducer

# the defaults
defaultCfgStr = """
# The reducer collects samples in a window. When the window is full the
# points that are needed to describe the shape of the data within the allowed
# error are kept and the remaining points are discarded.
[reducer]
  # number of points in a reduction window, at least 3 for the window to be
  # reduced at all
  capacity = integer(min=1,default=10)
  # largest distance a discarded point may have from the reduced line
  allowed_error = float(min=0,default=2.0)
  # planar for scalar time series, geographic for latitude/longitude tracks
  metric = option('planar','geographic',default='planar')
"""

# populate the default config object which is used as a validator
reducerDefaults = ConfigObj(defaultCfgStr.split('\n'), list_values=False, _inspec=True)
validator = Validator()

class ReducerConfig(object):
    """object managing the reducer configuration"""

    def __init__(self):
        self._log = logging.getLogger('streamreducer.config')
        self._cfg = ConfigObj(configspec=reducerDefaults)
        self._cfg.validate(validator)

    def readCfg(self,fname):
        """read and parse configuration file"""

        if not os.path.isfile(fname):
            msg = 'no such configuration file {0}'.format(fname)
            self.log.error(msg)
            raise RuntimeError(msg)

        self._cfg.filename = fname
        self._cfg.reload()
        if self._cfg.validate(validator) is not True:
            msg = 'Could not read config file {0}'.format(fname)
            self.log.error(msg)
            raise RuntimeError(msg)

    @property
    def log(self):
        return self._log

    @property
    def cfg(self):
        return self._cfg

    def makeReducer(self,retained=None):
        """create a reducer from the configuration

        :param retained: callback called with each retained point
        :return: StreamingReducer"""
        rcfg = self.cfg['reducer']
        return StreamingReducer(capacity=rcfg['capacity'],
                                allowedError=rcfg['allowed_error'],
                                metric=rcfg['metric'],
                                retained=retained)
