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
command line and run configuration of the streamreducer program
"""

__all__ = ['ReducerRunConfig']

from configobj import ConfigObj
from validate import Validator
from argparse import ArgumentParser

# the defaults
defaultCfgStr = """
# Stream Reducer Run Configuration
#
# This configuration file controls a run of the streamreducer program.
#

# the reducer configuration file, use the built-in defaults if not set
config = string(default=None)

[logging]
# enable debugging to get extra verbose log
debug = boolean(default=False)
# log to logfile if set otherwise log to stderr
logfile = string(default=None)

[input]
# the CSV file to be reduced
filename = string(default=None)
# scalar: rows of value,timestamp
# gps: rows of time,latitude,longitude
format = option('scalar','gps',default='scalar')

[output]
# write the retained points to filename if set otherwise to stdout
filename = string(default=None)

[reducer]
# override the values from the reducer configuration file
capacity = integer(min=1,default=None)
allowed_error = float(min=0,default=None)
metric = option('planar','geographic',default=None)
"""

# populate the default run config object which is used as a validator
reducerRunDefaults = ConfigObj(defaultCfgStr.split('\n'), list_values=False, _inspec=True)
validator = Validator()

class ReducerRunConfig(object):
    """object managing the run configuration"""

    def __init__(self,args=None):
        """
        :param args: list of command line arguments, use sys.argv if None"""
        self._cfg = ConfigObj(configspec=reducerRunDefaults)
        self._cfg.validate(validator)

        parser = ArgumentParser(description="reduce a time series or GPS track")
        parser.add_argument('input',nargs='?',metavar='INPUT',help="the CSV file to reduce")
        parser.add_argument('-r','--run-configuration',metavar='CFG',help="read run configuration from CFG")
        parser.add_argument('-c','--config',metavar='CFG',help="read reducer configuration from CFG")
        parser.add_argument('-d', '--debug', action='store_true',default=None,help="enable debugging output")
        parser.add_argument('-l', '--log-file',metavar="FILE",help="send log to FILE, default stderr")
        parser.add_argument('-o','--output',metavar='FILE',help="write retained points to FILE, default stdout")
        parser.add_argument('-g','--gps',default=None,action='store_true',help="input contains GPS fixes")

        reducergroup = parser.add_argument_group('reducer')
        reducergroup.add_argument('-n','--capacity',type=int,help="number of points in a reduction window")
        reducergroup.add_argument('-e','--allowed-error',type=float,help="largest distance of a discarded point from the reduced line")
        reducergroup.add_argument('-m','--metric',choices=['planar','geographic'],help="the distance metric")

        args = parser.parse_args(args)

        if args.run_configuration is not None:
            self._cfg.filename = args.run_configuration
            self._cfg.reload()
            self._cfg.validate(validator)
        if args.config is not None:
            self._cfg['config'] = args.config
        if args.debug is not None:
            self._cfg['logging']['debug'] = args.debug
        if args.log_file is not None:
            self._cfg['logging']['logfile'] = args.log_file

        if args.input is not None:
            self._cfg['input']['filename'] = args.input
        if args.gps is not None:
            self._cfg['input']['format'] = 'gps'
            self._cfg['reducer']['metric'] = 'geographic'
        if args.output is not None:
            self._cfg['output']['filename'] = args.output

        if args.capacity is not None:
            self._cfg['reducer']['capacity'] = args.capacity
        if args.allowed_error is not None:
            self._cfg['reducer']['allowed_error'] = args.allowed_error
        if args.metric is not None:
            self._cfg['reducer']['metric'] = args.metric

    @property
    def cfg(self):
        return self._cfg

    def applyOverrides(self,reducerCfg):
        """copy reducer settings given on the command line or in the run
        configuration into the reducer configuration

        :param reducerCfg: the reducer configuration
        :type reducerCfg: ReducerConfig"""
        for key in ['capacity','allowed_error','metric']:
            if self._cfg['reducer'][key] is not None:
                reducerCfg.cfg['reducer'][key] = self._cfg['reducer'][key]
