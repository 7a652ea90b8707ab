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

from .reducerLogging import *
from .ReducerPoint import *
from .ReducerMetric import *
from .ReducerWindow import *
from .ReducerSimplify import *
from .ReducerEngine import *
from .ReducerConfig import *
from .ReducerRunConfig import *
from .ReducerReader import *
from .ReducerWorkerThread import *
