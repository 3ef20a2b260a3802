#
# __init__.py
#
# Copyright (C) 2026  Red Hat, Inc.
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

# set up logging
import logging
logger = logging.getLogger("pybisect")
logger.addHandler(logging.NullHandler())

import os

from pybisect.errors import BisectError, OutOfBoundsError, RangeError, ConfigError
from pybisect.ordering import Ordering, compare, reverse_order
from pybisect.bounds import UNBOUNDED, Included, Excluded, Within
from pybisect.bounds import within, closed, as_within, resolve_bounds
from pybisect.search import bisect, bisect_right, bisect_right_in, bisect_right_by, bisect_right_in_by
from pybisect.search import bisect_left, bisect_left_in, bisect_left_by, bisect_left_in_by
from pybisect.insort import insort, insort_right, insort_right_in, insort_right_by, insort_right_in_by
from pybisect.insort import insort_left, insort_left_in, insort_left_by, insort_left_in_by

vernum = "1.0.0"


def setup_logging(logfile, theLogger):
    """
    Setup the various logs

    :param logfile: filename to write the log to, or None for console only
    :type logfile: string
    :param theLogger: top-level logger
    :type theLogger: logging.Logger
    """
    # Setup logging to console and to logfile
    logger.setLevel(logging.DEBUG)
    theLogger.setLevel(logging.DEBUG)

    sh = logging.StreamHandler()
    sh.setLevel(logging.INFO)
    fmt = logging.Formatter("%(asctime)s: %(message)s")
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    theLogger.addHandler(sh)

    if not logfile:
        return

    if not os.path.isdir(os.path.abspath(os.path.dirname(logfile))):
        os.makedirs(os.path.abspath(os.path.dirname(logfile)))

    fh = logging.FileHandler(filename=logfile, mode="w")
    fh.setLevel(logging.DEBUG)
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    fh.setFormatter(fmt)
    logger.addHandler(fh)
    theLogger.addHandler(fh)
