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

class BisectError(Exception):
    """Base class for all the errors raised by pybisect"""
    pass

class OutOfBoundsError(BisectError, IndexError):
    """The search window does not fit inside the sequence

    This is a precondition violation by the caller. It is raised before
    the sequence is searched or modified.
    """
    def __init__(self, lo, hi, length):
        self.lo = lo
        self.hi = hi
        self.length = length
        super(OutOfBoundsError, self).__init__("window [%s, %s) is out of bounds for a sequence of length %d"
                                               % (lo, hi, length))

class RangeError(BisectError, ValueError):
    """A sub-range descriptor that cannot be converted to bounds"""
    pass

class ConfigError(BisectError, ValueError):
    """Invalid bisect-cli configuration"""
    pass
