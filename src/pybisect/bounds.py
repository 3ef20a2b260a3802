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
import logging
log = logging.getLogger("pybisect")

from collections import namedtuple

from pybisect.errors import OutOfBoundsError, RangeError

class _Bound(object):
    # Included(3) and Excluded(3) are different bounds, not equal tuples
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    __hash__ = tuple.__hash__

# A bound on one end of a search window
class Included(_Bound, namedtuple("Included", ["index"])):
    __slots__ = ()

class Excluded(_Bound, namedtuple("Excluded", ["index"])):
    __slots__ = ()

class _Unbounded(object):
    def __repr__(self):
        return "UNBOUNDED"

UNBOUNDED = _Unbounded()

# Sub-range descriptor, start and end are each UNBOUNDED, Included or Excluded
Within = namedtuple("Within", ["start", "end"])

FULL = Within(UNBOUNDED, UNBOUNDED)


def within(lo=None, hi=None):
    """Return the half-open window [lo, hi)

    :param lo: First index, or None to start at the beginning
    :type lo: int or None
    :param hi: Index one past the end, or None to run to the end
    :type hi: int or None
    :rtype: Within
    """
    return Within(UNBOUNDED if lo is None else Included(lo),
                  UNBOUNDED if hi is None else Excluded(hi))

def closed(lo, hi):
    """Return the window [lo, hi], including hi"""
    return Within(Included(lo), Included(hi))

def _check_index(value):
    # bool is an int, but never a sensible index
    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeError("bound must be an integer, not %r" % (value,))
    return value

def _check_bound(bound):
    if bound is UNBOUNDED:
        return bound
    if isinstance(bound, (Included, Excluded)):
        _check_index(bound.index)
        return bound
    raise RangeError("unknown bound %r" % (bound,))

def as_within(obj):
    """Convert a python range-like object into a Within

    :param obj: None, Within, range, slice or a (lo, hi) tuple
    :type obj: object
    :returns: The sub-range descriptor
    :rtype: Within
    :raises: RangeError if obj cannot be used as a window

    None means the whole sequence. range objects and slices must have a
    step of 1, a None start or stop in a slice or tuple is unbounded.
    """
    if obj is None:
        return FULL
    if isinstance(obj, Within):
        return Within(_check_bound(obj.start), _check_bound(obj.end))
    if isinstance(obj, range):
        if obj.step != 1:
            raise RangeError("range step must be 1, not %d" % obj.step)
        return within(obj.start, obj.stop)
    if isinstance(obj, slice):
        if obj.step not in (None, 1):
            raise RangeError("slice step must be 1, not %r" % (obj.step,))
        lo, hi = obj.start, obj.stop
    elif isinstance(obj, tuple) and len(obj) == 2:
        lo, hi = obj
    else:
        raise RangeError("cannot use %r as a search window" % (obj,))

    if lo is not None:
        _check_index(lo)
    if hi is not None:
        _check_index(hi)
    return within(lo, hi)

def resolve_bounds(length, window=None):
    """Resolve a sub-range descriptor into (lo, hi) for a sequence

    :param length: Length of the sequence
    :type length: int
    :param window: The window to search, see as_within
    :type window: object
    :returns: (lo, hi) half-open indexes
    :rtype: tuple of int
    :raises: OutOfBoundsError if the window does not fit the sequence

    lo > hi is not an error, the search of such a window ends
    immediately and returns lo.
    """
    w = as_within(window)

    if w.start is UNBOUNDED:
        lo = 0
    elif isinstance(w.start, Included):
        lo = w.start.index
    else:
        lo = w.start.index + 1

    if w.end is UNBOUNDED:
        hi = length
    elif isinstance(w.end, Included):
        hi = w.end.index + 1
    else:
        hi = w.end.index

    if lo < 0 or hi < 0 or lo > length or hi > length:
        log.debug("Search window [%d, %d) is outside a sequence of length %d", lo, hi, length)
        raise OutOfBoundsError(lo, hi, length)

    return (lo, hi)
