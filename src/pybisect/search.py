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
""" Bisection of sorted sequences

All the entry points share one loop, _bisect, and differ only in the
test that decides which half of the window the target belongs in.
The value forms compare with ``<`` only, to match ``list.sort()``.
"""
from pybisect.bounds import resolve_bounds


def _bisect(a, lo, hi, goes_right):
    """Binary search of a[lo:hi]

    :param a: sorted sequence
    :type a: sequence
    :param lo: first index of the window
    :type lo: int
    :param hi: index one past the end of the window
    :type hi: int
    :param goes_right: Return True if the target belongs after the element
    :type goes_right: function
    :returns: The first index in the window where goes_right is False
    :rtype: int
    """
    while lo < hi:
        mid = (lo+hi)//2
        if goes_right(a[mid]): lo = mid+1
        else: hi = mid
    return lo

def _value_right(x, key):
    if key is None:
        return lambda e: not x < e
    return lambda e: not x < key(e)

def _value_left(x, key):
    if key is None:
        return lambda e: e < x
    return lambda e: key(e) < x

def _by_right(f):
    return lambda e: f(e) <= 0

def _by_left(f):
    return lambda e: f(e) < 0


def bisect_right_in(a, x, within, key=None):
    """Return the index where to insert x in a[within], assuming a is sorted.

    :param a: sorted sequence
    :type a: sequence
    :param x: item to search for
    :type x: object
    :param within: window of a to search, see pybisect.bounds.as_within
    :type within: object
    :param key: Function applied to the elements before comparing them with x
    :type key: function
    :returns: index where x should be inserted
    :rtype: int
    :raises: OutOfBoundsError if within does not fit inside a

    The return value i is such that all e in the window before i have e <= x,
    and all e from i have e > x. So if x already appears in the list,
    a.insert(i, x) will insert just after the rightmost x already there.
    """
    lo, hi = resolve_bounds(len(a), within)
    return _bisect(a, lo, hi, _value_right(x, key))

def bisect_right(a, x, key=None):
    """Return the index where to insert x in a, assuming a is sorted.

    See bisect_right_in, this searches all of a.
    """
    return bisect_right_in(a, x, None, key)

def bisect_right_in_by(a, within, f):
    """Return the index where to insert into a[within] according to a comparator

    :param a: sorted sequence
    :type a: sequence
    :param within: window of a to search, see pybisect.bounds.as_within
    :type within: object
    :param f: Return < 0, 0 or > 0 when an element is less than, equal to or greater than the target
    :type f: function
    :returns: insertion index
    :rtype: int
    :raises: OutOfBoundsError if within does not fit inside a

    f must be consistent with the order of a. The return value i is such
    that f(e) is LESS or EQUAL for the elements before i, and GREATER for
    the elements from i on.
    """
    lo, hi = resolve_bounds(len(a), within)
    return _bisect(a, lo, hi, _by_right(f))

def bisect_right_by(a, f):
    """Return the index where to insert into a according to a comparator

    See bisect_right_in_by, this searches all of a.
    """
    return bisect_right_in_by(a, None, f)


def bisect_left_in(a, x, within, key=None):
    """Return the index where to insert x in a[within], assuming a is sorted.

    :param a: sorted sequence
    :type a: sequence
    :param x: item to search for
    :type x: object
    :param within: window of a to search, see pybisect.bounds.as_within
    :type within: object
    :param key: Function applied to the elements before comparing them with x
    :type key: function
    :returns: index where x should be inserted
    :rtype: int
    :raises: OutOfBoundsError if within does not fit inside a

    The return value i is such that all e in the window before i have e < x,
    and all e from i have e >= x. So if x already appears in the list,
    a.insert(i, x) will insert just before the leftmost x already there.
    """
    lo, hi = resolve_bounds(len(a), within)
    return _bisect(a, lo, hi, _value_left(x, key))

def bisect_left(a, x, key=None):
    """Return the index where to insert x in a, assuming a is sorted.

    See bisect_left_in, this searches all of a.
    """
    return bisect_left_in(a, x, None, key)

def bisect_left_in_by(a, within, f):
    """Return the index where to insert into a[within] according to a comparator

    :param a: sorted sequence
    :type a: sequence
    :param within: window of a to search, see pybisect.bounds.as_within
    :type within: object
    :param f: Return < 0, 0 or > 0 when an element is less than, equal to or greater than the target
    :type f: function
    :returns: insertion index
    :rtype: int
    :raises: OutOfBoundsError if within does not fit inside a

    f must be consistent with the order of a. The return value i is such
    that f(e) is LESS for the elements before i, and EQUAL or GREATER for
    the elements from i on.
    """
    lo, hi = resolve_bounds(len(a), within)
    return _bisect(a, lo, hi, _by_left(f))

def bisect_left_by(a, f):
    """Return the index where to insert into a according to a comparator

    See bisect_left_in_by, this searches all of a.
    """
    return bisect_left_in_by(a, None, f)


bisect = bisect_right
