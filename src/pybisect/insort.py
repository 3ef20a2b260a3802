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
""" Sorted insertion

Each function finds the insertion point with the search of the same
bias and inserts there, returning the index the item was placed at.
The window is checked before the list is touched.
"""
from pybisect.search import bisect_right_in, bisect_right_in_by
from pybisect.search import bisect_left_in, bisect_left_in_by


def insort_right_in(a, x, within, key=None):
    """Insert item x in a[within], and keep it sorted assuming a is sorted.

    :param a: sorted list
    :type a: list
    :param x: item to insert into the list
    :type x: object
    :param within: window of a to search, see pybisect.bounds.as_within
    :type within: object
    :param key: Function to use to compare items in the list
    :type key: function
    :returns: index where the item was inserted
    :rtype: int
    :raises: OutOfBoundsError if within does not fit inside a

    If x is already in a, insert it to the right of the rightmost x.
    When key is used key(x) is searched for, and x is inserted.
    """
    k = x if key is None else key(x)
    i = bisect_right_in(a, k, within, key)
    a.insert(i, x)
    return i

def insort_right(a, x, key=None):
    """Insert item x in a, and keep it sorted assuming a is sorted.

    If x is already in a, insert it to the right of the rightmost x.
    """
    return insort_right_in(a, x, None, key)

def insort_right_in_by(a, x, within, cmp):
    """Insert item x in a[within] using a comparator

    :param a: list sorted according to cmp
    :type a: list
    :param x: item to insert into the list
    :type x: object
    :param within: window of a to search, see pybisect.bounds.as_within
    :type within: object
    :param cmp: cmp(a, b) returns < 0, 0 or > 0 when a is less than, equal to or greater than b
    :type cmp: function
    :returns: index where the item was inserted
    :rtype: int
    :raises: OutOfBoundsError if within does not fit inside a

    If x compares equal to items in a, insert it after the last of them.
    """
    i = bisect_right_in_by(a, within, lambda e: cmp(e, x))
    a.insert(i, x)
    return i

def insort_right_by(a, x, cmp):
    """Insert item x in a using a comparator, after any equal items"""
    return insort_right_in_by(a, x, None, cmp)


def insort_left_in(a, x, within, key=None):
    """Insert item x in a[within], and keep it sorted assuming a is sorted.

    :param a: sorted list
    :type a: list
    :param x: item to insert into the list
    :type x: object
    :param within: window of a to search, see pybisect.bounds.as_within
    :type within: object
    :param key: Function to use to compare items in the list
    :type key: function
    :returns: index where the item was inserted
    :rtype: int
    :raises: OutOfBoundsError if within does not fit inside a

    If x is already in a, insert it to the left of the leftmost x.
    When key is used key(x) is searched for, and x is inserted.
    """
    k = x if key is None else key(x)
    i = bisect_left_in(a, k, within, key)
    a.insert(i, x)
    return i

def insort_left(a, x, key=None):
    """Insert item x in a, and keep it sorted assuming a is sorted.

    If x is already in a, insert it to the left of the leftmost x.
    """
    return insort_left_in(a, x, None, key)

def insort_left_in_by(a, x, within, cmp):
    """Insert item x in a[within] using a comparator

    :param a: list sorted according to cmp
    :type a: list
    :param x: item to insert into the list
    :type x: object
    :param within: window of a to search, see pybisect.bounds.as_within
    :type within: object
    :param cmp: cmp(a, b) returns < 0, 0 or > 0 when a is less than, equal to or greater than b
    :type cmp: function
    :returns: index where the item was inserted
    :rtype: int
    :raises: OutOfBoundsError if within does not fit inside a

    If x compares equal to items in a, insert it before the first of them.
    """
    i = bisect_left_in_by(a, within, lambda e: cmp(e, x))
    a.insert(i, x)
    return i

def insort_left_by(a, x, cmp):
    """Insert item x in a using a comparator, before any equal items"""
    return insort_left_in_by(a, x, None, cmp)


insort = insort_right
