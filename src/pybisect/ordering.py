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
from enum import IntEnum


class Ordering(IntEnum):
    """Three-way comparison result

    A comparator passed to the ``*_by`` functions may return one of these,
    or any number whose sign has the same meaning (the ``cmp`` convention
    used by :func:`functools.cmp_to_key`).
    """
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value):
        """Normalize a signed comparison result

        :param value: negative, zero or positive result of a comparator
        :type value: int or Ordering
        :returns: The matching Ordering
        :rtype: Ordering
        """
        if value < 0:
            return cls.LESS
        elif value > 0:
            return cls.GREATER
        else:
            return cls.EQUAL


def compare(a, b):
    """Compare two values using their natural order

    :param a: first value
    :type a: object
    :param b: second value
    :type b: object
    :returns: LESS if a < b, GREATER if b < a, EQUAL otherwise
    :rtype: Ordering

    Only ``<`` is used, the same as ``list.sort()``. Values that are
    not ordered relative to each other (eg. NaN) compare as EQUAL.
    """
    if a < b:
        return Ordering.LESS
    elif b < a:
        return Ordering.GREATER
    else:
        return Ordering.EQUAL


def reverse_order(cmp):
    """Return a comparator with the order of cmp reversed

    :param cmp: Two argument comparator
    :type cmp: function
    :returns: Comparator sorting in descending order of cmp
    :rtype: function

    Useful for sequences sorted with ``reverse=True``.
    """
    return lambda a, b: cmp(b, a)
