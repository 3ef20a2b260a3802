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
""" Reading and writing sorted sequence files

A sequence file is a TOML document with the sequence stored in an
array, named "values" unless the configuration says otherwise::

    values = [1, 2, 2, 3, 5, 8]

Files are parsed with tomli, which rejects truncated arrays and tables
that toml accepts, and written with toml.
"""
import toml
import tomli

class TomlError(toml.TomlDecodeError):
    pass

def loads(s):
    if isinstance(s, bytes):
        s = s.decode('utf-8')
    try:
        return tomli.loads(s)
    except tomli.TOMLDecodeError as e:
        raise TomlError(e.msg, e.doc, e.pos)

def dumps(o):
    # strip the result, because `toml.dumps` adds a lot of newlines
    return toml.dumps(o, encoder=toml.TomlEncoder(dict)).strip()

def load_sequence(path, field="values"):
    """Read the sequence stored in a TOML file

    :param path: Path to the TOML file
    :type path: str
    :param field: Name of the array holding the sequence
    :type field: str
    :returns: (document, sequence) the whole document and the list from it
    :rtype: tuple
    :raises: TomlError if the file is not valid TOML, ValueError if field is not an array

    A missing field is treated as an empty sequence.
    """
    with open(path, "r") as f:
        doc = loads(f.read())
    values = doc.setdefault(field, [])
    if not isinstance(values, list):
        raise ValueError("%s in %s is not an array" % (field, path))
    return (doc, values)

def save_sequence(path, doc):
    """Write the document back to path

    The document is serialized before the file is opened, an encoding
    error leaves the old file in place.
    """
    data = dumps(doc) + "\n"
    with open(path, "w") as f:
        f.write(data)
