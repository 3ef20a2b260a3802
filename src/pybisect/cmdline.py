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
import os
import sys
import argparse

from pybisect import vernum

VERSION = "{0}-{1}".format(os.path.basename(sys.argv[0]), vernum)

epilog = """
Commands:
  bisect FILE VALUE   Print the index where VALUE would be inserted
  insort FILE VALUE   Insert VALUE into the sequence and save FILE
  check FILE          Report whether the sequence in FILE is sorted

FILE is a TOML file with the sorted sequence in an array, eg.
  values = [1, 2, 2, 3]
"""

def bisect_cli_parser():
    """ Return the ArgumentParser for bisect-cli"""

    parser = argparse.ArgumentParser(description="Search and insert into sorted sequences",
                                     epilog=epilog,
                                     formatter_class=argparse.RawDescriptionHelpFormatter,
                                     fromfile_prefix_chars="@")

    parser.add_argument("-j", "--json", action="store_true", default=None,
                        help="Output the results as JSON instead of the normal output.")
    parser.add_argument("-c", "--config", default="/etc/pybisect/bisect.conf", metavar="CONFIG",
                        help="Path to bisect-cli configuration file.")
    parser.add_argument("--log", dest="logfile", default=None, metavar="LOG",
                        help="Path to logfile")
    parser.add_argument("-V", action="store_true", dest="showver",
                        help="show program's version number and exit")

    # Commands are parsed by command_parser
    parser.add_argument('args', nargs=argparse.REMAINDER)

    return parser

def command_parser(command):
    """ Return the ArgumentParser for the arguments of a bisect-cli command

    :param command: Name of the command, bisect, insort or check
    :type command: str
    """
    parser = argparse.ArgumentParser(prog="bisect-cli " + command)
    parser.add_argument("file", metavar="FILE",
                        help="TOML file holding the sorted sequence")
    if command == "check":
        return parser

    parser.add_argument("value", metavar="VALUE",
                        help="Value to search for, converted to the type of the sequence")

    bias = parser.add_mutually_exclusive_group()
    bias.add_argument("--left", action="store_const", const="left", dest="bias",
                      help="Use the leftmost position among equal values")
    bias.add_argument("--right", action="store_const", const="right", dest="bias",
                      help="Use the rightmost position among equal values")

    window = parser.add_argument_group("search window")
    window.add_argument("--start", type=int, default=None, metavar="INDEX",
                        help="First index to search. Defaults to the start of the sequence")
    window.add_argument("--end", type=int, default=None, metavar="INDEX",
                        help="Index one past the last to search. Defaults to the end of the sequence")
    window.add_argument("--inclusive-end", action="store_true", default=False,
                        help="Include the --end index in the search")

    if command == "insort":
        parser.add_argument("--dry-run", action="store_true", default=False,
                            help="Print the index but do not write FILE")

    return parser
