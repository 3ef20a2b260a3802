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
log = logging.getLogger("bisect-cli")

import json

from pybisect.bounds import UNBOUNDED, Included, Excluded, Within
from pybisect.cmdline import command_parser
from pybisect.config import configure
from pybisect.search import bisect_left_in, bisect_right_in
from pybisect.insort import insort_left_in, insort_right_in
import pybisect.toml as toml


def sequence_type(values, default=int):
    """Return the type to convert command line values to

    :param values: The sequence read from the file
    :type values: list
    :param default: Type to use for an empty sequence
    :type default: type
    :returns: int, float or str
    :rtype: type
    :raises: ValueError if the sequence holds other types, or a mix of them

    A sequence of ints and floats is treated as floats.
    """
    if not values:
        return default
    types = set(type(v) for v in values)
    if types == {int}:
        return int
    if types <= {int, float}:
        return float
    if types == {str}:
        return str
    raise ValueError("Unsupported sequence element types: %s" % ", ".join(sorted(t.__name__ for t in types)))

def args_window(args):
    """Build the search window from the --start, --end and --inclusive-end arguments

    :param args: Parsed command arguments
    :type args: argparse.Namespace
    :rtype: Within
    """
    start = UNBOUNDED if args.start is None else Included(args.start)
    if args.end is None:
        end = UNBOUNDED
    elif args.inclusive_end:
        end = Included(args.end)
    else:
        end = Excluded(args.end)
    return Within(start, end)

def print_result(result, show_json=False):
    if show_json:
        print(json.dumps(result, indent=4))
    elif "index" in result:
        print(result["index"])
    else:
        print(result["msg"])

def _load(args, conf):
    doc, values = toml.load_sequence(args.file, conf.get("sequence", "field"))
    x = sequence_type(values, conf.value_type())(args.value)
    bias = args.bias or conf.get("bisect", "bias")
    return (doc, values, x, bias)

def bisect_cmd(cmd_args, conf, show_json=False):
    """Print the insertion index of a value

    :param cmd_args: Arguments following the command name
    :type cmd_args: list of str
    :param conf: Configuration
    :type conf: BisectConfig
    :param show_json: Print the result as JSON
    :type show_json: bool
    :returns: Value to return from main, 0 for success
    :rtype: int

    bisect FILE VALUE [--left|--right] [--start N] [--end N] [--inclusive-end]
    """
    args = command_parser("bisect").parse_args(cmd_args)
    _doc, values, x, bias = _load(args, conf)

    search = bisect_left_in if bias == "left" else bisect_right_in
    i = search(values, x, args_window(args))
    log.debug("bisect_%s of %r in %s: %d", bias, x, args.file, i)
    print_result({"status": True, "index": i, "bias": bias}, show_json)
    return 0

def insort_cmd(cmd_args, conf, show_json=False):
    """Insert a value and write the sequence back to the file

    insort FILE VALUE [--left|--right] [--start N] [--end N] [--inclusive-end] [--dry-run]
    """
    args = command_parser("insort").parse_args(cmd_args)
    doc, values, x, bias = _load(args, conf)

    insort = insort_left_in if bias == "left" else insort_right_in
    i = insort(values, x, args_window(args))
    if args.dry_run:
        log.info("Not writing %s", args.file)
    else:
        toml.save_sequence(args.file, doc)
        log.debug("Inserted %r at %d in %s", x, i, args.file)
    print_result({"status": True, "index": i, "bias": bias}, show_json)
    return 0

def check_cmd(cmd_args, conf, show_json=False):
    """Report whether the sequence in a file is sorted

    check FILE

    Returns 1 if it is not sorted. The search functions assume a sorted
    sequence and never check it themselves.
    """
    args = command_parser("check").parse_args(cmd_args)
    _doc, values = toml.load_sequence(args.file, conf.get("sequence", "field"))

    for i in range(1, len(values)):
        if values[i] < values[i-1]:
            print_result({"status": False, "msg": "%s is not sorted at index %d" % (args.file, i)}, show_json)
            return 1
    print_result({"status": True, "msg": "%s is sorted" % args.file}, show_json)
    return 0

command_map = {
    "bisect": bisect_cmd,
    "insort": insort_cmd,
    "check":  check_cmd,
}

def main(opts):
    """ Main program execution

    :param opts: Cmdline arguments
    :type opts: argparse.Namespace
    :returns: Exit code
    :rtype: int
    """
    if not opts.args:
        log.error("Missing command")
        return 1
    if opts.args[0] not in command_map:
        log.error("Unknown command %s", opts.args[0])
        return 1

    try:
        conf = configure(conf_file=opts.config)
        if opts.json is None:
            show_json = conf.getboolean("output", "json")
        else:
            show_json = opts.json
        return command_map[opts.args[0]](opts.args[1:], conf, show_json)
    except Exception as e:
        log.error(str(e))
        return 1
