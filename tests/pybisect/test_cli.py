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
import json
import logging
import os
import shutil
import tempfile
import unittest

import pybisect.cli as cli
from pybisect.bounds import UNBOUNDED, Included, Excluded, Within
from pybisect.cli import sequence_type, args_window
from pybisect.cmdline import bisect_cli_parser, command_parser
import pybisect.toml as toml

from ..lib import captured_output

DUPS = "values = [1, 2, 2, 3, 3, 3, 4, 4, 4, 4]\n"

class CliTestCase(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp(prefix="bisect-cli.test.")
        self.conf = os.path.join(self.test_dir, "bisect.conf")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def write_file(self, name, text):
        path = os.path.join(self.test_dir, name)
        with open(path, "w") as f:
            f.write(text)
        return path

    def run_test(self, args):
        p = bisect_cli_parser()
        opts = p.parse_args(["-c", self.conf] + args)
        with captured_output() as (out, _):
            rc = cli.main(opts)
        return (rc, out.getvalue().strip())

    def test_bisect_right(self):
        """Test the default right bias"""
        path = self.write_file("dups.toml", DUPS)
        self.assertEqual(self.run_test(["bisect", path, "3"]), (0, "6"))
        self.assertEqual(self.run_test(["bisect", path, "3", "--right"]), (0, "6"))

    def test_bisect_left(self):
        """Test the left bias"""
        path = self.write_file("dups.toml", DUPS)
        self.assertEqual(self.run_test(["bisect", path, "3", "--left"]), (0, "3"))

    def test_bisect_negative_value(self):
        """Test a negative VALUE is not taken for an option"""
        path = self.write_file("dups.toml", DUPS)
        self.assertEqual(self.run_test(["bisect", path, "-1"]), (0, "0"))

    def test_bisect_json(self):
        """Test JSON output"""
        path = self.write_file("dups.toml", DUPS)
        rc, out = self.run_test(["--json", "bisect", path, "3", "--left"])
        self.assertEqual(rc, 0)
        self.assertEqual(json.loads(out), {"status": True, "index": 3, "bias": "left"})

    def test_bisect_window(self):
        """Test searching part of the sequence"""
        path = self.write_file("dups.toml", DUPS)
        self.assertEqual(self.run_test(["bisect", path, "4", "--start", "1", "--end", "5"]), (0, "5"))
        self.assertEqual(self.run_test(["bisect", path, "4", "--end", "5", "--inclusive-end"]), (0, "6"))
        self.assertEqual(self.run_test(["bisect", path, "0", "--start", "2", "--left"]), (0, "2"))

    def test_bisect_out_of_bounds(self):
        """Test a window past the end of the sequence fails"""
        path = self.write_file("dups.toml", DUPS)
        rc, out = self.run_test(["bisect", path, "3", "--start", "5", "--end", "15"])
        self.assertEqual(rc, 1)
        self.assertEqual(out, "")

    def test_out_of_bounds_logged_once(self):
        """Test a bad window is reported once, by bisect-cli"""
        path = self.write_file("dups.toml", DUPS)
        with self.assertLogs("pybisect", level="DEBUG") as lib_cm:
            with self.assertLogs("bisect-cli", level="ERROR") as cli_cm:
                rc, _ = self.run_test(["bisect", path, "3", "--end", "15"])
        self.assertEqual(rc, 1)
        self.assertEqual(len(cli_cm.records), 1)
        self.assertIn("out of bounds", cli_cm.output[0])
        self.assertEqual([r for r in lib_cm.records if r.levelno >= logging.ERROR], [])

    def test_bisect_floats(self):
        """Test VALUE is converted to float for a float sequence"""
        path = self.write_file("floats.toml", "values = [0.5, 1.5, 2.5]\n")
        self.assertEqual(self.run_test(["bisect", path, "2"]), (0, "2"))

    def test_bisect_strings(self):
        """Test a sequence of strings"""
        path = self.write_file("words.toml", 'values = ["apple", "banana", "cherry"]\n')
        self.assertEqual(self.run_test(["bisect", path, "banana", "--left"]), (0, "1"))

    def test_bisect_bad_value(self):
        """Test a VALUE that cannot be converted"""
        path = self.write_file("dups.toml", DUPS)
        self.assertEqual(self.run_test(["bisect", path, "three"])[0], 1)

    def test_bisect_missing_file(self):
        """Test a FILE that does not exist"""
        self.assertEqual(self.run_test(["bisect", os.path.join(self.test_dir, "nope.toml"), "1"])[0], 1)

    def test_bisect_bad_toml(self):
        """Test a FILE that is not TOML"""
        for text in ["values = [1, 2\n", "values = [1, 2]]\n"]:
            path = self.write_file("bad.toml", text)
            self.assertEqual(self.run_test(["bisect", path, "1"]), (1, ""))

    def test_insort_bad_toml(self):
        """Test insort leaves a truncated FILE untouched"""
        text = "values = [1, 2, 3, 4\n"
        path = self.write_file("truncated.toml", text)
        self.assertEqual(self.run_test(["insort", path, "9"]), (1, ""))
        with open(path) as f:
            self.assertEqual(f.read(), text)

    def test_insort(self):
        """Test inserting and saving the sequence"""
        path = self.write_file("dups.toml", 'name = "dups"\n' + DUPS)
        self.assertEqual(self.run_test(["insort", path, "2", "--left"]), (0, "1"))
        doc, values = toml.load_sequence(path)
        self.assertEqual(values, [1, 2, 2, 2, 3, 3, 3, 4, 4, 4, 4])
        self.assertEqual(doc["name"], "dups")

    def test_insort_empty(self):
        """Test inserting into a file without a sequence"""
        path = self.write_file("empty.toml", "")
        self.assertEqual(self.run_test(["insort", path, "42"]), (0, "0"))
        _, values = toml.load_sequence(path)
        self.assertEqual(values, [42])

    def test_insort_dry_run(self):
        """Test --dry-run does not write the file"""
        path = self.write_file("dups.toml", DUPS)
        self.assertEqual(self.run_test(["insort", path, "5", "--dry-run"]), (0, "10"))
        _, values = toml.load_sequence(path)
        self.assertEqual(len(values), 10)

    def test_insort_out_of_bounds(self):
        """Test a bad window does not change the file"""
        path = self.write_file("dups.toml", DUPS)
        self.assertEqual(self.run_test(["insort", path, "10", "--start", "5", "--end", "15"])[0], 1)
        with open(path) as f:
            self.assertEqual(f.read(), DUPS)

    def test_check(self):
        """Test checking a sorted and an unsorted file"""
        path = self.write_file("dups.toml", DUPS)
        self.assertEqual(self.run_test(["check", path])[0], 0)

        path = self.write_file("unsorted.toml", "values = [1, 3, 2]\n")
        rc, out = self.run_test(["check", path])
        self.assertEqual(rc, 1)
        self.assertIn("index 2", out)

    def test_config_bias(self):
        """Test the default bias from the configuration"""
        self.write_file("bisect.conf", "[bisect]\nbias = left\n")
        path = self.write_file("dups.toml", DUPS)
        self.assertEqual(self.run_test(["bisect", path, "3"]), (0, "3"))
        self.assertEqual(self.run_test(["bisect", path, "3", "--right"]), (0, "6"))

    def test_config_field(self):
        """Test the sequence field and value type from the configuration"""
        self.write_file("bisect.conf", "[sequence]\nfield = names\nvalue_type = str\n")
        path = self.write_file("names.toml", "names = []\n")
        self.assertEqual(self.run_test(["insort", path, "bart"]), (0, "0"))
        _, values = toml.load_sequence(path, "names")
        self.assertEqual(values, ["bart"])

    def test_bad_config(self):
        """Test an invalid configuration file"""
        self.write_file("bisect.conf", "[bisect]\nbias = middle\n")
        path = self.write_file("dups.toml", DUPS)
        self.assertEqual(self.run_test(["bisect", path, "3"])[0], 1)

    def test_unknown_command(self):
        """Test an unknown command"""
        self.assertEqual(self.run_test(["sort", "file.toml"])[0], 1)

    def test_missing_command(self):
        """Test no command"""
        self.assertEqual(self.run_test([])[0], 1)


class CliUtilitiesTest(unittest.TestCase):
    def test_sequence_type(self):
        """Test choosing the type for VALUE"""
        self.assertEqual(sequence_type([1, 2]), int)
        self.assertEqual(sequence_type([1, 2.5]), float)
        self.assertEqual(sequence_type(["a"]), str)
        self.assertEqual(sequence_type([]), int)
        self.assertEqual(sequence_type([], default=str), str)
        with self.assertRaises(ValueError):
            sequence_type([1, "a"])
        with self.assertRaises(ValueError):
            sequence_type([True, False])

    def test_args_window(self):
        """Test converting the window arguments"""
        p = command_parser("bisect")
        self.assertEqual(args_window(p.parse_args(["f", "1"])), Within(UNBOUNDED, UNBOUNDED))
        self.assertEqual(args_window(p.parse_args(["f", "1", "--start", "2", "--end", "4"])),
                         Within(Included(2), Excluded(4)))
        self.assertEqual(args_window(p.parse_args(["f", "1", "--end", "4", "--inclusive-end"])),
                         Within(UNBOUNDED, Included(4)))

    def test_check_has_no_value(self):
        """Test the check command only takes a FILE"""
        args = command_parser("check").parse_args(["f"])
        self.assertEqual(args.file, "f")
        self.assertFalse(hasattr(args, "value"))
