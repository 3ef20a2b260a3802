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
import configparser
import os

from pybisect.errors import ConfigError

BIASES = ("left", "right")
VALUE_TYPES = {"int": int, "float": float, "str": str}

class BisectConfig(configparser.ConfigParser):
    def get_default(self, section, option, default):
        try:
            return self.get(section, option)
        except configparser.Error:
            return default

    def value_type(self):
        """Return the python type to use for values when it cannot be guessed"""
        return VALUE_TYPES[self.get("sequence", "value_type")]


def configure(conf_file="/etc/pybisect/bisect.conf", test_config=False):
    """bisect-cli configuration

    :param conf_file: Path to the config file overriding the default settings
    :type conf_file: str
    :param test_config: Set to True to skip reading conf_file
    :type test_config: bool
    :returns: The configuration
    :rtype: BisectConfig
    :raises: ConfigError if a setting has an unsupported value
    """
    conf = BisectConfig()

    # set defaults
    conf.add_section("bisect")
    conf.set("bisect", "bias", "right")

    conf.add_section("sequence")
    conf.set("sequence", "field", "values")
    conf.set("sequence", "value_type", "int")

    conf.add_section("output")
    conf.set("output", "json", "0")

    if not test_config:
        # read the config file
        if os.path.isfile(conf_file):
            conf.read(conf_file)

    check_config(conf)
    return conf

def check_config(conf):
    """Raise ConfigError if the settings cannot be used

    :param conf: The configuration to check
    :type conf: BisectConfig
    """
    if conf.get("bisect", "bias") not in BIASES:
        raise ConfigError("bias must be one of %s, not %s" % (", ".join(BIASES), conf.get("bisect", "bias")))
    if conf.get("sequence", "value_type") not in VALUE_TYPES:
        raise ConfigError("value_type must be one of %s, not %s" % (", ".join(sorted(VALUE_TYPES)),
                                                                     conf.get("sequence", "value_type")))
    try:
        conf.getboolean("output", "json")
    except ValueError as e:
        raise ConfigError("output.json: %s" % e)
