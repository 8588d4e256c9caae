# -*- coding: utf-8 -*-

# Copyright 2018, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Utils for reading a user preference config file."""

import configparser
import os

from qfold import exceptions

DEFAULT_FILENAME = os.path.join(os.path.expanduser("~"), ".qfold", "settings.conf")


class UserConfig:
    """Class representing a user config file

    The config file format should look like:

    [default]
    fold_correct_global_phase = False
    fold_angle_tolerance = 1e-10
    fold_max_iterations = 10

    """

    def __init__(self, filename=None):
        """Create a UserConfig

        Args:
            filename (str): The path to the user config file. If one isn't
                specified, ~/.qfold/settings.conf is used.
        """
        if filename is None:
            self.filename = DEFAULT_FILENAME
        else:
            self.filename = filename
        self.settings = {}
        self.config_parser = configparser.ConfigParser()

    def read_config_file(self):
        """Read config file and parse the contents into the settings attr."""
        if not os.path.isfile(self.filename):
            return
        self.config_parser.read(self.filename)
        if "default" not in self.config_parser.sections():
            return

        # Parse fold_correct_global_phase
        try:
            correct_global_phase = self.config_parser.getboolean(
                "default", "fold_correct_global_phase", fallback=None
            )
        except ValueError as err:
            raise exceptions.QfoldUserConfigError(
                f"Value assigned to fold_correct_global_phase is not valid. {str(err)}"
            )
        if correct_global_phase is not None:
            self.settings["fold_correct_global_phase"] = correct_global_phase

        # Parse fold_angle_tolerance
        try:
            angle_tolerance = self.config_parser.getfloat(
                "default", "fold_angle_tolerance", fallback=None
            )
        except ValueError as err:
            raise exceptions.QfoldUserConfigError(
                f"Value assigned to fold_angle_tolerance is not valid. {str(err)}"
            )
        if angle_tolerance is not None:
            if angle_tolerance <= 0:
                raise exceptions.QfoldUserConfigError(
                    f"{angle_tolerance} is not a valid angle tolerance. Must be greater than 0."
                )
            self.settings["fold_angle_tolerance"] = angle_tolerance

        # Parse fold_max_iterations
        try:
            max_iterations = self.config_parser.getint(
                "default", "fold_max_iterations", fallback=None
            )
        except ValueError as err:
            raise exceptions.QfoldUserConfigError(
                f"Value assigned to fold_max_iterations is not valid. {str(err)}"
            )
        if max_iterations is not None:
            if max_iterations <= 0:
                raise exceptions.QfoldUserConfigError(
                    f"{max_iterations} is not a valid number of iterations. Must be greater than 0."
                )
            self.settings["fold_max_iterations"] = max_iterations


def set_config(key, value, section=None, file_path=None):
    """Adds or modifies a user configuration

    It will add configuration to the currently configured location
    or the value of file argument.

    Only valid user config can be set in 'default' section. Custom
    user config can be added in any other sections.

    Args:
        key (str): name of the config
        value (obj): value of the config
        section (str, optional): if not specified, adds it to the
            `default` section of the config file.
        file_path (str, optional): the file to which config is added.
            If not specified, adds it to the default config file or
            if set, the value of `QFOLD_SETTINGS` env variable.

    Raises:
        QfoldUserConfigError: if the config is invalid
    """
    filename = file_path or os.getenv("QFOLD_SETTINGS", DEFAULT_FILENAME)
    section = "default" if section is None else section

    if not isinstance(key, str):
        raise exceptions.QfoldUserConfigError("Key must be string type")

    valid_config = {
        "fold_correct_global_phase",
        "fold_angle_tolerance",
        "fold_max_iterations",
    }

    if section == "default" and key not in valid_config:
        raise exceptions.QfoldUserConfigError(f"{key} is not a valid user config.")

    config = configparser.ConfigParser()
    config.read(filename)

    if section not in config.sections():
        config.add_section(section)

    config.set(section, key, str(value))

    directory = os.path.dirname(filename)
    try:
        if directory and not os.path.isdir(directory):
            os.makedirs(directory)
        with open(filename, "w") as cfgfile:
            config.write(cfgfile)
    except OSError as ex:
        raise exceptions.QfoldUserConfigError(
            f"Unable to load the config file {filename}. Error: '{str(ex)}'"
        )

    # validates config
    user_config = UserConfig(filename)
    user_config.read_config_file()


def get_config():
    """Read the config file from the default location or env var

    It will read a config file at either the default location
    ~/.qfold/settings.conf or if set the value of the QFOLD_SETTINGS env var.

    Returns:
        dict: The settings dict from the parsed config file.
    """
    filename = os.getenv("QFOLD_SETTINGS", DEFAULT_FILENAME)
    if not os.path.isfile(filename):
        return {}
    user_config = UserConfig(filename)
    user_config.read_config_file()
    return user_config.settings
