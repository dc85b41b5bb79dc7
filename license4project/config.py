# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

import os
import pathlib
from collections import ChainMap

import toml

CONFIG_ENV = "LICENSE4PROJECT_CONFIG"


def default_config_file():
    license_dir, _ = os.path.split(__file__)
    return pathlib.Path(license_dir, "license_data", "config.toml")


def user_config_file():
    if os.environ.get(CONFIG_ENV):
        return pathlib.Path(os.environ[CONFIG_ENV])
    return pathlib.Path.home() / ".config" / "license4project" / "config.toml"


def read_config(filename):
    filePath = pathlib.Path(filename)
    if not (filePath.exists() and filePath.is_file()):
        return {}
    try:
        with open(filePath, encoding="utf-8") as file:
            return toml.load(file)
    except (OSError, toml.TomlDecodeError) as ex:
        print(f"[ERROR] Unable to process configuration file {filename} - {ex}")
        return {}


def load_config(filename=None):
    """
    Global defaults: user configuration layered over the bundled defaults.

    Recognised keys are author, email, license and default_file_name.
    """
    if filename is None:
        filename = user_config_file()
    return ChainMap(read_config(filename), read_config(default_config_file()))
