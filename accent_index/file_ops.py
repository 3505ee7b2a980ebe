# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import pathlib

from .consts import CONFIG_JSON_NAME, PACKAGE_DIR_PATH


def find_config_json(package_dir: pathlib.Path = PACKAGE_DIR_PATH) -> pathlib.Path:
    """The default config is shipped next to the package modules."""
    if not (path := package_dir.joinpath(CONFIG_JSON_NAME)).is_file():
        raise FileNotFoundError(f"couldn't find file '{path}'")
    return path
