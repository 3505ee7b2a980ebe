# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import json
import pathlib
import typing

from .basic_types import ErrorMode
from .file_ops import find_config_json


class AccentIndexConfig:
    """
    Read-only view over the shipped config.json.
    """

    def __init__(self) -> None:
        self._default_config: dict[str, typing.Any] = {}
        self._config: dict[str, typing.Any] = {}
        self._set_underlying_dicts()

    def _set_underlying_dicts(self) -> None:
        with open(find_config_json(), encoding="utf-8") as f:
            self._default_config = json.load(f)
        self._config = dict(self._default_config)

    def __getitem__(self, key: str) -> typing.Any:
        return self._config[key]

    def __setitem__(self, key: str, value: typing.Any) -> None:
        if key not in self._default_config:
            raise KeyError(f"unknown config key: {key}")
        self._config[key] = value

    @property
    def accents_file(self) -> pathlib.Path:
        return pathlib.Path(self["accents_file"])

    @property
    def error_mode(self) -> ErrorMode:
        return ErrorMode[self["error_mode"]]

    @property
    def max_reported_errors(self) -> int:
        return int(self["max_reported_errors"])
