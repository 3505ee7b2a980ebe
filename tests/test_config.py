# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import pathlib

import pytest

from accent_index.basic_types import ErrorMode
from accent_index.config_view import AccentIndexConfig
from accent_index.consts import PACKAGE_DIR_PATH
from accent_index.file_ops import find_config_json


def test_find_config_json() -> None:
    assert find_config_json() == PACKAGE_DIR_PATH / "config.json"


def test_find_config_json_ignores_parents(tmp_path) -> None:
    (tmp_path / "config.json").write_text("{}", encoding="utf-8")
    package_dir = tmp_path / "accent_index"
    package_dir.mkdir()
    with pytest.raises(FileNotFoundError):
        find_config_json(package_dir)


def test_default_config() -> None:
    config = AccentIndexConfig()
    assert config.accents_file == pathlib.Path("accents.txt")
    assert config.error_mode == ErrorMode.fail_fast
    assert config.max_reported_errors == 20


def test_set_config() -> None:
    config = AccentIndexConfig()
    config["accents_file"] = "other.txt"
    assert config.accents_file == pathlib.Path("other.txt")
    config["error_mode"] = "collect"
    assert config.error_mode == ErrorMode.collect
    with pytest.raises(KeyError):
        config["no_such_key"] = 1
    config["error_mode"] = "skip"
    with pytest.raises(KeyError):
        _ = config.error_mode
