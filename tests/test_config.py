from pathlib import Path

import pytest

from uac.config import DEFAULT_CFG_FILE, Config, load_config
from uac.errors import ConfigError
from tests.infrastructure import write


def test_missing_default_file_gives_defaults(tmp_path):
    assert load_config(root=tmp_path) == Config()


def test_default_file_is_loaded(tmp_path):
    write(tmp_path / DEFAULT_CFG_FILE, "title: true\nbackup: true\nskip:\n  - '*_test.go'\n  - gen/\n")
    cfg = load_config(root=tmp_path)
    assert cfg.title is True
    assert cfg.backup is True
    assert cfg.fmt is False
    assert cfg.skip == ["*_test.go", "gen/"]


def test_explicit_path(tmp_path):
    path = write(tmp_path / "custom.yaml", "fmt: true\n")
    assert load_config(path).fmt is True


def test_explicit_path_must_exist(tmp_path):
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "nope.yaml")


def test_empty_file(tmp_path):
    write(tmp_path / DEFAULT_CFG_FILE, "")
    assert load_config(root=tmp_path) == Config()


def test_single_skip_string(tmp_path):
    write(tmp_path / DEFAULT_CFG_FILE, "skip: vendor2/\n")
    assert load_config(root=tmp_path).skip == ["vendor2/"]


@pytest.mark.parametrize("content, message", [
    ("titel: true\n", "unknown key"),
    ("title: yes please\n", "'title' must be a boolean"),
    ("skip: 3\n", "'skip' must be a list of strings"),
    ("skip: [a, 1]\n", "'skip' must be a list of strings"),
    ("- title\n", "YAML must be a mapping"),
    ("title: [unclosed\n", "Failed to read config"),
])
def test_invalid_config(tmp_path, content, message):
    write(tmp_path / DEFAULT_CFG_FILE, content)
    with pytest.raises(ConfigError, match=message):
        load_config(root=tmp_path)


def test_from_dict_none():
    assert Config.from_dict(None) == Config()


def test_default_root_is_cwd(in_tmp: Path):
    write(in_tmp / DEFAULT_CFG_FILE, "title: true\n")
    assert load_config().title is True
