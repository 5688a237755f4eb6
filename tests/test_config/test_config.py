import os

import pytest

from argline.config import ArglineConfig, import_exec, loader, read_config
from argline.parameter import MISSING
from argline.types import NumberType

YAML_CONFIG = """
title: Tools
commands:
  - name: shout
    description: Print loudly
    exec: builtins.print
    params:
      - name: text
      - name: times
        type: {name: number, min: 1}
        default_value: 1
      - name: path
        type: {name: selection, data: os.listdir}
        default: null
"""

TOML_CONFIG = """
[[commands]]
name = "shout"
exec = "builtins.print"

[[commands.params]]
name = "text"

[[commands.params]]
name = "times"
type = { name = "number", max = 3 }
defaultValue = 2
"""


def test_yaml_loader(tmp_path):
    path = tmp_path / "argline.yaml"
    path.write_text(YAML_CONFIG)
    registry = loader(path)
    command = registry.get_command("shout")
    assert command.exec is print
    assert command.description == "Print loudly"
    text, times, selected = command.params
    assert text.default_value is MISSING
    assert isinstance(times.type, NumberType)
    assert times.default_value == 1
    assert selected.type.data is os.listdir
    assert selected.is_optional()


def test_toml_loader(tmp_path):
    path = tmp_path / "argline.toml"
    path.write_text(TOML_CONFIG)
    registry = loader(str(path))
    times = registry.get_command("shout").get_parameter("times")
    assert times.type.max == 3
    assert times.default_value == 2


def test_read_config_model(tmp_path):
    path = tmp_path / "argline.yml"
    path.write_text(YAML_CONFIG)
    config = read_config(path)
    assert isinstance(config, ArglineConfig)
    assert config.title == "Tools"
    assert config.prompt == "argline > "
    assert [command.name for command in config.commands] == ["shout"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "nope.yaml")


def test_unsupported_format(tmp_path):
    path = tmp_path / "argline.json"
    path.write_text("{}")
    with pytest.raises(ValueError, match="Unsupported config format"):
        loader(path)


def test_config_without_commands(tmp_path):
    path = tmp_path / "argline.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="list of commands"):
        loader(path)


def test_import_exec():
    assert import_exec("os.path.join") is os.path.join
    with pytest.raises(SystemExit):
        import_exec("nodots")
    with pytest.raises(SystemExit):
        import_exec("not_a_real_module_xyz.func")
    with pytest.raises(SystemExit):
        import_exec("os.not_a_real_attribute")
