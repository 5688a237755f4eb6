import pytest

from argline.command import Command
from argline.command_registry import CommandRegistry
from argline.exceptions import CommandAlreadyExistsError, CommandError, ParameterError
from argline.types import NumberType


def greet(who: str, times: int) -> str:
    return " ".join([f"Hello {who}"] * times)


GREET = {
    "name": "greet",
    "description": "Say hello",
    "params": [
        {"name": "who"},
        {"name": "times", "type": {"name": "number", "min": 1}, "default_value": 1},
    ],
    "exec": greet,
}


def test_command_builds_parameters():
    command = Command.model_validate(GREET)
    assert [param.name for param in command.params] == ["who", "times"]
    assert isinstance(command.get_parameter("times").type, NumberType)
    assert command.get_parameter("nope") is None
    assert command.exec is greet


def test_find_named_parameter():
    command = Command.model_validate(GREET)
    assert command.find_named_parameter("--t").name == "times"
    assert command.find_named_parameter("--who").name == "who"
    assert command.find_named_parameter("--x") is None
    assert command.find_named_parameter("Ada") is None


def test_duplicate_parameter_names():
    with pytest.raises(ParameterError):
        Command.model_validate({"name": "x", "params": [{"name": "a"}, {"name": "a"}]})


def test_command_needs_a_name():
    with pytest.raises(CommandError):
        Command.model_validate({"name": "  "})


def test_exec_must_be_callable():
    with pytest.raises(CommandError):
        Command.model_validate({"name": "x", "exec": 5})


def test_description_fallback():
    assert Command(name="x").get_description() == "(No description)"
    assert Command.model_validate(GREET).get_description() == "Say hello"


def test_registry_add_and_lookup():
    registry = CommandRegistry()
    command = registry.add_command(GREET)
    assert registry.get_command("greet") is command
    assert "greet" in registry
    assert len(registry) == 1
    assert registry.get_command("nope") is None


def test_registry_rejects_duplicates():
    registry = CommandRegistry()
    registry.add_command(GREET)
    with pytest.raises(CommandAlreadyExistsError):
        registry.add_command(GREET)


def test_registry_rename_on_add():
    registry = CommandRegistry()
    registry.add_command(GREET, name="hello")
    registry.add_command(Command.model_validate(GREET), name="hi")
    assert registry.get_command_names() == ["hello", "hi"]


def test_registry_rejects_other_objects():
    with pytest.raises(CommandError):
        CommandRegistry().add_command(42)


def test_registry_decorator():
    registry = CommandRegistry()

    @registry.command(params=[{"name": "who"}])
    def wave(who: str) -> str:
        """Wave at someone"""
        return f"*waves at {who}*"

    command = registry.get_command("wave")
    assert command.description == "Wave at someone"
    assert command.exec is wave
    assert wave("Ada") == "*waves at Ada*"


def test_registry_remove_and_sorting():
    registry = CommandRegistry()
    registry.add_command({"name": "zeta"})
    registry.add_command({"name": "alpha"})
    assert [command.name for command in registry.get_commands()] == ["alpha", "zeta"]
    registry.remove_command("zeta")
    registry.remove_command("missing")
    assert registry.get_command_names() == ["alpha"]
