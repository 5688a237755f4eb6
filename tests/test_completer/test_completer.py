import pytest
from prompt_toolkit.document import Document

from argline.command_registry import CommandRegistry
from argline.completer import ArglineCompleter, ParameterCompleter


@pytest.fixture
def registry():
    registry = CommandRegistry()
    registry.add_command(
        {
            "name": "greet",
            "params": [
                {"name": "who"},
                {"name": "times", "type": "number", "default_value": 1},
                {"name": "loud", "type": "boolean"},
            ],
        }
    )
    registry.add_command({"name": "grep", "params": [{"name": "pattern"}]})
    registry.add_command(
        {
            "name": "pick",
            "params": [
                {
                    "name": "colour",
                    "type": {"name": "selection", "data": ["red", "green", "rust"]},
                },
                {
                    "name": "shades",
                    "type": {
                        "name": "array",
                        "subtype": {"name": "selection", "data": ["light", "dark"]},
                    },
                    "default_value": None,
                },
            ],
        }
    )
    return registry


@pytest.fixture
def completer(registry):
    return ArglineCompleter(registry, ["help", "exit"])


def texts(completer, text):
    return [c.text for c in completer.get_completions(Document(text), None)]


def test_suggest_commands(completer):
    assert texts(completer, "gre") == ["greet", "grep"]
    assert texts(completer, "h") == ["help"]
    assert set(texts(completer, "")) == {"help", "exit", "greet", "grep", "pick"}


def test_lcp_for_commands(completer):
    results = texts(completer, "g")
    assert results[0] == "gre"
    assert "greet" in results
    assert "grep" in results


def test_suggest_flags(completer):
    assert texts(completer, "greet --t") == ["--times"]
    assert set(texts(completer, "greet Ada --")) == {"--times", "--loud"}


def test_bound_flags_are_not_suggested_again(completer):
    assert "--times" not in texts(completer, "greet --times 2 --")


def test_suggest_selection_values(completer):
    assert texts(completer, "pick r") == ["red", "rust"]
    assert texts(completer, "pick --colour g") == ["green"]
    assert set(texts(completer, "pick ")) == {"red", "green", "rust"}


def test_suggest_array_values(completer):
    assert texts(completer, "pick red --shades l") == ["light"]
    assert set(texts(completer, "pick red --shades light ")) == {"light", "dark"}


def test_no_suggestions_for_unknown_command(completer):
    assert texts(completer, "nope ") == []


def test_parameter_completer(registry):
    param = registry.get_command("greet").get_parameter("loud")
    completer = ParameterCompleter(param)
    assert texts(completer, "t") == ["true"]
    assert set(texts(completer, "")) == {"true", "false"}
