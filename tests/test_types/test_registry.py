import pytest

from argline.exceptions import TypeRegistryError, TypeSpecError
from argline.types import NumberType, TextType, TypeRegistry, default_registry, shutdown, startup


def test_default_registry_is_frozen():
    registry = default_registry()
    assert registry.frozen
    with pytest.raises(TypeRegistryError):
        registry.register_type(TextType)


def test_type_names_are_sorted_primary_names():
    registry = TypeRegistry()
    startup(registry)
    assert registry.get_type_names() == [
        "array",
        "blank",
        "boolean",
        "deferred",
        "number",
        "selection",
        "text",
    ]
    assert "bool" in registry


def test_shutdown_removes_types():
    registry = TypeRegistry()
    startup(registry)
    shutdown(registry)
    assert registry.get_type_names() == []
    assert registry.get_type("text") is None


def test_get_type_lookups():
    registry = default_registry()
    assert registry.get_type("nope") is None
    assert registry.get_type({"name": "nope"}) is None
    number = registry.get_type({"name": "number", "max": 3})
    assert isinstance(number, NumberType)
    assert number.max == 3
    assert registry.get_type(number) is number


def test_get_type_rejects_bad_specs():
    registry = default_registry()
    with pytest.raises(TypeSpecError):
        registry.get_type({"max": 3})
    with pytest.raises(TypeSpecError):
        registry.get_type(123)


def test_register_replaces_with_warning(caplog):
    class OtherText(TextType):
        pass

    registry = TypeRegistry()
    registry.register_type(TextType)
    registry.register_type(OtherText)
    assert isinstance(registry.get_type("text"), OtherText)
    assert "replaces" in caplog.text
