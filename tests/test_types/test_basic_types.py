from types import SimpleNamespace

import pytest

from argline.argument import Argument, ArrayArgument
from argline.exceptions import TypeSpecError, UnknownTypeError
from argline.status import Status
from argline.tokenizer import tokenize
from argline.types import (
    ArrayConversion,
    BlankType,
    BooleanType,
    NumberType,
    TextType,
    default_registry,
)


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def number(registry):
    return registry.get_type({"name": "number", "min": 0, "max": 10})


@pytest.fixture
def selection(registry):
    return registry.get_type({"name": "selection", "data": ["add", "addall", "remove"]})


def test_text_type(registry):
    text = registry.get_type("text")
    assert isinstance(text, TextType)
    conversion = text.parse(Argument("hello"))
    assert conversion.value == "hello"
    assert conversion.status is Status.VALID
    assert text.stringify(None) == ""
    with pytest.raises(TypeSpecError):
        registry.get_type({"name": "text", "max": 3})


@pytest.mark.parametrize(
    "text, status, value",
    [
        ("", Status.INCOMPLETE, None),
        ("abc", Status.ERROR, None),
        ("5", Status.VALID, 5),
        ("7x", Status.VALID, 7),
        ("11", Status.ERROR, 11),
        ("-1", Status.ERROR, -1),
    ],
)
def test_number_parse(number, text, status, value):
    conversion = number.parse_string(text)
    assert conversion.status is status
    assert conversion.value == value


def test_number_messages(number):
    assert number.parse_string("abc").message == "Can't convert \"abc\" to a number."
    assert "maximum" in number.parse_string("11").message
    assert "minimum" in number.parse_string("-1").message


def test_number_stepping(number):
    assert number.increment(None) == 0
    assert number.decrement(None) == 10
    assert number.increment(4) == 5
    assert number.increment(10) == 10
    assert number.decrement(0) == 0


def test_number_step_option(registry):
    stepped = registry.get_type({"name": "number", "step": 5})
    assert stepped.increment(1) == 6
    assert stepped.decrement(None) == 0


def test_number_stringify(number):
    assert number.stringify(None) == ""
    assert number.stringify(0) == "0"


def test_number_rejects_bad_options():
    with pytest.raises(TypeSpecError):
        NumberType({"minimum": 1})
    with pytest.raises(TypeSpecError):
        NumberType({"min": 5, "max": 1})


def test_selection_exact_match_beats_prefix(selection):
    conversion = selection.parse_string("add")
    assert conversion.status is Status.VALID
    assert conversion.value == "add"


def test_selection_prefix_is_incomplete(selection):
    conversion = selection.parse_string("ad")
    assert conversion.status is Status.INCOMPLETE
    assert conversion.predictions == ["add", "addall"]


def test_selection_unknown_is_error(selection):
    conversion = selection.parse_string("x")
    assert conversion.status is Status.ERROR
    assert conversion.message == "Can't use 'x'."


def test_selection_empty_predicts_everything(selection):
    conversion = selection.parse_string("")
    assert conversion.status is Status.INCOMPLETE
    assert conversion.predictions == ["add", "addall", "remove"]


def test_selection_stepping_wraps(selection):
    assert selection.increment("remove") == "add"
    assert selection.decrement("add") == "remove"
    assert selection.increment(None) == "add"
    assert selection.decrement(None) == "remove"


def test_selection_callable_data(registry):
    options = ["a"]
    selection = registry.get_type({"name": "selection", "data": lambda: options})
    assert selection.parse_string("b").status is Status.ERROR
    options.append("b")
    assert selection.parse_string("b").status is Status.VALID


def test_selection_named_options(registry):
    red = SimpleNamespace(name="red")
    selection = registry.get_type({"name": "selection", "data": [red]})
    assert selection.parse_string("red").value is red
    assert selection.stringify(red) == "red"


def test_selection_needs_data(registry):
    with pytest.raises(TypeSpecError):
        registry.get_type("selection")


def test_boolean(registry):
    boolean = registry.get_type("bool")
    assert isinstance(boolean, BooleanType)
    assert boolean.parse_string("true").value is True
    assert boolean.parse_string("false").value is False
    assert boolean.parse_string("t").status is Status.ERROR
    assert boolean.stringify(True) == "true"
    assert boolean.stringify(False) == "false"
    with pytest.raises(TypeSpecError):
        registry.get_type({"name": "boolean", "data": ["yes"]})


def test_deferred_unresolved_is_blank(registry):
    deferred = registry.get_type({"name": "deferred", "defer": lambda: None})
    assert isinstance(deferred.resolve(), BlankType)
    conversion = deferred.parse_string("anything")
    assert conversion.status is Status.VALID
    assert conversion.value is None


def test_deferred_resolves_each_time(registry):
    target = {"type": None}
    deferred = registry.get_type({"name": "deferred", "defer": lambda: target["type"]})
    assert deferred.parse_string("3").value is None
    target["type"] = registry.get_type("number")
    assert deferred.parse_string("3").value == 3
    assert deferred.increment(3) == 4


def test_deferred_needs_callable(registry):
    with pytest.raises(TypeSpecError):
        registry.get_type({"name": "deferred", "defer": "nope"})


def test_array_parses_text(registry):
    array = registry.get_type({"name": "array", "subtype": "number"})
    conversion = array.parse_string("1 2 3")
    assert isinstance(conversion, ArrayConversion)
    assert conversion.value == [1, 2, 3]
    assert conversion.status is Status.VALID
    assert len(conversion.conversions) == 3


def test_array_combines_element_status(registry):
    array = registry.get_type({"name": "array", "subtype": "number"})
    assert array.parse_string("1 x").status is Status.ERROR
    assert array.parse_string("").value == []


def test_array_parses_array_argument(registry):
    array = registry.get_type({"name": "array", "subtype": "text"})
    arg = ArrayArgument(tuple(tokenize("a 'b c'")))
    assert array.parse(arg).value == ["a", "b c"]


def test_array_stringify_quotes(registry):
    array = registry.get_type({"name": "array", "subtype": "text"})
    assert array.stringify(["a b", "c"]) == "'a b' c"
    assert array.stringify([]) == ""


def test_array_subtype(registry):
    array = registry.get_type({"name": "array"})
    assert isinstance(array.subtype, TextType)
    with pytest.raises(UnknownTypeError):
        registry.get_type({"name": "array", "subtype": "nope"})


def test_number_with_max_ten(registry):
    number = registry.get_type({"name": "number", "max": 10})
    assert number.parse_string("42").status is Status.ERROR
    seven = registry.get_type({"name": "number", "min": 0, "max": 10}).parse_string("7")
    assert seven.status is Status.VALID
    assert seven.value == 7


def test_selection_error_has_no_predictions(selection):
    conversion = selection.parse_string("zz")
    assert conversion.status is Status.ERROR
    assert conversion.predictions == []
