import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from argline.parameter import Parameter
from argline.types import default_registry
from argline.validators import ParameterValidator


@pytest.fixture
def registry():
    return default_registry()


def test_number_parameter(registry):
    validator = ParameterValidator(
        Parameter("times", {"name": "number", "max": 5}, registry=registry)
    )
    validator.validate(Document("3"))
    validator.validate(Document(""))
    with pytest.raises(ValidationError, match="Can't convert"):
        validator.validate(Document("abc"))
    with pytest.raises(ValidationError, match="maximum"):
        validator.validate(Document("9"))


def test_selection_prefix(registry):
    param = Parameter(
        "op",
        {"name": "selection", "data": ["add", "addall", "remove"]},
        registry=registry,
    )
    ParameterValidator(param).validate(Document("ad"))
    with pytest.raises(ValidationError) as error:
        ParameterValidator(param, strict=True).validate(Document("ad"))
    assert error.value.message == "Did you mean: add, addall?"
