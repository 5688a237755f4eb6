import pytest

from argline.command import Command
from argline.request import Request, get_request_status
from argline.status import Status


@pytest.fixture
def greet():
    return Command.model_validate(
        {
            "name": "greet",
            "params": [
                {"name": "who"},
                {
                    "name": "times",
                    "type": {"name": "number", "min": 1, "max": 5},
                    "default_value": 1,
                },
                {"name": "nick", "default_value": None},
                {"name": "loud", "type": "boolean"},
            ],
        }
    )


@pytest.mark.parametrize(
    "args, status",
    [
        ({}, Status.INCOMPLETE),
        ({"who": "Ada"}, Status.VALID),
        ({"who": ""}, Status.INCOMPLETE),
        ({"who": None}, Status.INCOMPLETE),
        ({"who": "Ada", "times": "9"}, Status.ERROR),
        ({"who": "Ada", "times": ""}, Status.INCOMPLETE),
        ({"who": "Ada", "nick": ""}, Status.VALID),
        ({"who": "Ada", "loud": "maybe"}, Status.ERROR),
        ({"times": "9"}, Status.ERROR),
    ],
)
def test_request_status(greet, args, status):
    assert Request(greet, args).get_status() is status
    assert get_request_status(greet, args) is status


def test_no_parameters_is_valid():
    assert Request(Command(name="ping")).get_status() is Status.VALID


def test_missing_params(greet):
    request = Request(greet, {"times": "9"})
    assert [param.name for param in request.missing_params()] == ["who", "times"]


def test_get_values_fills_defaults(greet):
    request = Request(greet, {"who": "Ada", "loud": "true"})
    assert request.get_values() == {
        "who": "Ada",
        "times": 1,
        "nick": None,
        "loud": True,
    }


def test_get_values_parses_text(greet):
    request = Request(greet, {"who": "Ada", "times": "3"})
    values = request.get_values()
    assert values["times"] == 3
    assert values["loud"] is False


def test_done_only_once(greet):
    request = Request(greet)
    assert request.duration is None
    request.done("first")
    end = request.end
    request.done("second")
    assert request.end == end
    assert request.completed
    assert request.outputs == ["first", "second"]
    assert request.duration >= 0


def test_done_with_error(greet):
    request = Request(greet)
    request.done_with_error(ValueError("boom"))
    assert request.error
    assert request.outputs == ["boom"]


def test_cancel(greet):
    request = Request(greet)
    assert not request.cancelled
    request.cancel()
    assert request.cancelled


def test_unsupplied_boolean_is_valid_and_required_text_is_incomplete():
    flag_only = Command.model_validate(
        {"name": "flag", "params": [{"name": "force", "type": "boolean"}]}
    )
    assert Request(flag_only).get_status() is Status.VALID
    text_only = Command.model_validate({"name": "say", "params": [{"name": "words"}]})
    assert Request(text_only).get_status() is Status.INCOMPLETE


def test_collecting_args(greet):
    request = Request(greet)
    assert not request.collecting
    with request.collecting_args():
        assert request.collecting
    assert not request.collecting


def test_collecting_args_resets_on_error(greet):
    request = Request(greet)
    with pytest.raises(RuntimeError):
        with request.collecting_args():
            raise RuntimeError("boom")
    assert not request.collecting
