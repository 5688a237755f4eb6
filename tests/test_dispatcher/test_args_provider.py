from functools import partial
from io import StringIO

import pytest
from rich.console import Console

from argline.args_provider import prompt_args_provider
from argline.command import Command
from argline.command_registry import CommandRegistry
from argline.dispatcher import Dispatcher
from argline.request import Request, RequestState
from argline.signals import CancelSignal
from argline.validators import ParameterValidator


class FakeSession:
    """Stands in for a PromptSession, answering prompts from a list."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.defaults = []
        self.validators = []

    async def prompt_async(self, message, **kwargs):
        self.prompts.append("".join(text for _, text in message))
        self.defaults.append(kwargs.get("default"))
        self.validators.append(kwargs.get("validator"))
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


@pytest.fixture
def greet():
    return Command.model_validate(
        {
            "name": "greet",
            "params": [
                {"name": "who"},
                {"name": "times", "type": "number", "default_value": 1},
                {"name": "nick", "default_value": None},
            ],
        }
    )


@pytest.mark.asyncio
async def test_prompts_for_missing_and_optional_params(greet):
    session = FakeSession(["Ada", "Countess"])
    request = Request(greet)

    await prompt_args_provider(request, session=session)

    assert session.prompts == ["❓ who (text) > ", "❓ nick (text) (optional) > "]
    assert request.args == {"who": "Ada", "nick": "Countess"}


@pytest.mark.asyncio
async def test_optional_param_is_prompted_when_valid(greet):
    session = FakeSession([""])
    request = Request(greet, {"who": "Ada"})

    await prompt_args_provider(request, session=session)

    assert session.prompts == ["❓ nick (text) (optional) > "]
    assert request.args == {"who": "Ada"}


@pytest.mark.asyncio
async def test_defaults_shown_in_prompt(greet):
    session = FakeSession(["4", ""])
    request = Request(greet, {"who": "Ada", "times": ""})

    await prompt_args_provider(request, session=session)

    assert session.defaults == ["1", ""]
    assert request.args["times"] == "4"


@pytest.mark.asyncio
async def test_current_value_is_the_default(greet):
    session = FakeSession([""])
    request = Request(greet, {"who": "Ada", "nick": "Lady"})

    await prompt_args_provider(request, session=session)

    assert session.defaults == ["Lady"]
    assert request.args["nick"] == "Lady"


@pytest.mark.asyncio
async def test_validator_is_strict(greet):
    session = FakeSession(["Ada", ""])
    await prompt_args_provider(Request(greet), session=session)
    validator = session.validators[0]
    assert isinstance(validator, ParameterValidator)
    assert validator.strict
    assert validator.param.name == "who"


@pytest.mark.asyncio
async def test_empty_answer_to_required_param_stops(greet):
    session = FakeSession([""])
    request = Request(greet)

    await prompt_args_provider(request, session=session)

    assert len(session.prompts) == 1
    assert "who" not in request.args


@pytest.mark.asyncio
async def test_cancel_signal_propagates(greet):
    session = FakeSession([CancelSignal()])
    with pytest.raises(CancelSignal):
        await prompt_args_provider(Request(greet), session=session)


@pytest.mark.asyncio
async def test_dispatcher_runs_after_prompting():
    registry = CommandRegistry()
    seen = []

    @registry.command(params=[{"name": "who"}, {"name": "nick", "default_value": None}])
    def hello(who, nick):
        seen.append((who, nick))
        return f"Hello {nick or who}"

    session = FakeSession(["Ada", ""])
    dispatcher = Dispatcher(
        registry,
        args_provider=partial(prompt_args_provider, session=session),
        console=Console(file=StringIO()),
    )

    request = await dispatcher.exec("hello")

    assert request.state is RequestState.DONE
    assert seen == [("Ada", None)]
    assert len(session.prompts) == 2
