# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Interactive completion provider that asks the user for missing arguments.

`prompt_args_provider` is an `ArgsProvider` for `Dispatcher`: for every
parameter of the request that is not yet VALID, and for every optional one
(default `None`), it prompts with Prompt Toolkit, validating and completing
against the parameter's type.

- An empty answer to an optional parameter keeps its default.
- An empty answer to a required parameter stops collection; the dispatcher
  then rejects the request.
- Ctrl-C or Ctrl-D cancels the request.
"""
from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText

from argline.completer import ParameterCompleter
from argline.logger import logger
from argline.parameter import Parameter
from argline.request import Request
from argline.signals import CancelSignal
from argline.status import Status
from argline.themes import OneColors
from argline.validators import ParameterValidator


def _prompt_message(param: Parameter) -> FormattedText:
    fragments = [
        (OneColors.CYAN, "❓ "),
        (OneColors.BLUE_b, param.name),
        ("", f" ({param.type.name})"),
    ]
    if param.is_optional():
        fragments.append((OneColors.COMMENT_GREY, " (optional)"))
    fragments.append((OneColors.LIGHT_YELLOW_b, " > "))
    return FormattedText(fragments)


async def prompt_args_provider(
    request: Request, session: PromptSession | None = None
) -> None:
    """Prompt for each parameter of `request` that is missing, invalid or optional."""
    session = session or PromptSession(
        interrupt_exception=CancelSignal, eof_exception=CancelSignal
    )
    for param in request.command.params:
        if request.get_param_status(param) is Status.VALID and not param.is_optional():
            continue
        current = request.args.get(param.name)
        if current:
            default = str(current)
        elif param.is_data_required():
            default = ""
        else:
            default = param.type.stringify(param.default_value)
        logger.debug("[%s] Prompting for '%s'", request.command.name, param.name)
        answer = await session.prompt_async(
            _prompt_message(param),
            default=default,
            validator=ParameterValidator(param, strict=True),
            completer=ParameterCompleter(param),
            validate_while_typing=False,
        )
        if answer.strip():
            request.args[param.name] = answer
        elif param.is_data_required():
            logger.info(
                "[%s] No value given for required '%s'.",
                request.command.name,
                param.name,
            )
            return
