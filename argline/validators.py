# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Prompt Toolkit validators that check input against Argline's type system.

Included Validators:
- ParameterValidator: Checks the value typed for a single parameter.
- CommandLineValidator: Checks a whole command line against a CommandRegistry.

Both raise `ValidationError` only for ERROR status by default, so the user can
keep typing through INCOMPLETE states (e.g. a selection prefix). Set
`strict=True` to reject anything that is not VALID.
"""
from __future__ import annotations

from typing import Iterable

from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from argline.argument import Argument
from argline.command_line import CommandLine
from argline.command_registry import CommandRegistry
from argline.parameter import Parameter
from argline.status import Status


class ParameterValidator(Validator):
    """
    Validates the text typed for one parameter.

    Empty input is accepted: the caller decides whether an empty answer means
    "use the default" or "still missing".
    """

    def __init__(self, param: Parameter, strict: bool = False) -> None:
        self.param = param
        self.strict = strict
        super().__init__()

    def validate(self, document: Document) -> None:
        text = document.text
        if not text.strip():
            return
        conversion = self.param.type.parse(Argument(text))
        if conversion.status is Status.VALID:
            return
        if conversion.status is Status.INCOMPLETE and not self.strict:
            return
        message = conversion.message
        if not message and conversion.predictions:
            message = f"Did you mean: {', '.join(map(str, conversion.predictions))}?"
        raise ValidationError(
            message=message or f"Invalid value for {self.param.name}: {text}",
            cursor_position=len(text),
        )


class CommandLineValidator(Validator):
    """Validates a full command line typed at the shell prompt."""

    def __init__(
        self,
        registry: CommandRegistry,
        builtins: Iterable[str] = (),
        strict: bool = False,
    ) -> None:
        self.registry = registry
        self.builtins = set(builtins)
        self.strict = strict
        super().__init__()

    def validate(self, document: Document) -> None:
        text = document.text
        if not text.strip():
            return
        line = CommandLine.parse(text, self.registry)
        if line.command is None:
            if text.split()[0] in self.builtins:
                return
            raise ValidationError(message=line.get_message(), cursor_position=len(text))
        status = line.status
        if status is Status.ERROR or (self.strict and status is not Status.VALID):
            raise ValidationError(
                message=line.get_message() or f"Invalid input for {line.command.name}",
                cursor_position=len(text),
            )
