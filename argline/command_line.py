# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binds a typed command line to a command's parameters, and rewrites it.

`CommandLine.parse(text, registry)` tokenizes `text`, looks the first token up
as a command name, and binds the remaining tokens to parameters:

- `--name value` (or any unambiguous abbreviation) becomes a `NamedArgument`.
- A boolean flag on its own becomes a `BooleanNamedArgument`.
- An array parameter takes every following token up to the next flag as an
  `ArrayArgument`.
- Remaining tokens fill the unbound parameters in declaration order. If the
  last such parameter is text, an unbroken run of extra tokens is merged into
  it as a `MergedArgument`; if it is an array, it takes them all.
- Anything left over is kept in `unassigned` and makes the line an ERROR.

Each bound token records the parameter it was assigned to, so completers can
go from the token under the cursor to its parameter.

`CommandLine.replace(name, text)` changes the value of one parameter and
returns the new line. Only that parameter's tokens change in the rendered
text.

Example:
    line = CommandLine.parse("greet --times 3 Ada", registry)
    line.args                       → {"times": "3", "who": "Ada"}
    line.replace("times", "10").text → "greet --times 10 Ada"
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from argline.argument import (
    AT_CURSOR,
    Argument,
    ArgumentLike,
    ArrayArgument,
    BooleanNamedArgument,
    MergedArgument,
    NamedArgument,
)
from argline.command import Command
from argline.command_registry import CommandRegistry
from argline.exceptions import ArglineError
from argline.parameter import Parameter
from argline.request import get_request_status
from argline.status import Status
from argline.tokenizer import QUOTES, tokenize
from argline.types.base import Conversion
from argline.types.basic import ArrayType, BooleanType, TextType


@dataclass
class Assignment:
    """A parameter and the argument (if any) bound to it on a command line."""

    param: Parameter
    arg: ArgumentLike | None = None

    @property
    def text(self) -> str | None:
        """The raw text for the parameter, as a Request expects it."""
        match self.arg:
            case None:
                return None
            case BooleanNamedArgument():
                return "true"
            case ArrayArgument(args=args):
                return "".join(str(arg) for arg in args).strip()
            case _:
                return self.arg.text

    def get_conversion(self) -> Conversion | None:
        match self.arg:
            case None:
                return None
            case BooleanNamedArgument():
                return Conversion(True, self.arg)
            case _:
                return self.param.type.parse(self.arg)


def _is_unquoted(token: Argument) -> bool:
    return not any(quote in token.prefix for quote in QUOTES)


def _needs_quote(text: str) -> bool:
    return not text or any(char.isspace() for char in text)


def _requote(old: ArgumentLike, text: str) -> ArgumentLike:
    """
    Beget `old` with new text, adding or dropping quotes only when needed.

    The whitespace around the old token is kept as it was, so nothing outside
    the token changes on the rendered line.
    """
    needs_quote = _needs_quote(text)
    was_quoted = bool(old.suffix[:1]) and old.suffix[:1] in QUOTES
    if needs_quote == was_quoted or isinstance(old, MergedArgument):
        return old.beget(text)
    leading = old.prefix[: len(old.prefix) - len(old.prefix.lstrip())]
    trailing = old.suffix[len(old.suffix.rstrip()) :]
    new = old.beget(text, prefix_space=bool(leading))
    extra = leading[1:]
    if not extra and not trailing:
        return new
    return replace(
        new,
        prefix=extra + new.prefix,
        suffix=new.suffix + trailing,
        start=new.start if new.start == AT_CURSOR else new.start + len(extra),
        end=new.end if new.end == AT_CURSOR else new.end + len(trailing),
    )


class CommandLine:
    """
    A tokenized command line bound to a command.

    Attributes:
        tokens (list[Argument]): Every token of the line, command name first.
        text (str): The line, rebuilt from `tokens`.
        command (Command | None): The command named by the first token.
        assignments (dict[str, Assignment]): One entry per command parameter.
        unassigned (list[Argument]): Tokens no parameter could take.
    """

    def __init__(self, tokens: list[Argument], registry: CommandRegistry) -> None:
        self.registry = registry
        self.tokens: list[Argument] = list(tokens)
        self.text: str = "".join(str(token) for token in self.tokens)
        self.command: Command | None = None
        self.assignments: dict[str, Assignment] = {}
        self.unassigned: list[Argument] = []

        if self.tokens and not self.tokens[0].is_blank():
            self.command = registry.get_command(self.tokens[0].text)
        if self.command is not None:
            self.assignments = {
                param.name: Assignment(param) for param in self.command.params
            }
            self._bind()

    @classmethod
    def parse(cls, text: str, registry: CommandRegistry) -> CommandLine:
        return cls(tokenize(text), registry)

    def _claim(self, index: int, param: Parameter) -> Argument:
        token = self.tokens[index].assign(param.name)
        self.tokens[index] = token
        return token

    def _bind(self) -> None:
        if self.command is None:
            return
        positional: list[int] = []
        index = 1
        while index < len(self.tokens):
            token = self.tokens[index]
            param = (
                self.command.find_named_parameter(token.text)
                if _is_unquoted(token)
                else None
            )
            if param is None or self.assignments[param.name].arg is not None:
                if not token.is_blank():
                    positional.append(index)
                index += 1
                continue

            flag = self._claim(index, param)
            index += 1
            match param.type:
                case BooleanType():
                    arg: ArgumentLike = BooleanNamedArgument(flag, param.name)
                case ArrayType():
                    values = []
                    while index < len(self.tokens) and not (
                        self.tokens[index].text.startswith("-")
                        and _is_unquoted(self.tokens[index])
                    ):
                        values.append(self._claim(index, param))
                        index += 1
                    arg = ArrayArgument(tuple(values), param.name)
                case _:
                    if index < len(self.tokens):
                        value = self._claim(index, param)
                        index += 1
                    else:
                        gap = "" if flag.suffix[-1:].isspace() else " "
                        value = Argument("", gap, "", flag.end, flag.end, param.name)
                    arg = NamedArgument(flag, value, param.name)
            self.assignments[param.name].arg = arg

        self._bind_positional(positional)

    def _bind_positional(self, positional: list[int]) -> None:
        unfilled = [
            assignment
            for assignment in self.assignments.values()
            if assignment.arg is None and not isinstance(assignment.param.type, BooleanType)
        ]
        for number, assignment in enumerate(unfilled):
            if not positional:
                break
            param = assignment.param
            is_last = number == len(unfilled) - 1
            match param.type:
                case ArrayType() if is_last:
                    claimed = [self._claim(index, param) for index in positional]
                    assignment.arg = ArrayArgument(tuple(claimed), param.name)
                    positional = []
                case TextType() if is_last and len(positional) > 1:
                    # Only an unbroken run of tokens merges; a flag in between ends it.
                    run = 1
                    while run < len(positional) and positional[run] == positional[run - 1] + 1:
                        run += 1
                    claimed = [self._claim(index, param) for index in positional[:run]]
                    positional = positional[run:]
                    assignment.arg = (
                        MergedArgument(tuple(claimed), param.name) if run > 1 else claimed[0]
                    )
                case ArrayType():
                    claimed = [self._claim(positional.pop(0), param)]
                    assignment.arg = ArrayArgument(tuple(claimed), param.name)
                case _:
                    assignment.arg = self._claim(positional.pop(0), param)
        self.unassigned = [self.tokens[index] for index in positional]

    @property
    def args(self) -> dict[str, Any]:
        """Raw text for every parameter bound on this line."""
        return {
            name: assignment.text
            for name, assignment in self.assignments.items()
            if assignment.arg is not None
        }

    @property
    def status(self) -> Status:
        if self.command is None:
            if all(token.is_blank() for token in self.tokens):
                return Status.INCOMPLETE
            return Status.ERROR
        surplus = Status.ERROR if self.unassigned else Status.VALID
        return Status.combine([get_request_status(self.command, self.args), surplus])

    def get_message(self) -> str:
        """Return the first problem worth showing the user, or ''."""
        if self.command is None:
            if self.tokens and not self.tokens[0].is_blank():
                return f"Unknown command '{self.tokens[0].text}'."
            return ""
        if self.unassigned:
            extra = " ".join(token.text for token in self.unassigned)
            return f"Too many arguments: {extra}"
        for assignment in self.assignments.values():
            conversion = assignment.get_conversion()
            if conversion is not None and conversion.status is Status.ERROR:
                return conversion.message
        return ""

    def assignment_for(self, token: ArgumentLike) -> Assignment | None:
        """Return the assignment `token` was bound to, if any."""
        if token.assignment is None:
            return None
        return self.assignments.get(token.assignment)

    def replace(self, name: str, text: str) -> CommandLine:
        """
        Return a new CommandLine with the value of parameter `name` set to `text`.

        Raises:
            ArglineError: If the line has no command or no such parameter.
        """
        if self.command is None or name not in self.assignments:
            raise ArglineError(f"No parameter '{name}' on this command line")

        assignment = self.assignments[name]
        param = assignment.param
        tokens: list[ArgumentLike] = list(self.tokens)

        match assignment.arg:
            case None:
                if isinstance(param.type, BooleanType):
                    if param.type.parse_string(text).value:
                        tokens.extend(tokenize(f" --{name}"))
                else:
                    quoted = f"'{text}'" if _needs_quote(text) else text
                    tokens.extend(tokenize(f" --{name} {quoted}"))
            case BooleanNamedArgument(arg=flag):
                if not param.type.parse_string(text).value:
                    ArrayArgument(()).update_cli_args(tokens, flag)
            case NamedArgument(value_arg=value):
                _requote(value, text).update_cli_args(tokens, value)
            case MergedArgument(args=old_args):
                merged = assignment.arg.beget(text)
                ArrayArgument(merged.args).update_cli_args(tokens, ArrayArgument(old_args))
            case ArrayArgument(args=old_args) if not old_args:
                flag_index = next(
                    index for index, token in enumerate(tokens) if token.assignment == name
                )
                flag = tokens[flag_index]
                leading = "" if flag.suffix[-1:].isspace() else " "
                if text.strip():
                    tokens[flag_index + 1 : flag_index + 1] = tokenize(leading + text.strip())
            case ArrayArgument(args=old_args):
                leading = old_args[0].prefix if old_args[0].prefix.isspace() else " "
                ArrayArgument(tuple(tokenize(leading + text.strip()))).update_cli_args(
                    tokens, assignment.arg
                )
            case _:
                _requote(assignment.arg, text).update_cli_args(tokens, assignment.arg)

        return CommandLine.parse("".join(str(token) for token in tokens), self.registry)
