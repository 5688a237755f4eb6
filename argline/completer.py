# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `ArglineCompleter`, the Prompt Toolkit completer for the Argline
shell, and `ParameterCompleter` for prompts that ask for a single parameter.

This completer supports:
- Command name completion (plus the shell's built-in words)
- `--flag` completion for parameters not yet given on the line
- Value completion from selection and boolean options, including array
  elements and deferred types once they resolve

The line is tokenized with Argline's own tokenizer and bound with
`CommandLine`, so the parameter under the cursor is the one the dispatcher
would give the value to.
"""
from __future__ import annotations

import os
from typing import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from argline.command_line import CommandLine
from argline.command_registry import CommandRegistry
from argline.parameter import Parameter
from argline.tokenizer import tokenize
from argline.types.base import Type
from argline.types.basic import ArrayType, BooleanType, DeferredType, SelectionType


def suggest_values(type_: Type, stub: str) -> list[str]:
    """Return the known values of `type_` that start with `stub`."""
    match type_:
        case DeferredType():
            return suggest_values(type_.resolve(), stub)
        case ArrayType():
            return suggest_values(type_.subtype, stub)
        case SelectionType():
            names = [type_.option_name(option) for option in type_.get_data()]
            return [name for name in names if name.startswith(stub)]
        case _:
            return []


def _ensure_quote(text: str) -> str:
    if " " in text or "\t" in text:
        return f"'{text}'"
    return text


def yield_lcp_completions(suggestions: Iterable[str], stub: str) -> Iterable[Completion]:
    """
    Yield completions for `stub` using longest-common-prefix logic.

    - One match: yield it fully.
    - Several matches sharing a prefix longer than the stub: insert the prefix,
      and also list every match.
    - Otherwise: list every match.
    """
    matches = [suggestion for suggestion in suggestions if suggestion.startswith(stub)]
    if not matches:
        return

    lcp = os.path.commonprefix(matches)

    if len(matches) == 1:
        yield Completion(
            _ensure_quote(matches[0]), start_position=-len(stub), display=matches[0]
        )
        return
    if len(lcp) > len(stub) and not lcp.startswith("-"):
        yield Completion(lcp, start_position=-len(stub), display=lcp)
    for match in matches:
        yield Completion(_ensure_quote(match), start_position=-len(stub), display=match)


class ArglineCompleter(Completer):
    """
    Prompt Toolkit completer for Argline command lines.

    Args:
        registry (CommandRegistry): Supplies command names and parameters.
        builtins (Iterable[str]): Extra words accepted as commands, such as
            `help` and `exit`.
    """

    def __init__(self, registry: CommandRegistry, builtins: Iterable[str] = ()) -> None:
        self.registry = registry
        self.builtins = list(builtins)

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        tokens = tokenize(document.text_before_cursor)
        last = tokens[-1] if tokens else None
        at_token_end = last is None or last.suffix[-1:].isspace() or last.is_blank()

        if last is None or tokens[0].is_blank() or (len(tokens) == 1 and not at_token_end):
            stub = "" if at_token_end else last.text
            names = self.builtins + self.registry.get_command_names()
            yield from yield_lcp_completions(names, stub)
            return

        line = CommandLine(tokens, self.registry)
        if line.command is None:
            return

        stub = "" if at_token_end else line.tokens[-1].text
        if stub.startswith("-"):
            yield from yield_lcp_completions(self._suggest_flags(line), stub)
            return

        param = self._target_parameter(line, at_token_end)
        if param is None:
            if at_token_end:
                yield from yield_lcp_completions(self._suggest_flags(line), stub)
            return
        yield from yield_lcp_completions(suggest_values(param.type, stub), stub)

    def _suggest_flags(self, line: CommandLine) -> list[str]:
        """Flags for every parameter the line has not bound yet."""
        current = line.tokens[-1].assignment if line.tokens else None
        return [
            f"--{name}"
            for name, assignment in line.assignments.items()
            if assignment.arg is None or name == current
        ]

    def _target_parameter(self, line: CommandLine, at_token_end: bool) -> Parameter | None:
        """Find the parameter the next (or current) value belongs to."""
        last = line.tokens[-1]
        if not at_token_end:
            assignment = line.assignment_for(last)
            return assignment.param if assignment is not None else None

        if last.assignment is not None:
            assignment = line.assignments[last.assignment]
            param = assignment.param
            # A flag that is still waiting for its value
            if assignment.text == "" and not isinstance(param.type, BooleanType):
                return param
            if isinstance(param.type, ArrayType):
                return param

        for assignment in line.assignments.values():
            if assignment.arg is None and not isinstance(assignment.param.type, BooleanType):
                return assignment.param
        return None


class ParameterCompleter(Completer):
    """Completes the value of a single parameter, for argument prompts."""

    def __init__(self, param: Parameter) -> None:
        self.param = param

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        stub = document.text_before_cursor
        yield from yield_lcp_completions(suggest_values(self.param.type, stub), stub)
