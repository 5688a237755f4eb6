# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Request`, one invocation of a command, and the status rules that decide
whether it can run.

A request holds the raw text supplied for each parameter. Its status is the
combination of every parameter's status:

- not supplied: INCOMPLETE if the parameter is required, otherwise VALID
- supplied but empty: VALID if the parameter is optional (default None),
  otherwise INCOMPLETE
- supplied: the status of parsing the text with the parameter's type

Lifecycle:

    COLLECTING ──► EXECUTING ──► DONE
        │
        ├──► REJECTED   (ERROR status, or still not VALID after collection)
        └──► CANCELLED  (collection abandoned)
"""
from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from typing import Any, Iterator, Mapping

from argline.argument import Argument
from argline.command import Command
from argline.parameter import Parameter
from argline.status import Status


class RequestState(Enum):
    """Where a request is in its lifecycle."""

    COLLECTING = "collecting"
    EXECUTING = "executing"
    DONE = "done"
    REJECTED = "rejected"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


def get_param_status(args: Mapping[str, Any], param: Parameter) -> Status:
    """Return the status of `param` given the raw argument text in `args`."""
    if param.name not in args:
        if param.is_data_required():
            return Status.INCOMPLETE
        return Status.VALID

    value = args[param.name]
    if value is None or value == "":
        if param.is_optional():
            return Status.VALID
        return Status.INCOMPLETE

    conversion = param.type.parse(Argument(str(value)))
    return conversion.status


def get_request_status(command: Command, args: Mapping[str, Any]) -> Status:
    """Combine the status of every parameter of `command`; no parameters is VALID."""
    return Status.combine(get_param_status(args, param) for param in command.params)


class Request:
    """
    A single invocation of a command.

    Attributes:
        command (Command): The command being invoked.
        args (dict[str, Any]): Raw argument text keyed by parameter name.
            Completion providers add to this mapping.
        typed (str | None): The command line as typed, when there was one.
        state (RequestState): Lifecycle position.
        outputs (list[Any]): Output produced by the command.
        result (Any): The command's return value.
        error (bool): True when the request failed or was rejected.
    """

    def __init__(
        self,
        command: Command,
        args: dict[str, Any] | None = None,
        typed: str | None = None,
    ) -> None:
        self.command: Command = command
        self.args: dict[str, Any] = args if args is not None else {}
        self.typed: str | None = typed
        self.state: RequestState = RequestState.COLLECTING
        self.outputs: list[Any] = []
        self.result: Any = None
        self.exception: BaseException | None = None
        self.start: datetime = datetime.now()
        self.end: datetime | None = None
        self.completed: bool = False
        self.error: bool = False
        self._cancelled: bool = False
        self._collecting: bool = False

    def get_param_status(self, param: Parameter) -> Status:
        return get_param_status(self.args, param)

    def get_status(self) -> Status:
        return get_request_status(self.command, self.args)

    def missing_params(self) -> list[Parameter]:
        """Return the parameters whose status is not VALID."""
        return [
            param
            for param in self.command.params
            if self.get_param_status(param) is not Status.VALID
        ]

    def get_values(self) -> dict[str, Any]:
        """Return the typed value of every parameter, falling back to defaults."""
        values: dict[str, Any] = {}
        for param in self.command.params:
            text = self.args.get(param.name)
            if text is None or text == "":
                values[param.name] = None if param.is_data_required() else param.default_value
            else:
                values[param.name] = param.type.parse(Argument(str(text))).value
        return values

    def cancel(self) -> None:
        """Abandon argument collection; the request will not execute."""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def collecting(self) -> bool:
        """Is a completion provider working on this request right now?"""
        return self._collecting

    @contextmanager
    def collecting_args(self) -> Iterator[Request]:
        """Mark the request as collecting arguments for the duration of the block."""
        self._collecting = True
        try:
            yield self
        finally:
            self._collecting = False

    def output(self, content: Any) -> Request:
        """Record output from the running command."""
        self.outputs.append(content if isinstance(content, str) else str(content))
        return self

    def done(self, content: Any = None) -> None:
        """Mark the request finished, recording `content` as output if given."""
        if content is not None:
            self.output(content)

        # Ensure we only signal completion once
        if not self.completed:
            self.completed = True
            self.end = datetime.now()

    def done_with_error(self, content: Any = None) -> None:
        self.error = True
        self.done(content)

    @property
    def duration(self) -> float | None:
        if self.end is None:
            return None
        return (self.end - self.start).total_seconds()

    def __repr__(self) -> str:
        return (
            f"Request(command={self.command.name!r}, args={self.args!r}, "
            f"state={self.state})"
        )
