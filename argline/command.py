# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command class for Argline.

A Command is a named bit of functionality with typed parameters. It is built
from a declaration of the shape

    {
        "name": "greet",
        "description": "Say hello",
        "params": [
            {"name": "who", "type": "text"},
            {"name": "times", "type": {"name": "number", "min": 1}, "default_value": 1},
            {"name": "loud", "type": "boolean"},
        ],
        "exec": greet,
    }

through `Command.model_validate(spec, context={"registry": registry})`. The
registry in the validation context resolves every parameter type; a missing
registry falls back to `default_registry()`. Declaration mistakes raise
`ConfigurationError` subclasses and are not recoverable.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from argline.exceptions import CommandError, ParameterError
from argline.parameter import Parameter
from argline.types.registry import TypeRegistry, default_registry


def _get_registry(info: ValidationInfo) -> TypeRegistry:
    context = info.context or {}
    registry = context.get("registry")
    if registry is None:
        registry = default_registry()
    return registry


class Command(BaseModel):
    """
    Represents a registered command and its parameters.

    Attributes:
        name (str): The name typed to invoke the command.
        description (str): Short description for help output.
        params (list[Parameter]): The command's parameters, in declaration order.
        exec (Callable | None): Function or coroutine run with the typed values of
            the parameters as keyword arguments. It also receives the active
            `request` when its signature has a parameter of that name.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: str = ""
    params: list[Parameter] = Field(default_factory=list)
    exec: Callable[..., Any] | Callable[..., Awaitable[Any]] | None = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, name: Any) -> str:
        if not isinstance(name, str) or not name.strip():
            raise CommandError("All registered commands must have a name")
        return name

    @field_validator("params", mode="before")
    @classmethod
    def build_params(cls, params: Any, info: ValidationInfo) -> list[Parameter]:
        command_name = info.data.get("name", "unnamed")
        if params is None:
            return []
        if not isinstance(params, (list, tuple)):
            raise CommandError(f"command.params must be a list in {command_name}")

        names: list[str] = []
        for param in params:
            name = param.name if isinstance(param, Parameter) else param.get("name")
            if name in names:
                raise ParameterError(
                    f"In {command_name}: duplicate parameter name '{name}'"
                )
            names.append(name)

        registry = _get_registry(info)
        built: list[Parameter] = []
        for param in params:
            if isinstance(param, Parameter):
                built.append(param)
            else:
                built.append(
                    Parameter.from_spec(
                        param,
                        registry=registry,
                        command_name=command_name,
                        sibling_names=names,
                    )
                )
        return built

    @field_validator("exec", mode="before")
    @classmethod
    def validate_exec(cls, exec_: Any) -> Any:
        if exec_ is not None and not callable(exec_):
            raise CommandError(f"Command exec must be callable, got {type(exec_).__name__}")
        return exec_

    def get_description(self) -> str:
        return self.description or "(No description)"

    def get_parameter(self, name: str) -> Parameter | None:
        return next((param for param in self.params if param.name == name), None)

    def find_named_parameter(self, text: str) -> Parameter | None:
        """Return the parameter that `text` (e.g. `--verb`) names, if any."""
        return next((param for param in self.params if param.is_named_param(text)), None)

    def __str__(self) -> str:
        return f"Command(name='{self.name}', params={[p.name for p in self.params]})"
