# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Parameter`, a named and typed input slot declared by a command.

Parameters are built once, when their command is registered, and are never
changed afterwards. Building one:

- resolves its `type` through the supplied `TypeRegistry`,
- computes its `unique_prefix`, the shortest abbreviation of its name that is
  not also the start of a sibling parameter's name (`--verb` for `verbose`
  next to `version`),
- checks its default value survives a stringify/parse round trip.

A parameter with no default is required. A default of None makes it
explicitly optional. Boolean parameters always default to False and may not
declare a default of their own.
"""
from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from argline.exceptions import ParameterError, UnknownTypeError
from argline.logger import logger
from argline.status import Status
from argline.types.basic import BooleanType
from argline.types.base import Type
from argline.types.registry import TypeRegistry

_FLAG = re.compile(r"^--?(?P<flag>[^-].*)$")


class _Missing:
    """Marks a parameter that declared no default value."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def unique_prefix(name: str, sibling_names: Iterable[str]) -> str:
    """
    Return the shortest prefix of `name` that no other sibling name starts with.

    All siblings are considered, so declaration order never changes the result.
    When another name starts with the whole of `name` the full name is returned.
    """
    others = [other for other in sibling_names if other != name]
    for length in range(1, len(name) + 1):
        candidate = name[:length]
        if not any(other.startswith(candidate) for other in others):
            return candidate
    return name


class Parameter:
    """
    A wrapper for a parameter spec that sorts out shortened names for option switches.

    Attributes:
        name (str): The parameter name, used as `--name` on the command line.
        type (Type): The resolved value type.
        description (str): Help text.
        default_value (Any): The default, MISSING when the parameter is required.
        unique_prefix (str): Shortest unambiguous abbreviation of `name`.
        command_name (str): Name of the owning command, for error messages.
    """

    def __init__(
        self,
        name: str,
        type: str | Mapping[str, Any] | Type = "text",
        description: str = "",
        default_value: Any = MISSING,
        *,
        registry: TypeRegistry,
        command_name: str = "unnamed",
        sibling_names: Iterable[str] | None = None,
    ) -> None:
        self.command_name = command_name
        if not name:
            raise ParameterError(f"In {command_name}: all params must have a name")
        self.name: str = name
        self.description: str = description or ""

        resolved = registry.get_type(type)
        if resolved is None:
            raise UnknownTypeError(
                f"In {command_name}/{name}: can't find type for: {type!r}. "
                f"Known types: {', '.join(registry.get_type_names())}"
            )
        self.type: Type = resolved

        names = list(sibling_names) if sibling_names is not None else [name]
        self.unique_prefix: str = unique_prefix(name, names)

        # boolean parameters have an implicit default of False which can not be changed
        if isinstance(self.type, BooleanType):
            if default_value is not MISSING:
                raise ParameterError(
                    f"In {command_name}/{name}: boolean parameters can not have a "
                    "default_value"
                )
            default_value = False
        self.default_value: Any = default_value

        if default_value is not MISSING and default_value is not None:
            self._check_default()

    @classmethod
    def from_spec(
        cls,
        param_spec: Mapping[str, Any],
        *,
        registry: TypeRegistry,
        command_name: str = "unnamed",
        sibling_names: Iterable[str] | None = None,
    ) -> Parameter:
        """
        Build a Parameter from a `{name, type, description?, default_value?}` mapping.

        `defaultValue` and `default` are accepted as spellings of `default_value`.
        """
        known = {"name", "type", "description", "default_value", "defaultValue", "default"}
        unknown = set(param_spec) - known
        if unknown:
            raise ParameterError(
                f"In {command_name}: unknown parameter keys {', '.join(sorted(unknown))}"
            )
        default_value = MISSING
        for key in ("default_value", "defaultValue", "default"):
            if key in param_spec:
                default_value = param_spec[key]
                break
        return cls(
            param_spec.get("name", ""),
            param_spec.get("type", "text"),
            param_spec.get("description", ""),
            default_value,
            registry=registry,
            command_name=command_name,
            sibling_names=sibling_names,
        )

    def _check_default(self) -> None:
        """Check the default value survives a stringify/parse round trip."""
        try:
            default_text = self.type.stringify(self.default_value)
        except (AttributeError, TypeError, ValueError) as error:
            raise ParameterError(
                f"In {self.command_name}/{self.name}: can't stringify default_value "
                f"{self.default_value!r}: {error}"
            ) from error
        conversion = self.type.parse_string(default_text)
        if conversion.status is not Status.VALID or conversion.value != self.default_value:
            logger.warning(
                "In %s/%s: error round tripping default_value %r. status = %s",
                self.command_name,
                self.name,
                self.default_value,
                conversion.status,
            )

    def is_named_param(self, text: str) -> bool:
        """Does `text` name this parameter, as `--name` or an abbreviation of it?"""
        match = _FLAG.match(text)
        if match is None:
            return False
        flag = match.group("flag")
        return flag.startswith(self.unique_prefix) and self.name.startswith(flag)

    def is_data_required(self) -> bool:
        return self.default_value is MISSING

    def is_optional(self) -> bool:
        return self.default_value is None

    def __repr__(self) -> str:
        return (
            f"Parameter(name={self.name!r}, type={self.type.name!r}, "
            f"default_value={self.default_value!r})"
        )
