# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Type`, the strategy interface used to convert an `Argument` into a typed
value, and `Conversion`, the result of doing so.

A Type offers four capabilities:
- `parse(arg)`: Convert an argument into a `Conversion`. Never raises for
  malformed user input; it returns an ERROR or INCOMPLETE status with a
  human-readable message instead.
- `stringify(value)`: The inverse of parse for well-formed values.
- `increment(value)` / `decrement(value)`: Optional ordinal stepping for
  spinner-style editing. Types without an order return None.

Raising is reserved for programmer mistakes, such as constructing a type with
options it does not understand.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Mapping

from argline.argument import Argument, ArgumentLike
from argline.exceptions import TypeSpecError
from argline.status import Status

if TYPE_CHECKING:
    from argline.types.registry import TypeRegistry


@dataclass
class Conversion:
    """
    The typed result of parsing an Argument.

    Attributes:
        value (Any): The parsed value, or None when nothing usable was found.
        arg (ArgumentLike): The argument that was parsed.
        status (Status): How usable `value` is.
        message (str): Explanation for a non-VALID status, for inline hints.
        predictions (list[Any]): Completion candidates for autocomplete.
    """

    value: Any
    arg: ArgumentLike
    status: Status = Status.VALID
    message: str = ""
    predictions: list[Any] = field(default_factory=list)


@dataclass
class ArrayConversion(Conversion):
    """A Conversion of an ArrayArgument that keeps each element's Conversion."""

    conversions: list[Conversion] = field(default_factory=list)


class Type:
    """
    Base class for all registrable value types.

    Subclasses set `name` (the registry key) and may set `aliases`. The
    constructor receives the inline type spec with the `name` key removed,
    or None when the type was requested by name alone.
    """

    name: ClassVar[str] = ""
    aliases: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        type_spec: Mapping[str, Any] | None = None,
        registry: TypeRegistry | None = None,
    ) -> None:
        self.registry = registry

    def parse(self, arg: ArgumentLike) -> Conversion:
        raise NotImplementedError(f"{type(self).__name__} must implement parse()")

    def parse_string(self, text: str) -> Conversion:
        """Parse `text` as if it had been typed as a lone argument."""
        return self.parse(Argument(text))

    def stringify(self, value: Any) -> str:
        raise NotImplementedError(f"{type(self).__name__} must implement stringify()")

    def increment(self, value: Any) -> Any:
        return None

    def decrement(self, value: Any) -> Any:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class UncustomizableType(Type):
    """A type that accepts no options beyond its name."""

    def __init__(
        self,
        type_spec: Mapping[str, Any] | None = None,
        registry: TypeRegistry | None = None,
    ) -> None:
        if type_spec:
            raise TypeSpecError(
                f"{type(self).__name__} can not be customized: {dict(type_spec)!r}"
            )
        super().__init__(type_spec, registry)
