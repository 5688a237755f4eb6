# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The basic value types understood by Argline.

Types:
- `TextType` ("text"): The raw token text, always VALID.
- `NumberType` ("number"): Base-10 integers with optional `min`, `max` and `step`.
- `SelectionType` ("selection"): One of a static or dynamic list of options.
- `BooleanType` ("boolean", alias "bool"): A selection over "true"/"false".
- `DeferredType` ("deferred"): Delegates to a type resolved on every call.
- `BlankType` ("blank"): Placeholder while a deferred type is unresolved.
- `ArrayType` ("array"): A list of values of one `subtype`.

Use `startup(registry)` to register them all and `shutdown(registry)` to
remove them again.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Callable, Mapping

from argline.argument import ArgumentLike, ArrayArgument
from argline.exceptions import TypeSpecError, UnknownTypeError
from argline.logger import logger
from argline.status import Status
from argline.tokenizer import tokenize
from argline.types.base import ArrayConversion, Conversion, Type, UncustomizableType

if TYPE_CHECKING:
    from argline.types.registry import TypeRegistry

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


class TextType(UncustomizableType):
    """The most basic string type that doesn't need to convert."""

    name = "text"

    def stringify(self, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    def parse(self, arg: ArgumentLike) -> Conversion:
        return Conversion(arg.text, arg)


class NumberType(Type):
    """
    Integers parsed in base 10 from the leading digits of the text.

    Options:
        min (int | None): Smallest allowed value.
        max (int | None): Largest allowed value.
        step (int): Amount added by increment and removed by decrement.
    """

    name = "number"

    def __init__(
        self,
        type_spec: Mapping[str, Any] | None = None,
        registry: TypeRegistry | None = None,
    ) -> None:
        super().__init__(type_spec, registry)
        type_spec = type_spec or {}
        unknown = set(type_spec) - {"min", "max", "step"}
        if unknown:
            raise TypeSpecError(f"Unknown number options: {', '.join(sorted(unknown))}")
        self.min: int | None = type_spec.get("min")
        self.max: int | None = type_spec.get("max")
        self.step: int = type_spec.get("step") or 1
        if self.min is not None and self.max is not None and self.min > self.max:
            raise TypeSpecError(f"Number min {self.min} is greater than max {self.max}")

    def stringify(self, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    def parse(self, arg: ArgumentLike) -> Conversion:
        if not arg.text.strip():
            return Conversion(None, arg, Status.INCOMPLETE, "")

        match = _LEADING_INTEGER.match(arg.text)
        if match is None:
            return Conversion(
                None, arg, Status.ERROR, f"Can't convert \"{arg.text}\" to a number."
            )

        value = int(match.group(1))
        if self.max is not None and value > self.max:
            return Conversion(
                value,
                arg,
                Status.ERROR,
                f"{value} is greater than maximum allowed: {self.max}.",
            )
        if self.min is not None and value < self.min:
            return Conversion(
                value,
                arg,
                Status.ERROR,
                f"{value} is smaller than minimum allowed: {self.min}.",
            )
        return Conversion(value, arg)

    def increment(self, value: int | None) -> int:
        if value is None:
            return self.min if self.min is not None else 0
        stepped = value + self.step
        if self.max is not None and stepped > self.max:
            return value
        return stepped

    def decrement(self, value: int | None) -> int:
        if value is None:
            return self.max if self.max is not None else 0
        stepped = value - self.step
        if self.min is not None and stepped < self.min:
            return value
        return stepped


class SelectionType(Type):
    """
    One of a known set of options.

    Options:
        data (list | Callable[[], list]): The options, each a string or an
            object with a `.name`. A callable is called on every lookup.
    """

    name = "selection"

    def __init__(
        self,
        type_spec: Mapping[str, Any] | None = None,
        registry: TypeRegistry | None = None,
    ) -> None:
        super().__init__(type_spec, registry)
        data = (type_spec or {}).get("data")
        if not isinstance(data, (list, tuple)) and not callable(data):
            raise TypeSpecError(
                "SelectionType needs type_spec['data'] to be a list or a function "
                f"that returns a list: {type_spec!r}"
            )
        self.data: list[Any] | tuple[Any, ...] | Callable[[], list[Any]] = data

    def get_data(self) -> list[Any]:
        data = self.data() if callable(self.data) else self.data
        return list(data)

    @staticmethod
    def option_name(option: Any) -> str:
        return option if isinstance(option, str) else option.name

    def from_option(self, option: Any) -> Any:
        """Convert a matched option into the value handed to commands."""
        return option

    def stringify(self, value: Any) -> str:
        if value is None:
            return ""
        return self.option_name(value)

    def parse(self, arg: ArgumentLike) -> Conversion:
        # The matched option could legitimately be falsy
        has_matched = False
        matched: Any = None
        predictions: list[Any] = []
        for option in self.get_data():
            option_name = self.option_name(option)
            if arg.text == option_name:
                if not has_matched:
                    matched = option
                    has_matched = True
            elif option_name.startswith(arg.text):
                predictions.append(option)

        if has_matched:
            return Conversion(self.from_option(matched), arg)
        if predictions:
            return Conversion(None, arg, Status.INCOMPLETE, "", predictions)
        return Conversion(None, arg, Status.ERROR, f"Can't use '{arg.text}'.")

    def _step(self, value: Any, forward: bool) -> Any:
        data = self.get_data()
        if not data:
            return None
        names = [self.option_name(option) for option in data]
        current = self.stringify(value) if value is not None else None
        if current in names:
            index = names.index(current) + (1 if forward else -1)
        else:
            index = 0 if forward else -1
        return self.from_option(data[index % len(data)])

    def increment(self, value: Any) -> Any:
        return self._step(value, forward=True)

    def decrement(self, value: Any) -> Any:
        return self._step(value, forward=False)


class BooleanType(SelectionType):
    """true/false values."""

    name = "boolean"
    aliases = ("bool",)

    def __init__(
        self,
        type_spec: Mapping[str, Any] | None = None,
        registry: TypeRegistry | None = None,
    ) -> None:
        if type_spec:
            raise TypeSpecError(f"BooleanType can not be customized: {dict(type_spec)!r}")
        super().__init__({"data": ["true", "false"]}, registry)

    def from_option(self, option: Any) -> bool:
        return option == "true"

    def stringify(self, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return "true" if value else "false"

    def parse(self, arg: ArgumentLike) -> Conversion:
        conversion = super().parse(arg)
        if conversion.status is Status.INCOMPLETE:
            return Conversion(None, arg, Status.ERROR, f"Can't use '{arg.text}'.")
        return conversion


class BlankType(UncustomizableType):
    """
    A type for use with DeferredType while the real type is unknown.
    It should not be used anywhere else.
    """

    name = "blank"

    def stringify(self, value: Any) -> str:
        return ""

    def parse(self, arg: ArgumentLike) -> Conversion:
        return Conversion(None, arg)


class DeferredType(Type):
    """
    A type we don't know right now, but hope to soon.

    Options:
        defer (Callable[[], Type | None]): Resolves the real type. It is called
            afresh for every operation; None means "not known yet".
    """

    name = "deferred"

    def __init__(
        self,
        type_spec: Mapping[str, Any] | None = None,
        registry: TypeRegistry | None = None,
    ) -> None:
        super().__init__(type_spec, registry)
        defer = (type_spec or {}).get("defer")
        if not callable(defer):
            raise TypeSpecError(
                "DeferredType needs type_spec['defer'] to be a function that returns "
                "a type"
            )
        self.defer: Callable[[], Type | None] = defer

    def resolve(self) -> Type:
        resolved = self.defer()
        if resolved is None:
            return BlankType()
        return resolved

    def stringify(self, value: Any) -> str:
        return self.resolve().stringify(value)

    def parse(self, arg: ArgumentLike) -> Conversion:
        return self.resolve().parse(arg)

    def increment(self, value: Any) -> Any:
        return self.resolve().increment(value)

    def decrement(self, value: Any) -> Any:
        return self.resolve().decrement(value)


class ArrayType(Type):
    """
    A set of values of the same type.

    Options:
        subtype (str | Mapping): The element type, resolved through the registry.
            Defaults to "text".
    """

    name = "array"

    def __init__(
        self,
        type_spec: Mapping[str, Any] | None = None,
        registry: TypeRegistry | None = None,
    ) -> None:
        super().__init__(type_spec, registry)
        if registry is None:
            raise TypeSpecError("ArrayType needs a registry to resolve its subtype")
        subtype_spec = (type_spec or {}).get("subtype")
        if not subtype_spec:
            logger.warning("Array type spec is missing subtype. Assuming text.")
            subtype_spec = "text"
        subtype = registry.get_type(subtype_spec)
        if subtype is None:
            raise UnknownTypeError(f"Can't find array subtype: {subtype_spec!r}")
        self.subtype: Type = subtype

    def stringify(self, values: Any) -> str:
        if not values:
            return ""
        texts = []
        for value in values:
            text = self.subtype.stringify(value)
            if not text or any(char.isspace() for char in text):
                text = f"'{text}'"
            texts.append(text)
        return " ".join(texts)

    def parse(self, arg: ArgumentLike) -> ArrayConversion:
        match arg:
            case ArrayArgument(args=elements):
                pass
            case _:
                elements = tuple(tokenize(arg.text))
                if len(elements) == 1 and elements[0].is_blank():
                    elements = ()

        conversions = [self.subtype.parse(element) for element in elements]
        status = Status.combine(conversion.status for conversion in conversions)
        message = "; ".join(
            conversion.message for conversion in conversions if conversion.message
        )
        return ArrayConversion(
            [conversion.value for conversion in conversions],
            arg,
            status,
            message,
            conversions=conversions,
        )


BASIC_TYPES: tuple[type[Type], ...] = (
    TextType,
    NumberType,
    BooleanType,
    BlankType,
    SelectionType,
    DeferredType,
    ArrayType,
)


def startup(registry: TypeRegistry) -> None:
    """Register the basic types."""
    for type_cls in BASIC_TYPES:
        registry.register_type(type_cls)


def shutdown(registry: TypeRegistry) -> None:
    """Unregister the basic types."""
    for type_cls in BASIC_TYPES:
        registry.unregister_type(type_cls)
