# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `TypeRegistry`, the lookup table that resolves type names and inline
type specs into `Type` instances.

The registry is an explicit value handed to commands and parameters when they
are built. Type-providing modules populate it at start up (see
`argline.types.basic.startup`) and may remove their types at shut down;
`freeze()` marks the end of start up, after which any change raises
`TypeRegistryError`.

Example:
    registry = default_registry()
    registry.get_type("number")                          → NumberType
    registry.get_type({"name": "number", "max": 10})     → NumberType(max=10)
    registry.get_type("nope")                            → None
"""
from __future__ import annotations

from typing import Any, Mapping

from argline.exceptions import TypeRegistryError, TypeSpecError
from argline.logger import logger
from argline.types.base import Type


class TypeRegistry:
    """Maps type names (and aliases) to registered `Type` subclasses."""

    def __init__(self) -> None:
        self._types: dict[str, type[Type]] = {}
        self._frozen: bool = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Disallow further registration changes."""
        self._frozen = True
        logger.debug("Type registry frozen with: %s", ", ".join(self.get_type_names()))

    def _check_mutable(self) -> None:
        if self._frozen:
            raise TypeRegistryError("Type registry is frozen")

    def register_type(self, type_cls: type[Type]) -> None:
        """Register `type_cls` under its name and aliases."""
        self._check_mutable()
        if not type_cls.name:
            raise TypeSpecError(f"{type_cls.__name__} has no name to register under")
        for key in (type_cls.name, *type_cls.aliases):
            if key in self._types and self._types[key] is not type_cls:
                logger.warning(
                    "Type '%s' replaces %s with %s",
                    key,
                    self._types[key].__name__,
                    type_cls.__name__,
                )
            self._types[key] = type_cls

    def unregister_type(self, type_cls: type[Type]) -> None:
        """Remove `type_cls` and its aliases from the registry."""
        self._check_mutable()
        for key in (type_cls.name, *type_cls.aliases):
            if self._types.get(key) is type_cls:
                del self._types[key]

    def get_type(self, type_spec: str | Mapping[str, Any] | Type) -> Type | None:
        """
        Resolve `type_spec` into a Type instance.

        Args:
            type_spec: A registered name, a mapping with at least a `name` key
                plus type-specific options, or an existing Type instance.

        Returns:
            Type | None: The constructed type, or None if the name is unknown.

        Raises:
            TypeSpecError: If the spec is malformed or its options are rejected.
        """
        if isinstance(type_spec, Type):
            return type_spec

        if isinstance(type_spec, str):
            type_cls = self._types.get(type_spec)
            return type_cls(None, registry=self) if type_cls else None

        if isinstance(type_spec, Mapping):
            name = type_spec.get("name")
            if not isinstance(name, str):
                raise TypeSpecError(f"Type spec is missing a name: {dict(type_spec)!r}")
            type_cls = self._types.get(name)
            if type_cls is None:
                return None
            options = {key: value for key, value in type_spec.items() if key != "name"}
            return type_cls(options or None, registry=self)

        raise TypeSpecError(f"Can't resolve a type from {type_spec!r}")

    def get_type_names(self) -> list[str]:
        """Return the names (not aliases) of all registered types, sorted."""
        return sorted({type_cls.name for type_cls in self._types.values()})

    def __contains__(self, name: object) -> bool:
        return name in self._types


def default_registry() -> TypeRegistry:
    """Return a frozen registry holding the basic types."""
    from argline.types.basic import startup

    registry = TypeRegistry()
    startup(registry)
    registry.freeze()
    return registry
