# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `CommandRegistry`, the name → Command lookup used by the dispatcher,
the shell and the completer.

Commands can be registered from a declaration mapping, an existing `Command`,
or by decorating a function:

    registry = CommandRegistry()

    @registry.command(params=[{"name": "who"}])
    def greet(who: str) -> str:
        return f"Hello {who}"

Each registry owns the `TypeRegistry` used to build its commands' parameters.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping

from argline.command import Command
from argline.exceptions import CommandAlreadyExistsError, CommandError
from argline.logger import logger
from argline.types.registry import TypeRegistry, default_registry


class CommandRegistry:
    """A lookup of registered commands, keyed by name."""

    def __init__(self, types: TypeRegistry | None = None) -> None:
        self.types: TypeRegistry = types or default_registry()
        self._commands: dict[str, Command] = {}

    def add_command(self, command: Command | Mapping[str, Any], name: str | None = None) -> Command:
        """
        Register a command.

        Args:
            command: A Command, or a declaration mapping with `name`,
                `description`, `params` and `exec`.
            name: Overrides the declared name.

        Raises:
            CommandAlreadyExistsError: If a command of the same name exists.
        """
        if isinstance(command, Command):
            if name:
                command = command.model_copy(update={"name": name})
        elif isinstance(command, Mapping):
            spec = dict(command)
            if name:
                spec["name"] = name
            command = Command.model_validate(spec, context={"registry": self.types})
        else:
            raise CommandError(
                f"Can't register {type(command).__name__} as a command; "
                "expected a Command or a mapping"
            )

        if command.name in self._commands:
            raise CommandAlreadyExistsError(
                f"Command '{command.name}' is already registered"
            )
        self._commands[command.name] = command
        logger.debug("Registered command '%s'", command.name)
        return command

    def command(
        self,
        name: str | None = None,
        description: str | None = None,
        params: list[Mapping[str, Any]] | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator registering a function as the `exec` of a new command."""

        def decorator(function: Callable[..., Any]) -> Callable[..., Any]:
            self.add_command(
                {
                    "name": name or function.__name__,
                    "description": description
                    if description is not None
                    else (function.__doc__ or "").strip(),
                    "params": params or [],
                    "exec": function,
                }
            )
            return function

        return decorator

    def remove_command(self, command: Command | str) -> None:
        name = command if isinstance(command, str) else command.name
        if self._commands.pop(name, None) is not None:
            logger.debug("Removed command '%s'", name)

    def get_command(self, name: str) -> Command | None:
        return self._commands.get(name)

    def get_commands(self) -> list[Command]:
        return [self._commands[name] for name in self.get_command_names()]

    def get_command_names(self) -> list[str]:
        """Return the registered command names, sorted."""
        return sorted(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
